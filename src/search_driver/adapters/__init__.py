"""Adapters – reference implementations of the driver's ports."""
