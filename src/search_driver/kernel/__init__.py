"""Kernel – primitives shared by every layer of the driver."""
