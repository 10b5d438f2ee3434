"""Observability – structured logging for the driver."""
