"""Application – the driver's state machine components."""
