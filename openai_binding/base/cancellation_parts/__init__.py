"""Cancellation implementation modules; import from ``base.cancellation``."""
