"""Temporal lifecycle & risk engine for farm records."""
