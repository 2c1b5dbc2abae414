"""Adapters connecting slogpy to the outside world."""
