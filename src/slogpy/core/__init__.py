"""Attribute model, configuration and formatting core."""
