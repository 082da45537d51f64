"""Logging setup and the JSON Lines diagnostic sink."""
