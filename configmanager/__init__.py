"""Externalized configuration binding service."""
