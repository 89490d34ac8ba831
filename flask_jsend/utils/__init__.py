"""Shared helpers for configuration and response types."""
