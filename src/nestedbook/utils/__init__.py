"""Shared helpers for nestedbook."""
