"""Shared exceptions and logging for the translator."""
