"""Utility helpers: constants and configuration loading."""
