"""Utility helpers for jaro_winkler: logging and settings."""
