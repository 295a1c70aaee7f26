"""Shared constants for Regimen."""
