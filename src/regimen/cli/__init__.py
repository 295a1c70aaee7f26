"""Command-line interface for Regimen."""
