"""Regimen: match analysis findings to catalog products."""

__version__ = "0.1.0"
