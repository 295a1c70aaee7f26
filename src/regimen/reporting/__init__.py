"""Recommendation report rendering."""

from .stdout import StdoutReporter
from .writer import build_payload, write_recommendations

__all__ = ["StdoutReporter", "build_payload", "write_recommendations"]
