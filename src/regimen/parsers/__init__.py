"""Input parsers."""

from .findings import load_findings, parse_findings

__all__ = ["load_findings", "parse_findings"]
