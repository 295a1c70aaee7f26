"""Constants for recommendation output and stdout formatting."""

from __future__ import annotations

NO_PRODUCTS_MESSAGE: str = "No products found for your analysis parameters"
CATALOG_UNAVAILABLE_MESSAGE: str = "Product catalog is unavailable right now. Please try again."

RECOMMENDATIONS_TEMP_PREFIX: str = ".tmp-"
RECOMMENDATIONS_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

PRIMARY_BADGE: str = "Perfect Match"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "High": ANSI_RED,
    "Medium": ANSI_YELLOW,
    "Low": ANSI_GREEN,
}
