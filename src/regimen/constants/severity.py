"""Severity vocabularies used by the analysis pipeline and the product catalog."""

from __future__ import annotations

SEVERITY_LOW: str = "Low"
SEVERITY_MEDIUM: str = "Medium"
SEVERITY_HIGH: str = "High"
NOT_APPLICABLE: str = "N/A"

LEGACY_MILD: str = "Mild"
LEGACY_MODERATE: str = "Moderate"
LEGACY_SEVERE: str = "Severe"

# Catalog parameters list their levels most-severe first.
CATALOG_SEVERITIES: tuple[str, ...] = (SEVERITY_HIGH, SEVERITY_MEDIUM, SEVERITY_LOW)
LEGACY_SEVERITIES: tuple[str, ...] = (LEGACY_SEVERE, LEGACY_MODERATE, LEGACY_MILD)
DEFAULT_SEVERITY_LEVELS: tuple[str, ...] = CATALOG_SEVERITIES

LEGACY_TO_CATALOG: dict[str, str] = {
    LEGACY_MILD: SEVERITY_LOW,
    LEGACY_MODERATE: SEVERITY_MEDIUM,
    LEGACY_SEVERE: SEVERITY_HIGH,
}
CATALOG_TO_LEGACY: dict[str, str] = {catalog: legacy for legacy, catalog in LEGACY_TO_CATALOG.items()}
