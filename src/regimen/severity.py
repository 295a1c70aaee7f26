"""Translation between the analysis (legacy) and catalog severity vocabularies.

The analysis step reports ``Mild``/``Moderate``/``Severe`` while catalog
products are keyed by ``Low``/``Medium``/``High``. Lookups are
case-insensitive; anything unrecognised passes through unchanged.
"""

from __future__ import annotations

from regimen.constants.severity import (
    CATALOG_SEVERITIES,
    CATALOG_TO_LEGACY,
    LEGACY_SEVERITIES,
    LEGACY_TO_CATALOG,
    NOT_APPLICABLE,
)

_CANONICAL: dict[str, str] = {token.lower(): token for token in (*CATALOG_SEVERITIES, *LEGACY_SEVERITIES)}


def _canonical(value: str) -> str:
    return _CANONICAL.get(value.strip().lower(), value)


def to_catalog_severity(value: str) -> str:
    """Translate ``Mild``/``Moderate``/``Severe`` into ``Low``/``Medium``/``High``."""
    token = _canonical(value)
    return LEGACY_TO_CATALOG.get(token, token)


def to_legacy_severity(value: str) -> str:
    """Translate ``Low``/``Medium``/``High`` into ``Mild``/``Moderate``/``Severe``."""
    token = _canonical(value)
    return CATALOG_TO_LEGACY.get(token, token)


def display_severity(value: str) -> str:
    """Label shown next to a recommended product; always the catalog vocabulary."""
    return to_catalog_severity(value)


def is_not_applicable(value: str | None) -> bool:
    """Whether *value* marks a finding that must not drive recommendations."""
    if value is None:
        return True
    stripped = value.strip()
    return not stripped or stripped.upper() == NOT_APPLICABLE
