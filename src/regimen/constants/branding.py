"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "REGIMEN"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ REGIMEN",
    "     // products matched to your analysis",
)
RECOMMENDATION_SUMMARY_TITLE: str = "Recommended products"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} recommendation engine"))
