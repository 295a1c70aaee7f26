"""Human-readable stdout reporter for recommendation results."""

from __future__ import annotations

from collections import Counter

from regimen.constants.branding import ASCII_LOGO_LINES, RECOMMENDATION_SUMMARY_TITLE
from regimen.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_RESET, PRIMARY_BADGE, SEVERITY_COLORS
from regimen.constants.severity import CATALOG_SEVERITIES
from regimen.model import Attribution, RecommendationResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: str) -> str:
    color = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, color) if color else severity


class StdoutReporter:
    """Formats recommendation results as human-readable stdout output."""

    def __init__(
        self,
        result: RecommendationResult,
        *,
        color: bool = True,
        verbose: bool = False,
    ) -> None:
        """Initialise the reporter."""
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_products()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {RECOMMENDATION_SUMMARY_TITLE}",
            sep,
            "",
            f"  Products    {len(r.products)}",
            f"  Severities  {self._format_severity_breakdown()}",
        ]
        if r.fallback_used:
            lines.append("  Matching    broadened to all severity levels")
        if self._verbose:
            unmatched = ", ".join(r.unmatched_categories) if r.unmatched_categories else "none"
            lines.append(f"  Unmatched   {unmatched}")
            for warning in r.warnings:
                lines.append(f"  Warning     {warning}")
        if r.message is not None:
            lines.append("")
            lines.append(f"  {r.message}")
        lines.append("")
        return "\n".join(lines)

    def _render_products(self) -> str:
        products = self._result.products
        if not products:
            return ""

        lines: list[str] = []
        for position, item in enumerate(products, start=1):
            product = item.product
            badge = f"  [{PRIMARY_BADGE}]" if product.is_primary else ""
            name = _colorize(product.name, ANSI_BOLD) if self._color else product.name
            lines.append(f"  {position:>2}. {name}{badge}")
            lines.append(f"      For: {self._format_attributions(item.attributions)}")
            if product.description:
                lines.append(f"      {self._dim(product.description)}")
            if product.link:
                lines.append(f"      {product.link}")
            lines.append("")
        return "\n".join(lines)

    def _format_attributions(self, attributions: tuple[Attribution, ...]) -> str:
        parts: list[str] = []
        for attribution in attributions:
            severity = _color_severity(attribution.severity) if self._color else attribution.severity
            parts.append(f"{attribution.category} ({severity})")
        return ", ".join(parts)

    def _format_severity_breakdown(self) -> str:
        """Render attribution counts per severity in fixed High/Medium/Low order."""
        counts = Counter(
            attribution.severity for item in self._result.products for attribution in item.attributions
        )
        parts: list[str] = []
        for severity in CATALOG_SEVERITIES:
            label = _color_severity(severity) if self._color else severity
            parts.append(f"{counts.get(severity, 0)} {label}")
        return " · ".join(parts)

    def _dim(self, text: str) -> str:
        return _colorize(text, ANSI_DIM) if self._color else text
