"""Turn analysis findings into a ranked, attributed product list.

``compute_recommendations`` is the primary entry point. It is a pure
function of its inputs: the store is only read, nothing is cached
between calls, and identical inputs produce identical output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from regimen.catalog.lookup import fetch_products, fetch_products_any_severity, product_sort_key
from regimen.catalog.store import CatalogStore
from regimen.config.model import RegimenConfig
from regimen.constants.config import DEFAULT_FALLBACK_ENABLED, DEFAULT_MAX_WORKERS
from regimen.exceptions import CatalogUnavailableError
from regimen.matching import explain_match
from regimen.model import (
    Attribution,
    Finding,
    Parameter,
    Product,
    RatingConfig,
    RecommendationResult,
    RecommendedProduct,
)
from regimen.rating import classify_rating
from regimen.severity import display_severity, is_not_applicable, to_catalog_severity
from regimen.types import MatchTier

logger = logging.getLogger(__name__)

# Failures a catalog store may raise for a single read.
STORE_ERRORS: tuple[type[Exception], ...] = (CatalogUnavailableError, OSError)


@dataclass(frozen=True)
class ResolvedFinding:
    """A finding that matched a catalog parameter at a usable severity."""

    finding: Finding
    parameter: Parameter
    severity: str
    tier: MatchTier

    @property
    def lookup_key(self) -> tuple[str, str]:
        return (self.parameter.id, self.severity)


@dataclass
class _Entry:
    product: Product
    attributions: list[Attribution] = field(default_factory=list)


def resolve_severity(finding: Finding, rating_config: RatingConfig | None = None) -> str | None:
    """Return the finding's severity in catalog vocabulary, ``"N/A"``, or ``None`` if it has neither.

    An explicit severity wins; the rating is only classified when no
    severity was reported.
    """
    if finding.severity is not None and finding.severity.strip():
        if is_not_applicable(finding.severity):
            return finding.severity.strip()
        return to_catalog_severity(finding.severity)
    if finding.rating is not None:
        return classify_rating(finding.rating, rating_config)
    return None


def resolve_findings(
    findings: Iterable[Finding],
    parameters: Sequence[Parameter],
    rating_config: RatingConfig | None = None,
) -> tuple[list[ResolvedFinding], list[str]]:
    """Match findings to parameters, dropping non-applicable ones.

    Returns the resolved findings in input order and the categories that
    matched no parameter.
    """
    resolved: list[ResolvedFinding] = []
    unmatched: list[str] = []
    for finding in findings:
        severity = resolve_severity(finding, rating_config)
        if is_not_applicable(severity):
            logger.debug("Skipping %r: severity is not applicable", finding.category)
            continue
        assert severity is not None

        match = explain_match(finding.category, parameters)
        if match is None:
            logger.debug("No parameter match for %r", finding.category)
            unmatched.append(finding.category)
            continue

        logger.debug(
            "Matched %r -> %s via %s (%s)",
            finding.category,
            match.parameter.name,
            match.tier,
            severity,
        )
        resolved.append(ResolvedFinding(finding=finding, parameter=match.parameter, severity=severity, tier=match.tier))
    return resolved, unmatched


def _gather(
    keys: Iterable[Hashable],
    fetch: Callable[[Any], Any],
    *,
    max_workers: int,
    describe: Callable[[Any], str],
) -> tuple[dict[Any, Any], list[str]]:
    """Run *fetch* once per distinct key and wait for every call to finish.

    Failed keys are left out of the returned mapping and reported as
    warnings, so one bad read never hides the others.
    """
    unique = list(dict.fromkeys(keys))
    results: dict[Any, Any] = {}
    warnings: list[str] = []

    def _record_failure(key: Any, exc: Exception) -> None:
        warning = f"Product lookup failed for {describe(key)}: {exc}"
        warnings.append(warning)
        logger.warning(warning)

    workers = min(max_workers, len(unique))
    if workers <= 1:
        for key in unique:
            try:
                results[key] = fetch(key)
            except STORE_ERRORS as exc:
                _record_failure(key, exc)
        return results, warnings

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="regimen-lookup")
    try:
        futures: dict[Any, Future[Any]] = {key: executor.submit(fetch, key) for key in unique}
        for key, future in futures.items():
            try:
                results[key] = future.result()
            except STORE_ERRORS as exc:
                _record_failure(key, exc)
    except BaseException:
        # Abandoned mid-flight: drop queued lookups and keep no partial state.
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return results, warnings


def compute_recommendations(
    findings: Sequence[Finding],
    store: CatalogStore,
    rating_config: RatingConfig | None = None,
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    fallback: bool = DEFAULT_FALLBACK_ENABLED,
) -> RecommendationResult:
    """Compute the ranked product list for one set of findings.

    Exact (parameter, severity) lookups run first for every finding. Only
    when that whole pass yields nothing are the matched parameters
    re-queried across all their severity levels. Products are ordered
    primary first, then by display order, then by first appearance.

    Store failures never raise: an unavailable parameter list yields an
    empty result with ``catalog_error`` set, and a failed product lookup
    is reported in ``warnings`` while the other findings proceed.
    """
    try:
        parameters = store.list_parameters()
    except STORE_ERRORS as exc:
        logger.warning("Catalog unavailable: %s", exc)
        return RecommendationResult(catalog_error=str(exc) or type(exc).__name__)

    resolved, unmatched = resolve_findings(findings, parameters, rating_config)
    names = {item.parameter.id: item.parameter.name for item in resolved}

    exact, warnings = _gather(
        (item.lookup_key for item in resolved),
        lambda key: fetch_products(store, key[0], key[1]),
        max_workers=max_workers,
        describe=lambda key: f"{names[key[0]]} ({key[1]})",
    )

    merged: dict[str, _Entry] = {}
    for item in resolved:
        attribution = Attribution(category=item.finding.category, severity=display_severity(item.severity))
        for product in exact.get(item.lookup_key, ()):
            entry = merged.get(product.id)
            if entry is None:
                merged[product.id] = _Entry(product=product, attributions=[attribution])
            else:
                entry.attributions.append(attribution)

    fallback_used = False
    if not merged and fallback and resolved:
        fallback_used = True
        logger.info("No products for exact severity matches; broadening to all severity levels")
        by_parameter = {item.parameter.id: item.parameter for item in resolved}
        broadened, fallback_warnings = _gather(
            by_parameter,
            lambda parameter_id: fetch_products_any_severity(store, by_parameter[parameter_id]),
            max_workers=max_workers,
            describe=lambda parameter_id: f"{names[parameter_id]} (all severity levels)",
        )
        warnings.extend(fallback_warnings)
        for item in resolved:
            for severity_level, product in broadened.get(item.parameter.id, ()):
                if product.id not in merged:
                    attribution = Attribution(
                        category=item.finding.category,
                        severity=display_severity(severity_level),
                    )
                    merged[product.id] = _Entry(product=product, attributions=[attribution])

    ranked = sorted(merged.values(), key=lambda entry: product_sort_key(entry.product))
    products = tuple(
        RecommendedProduct(product=entry.product, attributions=tuple(entry.attributions)) for entry in ranked
    )
    logger.info(
        "Recommended %d products from %d findings (%d matched, %d unmatched%s)",
        len(products),
        len(findings),
        len(resolved),
        len(unmatched),
        ", fallback" if fallback_used else "",
    )
    return RecommendationResult(
        products=products,
        fallback_used=fallback_used,
        unmatched_categories=tuple(unmatched),
        warnings=tuple(warnings),
    )


def recommend(
    findings: Sequence[Finding],
    store: CatalogStore,
    config: RegimenConfig | None = None,
) -> RecommendationResult:
    """Compute recommendations using engine config and the store's rating ranges.

    Rating ranges come from ``config.rating`` when set, otherwise from the
    store, otherwise the defaults.
    """
    resolved_config = config if config is not None else RegimenConfig()
    rating_config = resolved_config.rating
    if rating_config is None:
        try:
            rating_config = store.get_rating_config()
        except STORE_ERRORS as exc:
            logger.warning("Catalog unavailable: %s", exc)
            return RecommendationResult(catalog_error=str(exc) or type(exc).__name__)

    return compute_recommendations(
        findings,
        store,
        rating_config,
        max_workers=resolved_config.max_workers,
        fallback=resolved_config.fallback,
    )
