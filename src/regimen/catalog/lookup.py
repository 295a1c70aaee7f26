"""Product lookups scoped to (parameter, severity level) pairs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from regimen.catalog.store import CatalogStore
from regimen.model import Parameter, Product

logger = logging.getLogger(__name__)


def product_sort_key(product: Product) -> tuple[bool, int]:
    """Primary products first, then ascending display order."""
    return (not product.is_primary, product.display_order)


def sort_products(products: Iterable[Product]) -> list[Product]:
    """Sort products by :func:`product_sort_key`; ties keep their incoming order."""
    return sorted(products, key=product_sort_key)


def fetch_products(store: CatalogStore, parameter_id: str, severity_level: str) -> list[Product]:
    """Return active products for exactly ``(parameter_id, severity_level)``.

    Store results are re-filtered, de-duplicated by id and re-sorted, so a
    store that ignores the ``is_active`` flag or the ordering contract
    cannot leak through.
    """
    products: dict[str, Product] = {}
    for product in store.list_products(parameter_id, severity_level):
        if product.is_active and product.parameter_id == parameter_id and product.severity_level == severity_level:
            products.setdefault(product.id, product)
    logger.debug("Found %d products for %s (%s)", len(products), parameter_id, severity_level)
    return sort_products(products.values())


def fetch_products_any_severity(store: CatalogStore, parameter: Parameter) -> list[tuple[str, Product]]:
    """Return ``(severity_level, product)`` pairs across every level *parameter* allows.

    Levels are visited in the order the parameter lists them.
    """
    return [
        (severity_level, product)
        for severity_level in parameter.severity_levels
        for product in fetch_products(store, parameter.id, severity_level)
    ]
