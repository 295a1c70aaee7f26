"""Catalog store interface, in-memory store, YAML loader and product lookups."""

from __future__ import annotations

from regimen.catalog.loader import build_catalog, load_catalog
from regimen.catalog.lookup import fetch_products, fetch_products_any_severity, sort_products
from regimen.catalog.memory import InMemoryCatalogStore
from regimen.catalog.store import CatalogStore

__all__ = [
    "CatalogStore",
    "InMemoryCatalogStore",
    "build_catalog",
    "fetch_products",
    "fetch_products_any_severity",
    "load_catalog",
    "sort_products",
]
