"""In-memory catalog store with the admin write surface."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from regimen.catalog.store import CatalogStore
from regimen.exceptions import CatalogError
from regimen.model import Parameter, Product, RatingConfig
from regimen.rating import ensure_valid_rating_config

logger = logging.getLogger(__name__)


def _reorder(items: tuple[Any, ...], ids: Iterable[str], kind: str) -> tuple[Any, ...]:
    """Assign display orders 0..n-1 following *ids*; unlisted items keep their relative order after them."""
    ordered_ids = list(ids)
    by_id = {item.id: item for item in items}
    unknown = [item_id for item_id in ordered_ids if item_id not in by_id]
    if unknown:
        raise CatalogError(f"Unknown {kind} id(s): {', '.join(sorted(unknown))}")
    if len(set(ordered_ids)) != len(ordered_ids):
        raise CatalogError(f"Duplicate {kind} id in ordering")

    listed = set(ordered_ids)
    remainder = sorted((item for item in items if item.id not in listed), key=lambda item: item.display_order)
    sequence = [by_id[item_id] for item_id in ordered_ids] + remainder
    reordered = {item.id: replace(item, display_order=position) for position, item in enumerate(sequence)}
    return tuple(reordered[item.id] for item in items)


class InMemoryCatalogStore(CatalogStore):
    """Catalog held in process memory.

    Reads work on immutable snapshots, so lookups never block behind an
    admin edit and may observe the pre-edit catalog. Writers serialise on
    a lock and enforce the catalog invariants.
    """

    def __init__(
        self,
        parameters: Iterable[Parameter] = (),
        products: Iterable[Product] = (),
        rating_config: RatingConfig | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._parameters: tuple[Parameter, ...] = ()
        self._products: tuple[Product, ...] = ()
        self._rating_config: RatingConfig | None = None
        for parameter in parameters:
            self.save_parameter(parameter)
        for product in products:
            self.save_product(product)
        if rating_config is not None:
            self.save_rating_config(rating_config)

    def list_parameters(self) -> list[Parameter]:
        snapshot = self._parameters
        return sorted((p for p in snapshot if p.is_active), key=lambda p: p.display_order)

    def list_products(self, parameter_id: str, severity_level: str) -> list[Product]:
        snapshot = self._products
        matching = [
            product
            for product in snapshot
            if product.is_active and product.parameter_id == parameter_id and product.severity_level == severity_level
        ]
        return sorted(matching, key=lambda product: (not product.is_primary, product.display_order))

    def get_rating_config(self) -> RatingConfig | None:
        return self._rating_config

    def get_parameter(self, parameter_id: str) -> Parameter | None:
        """Return a parameter by id, including inactive ones."""
        return next((p for p in self._parameters if p.id == parameter_id), None)

    def all_products(self) -> list[Product]:
        """Return every product, including inactive ones, in insertion order."""
        return list(self._products)

    def save_parameter(self, parameter: Parameter) -> Parameter:
        """Create or replace a parameter."""
        if not parameter.id.strip():
            raise CatalogError("Parameter id must not be empty")
        if not parameter.name.strip():
            raise CatalogError(f"Parameter {parameter.id!r} must have a name")
        if not parameter.severity_levels:
            raise CatalogError(f"Parameter {parameter.id!r} must allow at least one severity level")

        with self._lock:
            if any(p.id == parameter.id for p in self._parameters):
                self._parameters = tuple(parameter if p.id == parameter.id else p for p in self._parameters)
            else:
                self._parameters = (*self._parameters, parameter)
        logger.debug("Saved parameter %s (%s)", parameter.id, parameter.name)
        return parameter

    def save_product(self, product: Product) -> Product:
        """Create or replace a product; its severity level must be allowed by its parameter.

        Several products may share one (parameter, severity level) pair.
        """
        if not product.id.strip():
            raise CatalogError("Product id must not be empty")
        if not product.name.strip():
            raise CatalogError(f"Product {product.id!r} must have a name")

        with self._lock:
            parameter = next((p for p in self._parameters if p.id == product.parameter_id), None)
            if parameter is None:
                raise CatalogError(f"Product {product.id!r} references unknown parameter {product.parameter_id!r}")
            if product.severity_level not in parameter.severity_levels:
                raise CatalogError(
                    f"Product {product.id!r} severity level {product.severity_level!r} is not one of "
                    f"{list(parameter.severity_levels)} for parameter {parameter.name!r}"
                )
            if any(p.id == product.id for p in self._products):
                self._products = tuple(product if p.id == product.id else p for p in self._products)
            else:
                self._products = (*self._products, product)
        logger.debug("Saved product %s for %s/%s", product.id, product.parameter_id, product.severity_level)
        return product

    def remove_parameter(self, parameter_id: str) -> None:
        """Delete a parameter and every product scoped to it."""
        with self._lock:
            if not any(p.id == parameter_id for p in self._parameters):
                raise CatalogError(f"Unknown parameter id: {parameter_id}")
            self._parameters = tuple(p for p in self._parameters if p.id != parameter_id)
            self._products = tuple(p for p in self._products if p.parameter_id != parameter_id)

    def remove_product(self, product_id: str) -> None:
        with self._lock:
            if not any(p.id == product_id for p in self._products):
                raise CatalogError(f"Unknown product id: {product_id}")
            self._products = tuple(p for p in self._products if p.id != product_id)

    def set_parameter_order(self, parameter_ids: Iterable[str]) -> None:
        """Set explicit parameter display order."""
        with self._lock:
            self._parameters = _reorder(self._parameters, parameter_ids, "parameter")

    def set_product_order(self, product_ids: Iterable[str]) -> None:
        """Set explicit display order within one (parameter, severity level) pair.

        Only products of that pair are renumbered; every other product keeps
        its display order.
        """
        ordered_ids = list(product_ids)
        with self._lock:
            by_id = {product.id: product for product in self._products}
            unknown = [product_id for product_id in ordered_ids if product_id not in by_id]
            if unknown:
                raise CatalogError(f"Unknown product id(s): {', '.join(sorted(unknown))}")
            pairs = {(by_id[product_id].parameter_id, by_id[product_id].severity_level) for product_id in ordered_ids}
            if len(pairs) > 1:
                raise CatalogError("Product ordering must stay within one parameter and severity level")
            if not pairs:
                return

            pair = pairs.pop()
            group = tuple(p for p in self._products if (p.parameter_id, p.severity_level) == pair)
            reordered = {product.id: product for product in _reorder(group, ordered_ids, "product")}
            self._products = tuple(reordered.get(p.id, p) for p in self._products)

    def save_rating_config(self, config: RatingConfig) -> RatingConfig:
        """Validate and store the rating config; a rejected config leaves the stored one untouched."""
        ensure_valid_rating_config(config)
        with self._lock:
            self._rating_config = config
        return config
