"""Load a catalog document (parameters, products, rating ranges) from YAML."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any

import yaml

from regimen.catalog.memory import InMemoryCatalogStore
from regimen.constants.severity import DEFAULT_SEVERITY_LEVELS
from regimen.exceptions import CatalogError
from regimen.io import read_text_file
from regimen.model import Parameter, Product
from regimen.rating import rating_config_from_mapping

# Column names used by exported catalog tables, mapped onto model fields.
_PARAMETER_ALIASES: dict[str, str] = {
    "parameter_name": "name",
    "parameter_description": "description",
}
_PRODUCT_ALIASES: dict[str, str] = {
    "product_name": "name",
    "product_description": "description",
    "product_link": "link",
    "product_image": "image",
}


def load_catalog(path: Path) -> InMemoryCatalogStore:
    """Load and validate a catalog document into an :class:`InMemoryCatalogStore`."""
    path = path.resolve()
    text = read_text_file(path, kind="Catalog", error=CatalogError)
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML catalog file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog file at {path} must be a YAML mapping")
    return build_catalog(raw)


def build_catalog(raw: dict[str, Any]) -> InMemoryCatalogStore:
    """Build a store from an already-parsed catalog mapping."""
    parameters_raw = _ensure_list(raw.get("parameters"), "parameters")
    products_raw = _ensure_list(raw.get("products"), "products")

    parameters: list[Parameter] = []
    for index, entry in enumerate(parameters_raw):
        key = f"parameters[{index}]"
        fields = _apply_aliases(_ensure_mapping(entry, key), _PARAMETER_ALIASES)
        parameters.append(
            Parameter(
                id=_require_str(fields, "id", key),
                name=_require_str(fields, "name", key),
                category=_optional_str(fields, "category", key),
                severity_levels=_severity_levels(fields.get("severity_levels"), key),
                display_order=_optional_int(fields, "display_order", key, default=index),
                is_active=_optional_bool(fields, "is_active", key, default=True),
                description=_optional_str(fields, "description", key),
            )
        )

    products: list[Product] = []
    for index, entry in enumerate(products_raw):
        key = f"products[{index}]"
        fields = _apply_aliases(_ensure_mapping(entry, key), _PRODUCT_ALIASES)
        products.append(
            Product(
                id=_require_str(fields, "id", key),
                parameter_id=_require_str(fields, "parameter_id", key),
                severity_level=_require_str(fields, "severity_level", key),
                name=_require_str(fields, "name", key),
                description=_optional_str(fields, "description", key),
                link=_optional_str(fields, "link", key),
                image=_optional_str(fields, "image", key),
                display_order=_optional_int(fields, "display_order", key, default=0),
                is_primary=_optional_bool(fields, "is_primary", key, default=False),
                is_active=_optional_bool(fields, "is_active", key, default=True),
            )
        )

    rating_raw = raw.get("rating")
    rating_config = None
    if rating_raw is not None:
        rating_config = rating_config_from_mapping(_ensure_mapping(rating_raw, "rating"))

    _reject_duplicate_ids([p.id for p in parameters], "parameter")
    _reject_duplicate_ids([p.id for p in products], "product")
    return InMemoryCatalogStore(parameters=parameters, products=products, rating_config=rating_config)


def _ensure_list(value: Any, key_name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise CatalogError(f"{key_name} must be a list")
    return value


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise CatalogError(f"{key_name} must be a mapping")
    return value


def _apply_aliases(fields: dict[str, Any], aliases: dict[str, str]) -> dict[str, Any]:
    resolved = dict(fields)
    for alias, name in aliases.items():
        if alias in resolved and name not in resolved:
            resolved[name] = resolved.pop(alias)
    return resolved


def _require_str(fields: dict[str, Any], name: str, key_name: str) -> str:
    value = fields.get(name)
    if isinstance(value, int) and not isinstance(value, bool) and name.endswith("id"):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise CatalogError(f"{key_name}.{name} must be a non-empty string")
    return value.strip()


def _optional_str(fields: dict[str, Any], name: str, key_name: str) -> str:
    value = fields.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CatalogError(f"{key_name}.{name} must be a string")
    return value


def _optional_int(fields: dict[str, Any], name: str, key_name: str, *, default: int) -> int:
    value = fields.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogError(f"{key_name}.{name} must be an integer")
    return value


def _optional_bool(fields: dict[str, Any], name: str, key_name: str, *, default: bool) -> bool:
    value = fields.get(name, default)
    if not isinstance(value, bool):
        raise CatalogError(f"{key_name}.{name} must be a boolean")
    return value


def _severity_levels(value: Any, key_name: str) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_SEVERITY_LEVELS
    if not isinstance(value, list) or not value or not all(isinstance(item, str) and item.strip() for item in value):
        raise CatalogError(f"{key_name}.severity_levels must be a non-empty list of strings")
    return tuple(item.strip() for item in value)


def _reject_duplicate_ids(ids: list[str], kind: str) -> None:
    duplicates = sorted(item_id for item_id, count in Counter(ids).items() if count > 1)
    if duplicates:
        raise CatalogError(f"Duplicate {kind} id(s): {', '.join(duplicates)}")
