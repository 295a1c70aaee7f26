"""Tests for loading catalog documents from YAML."""

from __future__ import annotations

from pathlib import Path

import pytest

from regimen.catalog import build_catalog, load_catalog
from regimen.exceptions import CatalogError, InvalidRatingConfigError
from regimen.model import RatingConfig

CATALOG_YAML = """\
parameters:
  - id: p-dandruff
    name: Dandruff
    category: Scalp Flaking
    severity_levels: [High, Medium, Low]
  - id: 7
    parameter_name: Frizzy Hair
    display_order: 5
    is_active: false
products:
  - id: d-1
    parameter_id: p-dandruff
    severity_level: High
    product_name: Ketoconazole Shampoo
    product_link: https://example.com/keto
    is_primary: true
rating:
  low_max: 2
  medium_min: 3
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "catalog.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_catalog_reads_parameters_products_and_rating(tmp_path: Path) -> None:
    store = load_catalog(_write(tmp_path, CATALOG_YAML))

    assert [p.name for p in store.list_parameters()] == ["Dandruff"]
    frizz = store.get_parameter("7")
    assert frizz is not None
    assert frizz.name == "Frizzy Hair"
    assert frizz.display_order == 5
    assert frizz.is_active is False

    products = store.list_products("p-dandruff", "High")
    assert [p.name for p in products] == ["Ketoconazole Shampoo"]
    assert products[0].link == "https://example.com/keto"
    assert products[0].is_primary is True

    assert store.get_rating_config() == RatingConfig(low_max=2, medium_min=3)


def test_parameter_display_order_defaults_to_position() -> None:
    store = build_catalog({"parameters": [{"id": "a", "name": "Acne"}, {"id": "b", "name": "Dandruff"}]})

    assert [p.display_order for p in store.list_parameters()] == [0, 1]


def test_empty_document_yields_empty_store(tmp_path: Path) -> None:
    store = load_catalog(_write(tmp_path, ""))

    assert store.list_parameters() == []
    assert store.get_rating_config() is None


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "absent.yaml")


def test_directory_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="Cannot read catalog file"):
        load_catalog(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="Invalid YAML"):
        load_catalog(_write(tmp_path, "parameters: [\n"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="mapping"):
        load_catalog(_write(tmp_path, "- a\n- b\n"))


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"parameters": "Dandruff"}, "parameters must be a list"),
        ({"parameters": ["Dandruff"]}, r"parameters\[0\] must be a mapping"),
        ({"parameters": [{"id": "a"}]}, r"parameters\[0\].name"),
        ({"parameters": [{"id": "a", "name": "Acne", "severity_levels": []}]}, "severity_levels"),
        ({"parameters": [{"id": "a", "name": "Acne", "display_order": "1"}]}, "display_order"),
        ({"parameters": [{"id": "a", "name": "Acne", "is_active": "yes"}]}, "is_active"),
    ],
    ids=["not-list", "not-mapping", "missing-name", "empty-levels", "string-order", "string-flag"],
)
def test_malformed_parameters(raw: dict[str, object], message: str) -> None:
    with pytest.raises(CatalogError, match=message):
        build_catalog(raw)  # type: ignore[arg-type]


def test_duplicate_ids_are_rejected() -> None:
    raw = {"parameters": [{"id": "a", "name": "Acne"}, {"id": "a", "name": "Dandruff"}]}

    with pytest.raises(CatalogError, match="Duplicate parameter id"):
        build_catalog(raw)


def test_product_for_unknown_parameter_is_rejected() -> None:
    raw = {"products": [{"id": "x", "parameter_id": "missing", "severity_level": "High", "name": "X"}]}

    with pytest.raises(CatalogError, match="unknown parameter"):
        build_catalog(raw)


def test_invalid_rating_block_is_rejected() -> None:
    with pytest.raises(InvalidRatingConfigError):
        build_catalog({"rating": {"low_max": 9}})
