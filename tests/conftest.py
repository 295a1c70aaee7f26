"""Shared pytest fixtures: a small skin and hair catalog."""

from __future__ import annotations

import pytest

from regimen.catalog import InMemoryCatalogStore
from regimen.model import Parameter, Product


@pytest.fixture
def parameters() -> list[Parameter]:
    """Return four active parameters in display order."""
    return [
        Parameter(id="p-dandruff", name="Dandruff", category="Scalp Flaking", display_order=0),
        Parameter(id="p-frizz", name="Frizzy Hair", category="Hair Texture", display_order=1),
        Parameter(id="p-acne", name="Acne", category="Breakouts", display_order=2),
        Parameter(id="p-wrinkles", name="Fine Lines & Wrinkles", category="Aging", display_order=3),
    ]


@pytest.fixture
def products() -> list[Product]:
    """Return products covering exact, multi-product and fallback-only pairs."""
    return [
        Product(id="d-high-2", parameter_id="p-dandruff", severity_level="High", name="Coal Tar Wash", display_order=0),
        Product(
            id="d-high-1",
            parameter_id="p-dandruff",
            severity_level="High",
            name="Ketoconazole Shampoo",
            display_order=1,
            is_primary=True,
        ),
        Product(id="d-med-1", parameter_id="p-dandruff", severity_level="Medium", name="Zinc Shampoo"),
        # Frizzy Hair only stocks Medium products.
        Product(id="f-med-1", parameter_id="p-frizz", severity_level="Medium", name="Argan Serum", display_order=0),
        Product(id="f-med-2", parameter_id="p-frizz", severity_level="Medium", name="Leave-in Cream", display_order=1),
        Product(id="a-low-1", parameter_id="p-acne", severity_level="Low", name="Salicylic Cleanser", display_order=2),
        Product(
            id="a-low-off",
            parameter_id="p-acne",
            severity_level="Low",
            name="Retired Toner",
            is_active=False,
        ),
        Product(id="w-med-1", parameter_id="p-wrinkles", severity_level="Medium", name="Retinol Night Cream"),
    ]


@pytest.fixture
def store(parameters: list[Parameter], products: list[Product]) -> InMemoryCatalogStore:
    """Return an in-memory store seeded with the sample catalog."""
    return InMemoryCatalogStore(parameters=parameters, products=products)
