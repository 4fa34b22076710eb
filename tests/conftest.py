"""Shared fixtures for the fuzzy LP tests."""

import pytest

from fuzzylp.fuzzy import TriangularFuzzyNumber as TFN
from fuzzylp.models import Product, Resource, CrispCapacity


@pytest.fixture
def two_product_problem():
    """Two products, two resources, each product using one resource."""
    products = [
        Product(
            name="Product1",
            demand=TFN(50, 100, 150),
            price=TFN(10, 20, 30),
            resource_usage=[3, 0],
        ),
        Product(
            name="Product2",
            demand=TFN(20, 40, 60),
            price=TFN(5, 10, 15),
            resource_usage=[0, 2],
        ),
    ]
    resources = [
        Resource(name="Resource1", capacity=CrispCapacity(100)),
        Resource(name="Resource2", capacity=CrispCapacity(50)),
    ]
    return products, resources


@pytest.fixture
def sample_problem():
    """The default five products and four resources of the editor."""
    products = [
        Product("Produs A", TFN(100, 150, 200), TFN(30, 35, 40), [5, 7, 4, 0]),
        Product("Produs B", TFN(80, 120, 160), TFN(25, 30, 34), [6, 5, 5, 0]),
        Product("Produs C", TFN(90, 130, 170), TFN(28, 32, 38), [4, 6, 3, 0]),
        Product("Produs D", TFN(60, 100, 140), TFN(20, 24, 28), [3, 4, 2, 0]),
        Product("Produs E", TFN(70, 110, 150), TFN(22, 26, 30), [4, 5, 3, 2]),
    ]
    resources = [
        Resource("Resursă 1", CrispCapacity(1200)),
        Resource("Resursă 2", CrispCapacity(1500)),
        Resource("Resursă 3", CrispCapacity(1000)),
        Resource("Resursă 4", CrispCapacity(800)),
    ]
    return products, resources
