"""
Tests for capacities, products, resources and the usage network.
"""

import pytest

from fuzzylp.fuzzy import TriangularFuzzyNumber as TFN
from fuzzylp.models import (
    CrispCapacity,
    FuzzyCapacity,
    Product,
    Resource,
    UsageNetwork,
    capacity_from_value,
    capacity_to_value,
)


class TestCapacity:
    """Tests for crisp and fuzzy capacities."""

    def test_crisp_ignores_alpha(self):
        capacity = CrispCapacity(1200)
        assert not capacity.is_fuzzy
        assert capacity.resolve(0.0) == 1200
        assert capacity.resolve(1.0) == 1200

    def test_fuzzy_is_defuzzified(self):
        capacity = FuzzyCapacity(TFN(80, 100, 140))
        assert capacity.is_fuzzy
        assert capacity.resolve(0.0) == 110
        assert capacity.resolve(0.5) == 105
        assert capacity.resolve(1.0) == 100

    def test_from_number(self):
        assert capacity_from_value(800) == CrispCapacity(800)
        assert capacity_from_value(12.5) == CrispCapacity(12.5)

    def test_from_mapping(self):
        capacity = capacity_from_value({"a": 1, "m": 2, "b": 3})
        assert capacity == FuzzyCapacity(TFN(1, 2, 3))

    def test_from_sequence(self):
        assert capacity_from_value([1, 2, 3]) == FuzzyCapacity(TFN(1, 2, 3))

    @pytest.mark.parametrize("raw", ["100", None, True])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            capacity_from_value(raw)

    def test_to_value(self):
        assert capacity_to_value(CrispCapacity(5)) == 5
        assert capacity_to_value(FuzzyCapacity(TFN(1, 2, 3))) == {"a": 1, "m": 2, "b": 3}


class TestProduct:
    """Tests for the Product model."""

    @pytest.fixture
    def product(self):
        return Product("Widget", TFN(1, 2, 3), TFN(4, 5, 6), [3, 0])

    def test_usage_for(self, product):
        assert product.usage_for(0) == 3
        assert product.usage_for(1) == 0

    def test_missing_usage_is_zero(self, product):
        assert product.usage_for(2) == 0
        assert product.usage_for(10) == 0

    def test_padded_returns_copy(self, product):
        padded = product.padded(4)
        assert padded.resource_usage == [3, 0, 0, 0]
        assert product.resource_usage == [3, 0]

    def test_padded_never_truncates(self, product):
        assert product.padded(1).resource_usage == [3, 0]

    def test_dict_round_trip(self, product):
        data = product.to_dict()
        assert data["demand"] == {"a": 1, "m": 2, "b": 3}
        assert Product.from_dict(data) == product

    def test_from_dict_accepts_camel_case_usage(self):
        product = Product.from_dict({
            "name": "P",
            "demand": [1, 2, 3],
            "price": [1, 2, 3],
            "resourceUsage": [1, 2],
        })
        assert product.resource_usage == [1.0, 2.0]

    def test_from_dict_without_usage(self):
        product = Product.from_dict({"name": "P", "demand": [1, 2, 3], "price": [1, 2, 3]})
        assert product.resource_usage == []


class TestResource:
    """Tests for the Resource model."""

    def test_capacity_at(self):
        resource = Resource("Labor", FuzzyCapacity(TFN(90, 100, 110)))
        assert resource.capacity_at(0.3) == pytest.approx(100)

    def test_from_dict(self):
        resource = Resource.from_dict({"name": "Labor", "capacity": 40})
        assert resource == Resource("Labor", CrispCapacity(40))

    def test_to_dict(self):
        resource = Resource("Labor", FuzzyCapacity(TFN(1, 2, 3)))
        assert resource.to_dict() == {"name": "Labor", "capacity": {"a": 1, "m": 2, "b": 3}}


class TestUsageNetwork:
    """Tests for the product/resource consumption graph."""

    def test_consumers_skip_zero_usage(self, two_product_problem):
        products, resources = two_product_problem
        network = UsageNetwork.build(products, resources)

        assert network.consumers(0) == [(0, 3)]
        assert network.consumers(1) == [(1, 2)]
        assert network.term_count == 2

    def test_consumers_in_product_order(self, sample_problem):
        products, resources = sample_problem
        network = UsageNetwork.build(products, resources)

        assert network.consumers(3) == [(4, 2)]
        assert [p for p, _ in network.consumers(0)] == [0, 1, 2, 3, 4]

    def test_idle_resources(self, sample_problem):
        products, resources = sample_problem
        network = UsageNetwork.build(products[:4], resources)
        assert network.idle_resources() == [3]

    def test_unconstrained_products(self):
        products = [
            Product("A", TFN(1, 2, 3), TFN(1, 2, 3), [1]),
            Product("B", TFN(1, 2, 3), TFN(1, 2, 3), []),
        ]
        resources = [Resource("R", CrispCapacity(10))]
        network = UsageNetwork.build(products, resources)
        assert network.unconstrained_products() == [1]

    def test_negative_usage_is_not_a_term(self):
        products = [Product("A", TFN(1, 2, 3), TFN(1, 2, 3), [-2])]
        resources = [Resource("R", CrispCapacity(10))]
        network = UsageNetwork.build(products, resources)
        assert network.consumers(0) == []

    def test_unknown_resource(self, two_product_problem):
        network = UsageNetwork.build(*two_product_problem)
        assert network.consumers(7) == []

    def test_empty(self):
        network = UsageNetwork.build([], [])
        assert network.idle_resources() == []
        assert network.unconstrained_products() == []
        assert network.term_count == 0
