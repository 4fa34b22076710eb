"""Problem validation utilities."""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from fuzzylp.config import SynthesisParams
from fuzzylp.fuzzy import TriangularFuzzyNumber
from fuzzylp.models import Product, Resource, UsageNetwork


@dataclass
class ValidationResult:
    """Results of problem validation."""
    is_valid: bool = True
    violations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_violation(self, message: str) -> None:
        """Add a validation violation."""
        self.violations.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a validation warning (non-fatal)."""
        self.warnings.append(message)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "violations": self.violations,
            "warnings": self.warnings,
        }


def _is_finite(value: float) -> bool:
    """Finite and representable as a float."""
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond the float range
        return False


def _is_finite_fuzzy(fuzzy: TriangularFuzzyNumber) -> bool:
    return all(_is_finite(v) for v in (fuzzy.left, fuzzy.peak, fuzzy.right))


class ProblemValidator:
    """
    Checks a planning problem for suspicious input.

    Nothing found here stops synthesis; the model text is still generated
    for any input. A non-finite alpha is recorded as a violation, since it
    makes every coefficient undefined. Everything else is a warning that
    tells the user which parts of the text may be meaningless.
    """

    def validate(
        self,
        products: Sequence[Product],
        resources: Sequence[Resource],
        params: SynthesisParams
    ) -> ValidationResult:
        """
        Validate the active part of a problem.

        Args:
            products: Full product list
            resources: Full resource list
            params: Alpha level and active prefix sizes

        Returns:
            ValidationResult with the collected violations and warnings
        """
        result = ValidationResult()

        self._validate_params(products, resources, params, result)

        active_products = products[:max(0, params.num_products)]
        active_resources = resources[:max(0, params.num_resources)]

        for product in active_products:
            self._validate_product(product, len(active_resources), result)
        for resource in active_resources:
            self._validate_resource(resource, result)

        network = UsageNetwork.build(active_products, active_resources)
        for index in network.idle_resources():
            result.add_warning(
                f"Resource '{active_resources[index].name}' is not used by any "
                f"active product; its constraint is omitted"
            )

        return result

    def _validate_params(
        self,
        products: Sequence[Product],
        resources: Sequence[Resource],
        params: SynthesisParams,
        result: ValidationResult
    ) -> None:
        """Check alpha and the active prefix sizes."""
        if not _is_finite(params.alpha):
            result.add_violation(
                f"Alpha {params.alpha} is not a finite number; "
                f"no coefficient of the model is defined"
            )
        elif not 0.0 <= params.alpha <= 1.0:
            result.add_warning(
                f"Alpha {params.alpha} is outside [0, 1]; alpha-cuts are extrapolated"
            )

        low, high = params.product_range
        if not low <= params.num_products <= high:
            result.add_warning(
                f"Number of products {params.num_products} is outside {low}-{high}"
            )
        low, high = params.resource_range
        if not low <= params.num_resources <= high:
            result.add_warning(
                f"Number of resources {params.num_resources} is outside {low}-{high}"
            )

        if params.num_products > len(products):
            result.add_warning(
                f"Requested {params.num_products} products but only "
                f"{len(products)} are defined"
            )
        if params.num_resources > len(resources):
            result.add_warning(
                f"Requested {params.num_resources} resources but only "
                f"{len(resources)} are defined"
            )

    def _validate_product(
        self,
        product: Product,
        num_resources: int,
        result: ValidationResult
    ) -> None:
        for label, fuzzy in (("demand", product.demand), ("price", product.price)):
            if not _is_finite_fuzzy(fuzzy):
                result.add_warning(f"Product '{product.name}' has a non-finite {label}")
            elif not fuzzy.is_ordered:
                result.add_warning(
                    f"Product '{product.name}' {label} is not ordered a <= m <= b: "
                    f"({fuzzy.left}, {fuzzy.peak}, {fuzzy.right})"
                )

        if len(product.resource_usage) < num_resources:
            result.add_warning(
                f"Product '{product.name}' lists {len(product.resource_usage)} "
                f"resource usages for {num_resources} resources; missing usage is 0"
            )

        for usage in product.resource_usage[:num_resources]:
            if not _is_finite(usage):
                result.add_warning(
                    f"Product '{product.name}' has a non-finite resource usage"
                )
                break

    def _validate_resource(self, resource: Resource, result: ValidationResult) -> None:
        capacity = resource.capacity
        if capacity.is_fuzzy:
            if not _is_finite_fuzzy(capacity.fuzzy):
                result.add_warning(f"Resource '{resource.name}' has a non-finite capacity")
            elif not capacity.fuzzy.is_ordered:
                result.add_warning(
                    f"Resource '{resource.name}' capacity is not ordered a <= m <= b"
                )
        elif not _is_finite(capacity.value):
            result.add_warning(f"Resource '{resource.name}' has a non-finite capacity")
