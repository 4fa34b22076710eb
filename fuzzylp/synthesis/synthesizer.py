"""Fuzzy-to-crisp reduction and LP model synthesis."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from fuzzylp.config import SynthesisParams
from fuzzylp.fuzzy import crisp
from fuzzylp.models import Product, Resource, UsageNetwork
from fuzzylp.synthesis.lp_model import (
    ENGLISH_LABELS,
    AlphaCutValues,
    Constraint,
    LPModel,
    ModelLabels,
    variable_name,
)
from fuzzylp.utils import ProblemValidator, ValidationResult

logger = logging.getLogger("fuzzylp.synthesis")


@dataclass
class SynthesisResult:
    """Results from one synthesis run."""
    model: LPModel
    text: str
    validation: ValidationResult
    statistics: Dict
    
    @property
    def alpha(self) -> float:
        return self.model.alpha
    
    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "model": self.model.to_dict(),
            "text": self.text,
            "statistics": self.statistics,
            "is_valid": self.validation.is_valid,
            "violations": self.validation.violations,
            "warnings": self.validation.warnings,
        }


class ModelSynthesizer:
    """
    Builds a crisp LP model from fuzzy production data.
    
    Only the first ``num_products`` products and ``num_resources``
    resources take part. Every fuzzy quantity is reduced with the same
    rule, the midpoint of its alpha-cut. The synthesizer never mutates
    its inputs and keeps no state between calls.
    """
    
    def __init__(
        self,
        products: Sequence[Product],
        resources: Sequence[Resource],
        params: Optional[SynthesisParams] = None,
        labels: ModelLabels = ENGLISH_LABELS,
        validator: Optional[ProblemValidator] = None
    ):
        self.products = products
        self.resources = resources
        self.params = params or SynthesisParams()
        self.labels = labels
        self.validator = validator or ProblemValidator()
    
    @property
    def active_products(self) -> Sequence[Product]:
        return self.products[:max(0, self.params.num_products)]
    
    @property
    def active_resources(self) -> Sequence[Resource]:
        return self.resources[:max(0, self.params.num_resources)]
    
    def build_model(self, network: Optional[UsageNetwork] = None) -> LPModel:
        """
        Assemble the structured LP model.
        
        Args:
            network: Usage network of the active prefixes, built if omitted
        
        Returns:
            LPModel ready to be rendered
        """
        alpha = self.params.alpha
        products = self.active_products
        resources = self.active_resources
        if network is None:
            network = UsageNetwork.build(products, resources)
        
        model = LPModel(alpha=alpha)
        
        for index, product in enumerate(products):
            model.objective.append((crisp(product.price, alpha), variable_name(index)))
        
        for index, resource in enumerate(resources):
            terms = [
                (usage, variable_name(product_index))
                for product_index, usage in network.consumers(index)
            ]
            if not terms:
                continue
            model.constraints.append(
                Constraint(
                    resource=resource.name,
                    terms=terms,
                    capacity=resource.capacity_at(alpha)
                )
            )
        
        for index, product in enumerate(products):
            token = variable_name(index)
            demand = crisp(product.demand, alpha)
            model.demand_bounds.append((token, demand))
            model.variables.append((token, product.name))
            model.alpha_cut_values.append(
                AlphaCutValues(
                    product=product.name,
                    demand=demand,
                    price=crisp(product.price, alpha)
                )
            )
        
        return model
    
    def synthesize(self) -> SynthesisResult:
        """
        Validate the inputs, build the model and render its text.
        
        Validation findings are logged, violations as errors and the rest
        as warnings. Neither stops the synthesis.
        """
        validation = self.validator.validate(self.products, self.resources, self.params)
        for violation in validation.violations:
            logger.error(violation)
        for warning in validation.warnings:
            logger.warning(warning)
        
        network = UsageNetwork.build(self.active_products, self.active_resources)
        model = self.build_model(network)
        text = model.render(self.labels)
        
        statistics = {
            "alpha": model.alpha,
            "products": len(self.active_products),
            "resources": len(self.active_resources),
            "constraints": len(model.constraints),
            "terms": network.term_count,
            "fuzzy_capacities": sum(
                1 for resource in self.active_resources if resource.capacity.is_fuzzy
            ),
            "omitted_resources": [
                self.active_resources[i].name for i in network.idle_resources()
            ],
            "unconstrained_products": [
                self.active_products[i].name for i in network.unconstrained_products()
            ],
        }
        
        logger.info(
            f"Generated LP model with alpha = {model.alpha:.2f}: "
            f"{statistics['products']} variables, {statistics['constraints']} "
            f"resource constraints"
        )
        
        return SynthesisResult(
            model=model,
            text=text,
            validation=validation,
            statistics=statistics
        )


def synthesize(
    products: Sequence[Product],
    resources: Sequence[Resource],
    num_products: int,
    num_resources: int,
    alpha: float,
    labels: ModelLabels = ENGLISH_LABELS
) -> str:
    """
    Generate the LP model text for the active products and resources.
    
    A pure function: identical arguments always give identical text.
    It never raises on well-formed inputs; empty selections produce an
    empty objective and no constraints.
    
    Args:
        products: Product list, of which the first num_products are used
        resources: Resource list, of which the first num_resources are used
        num_products: Size of the active product prefix
        num_resources: Size of the active resource prefix
        alpha: Confidence level, nominally in [0, 1]
        labels: Descriptive labels of the text
    
    Returns:
        The model text
    """
    params = SynthesisParams(
        alpha=alpha,
        num_products=num_products,
        num_resources=num_resources
    )
    synthesizer = ModelSynthesizer(products, resources, params, labels)
    return synthesizer.build_model().render(labels)
