"""Consumption graph linking products to the resources they use."""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import networkx as nx

from fuzzylp.models.product import Product
from fuzzylp.models.resource import Resource

logger = logging.getLogger("fuzzylp.models")


def product_node(index: int) -> Tuple[str, int]:
    return ("product", index)


def resource_node(index: int) -> Tuple[str, int]:
    return ("resource", index)


@dataclass
class UsageNetwork:
    """
    Directed bipartite graph of resource consumption.
    
    Each product and resource is a node keyed by its position. An edge
    product -> resource carries the per-unit ``usage`` and exists only
    when that usage is strictly positive, so a zero (or missing) usage
    never produces a constraint term.
    """
    graph: nx.DiGraph = field(default_factory=nx.DiGraph)
    num_products: int = 0
    num_resources: int = 0
    
    def add_product(self, index: int, product: Product) -> None:
        self.graph.add_node(product_node(index), name=product.name, kind="product")
    
    def add_resource(self, index: int, resource: Resource) -> None:
        self.graph.add_node(resource_node(index), name=resource.name, kind="resource")
    
    def add_usage(self, product_index: int, resource_index: int, usage: float) -> None:
        """Link a product to a resource if the usage is positive."""
        if usage > 0:
            self.graph.add_edge(
                product_node(product_index),
                resource_node(resource_index),
                usage=usage
            )
    
    def consumers(self, resource_index: int) -> List[Tuple[int, float]]:
        """
        Products that consume a resource.
        
        Args:
            resource_index: Position of the resource
        
        Returns:
            List of (product_index, usage) tuples in product order
        """
        target = resource_node(resource_index)
        if target not in self.graph:
            return []
        
        consumers = []
        for product_index in range(self.num_products):
            source = product_node(product_index)
            if self.graph.has_edge(source, target):
                consumers.append((product_index, self.graph.edges[source, target]["usage"]))
        return consumers
    
    def idle_resources(self) -> List[int]:
        """Resources no product consumes."""
        return [
            index for index in range(self.num_resources)
            if self.graph.in_degree(resource_node(index)) == 0
        ]
    
    def unconstrained_products(self) -> List[int]:
        """Products limited only by their demand bound."""
        return [
            index for index in range(self.num_products)
            if self.graph.out_degree(product_node(index)) == 0
        ]
    
    @property
    def term_count(self) -> int:
        return self.graph.number_of_edges()
    
    @classmethod
    def build(
        cls,
        products: Sequence[Product],
        resources: Sequence[Resource]
    ) -> "UsageNetwork":
        """
        Build the consumption graph for the given products and resources.
        
        Both sequences are taken as-is; callers pass the active prefixes.
        Usage entries beyond the end of a product's list count as 0.
        """
        network = cls(num_products=len(products), num_resources=len(resources))
        
        for index, product in enumerate(products):
            network.add_product(index, product)
        for index, resource in enumerate(resources):
            network.add_resource(index, resource)
        
        for product_index, product in enumerate(products):
            for resource_index in range(len(resources)):
                network.add_usage(
                    product_index, resource_index, product.usage_for(resource_index)
                )
        
        logger.debug(
            f"Built usage network: {network.num_products} products, "
            f"{network.num_resources} resources, {network.term_count} terms"
        )
        return network
