"""Product model: a decision variable with fuzzy demand and price."""

from dataclasses import dataclass, field, replace
from typing import Dict, List

from fuzzylp.fuzzy import TriangularFuzzyNumber


@dataclass
class Product:
    """
    Represents a product whose production quantity is a decision variable.
    
    ``resource_usage[i]`` is the amount of resource i consumed per unit.
    The relation to resources is positional, not by name.
    """
    name: str
    demand: TriangularFuzzyNumber
    price: TriangularFuzzyNumber
    resource_usage: List[float] = field(default_factory=list)
    
    def usage_for(self, resource_index: int) -> float:
        """Usage of a resource, 0 when the sequence is too short."""
        if 0 <= resource_index < len(self.resource_usage):
            return self.resource_usage[resource_index]
        return 0
    
    def padded(self, num_resources: int) -> "Product":
        """Return a copy whose usage list covers num_resources slots."""
        missing = max(0, num_resources - len(self.resource_usage))
        return replace(
            self, resource_usage=list(self.resource_usage) + [0] * missing
        )
    
    @classmethod
    def from_dict(cls, data: Dict) -> "Product":
        """Create a Product from dictionary data."""
        return cls(
            name=str(data["name"]),
            demand=TriangularFuzzyNumber.from_dict(data["demand"]),
            price=TriangularFuzzyNumber.from_dict(data["price"]),
            resource_usage=[
                float(usage)
                for usage in data.get("resource_usage", data.get("resourceUsage", []))
            ]
        )
    
    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "demand": self.demand.to_dict(),
            "price": self.price.to_dict(),
            "resource_usage": list(self.resource_usage),
        }
