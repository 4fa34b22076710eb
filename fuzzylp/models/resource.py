"""Resource model: a limited input shared by products."""

from dataclasses import dataclass
from typing import Dict

from fuzzylp.models.capacity import Capacity, capacity_from_value, capacity_to_value


@dataclass
class Resource:
    """Represents a resource with a crisp or fuzzy capacity."""
    name: str
    capacity: Capacity
    
    def capacity_at(self, alpha: float) -> float:
        """Capacity reduced to a scalar at the given alpha level."""
        return self.capacity.resolve(alpha)
    
    @classmethod
    def from_dict(cls, data: Dict) -> "Resource":
        """Create a Resource from dictionary data."""
        return cls(
            name=str(data["name"]),
            capacity=capacity_from_value(data["capacity"])
        )
    
    def to_dict(self) -> Dict:
        return {"name": self.name, "capacity": capacity_to_value(self.capacity)}
