"""Resource capacity variants: crisp bounds or fuzzy estimates."""

from dataclasses import dataclass
from typing import Any, Union

from fuzzylp.fuzzy import TriangularFuzzyNumber


@dataclass(frozen=True)
class CrispCapacity:
    """A plain numeric capacity, passed through unchanged."""
    value: float
    
    @property
    def is_fuzzy(self) -> bool:
        return False
    
    def resolve(self, alpha: float) -> float:
        return self.value


@dataclass(frozen=True)
class FuzzyCapacity:
    """A fuzzy capacity, defuzzified at the requested alpha level."""
    fuzzy: TriangularFuzzyNumber
    
    @property
    def is_fuzzy(self) -> bool:
        return True
    
    def resolve(self, alpha: float) -> float:
        return self.fuzzy.crisp(alpha)


Capacity = Union[CrispCapacity, FuzzyCapacity]


def capacity_from_value(raw: Any) -> Capacity:
    """
    Build a capacity from serialized data.
    
    A bare number becomes a CrispCapacity, a mapping or a three-element
    sequence becomes a FuzzyCapacity.
    
    Raises:
        ValueError: If the value cannot be interpreted
    """
    if isinstance(raw, bool):
        raise ValueError(f"Invalid capacity: {raw!r}")
    if isinstance(raw, (int, float)):
        return CrispCapacity(raw)
    if isinstance(raw, (dict, list, tuple)):
        return FuzzyCapacity(TriangularFuzzyNumber.from_dict(raw))
    raise ValueError(f"Invalid capacity: {raw!r}")


def capacity_to_value(capacity: Capacity) -> Any:
    """Inverse of capacity_from_value."""
    if isinstance(capacity, FuzzyCapacity):
        return capacity.fuzzy.to_dict()
    return capacity.value
