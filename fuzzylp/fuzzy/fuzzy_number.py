"""Fuzzy number implementations for uncertain model parameters."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, NamedTuple


class AlphaCut(NamedTuple):
    """Crisp interval of a fuzzy number at a given confidence level."""
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2


@dataclass(frozen=True)
class TriangularFuzzyNumber:
    """
    Triangular Fuzzy Number representation.
    
    A triangular fuzzy number is defined by three values:
    - left: The pessimistic bound (a)
    - peak: The most likely value (m)
    - right: The optimistic bound (b)
    
    The usual convention is left <= peak <= right, but it is not enforced.
    Unordered triples still produce numerically valid alpha-cuts, only the
    interval endpoints swap roles. Use ``is_ordered`` to detect them.
    """
    left: float
    peak: float
    right: float
    
    @property
    def is_ordered(self) -> bool:
        """True when left <= peak <= right."""
        return self.left <= self.peak <= self.right
    
    def alpha_cut(self, alpha: float) -> AlphaCut:
        """
        Compute the alpha-cut interval.
        
        Each side of the triangle is interpolated independently, from the
        support endpoint at alpha=0 to the peak at alpha=1. Alpha is not
        range checked; values outside [0, 1] extrapolate linearly.
        
        Args:
            alpha: Confidence level, nominally in [0, 1]
        
        Returns:
            AlphaCut with the lower and upper interval bounds.
        """
        # Same line as left + alpha * (peak - left), but exact at both ends
        lower = (1 - alpha) * self.left + alpha * self.peak
        upper = (1 - alpha) * self.right + alpha * self.peak
        return AlphaCut(lower, upper)
    
    def crisp(self, alpha: float) -> float:
        """Defuzzify as the midpoint of the alpha-cut interval."""
        return self.alpha_cut(alpha).midpoint
    
    @classmethod
    def from_dict(cls, data: Any) -> TriangularFuzzyNumber:
        """
        Create a fuzzy number from serialized data.
        
        Accepts a mapping with ``a``/``m``/``b`` keys, a mapping with
        ``left``/``peak``/``right`` keys, or a sequence of three numbers.
        
        Raises:
            ValueError: If the data has none of these shapes
        """
        if isinstance(data, dict):
            if {"a", "m", "b"} <= data.keys():
                return cls(float(data["a"]), float(data["m"]), float(data["b"]))
            if {"left", "peak", "right"} <= data.keys():
                return cls(
                    float(data["left"]), float(data["peak"]), float(data["right"])
                )
            raise ValueError(f"Invalid fuzzy number keys: {sorted(data.keys())}")
        
        if isinstance(data, (list, tuple)) and len(data) == 3:
            left, peak, right = data
            return cls(float(left), float(peak), float(right))
        
        raise ValueError(f"Invalid fuzzy number: {data!r}")
    
    def to_dict(self) -> Dict[str, float]:
        return {"a": self.left, "m": self.peak, "b": self.right}


def alpha_cut(fuzzy: TriangularFuzzyNumber, alpha: float) -> AlphaCut:
    """Return the (lower, upper) alpha-cut of a triangular fuzzy number."""
    return fuzzy.alpha_cut(alpha)


def crisp(fuzzy: TriangularFuzzyNumber, alpha: float) -> float:
    """
    Defuzzify a triangular fuzzy number at confidence level alpha.
    
    The crisp value is the midpoint of the alpha-cut. At alpha=1 this is
    the peak, at alpha=0 it is the midpoint of the support.
    """
    return fuzzy.crisp(alpha)
