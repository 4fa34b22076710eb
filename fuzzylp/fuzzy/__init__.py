"""Fuzzy number arithmetic for alpha-cut based defuzzification."""

from .fuzzy_number import (
    AlphaCut,
    TriangularFuzzyNumber,
    alpha_cut,
    crisp,
)

__all__ = [
    "AlphaCut",
    "TriangularFuzzyNumber",
    "alpha_cut",
    "crisp",
]
