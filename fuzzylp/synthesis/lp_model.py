"""Structured LP model and its canonical text rendering."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class ModelLabels:
    """Human-readable labels of the model text."""
    title: str
    alpha_level: str
    variables_heading: str
    alpha_cut_heading: str
    alpha_symbol: str
    demand: str
    price: str


ENGLISH_LABELS = ModelLabels(
    title="Linear Programming Model - Production Optimization",
    alpha_level="Alpha level",
    variables_heading="Variable definitions:",
    alpha_cut_heading="Alpha-cut values",
    alpha_symbol="alpha",
    demand="Demand",
    price="Price",
)

# Same text as the Romanian editor, except that rounding ties and
# non-finite numbers follow Python formatting
ROMANIAN_LABELS = ModelLabels(
    title="Model de Programare Liniară – Optimizarea Producției",
    alpha_level="Nivel α",
    variables_heading="Definiții variabile:",
    alpha_cut_heading="Valori α-cut",
    alpha_symbol="α",
    demand="Cerere",
    price="Preț",
)

LABEL_SETS: Dict[str, ModelLabels] = {
    "en": ENGLISH_LABELS,
    "ro": ROMANIAN_LABELS,
}


def variable_name(index: int) -> str:
    """Token of the decision variable at a 0-based product position."""
    return f"X{index + 1}"


def format_number(value: float) -> str:
    """
    Shortest text form of a number, without forced decimals.
    
    Integral floats drop their fractional part (100.0 -> "100"), and
    every integral value is written out in full (1e21 -> 22 digits).
    Non-finite values keep Python's spelling, "nan" and "inf".
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class Constraint:
    """A resource constraint: sum of usage * variable <= capacity."""
    resource: str
    terms: List[Tuple[float, str]]
    capacity: float
    
    def render(self) -> str:
        lhs = " + ".join(f"{format_number(usage)} {var}" for usage, var in self.terms)
        return f"{lhs} <= {format_number(self.capacity)}"


@dataclass
class AlphaCutValues:
    """Defuzzified demand and price of one product."""
    product: str
    demand: float
    price: float


@dataclass
class LPModel:
    """
    A maximization LP assembled from defuzzified parameters.
    
    Sections are kept separately so that the text layout is decided in
    one place, ``render``.
    """
    alpha: float
    objective: List[Tuple[float, str]] = field(default_factory=list)
    constraints: List[Constraint] = field(default_factory=list)
    demand_bounds: List[Tuple[str, float]] = field(default_factory=list)
    variables: List[Tuple[str, str]] = field(default_factory=list)
    alpha_cut_values: List[AlphaCutValues] = field(default_factory=list)
    
    def render(self, labels: ModelLabels = ENGLISH_LABELS) -> str:
        """
        Render the model in its canonical text form.
        
        Section order and the keywords MAXIMIZE, SUBJECT TO, BOUNDS and END
        are fixed; only the descriptive labels vary.
        """
        alpha = f"{self.alpha:.2f}"
        lines = [
            labels.title,
            f"{labels.alpha_level} = {alpha}",
            "",
            "MAXIMIZE",
            " + ".join(f"{price:.2f} {var}" for price, var in self.objective),
            "",
            "SUBJECT TO",
        ]
        lines.extend(constraint.render() for constraint in self.constraints)
        lines.extend(f"{var} <= {demand:.0f}" for var, demand in self.demand_bounds)
        
        lines.extend(["", "BOUNDS"])
        lines.extend(f"{var} >= 0" for var, _ in self.variables)
        
        lines.extend(["", "END", "", labels.variables_heading])
        lines.extend(f"{var} = {name}" for var, name in self.variables)
        
        lines.extend(["", f"{labels.alpha_cut_heading} ({labels.alpha_symbol} = {alpha}):"])
        lines.extend(
            f"{values.product}: {labels.demand}={values.demand:.0f}, "
            f"{labels.price}={values.price:.2f}"
            for values in self.alpha_cut_values
        )
        
        return "\n".join(lines) + "\n"
    
    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "alpha": self.alpha,
            "objective": [
                {"variable": var, "coefficient": price} for price, var in self.objective
            ],
            "constraints": [
                {
                    "resource": c.resource,
                    "terms": [{"variable": var, "usage": usage} for usage, var in c.terms],
                    "capacity": c.capacity,
                }
                for c in self.constraints
            ],
            "demand_bounds": {var: demand for var, demand in self.demand_bounds},
            "variables": {var: name for var, name in self.variables},
        }
