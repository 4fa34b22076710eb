"""LP model synthesis from fuzzy production data."""

from .lp_model import (
    ENGLISH_LABELS,
    ROMANIAN_LABELS,
    LABEL_SETS,
    AlphaCutValues,
    Constraint,
    LPModel,
    ModelLabels,
    format_number,
    variable_name,
)
from .synthesizer import (
    ModelSynthesizer,
    SynthesisResult,
    synthesize,
)

__all__ = [
    "ENGLISH_LABELS",
    "ROMANIAN_LABELS",
    "LABEL_SETS",
    "AlphaCutValues",
    "Constraint",
    "LPModel",
    "ModelLabels",
    "format_number",
    "variable_name",
    "ModelSynthesizer",
    "SynthesisResult",
    "synthesize",
]
