"""
Weight Presets

Named, immutable pillar weight models. Callers pick one explicitly and pass
it into the engine; the engine never looks weights up on its own.
"""

from types import MappingProxyType
from typing import Mapping

from .contracts import WeightModel


DEFAULT_PRESET = "Balanced"

DEFAULT_WEIGHTS = WeightModel(
    program_fit=0.34,
    commute=0.22,
    supports=0.18,
    outcomes=0.18,
    environment=0.08,
)

WEIGHT_PRESETS: Mapping[str, WeightModel] = MappingProxyType({
    "Balanced": DEFAULT_WEIGHTS,
    "ShortCommute": WeightModel(program_fit=0.28, commute=0.32, supports=0.16, outcomes=0.18, environment=0.06),
    "IEP_Priority": WeightModel(program_fit=0.28, commute=0.18, supports=0.32, outcomes=0.16, environment=0.06),
    "Arts_Forward": WeightModel(program_fit=0.38, commute=0.18, supports=0.16, outcomes=0.20, environment=0.08),
    "Outcomes_First": WeightModel(program_fit=0.26, commute=0.18, supports=0.16, outcomes=0.34, environment=0.06),
})


def get_preset(name: str) -> WeightModel:
    """Look up a preset by name. Raises KeyError for unknown names."""
    return WEIGHT_PRESETS[name]
