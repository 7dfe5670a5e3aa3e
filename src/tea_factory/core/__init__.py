"""Core domain components of the tea manufacturing simulator"""

from tea_factory.core.tea_leaf import TeaLeaf, clamp, normalize
from tea_factory.core.process_state import ProcessState, PROCESS_SEQUENCE
from tea_factory.core.model_params import (
    ModelType,
    ModelParams,
    SteamingParams,
    RollingParams,
    DryingParams,
    make_model,
    model_type_from_name,
)
from tea_factory.core.quality import QualityStatus, quality_score, quality_status
from tea_factory.core.config import SimulationConfig

__all__ = [
    "TeaLeaf",
    "clamp",
    "normalize",
    "ProcessState",
    "PROCESS_SEQUENCE",
    "ModelType",
    "ModelParams",
    "SteamingParams",
    "RollingParams",
    "DryingParams",
    "make_model",
    "model_type_from_name",
    "QualityStatus",
    "quality_score",
    "quality_status",
    "SimulationConfig",
]
