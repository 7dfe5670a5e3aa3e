"""
tea_factory - TeaFactory Simulator

Discrete-time simulation of a tea-leaf manufacturing line
(steaming, rolling, drying) with quality evaluation.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

__version__ = "0.1.0"

from tea_factory.core.tea_leaf import TeaLeaf
from tea_factory.core.process_state import ProcessState
from tea_factory.core.model_params import ModelType, make_model
from tea_factory.core.config import SimulationConfig

__all__ = [
    "TeaLeaf",
    "ProcessState",
    "ModelType",
    "make_model",
    "SimulationConfig",
]
