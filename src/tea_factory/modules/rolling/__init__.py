"""
Rolling Module - Second stage of the tea pipeline

Components:
- model.py: Stage rule (cooling, moisture loss, aroma/color growth)
- controller.py: Step validation and delegation
"""

from tea_factory.modules.rolling.model import RollingModel, RollingResult
from tea_factory.modules.rolling.controller import RollingController

__all__ = [
    "RollingModel",
    "RollingResult",
    "RollingController",
]
