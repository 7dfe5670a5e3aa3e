"""
Drying Module - Last working stage of the tea pipeline

Components:
- model.py: Stage rule (exponential drying, overheat aroma damage)
- controller.py: Step validation and delegation
"""

from tea_factory.modules.drying.model import DryingModel, DryingResult
from tea_factory.modules.drying.controller import DryingController

__all__ = [
    "DryingModel",
    "DryingResult",
    "DryingController",
]
