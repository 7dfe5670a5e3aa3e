"""
Steaming Module - First stage of the tea pipeline

Architecture: MVC (Model-Controller)

Components:
- model.py: Stage rule (heating, moisture uptake, aroma/color growth)
- controller.py: Step validation and delegation

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from tea_factory.modules.steaming.model import SteamingModel, SteamingResult
from tea_factory.modules.steaming.controller import SteamingController

__all__ = [
    "SteamingModel",
    "SteamingResult",
    "SteamingController",
]
