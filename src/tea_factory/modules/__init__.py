"""Modules package - Stages of the tea pipeline and their drivers"""

from tea_factory.modules.steaming import SteamingController, SteamingModel
from tea_factory.modules.rolling import RollingController, RollingModel
from tea_factory.modules.drying import DryingController, DryingModel
from tea_factory.modules.stages import build_stage_controller, STAGE_CONTROLLERS

__all__ = [
    "SteamingController",
    "SteamingModel",
    "RollingController",
    "RollingModel",
    "DryingController",
    "DryingModel",
    "build_stage_controller",
    "STAGE_CONTROLLERS",
]
