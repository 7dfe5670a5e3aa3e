"""
Stage dispatch

Maps a stage tag to the controller that applies its rule.
"""

from typing import Dict, Optional, Type, Union

from tea_factory.core.process_state import ProcessState
from tea_factory.core.model_params import ModelParams
from tea_factory.modules.steaming import SteamingController
from tea_factory.modules.rolling import RollingController
from tea_factory.modules.drying import DryingController


StageController = Union[SteamingController, RollingController, DryingController]

STAGE_CONTROLLERS: Dict[ProcessState, Type] = {
    ProcessState.STEAMING: SteamingController,
    ProcessState.ROLLING: RollingController,
    ProcessState.DRYING: DryingController,
}


def stage_params(state: ProcessState, model_params: ModelParams):
    """Pick the coefficient set of one stage out of a profile."""
    if state == ProcessState.STEAMING:
        return model_params.steaming
    if state == ProcessState.ROLLING:
        return model_params.rolling
    if state == ProcessState.DRYING:
        return model_params.drying
    raise ValueError(f"Stage {state} has no coefficients")


def build_stage_controller(
    state: ProcessState,
    model_params: ModelParams,
) -> Optional[StageController]:
    """
    Build the controller of a stage from a profile.

    Args:
        state: Stage tag
        model_params: Coefficients of the active profile

    Returns:
        Stage controller, or None for FINISHED
    """
    controller_cls = STAGE_CONTROLLERS.get(state)
    if controller_cls is None:
        return None
    return controller_cls(stage_params(state, model_params))
