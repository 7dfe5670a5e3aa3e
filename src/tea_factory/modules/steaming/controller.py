"""
Steaming Controller - Orchestration layer

Validates step requests and delegates to the steaming model.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from typing import Optional

from tea_factory.core.process_state import ProcessState
from tea_factory.core.tea_leaf import TeaLeaf
from tea_factory.core.model_params import SteamingParams
from tea_factory.modules.steaming.model import SteamingModel, SteamingResult


class SteamingController:
    """
    Controller for the steaming stage.

    Orchestrates model execution without direct UI dependencies.
    """

    state = ProcessState.STEAMING

    def __init__(self, params: Optional[SteamingParams] = None):
        """Initialize controller with steaming model."""
        self.model = SteamingModel(params)

    def apply_step(self, leaf: TeaLeaf, dt_seconds: float) -> SteamingResult:
        """
        Apply one steaming step to the leaf.

        Args:
            leaf: State vector, updated in place
            dt_seconds: Step [s]

        Returns:
            SteamingResult with diagnostics

        Raises:
            ValueError: If dt_seconds is not positive
        """
        if dt_seconds <= 0:
            raise ValueError(f"Time step must be positive, got {dt_seconds}")

        return self.model.apply_step(leaf, dt_seconds)

    def set_params(self, params: SteamingParams) -> None:
        """Swap the stage coefficients."""
        self.model.params = params

    def get_configuration(self) -> dict:
        """
        Get current coefficients of the stage.

        Returns:
            Dictionary with coefficient values
        """
        p = self.model.params
        return {
            "target_temp_c": p.target_temp_c,
            "heat_k": p.heat_k,
            "moisture_gain_per_s": p.moisture_gain_per_s,
            "aroma_gain_per_s": p.aroma_gain_per_s,
            "color_gain_per_s": p.color_gain_per_s,
        }
