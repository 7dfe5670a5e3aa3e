"""
Rolling Controller - Orchestration layer

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from typing import Optional

from tea_factory.core.process_state import ProcessState
from tea_factory.core.tea_leaf import TeaLeaf
from tea_factory.core.model_params import RollingParams
from tea_factory.modules.rolling.model import RollingModel, RollingResult


class RollingController:
    """Controller for the rolling stage."""

    state = ProcessState.ROLLING

    def __init__(self, params: Optional[RollingParams] = None):
        """Initialize controller with rolling model."""
        self.model = RollingModel(params)

    def apply_step(self, leaf: TeaLeaf, dt_seconds: float) -> RollingResult:
        """
        Apply one rolling step to the leaf.

        Args:
            leaf: State vector, updated in place
            dt_seconds: Step [s]

        Returns:
            RollingResult with diagnostics

        Raises:
            ValueError: If dt_seconds is not positive
        """
        if dt_seconds <= 0:
            raise ValueError(f"Time step must be positive, got {dt_seconds}")

        return self.model.apply_step(leaf, dt_seconds)

    def set_params(self, params: RollingParams) -> None:
        """Swap the stage coefficients."""
        self.model.params = params

    def get_configuration(self) -> dict:
        """Get current coefficients of the stage."""
        p = self.model.params
        return {
            "target_temp_c": p.target_temp_c,
            "cool_k": p.cool_k,
            "moisture_loss_k": p.moisture_loss_k,
            "aroma_gain_per_s": p.aroma_gain_per_s,
            "color_gain_per_s": p.color_gain_per_s,
        }
