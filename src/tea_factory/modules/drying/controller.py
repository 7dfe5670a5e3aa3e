"""
Drying Controller - Orchestration layer

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from typing import Optional

from tea_factory.core.process_state import ProcessState
from tea_factory.core.tea_leaf import TeaLeaf
from tea_factory.core.model_params import DryingParams
from tea_factory.modules.drying.model import DryingModel, DryingResult


class DryingController:
    """Controller for the drying stage."""

    state = ProcessState.DRYING

    def __init__(self, params: Optional[DryingParams] = None):
        """Initialize controller with drying model."""
        self.model = DryingModel(params)

    def apply_step(self, leaf: TeaLeaf, dt_seconds: float) -> DryingResult:
        """
        Apply one drying step to the leaf.

        Args:
            leaf: State vector, updated in place
            dt_seconds: Step [s]

        Returns:
            DryingResult with diagnostics

        Raises:
            ValueError: If dt_seconds is not positive
        """
        if dt_seconds <= 0:
            raise ValueError(f"Time step must be positive, got {dt_seconds}")

        return self.model.apply_step(leaf, dt_seconds)

    def set_params(self, params: DryingParams) -> None:
        """Swap the stage coefficients."""
        self.model.params = params

    def get_configuration(self) -> dict:
        """Get current coefficients of the stage."""
        p = self.model.params
        return {
            "target_temp_c": p.target_temp_c,
            "temp_k": p.temp_k,
            "dry_k": p.dry_k,
            "aroma_recover_per_s": p.aroma_recover_per_s,
            "overheat_c": p.overheat_c,
            "aroma_damage_k": p.aroma_damage_k,
            "color_gain_per_s": p.color_gain_per_s,
        }
