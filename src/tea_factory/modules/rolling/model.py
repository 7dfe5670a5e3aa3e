"""
Rolling Model - Stage rule of the rolling process

Pressure and friction squeeze water out of the leaves while they cool
towards the rolling temperature; aroma and color keep developing.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import Dict, Optional

from tea_factory.core.tea_leaf import TeaLeaf, normalize
from tea_factory.core.model_params import RollingParams


@dataclass
class RollingResult:
    """
    Result of one rolling step.

    Attributes:
        leaf: Updated state vector (same object that was passed in)
        dt_seconds: Applied step [s]
        flags: Diagnostic flags dictionary
    """
    leaf: TeaLeaf
    dt_seconds: float
    flags: Dict[str, bool]


class RollingModel:
    """
    Physical model of the rolling stage.

    Moisture loss scales with the current moisture (0.4 + 0.6 * moisture);
    the 0.4 floor keeps the loss rate positive even for nearly dry leaves.
    """

    def __init__(self, params: Optional[RollingParams] = None):
        """
        Initialize rolling model.

        Args:
            params: Stage coefficients (DEFAULT profile if omitted)
        """
        self.params = params if params is not None else RollingParams()

    def apply_step(self, leaf: TeaLeaf, dt_seconds: float) -> RollingResult:
        """
        Advance the leaf by one rolling step, in place.

        Args:
            leaf: State vector to update
            dt_seconds: Step [s] (> 0)

        Returns:
            RollingResult with diagnostic flags
        """
        p = self.params
        dt = float(dt_seconds)

        leaf.temperature_c += (p.target_temp_c - leaf.temperature_c) * p.cool_k * dt
        leaf.moisture -= p.moisture_loss_k * dt * (0.4 + 0.6 * leaf.moisture)
        leaf.aroma += p.aroma_gain_per_s * dt * (1.0 - leaf.aroma / 100.0)
        leaf.color += p.color_gain_per_s * dt * (1.0 - leaf.color / 100.0)

        flags = {
            "moisture_depleted": leaf.moisture <= 0.0,
        }

        normalize(leaf)

        return RollingResult(leaf=leaf, dt_seconds=dt, flags=flags)
