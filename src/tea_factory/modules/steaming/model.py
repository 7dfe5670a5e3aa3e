"""
Steaming Model - Stage rule of the steaming process

Implements first-order heating towards the steam temperature, constant-rate
moisture uptake and saturating aroma/color growth.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass
from typing import Dict, Optional

from tea_factory.core.tea_leaf import TeaLeaf, normalize
from tea_factory.core.model_params import SteamingParams


@dataclass
class SteamingResult:
    """
    Result of one steaming step.

    Attributes:
        leaf: Updated state vector (same object that was passed in)
        dt_seconds: Applied step [s]
        flags: Diagnostic flags dictionary
    """
    leaf: TeaLeaf
    dt_seconds: float
    flags: Dict[str, bool]


class SteamingModel:
    """
    Physical model of the steaming stage.

    Temperature relaxes towards the steam temperature without overshoot
    as long as heat_k * dt < 1.
    """

    def __init__(self, params: Optional[SteamingParams] = None):
        """
        Initialize steaming model.

        Args:
            params: Stage coefficients (DEFAULT profile if omitted)
        """
        self.params = params if params is not None else SteamingParams()

    def apply_step(self, leaf: TeaLeaf, dt_seconds: float) -> SteamingResult:
        """
        Advance the leaf by one steaming step, in place.

        Args:
            leaf: State vector to update
            dt_seconds: Step [s] (> 0)

        Returns:
            SteamingResult with diagnostic flags
        """
        p = self.params
        dt = float(dt_seconds)

        leaf.temperature_c += (p.target_temp_c - leaf.temperature_c) * p.heat_k * dt
        leaf.moisture += p.moisture_gain_per_s * dt
        leaf.aroma += p.aroma_gain_per_s * dt * (1.0 - leaf.aroma / 100.0)
        leaf.color += p.color_gain_per_s * dt * (1.0 - leaf.color / 100.0)

        flags = {
            "moisture_saturated": leaf.moisture >= 1.0,
            "aroma_saturated": leaf.aroma >= 100.0,
        }

        normalize(leaf)

        return SteamingResult(leaf=leaf, dt_seconds=dt, flags=flags)
