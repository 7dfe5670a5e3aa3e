"""
Drying Model - Stage rule of the drying process

Implements exponential moisture decay and overheat-dependent aroma damage.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass
import math
from typing import Dict, Optional

from tea_factory.core.tea_leaf import TeaLeaf, normalize
from tea_factory.core.model_params import DryingParams


@dataclass
class DryingResult:
    """
    Result of one drying step.

    Attributes:
        leaf: Updated state vector (same object that was passed in)
        dt_seconds: Applied step [s]
        aroma_delta: Aroma change before clamping [-]
        flags: Diagnostic flags dictionary
    """
    leaf: TeaLeaf
    dt_seconds: float
    aroma_delta: float
    flags: Dict[str, bool]


class DryingModel:
    """
    Physical model of the drying stage.

    Moisture follows m(t + dt) = m(t) * exp(-dry_k * dt): equal intervals
    remove a constant fraction of the remaining water. Above overheat_c the
    aroma is damaged in proportion to the overheat and its duration,
    otherwise it recovers with saturating growth.
    """

    def __init__(self, params: Optional[DryingParams] = None):
        """
        Initialize drying model.

        Args:
            params: Stage coefficients (DEFAULT profile if omitted)
        """
        self.params = params if params is not None else DryingParams()

    def apply_step(self, leaf: TeaLeaf, dt_seconds: float) -> DryingResult:
        """
        Advance the leaf by one drying step, in place.

        Args:
            leaf: State vector to update
            dt_seconds: Step [s] (> 0)

        Returns:
            DryingResult with diagnostic flags
        """
        p = self.params
        dt = float(dt_seconds)

        leaf.temperature_c += (p.target_temp_c - leaf.temperature_c) * p.temp_k * dt
        leaf.moisture *= math.exp(-p.dry_k * dt)

        # Overheat is judged on the temperature after relaxation
        overheat = leaf.temperature_c > p.overheat_c
        if overheat:
            aroma_delta = -p.aroma_damage_k * (leaf.temperature_c - p.overheat_c) * dt
        else:
            aroma_delta = p.aroma_recover_per_s * dt * (1.0 - leaf.aroma / 100.0)
        leaf.aroma += aroma_delta

        leaf.color += p.color_gain_per_s * dt * (1.0 - leaf.color / 100.0)

        flags = {
            "overheat": overheat,
            "moisture_depleted": leaf.moisture <= 0.0,
        }

        normalize(leaf)

        return DryingResult(
            leaf=leaf,
            dt_seconds=dt,
            aroma_delta=aroma_delta,
            flags=flags,
        )
