"""
Model Parameters - Coefficient sets of the stage rules

Defines the per-stage coefficient dataclasses and the three coefficient
profiles (DEFAULT, GENTLE, AGGRESSIVE).

GENTLE and AGGRESSIVE are derived from DEFAULT by one uniform factor on every
rate coefficient, so no coefficient is left at its DEFAULT value by mistake.
Target temperatures and the overheat threshold are never scaled.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass, field, replace
from enum import Enum


class ModelType(Enum):
    """Coefficient profile selector."""
    DEFAULT = "default"
    GENTLE = "gentle"
    AGGRESSIVE = "aggressive"

    def __str__(self) -> str:
        return self.value


# Uniform multiplier applied to every rate coefficient
MODEL_SCALE = {
    ModelType.DEFAULT: 1.0,
    ModelType.GENTLE: 0.75,
    ModelType.AGGRESSIVE: 1.25,
}


@dataclass(frozen=True)
class SteamingParams:
    """
    Steaming stage coefficients.

    Attributes:
        target_temp_c: Steam temperature the leaves relax towards [°C]
        heat_k: Heating relaxation rate [1/s]
        moisture_gain_per_s: Constant moisture uptake [1/s]
        aroma_gain_per_s: Saturating aroma growth rate [1/s]
        color_gain_per_s: Saturating color growth rate [1/s]
    """
    target_temp_c: float = 95.0
    heat_k: float = 0.08
    moisture_gain_per_s: float = 0.0008
    aroma_gain_per_s: float = 1.0
    color_gain_per_s: float = 0.2


@dataclass(frozen=True)
class RollingParams:
    """
    Rolling stage coefficients.

    Attributes:
        target_temp_c: Temperature the leaves cool towards [°C]
        cool_k: Cooling relaxation rate [1/s]
        moisture_loss_k: Moisture loss rate [1/s]
        aroma_gain_per_s: Saturating aroma growth rate [1/s]
        color_gain_per_s: Saturating color growth rate [1/s]
    """
    target_temp_c: float = 70.0
    cool_k: float = 0.05
    moisture_loss_k: float = 0.0015
    aroma_gain_per_s: float = 0.6
    color_gain_per_s: float = 0.3


@dataclass(frozen=True)
class DryingParams:
    """
    Drying stage coefficients.

    Attributes:
        target_temp_c: Dryer air temperature [°C]
        temp_k: Temperature relaxation rate [1/s]
        dry_k: Exponential moisture decay rate [1/s]
        aroma_recover_per_s: Saturating aroma recovery rate [1/s]
        overheat_c: Temperature above which aroma is damaged [°C]
        aroma_damage_k: Aroma damage per degree of overheat [1/(°C·s)]
        color_gain_per_s: Saturating color growth rate [1/s]
    """
    target_temp_c: float = 60.0
    temp_k: float = 0.07
    dry_k: float = 0.05
    aroma_recover_per_s: float = 0.2
    overheat_c: float = 70.0
    aroma_damage_k: float = 0.02
    color_gain_per_s: float = 0.15


@dataclass(frozen=True)
class ModelParams:
    """Bundle of the three stage coefficient sets."""
    steaming: SteamingParams = field(default_factory=SteamingParams)
    rolling: RollingParams = field(default_factory=RollingParams)
    drying: DryingParams = field(default_factory=DryingParams)


def make_model(model_type: ModelType = ModelType.DEFAULT) -> ModelParams:
    """
    Build the coefficient set of a profile.

    Args:
        model_type: Profile to build

    Returns:
        ModelParams with every rate coefficient scaled by the profile factor
    """
    base = ModelParams()
    if model_type == ModelType.DEFAULT:
        return base

    k = MODEL_SCALE[model_type]
    s, r, d = base.steaming, base.rolling, base.drying

    return ModelParams(
        steaming=replace(
            s,
            heat_k=s.heat_k * k,
            moisture_gain_per_s=s.moisture_gain_per_s * k,
            aroma_gain_per_s=s.aroma_gain_per_s * k,
            color_gain_per_s=s.color_gain_per_s * k,
        ),
        rolling=replace(
            r,
            cool_k=r.cool_k * k,
            moisture_loss_k=r.moisture_loss_k * k,
            aroma_gain_per_s=r.aroma_gain_per_s * k,
            color_gain_per_s=r.color_gain_per_s * k,
        ),
        drying=replace(
            d,
            temp_k=d.temp_k * k,
            dry_k=d.dry_k * k,
            aroma_recover_per_s=d.aroma_recover_per_s * k,
            aroma_damage_k=d.aroma_damage_k * k,
            color_gain_per_s=d.color_gain_per_s * k,
        ),
    )


def model_type_from_name(name: str) -> ModelType:
    """
    Look up a profile by its display name.

    Args:
        name: One of "default", "gentle", "aggressive" (case-insensitive)

    Returns:
        Matching ModelType

    Raises:
        ValueError: If the name is unknown
    """
    key = name.strip().lower()
    for model_type in ModelType:
        if model_type.value == key:
            return model_type
    valid = ", ".join(m.value for m in ModelType)
    raise ValueError(f"Invalid model: {name!r} (expected one of {valid})")
