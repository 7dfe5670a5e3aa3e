"""
TeaLeaf - Physical state of one batch of tea leaves

This module defines the TeaLeaf state vector and the clamp/normalize
operations that keep it inside its physical domain.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass, asdict
from typing import Dict


MOISTURE_RANGE = (0.0, 1.0)
AROMA_RANGE = (0.0, 100.0)
COLOR_RANGE = (0.0, 100.0)


def clamp(v: float, min_v: float, max_v: float) -> float:
    """
    Clamp a value into [min_v, max_v].

    Args:
        v: Value to clamp
        min_v: Lower bound
        max_v: Upper bound

    Returns:
        v if inside the range, otherwise the nearer bound
    """
    return max(min_v, min(v, max_v))


@dataclass
class TeaLeaf:
    """
    State vector of one batch of tea leaves.

    Attributes:
        moisture: Moisture ratio [-], kept in [0.0, 1.0]
        temperature_c: Leaf temperature [°C], never clamped
        aroma: Aroma index [-], kept in [0, 100]
        color: Color index [-], kept in [0, 100]
    """
    moisture: float = 0.75
    temperature_c: float = 25.0
    aroma: float = 10.0
    color: float = 10.0

    def copy(self) -> "TeaLeaf":
        """Return an independent copy of this state."""
        return TeaLeaf(
            moisture=self.moisture,
            temperature_c=self.temperature_c,
            aroma=self.aroma,
            color=self.color,
        )

    def is_in_bounds(self) -> bool:
        """Check that moisture, aroma and color are inside their ranges."""
        return (
            MOISTURE_RANGE[0] <= self.moisture <= MOISTURE_RANGE[1]
            and AROMA_RANGE[0] <= self.aroma <= AROMA_RANGE[1]
            and COLOR_RANGE[0] <= self.color <= COLOR_RANGE[1]
        )

    def to_dict(self) -> Dict[str, float]:
        """Export state as a plain dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"TeaLeaf(moisture={self.moisture:.4f}, "
            f"T={self.temperature_c:.2f} °C, "
            f"aroma={self.aroma:.2f}, color={self.color:.2f})"
        )


def normalize(leaf: TeaLeaf) -> None:
    """
    Clamp the leaf state back into its domain, in place.

    Temperature is left untouched.

    Args:
        leaf: State vector to normalize
    """
    leaf.moisture = clamp(leaf.moisture, *MOISTURE_RANGE)
    leaf.aroma = clamp(leaf.aroma, *AROMA_RANGE)
    leaf.color = clamp(leaf.color, *COLOR_RANGE)
