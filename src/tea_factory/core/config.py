"""
Simulation configuration

Read-only run settings shared by the CLI runner and the dashboard.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from tea_factory.core.model_params import ModelType


# Upper bound for any duration or time step [s] (one day)
MAX_SECONDS = 24 * 60 * 60

MAX_BATCHES = 16


@dataclass
class SimulationConfig:
    """
    Run configuration of the pipeline.

    Attributes:
        dt_seconds: Time step requested by the driver [s]
        steaming_seconds: Steaming stage duration [s]
        rolling_seconds: Rolling stage duration [s]
        drying_seconds: Drying stage duration [s]
        model: Coefficient profile
        batch_count: Number of independent batches driven together
    """
    dt_seconds: int = 1
    steaming_seconds: int = 30
    rolling_seconds: int = 30
    drying_seconds: int = 60
    model: ModelType = ModelType.DEFAULT
    batch_count: int = 1

    @property
    def total_seconds(self) -> int:
        """Total pipeline duration [s]."""
        return self.steaming_seconds + self.rolling_seconds + self.drying_seconds

    def validate(self) -> None:
        """
        Check the configuration.

        Raises:
            ValueError: If a duration, the time step or the batch count
                is out of range
        """
        if not 0 < self.dt_seconds <= MAX_SECONDS:
            raise ValueError(f"dt_seconds must be in (0, {MAX_SECONDS}], got {self.dt_seconds}")

        for name in ("steaming_seconds", "rolling_seconds", "drying_seconds"):
            value = getattr(self, name)
            if not 0 < value <= MAX_SECONDS:
                raise ValueError(f"{name} must be in (0, {MAX_SECONDS}], got {value}")

        if not 1 <= self.batch_count <= MAX_BATCHES:
            raise ValueError(
                f"batch_count must be in [1, {MAX_BATCHES}], got {self.batch_count}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as a plain dictionary."""
        data = asdict(self)
        data["model"] = self.model.value
        return data
