"""
Batch Controller - Fixed-step driver of one batch

Runs a TeaBatch from STEAMING to FINISHED with the configured time step,
as the CLI does.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

from typing import Callable, Dict, Optional

from tea_factory.core.config import SimulationConfig
from tea_factory.core.model_params import ModelType
from tea_factory.modules.batch.model import BatchSnapshot, TeaBatch


class BatchController:
    """Controller for a fixed-step batch run."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        model_type: Optional[ModelType] = None,
    ):
        """
        Initialize controller with a validated configuration.

        Args:
            config: Run configuration
            model_type: Profile override for this batch

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = config if config is not None else SimulationConfig()
        self.config.validate()
        self.batch = TeaBatch(self.config, model_type)
        self.steps_taken = 0

    def run(
        self,
        on_step: Optional[Callable[[BatchSnapshot], None]] = None,
    ) -> BatchSnapshot:
        """
        Run the batch from its initial state until FINISHED.

        Args:
            on_step: Called with a snapshot after every applied step

        Returns:
            Snapshot of the finished batch
        """
        self.batch.reset()
        self.steps_taken = 0

        while self.batch.step(self.config.dt_seconds):
            self.steps_taken += 1
            if on_step is not None:
                on_step(self.batch.snapshot())

        return self.batch.snapshot()

    def get_configuration(self) -> Dict:
        """Get the run configuration as a dictionary."""
        config = self.config.to_dict()
        config["model"] = self.batch.model_type.value
        return config
