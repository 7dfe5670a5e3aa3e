"""
Simulator Controller - Run control of the dashboard

Start/pause/reset state machine driving one or more independent batches
with wall-clock deltas.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import logging
from typing import Dict, List, Optional

from tea_factory.core.config import MAX_BATCHES, SimulationConfig
from tea_factory.core.model_params import ModelType
from tea_factory.modules.batch.model import TeaBatch


logger = logging.getLogger(__name__)


class SimulatorController:
    """Controller for interactive (continuous-time) runs."""

    def __init__(
        self,
        batch_count: int = 1,
        model_type: ModelType = ModelType.DEFAULT,
        config: Optional[SimulationConfig] = None,
    ):
        """
        Initialize controller in the stopped state.

        Args:
            batch_count: Number of batches driven together (1..MAX_BATCHES)
            model_type: Initial coefficient profile of every batch
            config: Stage durations (defaults: 30 s / 30 s / 60 s)

        Raises:
            ValueError: If batch_count is out of range
        """
        if not 1 <= batch_count <= MAX_BATCHES:
            raise ValueError(f"batch_count must be in [1, {MAX_BATCHES}], got {batch_count}")

        self.config = config if config is not None else SimulationConfig()
        self._model_type = model_type
        self._running = False
        self._batches: List[TeaBatch] = [
            TeaBatch(self.config, model_type) for _ in range(batch_count)
        ]

    def start(self) -> None:
        """Start running unless the primary batch has already finished."""
        if self.batch.is_finished:
            logger.debug("Start ignored: batch already finished")
            return
        self._running = True

    def pause(self) -> None:
        self._running = False

    def reset(self) -> None:
        """Stop and bring every batch back to its initial state."""
        self._running = False
        for batch in self._batches:
            batch.set_model(self._model_type)
            batch.reset()

    def update(self, delta_seconds: float) -> None:
        """
        Advance every unfinished batch while running.

        Running stops by itself once every batch has finished.

        Args:
            delta_seconds: Wall-clock time since the previous update [s]
        """
        if not self._running:
            return

        for batch in self._batches:
            if not batch.is_finished:
                batch.update(delta_seconds)

        if self.all_finished:
            self._running = False
            logger.info("All %d batch(es) finished", len(self._batches))

    def set_model(self, model_type: ModelType) -> bool:
        """
        Switch profile of every batch and reset them.

        Args:
            model_type: New profile

        Returns:
            False (and nothing changes) while running
        """
        if self._running:
            logger.debug("Profile change to %s rejected while running", model_type)
            return False

        self._model_type = model_type
        for batch in self._batches:
            batch.set_model(model_type)
            batch.reset()
        return True

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def batch(self) -> TeaBatch:
        """Primary batch."""
        return self._batches[0]

    @property
    def batches(self) -> List[TeaBatch]:
        return list(self._batches)

    @property
    def model_type(self) -> ModelType:
        return self._model_type

    @property
    def all_finished(self) -> bool:
        return all(batch.is_finished for batch in self._batches)

    def get_configuration(self) -> Dict:
        """Get current run settings for UI initialization."""
        return {
            "batch_count": len(self._batches),
            "model": self._model_type.value,
            "steaming_seconds": self.config.steaming_seconds,
            "rolling_seconds": self.config.rolling_seconds,
            "drying_seconds": self.config.drying_seconds,
        }
