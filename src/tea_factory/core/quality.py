"""
Quality evaluator

Score and status of a tea batch computed from its state vector.
"""

from enum import Enum

from tea_factory.core.tea_leaf import clamp


GOOD_THRESHOLD = 80.0
OK_THRESHOLD = 60.0


class QualityStatus(str, Enum):
    """Three-way quality classification."""
    GOOD = "GOOD"
    OK = "OK"
    BAD = "BAD"

    def __str__(self) -> str:
        return self.value


def quality_score(moisture: float, aroma: float, color: float) -> float:
    """
    Compute the quality score of a batch.

    score = aroma * 0.4 + color * 0.4 + (1 - moisture) * 100 * 0.2,
    clamped to [0, 100].

    Args:
        moisture: Moisture ratio [-]
        aroma: Aroma index [-]
        color: Color index [-]

    Returns:
        Quality score in [0, 100]
    """
    score = aroma * 0.4 + color * 0.4 + (1.0 - moisture) * 100.0 * 0.2
    return clamp(score, 0.0, 100.0)


def quality_status(score: float) -> QualityStatus:
    """Classify a score; both thresholds are inclusive."""
    if score >= GOOD_THRESHOLD:
        return QualityStatus.GOOD
    if score >= OK_THRESHOLD:
        return QualityStatus.OK
    return QualityStatus.BAD
