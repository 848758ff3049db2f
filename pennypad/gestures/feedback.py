"""Tactile feedback intensity levels for stepped gestures."""

from __future__ import annotations

from enum import Enum


class FeedbackIntensity(Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


def intensity_for_index(index: int) -> FeedbackIntensity:
    """Map a triggered stop index to a feedback intensity.

    Index 0 is the lightest stop; every stop past the second is heavy.
    """
    if index < 0:
        raise ValueError(f"stop index must be >= 0, got {index}")
    if index == 0:
        return FeedbackIntensity.LIGHT
    if index == 1:
        return FeedbackIntensity.MEDIUM
    return FeedbackIntensity.HEAVY
