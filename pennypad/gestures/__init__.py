"""Gesture-driven controls: stepped slider mapping and tilt button."""

from .feedback import FeedbackIntensity, intensity_for_index
from .slider import NumberSlider
from .stepped import (
    DEFAULT_STOPS,
    GestureSession,
    StepResult,
    SteppedGestureMapper,
    StopPoint,
)
from .tilt import FLAT, TiltButton, TiltPose

__all__ = [
    "StopPoint",
    "DEFAULT_STOPS",
    "SteppedGestureMapper",
    "GestureSession",
    "StepResult",
    "FeedbackIntensity",
    "intensity_for_index",
    "NumberSlider",
    "TiltButton",
    "TiltPose",
    "FLAT",
]
