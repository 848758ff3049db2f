"""Invisible number slider driven by horizontal drags."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .feedback import FeedbackIntensity
from .stepped import GestureSession, StepResult, SteppedGestureMapper

if TYPE_CHECKING:
    from ..config import SliderConfig

logger = logging.getLogger(__name__)


class NumberSlider:
    """A bare number adjusted by dragging left or right.

    Dragging right past each stop adds its magnitude once, dragging left
    subtracts it. ``on_feedback`` receives the intensity of every step so the
    UI can play a matching haptic; ``on_change`` receives the new value.
    """

    def __init__(
        self,
        value: float = 0,
        mapper: SteppedGestureMapper | None = None,
        on_change: Callable[[float], None] | None = None,
        on_feedback: Callable[[FeedbackIntensity], None] | None = None,
    ) -> None:
        self._value = value
        self._mapper = mapper or SteppedGestureMapper()
        self._on_change = on_change
        self._on_feedback = on_feedback
        self._session: GestureSession | None = None

    @classmethod
    def from_config(
        cls, config: SliderConfig, value: float | None = None, **kwargs
    ) -> NumberSlider:
        mapper = SteppedGestureMapper(
            stops=config.stops,
            clamp_min=config.clamp_min,
            clamp_max=config.clamp_max,
        )
        if value is None:
            value = config.initial_value
        return cls(value=value, mapper=mapper, **kwargs)

    @property
    def value(self) -> float:
        return self._value

    @property
    def dragging(self) -> bool:
        return self._session is not None

    def press(self) -> None:
        """Start a new gesture, discarding any unfinished one."""
        self._session = self._mapper.begin()

    def drag(self, translation: float) -> StepResult | None:
        """Feed the current horizontal translation of the gesture."""
        if self._session is None:
            self.press()

        result = self._session.on_drag_update(translation, self._value)
        if result is None:
            return None

        self._value = result.new_value
        logger.info(
            "Slider %+g -> %s (%s)",
            result.applied_delta,
            result.new_value,
            result.intensity.value,
        )
        if self._on_feedback is not None:
            self._on_feedback(result.intensity)
        if self._on_change is not None:
            self._on_change(result.new_value)
        return result

    def release(self) -> None:
        """End the gesture on finger lift or cancel."""
        if self._session is not None:
            self._session.on_drag_end()
            self._session = None

    cancel = release

    def replay(self, translations: list[float]) -> list[StepResult]:
        """Run one whole gesture through the slider and return its steps."""
        self.press()
        try:
            steps = [self.drag(t) for t in translations]
        finally:
            self.release()
        return [s for s in steps if s is not None]
