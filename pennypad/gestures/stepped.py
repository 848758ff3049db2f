"""Stepped drag-to-value mapping with once-per-gesture stop points."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .feedback import FeedbackIntensity, intensity_for_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StopPoint:
    """A drag distance that, once reached, applies ``magnitude`` once."""

    distance: float
    magnitude: float


DEFAULT_STOPS: tuple[StopPoint, ...] = (
    StopPoint(40, 1),
    StopPoint(100, 5),
    StopPoint(180, 10),
)


@dataclass(frozen=True)
class StepResult:
    """A value change emitted when a gesture crosses a new stop point."""

    new_value: float
    triggered_index: int
    applied_delta: float  # after clamping

    @property
    def intensity(self) -> FeedbackIntensity:
        return intensity_for_index(self.triggered_index)


class SteppedGestureMapper:
    """Translates drag offsets into discrete value steps.

    The mapper only holds configuration. Per-gesture state lives in a
    :class:`GestureSession` obtained from :meth:`begin`, so two sliders on
    screen never share trigger state.
    """

    def __init__(
        self,
        stops: Sequence[StopPoint | tuple[float, float]] = DEFAULT_STOPS,
        clamp_min: float | None = None,
        clamp_max: float | None = None,
    ) -> None:
        self.configure(stops, clamp_min, clamp_max)

    def configure(
        self,
        stops: Sequence[StopPoint | tuple[float, float]],
        clamp_min: float | None = None,
        clamp_max: float | None = None,
    ) -> None:
        """Replace the stop points and clamp range.

        Raises:
            ValueError: If the stops are empty, not strictly ascending by
                distance, or have non-positive distances or magnitudes, or if
                ``clamp_min`` is greater than ``clamp_max``.
        """
        points = tuple(
            s if isinstance(s, StopPoint) else StopPoint(*s) for s in stops
        )
        if not points:
            raise ValueError("at least one stop point is required")

        previous = 0.0
        for i, point in enumerate(points):
            if point.distance <= 0:
                raise ValueError(
                    f"stop {i}: distance must be positive, got {point.distance}"
                )
            if point.magnitude <= 0:
                raise ValueError(
                    f"stop {i}: magnitude must be positive, got {point.magnitude}"
                )
            if point.distance <= previous:
                raise ValueError(
                    f"stop {i}: distances must be strictly ascending "
                    f"({point.distance} after {previous})"
                )
            previous = point.distance

        if clamp_min is not None and clamp_max is not None and clamp_min > clamp_max:
            raise ValueError(f"clamp_min {clamp_min} is greater than clamp_max {clamp_max}")

        self._stops = points
        self.clamp_min = clamp_min
        self.clamp_max = clamp_max
        logger.debug(
            "Configured %d stops, clamp [%s, %s]", len(points), clamp_min, clamp_max
        )

    @property
    def stops(self) -> tuple[StopPoint, ...]:
        return self._stops

    def stop_index(self, offset: float) -> int:
        """Highest stop index reached by ``offset`` in either direction, or -1."""
        distance = abs(offset)
        if not math.isfinite(distance):
            return -1
        index = -1
        for i, point in enumerate(self._stops):
            if distance < point.distance:
                break
            index = i
        return index

    def clamp(self, value: float) -> float:
        if self.clamp_min is not None and value < self.clamp_min:
            return self.clamp_min
        if self.clamp_max is not None and value > self.clamp_max:
            return self.clamp_max
        return value

    def begin(self) -> GestureSession:
        """Start tracking a new gesture."""
        return GestureSession(self)


class GestureSession:
    """Trigger state for one in-flight drag gesture.

    Callers must call :meth:`on_drag_end` exactly once when the finger lifts
    or the gesture is cancelled; a session that is never ended keeps
    suppressing the stops it has already fired.
    """

    def __init__(self, mapper: SteppedGestureMapper) -> None:
        self._mapper = mapper
        self.last_triggered_index = -1

    def on_drag_update(
        self, translation: float, current_value: float
    ) -> StepResult | None:
        """Feed one drag sample.

        Args:
            translation: Signed offset from the gesture origin along the axis.
            current_value: The value the step is applied to.

        Returns:
            A StepResult when a stop beyond the last triggered one is crossed
            and the clamped value actually changes, otherwise None.
        """
        sign = 1 if translation > 0 else -1
        index = self._mapper.stop_index(translation)

        # Reversing direction does not re-arm stops already fired.
        if index <= self.last_triggered_index:
            return None

        delta = sign * self._mapper.stops[index].magnitude
        new_value = self._mapper.clamp(current_value + delta)
        self.last_triggered_index = index

        if new_value == current_value:
            logger.debug("Stop %d absorbed by clamp at %s", index, current_value)
            return None

        logger.debug("Stop %d crossed: %s -> %s", index, current_value, new_value)
        return StepResult(
            new_value=new_value,
            triggered_index=index,
            applied_delta=new_value - current_value,
        )

    def on_drag_end(self) -> None:
        """Reset trigger state; the session may be reused for the next gesture."""
        self.last_triggered_index = -1
