"""Touch-position to 3D tilt mapping for a pressable button."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TiltPose:
    """Rotation (degrees) and scale to render the button with."""

    rotate_x: float = 0.0
    rotate_y: float = 0.0
    scale: float = 1.0


FLAT = TiltPose()


class TiltButton:
    """A button that tilts away from the point being touched.

    Touching the right half raises the left edge (negative Y rotation),
    touching the bottom half raises the top edge (positive X rotation).
    The centre stays flat.
    """

    def __init__(
        self,
        width: float = 200,
        height: float = 60,
        max_tilt_deg: float = 15,
        pressed_scale: float = 0.98,
        press_slop: float = 1.2,
        on_press: Callable[[], None] | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"button size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.max_tilt_deg = max_tilt_deg
        self.pressed_scale = pressed_scale
        self.press_slop = press_slop
        self._on_press = on_press

        self._pressed = False
        self._start = (0.0, 0.0)
        self._raw = np.zeros(2)

    @property
    def pressed(self) -> bool:
        return self._pressed

    def normalize(self, x: float, y: float) -> np.ndarray:
        """Offset of (x, y) from the centre, -1 at one edge and 1 at the other."""
        half = np.array([self.width / 2, self.height / 2])
        return (np.array([x, y], dtype=float) - half) / half

    def pose_for(self, nx: float, ny: float) -> TiltPose:
        """Rotation for a normalized touch point; values outside [-1, 1] clamp."""
        m = self.max_tilt_deg
        rotate_y = float(np.interp(nx, [-1, 0, 1], [m, 0, -m]))
        rotate_x = float(np.interp(ny, [-1, 0, 1], [-m, 0, m]))
        scale = self.pressed_scale if self._pressed else 1.0
        return TiltPose(rotate_x=rotate_x, rotate_y=rotate_y, scale=scale)

    def begin(self, x: float, y: float) -> TiltPose:
        """Finger down at (x, y) in button coordinates."""
        self._pressed = True
        self._start = (x, y)
        self._raw = self.normalize(x, y)
        return self._current_pose()

    def move(self, translation_x: float, translation_y: float) -> TiltPose:
        """Finger moved by a translation relative to where it went down."""
        x0, y0 = self._start
        self._raw = self.normalize(x0 + translation_x, y0 + translation_y)
        return self._current_pose()

    def end(self) -> TiltPose:
        """Finger lifted; fires ``on_press`` if it is still near the button."""
        inside = bool(np.all(np.abs(self._raw) <= self.press_slop))
        was_pressed = self._pressed
        self._reset()
        if was_pressed and inside and self._on_press is not None:
            logger.debug("Tilt button pressed")
            self._on_press()
        return FLAT

    def cancel(self) -> TiltPose:
        """Gesture cancelled; springs back without firing ``on_press``."""
        self._reset()
        return FLAT

    def _current_pose(self) -> TiltPose:
        nx, ny = np.clip(self._raw, -1.0, 1.0)
        return self.pose_for(nx, ny)

    def _reset(self) -> None:
        self._pressed = False
        self._raw = np.zeros(2)
