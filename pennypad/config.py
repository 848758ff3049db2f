"""TOML configuration loader for pennypad."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .finance.interval import DEFAULT_INTERVALS
from .gestures.stepped import DEFAULT_STOPS, StopPoint


@dataclass
class NotesConfig:
    title: str = "Shopping List"
    currency_symbol: str = "$"


@dataclass
class SliderConfig:
    stops: list[StopPoint] = field(default_factory=lambda: list(DEFAULT_STOPS))
    clamp_min: float | None = None
    clamp_max: float | None = None
    initial_value: float = 0


@dataclass
class TiltConfig:
    width: float = 200
    height: float = 60
    max_tilt_deg: float = 15
    pressed_scale: float = 0.98


@dataclass
class FinanceConfig:
    intervals: list[float] = field(default_factory=lambda: list(DEFAULT_INTERVALS))
    recent_limit: int = 10


@dataclass
class PennypadConfig:
    notes: NotesConfig = field(default_factory=NotesConfig)
    slider: SliderConfig = field(default_factory=SliderConfig)
    tilt: TiltConfig = field(default_factory=TiltConfig)
    finance: FinanceConfig = field(default_factory=FinanceConfig)


def _parse_stop(entry) -> StopPoint:
    if (
        not isinstance(entry, list)
        or len(entry) != 2
        or not all(isinstance(v, (int, float)) for v in entry)
    ):
        raise ValueError(
            f"slider stop {entry!r} must be a [distance, magnitude] pair of numbers"
        )
    distance, magnitude = entry
    return StopPoint(float(distance), magnitude)


def load_config(path: str | Path | None = None) -> PennypadConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    PENNYPAD_CURRENCY_SYMBOL supplies the currency symbol when the file
    leaves it unset.

    Raises:
        ValueError: If a slider stop is not a [distance, magnitude] pair.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    nts = raw.get("notes", {})
    sld = raw.get("slider", {})
    tlt = raw.get("tilt", {})
    fin = raw.get("finance", {})

    # Resolve currency symbol: config file → environment variable → "$"
    currency_symbol = (
        nts.get("currency_symbol", "")
        or os.environ.get("PENNYPAD_CURRENCY_SYMBOL", "")
        or "$"
    )

    # Ordering and sign are validated when the mapper is built
    if "stops" in sld:
        stops = [_parse_stop(entry) for entry in sld["stops"]]
    else:
        stops = list(DEFAULT_STOPS)

    return PennypadConfig(
        notes=NotesConfig(
            title=nts.get("title", "Shopping List"),
            currency_symbol=currency_symbol,
        ),
        slider=SliderConfig(
            stops=stops,
            clamp_min=sld.get("clamp_min"),
            clamp_max=sld.get("clamp_max"),
            initial_value=sld.get("initial_value", 0),
        ),
        tilt=TiltConfig(
            width=tlt.get("width", 200),
            height=tlt.get("height", 60),
            max_tilt_deg=tlt.get("max_tilt_deg", 15),
            pressed_scale=tlt.get("pressed_scale", 0.98),
        ),
        finance=FinanceConfig(
            intervals=fin.get("intervals", list(DEFAULT_INTERVALS)),
            recent_limit=fin.get("recent_limit", 10),
        ),
    )
