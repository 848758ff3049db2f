"""Tests for pennypad config loading."""

import pytest

from pennypad.config import PennypadConfig, load_config
from pennypad.gestures.slider import NumberSlider
from pennypad.gestures.stepped import DEFAULT_STOPS, StopPoint


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("PENNYPAD_CURRENCY_SYMBOL", raising=False)


def _write(tmp_path, content: str):
    path = tmp_path / "pennypad.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_config_defaults():
    """Loading with no path returns all defaults."""
    config = load_config()
    assert isinstance(config, PennypadConfig)
    assert config.notes.title == "Shopping List"
    assert config.notes.currency_symbol == "$"
    assert config.slider.stops == list(DEFAULT_STOPS)
    assert config.slider.clamp_min is None
    assert config.slider.clamp_max is None
    assert config.slider.initial_value == 0
    assert config.tilt.width == 200
    assert config.tilt.max_tilt_deg == 15
    assert config.finance.intervals == [1, 5, 10, 20, 50, 100]
    assert config.finance.recent_limit == 10


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.notes.title == "Shopping List"


def test_load_config_from_toml(tmp_path):
    """Loading a valid TOML file populates config."""
    path = _write(
        tmp_path,
        """\
[notes]
title = "Groceries"
currency_symbol = "€"

[slider]
stops = [[30, 1], [90, 10]]
clamp_min = 0
clamp_max = 99
initial_value = 50

[tilt]
width = 300
max_tilt_deg = 10

[finance]
intervals = [1, 2, 5]
recent_limit = 5
""",
    )
    config = load_config(path)

    assert config.notes.title == "Groceries"
    assert config.notes.currency_symbol == "€"
    assert config.slider.stops == [StopPoint(30, 1), StopPoint(90, 10)]
    assert config.slider.clamp_min == 0
    assert config.slider.clamp_max == 99
    assert config.slider.initial_value == 50
    assert config.tilt.width == 300
    assert config.tilt.height == 60
    assert config.tilt.max_tilt_deg == 10
    assert config.finance.intervals == [1, 2, 5]
    assert config.finance.recent_limit == 5


def test_load_config_partial_toml(tmp_path):
    """Partial TOML uses defaults for missing sections."""
    path = _write(tmp_path, "[slider]\nclamp_max = 10\n")
    config = load_config(path)
    assert config.slider.clamp_max == 10
    assert config.slider.stops == list(DEFAULT_STOPS)
    assert config.notes.currency_symbol == "$"


def test_env_currency_symbol(monkeypatch):
    """Environment variable fills an unset currency symbol."""
    monkeypatch.setenv("PENNYPAD_CURRENCY_SYMBOL", "£")
    assert load_config().notes.currency_symbol == "£"


def test_file_currency_symbol_takes_precedence(monkeypatch, tmp_path):
    monkeypatch.setenv("PENNYPAD_CURRENCY_SYMBOL", "£")
    path = _write(tmp_path, '[notes]\ncurrency_symbol = "€"\n')
    assert load_config(path).notes.currency_symbol == "€"


def test_invalid_stops_rejected_when_built(tmp_path):
    path = _write(tmp_path, "[slider]\nstops = [[100, 1], [40, 5]]\n")
    config = load_config(path)
    with pytest.raises(ValueError):
        NumberSlider.from_config(config.slider)


@pytest.mark.parametrize("stops", ["[[40]]", "[[40, 1, 2]]", "[40]", '[["far", 1]]'])
def test_malformed_stop_pair_rejected(tmp_path, stops):
    path = _write(tmp_path, f"[slider]\nstops = {stops}\n")
    with pytest.raises(ValueError, match="distance, magnitude"):
        load_config(path)
