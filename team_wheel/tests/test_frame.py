import math

import pytest
from pydantic import ValidationError

from team_wheel.constants import POINTER_ANGLE_TOP
from team_wheel.frame import PointerFrame, get_frame
from team_wheel.wheel import resolve_segment


def test_default_frame_is_twelve_oclock_clockwise():
    frame = get_frame()
    assert frame.pointer_angle == POINTER_ANGLE_TOP == -math.pi / 2
    assert frame.sweep == "clockwise"
    assert frame.sweep_sign == 1


def test_frame_is_cached():
    assert get_frame() is get_frame()


def test_frame_from_environment(monkeypatch):
    monkeypatch.setenv("WHEEL_POINTER_ANGLE", "0")
    monkeypatch.setenv("WHEEL_SWEEP", " CounterClockwise ")
    get_frame.cache_clear()
    frame = get_frame()
    assert frame.pointer_angle == 0.0
    assert frame.sweep == "counterclockwise"
    assert frame.sweep_sign == -1


def test_resolver_uses_configured_frame(monkeypatch, four_labels):
    monkeypatch.setenv("WHEEL_SWEEP", "counterclockwise")
    get_frame.cache_clear()
    assert resolve_segment(0.0, four_labels) == "B"


def test_unknown_sweep_is_rejected(monkeypatch):
    monkeypatch.setenv("WHEEL_SWEEP", "sideways")
    get_frame.cache_clear()
    with pytest.raises(ValidationError):
        get_frame()


def test_bad_pointer_angle_is_rejected(monkeypatch):
    monkeypatch.setenv("WHEEL_POINTER_ANGLE", "nan")
    get_frame.cache_clear()
    with pytest.raises(ValidationError):
        get_frame()

    monkeypatch.setenv("WHEEL_POINTER_ANGLE", "twelve")
    get_frame.cache_clear()
    with pytest.raises(ValueError):
        get_frame()


def test_frame_is_frozen():
    frame = PointerFrame()
    with pytest.raises(ValidationError):
        frame.sweep = "counterclockwise"
