from importlib import resources as _resources

from .constants import POINTER_ANGLE_TOP, TAU
from .frame import PointerFrame, get_frame
from .spin import (
    SettledSpin,
    SpinAlreadyConsumedError,
    SpinAlreadySettledError,
    SpinHandoff,
    SpinHandoffError,
    SpinNotSettledError,
    settled_rotation,
)
from .wheel import load_segments, normalize_angle, resolve_segment, rotation_for_index, segment_index

__all__ = [
    "data_path",
    "POINTER_ANGLE_TOP",
    "TAU",
    "PointerFrame",
    "get_frame",
    "normalize_angle",
    "segment_index",
    "resolve_segment",
    "rotation_for_index",
    "load_segments",
    "settled_rotation",
    "SettledSpin",
    "SpinHandoff",
    "SpinHandoffError",
    "SpinNotSettledError",
    "SpinAlreadySettledError",
    "SpinAlreadyConsumedError",
]

def data_path(filename: str) -> str:
    """Return a filesystem path to a packaged asset (e.g., assets/names.txt).

    Use for compatibility where APIs want a file path; for direct reads prefer
    load_segments() with no argument.
    """
    f = _resources.files("team_wheel").joinpath("assets").joinpath(filename)
    return str(f)
