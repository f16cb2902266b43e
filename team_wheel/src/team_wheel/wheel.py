import logging
import math
from importlib import resources as _resources
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .constants import TAU
from .frame import PointerFrame, get_frame

logger = logging.getLogger(__name__)


def normalize_angle(angle: float) -> float:
    """Fold any angle into [0, 2*pi)."""
    a = math.fmod(angle, TAU)
    if a < 0:
        a += TAU
    # A tiny negative remainder plus TAU can round up to TAU itself
    if a >= TAU:
        a = 0.0
    return a


def segment_index(rotation: float, count: int, frame: Optional[PointerFrame] = None) -> Optional[int]:
    """Return the index of the segment under the pointer, or None for an empty wheel."""
    if count <= 0:
        return None
    if frame is None:
        frame = get_frame()
    slice_angle = TAU / count
    # Rotating the wheel forward scans the original layout backward under a fixed pointer.
    layout_angle = normalize_angle(frame.sweep_sign * (frame.pointer_angle - rotation))
    return int(math.floor(layout_angle / slice_angle)) % count


def resolve_segment(rotation: float, labels: Sequence[str], frame: Optional[PointerFrame] = None) -> Optional[str]:
    """Return the label under the pointer for a settled wheel rotation.

    ``rotation`` must be the value the wheel came to rest at, not one sampled
    when the stop was requested. Returns None when ``labels`` is empty.
    """
    if not labels:
        logger.debug("No segments on the wheel; nothing selected")
        return None
    idx = segment_index(rotation, len(labels), frame)
    label = labels[idx]
    logger.debug("Rotation %.6f resolved to segment %d (%s)", rotation, idx, label)
    return label


def rotation_for_index(index: int, count: int, frame: Optional[PointerFrame] = None) -> float:
    """Rotation in [0, 2*pi) that centres segment ``index`` under the pointer."""
    if count < 1:
        raise ValueError(f"Wheel needs at least one segment, got {count}")
    if not 0 <= index < count:
        raise ValueError(f"Segment index {index} out of range for {count} segments")
    if frame is None:
        frame = get_frame()
    slice_angle = TAU / count
    return normalize_angle(frame.pointer_angle - frame.sweep_sign * (index + 0.5) * slice_angle)


def load_segments(path: Union[str, Path, None] = None) -> List[str]:
    """Read one label per line; defaults to the packaged assets/names.txt.

    Blank lines are skipped and surrounding whitespace is stripped.
    """
    if path is None:
        text = _resources.files("team_wheel").joinpath("assets").joinpath("names.txt").read_text(encoding="utf-8")
    else:
        text = Path(path).read_text(encoding="utf-8")
    lines = [ln.strip() for ln in text.splitlines()]
    return [ln for ln in lines if ln]
