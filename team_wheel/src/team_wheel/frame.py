import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import POINTER_ANGLE_TOP, SWEEP_CLOCKWISE


class PointerFrame(BaseModel):
    """Where the pointer sits and which way the segments were drawn.

    ``pointer_angle`` is in radians, in the same convention the segments were
    drawn with. ``sweep`` is the direction segment 0, 1, 2... were laid out in,
    relative to the direction of positive rotation.
    """

    model_config = ConfigDict(frozen=True)

    pointer_angle: float = Field(default=POINTER_ANGLE_TOP, allow_inf_nan=False)
    sweep: Literal["clockwise", "counterclockwise"] = SWEEP_CLOCKWISE

    @property
    def sweep_sign(self) -> int:
        return 1 if self.sweep == SWEEP_CLOCKWISE else -1


@lru_cache(maxsize=1)
def get_frame() -> PointerFrame:
    raw_angle = os.environ.get("WHEEL_POINTER_ANGLE")
    sweep = os.environ.get("WHEEL_SWEEP", SWEEP_CLOCKWISE).strip().lower()
    angle = POINTER_ANGLE_TOP if raw_angle in (None, "") else float(raw_angle)
    return PointerFrame(pointer_angle=angle, sweep=sweep)
