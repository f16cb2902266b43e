import logging
import math
from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_EXTRA_SPINS, TAU
from .frame import PointerFrame
from .wheel import resolve_segment, rotation_for_index

logger = logging.getLogger(__name__)


class SpinHandoffError(RuntimeError):
    pass


class SpinNotSettledError(SpinHandoffError):
    pass


class SpinAlreadySettledError(SpinHandoffError):
    pass


class SpinAlreadyConsumedError(SpinHandoffError):
    pass


def settled_rotation(
    stop_rotation: float,
    target_index: int,
    count: int,
    extra_spins: int = DEFAULT_EXTRA_SPINS,
    frame: Optional[PointerFrame] = None,
) -> float:
    """Rotation the wheel comes to rest at after a stop request.

    The stop rotation is rounded up to a whole turn, ``extra_spins`` full
    turns are added, then the offset that centres ``target_index`` under the
    pointer. The result is never behind ``stop_rotation``.
    """
    if extra_spins < 0:
        raise ValueError(f"extra_spins must be >= 0, got {extra_spins}")
    offset = rotation_for_index(target_index, count, frame)
    base = math.ceil(stop_rotation / TAU) * TAU
    final = base + extra_spins * TAU + offset
    logger.debug(
        "Stop at %.6f settles at %.6f (segment %d of %d, %d extra spins)",
        stop_rotation, final, target_index, count, extra_spins,
    )
    return final


class SettledSpin(BaseModel):
    """Immutable snapshot of a wheel that has finished moving."""

    model_config = ConfigDict(frozen=True)

    rotation: float = Field(allow_inf_nan=False)
    labels: Tuple[str, ...]

    def selected(self, frame: Optional[PointerFrame] = None) -> Optional[str]:
        return resolve_segment(self.rotation, self.labels, frame)


class SpinHandoff:
    """One-shot channel from the animation's completion event to the resolver.

    The completion event calls ``complete`` exactly once with the rotation the
    wheel settled at; the consumer calls ``take`` exactly once. Reading before
    the wheel has settled is an error rather than a silently stale value.
    """

    def __init__(self) -> None:
        self._spin: Optional[SettledSpin] = None
        self._consumed = False

    @property
    def is_settled(self) -> bool:
        return self._spin is not None

    @property
    def is_consumed(self) -> bool:
        return self._consumed

    def complete(self, rotation: float, labels: Sequence[str]) -> SettledSpin:
        if self._spin is not None:
            logger.warning("Spin already settled at %.6f; rejecting second completion", self._spin.rotation)
            raise SpinAlreadySettledError("Spin has already settled")
        self._spin = SettledSpin(rotation=rotation, labels=tuple(labels))
        logger.debug("Spin settled at %.6f over %d segments", rotation, len(self._spin.labels))
        return self._spin

    def take(self) -> SettledSpin:
        if self._spin is None:
            logger.warning("Settled rotation requested before the spin finished")
            raise SpinNotSettledError("Spin has not settled yet")
        if self._consumed:
            logger.warning("Settled rotation requested twice")
            raise SpinAlreadyConsumedError("Settled spin was already consumed")
        self._consumed = True
        return self._spin
