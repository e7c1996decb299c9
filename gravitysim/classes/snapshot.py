# classes/snapshot.py

import threading
from typing import NamedTuple, Optional, Tuple


class RenderPoint(NamedTuple):
    render_x: float
    render_y: float
    speed: float
    bucket: str
    is_secondary: bool
    color: Optional[Tuple[int, int, int]] = None  # Fixed tint, if the particle has one
    vz: Optional[float] = None  # Line-of-sight velocity, lensed views only


class Snapshot(NamedTuple):
    """Read-only picture of one finished frame."""
    frame: int
    points: Tuple[RenderPoint, ...]
    active_count: int
    consumed_count: int  # Consumed during this frame
    total_consumed: int
    attractor: Tuple[float, float]

    def primary(self):
        return tuple(p for p in self.points if not p.is_secondary)

    def secondary(self):
        return tuple(p for p in self.points if p.is_secondary)


EMPTY_SNAPSHOT = Snapshot(frame=0, points=(), active_count=0, consumed_count=0,
                          total_consumed=0, attractor=(0.0, 0.0))


class SnapshotBuffer:
    """Hand-off point between the computation loop and a renderer.

    The writer builds a complete snapshot off to the side and publishes it by
    swapping a reference; the lock only guards that swap, never a whole frame.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._front = EMPTY_SNAPSHOT
        self._published = 0

    def publish(self, snapshot):
        with self._lock:
            self._front = snapshot
            self._published += 1

    def latest(self):
        with self._lock:
            return self._front

    @property
    def published(self):
        with self._lock:
            return self._published
