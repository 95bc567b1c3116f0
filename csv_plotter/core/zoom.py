from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ZoomWindow:
    """
    Inclusive row-index range [start, end] over a dataset of `length` rows.

    0 <= start < end <= length - 1, except for a single-row dataset where the
    window is [0, 0]. All transitions return a new window; a transition that
    cannot keep the invariant returns the window unchanged.

    `history` holds the windows replaced by successive zoom-ins so that
    zoom_out can always re-cover the window it came from. It does not take
    part in equality.
    """
    start: int
    end: int
    length: int
    history: Tuple[Tuple[int, int], ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"ZoomWindow needs at least one row, got length={self.length}")
        last = self.length - 1
        if not (0 <= self.start <= self.end <= last):
            raise ValueError(f"Invalid zoom window [{self.start}, {self.end}] for length {self.length}")
        if self.start == self.end and last > 0:
            raise ValueError(f"Zoom window must span at least two rows, got [{self.start}, {self.end}]")

    @classmethod
    def full(cls, length: int) -> ZoomWindow:
        return cls(start=0, end=max(0, length - 1), length=length)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    @property
    def span(self) -> int:
        return self.end - self.start

    @property
    def can_zoom_in(self) -> bool:
        return self.span > 2

    @property
    def is_full(self) -> bool:
        return self.start == 0 and self.end == self.length - 1

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------
    def zoom_in(self) -> ZoomWindow:
        if not self.can_zoom_in:
            return self
        delta = math.ceil(self.span / 4)
        start, end = self.start + delta, self.end - delta
        if start >= end:
            return self
        return ZoomWindow(start, end, self.length, self.history + ((self.start, self.end),))

    def zoom_out(self) -> ZoomWindow:
        delta = math.ceil(self.span / 2)
        start = max(0, self.start - delta)
        end = min(self.length - 1, self.end + delta)

        history = self.history
        if history:
            prev_start, prev_end = history[-1]
            start, end = min(start, prev_start), max(end, prev_end)
            history = history[:-1]

        if (start, end) == (self.start, self.end) and history == self.history:
            return self
        return ZoomWindow(start, end, self.length, history)

    def reset(self) -> ZoomWindow:
        return ZoomWindow.full(self.length)

    # -------------------------------------------------------------------------
    # Serialisation
    # -------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "length": self.length,
            "history": [list(h) for h in self.history],
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[ZoomWindow]:
        if not data:
            return None
        return cls(
            start=int(data["start"]),
            end=int(data["end"]),
            length=int(data["length"]),
            history=tuple((int(s), int(e)) for s, e in data.get("history", [])),
        )
