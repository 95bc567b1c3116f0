from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock
from typing import Callable, Iterator, Mapping

from csv_plotter.core.view_model import DataViewModel

logger = logging.getLogger(__name__)


class SessionStore(Mapping[str, DataViewModel]):
    """
    In-memory DataViewModel per browser session.

    Implements the Mapping interface (dict-like) for lookups; `get_or_create`
    builds a view model on first use. The least recently used session is
    evicted once `limit` sessions are held.

    Dash serves callbacks from several threads, so every access to the
    underlying OrderedDict (lookups reorder it) happens under one lock.
    """

    def __init__(self, factory: Callable[[], DataViewModel], limit: int = 32):
        if limit < 1:
            raise ValueError(f"SessionStore limit must be >= 1, got {limit}")
        self._factory = factory
        self._limit = limit
        self._models: "OrderedDict[str, DataViewModel]" = OrderedDict()
        self._lock = RLock()

    def __getitem__(self, session_id: str) -> DataViewModel:
        with self._lock:
            model = self._models[session_id]
            self._models.move_to_end(session_id)
            return model

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._models))

    def __len__(self) -> int:
        return len(self._models)

    def get_or_create(self, session_id: str) -> DataViewModel:
        with self._lock:
            if session_id in self._models:
                return self[session_id]

            model = self._factory()
            self._models[session_id] = model

            while len(self._models) > self._limit:
                evicted, _ = self._models.popitem(last=False)
                logger.info("Evicted idle session", extra={"session_id": evicted})

            return model
