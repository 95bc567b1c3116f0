from __future__ import annotations

import threading
import time

import pytest

from csv_plotter.config.model import AppSettings
from csv_plotter.core.view_model import DataViewModel
from csv_plotter.services.session_store import SessionStore


def _make_store(limit: int = 3):
    created = []

    def factory():
        model = DataViewModel(AppSettings())
        created.append(model)
        return model

    return SessionStore(factory, limit=limit), created


def test_get_or_create_reuses_models():
    store, created = _make_store()

    a = store.get_or_create("a")

    assert store.get_or_create("a") is a
    assert len(created) == 1
    assert "a" in store
    assert store.get("missing") is None


def test_least_recently_used_session_is_evicted():
    store, _ = _make_store(limit=2)
    a = store.get_or_create("a")
    store.get_or_create("b")

    # touching 'a' makes 'b' the oldest
    assert store["a"] is a
    store.get_or_create("c")

    assert set(store) == {"a", "c"}
    assert len(store) == 2


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        SessionStore(lambda: DataViewModel(AppSettings()), limit=0)


def test_concurrent_first_requests_share_one_model():
    created = []

    def slow_factory():
        time.sleep(0.02)
        model = DataViewModel(AppSettings())
        created.append(model)
        return model

    store = SessionStore(slow_factory, limit=4)
    results = []
    barrier = threading.Barrier(8)

    def first_request():
        barrier.wait()
        results.append(store.get_or_create("tab-1"))

    threads = [threading.Thread(target=first_request) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(created) == 1
    assert all(model is created[0] for model in results)
