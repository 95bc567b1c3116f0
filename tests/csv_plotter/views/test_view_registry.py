from __future__ import annotations

import pytest

from csv_plotter.config.model import AppSettings
from csv_plotter.core.state import ChartKind
from csv_plotter.views import LineView, build_view_registry
from csv_plotter.views.view_registry import ViewRegistry


def test_registry_covers_every_chart_kind():
    registry = build_view_registry()

    assert [cls.id for cls in registry.all_classes()] == ["line", "bar", "area", "scatter", "pie"]
    assert {cls.id for cls in registry.all_classes()} == {k.value for k in ChartKind}


def test_registry_creates_views_with_settings():
    settings = AppSettings()

    view = build_view_registry().create("line", settings)

    assert isinstance(view, LineView)
    assert view.settings is settings


def test_registry_rejects_unknown_and_duplicate_views():
    registry = ViewRegistry()
    registry.register(LineView)

    with pytest.raises(ValueError):
        registry.register(LineView)

    with pytest.raises(TypeError):
        registry.register(object)

    with pytest.raises(KeyError):
        registry.create("radar", AppSettings())
