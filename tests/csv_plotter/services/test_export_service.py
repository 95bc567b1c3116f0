from __future__ import annotations

import plotly.graph_objs as go
import pytest

from csv_plotter.config.model import AppSettings
from csv_plotter.core.exceptions import ExportError
from csv_plotter.core.view_model import DataViewModel
from csv_plotter.services.environment import EnvironmentAdapter
from csv_plotter.services.export_service import ExportService
from csv_plotter.views import build_view_registry

SETTINGS = AppSettings()


class _RecordingEnvironment(EnvironmentAdapter):
    def __init__(self):
        self.downloads = []

    def apply_theme(self, dark):
        return dark

    def trigger_download(self, filename, data):
        self.downloads.append((filename, data))
        return {"filename": filename}


@pytest.fixture()
def fake_png(monkeypatch):
    calls = []

    def _to_image(self, format=None, width=None, height=None, **kwargs):
        calls.append({"format": format, "width": width, "height": height, "n_traces": len(self.data)})
        return b"PNG-BYTES"

    monkeypatch.setattr(go.Figure, "to_image", _to_image)
    return calls


def _make_model(n_rows: int = 20) -> DataViewModel:
    model = DataViewModel(SETTINGS)
    rows = [{"x": str(i), "y": str(i * i)} for i in range(n_rows)]
    model.ingest(rows, ["x", "y"])
    return model


def _make_service(env=None) -> ExportService:
    return ExportService(
        view_registry=build_view_registry(),
        settings=SETTINGS,
        environment=env or _RecordingEnvironment(),
    )


def test_render_figure_uses_view_for_chart_kind():
    model = _make_model()
    model.set_chart_kind("bar")

    fig = _make_service().render_figure(model.export_request())

    assert isinstance(fig, go.Figure)
    assert fig.data[0].type == "bar"


def test_export_current_view(fake_png):
    env = _RecordingEnvironment()
    model = _make_model()
    model.zoom_in()

    result = _make_service(env).export(model)

    assert result == {"filename": "chart.png"}
    assert env.downloads == [("chart.png", b"PNG-BYTES")]
    assert fake_png[0]["format"] == "png"
    assert fake_png[0]["width"] == SETTINGS.chart_width
    assert fake_png[0]["height"] == SETTINGS.chart_height


def test_export_full_view_filename(fake_png):
    env = _RecordingEnvironment()
    model = _make_model()
    model.zoom_in()

    _make_service(env).export(model, full_view=True)

    assert env.downloads[0][0] == "full_chart.png"


def test_export_without_series_raises(fake_png):
    model = _make_model()
    model.toggle_column("y")

    with pytest.raises(ExportError, match="Select at least one column"):
        _make_service().export(model)

    assert fake_png == []


def test_image_conversion_failure_becomes_export_error(monkeypatch):
    def _broken(self, **kwargs):
        raise RuntimeError("kaleido missing")

    monkeypatch.setattr(go.Figure, "to_image", _broken)

    with pytest.raises(ExportError, match="chart.png"):
        _make_service().export(_make_model())
