from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Sequence

import dash
from dash import Input, Output, State

from csv_plotter.core.exceptions import CsvParseError, IngestionError
from csv_plotter.core.parsing import decode_upload_contents, parse_csv
from csv_plotter.core.view_model import DataViewModel
from csv_plotter.ui.helpers import column_options, status_message
from csv_plotter.ui.ids import IDs

if TYPE_CHECKING:
    from csv_plotter.ui.config import AppConfig

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Pure helpers (no Dash context), one per kind of event
# -----------------------------------------------------------------------------
def handle_upload(ctx: AppConfig, model: DataViewModel, contents: str, filename: str):
    """
    Decode, parse and ingest one upload into the model.

    Parse failures keep the current dataset; ingestion failures (no header,
    no rows) clear it. Returns the status line for the upload panel.
    """
    token = model.begin_upload()
    safe_name = Path(filename).name

    try:
        if not safe_name.lower().endswith(".csv"):
            raise CsvParseError(f"Unsupported file type for '{safe_name}'. Please upload a .csv file.")

        decoded = decode_upload_contents(contents)
        if len(decoded) > ctx.settings.max_upload_bytes:
            raise CsvParseError(
                f"File '{safe_name}' exceeds the {ctx.settings.max_upload_bytes:,} byte limit."
            )

        parsed = parse_csv(decoded)
    except CsvParseError as e:
        model.fail_upload(token, e)
        return status_message(str(e), "error")

    try:
        applied = model.complete_upload(token, parsed, name=Path(safe_name).stem)
    except IngestionError as e:
        return status_message(
            f"Could not load '{safe_name}': " + " ".join(i.message for i in e.issues),
            "error",
        )

    if not applied:
        return dash.no_update

    ds = model.dataset
    return status_message(f"Loaded '{safe_name}': {len(ds)} rows · {len(ds.headers)} columns.")


def sync_checked_columns(model: DataViewModel, checked: Optional[Sequence[str]]) -> None:
    """
    Translate the checklist's full value into column toggles: every column
    whose checked state differs from the model is toggled once.
    """
    checked_set = set(checked or [])
    selected = set(model.state.selected_columns)
    for column in model.state.headers[1:]:
        if (column in checked_set) != (column in selected):
            model.toggle_column(column)


def apply_control_event(model: DataViewModel, triggered_id: Optional[str], values: dict[str, Any]) -> None:
    """Apply the control event named by triggered_id to the model."""
    if triggered_id == IDs.Control.COLUMN_CHECKLIST:
        sync_checked_columns(model, values.get("columns"))
    elif triggered_id == IDs.Control.CHART_KIND_SELECT and values.get("chart_kind"):
        model.set_chart_kind(values["chart_kind"])
    elif triggered_id == IDs.Control.TICK_STRATEGY_SELECT and values.get("tick_strategy"):
        model.set_tick_strategy(values["tick_strategy"])
    elif triggered_id == IDs.Control.ZOOM_IN_BTN:
        model.zoom_in()
    elif triggered_id == IDs.Control.ZOOM_OUT_BTN:
        model.zoom_out()
    elif triggered_id == IDs.Control.ZOOM_RESET_BTN:
        model.reset_zoom()
    elif triggered_id == IDs.Control.THEME_TOGGLE:
        model.toggle_dark_mode()
    else:
        logger.debug("Ignoring unknown control event", extra={"triggered_id": triggered_id})


def register_event_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Every user event -> view model -> published ViewState
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Output(IDs.Control.COLUMN_CHECKLIST, "options"),
        Output(IDs.Control.COLUMN_CHECKLIST, "value"),
        Output(IDs.Control.CHART_KIND_SELECT, "value"),
        Output(IDs.Control.TICK_STRATEGY_SELECT, "value"),
        Output(IDs.Control.UPLOAD_STATUS, "children"),
        Input(IDs.Control.UPLOAD, "contents"),
        Input(IDs.Control.COLUMN_CHECKLIST, "value"),
        Input(IDs.Control.CHART_KIND_SELECT, "value"),
        Input(IDs.Control.TICK_STRATEGY_SELECT, "value"),
        Input(IDs.Control.ZOOM_IN_BTN, "n_clicks"),
        Input(IDs.Control.ZOOM_OUT_BTN, "n_clicks"),
        Input(IDs.Control.ZOOM_RESET_BTN, "n_clicks"),
        Input(IDs.Control.THEME_TOGGLE, "n_clicks"),
        State(IDs.Control.UPLOAD, "filename"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def handle_event(
            contents, checked, chart_kind, tick_strategy,
            _zoom_in, _zoom_out, _zoom_reset, _theme,
            filename, session_id,
    ):
        if not session_id:
            raise dash.exceptions.PreventUpdate

        triggered_id = dash.ctx.triggered_id
        model = ctx.sessions.get_or_create(session_id)

        upload_status = dash.no_update
        if triggered_id == IDs.Control.UPLOAD:
            if not contents or not filename:
                raise dash.exceptions.PreventUpdate
            upload_status = handle_upload(ctx, model, contents, filename)
        else:
            apply_control_event(
                model,
                triggered_id,
                {"columns": checked, "chart_kind": chart_kind, "tick_strategy": tick_strategy},
            )

        state = model.state
        return (
            state.to_dict(),
            column_options(state.headers),
            list(state.selected_columns),
            state.chart_kind.value,
            state.tick_strategy.value,
            upload_status,
        )
