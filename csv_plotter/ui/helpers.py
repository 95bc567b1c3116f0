from __future__ import annotations

from typing import List, Sequence

from dash import dash_table, html

from csv_plotter.core.dataset import Dataset
from csv_plotter.core.view_model import DataViewModel


def column_options(headers: Sequence[str]) -> List[dict]:
    """Checklist options for the Y columns (everything after the X column)."""
    return [{"label": c, "value": c} for c in headers[1:]]


def status_message(text: str, level: str = "ok") -> html.Span:
    """
    Inline status line. level is one of 'ok', 'warn', 'error'.
    """
    return html.Span(
        [
            html.Strong("Status: "),
            text,
        ],
        className=f"cp-status cp-status-{level}",
    )


def zoom_summary(model: DataViewModel) -> str:
    zoom = model.state.zoom
    if model.dataset is None or zoom is None:
        return ""
    if not model.zoom_enabled:
        return f"All {zoom.length} rows (zoom not used for pie charts)"
    return f"Rows {zoom.start + 1}–{zoom.end + 1} of {zoom.length}"


def preview_table(ds: Dataset, max_rows: int = 10):
    """
    Build a styled Dash DataTable showing the first rows of the dataset.
    """
    df = ds.to_frame().head(max_rows)

    return dash_table.DataTable(
        data=df.to_dict("records"),
        columns=[{"name": c, "id": c} for c in df.columns],

        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
            "backgroundColor": "transparent",
            "color": "inherit",
        },
        style_header={
            "fontWeight": "600",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },
        page_size=max_rows,
        filter_action="none",
    )
