from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        SESSION_ID = "session-id"
        VIEW_STATE = "view-state"

    class Control:
        ROOT = "app-root"

        # Navbar
        THEME_TOGGLE = "theme-toggle"

        # Upload
        UPLOAD = "csv-upload"
        UPLOAD_STATUS = "upload-status"

        # Chart controls
        CONTROLS_CONTAINER = "controls-container"
        CHART_KIND_SELECT = "chart-kind-select"
        TICK_STRATEGY_SELECT = "tick-strategy-select"
        COLUMN_CHECKLIST = "column-checklist"

        # Zoom
        ZOOM_IN_BTN = "zoom-in-btn"
        ZOOM_OUT_BTN = "zoom-out-btn"
        ZOOM_RESET_BTN = "zoom-reset-btn"
        ZOOM_SUMMARY = "zoom-summary"

        # Graph + downloads
        MAIN_GRAPH = "main-graph"
        CHART_MESSAGE = "chart-message"
        EXPORT_BTN = "export-btn"
        EXPORT_FULL_BTN = "export-full-btn"
        EXPORT_STATUS = "export-status"
        DOWNLOAD_PNG = "download-png"

        # Dataset preview
        PREVIEW_CONTAINER = "preview-container"
        PREVIEW_SUMMARY = "preview-summary"
