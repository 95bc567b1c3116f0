from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from csv_plotter.config.loader import load_app_settings, resolve_config_root
from csv_plotter.config.model import AppSettings
from csv_plotter.core.view_model import DataViewModel
from csv_plotter.services.environment import DashEnvironment
from csv_plotter.services.export_service import ExportService
from csv_plotter.services.session_store import SessionStore
from csv_plotter.ui.layout.build_layout import build_layout
from csv_plotter.ui.callbacks.callbacks_events import register_event_callbacks
from csv_plotter.ui.callbacks.callbacks_render import register_render_callbacks
from csv_plotter.ui.callbacks.callbacks_display import register_display_callbacks
from csv_plotter.ui.callbacks.callbacks_export import register_export_callbacks
from csv_plotter.views import build_view_registry

logger = logging.getLogger(__name__)


def build_context(config_root: Path, settings: AppSettings) -> AppConfig:
    environment = DashEnvironment()
    registry = build_view_registry()

    sessions = SessionStore(
        factory=lambda: DataViewModel(settings, environment=environment),
        limit=settings.session_limit,
    )
    export_service = ExportService(
        view_registry=registry,
        settings=settings,
        environment=environment,
    )

    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        sessions=sessions,
        registry=registry,
        export_service=export_service,
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Optional[Path | str] = None) -> Dash:
    # 1) Load Config
    root = Path(config_root) if config_root is not None else resolve_config_root()
    settings = load_app_settings(root)

    # 2) Services + app context
    ctx = build_context(root, settings)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title

    # Layout is a function so each page load gets its own session id
    def serve_layout():
        return build_layout(ctx)

    app.layout = serve_layout

    # Register callbacks
    register_event_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_display_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    logger.info("Dash app created", extra={"config_root": str(root), "ui_title": settings.ui_title})
    return app
