from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from csv_plotter.config.model import AppSettings
from csv_plotter.services.export_service import ExportService
from csv_plotter.services.session_store import SessionStore
from csv_plotter.views.view_registry import ViewRegistry


@dataclass
class AppConfig:
    config_root: Path
    settings: AppSettings

    sessions: Optional[SessionStore] = None
    registry: Optional[ViewRegistry] = None
    export_service: Optional[ExportService] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.sessions is None:
            raise RuntimeError("AppConfig.sessions must be initialized.")
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.export_service is None:
            raise RuntimeError("AppConfig.export_service must be initialized.")
