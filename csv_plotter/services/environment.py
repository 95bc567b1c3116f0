from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from dash import dcc

LIGHT_TEMPLATE = "plotly_white"
DARK_TEMPLATE = "plotly_dark"


@dataclass(frozen=True)
class Theme:
    dark: bool
    root_class: str
    plotly_template: str
    toggle_label: str


def theme_for(dark: bool) -> Theme:
    if dark:
        return Theme(dark=True, root_class="cp-root dark", plotly_template=DARK_TEMPLATE, toggle_label="Light Mode")
    return Theme(dark=False, root_class="cp-root", plotly_template=LIGHT_TEMPLATE, toggle_label="Dark Mode")


class EnvironmentAdapter(ABC):
    """
    Side effects the core needs from its host: applying a colour theme and
    handing a file to the user. Keeps the view model free of Dash/DOM access.
    """

    @abstractmethod
    def apply_theme(self, dark: bool) -> Any:
        pass

    @abstractmethod
    def trigger_download(self, filename: str, data: bytes) -> Any:
        pass


class DashEnvironment(EnvironmentAdapter):
    """
    Dash implementation: theme changes become a Theme for the layout
    callbacks, downloads become dcc.Download payloads.
    """

    def apply_theme(self, dark: bool) -> Theme:
        return theme_for(dark)

    def trigger_download(self, filename: str, data: bytes) -> Dict[str, Any]:
        return dcc.send_bytes(data, filename)
