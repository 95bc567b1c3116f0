from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_PALETTE: Tuple[str, ...] = ("#8884d8", "#82ca9d", "#ffc658", "#ff8042", "#8dd1e1")


@dataclass(frozen=True)
class AppSettings:
    """
    Application-wide settings read from config/global.json.

    - chart_width: assumed rendered width in pixels, used for automatic tick spacing
    - chart_height: height of the main graph in pixels
    - max_points: row count above which the 'sampled' tick strategy downsamples
    - max_upload_bytes: largest accepted CSV upload
    - palette: series colours, cycled by column position
    - session_limit: how many browser sessions keep a view model in memory
    """
    ui_title: str = "CSV Plotter"
    subtitle: str = "Upload a CSV and chart it"
    chart_width: int = 800
    chart_height: int = 400
    max_points: int = 2000
    max_upload_bytes: int = 50_000_000
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    session_limit: int = 32

    def color_for(self, index: int) -> str:
        return self.palette[index % len(self.palette)]
