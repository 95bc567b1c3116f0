"""
Top-level package for the CSV plotter.

This package exposes the core architecture (data model, views, UI adapters).
Most code should import from submodules such as:
    csv_plotter.core
    csv_plotter.views
    csv_plotter.ui
"""

__all__: list[str] = []
