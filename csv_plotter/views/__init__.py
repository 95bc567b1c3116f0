from .line_view import LineView
from .bar_view import BarView
from .area_view import AreaView
from .scatter_view import ScatterView
from .pie_view import PieView
from .view_registry import ViewRegistry

__all__ = ["LineView", "BarView", "AreaView", "ScatterView", "PieView", "ViewRegistry", "build_view_registry"]


def build_view_registry() -> ViewRegistry:
    registry = ViewRegistry()
    registry.register(LineView)
    registry.register(BarView)
    registry.register(AreaView)
    registry.register(ScatterView)
    registry.register(PieView)
    return registry
