"""Tools for mutation signature charts."""

from .chart import ChartBar, ChartPanel, ChartSpec, build_chart
from .normalize import to_proportions

__all__ = [
    "ChartBar",
    "ChartPanel",
    "ChartSpec",
    "build_chart",
    "to_proportions",
]
