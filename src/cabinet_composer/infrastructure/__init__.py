"""Infrastructure layer - output formatting and export."""

from .formatters import JsonExporter, LayoutDiagramFormatter, LayoutSummaryFormatter

__all__ = [
    "JsonExporter",
    "LayoutDiagramFormatter",
    "LayoutSummaryFormatter",
]
