# src/atlas_charts/components/series.py
"""Séries de charts cartesianos e polares."""

from __future__ import annotations

from typing import Any, List, Optional

from .marker import Marker


class Series:
    def __init__(self) -> None:
        self.data: List[Any] = []
        self.visible = True
        self.show_in_legend = True
        self.tooltip_enabled = True


class LineSeries(Series):
    def __init__(self) -> None:
        super().__init__()
        self.x_key = ""
        self.y_key = ""
        self.title: Optional[str] = None
        self.stroke = None
        self.stroke_width = 2
        self.marker = Marker()


class ScatterSeries(Series):
    def __init__(self) -> None:
        super().__init__()
        self.x_key = ""
        self.y_key = ""
        self.size_key: Optional[str] = None
        self.label_key: Optional[str] = None
        self.title: Optional[str] = None
        self.marker = Marker()


class AreaSeries(Series):
    def __init__(self) -> None:
        super().__init__()
        self.x_key = ""
        self.y_keys: List[str] = []
        self.y_names: List[str] = []
        self.normalized_to: Optional[float] = None
        self.fills: List[str] = []
        self.strokes: List[str] = []
        self.marker = Marker()


class ColumnSeries(Series):
    def __init__(self) -> None:
        super().__init__()
        self.x_key = ""
        self.y_keys: List[str] = []
        self.y_names: List[str] = []
        self.grouped = False
        self.normalized_to: Optional[float] = None
        self.fills: List[str] = []
        self.strokes: List[str] = []


class BarSeries(ColumnSeries):
    """Column series com orientação horizontal."""


class PieSeries(Series):
    def __init__(self) -> None:
        super().__init__()
        self.angle_key = ""
        self.radius_key: Optional[str] = None
        self.label_key: Optional[str] = None
        self.label_enabled = True
        self.inner_radius_offset = 0
        self.outer_radius_offset = 0
        self.fills: List[str] = []
        self.strokes: List[str] = []
