# src/atlas_charts/components/axis.py
"""Eixos de charts cartesianos."""

from __future__ import annotations

from typing import Any, List, Optional


class AxisLabel:
    def __init__(self) -> None:
        self.font_style = None
        self.font_weight = None
        self.font_size = 12
        self.font_family = "Verdana, sans-serif"
        self.padding = 5
        self.color = "rgba(87, 87, 87, 1)"
        self.rotation = 0


class AxisTick:
    def __init__(self) -> None:
        self.width = 1
        self.size = 6
        self.color = "rgba(195, 195, 195, 1)"
        self.count = 10


class Axis:
    """Base dos eixos; `label` e `tick` existem desde a construção."""

    def __init__(self) -> None:
        self.position: Optional[str] = None
        self.title: Any = None
        self.label = AxisLabel()
        self.tick = AxisTick()
        self.grid_style: List[Any] = []


class NumberAxis(Axis):
    def __init__(self) -> None:
        super().__init__()
        self.min: Optional[float] = None
        self.max: Optional[float] = None
        self.nice = True


class CategoryAxis(Axis):
    def __init__(self) -> None:
        super().__init__()
        self.padding_inner = 0.1
        self.padding_outer = 0.3
