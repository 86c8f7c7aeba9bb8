# src/atlas_charts/components/marker.py
from __future__ import annotations


class Marker:
    """Marcador de ponto de séries cartesianas (line, scatter, area)."""

    def __init__(self) -> None:
        self.enabled = True
        self.shape = "circle"
        self.size = 8
        self.fill = None
        self.stroke = None
        self.stroke_width = 1
