# src/atlas_charts/components/caption.py
"""Título/subtítulo de um chart."""

from __future__ import annotations


class Caption:
    def __init__(self) -> None:
        self.enabled = True
        self.text = ""
        self.font_style = None
        self.font_weight = "bold"
        self.font_size = 14
        self.font_family = "Verdana, sans-serif"
        self.color = "black"
