# src/atlas_charts/components/padding.py
"""Espaçamento interno (estilo CSS: top, right, bottom, left)."""

from __future__ import annotations


class Padding:
    def __init__(self, top: float = 0, right: float | None = None, bottom: float | None = None, left: float | None = None):
        self.top = top
        self.right = top if right is None else right
        self.bottom = top if bottom is None else bottom
        self.left = self.right if left is None else left

    def __repr__(self) -> str:  # pragma: no cover
        return f"Padding({self.top}, {self.right}, {self.bottom}, {self.left})"
