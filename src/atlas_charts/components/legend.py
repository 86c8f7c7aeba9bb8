# src/atlas_charts/components/legend.py
"""
Legenda de chart.

`Legend.DEFAULTS` é a tabela publicada de opções reconhecidas e seus
valores padrão. O builder a consulta verbatim em `update`: toda opção
desta tabela é sobrescrita (pelo valor informado ou pelo default).
"""

from __future__ import annotations

from typing import Any, Dict


class Legend:
    DEFAULTS: Dict[str, Any] = {
        "enabled": True,
        "orientation": "vertical",
        "position": "bottom",
        "padding": 20,
        "item_padding_x": 16,
        "item_padding_y": 8,
        "marker_padding": 4,
        "marker_size": 14,
        "marker_stroke_width": 1,
        "label_color": "black",
        "label_font_style": None,
        "label_font_weight": None,
        "label_font_size": 12,
        "label_font_family": "Verdana, sans-serif",
    }

    def __init__(self) -> None:
        for key, value in self.DEFAULTS.items():
            setattr(self, key, value)

    def options(self) -> Dict[str, Any]:
        """Valores atuais das opções reconhecidas."""
        return {key: getattr(self, key) for key in self.DEFAULTS}
