# src/atlas_charts/components/chart.py
"""
Charts de nível raiz.

Charts são os únicos componentes cujo construtor consome configuração:
o `document` hospedeiro opcional. Ele não é uma propriedade do chart,
só pode ser informado na instanciação.

`legend` e `padding` são criados junto com o chart e reconfigurados no
lugar pelo builder.
"""

from __future__ import annotations

from typing import Any, List, Optional

from .caption import Caption
from .legend import Legend
from .padding import Padding


class Chart:
    def __init__(self, document: Any = None) -> None:
        self._document = document
        self.parent: Any = None
        self.data: List[Any] = []
        self.width = 800
        self.height = 400
        self.padding = Padding(20)
        self.title: Optional[Caption] = None
        self.subtitle: Optional[Caption] = None
        self.legend = Legend()
        self.series: List[Any] = []

    @property
    def host_document(self) -> Any:
        return self._document


class CartesianChart(Chart):
    def __init__(self, document: Any = None) -> None:
        super().__init__(document)
        self.axes: List[Any] = []


class PolarChart(Chart):
    pass
