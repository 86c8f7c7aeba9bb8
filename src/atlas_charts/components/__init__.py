# src/atlas_charts/components/__init__.py
"""
Componentes configuráveis do Atlas Charts.

Tipos opacos de dados (sem renderização nem layout) instanciados pelo
builder: charts, eixos, séries, legenda, caption, padding e marker.
"""

from .axis import Axis, AxisLabel, AxisTick, CategoryAxis, NumberAxis
from .caption import Caption
from .chart import CartesianChart, Chart, PolarChart
from .legend import Legend
from .marker import Marker
from .padding import Padding
from .series import AreaSeries, BarSeries, ColumnSeries, LineSeries, PieSeries, ScatterSeries, Series

__all__ = [
    "AreaSeries",
    "Axis",
    "AxisLabel",
    "AxisTick",
    "BarSeries",
    "CartesianChart",
    "CategoryAxis",
    "Caption",
    "Chart",
    "ColumnSeries",
    "Legend",
    "LineSeries",
    "Marker",
    "NumberAxis",
    "Padding",
    "PieSeries",
    "PolarChart",
    "ScatterSeries",
    "Series",
]
