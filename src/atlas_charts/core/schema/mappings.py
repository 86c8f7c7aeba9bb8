# src/atlas_charts/core/schema/mappings.py
"""
Schema padrão (v1): charts cartesian e polar.

Charts são a única exceção ao padrão "construtor sem parâmetros": se a
configuração trouxer `document`, ele é passado ao construtor do chart.

`parent` e `data` de um chart cartesiano são copiados como estão, sem
interpretação pelo schema.
"""

from __future__ import annotations

from typing import Dict

from atlas_charts.components import (
    AreaSeries,
    BarSeries,
    CartesianChart,
    Caption,
    CategoryAxis,
    ColumnSeries,
    Legend,
    LineSeries,
    NumberAxis,
    Padding,
    PieSeries,
    PolarChart,
    ScatterSeries,
)

from .registry import SchemaRegistry
from .types import ComponentDescriptor, ComponentKind, DescriptorGroup


def default_registry() -> SchemaRegistry:
    """Registry v1 com `cartesian` e `polar`, nesta ordem."""
    registry = SchemaRegistry()
    for kind, descriptor in _default_roots_v1().items():
        registry.register_root(kind, descriptor)
    return registry


def _reconfigure_only() -> ComponentDescriptor:
    # sem factory: só reconfigura a instância já criada pelo componente pai
    return ComponentDescriptor()


def _axis(factory) -> ComponentDescriptor:
    return ComponentDescriptor(
        factory=factory,
        children={"label": _reconfigure_only(), "tick": _reconfigure_only()},
    )


def _marker_series(factory) -> ComponentDescriptor:
    return ComponentDescriptor(factory=factory, children={"marker": _reconfigure_only()})


def _default_roots_v1() -> Dict[ComponentKind, ComponentDescriptor]:
    cartesian = ComponentDescriptor(
        factory=CartesianChart,
        constructor_params=("document",),
        exclude=frozenset({"parent", "data"}),
        defaults={
            "axes": [
                {"type": "category", "position": "bottom"},
                {"type": "number", "position": "left"},
            ],
        },
        children={
            "padding": ComponentDescriptor(factory=Padding),
            "title": ComponentDescriptor(factory=Caption),
            "subtitle": ComponentDescriptor(factory=Caption),
            "axes": DescriptorGroup(variants={
                ComponentKind.NUMBER: _axis(NumberAxis),
                ComponentKind.CATEGORY: _axis(CategoryAxis),
            }),
            "series": DescriptorGroup(variants={
                ComponentKind.LINE: _marker_series(LineSeries),
                ComponentKind.COLUMN: ComponentDescriptor(factory=ColumnSeries),
                ComponentKind.BAR: ComponentDescriptor(factory=BarSeries),
                ComponentKind.SCATTER: _marker_series(ScatterSeries),
                ComponentKind.AREA: _marker_series(AreaSeries),
            }),
            "legend": ComponentDescriptor(factory=Legend),
        },
    )

    polar = ComponentDescriptor(
        factory=PolarChart,
        constructor_params=("document",),
        children={
            "series": DescriptorGroup(variants={
                ComponentKind.PIE: ComponentDescriptor(factory=PieSeries),
            }),
            "legend": ComponentDescriptor(factory=Legend),
        },
    )

    return {
        ComponentKind.CARTESIAN: cartesian,
        ComponentKind.POLAR: polar,
    }
