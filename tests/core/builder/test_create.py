# tests/core/builder/test_create.py
"""
Testes do `create` do ChartBuilder.

Os testes asseguram que:
- o tipo do chart é inferido de forma determinística
- defaults do schema preenchem apenas o que está ausente ou falsy
- parâmetros de construtor nunca viram propriedades atribuídas
- tipos desconhecidos são omitidos sem exceção
- instâncias pré-existentes (legend, padding, marker) são reconfiguradas no lugar
- a configuração do chamador não é mutada
"""

import copy
from dataclasses import replace

import pytest

from atlas_charts.components import (
    AreaSeries,
    Caption,
    CartesianChart,
    CategoryAxis,
    ColumnSeries,
    LineSeries,
    NumberAxis,
    PieSeries,
    PolarChart,
    ScatterSeries,
)
from atlas_charts.core.builder import ChartBuilder, DropReason, DroppedNode, create
from atlas_charts.core.config import load_options
from atlas_charts.core.schema import ComponentDescriptor, ComponentKind, DescriptorGroup, SchemaRegistry


# -----------------------------
# Inferência de tipo
# -----------------------------

def test_root_defaults_to_cartesian(builder):
    chart = builder.create({})
    assert isinstance(chart, CartesianChart)


def test_root_inferred_from_first_series_type(builder):
    chart = builder.create({"series": [{"type": "pie", "angle_key": "share"}]})
    assert isinstance(chart, PolarChart)
    assert len(chart.series) == 1
    assert isinstance(chart.series[0], PieSeries)
    assert chart.series[0].angle_key == "share"


def test_root_inference_uses_only_first_series(builder):
    chart = builder.create({"series": [{"x_key": "a"}, {"type": "pie"}]})
    assert isinstance(chart, CartesianChart)


def test_unknown_first_series_type_falls_back_to_cartesian(builder):
    chart = builder.create({"series": [{"type": "unknownKind"}]})
    assert isinstance(chart, CartesianChart)
    assert chart.series == []


def test_type_inference_is_idempotent(builder):
    options = {"series": [{"type": "pie"}]}
    first = builder.create(options)
    second = builder.create(options)
    assert type(first) is type(second) is PolarChart


def test_series_type_defaults_per_chart_kind(builder):
    cartesian = builder.create({"type": "cartesian", "series": [{"x_key": "x", "y_key": "y"}]})
    polar = builder.create({"type": "polar", "series": [{"angle_key": "v"}]})

    assert isinstance(cartesian.series[0], LineSeries)
    assert cartesian.series[0].y_key == "y"
    assert isinstance(polar.series[0], PieSeries)


def test_all_cartesian_series_kinds(builder):
    chart = builder.create({
        "series": [{"type": t} for t in ("line", "column", "bar", "scatter", "area")],
    })
    kinds = [type(s).__name__ for s in chart.series]
    assert kinds == ["LineSeries", "ColumnSeries", "BarSeries", "ScatterSeries", "AreaSeries"]


# -----------------------------
# Defaults
# -----------------------------

def test_default_axes_applied_when_axes_omitted(builder):
    chart = builder.create({"type": "cartesian"})

    assert len(chart.axes) == 2
    bottom, left = chart.axes
    assert isinstance(bottom, CategoryAxis) and bottom.position == "bottom"
    assert isinstance(left, NumberAxis) and left.position == "left"


def test_default_axes_not_applied_when_axes_provided(builder):
    chart = builder.create({"axes": [{"type": "number", "position": "bottom"}]})

    assert len(chart.axes) == 1
    assert isinstance(chart.axes[0], NumberAxis)
    assert chart.axes[0].position == "bottom"


def test_falsy_axes_gets_defaults_but_empty_list_does_not(builder):
    assert len(builder.create({"axes": None}).axes) == 2
    assert builder.create({"axes": []}).axes == []


def test_schema_defaults_are_not_mutated(builder, registry):
    defaults = registry.resolve("cartesian").defaults
    snapshot = copy.deepcopy(dict(defaults))

    builder.create({"type": "cartesian"})
    builder.create({})

    assert dict(defaults) == snapshot


# -----------------------------
# Construtor
# -----------------------------

def test_constructor_param_passed_to_factory_not_assigned(builder):
    host = object()
    chart = builder.create({"type": "cartesian", "document": host})

    assert chart.host_document is host
    assert "document" not in vars(chart)


def test_constructor_param_omitted_when_undefined(builder):
    received = []

    class RecordingChart(CartesianChart):
        def __init__(self, *args):
            received.append(args)
            super().__init__(*args)

    reg = SchemaRegistry()
    reg.register_root(ComponentKind.CARTESIAN, replace(builder.registry.resolve("cartesian"), factory=RecordingChart))
    ChartBuilder(reg).create({"type": "cartesian", "document": None})

    assert received == [()]


# -----------------------------
# Propagação de propriedades
# -----------------------------

def test_full_cartesian_options(builder, cartesian_options):
    chart = builder.create(cartesian_options)

    assert chart.width == 640
    assert chart.data is cartesian_options["data"]
    assert isinstance(chart.title, Caption) and chart.title.text == "Revenue"
    assert chart.subtitle is None
    assert [type(s) for s in chart.series] == [LineSeries, ColumnSeries]
    assert chart.series[1].y_keys == ["revenue"]
    assert chart.legend.position == "right"
    assert not hasattr(chart, "type")


def test_excluded_keys_are_passthrough(builder):
    parent = {"id": "container"}
    chart = builder.create({"parent": parent, "data": [1, 2, 3]})
    assert chart.parent is parent
    assert chart.data == [1, 2, 3]


def test_unknown_keys_are_passthrough(builder):
    chart = builder.create({"width": 300, "custom_flag": {"nested": True}})
    assert chart.width == 300
    assert chart.custom_flag == {"nested": True}


def test_unknown_series_kind_is_silently_dropped(builder):
    chart = builder.create({"type": "cartesian", "series": [{"type": "unknownKind"}]})
    assert isinstance(chart, CartesianChart)
    assert chart.series == []


def test_dropped_elements_preserve_order_of_others(builder):
    chart = builder.create({
        "series": [{"type": "scatter"}, {"type": "pie"}, "oops", {"type": "area"}],
    })
    assert [type(s) for s in chart.series] == [ScatterSeries, AreaSeries]


def test_axis_without_type_is_dropped(builder):
    chart = builder.create({"axes": [{"position": "left"}, {"type": "category"}]})
    assert len(chart.axes) == 1
    assert isinstance(chart.axes[0], CategoryAxis)


def test_unknown_root_type_returns_none(builder):
    assert builder.create({"type": "radar"}) is None


@pytest.mark.parametrize("options", [None, 42, "cartesian", ["series"]])
def test_non_mapping_root_returns_none(builder, options):
    assert builder.create(options) is None


def test_non_mapping_child_is_ignored(builder):
    chart = builder.create({"title": "Revenue"})
    assert chart.title is None


# -----------------------------
# Reuso de instâncias existentes
# -----------------------------

def test_existing_legend_is_reconfigured_in_place(builder):
    chart = builder.create({"legend": {"position": "left", "marker_size": 10}})
    assert chart.legend.position == "left"
    assert chart.legend.marker_size == 10
    assert chart.legend.enabled is True


def test_legend_identity_preserved_across_reuse(builder):
    prebuilt = CartesianChart()
    legend = prebuilt.legend

    reg = SchemaRegistry()
    reg.register_root(
        ComponentKind.CARTESIAN,
        replace(builder.registry.resolve("cartesian"), factory=lambda *args: prebuilt),
    )
    chart = ChartBuilder(reg).create({"legend": {"position": "top"}})

    assert chart is prebuilt
    assert chart.legend is legend
    assert legend.position == "top"


def test_existing_padding_is_reconfigured(builder):
    chart = builder.create({"padding": {"top": 5, "left": 40}})
    assert chart.padding.top == 5
    assert chart.padding.left == 40
    assert chart.padding.right == 20


def test_reconfigure_only_children(builder):
    chart = builder.create({
        "series": [{"type": "line", "marker": {"size": 3, "shape": "square"}}],
        "axes": [{"type": "number", "label": {"rotation": 45}, "tick": {"count": 5}}],
    })

    marker = chart.series[0].marker
    assert (marker.size, marker.shape) == (3, "square")
    assert chart.axes[0].label.rotation == 45
    assert chart.axes[0].tick.count == 5


def test_reconfigure_only_child_without_instance_is_dropped(build_ctx):
    class BareLineSeries(LineSeries):
        def __init__(self):
            super().__init__()
            self.marker = None

    reg = SchemaRegistry()
    reg.register_root(
        ComponentKind.CARTESIAN,
        ComponentDescriptor(
            factory=CartesianChart,
            children={
                "series": DescriptorGroup(variants={
                    ComponentKind.LINE: ComponentDescriptor(
                        factory=BareLineSeries,
                        children={"marker": ComponentDescriptor()},
                    ),
                }),
            },
        ),
    )

    chart = ChartBuilder(reg).create({"series": [{"marker": {"size": 3}}]}, ctx=build_ctx)

    assert chart.series[0].marker is None
    assert build_ctx.dropped == [
        DroppedNode(path="cartesian.series.line.marker", reason=DropReason.NO_FACTORY),
    ]


def test_child_with_explicit_type_resolves_from_parent_path(builder):
    chart = builder.create({"title": {"type": "legend", "position": "top"}})
    # `cartesian` + `legend` → um Legend novo atribuído em `title`
    assert type(chart.title).__name__ == "Legend"
    assert chart.title.position == "top"


# -----------------------------
# Imutabilidade da configuração
# -----------------------------

def test_create_does_not_mutate_caller_options(builder, cartesian_options):
    options = {
        "series": [{"x_key": "month"}, {"type": "pie"}],
        "legend": {"position": "left"},
        "axes": None,
    }
    snapshot = copy.deepcopy(options)
    full_snapshot = copy.deepcopy(cartesian_options)

    builder.create(options)
    builder.create(cartesian_options)

    assert options == snapshot
    assert "type" not in options
    assert "type" not in options["series"][0]
    assert cartesian_options == full_snapshot


def test_module_level_create_uses_default_registry():
    chart = create({"series": [{"type": "bar"}]})
    assert isinstance(chart, CartesianChart)
    assert type(chart.series[0]).__name__ == "BarSeries"


# -----------------------------
# Chaves que não são strings
# -----------------------------

def test_non_string_keys_are_dropped(builder, build_ctx):
    chart = builder.create({"type": "cartesian", 1: "x", "width": 300}, ctx=build_ctx)

    assert isinstance(chart, CartesianChart)
    assert chart.width == 300
    assert build_ctx.dropped == [DroppedNode("cartesian", DropReason.INVALID_KEY, "1")]


def test_non_string_keys_in_nested_node_are_dropped(builder):
    chart = builder.create({"legend": {"position": "top", 2: "two"}, "series": [{(1, 2): "t"}]})

    assert chart.legend.position == "top"
    assert isinstance(chart.series[0], LineSeries)


def test_yaml_boolean_and_int_keys_are_dropped(tmp_path, builder, build_ctx):
    path = tmp_path / "chart.yaml"
    path.write_text("type: cartesian\non: hover\n1: one\nwidth: 500\n", encoding="utf-8")
    options = load_options(defaults_path=path)
    assert True in options and 1 in options

    chart = builder.create(options, ctx=build_ctx)

    assert isinstance(chart, CartesianChart)
    assert chart.width == 500
    assert [d.reason for d in build_ctx.dropped] == [DropReason.INVALID_KEY]
