# src/atlas_charts/core/builder/engine.py
"""
Builder canônico de grafos de componentes (create / update).

Este módulo percorre uma árvore de configuração declarativa em paralelo
com o `SchemaRegistry`, produzindo (create) ou reconciliando (update) uma
árvore de instâncias de componentes com o mesmo formato.

Algoritmo de `create`, por nó:
    1. Inferência de `type` (chart raiz e séries sem tipo)
    2. Extensão do path com o `type` do nó
    3. Resolução do descritor no registry
    4. Merge raso de defaults (ausente ou falsy → default)
    5. Instanciação via factory ou reuso de instância existente
    6. Propagação de propriedades (filhos do schema ou passthrough)

Política de falhas:
    - Tipos/paths desconhecidos não levantam exceção: a subárvore é omitida
    - Nós que não são mapeamentos são tratados como ausentes
    - Chaves que não são strings são omitidas
    - Omissões são reportadas apenas ao `BuildContext`, se fornecido
    - Exceções levantadas por factories são propagadas

Decisões arquiteturais:
    - Cada nó de configuração é copiado (shallow) antes de qualquer escrita;
      a configuração do chamador nunca é mutada
    - Valores de `defaults` são compartilhados por referência (sem deepcopy)
    - `update` só reconcilia `legend`; demais filhos exigem novo `create`

Limites explícitos:
    - Não valida valores (faixas numéricas, cores etc.)
    - Não renderiza nem calcula layout
    - Não mantém estado entre chamadas
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from atlas_charts.core.schema import ComponentDescriptor, ComponentKind, SchemaRegistry, default_registry
from atlas_charts.core.schema.registry import SERIES_KEY

from .context import BuildContext, DropReason


TYPE_KEY = "type"
LEGEND_KEY = "legend"

DEFAULT_CHART_KIND = ComponentKind.CARTESIAN

_DEFAULT_SERIES_KINDS: Dict[str, ComponentKind] = {
    f"{ComponentKind.CARTESIAN.value}.{SERIES_KEY}": ComponentKind.LINE,
    f"{ComponentKind.POLAR.value}.{SERIES_KEY}": ComponentKind.PIE,
}

_PRIMITIVES = (str, bytes, int, float, bool, list, tuple, dict, set, frozenset)


def _is_falsy(value: Any) -> bool:
    """
    Falsy no sentido da configuração declarativa: None, False, zero, NaN e "".

    Listas e dicts vazios são valores presentes.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _type_name(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _is_component(value: Any) -> bool:
    return value is not None and not isinstance(value, _PRIMITIVES)


def _drop(ctx: Optional[BuildContext], path: Optional[str], reason: DropReason, kind: Any = None) -> None:
    if ctx is not None:
        ctx.drop(path=path, reason=reason, kind=None if kind is None else _type_name(kind))


class ChartBuilder:
    """Engine de create/update sobre um `SchemaRegistry` somente leitura."""

    def __init__(self, registry: Optional[SchemaRegistry] = None):
        self.registry: SchemaRegistry = registry if registry is not None else default_registry()

    # ------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------
    def create(self, options: Mapping[str, Any], *, ctx: Optional[BuildContext] = None) -> Any:
        """
        Constrói a árvore de componentes descrita por `options`.

        Retorna None quando o nó raiz não resolve para nenhum descritor.
        """
        return self._create(options, None, None, ctx)

    def update(self, component: Any, options: Mapping[str, Any], *, ctx: Optional[BuildContext] = None) -> None:
        """
        Reconcilia `component` com `options`.

        Apenas a legenda é reconciliada: toda opção reconhecida recebe o
        valor informado ou volta ao seu default.
        """
        self._update(component, options, None, ctx)

    # ------------------------------------------------------------------
    # Tipo, path e defaults
    # ------------------------------------------------------------------
    def _set_chart_type(self, options: Dict[str, Any]) -> None:
        if not _is_falsy(options.get(TYPE_KEY)):
            return

        series = options.get(SERIES_KEY)
        first = series[0] if isinstance(series, (list, tuple)) and series else None
        if isinstance(first, Mapping) and not _is_falsy(first.get(TYPE_KEY)):
            kind = self.registry.infer_root_kind(first[TYPE_KEY])
            if kind is not None:
                options[TYPE_KEY] = kind.value

        if _is_falsy(options.get(TYPE_KEY)):
            options[TYPE_KEY] = DEFAULT_CHART_KIND.value

    def _set_component_type(self, options: Dict[str, Any], path: Optional[str]) -> None:
        if path is None:
            self._set_chart_type(options)

        default_kind = _DEFAULT_SERIES_KINDS.get(path or "")
        if default_kind is not None and _is_falsy(options.get(TYPE_KEY)):
            options[TYPE_KEY] = default_kind.value

    @staticmethod
    def _extend_path(options: Mapping[str, Any], path: Optional[str]) -> Optional[str]:
        node_type = options.get(TYPE_KEY)
        if path:
            if not _is_falsy(node_type):
                return f"{path}.{_type_name(node_type)}"
            return path
        if _is_falsy(node_type):
            return None
        return _type_name(node_type)

    @staticmethod
    def _apply_defaults(options: Dict[str, Any], descriptor: ComponentDescriptor) -> None:
        for key, value in descriptor.defaults.items():
            if _is_falsy(options.get(key)):
                options[key] = value

    def _prepare(
        self,
        options: Any,
        path: Optional[str],
        ctx: Optional[BuildContext],
    ) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
        """Copia o nó, infere `type` e estende o path. Retorna (options, path) ou (None, path)."""
        if not isinstance(options, Mapping):
            _drop(ctx, path, DropReason.NOT_A_MAPPING)
            return None, path

        options = dict(options)
        self._set_component_type(options, path)
        return options, self._extend_path(options, path)

    # ------------------------------------------------------------------
    # create
    # ------------------------------------------------------------------
    def _create(
        self,
        options: Any,
        path: Optional[str],
        component: Any,
        ctx: Optional[BuildContext],
    ) -> Any:
        options, path = self._prepare(options, path, ctx)
        if options is None:
            return None

        descriptor = self.registry.resolve(path)
        if descriptor is None:
            _drop(ctx, path, DropReason.UNKNOWN_PATH, options.get(TYPE_KEY))
            return None

        self._apply_defaults(options, descriptor)

        if component is None:
            if descriptor.factory is None:
                _drop(ctx, path, DropReason.NO_FACTORY, options.get(TYPE_KEY))
                return None
            args = [options[p] for p in descriptor.constructor_params if options.get(p) is not None]
            component = descriptor.factory(*args)
            if ctx is not None:
                ctx.log(path=path, level="DEBUG", message="component created", component=type(component).__name__)
        elif ctx is not None:
            ctx.log(path=path, level="DEBUG", message="component reused", component=type(component).__name__)

        for key, value in options.items():
            if not isinstance(key, str):
                _drop(ctx, path, DropReason.INVALID_KEY, key)
                continue

            if key == TYPE_KEY or key in descriptor.constructor_params:
                continue

            if not descriptor.is_schema_child(key):
                setattr(component, key, value)
                continue

            child_path = f"{path}.{key}"

            if isinstance(value, (list, tuple)):
                children: List[Any] = []
                for item in value:
                    child = self._create(item, child_path, None, ctx)
                    if child is not None:
                        children.append(child)
                setattr(component, key, children)
                continue

            existing = getattr(component, key, None)
            if _is_component(existing):
                self._create(value, child_path, existing, ctx)
                continue

            has_own_type = isinstance(value, Mapping) and not _is_falsy(value.get(TYPE_KEY))
            child = self._create(value, path if has_own_type else child_path, None, ctx)
            if child is not None:
                setattr(component, key, child)

        return component

    # ------------------------------------------------------------------
    # update
    # ------------------------------------------------------------------
    def _update(
        self,
        component: Any,
        options: Any,
        path: Optional[str],
        ctx: Optional[BuildContext],
    ) -> None:
        options, path = self._prepare(options, path, ctx)
        if options is None:
            return

        descriptor = self.registry.resolve(path)
        if descriptor is not None:
            if not descriptor.accepts(component):
                _drop(ctx, path, DropReason.KIND_MISMATCH, options.get(TYPE_KEY))
                return
            self._apply_defaults(options, descriptor)

        legend_options = options.get(LEGEND_KEY)
        if not isinstance(legend_options, Mapping):
            return

        legend = getattr(component, LEGEND_KEY, None)
        option_table = getattr(legend, "DEFAULTS", None)
        if legend is None or not isinstance(option_table, Mapping):
            return

        for key, default in option_table.items():
            setattr(legend, key, legend_options[key] if key in legend_options else default)

        if ctx is not None:
            ctx.log(path=f"{path}.{LEGEND_KEY}", level="DEBUG", message="legend reconciled")


_default_builder: Optional[ChartBuilder] = None


def _builder() -> ChartBuilder:
    global _default_builder
    if _default_builder is None:
        _default_builder = ChartBuilder()
    return _default_builder


def create(options: Mapping[str, Any], *, ctx: Optional[BuildContext] = None) -> Any:
    """Atalho para `ChartBuilder().create` com o registry padrão."""
    return _builder().create(options, ctx=ctx)


def update(component: Any, options: Mapping[str, Any], *, ctx: Optional[BuildContext] = None) -> None:
    """Atalho para `ChartBuilder().update` com o registry padrão."""
    _builder().update(component, options, ctx=ctx)
