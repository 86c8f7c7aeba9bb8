# src/atlas_charts/core/schema/types.py
"""
Tipos canônicos do Schema Registry do Atlas Charts.

Este módulo define as estruturas que descrevem *como* construir cada
tipo de componente em um determinado ponto do schema.

Componentes principais:
    - ComponentKind       → enum de tipos de componente discriminados
    - ComponentDescriptor → como construir um componente em um path
    - DescriptorGroup     → ponto discriminado (vários tipos possíveis)

Princípios fundamentais:
    - Tipos são dados puros, sem comportamento de build
    - Descritores são imutáveis após criados
    - Pontos discriminados são explícitos (grupo vs. descritor singular)

Invariantes:
    - Um DescriptorGroup só contém ComponentDescriptor
    - Os filhos de um descritor são descritores ou grupos, nunca valores livres

Limites explícitos:
    - Não resolve paths (responsabilidade do registry)
    - Não instancia componentes (responsabilidade do engine)
    - Não valida valores de configuração
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, FrozenSet, Mapping, Optional, Tuple, Union


class ComponentKind(str, Enum):
    """
    Tipos de componente selecionáveis via discriminador `type`.

    Os valores são strings para que configurações declarativas
    (dicts, YAML, JSON) possam referenciá-los diretamente.
    """
    # charts
    CARTESIAN = "cartesian"
    POLAR = "polar"
    # axes
    NUMBER = "number"
    CATEGORY = "category"
    # series
    LINE = "line"
    COLUMN = "column"
    BAR = "bar"
    SCATTER = "scatter"
    AREA = "area"
    PIE = "pie"

    @classmethod
    def parse(cls, value: Any) -> Optional["ComponentKind"]:
        """Converte um valor de configuração em ComponentKind, ou None se desconhecido."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ComponentDescriptor:
    """
    Especificação de como construir um componente em um path do schema.

    Campos:
        - factory: construtor do componente; None indica um ponto que apenas
          reconfigura uma instância já existente (ex.: `marker`, `label`)
        - constructor_params: chaves de configuração consumidas pelo factory,
          na ordem em que são passadas como argumentos posicionais
        - exclude: chaves copiadas verbatim mesmo que existam como filhos
        - defaults: valores aplicados quando a chave está ausente ou é falsy
        - children: propriedade → descritor (singular) ou grupo (discriminado)

    Os valores de `defaults` são compartilhados por referência entre builds.
    """

    factory: Optional[Callable[..., Any]] = None
    constructor_params: Tuple[str, ...] = ()
    exclude: FrozenSet[str] = frozenset()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    children: Mapping[str, "SchemaNode"] = field(default_factory=dict)

    def child(self, name: str) -> Optional["SchemaNode"]:
        return self.children.get(name)

    def is_schema_child(self, name: str) -> bool:
        return name in self.children and name not in self.exclude

    def accepts(self, instance: Any) -> bool:
        """Indica se `instance` é do tipo produzido por este descritor."""
        if isinstance(self.factory, type):
            return isinstance(instance, self.factory)
        return False


@dataclass(frozen=True)
class DescriptorGroup:
    """Ponto discriminado do schema: `type` → ComponentDescriptor."""

    variants: Mapping[ComponentKind, ComponentDescriptor] = field(default_factory=dict)

    def get(self, kind: Any) -> Optional[ComponentDescriptor]:
        parsed = ComponentKind.parse(kind)
        if parsed is None:
            return None
        return self.variants.get(parsed)

    def kinds(self) -> Tuple[ComponentKind, ...]:
        return tuple(self.variants.keys())


SchemaNode = Union[ComponentDescriptor, DescriptorGroup]
