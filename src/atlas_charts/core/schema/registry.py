# src/atlas_charts/core/schema/registry.py
"""
Registro estrutural do schema de componentes.

Este módulo define o `SchemaRegistry`, o mapeamento estático e somente
leitura entre paths pontuados (ex.: `cartesian.series.line`) e os
descritores de componente utilizados pelo builder.

Responsabilidades do módulo:
    - Registrar os tipos de chart de nível raiz
    - Resolver paths segmento a segmento
    - Inferir o tipo de chart a partir do tipo de uma série

Decisões arquiteturais:
    - A resolução retorna `None` em vez de levantar exceção
    - Um path que termina em um grupo discriminado não resolve para descritor
    - Erros de registro (duplicidade, tipo inválido) são falhas fatais
    - A ordem de registro é preservada e define a ordem de inferência

Invariantes:
    - Cada `ComponentKind` raiz é registrado no máximo uma vez
    - O registry não é mutado durante builds

Limites explícitos:
    - Não instancia componentes
    - Não aplica defaults
    - Não possui cache (o schema é pequeno e estático)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .types import ComponentDescriptor, ComponentKind, DescriptorGroup, SchemaNode


SERIES_KEY = "series"


class DuplicateComponentKindError(ValueError):
    """
    Exceção levantada quando um tipo de chart raiz é registrado duas vezes.

    A duplicidade é tratada como erro fatal de definição do schema e é
    detectada no momento do registro, antes de qualquer build.
    """


@dataclass
class SchemaRegistry:
    """
    Registro canônico de descritores de componente.

    O nível raiz é um ponto discriminado: o `type` da configuração de topo
    seleciona o descritor do chart. Abaixo dele, cada segmento do path é
    um filho do descritor atual ou uma variante do grupo atual.
    """

    _roots: Dict[ComponentKind, ComponentDescriptor] = field(default_factory=dict, init=False, repr=False)
    _order: List[ComponentKind] = field(default_factory=list, init=False, repr=False)

    def register_root(self, kind: ComponentKind, descriptor: ComponentDescriptor) -> None:
        parsed = ComponentKind.parse(kind)
        if parsed is None:
            raise ValueError(f"unknown component kind: {kind!r}")

        if not isinstance(descriptor, ComponentDescriptor):
            raise TypeError("descriptor must be a ComponentDescriptor")

        if parsed in self._roots:
            raise DuplicateComponentKindError(f"Duplicate root kind: {parsed.value}")

        self._roots[parsed] = descriptor
        self._order.append(parsed)

    def root_kinds(self) -> List[ComponentKind]:
        return list(self._order)

    def root_group(self) -> DescriptorGroup:
        return DescriptorGroup(variants={k: self._roots[k] for k in self._order})

    def lookup(self, path: Optional[str]) -> Optional[SchemaNode]:
        """
        Percorre o schema segmento a segmento.

        Retorna o nó encontrado (descritor ou grupo) ou None se algum
        segmento estiver ausente.
        """
        if not isinstance(path, str) or not path:
            return None

        node: Optional[SchemaNode] = self.root_group()
        for part in path.split("."):
            if isinstance(node, DescriptorGroup):
                node = node.get(part)
            elif isinstance(node, ComponentDescriptor):
                node = node.child(part)
            else:
                return None
            if node is None:
                return None
        return node

    def resolve(self, path: Optional[str]) -> Optional[ComponentDescriptor]:
        """Resolve `path` para um descritor; grupos e paths ausentes resultam em None."""
        node = self.lookup(path)
        if isinstance(node, ComponentDescriptor):
            return node
        return None

    def infer_root_kind(self, series_type) -> Optional[ComponentKind]:
        """
        Primeiro tipo de chart (em ordem de registro) cujo grupo de séries
        aceita `series_type`.
        """
        parsed = ComponentKind.parse(series_type)
        if parsed is None:
            return None

        for kind in self._order:
            series = self._roots[kind].child(SERIES_KEY)
            if isinstance(series, DescriptorGroup) and parsed in series.kinds():
                return kind
        return None
