# src/atlas_charts/core/schema/__init__.py
"""
Schema Registry do Atlas Charts.

Mapeamento declarativo entre paths de configuração e descritores de
componente. Dados puros: nenhuma lógica de build vive neste pacote.

- **types**: `ComponentKind`, `ComponentDescriptor`, `DescriptorGroup`
- **registry**: `SchemaRegistry` (resolução de paths e inferência de chart)
- **mappings**: `default_registry()` com o schema cartesian/polar
"""

from .types import ComponentDescriptor, ComponentKind, DescriptorGroup
from .registry import DuplicateComponentKindError, SchemaRegistry
from .mappings import default_registry

__all__ = [
    "ComponentDescriptor",
    "ComponentKind",
    "DescriptorGroup",
    "DuplicateComponentKindError",
    "SchemaRegistry",
    "default_registry",
]
