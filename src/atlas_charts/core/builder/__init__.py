# src/atlas_charts/core/builder/__init__.py
"""
Builder Engine do Atlas Charts.

- **engine**: `ChartBuilder`, `create`, `update`
- **context**: `BuildContext` (canal opcional de diagnóstico), `DroppedNode`, `DropReason`

O builder nunca falha por configuração desconhecida: subárvores que não
resolvem no schema são omitidas e, se houver contexto, registradas.
"""

from .context import BuildContext, DroppedNode, DropReason
from .engine import ChartBuilder, create, update

__all__ = ["BuildContext", "ChartBuilder", "DropReason", "DroppedNode", "create", "update"]
