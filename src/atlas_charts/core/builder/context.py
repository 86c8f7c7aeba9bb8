# src/atlas_charts/core/builder/context.py
"""
Contexto de diagnóstico de um build.

Este módulo define o `BuildContext`, o canal opcional de observabilidade
do builder. O engine nunca levanta exceção para configurações que não
resolvem no schema: a subárvore é simplesmente omitida. Quando o chamador
fornece um `BuildContext`, cada omissão é registrada como evento
estruturado e como `DroppedNode`.

Princípios fundamentais:
    - Isolamento por chamada (cada create/update recebe seu próprio contexto)
    - Logs são eventos estruturados, não texto livre
    - Registrar diagnóstico nunca altera o resultado do build

Invariantes:
    - Todo evento inclui `build_id`, `path`, `level`, `message` e `timestamp`
    - Todo `drop()` gera exatamente um evento e um `DroppedNode`

Limites explícitos:
    - Não decide o que é omitido (responsabilidade do engine)
    - Não persiste eventos
    - Não levanta exceções
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class DropReason(str, Enum):
    """Motivos pelos quais um nó de configuração foi omitido."""
    NOT_A_MAPPING = "not_a_mapping"
    UNKNOWN_PATH = "unknown_path"
    NO_FACTORY = "no_factory"
    KIND_MISMATCH = "kind_mismatch"
    INVALID_KEY = "invalid_key"


@dataclass(frozen=True)
class DroppedNode:
    """Registro imutável de uma subárvore omitida."""
    path: Optional[str]
    reason: DropReason
    kind: Optional[str] = None


@dataclass
class BuildContext:
    build_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    dropped: List[DroppedNode] = field(default_factory=list, init=False)

    def log(self, *, path: Optional[str], level: str, message: str, **extra: Any) -> None:
        event = {
            "build_id": self.build_id,
            "path": path,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def drop(self, *, path: Optional[str], reason: DropReason, kind: Optional[str] = None) -> None:
        self.dropped.append(DroppedNode(path=path, reason=reason, kind=kind))
        self.log(
            path=path,
            level="WARNING",
            message=f"config node dropped: {reason.value}",
            reason=reason.value,
            kind=kind,
        )

    def dropped_paths(self) -> List[Optional[str]]:
        return [d.path for d in self.dropped]
