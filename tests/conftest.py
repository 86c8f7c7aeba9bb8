# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Charts.

Este módulo define fixtures reutilizáveis que fornecem:
- o registry padrão (cartesian/polar)
- um builder sobre esse registry
- um BuildContext determinístico para diagnóstico
- opções de chart típicas em dict e em YAML

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos usam `tmp_path` nos testes)
    - Cada teste recebe instâncias novas (sem estado compartilhado)
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Schema + Builder
# =====================================================

@pytest.fixture
def registry():
    """Registry padrão v1 (cartesian, polar)."""
    from atlas_charts.core.schema import default_registry

    return default_registry()


@pytest.fixture
def builder(registry):
    from atlas_charts.core.builder import ChartBuilder

    return ChartBuilder(registry)


@pytest.fixture
def build_ctx():
    """
    BuildContext com identidade fixa.

    Usado para inspecionar eventos e subárvores omitidas sem alterar o
    resultado do build.
    """
    from atlas_charts.core.builder import BuildContext

    return BuildContext(
        build_id="build_test_001",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def cartesian_options() -> dict:
    """Opções de um chart cartesiano com duas séries, título e legenda."""
    return {
        "type": "cartesian",
        "width": 640,
        "data": [{"month": "Jan", "revenue": 10}, {"month": "Feb", "revenue": 12}],
        "title": {"text": "Revenue"},
        "series": [
            {"type": "line", "x_key": "month", "y_key": "revenue"},
            {"type": "column", "x_key": "month", "y_keys": ["revenue"]},
        ],
        "legend": {"position": "right"},
    }


# =====================================================
# Config Loader
# =====================================================

@pytest.fixture
def chart_defaults_yaml() -> str:
    """YAML de opções base de um chart, como em um `chart.defaults.yaml`."""
    return """
type: cartesian
width: 800
title:
  text: Receita
legend:
  position: right
  enabled: true
series:
  - type: line
    x_key: month
    y_key: revenue
"""


@pytest.fixture
def chart_local_yaml() -> str:
    """YAML de overrides locais (`chart.local.yaml`)."""
    return """
width: 1024
legend:
  position: bottom
series:
  - type: column
    x_key: month
    y_keys: [revenue, cost]
"""
