# src/atlas_charts/__init__.py
"""
Atlas Charts — builder declarativo de grafos de componentes de chart.

A partir de uma árvore de opções escrita pelo usuário e de um registry
que descreve como cada path de configuração vira um tipo de componente,
o Atlas Charts instancia (create) ou reconcilia (update) a árvore de
componentes correspondente.

Arquitetura em alto nível:
    - core.schema     → Schema Registry (dados puros)
    - core.builder    → engine de create/update
    - core.config     → loader e deep-merge de opções
    - components      → tipos de componente configuráveis (sem renderização)
"""

__version__ = "0.1.0"
