# src/atlas_charts/core/__init__.py
"""
Core do Atlas Charts.

    - core.schema  → Schema Registry (paths → descritores de componente)
    - core.builder → create / update de árvores de componentes
    - core.config  → carregamento e merge de opções declarativas

O core não renderiza, não calcula layout e não valida valores.
"""
