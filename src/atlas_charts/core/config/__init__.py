# src/atlas_charts/core/config/__init__.py
"""
Camada de configuração do Atlas Charts.

Carrega opções de chart declarativas (YAML/JSON) e resolve overrides
locais via deep-merge determinístico. Erros estruturais de arquivo são
fatais e tipados (`ConfigError`).
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    OptionsFileNotFoundError,
    UnsupportedConfigFormatError,
)
from .loader import load_options
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "OptionsFileNotFoundError",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "load_options",
]
