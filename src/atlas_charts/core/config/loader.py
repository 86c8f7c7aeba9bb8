# src/atlas_charts/core/config/loader.py
"""
Loader de opções de chart a partir de arquivos.

As opções são resolvidas a partir de:
    - um arquivo base (obrigatório)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Formatos suportados: YAML (.yaml, .yml) e JSON (.json).

O resultado é um dict puro, passado diretamente a `ChartBuilder.create`.
O loader não resolve tipos nem aplica defaults do schema; chaves YAML que
não são strings (ex.: `on:` vira `True`) são omitidas pelo builder.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    InvalidConfigRootTypeError,
    OptionsFileNotFoundError,
    UnsupportedConfigFormatError,
)


PathLike = Union[str, Path]


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de opções e valida que a raiz é um dict.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        OptionsFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise OptionsFileNotFoundError(f"Arquivo de opções não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_options(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Carrega as opções de um chart, aplicando overrides locais quando existirem.

    Args:
        defaults_path: Caminho para o arquivo de opções base.
        local_path: Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Opções resolvidas.

    Raises:
        OptionsFileNotFoundError: Se o arquivo base não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
        ConfigTypeConflictError: Se o merge encontrar conflito de tipos.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective
