# src/atlas_charts/core/config/errors.py
"""
Exceções da camada de configuração do Atlas Charts.

Diferente do builder (que omite subárvores desconhecidas em silêncio),
problemas de arquivo e de estrutura de configuração são falhas fatais.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção daqui é levantada pelo engine de build
"""


class ConfigError(Exception):
    """Base para erros de carregamento e merge de opções de chart."""


class OptionsFileNotFoundError(ConfigError):
    """O arquivo de opções base não existe no caminho informado."""


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos aceitos: YAML (.yaml, .yml) e JSON (.json). O formato não
    é inferido pelo conteúdo.
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapeamento (dict)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos na mesma chave durante o deep-merge.

    Exemplo:
        - base:     {"legend": {"position": "bottom"}}
        - override: {"legend": "off"}
    """
