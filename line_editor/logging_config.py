"""Configuração global de logging do editor."""

import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV_VAR = "LINE_EDITOR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGING_INITIALIZED = False


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, int):
        return level
    level = level.strip()
    if level.isdigit():
        return int(level)
    resolved = logging.getLevelName(level.upper())
    # getLevelName devolve "Level X" para nomes desconhecidos
    return resolved if isinstance(resolved, int) else logging.INFO


def init_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Inicializa o logging do pacote line_editor:
    - Um único handler de console (stderr).
    - Nível: argumento, senão a variável LINE_EDITOR_LOG_LEVEL, senão INFO.
    - Chamadas repetidas não adicionam handlers.
    """
    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    package_logger = logging.getLogger("line_editor")
    package_logger.setLevel(_resolve_level(level))
    package_logger.addHandler(console_handler)
    package_logger.propagate = False

    _LOGGING_INITIALIZED = True
