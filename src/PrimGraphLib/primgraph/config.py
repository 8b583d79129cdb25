"""
Конфигурация библиотеки PrimGraph.

Значения читаются из переменных окружения один раз при импорте.
"""

import logging
import os
from typing import Optional, Union

# Ключ вершины, до которой алгоритм еще не дошел ("бесконечность")
UNREACHED_WEIGHT = float(os.getenv("PRIMGRAPH_UNREACHED_WEIGHT", "inf"))

# Ключ стартовой вершины и корней новых компонент связности
ROOT_WEIGHT = 0.0

# Logging
LOG_LEVEL = os.getenv("PRIMGRAPH_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv(
    "PRIMGRAPH_LOG_FORMAT",
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

PACKAGE_LOGGER = "primgraph"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Настроить логгер пакета для скриптов и примеров.

    Корневой логгер не трогается: добавляется один StreamHandler
    к логгеру "primgraph".

    Args:
        level: Уровень логирования (имя или число). По умолчанию LOG_LEVEL

    Returns:
        Настроенный логгер пакета
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level if level is not None else LOG_LEVEL)

    if not any(getattr(h, "_primgraph_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._primgraph_handler = True
        logger.addHandler(handler)

    return logger
