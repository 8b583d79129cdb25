"""
Тесты для конфигурации библиотеки.
"""

import importlib
import logging
import math

import pytest
from primgraph import config


@pytest.fixture
def package_logger():
    """Логгер пакета, восстанавливаемый после теста"""
    logger = logging.getLogger(config.PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestDefaults:
    """Значения по умолчанию"""

    def test_unreached_weight_is_infinite(self):
        """Маркер недостижимости - бесконечность"""
        assert math.isinf(config.UNREACHED_WEIGHT)
        assert config.UNREACHED_WEIGHT > 0

    def test_root_weight(self):
        """Ключ корня - ноль"""
        assert config.ROOT_WEIGHT == 0.0

    def test_env_override(self, monkeypatch):
        """Переменные окружения переопределяют значения"""
        monkeypatch.setenv("PRIMGRAPH_UNREACHED_WEIGHT", "1000")
        monkeypatch.setenv("PRIMGRAPH_LOG_LEVEL", "DEBUG")
        try:
            reloaded = importlib.reload(config)
            assert reloaded.UNREACHED_WEIGHT == 1000.0
            assert reloaded.LOG_LEVEL == "DEBUG"
        finally:
            monkeypatch.undo()
            importlib.reload(config)


class TestConfigureLogging:
    """Настройка логирования"""

    def test_sets_level(self, package_logger):
        """Уровень логгера пакета"""
        logger = config.configure_logging("DEBUG")
        assert logger is package_logger
        assert logger.level == logging.DEBUG

    def test_single_handler(self, package_logger):
        """Повторный вызов не дублирует обработчик"""
        before = len(package_logger.handlers)
        config.configure_logging(logging.INFO)
        config.configure_logging(logging.INFO)
        assert len(package_logger.handlers) == before + 1

    def test_root_logger_untouched(self, package_logger):
        """Корневой логгер не меняется"""
        root_handlers = list(logging.getLogger().handlers)
        config.configure_logging()
        assert logging.getLogger().handlers == root_handlers
