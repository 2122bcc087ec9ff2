"""
Тесты для logging_config

Проверяет:
1. Уровень из COMPLEXIBLE_LOG_LEVEL (default WARNING)
2. COMPLEXIBLE_DEBUG переопределяет уровень
3. Невалидный уровень → ValueError
4. Повторная настройка не трогает уже настроенный root logger
"""

import logging

import pytest
from environs import Env

from complexible.logging_config import get_logger, setup_logging


@pytest.fixture
def clean_root_logger():
    """Восстановление уровней root и complexible логгеров после теста."""
    root = logging.getLogger()
    package_logger = logging.getLogger("complexible")
    saved_level = root.level
    saved_package_level = package_logger.level

    yield root

    root.setLevel(saved_level)
    package_logger.setLevel(saved_package_level)


def _without_handlers(monkeypatch, root):
    # pytest вешает свои capture-хендлеры на root в каждой фазе теста
    monkeypatch.setattr(root, "handlers", [])


class TestSetupLogging:
    """Тесты setup_logging"""

    def test_default_level_warning(self, clean_root_logger, monkeypatch):
        _without_handlers(monkeypatch, clean_root_logger)
        monkeypatch.delenv("COMPLEXIBLE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("COMPLEXIBLE_DEBUG", raising=False)

        setup_logging(Env())

        assert clean_root_logger.level == logging.WARNING
        assert logging.getLogger("complexible").level == logging.WARNING

    def test_level_from_env(self, clean_root_logger, monkeypatch):
        _without_handlers(monkeypatch, clean_root_logger)
        monkeypatch.setenv("COMPLEXIBLE_LOG_LEVEL", "info")
        monkeypatch.delenv("COMPLEXIBLE_DEBUG", raising=False)

        setup_logging(Env())

        assert clean_root_logger.level == logging.INFO

    def test_debug_flag_overrides_level(self, clean_root_logger, monkeypatch):
        _without_handlers(monkeypatch, clean_root_logger)
        monkeypatch.setenv("COMPLEXIBLE_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("COMPLEXIBLE_DEBUG", "true")

        setup_logging(Env())

        assert clean_root_logger.level == logging.DEBUG
        assert logging.getLogger("complexible").level == logging.DEBUG

    def test_invalid_level(self, clean_root_logger, monkeypatch):
        _without_handlers(monkeypatch, clean_root_logger)
        monkeypatch.setenv("COMPLEXIBLE_LOG_LEVEL", "LOUD")
        monkeypatch.delenv("COMPLEXIBLE_DEBUG", raising=False)

        with pytest.raises(ValueError, match="Invalid log level: LOUD"):
            setup_logging(Env())

    def test_already_configured_is_noop(self, clean_root_logger, monkeypatch):
        _without_handlers(monkeypatch, clean_root_logger)
        handler = logging.NullHandler()
        clean_root_logger.addHandler(handler)
        clean_root_logger.setLevel(logging.ERROR)
        monkeypatch.setenv("COMPLEXIBLE_LOG_LEVEL", "DEBUG")

        setup_logging(Env())

        assert clean_root_logger.handlers == [handler]
        assert clean_root_logger.level == logging.ERROR

    def test_default_env(self, clean_root_logger, monkeypatch):
        _without_handlers(monkeypatch, clean_root_logger)
        monkeypatch.setenv("COMPLEXIBLE_LOG_LEVEL", "ERROR")
        monkeypatch.delenv("COMPLEXIBLE_DEBUG", raising=False)

        setup_logging()

        assert clean_root_logger.level == logging.ERROR


class TestGetLogger:
    def test_named_logger(self):
        logger = get_logger("complexible.core.math.transcendental")
        assert logger.name == "complexible.core.math.transcendental"
        assert logger is logging.getLogger("complexible.core.math.transcendental")
