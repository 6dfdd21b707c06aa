import logging

import pytest

from catalog import main
from catalog.core import config


@pytest.fixture
def sqlalchemy_engine_logger():
    engine_logger = logging.getLogger('sqlalchemy.engine')
    previous_level = engine_logger.level
    try:
        yield engine_logger
    finally:
        engine_logger.setLevel(previous_level)


def test_build_repository_leaves_engine_echo_off(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'DATABASE_URL', 'sqlite://')
    monkeypatch.setattr(config, 'DB_ENABLE_LOGGING', True)

    repository = main.build_repository()
    try:
        assert repository.enable_logging is True
        assert repository.context.engine.echo is False
    finally:
        repository.context.engine.dispose()


@pytest.mark.parametrize(('verbose', 'level'), [(True, logging.INFO), (False, logging.WARNING)])
def test_configure_logging_sets_sql_statement_level(sqlalchemy_engine_logger, verbose: bool, level: int) -> None:
    main.configure_logging(verbose)

    assert sqlalchemy_engine_logger.level == level
