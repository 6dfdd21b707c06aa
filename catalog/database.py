from typing import Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool


Base = declarative_base()

_IN_MEMORY_URLS = {'sqlite://', 'sqlite:///:memory:'}


def create_db_engine(url: str) -> Engine:
    """Build an engine for ``url``.

    SQLite connections enforce foreign keys so that deleting a user cascades
    to their courses. An in-memory database is pinned to one connection,
    otherwise every pooled connection would see its own empty database.
    """
    if not url.startswith('sqlite'):
        return create_engine(url)

    options: dict[str, Any] = {'connect_args': {'check_same_thread': False}}
    if url in _IN_MEMORY_URLS:
        options['poolclass'] = StaticPool

    engine = create_engine(url, **options)

    @event.listens_for(engine, 'connect')
    def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute('PRAGMA foreign_keys=ON')
        finally:
            cursor.close()

    return engine


class StorageContext:
    """Runs parameterized SQL statements, one transaction per call.

    Parameters are always passed as bind values, never formatted into the
    statement. Database errors propagate to the caller untouched.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def execute(self, statement: str, **params: Any) -> int:
        with self.engine.begin() as connection:
            result = connection.execute(text(statement), params)
            return result.rowcount

    def retrieve(self, statement: str, **params: Any) -> list[dict[str, Any]]:
        with self.engine.begin() as connection:
            result = connection.execute(text(statement), params)
            return [dict(row) for row in result.mappings()]

    def retrieve_single(self, statement: str, **params: Any) -> dict[str, Any] | None:
        with self.engine.begin() as connection:
            row = connection.execute(text(statement), params).mappings().first()
            return dict(row) if row is not None else None

    def retrieve_value(self, statement: str, **params: Any) -> Any:
        with self.engine.begin() as connection:
            return connection.execute(text(statement), params).scalar()
