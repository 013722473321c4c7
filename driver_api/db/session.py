from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine


class ConnectionProvider:
    """
    Opens connections to the store for a given connection string.
    Each repository operation takes one connection and releases it on exit.
    """

    def __init__(self, database_url: str):
        connect_args = {}
        if database_url.startswith("sqlite"):
            # Connections are used from FastAPI's worker threads
            connect_args["check_same_thread"] = False
        self.database_url = database_url
        self.engine: Engine = create_engine(database_url, connect_args=connect_args)

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Read-only scope: no transaction is committed."""
        with self.engine.connect() as connection:
            yield connection

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """Write scope: commits on success, rolls back on error."""
        with self.engine.begin() as connection:
            yield connection

    def dispose(self) -> None:
        self.engine.dispose()
