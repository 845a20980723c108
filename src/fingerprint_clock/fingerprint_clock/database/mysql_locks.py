from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Hashable, Iterator

import mysql.connector

from ..common.locks import KeyedLock
from ..core.constants import DB_LOCK_TIMEOUT_SECONDS
from ..core.exceptions import StoreUnavailable
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


class MySQLNamedLocks:
    """Per-key mutex shared by every station using the same database.

    Uses GET_LOCK on a dedicated connection held for the duration of the
    block. A local KeyedLock is taken first so threads in this process queue
    up without each opening a connection.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, prefix: str, timeout_seconds: int = DB_LOCK_TIMEOUT_SECONDS):
        self._conn_factory = conn_factory
        self._prefix = prefix
        self._timeout = int(timeout_seconds)
        self._local = KeyedLock()

    def _name(self, key: Hashable) -> str:
        # MySQL lock names are capped at 64 characters
        return f"{self._prefix}.{key}"[:64]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        name = self._name(key)
        with self._local.hold(key):
            try:
                conn = self._conn_factory.connect()
            except mysql.connector.Error as e:
                raise StoreUnavailable("Database is unavailable") from e

            try:
                cur = conn.cursor()
                try:
                    cur.execute("SELECT GET_LOCK(%s, %s)", (name, self._timeout))
                    row = cur.fetchone()
                except mysql.connector.Error as e:
                    raise StoreUnavailable("Could not acquire database lock") from e
                if not row or row[0] != 1:
                    raise StoreUnavailable(f"Timed out waiting for lock {name}")

                try:
                    yield
                finally:
                    try:
                        cur.execute("SELECT RELEASE_LOCK(%s)", (name,))
                        cur.fetchone()
                    except mysql.connector.Error as e:
                        # closing the session releases it anyway
                        logger.warning("RELEASE_LOCK(%s) failed: %s", name, e)
                    cur.close()
            finally:
                conn.close()
