from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Optional

from mysql.connector import pooling
from mysql.connector.errors import PoolError

from ..core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS
from ..core.exceptions import Overloaded

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS


class DatabaseConnection:
    """Bounded connection pool shared by every repository.

    The pool is created lazily on first use so building the app does not
    require a reachable database.
    """

    _retry_interval = 0.05

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                self._pool = self._create_pool()
        return self._pool

    def _create_pool(self) -> pooling.MySQLConnectionPool:
        pool = pooling.MySQLConnectionPool(
            pool_name="fieldforce",
            pool_size=int(self._config.pool_size),
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )
        logger.info(
            "connection pool ready (%s@%s:%s/%s, size=%s)",
            self._config.user,
            self._config.host,
            self._config.port,
            self._config.database,
            self._config.pool_size,
        )
        return pool

    def connect(self):
        """Borrow a pooled connection; ``close()`` on it returns it to the pool."""
        pool = self._get_pool()
        deadline = time.monotonic() + float(self._config.pool_timeout)
        while True:
            try:
                return pool.get_connection()
            except PoolError:
                if time.monotonic() >= deadline:
                    logger.warning("connection pool exhausted after %.1fs", self._config.pool_timeout)
                    raise Overloaded()
                time.sleep(self._retry_interval)
