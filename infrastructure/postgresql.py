# ============================================================================
# POSTGRESQL CONNECTION INFRASTRUCTURE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Infrastructure - PostgreSQL connection handling
# PURPOSE: Single short-lived async connection for catalog reads
# CREATED: 19 OCT 2026
# ============================================================================
"""
PostgreSQL Connection Infrastructure

Provides database connectivity for introspection:
- Connection string resolution from ConnectionConfig
- One async connection per run, always closed
- Driver failures on connect surfaced as ConnectionError
- Password masking in every log line

Usage:
    client = PostgreSQLClient(config.connection)
    rows = await client.fetch_all("SELECT 1 AS one")
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Sequence

import psycopg
from psycopg import AsyncConnection
from psycopg.rows import dict_row

from core.config import ConnectionConfig
from core.errors import ConnectionError
from core.logging import mask_connection_string

logger = logging.getLogger(__name__)


# ============================================================================
# POSTGRESQL CLIENT
# ============================================================================

class PostgreSQLClient:
    """
    Async PostgreSQL client for read-only catalog queries.

    Usage:
        client = PostgreSQLClient(ConnectionConfig(connection_string=url))
        async with client.get_connection() as conn:
            cur = await conn.execute("SELECT 1")
    """

    def __init__(self, config: ConnectionConfig):
        """
        Initialize PostgreSQL client.

        Args:
            config: Connection settings (validated lazily on first use)
        """
        self.config = config
        self._conn_string: Optional[str] = None

    @property
    def conn_string(self) -> str:
        """Resolved connection string (raises ConfigurationError if incomplete)."""
        if self._conn_string is None:
            self._conn_string = self.config.build_connection_string()
        return self._conn_string

    def _connect_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "autocommit": True,
            "row_factory": dict_row,
            "application_name": self.config.application_name,
        }
        if self.config.ssl:
            kwargs["sslmode"] = "require"
        return kwargs

    @asynccontextmanager
    async def get_connection(self):
        """
        Context manager for one PostgreSQL connection.

        Yields:
            psycopg AsyncConnection with dict_row factory

        Raises:
            ConfigurationError: Connection settings are incomplete
            ConnectionError: The server could not be reached
        """
        conninfo = self.conn_string
        safe_conninfo = mask_connection_string(conninfo)

        conn = None
        try:
            logger.debug(f"Connecting to PostgreSQL: {safe_conninfo}")
            conn = await AsyncConnection.connect(conninfo, **self._connect_kwargs())
        except psycopg.Error as e:
            logger.error(f"PostgreSQL connection error: {e}")
            raise ConnectionError(
                f"Could not connect to {safe_conninfo}: {e}",
                target=safe_conninfo,
            ) from e

        try:
            logger.debug("PostgreSQL connection established")
            yield conn
        finally:
            await conn.close()
            logger.debug("PostgreSQL connection closed")

    async def fetch_all(self, query: str, params: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
        """Execute query and fetch all rows as dicts."""
        async with self.get_connection() as conn:
            cur = await conn.execute(query, params)
            return await cur.fetchall()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "PostgreSQLClient",
]
