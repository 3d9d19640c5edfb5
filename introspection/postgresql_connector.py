# ============================================================================
# POSTGRESQL CATALOG CONNECTOR
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Introspection - PostgreSQL catalog query
# PURPOSE: Read column metadata for one schema from pg_catalog
# CREATED: 19 OCT 2026
# ============================================================================
"""
PostgreSQL Catalog Connector

Reads every column of every table, view, materialized view and foreign
table in a schema with a single catalog query. Check-constraint clauses
touching each column are aggregated into a JSON array alongside the row.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from core.config import GeneratorConfig, GeneratorHooks
from core.contracts import RelationKind
from core.logging import mask_connection_string
from core.models import RawColumnDescriptor
from infrastructure.postgresql import PostgreSQLClient
from introspection.connector import DatabaseConnector


# Only character types store a length in atttypmod; time(n) and numeric(p,s)
# encode precision there instead.
LENGTH_TYPES = frozenset({"varchar", "bpchar", "_varchar", "_bpchar"})

CATALOG_QUERY = """
SELECT
    c.relname AS table_name,
    a.attname AS name,
    pg_get_expr(d.adbin, d.adrelid) AS default_value,
    t.typname AS data_type,
    NOT a.attnotnull AS is_nullable,
    CASE
        WHEN t.typname IN ('varchar', 'bpchar', '_varchar', '_bpchar') AND a.atttypmod > 0
        THEN a.atttypmod - 4
        ELSE NULL
    END AS max_len,
    checks.check_constraints,
    col_description(c.oid, a.attnum) AS description,
    obj_description(c.oid, 'pg_class') AS table_description,
    CASE
        WHEN c.relkind = 'r' THEN 'table'
        WHEN c.relkind = 'v' THEN 'view'
        WHEN c.relkind = 'm' THEN 'materialized_view'
        WHEN c.relkind = 'f' THEN 'foreign_table'
        ELSE 'unknown'
    END AS table_kind
FROM pg_class c
JOIN pg_namespace n ON n.oid = c.relnamespace
JOIN pg_attribute a ON a.attrelid = c.oid
JOIN pg_type t ON t.oid = a.atttypid
LEFT JOIN pg_attrdef d ON d.adrelid = c.oid AND d.adnum = a.attnum
LEFT JOIN LATERAL (
    SELECT json_agg(json_build_object('check_clause', pg_get_constraintdef(pgc.oid)))
        AS check_constraints
    FROM pg_constraint pgc
    WHERE pgc.conrelid = c.oid
      AND pgc.contype = 'c'
      AND pgc.conkey @> ARRAY[a.attnum]
) AS checks ON TRUE
WHERE n.nspname = %s
  AND c.relkind IN ('r', 'v', 'm', 'f')
  AND a.attnum > 0
  AND NOT a.attisdropped
ORDER BY c.relname, a.attnum
"""


class PostgreSqlConnector(DatabaseConnector):
    """
    Connector backed by psycopg.

    Args:
        hooks: Per-column and per-table hooks
        client_factory: Builds the client from connection settings
            (override in tests to avoid a real server)
    """

    def __init__(
        self,
        hooks: Optional[GeneratorHooks] = None,
        logger: Optional[logging.Logger] = None,
        client_factory: Callable[..., PostgreSQLClient] = PostgreSQLClient,
    ):
        super().__init__(hooks=hooks, logger=logger)
        self.client_factory = client_factory

    @staticmethod
    def row_to_descriptor(row: Dict[str, Any], schema_name: str) -> RawColumnDescriptor:
        """Map one catalog row onto a RawColumnDescriptor."""
        checks = row.get("check_constraints") or []
        clauses = [
            check["check_clause"]
            for check in checks
            if isinstance(check, dict) and check.get("check_clause")
        ]

        max_len = row.get("max_len")
        if row["data_type"] not in LENGTH_TYPES or max_len is None or max_len <= 0:
            max_len = None

        return RawColumnDescriptor(
            name=row["name"],
            table_name=row["table_name"],
            table_kind=RelationKind.parse(row.get("table_kind") or "unknown"),
            schema_name=schema_name,
            data_type=row["data_type"],
            is_nullable=bool(row.get("is_nullable")),
            default_value=row.get("default_value"),
            max_len=max_len,
            description=row.get("description"),
            table_description=row.get("table_description"),
            check_constraints=clauses,
        )

    async def fetch_raw_columns(self, config: GeneratorConfig) -> List[RawColumnDescriptor]:
        client = self.client_factory(config.connection)
        # Resolving the URL first makes incomplete settings fail without I/O
        self.logger.debug(
            f"Reading catalog for schema {config.schema_name} "
            f"via {mask_connection_string(client.conn_string)}"
        )

        rows = await client.fetch_all(CATALOG_QUERY, (config.schema_name,))
        self.logger.debug(f"Fetched {len(rows)} catalog rows for schema {config.schema_name}")

        return [self.row_to_descriptor(row, config.schema_name) for row in rows]


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "PostgreSqlConnector",
    "CATALOG_QUERY",
    "LENGTH_TYPES",
]
