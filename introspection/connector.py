# ============================================================================
# SCHEMA INTROSPECTION CONNECTOR
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Introspection - Database-agnostic descriptor assembly
# PURPOSE: Turn raw catalog rows into filtered, grouped table descriptors
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Introspection Connector

Abstract base class holding everything that does not depend on the
database driver:
- Column classification (type kind, array/serial flags, enum values)
- Writability and optionality derivation
- Include/exclude filtering on relation names
- Grouping by relation and ordering by (kind, name)
- Per-column and per-table hooks

Subclasses implement fetch_raw_columns() against a concrete database.

Usage:
    connector = PostgreSqlConnector(hooks=config.hooks)
    schema = await connector.get_schema(config)
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from core.config import GeneratorConfig, GeneratorHooks, TableFilter
from core.contracts import RelationKind
from core.hooks import run_hook
from core.logging import log_context
from core.models import (
    ColumnDescriptor,
    RawColumnDescriptor,
    SchemaDescriptor,
    TableDescriptor,
)
from introspection.constraints import extract_enum_values
from introspection.type_map import classify


class DatabaseConnector(ABC):
    """
    Base connector with driver-independent descriptor assembly.

    Provides:
    - create_column / create_tables / create_schema building blocks
    - filter_columns applying the include/exclude rules
    - get_schema running the whole introspection for one schema
    """

    def __init__(
        self,
        hooks: Optional[GeneratorHooks] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.hooks = hooks or GeneratorHooks()
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def fetch_raw_columns(
        self,
        config: GeneratorConfig,
    ) -> List[RawColumnDescriptor]:
        """
        Read one row per column of every relation in config.schema_name.

        Raises:
            ConfigurationError: Connection settings are incomplete
            ConnectionError: Transport could not be established
        """

    # =========================================================================
    # COLUMNS
    # =========================================================================

    async def create_column(self, raw: RawColumnDescriptor) -> ColumnDescriptor:
        """
        Classify one raw column and run the per-column hook.

        Invariants:
            is_enum     == bool(enum_values)
            is_writable == (not is_serial and table_kind == TABLE)
            is_optional == is_nullable
        """
        with log_context(table_name=raw.table_name, column_name=raw.name):
            enum_values = (
                extract_enum_values(raw.name, raw.check_constraints)
                if raw.check_constraints else []
            )
            classification = classify(raw.data_type, raw.default_value)

            column = ColumnDescriptor(
                **raw.model_dump(),
                kind=classification.kind,
                is_array=classification.is_array,
                is_serial=classification.is_serial,
                is_writable=(
                    not classification.is_serial
                    and raw.table_kind == RelationKind.TABLE
                ),
                is_optional=raw.is_nullable,
                enum_values=enum_values,
                is_enum=bool(enum_values),
            )

            if enum_values:
                self.logger.debug(
                    f"Enum values for {raw.table_name}.{raw.name}: {enum_values}"
                )

            return await run_hook(self.hooks.on_column_info_created, column)

    def filter_columns(
        self,
        columns: List[RawColumnDescriptor],
        table_filter: TableFilter,
    ) -> List[RawColumnDescriptor]:
        """Keep columns whose relation passes include, then exclude."""
        kept = [column for column in columns if table_filter.accepts(column.table_name)]
        self.logger.debug(f"Filter kept {len(kept)} of {len(columns)} columns")
        return kept

    # =========================================================================
    # TABLES
    # =========================================================================

    async def create_tables(
        self,
        columns: List[ColumnDescriptor],
        schema_name: str,
    ) -> List[TableDescriptor]:
        """
        Group columns by relation and sort relations by (kind, name).

        Column order inside each relation is the order columns arrive in,
        which is catalog attnum order.
        """
        grouped: Dict[Tuple[str, str], List[ColumnDescriptor]] = {}
        kinds: Dict[Tuple[str, str], RelationKind] = {}

        for column in columns:
            key = (column.schema_name or schema_name, column.table_name)
            grouped.setdefault(key, []).append(column)
            kinds.setdefault(key, column.table_kind)

        tables = [
            TableDescriptor(
                name=table_name,
                schema_name=table_schema,
                kind=kinds[(table_schema, table_name)],
                description=table_columns[0].table_description,
                columns=table_columns,
            )
            for (table_schema, table_name), table_columns in grouped.items()
        ]
        tables.sort(key=lambda table: (table.kind.value, table.name))

        result = []
        for table in tables:
            with log_context(table_name=table.name):
                result.append(await run_hook(self.hooks.on_table_info_created, table))
        return result

    def create_schema(self, tables: List[TableDescriptor], schema_name: str) -> SchemaDescriptor:
        return SchemaDescriptor(name=schema_name, tables=tables)

    # =========================================================================
    # ENTRY POINT
    # =========================================================================

    async def get_schema(self, config: GeneratorConfig) -> SchemaDescriptor:
        """
        Introspect config.schema_name.

        Args:
            config: Generator configuration (connection, schema, filters)

        Returns:
            SchemaDescriptor with every relation that passed the filters

        Raises:
            ConfigurationError: Invalid filters or connection settings,
                raised before any I/O
            ConnectionError: Transport could not be established
        """
        schema_name = config.schema_name
        table_filter = config.table_filter

        with log_context(schema_name=schema_name, operation="introspect"):
            raw_columns = await self.fetch_raw_columns(config)
            self.logger.debug(f"Catalog returned {len(raw_columns)} columns")

            raw_columns = self.filter_columns(raw_columns, table_filter)

            columns = []
            for raw in raw_columns:
                columns.append(await self.create_column(raw))

            tables = await self.create_tables(columns, schema_name)
            self.logger.debug(f"Assembled {len(tables)} relations")

            return self.create_schema(tables, schema_name)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["DatabaseConnector"]
