# ============================================================================
# TABLE MODEL BUILDER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Descriptor to template model
# PURPOSE: Resolve names, render column types and apply model hooks
# CREATED: 19 OCT 2026
# ============================================================================
"""
Table Model Builder

Turns a TableDescriptor into the TableModel a template consumes.

Per column:
1. Resolve property, enum and JSON schema names
2. Render read and write expressions
3. Run on_column_model_created; a rendered expression the hook left
   untouched is re-rendered from the hook's output, one the hook changed
   is kept verbatim

Per table:
4. Derive writable columns, enum definitions and JSON schema imports
5. Resolve every schema, record and transform name
6. Run on_table_model_created
"""

import logging
from typing import List, Optional

from core.config import GeneratorConfig
from core.contracts import FieldKind
from core.hooks import run_hook
from core.logging import log_context
from core.models import (
    ColumnDescriptor,
    ColumnModel,
    EnumDefinition,
    EnumValue,
    ImportEntry,
    TableDescriptor,
    TableModel,
)
from core.naming import (
    Operation,
    convert_case,
    format_enum_constant_name,
    format_enum_type_name,
    format_json_schema_name,
    format_record_transform_name,
    format_singular_name,
    format_table_record_name,
    format_table_schema_name,
)
from generate.renderer import SchemaRenderer


class ModelBuilder:
    """
    Builds TableModels for one configuration.

    Usage:
        builder = ModelBuilder(config)
        model = await builder.build_table_model(table)
    """

    def __init__(
        self,
        config: GeneratorConfig,
        renderer: Optional[SchemaRenderer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.renderer = renderer or SchemaRenderer(config)
        self.logger = logger or logging.getLogger(__name__)

    # =========================================================================
    # COLUMNS
    # =========================================================================

    def create_column_model(self, column: ColumnDescriptor) -> ColumnModel:
        """Column with resolved names and freshly rendered expressions."""
        config = self.config
        base = ColumnModel(
            **column.model_dump(),
            property_name=convert_case(column.name, config.effective_field_casing),
            enum_constant_name=format_enum_constant_name(
                column.table_name, column.name, singular=config.singularize
            ),
            enum_type_name=format_enum_type_name(
                column.table_name, column.name, config.object_name_casing,
                singular=config.singularize,
            ),
            json_schema_name=format_json_schema_name(
                column.table_name, column.name, config.object_name_casing,
                singular=config.singularize,
            ),
        )
        return self.render_column(base)

    def render_column(self, column: ColumnModel) -> ColumnModel:
        return column.model_copy(update={
            "rendered_read_type": self.renderer.render_read(column),
            "rendered_write_type": self.renderer.render_write(column),
        })

    async def apply_column_hook(self, model: ColumnModel) -> ColumnModel:
        """
        Run on_column_model_created and reconcile rendered expressions.

        Rendered fields equal to the pre-hook render are recomputed from the
        hook's output; fields the hook rewrote are kept as written.
        """
        hook = self.config.hooks.on_column_model_created
        if hook is None:
            return model

        modified = await run_hook(hook, model)
        rerendered = self.render_column(modified)

        return modified.model_copy(update={
            "rendered_read_type": (
                rerendered.rendered_read_type
                if modified.rendered_read_type == model.rendered_read_type
                else modified.rendered_read_type
            ),
            "rendered_write_type": (
                rerendered.rendered_write_type
                if modified.rendered_write_type == model.rendered_write_type
                else modified.rendered_write_type
            ),
        })

    # =========================================================================
    # TABLE PARTS
    # =========================================================================

    def create_json_schema_imports(self, columns: List[ColumnModel]) -> List[ImportEntry]:
        if not self.config.json_schema_import_location:
            return []

        names = [
            column.json_schema_name
            for column in columns
            if column.kind == FieldKind.JSON and column.json_schema_name
        ]
        return [
            ImportEntry(name=name, last=index == len(names) - 1)
            for index, name in enumerate(names)
        ]

    def create_enums(self, columns: List[ColumnModel]) -> List[EnumDefinition]:
        enums = []
        for column in columns:
            if not column.is_enum:
                continue
            values = column.enum_values or []
            enums.append(EnumDefinition(
                constant_name=column.enum_constant_name,
                type_name=column.enum_type_name,
                values=[
                    EnumValue(value=value, last=index == len(values) - 1)
                    for index, value in enumerate(values)
                ],
            ))
        return enums

    def _schema_name(self, table: TableDescriptor, operation: Operation, suffix: Optional[str] = None) -> str:
        return format_table_schema_name(
            table.name, operation, self.config.object_name_casing, kind=table.kind, suffix=suffix
        )

    def _record_name(self, table: TableDescriptor, operation: Operation, suffix: Optional[str] = None) -> str:
        return format_table_record_name(
            table.name, operation, self.config.object_name_casing,
            suffix=suffix, singular=self.config.singularize,
        )

    def _transform_name(self, table: TableDescriptor, operation: Operation) -> str:
        return format_record_transform_name(
            table.name, operation, self.config.field_name_casing,
            singular=self.config.singularize,
        )

    # =========================================================================
    # ENTRY POINT
    # =========================================================================

    async def build_table_model(self, table: TableDescriptor) -> TableModel:
        """
        Build the template model for one relation.

        Args:
            table: Introspected relation

        Returns:
            TableModel after on_table_model_created (if configured)
        """
        with log_context(table_name=table.name, operation="model"):
            readable: List[ColumnModel] = []
            for column in table.columns:
                with log_context(column_name=column.name):
                    model = self.create_column_model(column)
                    readable.append(await self.apply_column_hook(model))

            writable = [column for column in readable if column.is_writable]
            imports = self.create_json_schema_imports(readable)

            model = TableModel(
                kind=table.kind,
                table_name=table.name,
                schema_name=table.schema_name,
                description=table.description,
                singular_name=format_singular_name(
                    table.name, self.config.object_name_casing, self.config.singularize
                ),
                read_base_schema_name=self._schema_name(table, Operation.READ, "BaseSchema"),
                insert_base_schema_name=self._schema_name(table, Operation.INSERT, "BaseSchema"),
                read_schema_name=self._schema_name(table, Operation.READ),
                insert_schema_name=self._schema_name(table, Operation.INSERT),
                update_schema_name=self._schema_name(table, Operation.UPDATE),
                read_base_record_name=self._record_name(table, Operation.READ, "BaseRecord"),
                insert_base_record_name=self._record_name(table, Operation.INSERT, "BaseRecord"),
                update_base_record_name=self._record_name(table, Operation.UPDATE, "BaseRecord"),
                read_record_name=self._record_name(table, Operation.READ),
                insert_record_name=self._record_name(table, Operation.INSERT),
                update_record_name=self._record_name(table, Operation.UPDATE),
                read_transform_name=self._transform_name(table, Operation.READ),
                insert_transform_name=self._transform_name(table, Operation.INSERT),
                update_transform_name=self._transform_name(table, Operation.UPDATE),
                json_schema_import_location=self.config.json_schema_import_location,
                json_schema_imports=imports,
                has_json_schema_imports=bool(imports),
                enums=self.create_enums(readable),
                readable_columns=readable,
                writable_columns=writable,
                is_writable=bool(writable),
            )

            self.logger.debug(
                f"Built model for {table.kind.value} {table.name}: "
                f"{len(readable)} readable, {len(writable)} writable columns"
            )

            return await run_hook(self.config.hooks.on_table_model_created, model)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["ModelBuilder"]
