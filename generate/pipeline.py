# ============================================================================
# GENERATION PIPELINE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - End-to-end entry point
# PURPOSE: Introspect, build models, render and write in one call
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Pipeline

Runs one generation:

    1. Validate configuration (no I/O yet)
    2. Clean previous output if requested
    3. Introspect the schema            [connecting, fetching_schema]
    4. Build, render and write tables   [generating]
    5. Write per-kind indexes, constants.ts and types.ts
    6. Report completion                [done]

Relations without columns are skipped with a warning. A run in which no
relation matched the filters is reported as unsuccessful; files written
by earlier runs are left in place unless clean_output is set.

Usage:
    result = await generate_schemas(config, on_progress=LoggingProgressReporter())
    if not result.success:
        sys.exit(1)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from core.config import GeneratorConfig
from core.contracts import ProgressEvent, RelationKind
from core.hooks import run_hook
from core.logging import log_context
from core.models import TableModel
from generate.emitter import TemplateEmitter
from generate.model_builder import ModelBuilder
from generate.progress import ProgressCallback, report
from generate.writer import SchemaFileWriter
from introspection.connector import DatabaseConnector
from introspection.postgresql_connector import PostgreSqlConnector


@dataclass
class GenerationResult:
    """Outcome of one generation run."""
    success: bool
    schema_name: str
    tables: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)
    message: str = ""


async def generate_schemas(
    config: GeneratorConfig,
    on_progress: Optional[ProgressCallback] = None,
    connector: Optional[DatabaseConnector] = None,
    writer: Optional[SchemaFileWriter] = None,
    logger: Optional[logging.Logger] = None,
) -> GenerationResult:
    """
    Generate Zod schemas for every matching relation.

    Args:
        config: Generator configuration
        on_progress: Optional progress callback
        connector: Catalog connector (defaults to PostgreSqlConnector)
        writer: File writer (defaults to one rooted at config.output_dir)
        logger: Logger for pipeline messages

    Returns:
        GenerationResult; success is False when no relation matched

    Raises:
        ConfigurationError: Invalid settings, before any I/O
        ConnectionError: Database unreachable
        TemplateRenderError: A template failed to render
    """
    log = logger or logging.getLogger(__name__)

    config.validate(require_connection=connector is None)
    connector = connector or PostgreSqlConnector(hooks=config.hooks)
    writer = writer or SchemaFileWriter(config.output_dir)

    if config.clean_output:
        writer.clean()

    with log_context(schema_name=config.schema_name, operation="generate"):
        await report(on_progress, ProgressEvent.CONNECTING)
        await report(on_progress, ProgressEvent.FETCHING_SCHEMA)
        schema = await connector.get_schema(config)

        await report(on_progress, ProgressEvent.GENERATING, total=len(schema.tables))

        builder = ModelBuilder(config, logger=log)
        emitter = TemplateEmitter(config)
        models: List[TableModel] = []
        skipped: List[str] = []

        for table in schema.tables:
            with log_context(table_name=table.name):
                log.debug(f"Generating schema for {table.kind.value} {table.name}")
                model = await builder.build_table_model(table)

                if not model.readable_columns:
                    log.warning(f"No columns found for {table.kind.value} {table.name}")
                    skipped.append(table.name)
                    continue

                files = emitter.render_table(model)
                if config.hooks.on_table_rendered is not None:
                    files = await run_hook(config.hooks.on_table_rendered, model, files)

                writer.write_table(model.kind, model.table_name, files)
                models.append(model)

        for kind in RelationKind:
            of_kind = [model for model in models if model.kind == kind]
            if of_kind:
                writer.write_kind_index(kind, emitter.render_kind_index(of_kind))

        if models:
            writer.write_top_level("constants.ts", emitter.render_constants(models))
            writer.write_top_level("types.ts", emitter.render_types(models))

        await report(on_progress, ProgressEvent.DONE)

    if not schema.tables:
        message = f"No tables matched in schema '{config.schema_name}'"
        log.warning(message)
        return GenerationResult(
            success=False,
            schema_name=config.schema_name,
            message=message,
        )

    log.info(f"Generated {len(models)} schemas into {config.output_dir}")
    return GenerationResult(
        success=True,
        schema_name=config.schema_name,
        tables=[model.table_name for model in models],
        skipped=skipped,
        files=list(writer.written),
        message=f"Generated {len(models)} schemas",
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GenerationResult",
    "generate_schemas",
]
