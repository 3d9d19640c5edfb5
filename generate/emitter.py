# ============================================================================
# TEMPLATE EMITTER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Jinja2 rendering of output units
# PURPOSE: Fill schema, index, constants and types templates
# CREATED: 19 OCT 2026
# ============================================================================
"""
Template Emitter

Renders TableModels into TypeScript source with Jinja2. Templates live in
generate/templates/ and are rendered with StrictUndefined, so a template
referencing a missing model field fails loudly instead of emitting blanks.

Output units:
    schema.ts         per relation (mapping or simple variant)
    index.ts          per relation, re-exports schema.ts
    <kind>/index.ts   per relation kind, re-exports each relation folder
    constants.ts      TABLE_<NAME> constants for the schema
    types.ts          union of every relation name
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from core.config import GeneratorConfig
from core.contracts import ModuleResolution
from core.errors import TemplateRenderError
from core.models import TableModel
from generate.dialects import DialectProfile, get_profile

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

SCHEMA_TEMPLATE = "schema.ts.j2"
SIMPLE_SCHEMA_TEMPLATE = "schema.simple.ts.j2"
SCHEMA_INDEX_TEMPLATE = "schema-index.ts.j2"
KIND_INDEX_TEMPLATE = "index.ts.j2"
CONSTANTS_TEMPLATE = "constants.ts.j2"
TYPES_TEMPLATE = "types.ts.j2"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


# ============================================================================
# FILTERS
# ============================================================================

def ts_string(value: Any) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def ts_key(name: str) -> str:
    """Object key, quoted only when it is not a plain identifier."""
    return name if _IDENTIFIER.match(name) else ts_string(name)


def ts_member(name: str) -> str:
    """Property access suffix: `.name` or `['odd name']`."""
    return f".{name}" if _IDENTIFIER.match(name) else f"[{ts_string(name)}]"


def ts_comment(value: Any) -> str:
    """Text safe to place inside a /** */ block."""
    return str(value).replace("*/", "*\\/")


# ============================================================================
# EMITTER
# ============================================================================

class TemplateEmitter:
    """
    Jinja2-based emitter for generated TypeScript.

    Usage:
        emitter = TemplateEmitter(config)
        files = emitter.render_table(model)   # {"schema.ts": ..., "index.ts": ...}
    """

    def __init__(
        self,
        config: GeneratorConfig,
        profile: Optional[DialectProfile] = None,
        template_dir: Optional[Path] = None,
    ):
        """Initialize the emitter with a Jinja2 environment."""
        self.config = config
        self.profile = profile or get_profile(config.dialect)
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._env.filters["ts_string"] = ts_string
        self._env.filters["ts_key"] = ts_key
        self._env.filters["ts_member"] = ts_member
        self._env.filters["ts_comment"] = ts_comment

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render one template.

        Raises:
            TemplateRenderError: Missing template, syntax error or undefined field
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(
                zod_import=self.profile.import_path,
                functional=self.profile.functional,
                **context,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render '{template_name}': {e}",
                template_name=template_name,
            ) from e

    def module_path(self, name: str) -> str:
        """Relative import specifier for a sibling module or folder."""
        if self.config.module_resolution == ModuleResolution.ESM:
            return f"./{name}.js"
        return f"./{name}"

    @property
    def schema_template(self) -> str:
        return SCHEMA_TEMPLATE if self.config.case_transform else SIMPLE_SCHEMA_TEMPLATE

    # =========================================================================
    # OUTPUT UNITS
    # =========================================================================

    def render_table(self, table: TableModel) -> Dict[str, str]:
        """Render the per-relation files, keyed by file name."""
        logger.debug(f"Rendering {self.schema_template} for {table.table_name}")
        return {
            "schema.ts": self.render(self.schema_template, table=table),
            "index.ts": self.render(SCHEMA_INDEX_TEMPLATE, module=self.module_path("schema")),
        }

    def render_kind_index(self, tables: List[TableModel]) -> str:
        modules = [
            self.module_path(f"{table.table_name}/index")
            if self.config.module_resolution == ModuleResolution.ESM
            else self.module_path(table.table_name)
            for table in tables
        ]
        return self.render(KIND_INDEX_TEMPLATE, modules=modules)

    def render_constants(self, tables: List[TableModel]) -> str:
        return self.render(CONSTANTS_TEMPLATE, tables=tables)

    def render_types(self, tables: List[TableModel]) -> str:
        return self.render(TYPES_TEMPLATE, tables=tables)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "TemplateEmitter",
    "TEMPLATE_DIR",
    "ts_string",
    "ts_key",
    "ts_member",
    "ts_comment",
]
