# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Foundation - Core enums shared by every stage
# PURPOSE: Relation kinds, field kinds, casing styles, dialects, events
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: RelationKind, FieldKind, WriteTransform, Casing, Dialect,
#          ModuleResolution, ProgressEvent, RELATION_KIND_FOLDERS
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the schema generator.

These enums cross every boundary of the pipeline:
- Catalog rows (PostgreSQL relkind / typname)
- Intermediate model (descriptors, column and table models)
- Output (dialect selection, casing, folder layout)
"""

from enum import Enum
from typing import Dict


# ============================================================================
# CATALOG ENUMS
# ============================================================================

class RelationKind(str, Enum):
    """
    Kind of relation a column belongs to.

    Catalog mapping (pg_class.relkind):
        r -> TABLE
        v -> VIEW
        m -> MATERIALIZED_VIEW
        f -> FOREIGN_TABLE
    """
    TABLE = "table"
    VIEW = "view"
    MATERIALIZED_VIEW = "materialized_view"
    FOREIGN_TABLE = "foreign_table"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "RelationKind":
        """Map a catalog string onto a kind, falling back to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class FieldKind(str, Enum):
    """
    Semantic kind of a column.

    The classifier never produces EMAIL or URL; those are refinements
    a column hook can assign.
    """
    STRING = "string"
    EMAIL = "email"
    URL = "url"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    UUID = "uuid"
    JSON = "json"
    UNKNOWN = "unknown"

    def is_textual(self) -> bool:
        """String-like kinds accept string write transforms."""
        return self in (FieldKind.STRING, FieldKind.EMAIL, FieldKind.URL, FieldKind.UUID)

    def is_numeric(self) -> bool:
        return self in (FieldKind.INTEGER, FieldKind.FLOAT)


class WriteTransform(str, Enum):
    """Write-side refinements applied before length constraints."""
    TRIM = "trim"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NORMALIZE = "normalize"
    NONNEGATIVE = "nonnegative"


# ============================================================================
# OUTPUT ENUMS
# ============================================================================

class Casing(str, Enum):
    """Identifier casing styles."""
    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    PASSTHROUGH = "passthrough"


class Dialect(str, Enum):
    """Target Zod dialect."""
    DEFAULT = "default"
    ZOD3 = "3"
    ZOD4 = "4"
    ZOD4_MINI = "4-mini"


class ModuleResolution(str, Enum):
    """How relative imports are spelled in generated code."""
    COMMONJS = "commonjs"
    ESM = "esm"


class ProgressEvent(str, Enum):
    """
    Generation progress events.

    Emitted exactly once each, in this order:
        CONNECTING -> FETCHING_SCHEMA -> GENERATING -> DONE
    """
    CONNECTING = "connecting"
    FETCHING_SCHEMA = "fetching_schema"
    GENERATING = "generating"
    DONE = "done"


# Output folder per relation kind
RELATION_KIND_FOLDERS: Dict[RelationKind, str] = {
    RelationKind.TABLE: "tables",
    RelationKind.VIEW: "views",
    RelationKind.MATERIALIZED_VIEW: "materialized_views",
    RelationKind.FOREIGN_TABLE: "foreign_tables",
    RelationKind.UNKNOWN: "unknown",
}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "RelationKind",
    "FieldKind",
    "WriteTransform",
    "Casing",
    "Dialect",
    "ModuleResolution",
    "ProgressEvent",
    "RELATION_KIND_FOLDERS",
]
