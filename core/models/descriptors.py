# ============================================================================
# CATALOG DESCRIPTORS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Introspected catalog metadata
# PURPOSE: Typed column/table/schema descriptors produced by the connector
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: RawColumnDescriptor, ColumnDescriptor, TableDescriptor, SchemaDescriptor
# DEPENDENCIES: pydantic
# ============================================================================
"""
Catalog Descriptors

Key concept:
- RawColumnDescriptor = what the catalog says (one row per column)
- ColumnDescriptor    = raw row + classification, enum values, writability
- TableDescriptor     = ordered columns of one relation
- SchemaDescriptor    = every relation that survived filtering, sorted

All descriptors are frozen. Hooks build replacements with model_copy().
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from core.contracts import FieldKind, RelationKind, WriteTransform


class RawColumnDescriptor(BaseModel):
    """
    One catalog row.

    Built from pg_attribute joined with pg_class, pg_type, pg_attrdef
    and the aggregated pg_constraint check clauses.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name as stored in the catalog")
    table_name: str = Field(..., description="Owning relation name")
    table_kind: RelationKind = Field(default=RelationKind.TABLE)
    schema_name: str = Field(default="public")

    data_type: str = Field(..., description="pg_type.typname, '_' prefixed for arrays")
    is_nullable: bool = Field(default=False)
    default_value: Optional[str] = Field(
        default=None,
        description="Default expression as returned by pg_get_expr"
    )
    max_len: Optional[int] = Field(default=None, description="Declared length of varchar/bpchar columns")
    min_len: Optional[int] = Field(default=None)
    description: Optional[str] = Field(default=None, description="COMMENT ON COLUMN text")
    table_description: Optional[str] = Field(
        default=None,
        description="COMMENT ON TABLE/VIEW text of the owning relation"
    )
    check_constraints: List[str] = Field(
        default_factory=list,
        description="Check clauses touching this column (pg_get_constraintdef)"
    )


class ColumnDescriptor(RawColumnDescriptor):
    """
    Classified column.

    Invariants:
        is_enum     == (len(enum_values) > 0)
        is_writable == (not is_serial and table_kind == TABLE)
        is_optional defaults to is_nullable
    """

    kind: FieldKind = Field(default=FieldKind.UNKNOWN)
    is_array: bool = Field(default=False)
    is_serial: bool = Field(default=False, description="Auto-generated by a sequence")
    is_writable: bool = Field(default=False)
    is_optional: bool = Field(default=False)

    enum_values: List[str] = Field(default_factory=list)
    is_enum: bool = Field(default=False)

    write_transforms: List[WriteTransform] = Field(
        default_factory=list,
        description="Write-side refinements, usually assigned by a column hook"
    )

    is_deprecated: bool = Field(default=False)
    deprecated_reason: Optional[str] = Field(default=None)


class TableDescriptor(BaseModel):
    """Ordered columns of one relation (catalog attnum order)."""

    model_config = ConfigDict(frozen=True)

    name: str
    schema_name: str = Field(default="public")
    kind: RelationKind = Field(default=RelationKind.TABLE)
    description: Optional[str] = Field(default=None, description="COMMENT ON the relation")
    columns: List[ColumnDescriptor] = Field(default_factory=list)


class SchemaDescriptor(BaseModel):
    """Every relation that survived filtering, sorted by (kind, name)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="public")
    tables: List[TableDescriptor] = Field(default_factory=list)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "RawColumnDescriptor",
    "ColumnDescriptor",
    "TableDescriptor",
    "SchemaDescriptor",
]
