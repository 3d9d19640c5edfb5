# ============================================================================
# OUTPUT MODELS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Naming-resolved intermediate model
# PURPOSE: Column and table models consumed by the template emitter
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: ColumnModel, TableModel, EnumDefinition, EnumValue, ImportEntry
# DEPENDENCIES: pydantic
# ============================================================================
"""
Output Models

ColumnModel extends ColumnDescriptor with every resolved name and the two
rendered type expressions. TableModel is the single object handed to a
template: it carries all identifiers the generated module declares.

EnumValue and ImportEntry carry an explicit `last` marker so templates can
place separators without inspecting their position.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from core.contracts import RelationKind
from core.models.descriptors import ColumnDescriptor


class ColumnModel(ColumnDescriptor):
    """Column with resolved names and rendered read/write expressions."""

    property_name: str = Field(..., description="Name of the field in generated records")
    enum_constant_name: str = Field(..., description="e.g. USER_STATUSES")
    enum_type_name: str = Field(..., description="e.g. UserStatus")
    json_schema_name: str = Field(..., description="e.g. UserPostMetadataSchema")

    rendered_read_type: str = Field(default="")
    rendered_write_type: str = Field(default="")


class EnumValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    last: bool = False


class EnumDefinition(BaseModel):
    """One enumerated value set, declared as a constant plus a type."""

    model_config = ConfigDict(frozen=True)

    constant_name: str
    type_name: str
    values: List[EnumValue] = Field(default_factory=list)


class ImportEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    last: bool = False


class TableModel(BaseModel):
    """
    Everything a template needs to emit one relation.

    Naming groups:
        *_schema_name     exported validation schemas
        *_record_name     exported record types
        *_transform_name  functions mapping between column and property names
    """

    model_config = ConfigDict(frozen=True)

    kind: RelationKind
    table_name: str
    schema_name: str
    singular_name: str
    description: Optional[str] = None

    # Schemas
    read_base_schema_name: str
    insert_base_schema_name: str
    read_schema_name: str
    insert_schema_name: str
    update_schema_name: str

    # Records
    read_base_record_name: str
    insert_base_record_name: str
    update_base_record_name: str
    read_record_name: str
    insert_record_name: str
    update_record_name: str

    # Transforms
    read_transform_name: str
    insert_transform_name: str
    update_transform_name: str

    # JSON sub-schema imports
    json_schema_import_location: Optional[str] = None
    json_schema_imports: List[ImportEntry] = Field(default_factory=list)
    has_json_schema_imports: bool = False

    enums: List[EnumDefinition] = Field(default_factory=list)
    readable_columns: List[ColumnModel] = Field(default_factory=list)
    writable_columns: List[ColumnModel] = Field(default_factory=list)
    is_writable: bool = False


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ColumnModel",
    "TableModel",
    "EnumDefinition",
    "EnumValue",
    "ImportEntry",
]
