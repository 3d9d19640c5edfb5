# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Descriptors come out of introspection; output models go into templates.
"""

from core.models.descriptors import (
    RawColumnDescriptor,
    ColumnDescriptor,
    TableDescriptor,
    SchemaDescriptor,
)
from core.models.output import (
    ColumnModel,
    TableModel,
    EnumDefinition,
    EnumValue,
    ImportEntry,
)

__all__ = [
    # Descriptors
    "RawColumnDescriptor",
    "ColumnDescriptor",
    "TableDescriptor",
    "SchemaDescriptor",
    # Output
    "ColumnModel",
    "TableModel",
    "EnumDefinition",
    "EnumValue",
    "ImportEntry",
]
