# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core module initialization
# PURPOSE: Export core contracts, errors and models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import (
    RelationKind,
    FieldKind,
    WriteTransform,
    Casing,
    Dialect,
    ModuleResolution,
    ProgressEvent,
)
from core.errors import (
    GeneratorError,
    ConfigurationError,
    ConnectionError,
    TemplateRenderError,
)
from core.models import (
    RawColumnDescriptor,
    ColumnDescriptor,
    TableDescriptor,
    SchemaDescriptor,
    ColumnModel,
    TableModel,
)

__all__ = [
    # Enums
    "RelationKind",
    "FieldKind",
    "WriteTransform",
    "Casing",
    "Dialect",
    "ModuleResolution",
    "ProgressEvent",
    # Errors
    "GeneratorError",
    "ConfigurationError",
    "ConnectionError",
    "TemplateRenderError",
    # Models
    "RawColumnDescriptor",
    "ColumnDescriptor",
    "TableDescriptor",
    "SchemaDescriptor",
    "ColumnModel",
    "TableModel",
]
