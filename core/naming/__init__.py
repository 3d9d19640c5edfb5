# ============================================================================
# NAMING MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Naming and casing engine
# PURPOSE: Export casing, inflection and identifier formatters
# CREATED: 19 OCT 2026
# ============================================================================

from core.naming.inflection import singularize, pluralize
from core.naming.casing import (
    convert_case,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    to_kebab_case,
    singular_pascal_case,
    singular_upper_case,
)
from core.naming.formatters import (
    Operation,
    format_table_schema_name,
    format_table_record_name,
    format_record_transform_name,
    format_json_schema_name,
    format_enum_constant_name,
    format_enum_type_name,
    format_singular_name,
)

__all__ = [
    "singularize",
    "pluralize",
    "convert_case",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_kebab_case",
    "singular_pascal_case",
    "singular_upper_case",
    "Operation",
    "format_table_schema_name",
    "format_table_record_name",
    "format_record_transform_name",
    "format_json_schema_name",
    "format_enum_constant_name",
    "format_enum_type_name",
    "format_singular_name",
]
