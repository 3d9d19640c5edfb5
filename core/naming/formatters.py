# ============================================================================
# IDENTIFIER FORMATTERS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Generated identifier names
# PURPOSE: Deterministic names for schemas, records, transforms and enums
# CREATED: 19 OCT 2026
# ============================================================================
"""
Identifier Formatters

Every exported identifier in generated code comes from one of these
functions. All of them are pure: the same table/column and settings
always produce the same name.

    format_table_schema_name("user_posts", Operation.INSERT)
        -> "UserPostsTableInsertSchema"
    format_table_record_name("user_posts", Operation.READ)
        -> "UserPostRecord"
    format_record_transform_name("user_posts", Operation.READ)
        -> "transformUserPostBaseRecord"
    format_enum_constant_name("users", "status")
        -> "USER_STATUSES"
"""

from enum import Enum
from typing import Optional

from core.contracts import Casing, RelationKind
from core.naming.casing import (
    convert_case,
    singular_pascal_case,
    singular_upper_case,
    to_pascal_case,
    to_snake_case,
)
from core.naming.inflection import pluralize, singularize


class Operation(str, Enum):
    """Which generated shape a name refers to."""
    READ = "read"
    INSERT = "insert"
    UPDATE = "update"


_OPERATION_SUFFIXES = {
    Operation.READ: "",
    Operation.INSERT: "Insert",
    Operation.UPDATE: "Update",
}


def operation_suffix(operation: Operation) -> str:
    return _OPERATION_SUFFIXES.get(Operation(operation), "")


def relation_qualifier(table_name: str, kind: RelationKind) -> str:
    """
    Word placed after the table name in schema names.

    Views and materialized views whose names already announce their kind
    (v_, view_, mv_, mview_) get no qualifier.
    """
    lower = table_name.lower()
    if kind in (RelationKind.TABLE, RelationKind.FOREIGN_TABLE):
        return "Table"
    if kind == RelationKind.VIEW:
        return "" if lower.startswith(("v_", "view_")) else "View"
    if kind == RelationKind.MATERIALIZED_VIEW:
        return "" if lower.startswith(("mv_", "mview_")) else "Mv"
    return ""


def format_table_schema_name(
    table_name: str,
    operation: Operation,
    casing: Casing = Casing.PASCAL,
    kind: RelationKind = RelationKind.TABLE,
    suffix: Optional[str] = None,
) -> str:
    """
    Name of an exported validation schema.

    Examples:
        ("user_posts", READ)                 -> "UserPostsTableSchema"
        ("user_summary", READ, kind=VIEW)    -> "UserSummaryViewSchema"
        ("v_user_summary", READ, kind=VIEW)  -> "VUserSummarySchema"
        ("user_posts", INSERT, suffix="BaseSchema")
                                             -> "UserPostsTableInsertBaseSchema"
    """
    qualifier = relation_qualifier(table_name, kind)
    name = f"{table_name}{qualifier}{operation_suffix(operation)}{suffix or 'Schema'}"
    return convert_case(name, casing)


def format_table_record_name(
    table_name: str,
    operation: Operation,
    casing: Casing = Casing.PASCAL,
    suffix: Optional[str] = None,
    singular: bool = True,
) -> str:
    """
    Name of an exported record type.

    Examples:
        ("user_posts", READ)     -> "UserPostRecord"
        ("categories", INSERT)   -> "CategoryInsertRecord"
    """
    base = singularize(table_name) if singular else table_name
    return convert_case(f"{base}{operation_suffix(operation)}{suffix or 'Record'}", casing)


def format_record_transform_name(
    table_name: str,
    operation: Operation,
    casing: Casing = Casing.CAMEL,
    suffix: Optional[str] = None,
    singular: bool = True,
) -> str:
    """
    Name of the function mapping one record shape onto another.

    Examples:
        ("user_posts", READ)      -> "transformUserPostBaseRecord"
        ("users", INSERT)         -> "transformUserInsertBaseRecord"
    """
    name = (
        f"transform{singular_pascal_case(table_name, singular)}"
        f"{operation_suffix(operation)}{suffix or 'BaseRecord'}"
    )
    return convert_case(name, casing)


def format_json_schema_name(
    table_name: str,
    column_name: str,
    casing: Casing = Casing.PASCAL,
    singular: bool = True,
) -> str:
    """
    Name of an externally defined schema for a json column.

    Example:
        ("user_posts", "metadata") -> "UserPostMetadataSchema"
    """
    name = f"{singular_pascal_case(table_name, singular)}{to_pascal_case(column_name)}Schema"
    return convert_case(name, casing)


def format_enum_constant_name(table_name: str, column_name: str, singular: bool = True) -> str:
    """
    Constant holding an enum's allowed values.

    Examples:
        ("users", "status")          -> "USER_STATUSES"
        ("user_posts", "category")   -> "USER_POST_CATEGORIES"
    """
    return pluralize(
        f"{singular_upper_case(table_name, singular)}_{to_snake_case(column_name).upper()}"
    )


def format_enum_type_name(
    table_name: str,
    column_name: str,
    casing: Casing = Casing.PASCAL,
    singular: bool = True,
) -> str:
    """
    Union type of an enum's values.

    Example:
        ("users", "status") -> "UserStatus"
    """
    name = f"{singular_pascal_case(table_name, singular)}{to_pascal_case(column_name)}"
    return convert_case(name, casing)


def format_singular_name(table_name: str, casing: Casing = Casing.PASCAL, singular: bool = True) -> str:
    """Singular display name of a table; only PascalCase is reshaped."""
    if casing == Casing.PASCAL:
        return singular_pascal_case(table_name, singular)
    return table_name


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "Operation",
    "operation_suffix",
    "relation_qualifier",
    "format_table_schema_name",
    "format_table_record_name",
    "format_record_transform_name",
    "format_json_schema_name",
    "format_enum_constant_name",
    "format_enum_type_name",
    "format_singular_name",
]
