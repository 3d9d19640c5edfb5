# ============================================================================
# INTROSPECTION MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Introspection - Module exports
# PURPOSE: Catalog reading, classification and enum recovery
# CREATED: 19 OCT 2026
# ============================================================================

from introspection.constraints import extract_enum_values
from introspection.type_map import classify, TypeClassification
from introspection.connector import DatabaseConnector
from introspection.postgresql_connector import PostgreSqlConnector, CATALOG_QUERY

__all__ = [
    "extract_enum_values",
    "classify",
    "TypeClassification",
    "DatabaseConnector",
    "PostgreSqlConnector",
    "CATALOG_QUERY",
]
