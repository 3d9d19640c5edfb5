# ============================================================================
# TYPE CLASSIFIER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Introspection - PostgreSQL type classification
# PURPOSE: Map pg_type names onto semantic field kinds
# CREATED: 19 OCT 2026
# ============================================================================
"""
Type Classifier

Turns a catalog type name and default expression into:
- a FieldKind (unknown for anything not in the table below)
- an array flag (array type names start with "_")
- a serial flag (sequence-backed default or a serial pseudo-type)
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

from core.contracts import FieldKind

_NEXTVAL = re.compile(r"^nextval\(", re.IGNORECASE)

SERIAL_TYPES = frozenset({
    "serial",
    "serial2",
    "serial4",
    "serial8",
    "smallserial",
    "bigserial",
})

TYPE_KINDS: Dict[str, FieldKind] = {
    # Integers
    "int2": FieldKind.INTEGER,
    "int4": FieldKind.INTEGER,
    "int8": FieldKind.INTEGER,
    "smallint": FieldKind.INTEGER,
    "integer": FieldKind.INTEGER,
    "bigint": FieldKind.INTEGER,
    "serial": FieldKind.INTEGER,
    "serial2": FieldKind.INTEGER,
    "serial4": FieldKind.INTEGER,
    "serial8": FieldKind.INTEGER,
    "smallserial": FieldKind.INTEGER,
    "bigserial": FieldKind.INTEGER,

    # Floating point and exact numerics
    "float4": FieldKind.FLOAT,
    "float8": FieldKind.FLOAT,
    "real": FieldKind.FLOAT,
    "numeric": FieldKind.FLOAT,
    "decimal": FieldKind.FLOAT,
    "money": FieldKind.FLOAT,

    # Text
    "varchar": FieldKind.STRING,
    "bpchar": FieldKind.STRING,
    "char": FieldKind.STRING,
    "text": FieldKind.STRING,
    "name": FieldKind.STRING,
    "citext": FieldKind.STRING,
    "time": FieldKind.STRING,
    "timetz": FieldKind.STRING,

    "uuid": FieldKind.UUID,
    "bool": FieldKind.BOOLEAN,

    # Dates
    "timestamp": FieldKind.DATE,
    "timestamptz": FieldKind.DATE,
    "date": FieldKind.DATE,

    "json": FieldKind.JSON,
    "jsonb": FieldKind.JSON,
}


@dataclass(frozen=True)
class TypeClassification:
    kind: FieldKind
    is_array: bool = False
    is_serial: bool = False


def is_serial(data_type: str, default_value: Optional[str]) -> bool:
    if default_value and _NEXTVAL.match(default_value.strip()):
        return True
    return data_type.lower() in SERIAL_TYPES


def classify(data_type: str, default_value: Optional[str] = None) -> TypeClassification:
    """
    Classify a catalog type.

    Examples:
        classify("int4", "nextval('users_id_seq'::regclass)")
            -> TypeClassification(INTEGER, is_array=False, is_serial=True)
        classify("_timestamptz")
            -> TypeClassification(DATE, is_array=True, is_serial=False)
    """
    name = (data_type or "").lower()
    array = name.startswith("_")
    base = name[1:] if array else name

    return TypeClassification(
        kind=TYPE_KINDS.get(base, FieldKind.UNKNOWN),
        is_array=array,
        is_serial=is_serial(base, default_value),
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "TypeClassification",
    "classify",
    "is_serial",
    "TYPE_KINDS",
    "SERIAL_TYPES",
]
