# ============================================================================
# ZOD DIALECT PROFILES
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Dialect dispatch table
# PURPOSE: Per-dialect spelling of primitives, refinements and wrappers
# CREATED: 19 OCT 2026
# ============================================================================
"""
Zod Dialect Profiles

The renderer is written once; everything that differs between Zod
releases lives in a DialectProfile:

- primitive expression per field kind, separately for read and write
- whether refinements are chained (`.min(3)`) or functional
  (`.check(z.minLength(3))`, `z.nullable(x)`, `z.pipe(x, ...)`)
- the module the generated code imports from

Profiles:
    DEFAULT  plain primitives everywhere
    ZOD3     refined email/url/int/uuid primitives on the write side
    ZOD4     top-level z.email() / z.url() / z.int() / z.uuid() / z.json()
    ZOD4_MINI  Zod 4 primitives with the functional zod/mini API
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping

from core.contracts import Dialect, FieldKind, WriteTransform

FALLBACK_TYPE = "z.any()"
COERCED_DATE = "z.coerce.date()"

_BASE_TYPES: Dict[FieldKind, str] = {
    FieldKind.STRING: "z.string()",
    FieldKind.EMAIL: "z.string()",
    FieldKind.URL: "z.string()",
    FieldKind.UUID: "z.string()",
    FieldKind.INTEGER: "z.number()",
    FieldKind.FLOAT: "z.number()",
    FieldKind.BOOLEAN: "z.boolean()",
    FieldKind.DATE: "z.date()",
    FieldKind.JSON: "z.any()",
    FieldKind.UNKNOWN: "z.unknown()",
}

_ZOD3_WRITE_TYPES: Dict[FieldKind, str] = {
    **_BASE_TYPES,
    FieldKind.EMAIL: "z.string().email()",
    FieldKind.URL: "z.string().url()",
    FieldKind.INTEGER: "z.number().int()",
    FieldKind.UUID: "z.string().uuid()",
}

_ZOD4_TYPES: Dict[FieldKind, str] = {
    **_BASE_TYPES,
    FieldKind.EMAIL: "z.email()",
    FieldKind.URL: "z.url()",
    FieldKind.INTEGER: "z.int()",
    FieldKind.UUID: "z.uuid()",
    FieldKind.JSON: "z.json()",
}

# Chained method spelling; {expr} is the schema being refined
_CHAINED_TRANSFORMS: Dict[WriteTransform, str] = {
    WriteTransform.TRIM: "{expr}.trim()",
    WriteTransform.LOWERCASE: "{expr}.toLowerCase()",
    WriteTransform.UPPERCASE: "{expr}.toUpperCase()",
    WriteTransform.NORMALIZE: "{expr}.normalize()",
    WriteTransform.NONNEGATIVE: "{expr}.nonnegative()",
}

_ZOD3_TRANSFORMS: Dict[WriteTransform, str] = {
    **_CHAINED_TRANSFORMS,
    WriteTransform.NORMALIZE: "{expr}.transform((value) => value.normalize())",
}

_FUNCTIONAL_TRANSFORMS: Dict[WriteTransform, str] = {
    WriteTransform.TRIM: "{expr}.check(z.trim())",
    WriteTransform.LOWERCASE: "{expr}.check(z.toLowerCase())",
    WriteTransform.UPPERCASE: "{expr}.check(z.toUpperCase())",
    WriteTransform.NORMALIZE: "{expr}.check(z.normalize())",
    WriteTransform.NONNEGATIVE: "{expr}.check(z.nonnegative())",
}


@dataclass(frozen=True)
class DialectProfile:
    """Everything the renderer needs to know about one Zod dialect."""
    dialect: Dialect
    import_path: str = "zod"
    functional: bool = False
    read_types: Mapping[FieldKind, str] = field(default_factory=lambda: dict(_BASE_TYPES))
    write_types: Mapping[FieldKind, str] = field(default_factory=lambda: dict(_BASE_TYPES))
    transforms: Mapping[WriteTransform, str] = field(
        default_factory=lambda: dict(_CHAINED_TRANSFORMS)
    )

    def primitive(self, kind, write: bool) -> str:
        """Base expression for a kind; unrecognized kinds get z.any()."""
        table = self.write_types if write else self.read_types
        return table.get(kind, FALLBACK_TYPE)

    def transform(self, transform, expr: str) -> str:
        template = self.transforms.get(transform)
        return template.format(expr=expr) if template else expr


DIALECT_PROFILES: Dict[Dialect, DialectProfile] = {
    Dialect.DEFAULT: DialectProfile(dialect=Dialect.DEFAULT),
    Dialect.ZOD3: DialectProfile(
        dialect=Dialect.ZOD3,
        write_types=_ZOD3_WRITE_TYPES,
        transforms=_ZOD3_TRANSFORMS,
    ),
    Dialect.ZOD4: DialectProfile(
        dialect=Dialect.ZOD4,
        read_types=_ZOD4_TYPES,
        write_types=_ZOD4_TYPES,
    ),
    Dialect.ZOD4_MINI: DialectProfile(
        dialect=Dialect.ZOD4_MINI,
        import_path="zod/mini",
        functional=True,
        read_types=_ZOD4_TYPES,
        write_types=_ZOD4_TYPES,
        transforms=_FUNCTIONAL_TRANSFORMS,
    ),
}


def get_profile(dialect: Dialect) -> DialectProfile:
    return DIALECT_PROFILES[Dialect(dialect)]


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DialectProfile",
    "DIALECT_PROFILES",
    "get_profile",
    "FALLBACK_TYPE",
    "COERCED_DATE",
]
