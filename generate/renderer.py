# ============================================================================
# SCHEMA RENDERER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Column type expressions
# PURPOSE: Render read and write Zod expressions for one column
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Renderer

Produces the two type expressions of a column:

Read chain:
    base -> enum -> array -> nullable -> coalesce (?? [] / ?? undefined) -> optional

Write chain:
    base -> string/numeric refinements -> length checks -> enum -> array
         -> nullable -> JSON stringify -> date to ISO string -> optional

A JSON column with an imported sub-schema uses that schema's name as its
base expression. The renderer is total: unknown kinds degrade to
z.unknown() and unrecognized kinds to z.any().

Usage:
    renderer = SchemaRenderer(config)
    renderer.render_read(column)   # "z.string().nullable()..."
"""

from typing import Optional

from core.config import GeneratorConfig
from core.contracts import FieldKind, WriteTransform
from core.models import ColumnDescriptor
from generate.dialects import COERCED_DATE, DialectProfile, get_profile

_TEXTUAL_KINDS = frozenset({FieldKind.STRING, FieldKind.EMAIL, FieldKind.URL, FieldKind.UUID})
_NUMERIC_KINDS = frozenset({FieldKind.INTEGER, FieldKind.FLOAT})
_STRING_TRANSFORMS = (
    WriteTransform.TRIM,
    WriteTransform.LOWERCASE,
    WriteTransform.UPPERCASE,
    WriteTransform.NORMALIZE,
)


class SchemaRenderer:
    """
    Dialect-parameterized renderer.

    Args:
        config: Generator settings (dates, JSON, arrays, import location)
        profile: Explicit dialect profile; defaults to config.dialect
    """

    def __init__(self, config: GeneratorConfig, profile: Optional[DialectProfile] = None):
        self.config = config
        self.profile = profile or get_profile(config.dialect)

    # =========================================================================
    # WRAPPERS
    # =========================================================================

    def _nullable(self, expr: str) -> str:
        return f"z.nullable({expr})" if self.profile.functional else f"{expr}.nullable()"

    def _optional(self, expr: str) -> str:
        return f"z.optional({expr})" if self.profile.functional else f"{expr}.optional()"

    def _pipe(self, expr: str, body: str) -> str:
        if self.profile.functional:
            return f"z.pipe({expr}, z.transform({body}))"
        return f"{expr}.transform({body})"

    def _length_checks(self, expr: str, column: ColumnDescriptor) -> str:
        checks = []
        if column.min_len is not None:
            checks.append(("min", "minLength", column.min_len))
        if column.max_len is not None:
            checks.append(("max", "maxLength", column.max_len))

        for method, check, value in checks:
            if self.profile.functional:
                expr = f"{expr}.check(z.{check}({value}))"
            else:
                expr = f"{expr}.{method}({value})"
        return expr

    # =========================================================================
    # SHARED
    # =========================================================================

    def _uses_json_import(self, column) -> bool:
        return (
            column.kind == FieldKind.JSON
            and bool(self.config.json_schema_import_location)
            and bool(getattr(column, "json_schema_name", None))
        )

    def _base(self, column, write: bool) -> str:
        if self._uses_json_import(column):
            return column.json_schema_name
        if column.kind == FieldKind.DATE and not write and self.config.coerce_dates:
            return COERCED_DATE
        return self.profile.primitive(column.kind, write)

    def _enum_or_base(self, expr: str, column) -> str:
        if column.is_enum:
            return f"z.enum({column.enum_constant_name})"
        return expr

    # =========================================================================
    # READ
    # =========================================================================

    def render_read(self, column) -> str:
        """
        Expression validating a value read from the database.

        Example (nullable date array, chained dialect):
            z.array(z.coerce.date()).nullable()
                .transform((value) => value ?? undefined).optional()
        """
        expr = self._enum_or_base(self._base(column, write=False), column)
        if column.is_array:
            expr = f"z.array({expr})"

        if column.is_nullable:
            expr = self._nullable(expr)

        if column.is_nullable or column.is_optional:
            fallback = "[]" if column.is_array and self.config.default_empty_array else "undefined"
            if self.profile.functional:
                expr = f"z.pipe({self._optional(expr)}, z.transform(val => val ?? {fallback}))"
            else:
                expr = self._optional(f"{expr}.transform((value) => value ?? {fallback})")

        return expr

    # =========================================================================
    # WRITE
    # =========================================================================

    def _refine(self, expr: str, column) -> str:
        transforms = list(column.write_transforms or [])
        if column.kind in _TEXTUAL_KINDS:
            for transform in _STRING_TRANSFORMS:
                if transform in transforms:
                    expr = self.profile.transform(transform, expr)
            expr = self._length_checks(expr, column)
        elif column.kind in _NUMERIC_KINDS and WriteTransform.NONNEGATIVE in transforms:
            expr = self.profile.transform(WriteTransform.NONNEGATIVE, expr)
        return expr

    def render_write(self, column) -> str:
        """
        Expression validating a value written to the database.

        Example (nullable date array with stringify_dates):
            z.array(z.date()).nullable()
                .transform((value) => value ? value.map(date => date.toISOString()) : value)
                .optional()
        """
        expr = self._base(column, write=True)
        if not column.is_enum and not self._uses_json_import(column):
            expr = self._refine(expr, column)
        expr = self._enum_or_base(expr, column)
        if column.is_array:
            expr = f"z.array({expr})"

        if column.is_nullable:
            expr = self._nullable(expr)

        # Functional dialects wrap optional before piping, so the value may be undefined
        if self.profile.functional and column.is_optional:
            expr = self._optional(expr)
            guarded = True
        else:
            guarded = column.is_nullable

        if column.kind == FieldKind.JSON and self.config.stringify_json:
            body = (
                "(value) => value ? JSON.stringify(value) : value"
                if guarded else "(value) => JSON.stringify(value)"
            )
            expr = self._pipe(expr, body)

        if column.kind == FieldKind.DATE and self.config.stringify_dates:
            convert = (
                "value.map(date => date.toISOString())"
                if column.is_array else "value.toISOString()"
            )
            body = f"(value) => value ? {convert} : value" if guarded else f"(value) => {convert}"
            expr = self._pipe(expr, body)

        if column.is_optional and not self.profile.functional:
            expr = self._optional(expr)

        return expr


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["SchemaRenderer"]
