# ============================================================================
# SCHEMA RENDERER TESTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Tests - Column read/write expressions
# PURPOSE: Pin the rendered Zod expressions per dialect and setting
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Renderer Tests

Covers:
- Read chain: base, enum, array, nullable, coalesce, optional
- Write chain: refinements, length checks, JSON and date conversion
- Dialect differences (3, 4, 4-mini, default)

Run with:
    pytest tests/test_renderer.py -v
"""

import dataclasses

import pytest

from core.config import GeneratorConfig
from core.contracts import Dialect, FieldKind, WriteTransform
from core.models import ColumnModel
from generate.dialects import FALLBACK_TYPE, get_profile
from generate.renderer import SchemaRenderer


# ============================================================================
# HELPERS
# ============================================================================

def _column(**overrides) -> ColumnModel:
    """Create a ColumnModel for users.<name> with sensible defaults."""
    values = dict(
        name="email",
        table_name="users",
        data_type="text",
        kind=FieldKind.STRING,
        property_name="email",
        enum_constant_name="USER_EMAILS",
        enum_type_name="UserEmail",
        json_schema_name="UserEmailSchema",
    )
    values.update(overrides)
    if values.get("is_nullable") and "is_optional" not in overrides:
        values["is_optional"] = True
    return ColumnModel(**values)


def _renderer(**config) -> SchemaRenderer:
    return SchemaRenderer(GeneratorConfig(**config))


# ============================================================================
# READ (ZOD 3)
# ============================================================================

class TestRenderRead:

    def test_plain_string(self):
        assert _renderer().render_read(_column()) == "z.string()"

    def test_nullable_coalesces_to_undefined(self):
        column = _column(is_nullable=True)
        assert _renderer().render_read(column) == (
            "z.string().nullable().transform((value) => value ?? undefined).optional()"
        )

    def test_nullable_array_default_empty(self):
        column = _column(is_array=True, is_nullable=True)
        assert _renderer(default_empty_array=True).render_read(column) == (
            "z.array(z.string()).nullable().transform((value) => value ?? []).optional()"
        )

    def test_nullable_array_without_default(self):
        column = _column(is_array=True, is_nullable=True)
        assert _renderer().render_read(column) == (
            "z.array(z.string()).nullable().transform((value) => value ?? undefined).optional()"
        )

    def test_enum(self):
        column = _column(name="status", is_enum=True, enum_values=["a", "b"],
                         enum_constant_name="USER_STATUSES")
        assert _renderer().render_read(column) == "z.enum(USER_STATUSES)"

    def test_dates_coerced(self):
        column = _column(name="created_at", data_type="timestamptz", kind=FieldKind.DATE)
        assert _renderer().render_read(column) == "z.coerce.date()"
        assert _renderer(coerce_dates=False).render_read(column) == "z.date()"

    def test_unknown_kind(self):
        column = _column(data_type="tsvector", kind=FieldKind.UNKNOWN)
        assert _renderer().render_read(column) == "z.unknown()"

    def test_json_import_replaces_base(self):
        column = _column(name="metadata", data_type="jsonb", kind=FieldKind.JSON,
                         json_schema_name="UserMetadataSchema")
        renderer = _renderer(json_schema_import_location="./json-schemas")
        assert renderer.render_read(column) == "UserMetadataSchema"


# ============================================================================
# WRITE (ZOD 3)
# ============================================================================

class TestRenderWrite:

    def test_nullable_string(self):
        column = _column(is_nullable=True)
        assert _renderer().render_write(column) == "z.string().nullable().optional()"

    def test_string_transforms_then_length(self):
        column = _column(max_len=255, write_transforms=[WriteTransform.TRIM])
        assert _renderer().render_write(column) == "z.string().trim().max(255)"

    def test_transform_order_is_fixed(self):
        column = _column(write_transforms=[WriteTransform.LOWERCASE, WriteTransform.TRIM])
        assert _renderer().render_write(column) == "z.string().trim().toLowerCase()"

    def test_zod3_normalize(self):
        column = _column(write_transforms=[WriteTransform.NORMALIZE])
        assert _renderer().render_write(column) == (
            "z.string().transform((value) => value.normalize())"
        )

    def test_min_and_max(self):
        column = _column(min_len=2, max_len=10)
        assert _renderer().render_write(column) == "z.string().min(2).max(10)"

    def test_refined_primitives(self):
        email = _column(kind=FieldKind.EMAIL)
        integer = _column(name="age", data_type="int4", kind=FieldKind.INTEGER,
                          write_transforms=[WriteTransform.NONNEGATIVE])
        assert _renderer().render_write(email) == "z.string().email()"
        assert _renderer().render_write(integer) == "z.number().int().nonnegative()"
        assert _renderer().render_read(integer) == "z.number()"

    def test_length_ignored_for_numbers(self):
        column = _column(name="price", data_type="numeric", kind=FieldKind.FLOAT, max_len=655362)
        assert _renderer().render_write(column) == "z.number()"

    def test_enum_skips_refinements(self):
        column = _column(name="status", is_enum=True, enum_values=["a"], max_len=20,
                         write_transforms=[WriteTransform.TRIM],
                         enum_constant_name="USER_STATUSES")
        assert _renderer().render_write(column) == "z.enum(USER_STATUSES)"

    def test_json_stringified(self):
        column = _column(name="metadata", data_type="jsonb", kind=FieldKind.JSON)
        assert _renderer().render_write(column) == (
            "z.any().transform((value) => JSON.stringify(value))"
        )
        assert _renderer(stringify_json=False).render_write(column) == "z.any()"

    def test_json_import_stringified(self):
        column = _column(name="metadata", data_type="jsonb", kind=FieldKind.JSON,
                         json_schema_name="UserMetadataSchema")
        renderer = _renderer(json_schema_import_location="./json-schemas")
        assert renderer.render_write(column) == (
            "UserMetadataSchema.transform((value) => JSON.stringify(value))"
        )

    def test_dates_stringified(self):
        column = _column(name="created_at", data_type="timestamptz", kind=FieldKind.DATE)
        renderer = _renderer(stringify_dates=True)
        assert renderer.render_write(column) == (
            "z.date().transform((value) => value.toISOString())"
        )

    def test_nullable_date_array_stringified(self):
        column = _column(name="seen_at", data_type="_timestamptz", kind=FieldKind.DATE,
                         is_array=True, is_nullable=True)
        renderer = _renderer(stringify_dates=True)
        assert renderer.render_write(column) == (
            "z.array(z.date()).nullable()"
            ".transform((value) => value ? value.map(date => date.toISOString()) : value)"
            ".optional()"
        )


# ============================================================================
# DIALECTS
# ============================================================================

class TestDialects:

    def test_zod4_primitives(self):
        renderer = _renderer(dialect=Dialect.ZOD4)
        assert renderer.render_write(_column(kind=FieldKind.EMAIL)) == "z.email()"
        assert renderer.render_read(_column(kind=FieldKind.UUID)) == "z.uuid()"
        assert renderer.render_read(_column(kind=FieldKind.JSON)) == "z.json()"

    def test_default_dialect_uses_plain_primitives(self):
        renderer = _renderer(dialect=Dialect.DEFAULT)
        assert renderer.render_write(_column(kind=FieldKind.EMAIL)) == "z.string()"

    def test_mini_read_pipes_optional(self):
        renderer = _renderer(dialect=Dialect.ZOD4_MINI)
        column = _column(is_nullable=True)
        assert renderer.render_read(column) == (
            "z.pipe(z.optional(z.nullable(z.string())), z.transform(val => val ?? undefined))"
        )

    def test_mini_write_functional_checks(self):
        renderer = _renderer(dialect=Dialect.ZOD4_MINI)
        column = _column(is_nullable=True, max_len=10, write_transforms=[WriteTransform.TRIM])
        assert renderer.render_write(column) == (
            "z.optional(z.nullable(z.string().check(z.trim()).check(z.maxLength(10))))"
        )

    def test_mini_json_guarded_after_optional(self):
        renderer = _renderer(dialect=Dialect.ZOD4_MINI)
        column = _column(name="metadata", data_type="jsonb", kind=FieldKind.JSON,
                         is_nullable=False, is_optional=True)
        assert renderer.render_write(column) == (
            "z.pipe(z.optional(z.json()), "
            "z.transform((value) => value ? JSON.stringify(value) : value))"
        )

    def test_unrecognized_kind_falls_back(self):
        profile = get_profile(Dialect.ZOD3)
        assert profile.primitive("geometry", write=False) == FALLBACK_TYPE
        assert FALLBACK_TYPE == "z.any()"

    @pytest.mark.parametrize("dialect", list(Dialect))
    def test_every_dialect_has_a_profile(self, dialect):
        profile = get_profile(dialect)
        assert profile.dialect == dialect
        assert profile.primitive(FieldKind.STRING, write=True).startswith("z.")

    def test_explicit_profile_overrides_config(self):
        config = GeneratorConfig()
        profile = dataclasses.replace(get_profile(Dialect.ZOD4), import_path="zod/v4")
        renderer = SchemaRenderer(config, profile=profile)
        assert renderer.render_write(_column(kind=FieldKind.EMAIL)) == "z.email()"
