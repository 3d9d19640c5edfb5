# ============================================================================
# TYPE CLASSIFIER TESTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Tests - PostgreSQL type classification
# PURPOSE: Verify kinds, array detection and serial detection
# CREATED: 19 OCT 2026
# ============================================================================
"""
Type Classifier Tests

Run with:
    pytest tests/test_type_map.py -v
"""

import pytest

from core.contracts import FieldKind
from introspection.type_map import classify, is_serial


class TestClassify:

    @pytest.mark.parametrize("data_type,kind", [
        ("int4", FieldKind.INTEGER),
        ("int8", FieldKind.INTEGER),
        ("numeric", FieldKind.FLOAT),
        ("float8", FieldKind.FLOAT),
        ("varchar", FieldKind.STRING),
        ("text", FieldKind.STRING),
        ("bool", FieldKind.BOOLEAN),
        ("uuid", FieldKind.UUID),
        ("timestamptz", FieldKind.DATE),
        ("date", FieldKind.DATE),
        ("jsonb", FieldKind.JSON),
        ("tsvector", FieldKind.UNKNOWN),
    ])
    def test_kinds(self, data_type, kind):
        assert classify(data_type).kind == kind

    def test_array_prefix(self):
        result = classify("_timestamptz")
        assert result.kind == FieldKind.DATE
        assert result.is_array is True
        assert result.is_serial is False

    def test_unknown_array(self):
        result = classify("_tsvector")
        assert result.kind == FieldKind.UNKNOWN
        assert result.is_array is True

    def test_case_insensitive(self):
        assert classify("INT4").kind == FieldKind.INTEGER


class TestSerial:

    def test_nextval_default(self):
        result = classify("int4", "nextval('users_id_seq'::regclass)")
        assert result.is_serial is True
        assert result.kind == FieldKind.INTEGER

    def test_serial_pseudo_type(self):
        assert is_serial("bigserial", None) is True

    def test_plain_default_is_not_serial(self):
        assert is_serial("int4", "0") is False
        assert classify("text", "'x'::text").is_serial is False
