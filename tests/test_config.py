# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Tests - Run configuration, hooks and logging helpers
# PURPOSE: Verify validation, environment loading and masking
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import asyncio
import json
import logging

import pytest

from core.config import ConnectionConfig, GeneratorConfig, TableFilter
from core.contracts import Casing, Dialect, ModuleResolution
from core.errors import ConfigurationError
from core.hooks import run_hook
from core.logging import (
    StructuredFormatter,
    get_current_context,
    log_context,
    mask_connection_string,
)

ENV_VARS = (
    "DATABASE_URL",
    "POSTGRES_HOST",
    "POSTGRES_PORT",
    "POSTGRES_DB",
    "POSTGRES_USER",
    "POSTGRES_PASSWORD",
    "POSTGRES_SSLMODE",
    "PGZOD_SCHEMA",
    "PGZOD_OUTPUT_DIR",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# ============================================================================
# GENERATOR CONFIG
# ============================================================================

class TestGeneratorConfig:

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.schema_name == "public"
        assert config.output_dir == "./zod-schemas"
        assert config.dialect == Dialect.ZOD3
        assert config.field_name_casing == Casing.CAMEL
        assert config.object_name_casing == Casing.PASCAL
        assert config.module_resolution == ModuleResolution.COMMONJS

    def test_string_values_coerced(self):
        config = GeneratorConfig(dialect="4-mini", field_name_casing="snake_case",
                                 module_resolution="esm")
        assert config.dialect == Dialect.ZOD4_MINI
        assert config.field_name_casing == Casing.SNAKE
        assert config.module_resolution == ModuleResolution.ESM

    @pytest.mark.parametrize("field,value", [
        ("dialect", "5"),
        ("field_name_casing", "Title Case"),
        ("object_name_casing", "SCREAMING"),
        ("module_resolution", "amd"),
    ])
    def test_invalid_enum(self, field, value):
        with pytest.raises(ConfigurationError) as exc_info:
            GeneratorConfig(**{field: value})
        assert exc_info.value.field == field

    def test_empty_schema_rejected(self):
        with pytest.raises(ConfigurationError):
            GeneratorConfig(schema_name="")

    def test_effective_field_casing(self):
        assert GeneratorConfig().effective_field_casing == Casing.CAMEL
        assert GeneratorConfig(case_transform=False).effective_field_casing == Casing.PASSTHROUGH

    def test_validate_without_connection(self):
        GeneratorConfig().validate(require_connection=False)
        with pytest.raises(ConfigurationError):
            GeneratorConfig().validate()

    def test_from_env(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://app:secret@db/app")
        clean_env.setenv("PGZOD_SCHEMA", "reporting")
        config = GeneratorConfig.from_env(dialect="4")
        assert config.connection.connection_string == "postgresql://app:secret@db/app"
        assert config.schema_name == "reporting"
        assert config.dialect == Dialect.ZOD4


# ============================================================================
# CONNECTION CONFIG
# ============================================================================

class TestConnectionConfig:

    def test_connection_string_wins(self):
        config = ConnectionConfig(connection_string="postgresql://a:b@h/d", host="ignored")
        assert config.build_connection_string() == "postgresql://a:b@h/d"

    def test_built_from_fields(self):
        config = ConnectionConfig(host="db", port=5433, database="app", user="app", password="pw")
        assert config.build_connection_string() == "postgresql://app:pw@db:5433/app"

    def test_missing_fields(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ConnectionConfig(host="db", port=5432).build_connection_string()
        message = str(exc_info.value)
        assert message.startswith("Incomplete connection configuration")
        assert "password" in message
        assert "database" in message

    def test_from_env_fields(self, clean_env):
        clean_env.setenv("POSTGRES_HOST", "db")
        clean_env.setenv("POSTGRES_DB", "app")
        clean_env.setenv("POSTGRES_USER", "app")
        clean_env.setenv("POSTGRES_PASSWORD", "pw")
        clean_env.setenv("POSTGRES_SSLMODE", "require")
        config = ConnectionConfig.from_env()
        assert config.port == 5432
        assert config.ssl is True
        assert config.build_connection_string() == "postgresql://app:pw@db:5432/app"


# ============================================================================
# TABLE FILTER
# ============================================================================

class TestTableFilter:

    def test_no_rules_accepts_everything(self):
        assert TableFilter().accepts("anything") is True

    def test_exclude_wins(self):
        table_filter = TableFilter(include="^user", exclude="_audit$")
        assert table_filter.accepts("users") is True
        assert table_filter.accepts("users_audit") is False
        assert table_filter.accepts("posts") is False

    def test_name_list_is_exact(self):
        table_filter = TableFilter(include=["users"])
        assert table_filter.accepts("users") is True
        assert table_filter.accepts("app_users") is False

    @pytest.mark.parametrize("spec", ["(", [1, 2], 42])
    def test_invalid_specs(self, spec):
        with pytest.raises(ConfigurationError):
            TableFilter(include=spec)


# ============================================================================
# HOOKS AND LOGGING HELPERS
# ============================================================================

class TestRunHook:

    def test_none_returns_value(self):
        assert asyncio.run(run_hook(None, "value")) == "value"

    def test_sync_and_async(self):
        async def shout(value):
            return value.upper()

        assert asyncio.run(run_hook(lambda value: value + "!", "hi")) == "hi!"
        assert asyncio.run(run_hook(shout, "hi")) == "HI"

    def test_extra_arguments(self):
        assert asyncio.run(run_hook(lambda value, extra: value + extra, 1, 2)) == 3


class TestLoggingHelpers:

    def test_mask_password(self):
        masked = mask_connection_string("postgresql://app:secret@db:5432/main")
        assert masked == "postgresql://app:****@db:5432/main"

    def test_mask_leaves_other_text(self):
        assert mask_connection_string("host=db dbname=main") == "host=db dbname=main"

    def test_nested_context(self):
        with log_context(schema_name="public"):
            with log_context(table_name="users"):
                context = get_current_context()
                assert context.schema_name == "public"
                assert context.table_name == "users"
            assert get_current_context().table_name is None

    def test_mask_keyword_password(self):
        masked = mask_connection_string("host=db dbname=app user=app password=secret")
        assert masked == "host=db dbname=app user=app password=****"

    def test_mask_quoted_keyword_password(self):
        masked = mask_connection_string("host=db password = 'se cret' sslmode=require")
        assert masked == "host=db password = **** sslmode=require"
        assert "cret" not in masked

    def test_mask_url_query_password(self):
        masked = mask_connection_string("postgresql://db/app?user=app&password=secret&sslmode=require")
        assert masked == "postgresql://db/app?user=app&password=****&sslmode=require"

    def test_json_formatter_includes_context(self):
        record = logging.LogRecord("pgzod", logging.INFO, __file__, 1, "Rendering", None, None)
        with log_context(schema_name="public", table_name="users"):
            data = json.loads(StructuredFormatter().format(record))
        assert data["message"] == "Rendering"
        assert data["level"] == "INFO"
        assert data["context"] == {"schema_name": "public", "table_name": "users"}
