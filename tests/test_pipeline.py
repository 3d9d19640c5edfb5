# ============================================================================
# GENERATION PIPELINE TESTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Tests - End-to-end generation against an in-memory catalog
# PURPOSE: Verify progress events, output layout, cleaning and result flags
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Pipeline Tests

Uses an in-memory connector and tmp_path output; no database.

Run with:
    pytest tests/test_pipeline.py -v
"""

import asyncio

import pytest

from core.config import GeneratorConfig, GeneratorHooks
from core.contracts import ProgressEvent, RelationKind
from core.errors import ConfigurationError
from core.models import RawColumnDescriptor
from generate.pipeline import generate_schemas
from generate.progress import LoggingProgressReporter, format_progress
from generate.writer import SchemaFileWriter
from introspection.connector import DatabaseConnector


# ============================================================================
# HELPERS
# ============================================================================

class InMemoryConnector(DatabaseConnector):

    def __init__(self, columns, hooks=None):
        super().__init__(hooks=hooks)
        self.columns = columns

    async def fetch_raw_columns(self, config):
        return list(self.columns)


def _catalog():
    return [
        RawColumnDescriptor(name="id", table_name="users", data_type="int4",
                            default_value="nextval('users_id_seq'::regclass)"),
        RawColumnDescriptor(name="email", table_name="users", data_type="text"),
        RawColumnDescriptor(name="title", table_name="posts", data_type="text"),
        RawColumnDescriptor(name="total", table_name="user_summary", data_type="int8",
                            table_kind=RelationKind.VIEW),
    ]


class ProgressRecorder:
    def __init__(self):
        self.events = []

    def __call__(self, event, details):
        self.events.append((event, details))


def _run(tmp_path, columns=None, on_progress=None, **config):
    config = GeneratorConfig(output_dir=str(tmp_path), **config)
    connector = InMemoryConnector(_catalog() if columns is None else columns, hooks=config.hooks)
    return asyncio.run(generate_schemas(config, on_progress=on_progress, connector=connector))


# ============================================================================
# PROGRESS
# ============================================================================

class TestProgress:

    def test_events_in_order(self, tmp_path):
        recorder = ProgressRecorder()
        _run(tmp_path, on_progress=recorder)
        assert [event for event, _ in recorder.events] == [
            ProgressEvent.CONNECTING,
            ProgressEvent.FETCHING_SCHEMA,
            ProgressEvent.GENERATING,
            ProgressEvent.DONE,
        ]
        assert recorder.events[2][1] == {"total": 3}

    def test_async_callback(self, tmp_path):
        seen = []

        async def on_progress(event, details):
            seen.append(event)

        _run(tmp_path, on_progress=on_progress)
        assert seen[-1] == ProgressEvent.DONE

    def test_messages(self):
        assert format_progress(ProgressEvent.GENERATING, {"total": 3}) == "Generating 3 Zod schemas..."
        assert format_progress(ProgressEvent.DONE) == "Zod schemas generated successfully."

    def test_logging_reporter(self, caplog):
        reporter = LoggingProgressReporter()
        with caplog.at_level("INFO"):
            reporter(ProgressEvent.CONNECTING, {})
        assert "Connecting to Postgres database..." in caplog.text


# ============================================================================
# OUTPUT
# ============================================================================

class TestOutput:

    def test_layout(self, tmp_path):
        result = _run(tmp_path)

        assert result.success is True
        assert result.tables == ["posts", "users", "user_summary"]
        for path in (
            "tables/users/schema.ts",
            "tables/users/index.ts",
            "tables/posts/schema.ts",
            "tables/index.ts",
            "views/user_summary/schema.ts",
            "views/index.ts",
            "constants.ts",
            "types.ts",
        ):
            assert (tmp_path / path).is_file(), path
        assert (tmp_path / "tables/users/schema.ts") in result.files

    def test_constants_and_types_cover_generated_tables(self, tmp_path):
        _run(tmp_path)
        constants = (tmp_path / "constants.ts").read_text()
        assert "export const TABLE_POSTS = 'posts';" in constants
        assert "export const TABLE_USER_SUMMARY = 'user_summary';" in constants
        types = (tmp_path / "types.ts").read_text()
        assert "  | 'user_summary';" in types

    def test_no_tables_is_unsuccessful(self, tmp_path):
        recorder = ProgressRecorder()
        result = _run(tmp_path, on_progress=recorder, include="^nothing$")

        assert result.success is False
        assert result.message == "No tables matched in schema 'public'"
        assert recorder.events[-1][0] == ProgressEvent.DONE
        assert recorder.events[2][1] == {"total": 0}
        assert not (tmp_path / "constants.ts").exists()

    def test_clean_output(self, tmp_path):
        stale = tmp_path / "tables" / "dropped" / "schema.ts"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale")
        keep = tmp_path / "README.md"
        keep.write_text("keep")

        _run(tmp_path, clean_output=True)

        assert not stale.exists()
        assert keep.exists()
        assert (tmp_path / "tables/users/schema.ts").is_file()

    def test_stale_output_kept_without_clean(self, tmp_path):
        stale = tmp_path / "tables" / "dropped" / "schema.ts"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale")

        _run(tmp_path)

        assert stale.exists()

    def test_rendered_hook_can_add_files(self, tmp_path):
        def add_readme(model, files):
            return {**files, "README.md": f"# {model.table_name}\n"}

        _run(tmp_path, hooks=GeneratorHooks(on_table_rendered=add_readme))
        assert (tmp_path / "tables/users/README.md").read_text() == "# users\n"

    def test_invalid_filter_fails_before_writing(self, tmp_path):
        with pytest.raises(ConfigurationError):
            _run(tmp_path / "out", include="[")
        assert not (tmp_path / "out").exists()

    def test_connection_required_without_connector(self, tmp_path):
        config = GeneratorConfig(output_dir=str(tmp_path))
        with pytest.raises(ConfigurationError):
            asyncio.run(generate_schemas(config))


# ============================================================================
# WRITER
# ============================================================================

class TestSchemaFileWriter:

    def test_kind_folders(self, tmp_path):
        writer = SchemaFileWriter(tmp_path)
        assert writer.table_dir(RelationKind.MATERIALIZED_VIEW, "sales") == (
            tmp_path / "materialized_views" / "sales"
        )
        assert writer.kind_folder(RelationKind.FOREIGN_TABLE) == "foreign_tables"

    def test_write_table(self, tmp_path):
        writer = SchemaFileWriter(tmp_path)
        paths = writer.write_table(RelationKind.TABLE, "users", {"schema.ts": "x", "index.ts": "y"})
        assert paths == [tmp_path / "tables/users/schema.ts", tmp_path / "tables/users/index.ts"]
        assert (tmp_path / "tables/users/schema.ts").read_text() == "x"
        assert writer.written == paths

    def test_clean_on_missing_directory(self, tmp_path):
        SchemaFileWriter(tmp_path / "missing").clean()
