# ============================================================================
# GENERATOR CONFIGURATION
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Run configuration
# PURPOSE: Connection, filtering, naming, rendering and output settings
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generator Configuration

Immutable dataclasses describing one generator run. Values can come from
the command line, from environment variables (from_env), or be built in
code. Invalid values raise ConfigurationError before any I/O happens.

Design:
- Immutable dataclasses, replace() to derive variants
- String values coerced to enums in __post_init__
- Hooks are plain callables or coroutine functions

Usage:
    from core.config import GeneratorConfig, ConnectionConfig

    config = GeneratorConfig(
        connection=ConnectionConfig(connection_string="postgresql://..."),
        include=["users", "posts"],
        dialect="4",
    )
"""

import os
import re
from dataclasses import dataclass, field
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Optional,
    Pattern,
    Sequence,
    Type,
    TypeVar,
    Union,
)
from enum import Enum

from core.contracts import Casing, Dialect, ModuleResolution
from core.errors import ConfigurationError
from core.models import ColumnDescriptor, ColumnModel, TableDescriptor, TableModel

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

# A hook receives a frozen model and returns it or a replacement,
# either directly or through an awaitable.
Hook = Callable[[T], Union[T, Awaitable[T]]]
RenderHook = Callable[
    [TableModel, Dict[str, str]],
    Union[Dict[str, str], Awaitable[Dict[str, str]]],
]

TableFilterSpec = Union[str, Sequence[str], None]

DEFAULT_OUTPUT_DIR = "./zod-schemas"
DEFAULT_SCHEMA = "public"
DEFAULT_APPLICATION_NAME = "pgzod"


def _coerce_enum(enum_type: Type[E], value: Any, field_name: str) -> E:
    """Accept either an enum member or its string value."""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(
            f"Invalid {field_name} '{value}'. Expected one of: {allowed}",
            field=field_name,
            value=value,
        )


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on", "require")


# ============================================================================
# CONNECTION
# ============================================================================

@dataclass(frozen=True)
class ConnectionConfig:
    """
    Database connection parameters.

    A full connection string wins over the individual fields. Without one,
    user, password, host, port and database are all required.
    """
    connection_string: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    database: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    ssl: bool = False
    application_name: str = DEFAULT_APPLICATION_NAME

    def build_connection_string(self) -> str:
        """
        Resolve the URL handed to the driver.

        Raises:
            ConfigurationError: If neither a connection string nor a complete
                set of fields is configured
        """
        if self.connection_string:
            return self.connection_string

        missing = [
            name for name in ("user", "password", "host", "port", "database")
            if getattr(self, name) in (None, "")
        ]
        if missing:
            raise ConfigurationError(
                f"Incomplete connection configuration: missing {', '.join(missing)}",
                field=missing[0],
            )

        return (
            f"postgresql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    @classmethod
    def from_env(cls) -> "ConnectionConfig":
        """Create from DATABASE_URL or the individual POSTGRES_* variables."""
        port = os.getenv("POSTGRES_PORT", "5432")
        return cls(
            connection_string=os.getenv("DATABASE_URL") or None,
            host=os.getenv("POSTGRES_HOST"),
            port=int(port) if port else None,
            database=os.getenv("POSTGRES_DB"),
            user=os.getenv("POSTGRES_USER"),
            password=os.getenv("POSTGRES_PASSWORD"),
            ssl=_env_flag("POSTGRES_SSLMODE"),
        )


# ============================================================================
# TABLE FILTER
# ============================================================================

@dataclass(frozen=True)
class TableFilter:
    """
    Include/exclude filter on relation names.

    Each side is either a regular expression (searched anywhere in the
    name) or a list of exact names. Include is applied first; exclude
    always wins.
    """
    include: TableFilterSpec = None
    exclude: TableFilterSpec = None

    def __post_init__(self):
        # Compile eagerly so bad patterns fail before any I/O
        object.__setattr__(self, "_include", self._compile("include", self.include))
        object.__setattr__(self, "_exclude", self._compile("exclude", self.exclude))

    @staticmethod
    def _compile(field_name: str, spec: TableFilterSpec):
        if spec is None:
            return None
        if isinstance(spec, str):
            try:
                return re.compile(spec)
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid {field_name} pattern '{spec}': {e}",
                    field=field_name,
                    value=spec,
                )
        if isinstance(spec, (list, tuple, set, frozenset)):
            if not all(isinstance(name, str) for name in spec):
                raise ConfigurationError(
                    f"{field_name} list must contain only table names",
                    field=field_name,
                    value=spec,
                )
            return frozenset(spec)
        raise ConfigurationError(
            f"{field_name} must be a pattern string or a list of table names",
            field=field_name,
            value=spec,
        )

    @staticmethod
    def _matches(compiled: Union[Pattern, frozenset], name: str) -> bool:
        if isinstance(compiled, frozenset):
            return name in compiled
        return compiled.search(name) is not None

    def accepts(self, table_name: str) -> bool:
        """Whether a relation passes both sides of the filter."""
        if self._include is not None and not self._matches(self._include, table_name):
            return False
        if self._exclude is not None and self._matches(self._exclude, table_name):
            return False
        return True


# ============================================================================
# HOOKS
# ============================================================================

@dataclass(frozen=True)
class GeneratorHooks:
    """
    Extension points, each optional.

    on_column_info_created:   ColumnDescriptor -> ColumnDescriptor (connector)
    on_table_info_created:    TableDescriptor  -> TableDescriptor  (connector)
    on_column_model_created:  ColumnModel      -> ColumnModel      (model builder)
    on_table_model_created:   TableModel       -> TableModel       (model builder)
    on_table_rendered:        (TableModel, {file: text}) -> {file: text}
    """
    on_column_info_created: Optional[Hook[ColumnDescriptor]] = None
    on_table_info_created: Optional[Hook[TableDescriptor]] = None
    on_column_model_created: Optional[Hook[ColumnModel]] = None
    on_table_model_created: Optional[Hook[TableModel]] = None
    on_table_rendered: Optional[RenderHook] = None


# ============================================================================
# GENERATOR
# ============================================================================

@dataclass(frozen=True)
class GeneratorConfig:
    """
    Complete settings for one generation run.

    Naming:
        field_name_casing   property names in generated records
        object_name_casing  schema, record and type names
        case_transform      False keeps column names verbatim and emits
                            schemas without mapping transforms
        singularize         False keeps table names plural in record names

    Rendering:
        coerce_dates        read dates through z.coerce.date()
        stringify_json      write json columns as JSON.stringify(value)
        stringify_dates     write dates as ISO strings
        default_empty_array null arrays read back as []
    """
    connection: ConnectionConfig = field(default_factory=ConnectionConfig)
    schema_name: str = DEFAULT_SCHEMA
    include: TableFilterSpec = None
    exclude: TableFilterSpec = None

    # Naming
    field_name_casing: Casing = Casing.CAMEL
    object_name_casing: Casing = Casing.PASCAL
    case_transform: bool = True
    singularize: bool = True

    # Rendering
    dialect: Dialect = Dialect.ZOD3
    json_schema_import_location: Optional[str] = None
    coerce_dates: bool = True
    stringify_json: bool = True
    stringify_dates: bool = False
    default_empty_array: bool = False

    # Output
    output_dir: str = DEFAULT_OUTPUT_DIR
    module_resolution: ModuleResolution = ModuleResolution.COMMONJS
    clean_output: bool = False

    hooks: GeneratorHooks = field(default_factory=GeneratorHooks)

    def __post_init__(self):
        object.__setattr__(
            self, "field_name_casing",
            _coerce_enum(Casing, self.field_name_casing, "field_name_casing"),
        )
        object.__setattr__(
            self, "object_name_casing",
            _coerce_enum(Casing, self.object_name_casing, "object_name_casing"),
        )
        object.__setattr__(self, "dialect", _coerce_enum(Dialect, self.dialect, "dialect"))
        object.__setattr__(
            self, "module_resolution",
            _coerce_enum(ModuleResolution, self.module_resolution, "module_resolution"),
        )
        if not self.schema_name:
            raise ConfigurationError("schema_name must not be empty", field="schema_name")
        if not self.output_dir:
            raise ConfigurationError("output_dir must not be empty", field="output_dir")

    @property
    def table_filter(self) -> TableFilter:
        """Compiled include/exclude filter (raises ConfigurationError if invalid)."""
        return TableFilter(include=self.include, exclude=self.exclude)

    @property
    def effective_field_casing(self) -> Casing:
        """Field casing actually applied to property names."""
        if not self.case_transform:
            return Casing.PASSTHROUGH
        return self.field_name_casing

    def validate(self, require_connection: bool = True) -> None:
        """
        Check everything that can be checked without a database.

        Args:
            require_connection: Also resolve the connection string

        Raises:
            ConfigurationError: On the first invalid setting
        """
        TableFilter(include=self.include, exclude=self.exclude)
        if require_connection:
            self.connection.build_connection_string()

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Create from environment variables, with keyword overrides."""
        values: Dict[str, Any] = {
            "connection": ConnectionConfig.from_env(),
            "schema_name": os.getenv("PGZOD_SCHEMA", DEFAULT_SCHEMA),
            "output_dir": os.getenv("PGZOD_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        }
        values.update(overrides)
        return cls(**values)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ConnectionConfig",
    "TableFilter",
    "GeneratorHooks",
    "GeneratorConfig",
    "Hook",
    "RenderHook",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SCHEMA",
]
