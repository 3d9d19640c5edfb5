# ============================================================================
# GENERATE MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Module exports
# PURPOSE: Model building, rendering, templating and output
# CREATED: 19 OCT 2026
# ============================================================================

from generate.dialects import DialectProfile, DIALECT_PROFILES, get_profile
from generate.renderer import SchemaRenderer
from generate.model_builder import ModelBuilder
from generate.emitter import TemplateEmitter
from generate.writer import SchemaFileWriter
from generate.progress import LoggingProgressReporter, format_progress
from generate.pipeline import GenerationResult, generate_schemas

__all__ = [
    "DialectProfile",
    "DIALECT_PROFILES",
    "get_profile",
    "SchemaRenderer",
    "ModelBuilder",
    "TemplateEmitter",
    "SchemaFileWriter",
    "LoggingProgressReporter",
    "format_progress",
    "GenerationResult",
    "generate_schemas",
]
