# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Configuration
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides the run configuration for the schema generator.
"""

from core.config.settings import (
    ConnectionConfig,
    TableFilter,
    GeneratorHooks,
    GeneratorConfig,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCHEMA,
)

__all__ = [
    "ConnectionConfig",
    "TableFilter",
    "GeneratorHooks",
    "GeneratorConfig",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SCHEMA",
]
