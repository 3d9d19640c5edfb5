# ============================================================================
# GENERATOR ERRORS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Exception hierarchy
# PURPOSE: Typed failures for configuration, connection and rendering
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generator Errors

Every failure the pipeline raises on its own derives from GeneratorError.
Exceptions thrown by user hooks are never wrapped; they propagate as-is.

Hierarchy:
    GeneratorError
    ├── ConfigurationError   (bad or missing settings, raised before I/O)
    ├── ConnectionError      (transport could not be established)
    └── TemplateRenderError  (a template failed to render)
"""

from typing import Any, Optional


class GeneratorError(Exception):
    """Base exception for generator operations."""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message)


class ConfigurationError(GeneratorError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message, operation="configure")


class ConnectionError(GeneratorError):
    """
    Raised when the database transport cannot be established.

    The driver exception is chained as __cause__.
    """

    def __init__(self, message: str, target: Optional[str] = None):
        self.target = target
        super().__init__(message, operation="connect")


class TemplateRenderError(GeneratorError):
    """Raised when a template cannot be rendered."""

    def __init__(self, message: str, template_name: Optional[str] = None):
        self.template_name = template_name
        super().__init__(message, operation="render")


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GeneratorError",
    "ConfigurationError",
    "ConnectionError",
    "TemplateRenderError",
]
