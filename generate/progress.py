# ============================================================================
# GENERATION PROGRESS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Progress reporting
# PURPOSE: Emit connecting/fetching/generating/done events
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Progress

The pipeline reports four events, each exactly once and in order:

    CONNECTING -> FETCHING_SCHEMA -> GENERATING (total=N) -> DONE

A progress callback receives (event, details). LoggingProgressReporter is
the callback the CLI uses; passing None disables reporting.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from core.contracts import ProgressEvent

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent, Dict[str, Any]], Union[None, Awaitable[None]]]

PROGRESS_MESSAGES: Dict[ProgressEvent, str] = {
    ProgressEvent.CONNECTING: "Connecting to Postgres database...",
    ProgressEvent.FETCHING_SCHEMA: "Fetching schema information...",
    ProgressEvent.GENERATING: "Generating {total} Zod schemas...",
    ProgressEvent.DONE: "Zod schemas generated successfully.",
}


def format_progress(event: ProgressEvent, details: Optional[Dict[str, Any]] = None) -> str:
    template = PROGRESS_MESSAGES.get(event, str(event))
    try:
        return template.format(**(details or {}))
    except KeyError:
        return template


class LoggingProgressReporter:
    """Progress callback writing one INFO line per event."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def __call__(self, event: ProgressEvent, details: Dict[str, Any]) -> None:
        self.log.info(format_progress(event, details))


async def report(
    callback: Optional[ProgressCallback],
    event: ProgressEvent,
    **details: Any,
) -> None:
    """Invoke a progress callback, awaiting it when it is a coroutine."""
    if callback is None:
        return
    result = callback(event, details)
    if asyncio.iscoroutine(result):
        await result


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ProgressCallback",
    "PROGRESS_MESSAGES",
    "format_progress",
    "LoggingProgressReporter",
    "report",
]
