# ============================================================================
# HOOK INVOCATION
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - User extension points
# PURPOSE: Call sync or async user hooks uniformly
# CREATED: 19 OCT 2026
# ============================================================================
"""
Hook Invocation

User hooks may be plain functions or coroutine functions. Exceptions
raised by a hook propagate unchanged.
"""

import asyncio
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


async def run_hook(hook: Optional[Callable[..., Any]], value: T, *args: Any) -> T:
    """
    Apply a hook to a value.

    Args:
        hook: User callable, or None for no-op
        value: Model handed to the hook
        *args: Extra positional arguments for the hook

    Returns:
        The hook's result, or the value itself when no hook is set
    """
    if hook is None:
        return value

    result = hook(value, *args)
    if asyncio.iscoroutine(result) or isinstance(result, asyncio.Future):
        result = await result
    return result


__all__ = ["run_hook"]
