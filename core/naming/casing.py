# ============================================================================
# IDENTIFIER CASING
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Case conversion
# PURPOSE: camelCase / PascalCase / snake_case / kebab-case conversion
# CREATED: 19 OCT 2026
# ============================================================================
"""
Identifier Casing

Pure string conversions used for every generated identifier.

    to_camel_case("user_posts")        -> "userPosts"
    to_pascal_case("user_posts")       -> "UserPosts"
    to_snake_case("UserPostsSchema")   -> "user_posts_schema"
    to_kebab_case("UserPostsSchema")   -> "user-posts-schema"
"""

import re

from core.contracts import Casing
from core.naming.inflection import singularize

_SEPARATORS = re.compile(r"[_-]+")
_WORD_START = re.compile(r"(?:^|\s)(\w)")
_WHITESPACE = re.compile(r"\s+")
_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_DASH_OR_SPACE = re.compile(r"[-\s]+")
_SPLIT_PARTS = re.compile(r"_|-|\s+")


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def to_camel_case(value: str) -> str:
    spaced = _SEPARATORS.sub(" ", value)
    titled = _WORD_START.sub(lambda m: m.group(1).upper(), spaced)
    joined = _WHITESPACE.sub("", titled)
    return joined[:1].lower() + joined[1:]


def to_pascal_case(value: str) -> str:
    return upper_first(to_camel_case(value))


def to_snake_case(value: str) -> str:
    split = _CASE_BOUNDARY.sub(r"\1_\2", value)
    return _DASH_OR_SPACE.sub("_", split).lower()


def to_kebab_case(value: str) -> str:
    split = _CASE_BOUNDARY.sub(r"\1-\2", value)
    return _DASH_OR_SPACE.sub("-", split).lower()


def convert_case(value: str, casing: Casing = Casing.PASSTHROUGH) -> str:
    """Apply a casing style; PASSTHROUGH returns the value unchanged."""
    if casing == Casing.CAMEL:
        return to_camel_case(value)
    if casing == Casing.PASCAL:
        return to_pascal_case(value)
    if casing == Casing.SNAKE:
        return to_snake_case(value)
    if casing == Casing.KEBAB:
        return to_kebab_case(value)
    return value


def singular_upper_case(table_name: str, singular: bool = True) -> str:
    """
    Upper snake form with every word singularized.

    Example:
        singular_upper_case("user_posts") -> "USER_POST"
    """
    parts = to_snake_case(table_name).split("_")
    if singular:
        parts = [singularize(part) for part in parts]
    return "_".join(part.upper() for part in parts)


def singular_pascal_case(table_name: str, singular: bool = True) -> str:
    """
    Pascal form with every word singularized.

    Example:
        singular_pascal_case("user_posts") -> "UserPost"
    """
    parts = _SPLIT_PARTS.split(to_snake_case(table_name))
    if singular:
        parts = [singularize(part) for part in parts]
    return "".join(to_pascal_case(part.lower()) for part in parts)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "upper_first",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_kebab_case",
    "convert_case",
    "singular_upper_case",
    "singular_pascal_case",
]
