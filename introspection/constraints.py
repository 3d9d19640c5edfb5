# ============================================================================
# CHECK CONSTRAINT PARSER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Introspection - Enum recovery from check clauses
# PURPOSE: Extract allowed value sets from pg_get_constraintdef() output
# CREATED: 19 OCT 2026
# ============================================================================
"""
Check Constraint Parser

Recovers enumerated value sets from check-constraint clauses. This is a
set of recognizers for the shapes PostgreSQL actually prints, not a SQL
parser. Anything unrecognized yields no values; nothing here raises.

Recognized shapes, tried in order per clause (first non-empty wins):

    1. col = ANY (ARRAY['a'::text, 'b'::text])
       col = ANY ((ARRAY['a', 'b'])::character varying[])
    2. col IN ('a', 'b')
    3. col = 'a' OR col = 'b'
    4. col <@ ARRAY['a', 'b']

The ANY form does not look at the column name: a multi-column check that
compares another column against an array still contributes its values.
The other three forms only accept comparisons on the requested column.
"""

import logging
import re
from typing import Callable, Iterable, List, Sequence

logger = logging.getLogger(__name__)

_ANY_ARRAY = re.compile(
    r"ANY\s*\(\s*(?:\(+)?ARRAY\[(.*?)\](?:\))*(::[a-zA-Z0-9_ \[\]]+)?\s*\)"
)
_IN_LIST = re.compile(r"\(\s*\"?([a-zA-Z0-9_]+)\"?\s+IN\s+\((.*?)\)\s*\)")
_OR_CHAIN = re.compile(
    r"\(\s*((?:\"?[a-zA-Z0-9_]+\"?\s*=\s*'[^']+'\s*OR\s*)+\"?[a-zA-Z0-9_]+\"?\s*=\s*'[^']+')\s*\)"
)
_OR_SPLIT = re.compile(r"\s+OR\s+")
_EQUALS = re.compile(r"\"?([a-zA-Z0-9_]+)\"?\s*=\s*'([^']+)'")
_CONTAINED_BY = re.compile(r"\(\s*\"?([a-zA-Z0-9_]+)\"?\s*<@\s*ARRAY\[(.*?)\]\s*\)")

_TYPE_CAST = re.compile(r"'::[a-zA-Z0-9_ ]+")


def _same_column(found: str, column_name: str) -> bool:
    return found.strip('"').lower() == column_name.strip('"').lower()


def _clean_values(raw_list: str) -> List[str]:
    """Split a literal list and drop casts and quotes from each element."""
    return [_TYPE_CAST.sub("", value.strip()).replace("'", "") for value in raw_list.split(",")]


def _strip_parentheses(clause: str) -> str:
    while clause.startswith("(") and clause.endswith(")"):
        clause = clause[1:-1]
    return clause


def parse_any_array(clause: str) -> List[str]:
    """Values of a `= ANY (ARRAY[...])` comparison, any column."""
    match = _ANY_ARRAY.search(_strip_parentheses(clause))
    if not match:
        return []
    return _clean_values(match.group(1))


def parse_in_list(column_name: str, clause: str) -> List[str]:
    match = _IN_LIST.search(clause)
    if not match or not _same_column(match.group(1), column_name):
        return []
    return _clean_values(match.group(2))


def parse_or_chain(column_name: str, clause: str) -> List[str]:
    """Right-hand sides of `col = 'x'` terms that name this column."""
    match = _OR_CHAIN.search(clause)
    if not match:
        return []
    values = []
    for part in _OR_SPLIT.split(match.group(1)):
        term = _EQUALS.search(part)
        if term and _same_column(term.group(1), column_name):
            values.append(term.group(2))
    return values


def parse_contained_by(column_name: str, clause: str) -> List[str]:
    match = _CONTAINED_BY.search(clause)
    if not match or not _same_column(match.group(1), column_name):
        return []
    return _clean_values(match.group(2))


def _recognizers(column_name: str) -> Sequence[Callable[[str], List[str]]]:
    return (
        parse_any_array,
        lambda clause: parse_in_list(column_name, clause),
        lambda clause: parse_or_chain(column_name, clause),
        lambda clause: parse_contained_by(column_name, clause),
    )


def extract_enum_values(column_name: str, clauses: Iterable[str]) -> List[str]:
    """
    Allowed values for a column, gathered from all of its check clauses.

    Args:
        column_name: Column the clauses belong to
        clauses: Raw pg_get_constraintdef() texts

    Returns:
        Values in clause order; duplicates across clauses are kept
    """
    values: List[str] = []
    recognizers = _recognizers(column_name)

    for raw in clauses or ():
        if not isinstance(raw, str):
            continue
        clause = raw.replace('\\"', '"')
        for recognize in recognizers:
            found = recognize(clause)
            if found:
                values.extend(found)
                break

    if values:
        logger.debug(f"Extracted {len(values)} enum values for column {column_name}")
    return values


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "extract_enum_values",
    "parse_any_array",
    "parse_in_list",
    "parse_or_chain",
    "parse_contained_by",
]
