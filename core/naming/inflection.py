# ============================================================================
# ENGLISH INFLECTION
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Singular/plural forms for table and enum names
# PURPOSE: Deterministic singularize() and pluralize() for identifiers
# CREATED: 19 OCT 2026
# ============================================================================
"""
English Inflection

Small rule-based inflector tuned for database identifiers. It is not a
general-purpose English library: it covers the words that show up in table
and column names and keeps every result stable when applied twice.

Resolution order (singularize):
1. Uncountable words and known singular forms are returned unchanged
2. Irregular plurals are looked up
3. Suffix rules: -ies, -sses, -xes, -ches, -shes, -zzes, -oes, -ses, -s

The case of the input is preserved ("Categories" -> "Category",
"STATUSES" -> "STATUS").
"""

from typing import Dict

UNCOUNTABLE = frozenset({
    "status",
    "business",
    "data",
    "metadata",
    "news",
    "series",
    "species",
    "information",
    "equipment",
    "feedback",
    "software",
})

IRREGULAR_PLURALS: Dict[str, str] = {
    "children": "child",
    "people": "person",
    "men": "man",
    "women": "woman",
    "feet": "foot",
    "teeth": "tooth",
    "geese": "goose",
    "mice": "mouse",
    "oxen": "ox",
    "criteria": "criterion",
    "indices": "index",
    "matrices": "matrix",
    "vertices": "vertex",
    "statuses": "status",
    "analyses": "analysis",
    "diagnoses": "diagnosis",
    "theses": "thesis",
    "crises": "crisis",
    "buses": "bus",
    "gases": "gas",
    "aliases": "alias",
    "viruses": "virus",
    "bonuses": "bonus",
    "campuses": "campus",
    "caches": "cache",
    "niches": "niche",
    "movies": "movie",
    "cookies": "cookie",
    "shoes": "shoe",
    "toes": "toe",
}

IRREGULAR_SINGULARS: Dict[str, str] = {
    singular: plural for plural, singular in IRREGULAR_PLURALS.items()
}


def _match_case(original: str, result: str) -> str:
    """Carry the casing of a whole word over to its replacement."""
    if original.isupper() and len(original) > 1:
        return result.upper()
    if original[:1].isupper():
        return result[:1].upper() + result[1:]
    return result


def _suffix(original: str, suffix: str) -> str:
    """Spell an appended suffix in the case of the word's last letter."""
    return suffix.upper() if original[-1:].isupper() else suffix


def singularize(word: str) -> str:
    """
    Return the singular form of a word.

    Examples:
        singularize("categories") -> "category"
        singularize("buzzes")     -> "buzz"
        singularize("Status")     -> "Status"
        singularize("class")      -> "class"
    """
    lower = word.lower()

    if not lower or lower in UNCOUNTABLE or lower in IRREGULAR_SINGULARS:
        return word

    if lower in IRREGULAR_PLURALS:
        return _match_case(word, IRREGULAR_PLURALS[lower])

    if lower.endswith("ies") and len(lower) > 3:
        return word[:-3] + _suffix(word, "y")
    if lower.endswith(("sses", "xes", "ches", "shes", "zzes", "oes")):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")):
        return word[:-1]
    return word


def pluralize(word: str) -> str:
    """
    Return the plural form of an identifier's last word.

    Only the segment after the final underscore is inflected, so
    "USER_STATUS" becomes "USER_STATUSES".

    Examples:
        pluralize("category")          -> "categories"
        pluralize("USER_POST_CATEGORY") -> "USER_POST_CATEGORIES"
        pluralize("A_B")               -> "A_BS"
    """
    head, sep, last = word.rpartition("_")
    lower = last.lower()

    if not lower or lower in UNCOUNTABLE - {"status", "business"}:
        return word

    if lower in IRREGULAR_SINGULARS:
        plural = _match_case(last, IRREGULAR_SINGULARS[lower])
    elif lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        plural = last[:-1] + _suffix(last, "ies")
    elif lower.endswith(("s", "x", "z", "ch", "sh")):
        plural = last + _suffix(last, "es")
    else:
        plural = last + _suffix(last, "s")

    return f"{head}{sep}{plural}"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "singularize",
    "pluralize",
    "UNCOUNTABLE",
    "IRREGULAR_PLURALS",
]
