"""Section name → category id registry.

Ranges:
- E1xxx..E13xxx: compiler and runtime errors, one category per range
- W1xxx..W4xxx:  warnings, collapsed into a single "warnings" category on output
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryInfo:
    id: str
    range: str


# Order matters: resolve_category_id returns the first match.
CATEGORY_MAP: dict[str, CategoryInfo] = {
    "Lexer Errors": CategoryInfo("lexer", "E1xxx"),
    "Parse Errors": CategoryInfo("parse", "E2xxx"),
    "Type Errors": CategoryInfo("type", "E3xxx"),
    "Reference Errors": CategoryInfo("reference", "E4xxx"),
    "Runtime Errors": CategoryInfo("runtime", "E5xxx"),
    "Import Errors": CategoryInfo("import", "E6xxx"),
    "Stdlib Errors": CategoryInfo("stdlib", "E7xxx"),
    "Math Errors": CategoryInfo("math", "E8xxx"),
    "Array Errors": CategoryInfo("array", "E9xxx"),
    "String Errors": CategoryInfo("string", "E10xxx"),
    "Time Errors": CategoryInfo("time", "E11xxx"),
    "Map Errors": CategoryInfo("map", "E12xxx"),
    "JSON Errors": CategoryInfo("json", "E13xxx"),
    "Code Style Warnings": CategoryInfo("warnings-style", "W1xxx"),
    "Potential Bug Warnings": CategoryInfo("warnings-bugs", "W2xxx"),
    "Code Quality Warnings": CategoryInfo("warnings-quality", "W3xxx"),
    "Module Warnings": CategoryInfo("warnings-module", "W4xxx"),
}

_WHITESPACE_RE = re.compile(r"\s+")


def _strip_kind(name: str) -> str:
    return name.replace(" Errors", "", 1).replace(" Warnings", "", 1)


def slugify_category(name: str) -> str:
    """Fallback id for section names missing from CATEGORY_MAP.

    "Channel Errors" -> "channel", "Async Warnings" -> "async".
    """
    slug = _WHITESPACE_RE.sub("-", name.lower())
    return slug.replace("-errors", "", 1).replace("-warnings", "", 1)


def resolve_category_id(name: str) -> str:
    """Map a section header name to a category id.

    A map key matches when it is contained in the name ("Lexer Errors" in
    "Lexer Errors (legacy)") or when it contains the name with its
    Errors/Warnings suffix removed ("Lexer" in "Lexer Errors").
    """
    bare = _strip_kind(name)
    for key, info in CATEGORY_MAP.items():
        if key in name or bare in key:
            return info.id
    return slugify_category(name)
