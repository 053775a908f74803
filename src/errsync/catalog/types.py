"""Catalog records: what the parser extracts and what errors.json holds."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

ERROR_CODE_RE = re.compile(r"^[EW]\d+$")

WARNINGS_PREFIX = "warnings"


def is_error_code(value: str) -> bool:
    return ERROR_CODE_RE.match(value) is not None


@dataclass
class CategoryRecord:
    id: str
    name: str
    range: str
    description: str = ""

    @property
    def is_warning(self) -> bool:
        return self.id.startswith(WARNINGS_PREFIX)


@dataclass
class ParsedError:
    """A single table row from ERRORS.md."""

    code: str
    slug: str
    message: str
    category: str


@dataclass
class ParsedCatalog:
    errors: list[ParsedError] = field(default_factory=list)
    categories: list[CategoryRecord] = field(default_factory=list)


@dataclass
class ErrorRecord:
    """A parsed error with its enrichment fields filled in."""

    code: str
    slug: str
    message: str
    category: str
    used_for: str = ""
    example: str = ""
    how_to_fix: str = ""
    related_errors: list[str] = field(default_factory=list)
    suppressible: bool | None = None  # Only emitted when set.


@dataclass
class Catalog:
    categories: list[CategoryRecord] = field(default_factory=list)
    errors: list[ErrorRecord] = field(default_factory=list)

    def category_ids(self) -> list[str]:
        return [c.id for c in self.categories]
