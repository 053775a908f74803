"""Extract categories and error rows from the ERRORS.md markdown tables."""

from __future__ import annotations

import logging
import re

from errsync.catalog.categories import resolve_category_id
from errsync.catalog.types import CategoryRecord, ParsedCatalog, ParsedError, is_error_code

logger = logging.getLogger(__name__)

# ## Lexer Errors (E1xxx)   or   ## Misc Errors (E14xxx-E15xxx)
HEADER_RE = re.compile(r"^## (.+?) \(([EW]\d+x+(?:-[EW]\d+x+)?)\)")
SEPARATOR_RE = re.compile(r"^\|[-\s|]+\|$")

_TABLE_HEADER_CELLS = ("Code", "Type", "Message")


def _is_table_header(line: str) -> bool:
    return all(cell in line for cell in _TABLE_HEADER_CELLS)


def _section_description(lines: list[str], start: int) -> str:
    """First plain-text line after a header, stopping at a table or heading."""
    for line in lines[start:]:
        text = line.strip()
        if not text:
            continue
        if text.startswith("|") or text.startswith("#"):
            return ""
        return text
    return ""


def _row_cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split("|") if cell.strip()]


def parse_errors_md(content: str) -> ParsedCatalog:
    """Parse ERRORS.md into errors and categories.

    Each `## <Name> (<Range>)` header starts a category. Rows of the table that
    follows are read as `| code | slug | message |`. Rows outside a category,
    before the table's header row, with fewer than three cells, or whose code
    is not E/W followed by digits are skipped.

    Categories are returned in first-seen order. When two headers resolve to
    the same id the first header's record is kept and both sections' errors
    share the id.
    """
    lines = content.splitlines()
    errors: list[ParsedError] = []
    categories: dict[str, CategoryRecord] = {}

    current: CategoryRecord | None = None
    in_table = False

    for i, line in enumerate(lines):
        header = HEADER_RE.match(line)
        if header:
            name, code_range = header.group(1), header.group(2)
            category_id = resolve_category_id(name)
            current = CategoryRecord(
                id=category_id,
                name=name,
                range=code_range,
                description=_section_description(lines, i + 1),
            )
            if category_id in categories:
                logger.warning(
                    "Section '%s' resolves to category '%s' already used by '%s'",
                    name,
                    category_id,
                    categories[category_id].name,
                )
            else:
                categories[category_id] = current
            in_table = False
            continue

        if not line.startswith("|") or current is None:
            continue

        if _is_table_header(line):
            in_table = True
            continue
        if SEPARATOR_RE.match(line) or not in_table:
            continue

        cells = _row_cells(line)
        if len(cells) < 3:
            continue
        code, slug, message = cells[:3]
        if not is_error_code(code):
            continue
        errors.append(ParsedError(code=code, slug=slug, message=message, category=current.id))

    return ParsedCatalog(errors=errors, categories=list(categories.values()))
