"""Overlay locally authored enrichments on the parsed catalog."""

from __future__ import annotations

import re

from errsync.catalog.types import (
    WARNINGS_PREFIX,
    Catalog,
    CategoryRecord,
    ErrorRecord,
    ParsedCatalog,
    ParsedError,
)

WARNINGS_CATEGORY_NAME = "Warnings"
WARNINGS_CATEGORY_DESCRIPTION = "Warnings (non-fatal)"

_RANGE_DIGITS_RE = re.compile(r"\d+")


def _merge_error(error: ParsedError, enrichment: dict) -> ErrorRecord:
    return ErrorRecord(
        code=error.code,
        slug=error.slug,
        message=error.message,
        category=error.category,
        used_for=enrichment.get("usedFor") or "",
        example=enrichment.get("example") or error.message,
        how_to_fix=enrichment.get("howToFix") or "",
        related_errors=_related_errors(enrichment.get("relatedErrors")),
        suppressible=enrichment.get("suppressible") or None,
    )


def _related_errors(value: object) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def _range_bound(bound: str) -> int:
    digits = _RANGE_DIGITS_RE.search(bound)
    return int(digits.group()) if digits else 0


def _warnings_range(categories: list[CategoryRecord]) -> str:
    """Span from the lowest warning range bound to the highest, in any section order."""
    bounds = sorted(
        (b for c in categories for b in c.range.split("-")), key=_range_bound
    )
    first, last = bounds[0], bounds[-1]
    return first if first == last else f"{first}-{last}"


def consolidate_warnings(
    categories: list[CategoryRecord], errors: list[ErrorRecord]
) -> list[CategoryRecord]:
    """Collapse every warnings-* category into one "warnings" category.

    Errors are repointed in place. The consolidated category is appended after
    the non-warning categories, and only when a warning category exists.
    """
    warning_categories = [c for c in categories if c.is_warning]
    consolidated = [c for c in categories if not c.is_warning]
    if not warning_categories:
        return consolidated

    consolidated.append(
        CategoryRecord(
            id=WARNINGS_PREFIX,
            name=WARNINGS_CATEGORY_NAME,
            range=_warnings_range(warning_categories),
            description=WARNINGS_CATEGORY_DESCRIPTION,
        )
    )
    for error in errors:
        if error.category.startswith(WARNINGS_PREFIX):
            error.category = WARNINGS_PREFIX
    return consolidated


def merge_enrichments(parsed: ParsedCatalog, enrichments: dict[str, dict]) -> Catalog:
    """Build the output catalog from parsed rows plus enrichment records.

    Parsed code, slug, message and category always win. Missing enrichment
    fields default to empty values, with `example` falling back to the message.
    """
    errors = [_merge_error(e, enrichments.get(e.code) or {}) for e in parsed.errors]
    categories = consolidate_warnings(list(parsed.categories), errors)
    return Catalog(categories=categories, errors=errors)


def unenriched_errors(parsed: ParsedCatalog, enrichments: dict[str, dict]) -> list[ParsedError]:
    """Parsed errors that have no enrichment yet."""
    return [e for e in parsed.errors if e.code not in enrichments]


def stale_enrichments(parsed: ParsedCatalog, enrichments: dict[str, dict]) -> list[str]:
    """Enrichment codes that no longer appear upstream, sorted."""
    codes = {e.code for e in parsed.errors}
    return sorted(code for code in enrichments if code not in codes)
