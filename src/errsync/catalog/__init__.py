"""Error catalog: records, section parsing, enrichment merge, and rendering."""

from errsync.catalog.categories import CATEGORY_MAP, resolve_category_id, slugify_category
from errsync.catalog.merge import (
    consolidate_warnings,
    merge_enrichments,
    stale_enrichments,
    unenriched_errors,
)
from errsync.catalog.parse import parse_errors_md
from errsync.catalog.render import dump_catalog, render_catalog
from errsync.catalog.types import (
    Catalog,
    CategoryRecord,
    ErrorRecord,
    ParsedCatalog,
    ParsedError,
    is_error_code,
)

__all__ = [
    "CATEGORY_MAP",
    "Catalog",
    "CategoryRecord",
    "ErrorRecord",
    "ParsedCatalog",
    "ParsedError",
    "consolidate_warnings",
    "dump_catalog",
    "is_error_code",
    "merge_enrichments",
    "parse_errors_md",
    "render_catalog",
    "resolve_category_id",
    "slugify_category",
    "stale_enrichments",
    "unenriched_errors",
]
