"""Render the catalog into the errors.json document the site reads."""

from __future__ import annotations

import json

from errsync.catalog.types import Catalog, CategoryRecord, ErrorRecord


def render_catalog(catalog: Catalog) -> dict:
    """Render a Catalog as a JSON-serializable dict."""
    return {
        "categories": [_category_to_dict(c) for c in catalog.categories],
        "errors": [_error_to_dict(e) for e in catalog.errors],
    }


def dump_catalog(catalog: Catalog) -> str:
    """Serialize to errors.json text. Stable key order, no trailing newline."""
    return json.dumps(render_catalog(catalog), indent=2, ensure_ascii=False)


def _category_to_dict(c: CategoryRecord) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "range": c.range,
        "description": c.description,
    }


def _error_to_dict(e: ErrorRecord) -> dict:
    d: dict = {
        "code": e.code,
        "slug": e.slug,
        "message": e.message,
        "category": e.category,
        "usedFor": e.used_for,
        "example": e.example,
        "howToFix": e.how_to_fix,
        "relatedErrors": e.related_errors,
    }
    if e.suppressible:
        d["suppressible"] = e.suppressible
    return d
