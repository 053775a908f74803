"""Run summary formatting for the CLI."""

from __future__ import annotations

import json

from errsync.sync import SyncResult


def format_summary(result: SyncResult, *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(_summary_dict(result), indent=2)
    return render_summary_text(result)


def _summary_dict(result: SyncResult) -> dict:
    return {
        "output": str(result.output_path),
        "written": result.written,
        "changed": result.changed,
        "parsed": {
            "errors": result.parsed_errors,
            "categories": result.parsed_categories,
        },
        "total": {
            "errors": len(result.catalog.errors),
            "categories": len(result.catalog.categories),
        },
        "enrichments": result.enrichment_count,
        "unenriched": [{"code": e.code, "slug": e.slug} for e in result.unenriched],
        "stale_enrichments": result.stale,
    }


def render_summary_text(result: SyncResult) -> str:
    """Human-readable summary, one fact per line."""
    lines = [
        f"Found {result.parsed_errors} errors in {result.parsed_categories} categories",
        f"Loaded {result.enrichment_count} enrichments",
    ]

    if result.unenriched:
        lines.append("")
        lines.append(f"New errors without enrichments ({len(result.unenriched)}):")
        for e in result.unenriched:
            lines.append(f"  - {e.code}: {e.slug}")

    if result.stale:
        lines.append("")
        lines.append(f"Enrichments for codes no longer upstream ({len(result.stale)}):")
        for code in result.stale:
            lines.append(f"  - {code}")

    lines.append("")
    if result.written:
        lines.append(f"Wrote {result.output_path}")
    elif result.changed:
        lines.append(f"{result.output_path} is out of date")
    else:
        lines.append(f"{result.output_path} is up to date")
    lines.append(
        f"Total: {len(result.catalog.errors)} errors, "
        f"{len(result.catalog.categories)} categories"
    )
    return "\n".join(lines)
