"""Sync pipeline: fetch, parse, merge, write."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from errsync.catalog import (
    Catalog,
    ParsedError,
    dump_catalog,
    merge_enrichments,
    parse_errors_md,
    stale_enrichments,
    unenriched_errors,
)
from errsync.config import SyncConfig
from errsync.enrichments import load_enrichments
from errsync.errors import WriteError
from errsync.source import fetch_errors_md

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    catalog: Catalog
    output_path: Path
    parsed_errors: int
    parsed_categories: int
    enrichment_count: int
    unenriched: list[ParsedError] = field(default_factory=list)
    stale: list[str] = field(default_factory=list)
    changed: bool = True
    written: bool = False


def _read_existing(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return None


def write_catalog(text: str, path: Path) -> None:
    """Overwrite the output file. Not atomic."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Cannot write {path}: {e}") from e


def run_sync(
    config: SyncConfig,
    *,
    local_path: Path | None = None,
    write: bool = True,
    client: httpx.Client | None = None,
) -> SyncResult:
    """Run the full sync pipeline.

    Steps:
        1. Fetch ERRORS.md (upstream URL, or local checkout when given)
        2. Parse section headers and table rows
        3. Load local enrichments (missing file = none)
        4. Merge, consolidate warning categories
        5. Render and write errors.json (skipped when write=False)

    Any failure raises a SyncError before the output file is touched.

    Args:
        config: Resolved settings (URL, data dir, file names, timeout).
        local_path: Directory containing ERRORS.md, or the file itself.
        write: If False, only report whether the output is out of date.
        client: Optional httpx client, used instead of a fresh one.

    Returns:
        SyncResult with the merged catalog and the run's bookkeeping.
    """
    content = fetch_errors_md(
        local_path, url=config.source_url, timeout=config.timeout, client=client
    )

    logger.info("Parsing ERRORS.md...")
    parsed = parse_errors_md(content)
    logger.info(
        "Found %d errors in %d categories", len(parsed.errors), len(parsed.categories)
    )

    enrichments = load_enrichments(config.enrichments_path)
    catalog = merge_enrichments(parsed, enrichments)

    output_path = config.output_path
    text = dump_catalog(catalog)
    changed = _read_existing(output_path) != text

    result = SyncResult(
        catalog=catalog,
        output_path=output_path,
        parsed_errors=len(parsed.errors),
        parsed_categories=len(parsed.categories),
        enrichment_count=len(enrichments),
        unenriched=unenriched_errors(parsed, enrichments),
        stale=stale_enrichments(parsed, enrichments),
        changed=changed,
    )

    if write:
        write_catalog(text, output_path)
        result.written = True
        logger.info("Wrote %s", output_path)

    return result
