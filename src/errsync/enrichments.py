"""Local enrichment data in error-enrichments.json, keyed by error code. Read-only."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from errsync.errors import EnrichmentError

logger = logging.getLogger(__name__)


def load_enrichments(path: Path) -> dict[str, dict]:
    """Load {code: {usedFor, example, howToFix, relatedErrors, suppressible}}.

    A missing file is treated as empty. A file that exists but cannot be read
    or is not a JSON object raises EnrichmentError.
    """
    if not path.exists():
        logger.info("No enrichments file at %s, using defaults", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise EnrichmentError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EnrichmentError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise EnrichmentError(f"{path} must contain a JSON object keyed by error code")

    enrichments: dict[str, dict] = {}
    for code, entry in data.items():
        if not isinstance(entry, dict):
            logger.warning("Ignoring enrichment for %s: expected an object", code)
            continue
        related = entry.get("relatedErrors")
        if related is not None and not isinstance(related, (list, str)):
            raise EnrichmentError(
                f"relatedErrors for {code} in {path} must be a list of error codes"
            )
        enrichments[code] = entry

    logger.info("Loaded %d enrichments", len(enrichments))
    return enrichments
