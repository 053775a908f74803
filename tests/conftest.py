"""Root conftest: shared ERRORS.md fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

SAMPLE_ERRORS_MD = """\
# EZ Error Codes

| E0000 | stray | row before any section |

## Lexer Errors (E1xxx)

Errors raised while tokenizing source code.

| Code | Type | Message |
|------|------|---------|
| E1001 | illegal-character | illegal character in source |
| E1002 | unterminated-string | string literal not terminated |

## Type Errors (E3xxx)

Type checking failures.

| Code | Type | Message |
|------|------|---------|
| E3001 | type-mismatch | type mismatch in assignment |
| not-a-code | bogus | should be dropped |
| E3002 | missing |

## Code Style Warnings (W1xxx)

Style issues.

| Code | Type | Message |
|------|------|---------|
| W1001 | unused-variable | variable declared but never used |

## Potential Bug Warnings (W2xxx)

| Code | Type | Message |
|------|------|---------|
| W2001 | unreachable-code | code after return is unreachable |
"""

SAMPLE_ENRICHMENTS = {
    "E1001": {
        "usedFor": "Rejecting characters outside the EZ alphabet",
        "example": "x := 5 @ 3",
        "howToFix": "Remove the character.",
        "relatedErrors": ["E1002"],
    },
    "W1001": {"howToFix": "Use or remove the variable.", "suppressible": True},
    "E9999": {"howToFix": "Gone upstream."},
}


@pytest.fixture
def errors_md() -> str:
    return SAMPLE_ERRORS_MD


@pytest.fixture
def ez_checkout(tmp_path: Path) -> Path:
    """A directory laid out like a local EZ repo checkout."""
    repo = tmp_path / "EZ"
    repo.mkdir()
    (repo / "ERRORS.md").write_text(SAMPLE_ERRORS_MD, encoding="utf-8")
    return repo


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A site data directory with an enrichment file."""
    d = tmp_path / "data"
    d.mkdir()
    (d / "error-enrichments.json").write_text(json.dumps(SAMPLE_ENRICHMENTS), encoding="utf-8")
    return d
