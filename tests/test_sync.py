"""Test the sync pipeline end to end against a local checkout."""

import json

import httpx
import pytest

from errsync.config import SyncConfig
from errsync.errors import SourceError, WriteError
from errsync.sync import run_sync


def test_writes_output(ez_checkout, data_dir):
    result = run_sync(SyncConfig(data_dir=data_dir), local_path=ez_checkout)

    assert result.written is True
    assert result.changed is True
    assert result.output_path == data_dir / "errors.json"
    data = json.loads(result.output_path.read_text(encoding="utf-8"))
    assert [c["id"] for c in data["categories"]] == ["lexer", "type", "warnings"]
    assert len(data["errors"]) == 5

    errors = {e["code"]: e for e in data["errors"]}
    assert errors["E1001"]["howToFix"] == "Remove the character."
    assert errors["E1002"]["example"] == "string literal not terminated"
    assert errors["W1001"]["category"] == "warnings"
    assert errors["W1001"]["suppressible"] is True


def test_bookkeeping(ez_checkout, data_dir):
    result = run_sync(SyncConfig(data_dir=data_dir), local_path=ez_checkout)
    assert result.parsed_errors == 5
    assert result.parsed_categories == 4
    assert result.enrichment_count == 3
    assert [e.code for e in result.unenriched] == ["E1002", "E3001", "W2001"]
    assert result.stale == ["E9999"]


def test_second_run_is_byte_identical(ez_checkout, data_dir):
    config = SyncConfig(data_dir=data_dir)
    run_sync(config, local_path=ez_checkout)
    first = (data_dir / "errors.json").read_bytes()

    result = run_sync(config, local_path=ez_checkout)
    assert result.changed is False
    assert (data_dir / "errors.json").read_bytes() == first


def test_missing_enrichments_file(ez_checkout, tmp_path):
    result = run_sync(SyncConfig(data_dir=tmp_path / "fresh"), local_path=ez_checkout)
    assert result.enrichment_count == 0
    assert len(result.unenriched) == 5
    assert (tmp_path / "fresh" / "errors.json").exists()


def test_no_write_reports_staleness(ez_checkout, data_dir):
    result = run_sync(SyncConfig(data_dir=data_dir), local_path=ez_checkout, write=False)
    assert result.written is False
    assert result.changed is True
    assert not (data_dir / "errors.json").exists()


def test_fetch_failure_writes_nothing(data_dir):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    config = SyncConfig(data_dir=data_dir, source_url="https://example.test/ERRORS.md")
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(SourceError):
            run_sync(config, client=client)
    assert not (data_dir / "errors.json").exists()


def test_remote_fetch(errors_md, data_dir):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=errors_md)

    config = SyncConfig(data_dir=data_dir, source_url="https://example.test/ERRORS.md")
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        result = run_sync(config, client=client)
    assert result.parsed_errors == 5


def test_write_failure_raises(ez_checkout, tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("a file, not a directory")
    with pytest.raises(WriteError):
        run_sync(SyncConfig(data_dir=blocker), local_path=ez_checkout)
