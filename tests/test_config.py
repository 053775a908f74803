"""Test errsync.toml loading and overrides."""

from pathlib import Path

import pytest

from errsync.config import DEFAULT_SOURCE_URL, SyncConfig, load_config
from errsync.errors import ConfigError


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config == SyncConfig()
    assert config.source_url == DEFAULT_SOURCE_URL
    assert config.output_path == Path("src/data/errors.json")
    assert config.enrichments_path == Path("src/data/error-enrichments.json")


def test_reads_cwd_file(tmp_path, monkeypatch):
    (tmp_path / "errsync.toml").write_text(
        '[errsync]\nsource_url = "https://example.test/ERRORS.md"\ntimeout = 5\n'
    )
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config.source_url == "https://example.test/ERRORS.md"
    assert config.timeout == 5.0


def test_data_dir_relative_to_file(tmp_path):
    path = tmp_path / "site" / "errsync.toml"
    path.parent.mkdir()
    path.write_text('[errsync]\ndata_dir = "data"\noutput = "catalog.json"\n')
    config = load_config(path)
    assert config.output_path == tmp_path / "site" / "data" / "catalog.json"


def test_unknown_key_raises(tmp_path):
    path = tmp_path / "errsync.toml"
    path.write_text('[errsync]\nsourceurl = "x"\n')
    with pytest.raises(ConfigError, match="sourceurl"):
        load_config(path)


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "errsync.toml"
    path.write_text("[errsync\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(path)


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "absent.toml")


def test_overrides_skip_none(tmp_path):
    config = SyncConfig().with_overrides(source_url=None, data_dir=str(tmp_path))
    assert config.source_url == DEFAULT_SOURCE_URL
    assert config.data_dir == tmp_path


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "errsync.toml"
    path.write_bytes(b"[errsync]\n\xff\n")
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(path)
