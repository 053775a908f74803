"""Sync settings: defaults, overridden by ./errsync.toml, then by CLI options."""

from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path

from errsync.errors import ConfigError

DEFAULT_SOURCE_URL = "https://raw.githubusercontent.com/SchoolyB/EZ/main/ERRORS.md"
DEFAULT_DATA_DIR = Path("src") / "data"
DEFAULT_OUTPUT = "errors.json"
DEFAULT_ENRICHMENTS = "error-enrichments.json"
DEFAULT_TIMEOUT = 30.0

_CONFIG_FILE = Path("errsync.toml")
_SECTION = "errsync"


@dataclass(frozen=True)
class SyncConfig:
    source_url: str = DEFAULT_SOURCE_URL
    data_dir: Path = DEFAULT_DATA_DIR
    output: str = DEFAULT_OUTPUT
    enrichments: str = DEFAULT_ENRICHMENTS
    timeout: float = DEFAULT_TIMEOUT

    @property
    def output_path(self) -> Path:
        return self.data_dir / self.output

    @property
    def enrichments_path(self) -> Path:
        return self.data_dir / self.enrichments

    def with_overrides(self, **overrides: object) -> SyncConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "data_dir" in changes:
            changes["data_dir"] = Path(changes["data_dir"])
        return dataclasses.replace(self, **changes)


def _load_file(path: Path) -> dict:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def load_config(path: Path | None = None) -> SyncConfig:
    """Load settings from the [errsync] table of a TOML file.

    An explicit path must exist. Without one, ./errsync.toml is used when
    present and defaults otherwise.
    """
    if path is None:
        if not _CONFIG_FILE.exists():
            return SyncConfig()
        path = _CONFIG_FILE

    data = _load_file(path)
    section = data.get(_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{_SECTION}] in {path} must be a table")

    known = {f.name for f in dataclasses.fields(SyncConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown key(s) in [{_SECTION}] of {path}: {', '.join(unknown)}")

    values = dict(section)
    if "data_dir" in values:
        # Relative data_dir is resolved against the config file's directory.
        values["data_dir"] = path.parent / Path(values["data_dir"])
    if "timeout" in values:
        try:
            values["timeout"] = float(values["timeout"])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"timeout in {path} must be a number") from e
    for key in ("source_url", "output", "enrichments"):
        if key in values and not isinstance(values[key], str):
            raise ConfigError(f"{key} in {path} must be a string")

    return SyncConfig(**values)
