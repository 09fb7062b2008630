"""Reading ``KEY=VALUE`` configuration files."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when a configuration cannot be read or parsed."""


def parse_config(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines; blank lines and ``#`` comments are skipped."""
    values: dict[str, str] = {}
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ConfigError(f"line {number}: expected KEY=VALUE, got {raw!r}")
        values[key] = value
    return values


def load_config(path: str | Path) -> dict[str, str]:
    """Read and parse the configuration file at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    return parse_config(text)