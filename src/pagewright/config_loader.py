"""Load GeneratorConfig from pagewright.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from pagewright._errors import ConfigError
from pagewright.config import GeneratorConfig
from pagewright.routes.descriptor import coerce_route

CONFIG_FILENAMES = ("pagewright.yaml", "pagewright.yml", "pagewright.toml")

_KNOWN_KEYS = frozenset({"pages_dir", "output", "home", "routes", "verbose"})


def load_config(root: Path, **overrides: object) -> GeneratorConfig:
    """Load GeneratorConfig from root, optionally merging pagewright.yaml.

    Looks for pagewright.yaml, pagewright.yml, or pagewright.toml in root.
    If found, loads and merges with overrides. Overrides that are ``None``
    are ignored so unset CLI flags fall through to the file.

    Raises:
        ConfigError: If the config file is malformed or names unknown keys.

    """
    file_config = _read_config_file(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}

    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown config keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    _check_types(merged)

    # Normalize output to Path and routes to descriptors
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    if "routes" in merged:
        routes = merged["routes"]
        if isinstance(routes, str) or not isinstance(routes, list | tuple):
            msg = "'routes' must be a list of route entries"
            raise ConfigError(msg)
        merged["routes"] = tuple(coerce_route(r) for r in routes)
    return GeneratorConfig(root=root, **merged)  # type: ignore[arg-type]


def _check_types(merged: dict[str, object]) -> None:
    """Reject values that would fail later with a non-config error."""
    for key in ("pages_dir", "home"):
        if key in merged and not isinstance(merged[key], str):
            msg = f"'{key}' must be a string, got {type(merged[key]).__name__}"
            raise ConfigError(msg)
    if "output" in merged and not isinstance(merged["output"], str | Path):
        msg = f"'output' must be a path, got {type(merged['output']).__name__}"
        raise ConfigError(msg)
    if "verbose" in merged and not isinstance(merged["verbose"], bool):
        msg = f"'verbose' must be true or false, got {merged['verbose']!r}"
        raise ConfigError(msg)


def _read_config_file(root: Path) -> dict[str, object]:
    """Read pagewright config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("pagewright.yaml", "pagewright.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "pagewright.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_section(data, path)


def _flatten_section(data: object, path: Path) -> dict[str, object]:
    """Extract pagewright.* keys into top-level config."""
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)

    result: dict[str, object] = {}
    section = data.get("pagewright")
    if isinstance(section, dict):
        result.update(section)
    for k, v in data.items():
        if k != "pagewright" and k in _KNOWN_KEYS:
            result[k] = v
    return result
