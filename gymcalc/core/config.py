"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from gymcalc.core.constants import DEFAULT_PLATES, STANDARD_BARBELL_ID
from gymcalc.core.units import Unit


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("GYMCALC_CONFIG_FILE", "~/.config/gymcalc/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "defaults": {
            "unit": "kg",
            "barbell": STANDARD_BARBELL_ID,
            "consider_barbell_weight": True,
            "reps": 1,
        },
        "plates": {
            "unit": "kg",
            "available": list(DEFAULT_PLATES),
            "selected": list(DEFAULT_PLATES),
        },
        "barbells": {
            "custom": {},
        },
    }


DEFAULT_CONFIG: Dict[str, Any] = _default_config()


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        elif suffix in {".yaml", ".yml"}:
            loaded = yaml.safe_load(text) or {}
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
    except Exception as exc:
        if suffix in {".toml", ""}:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def _check_value(path: Path, key: str, parse: Callable[[Any], Any], value: Any) -> None:
    try:
        parse(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {key} in config file {path}: {exc}") from exc


def _parse_reps(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 36:
        raise ValueError(f"expected a whole number between 1 and 36, got {value!r}")
    return value


def _parse_weights(value: Any) -> list:
    if not isinstance(value, list):
        raise ValueError(f"expected a list of weights, got {value!r}")
    return [float(item) for item in value]


def _validate_config(cfg: Dict[str, Any], path: Path) -> None:
    """Reject values the calculators cannot use."""
    for section in ("defaults", "plates", "barbells"):
        if not isinstance(cfg.get(section), dict):
            raise ConfigError(f"Config section [{section}] in {path} must be a table")
    custom = cfg["barbells"].get("custom") or {}
    if not isinstance(custom, dict):
        raise ConfigError(f"Config section [barbells.custom] in {path} must be a table")

    defaults = cfg["defaults"]
    plates = cfg["plates"]
    _check_value(path, "defaults.unit", Unit.parse, defaults.get("unit", "kg"))
    _check_value(path, "defaults.reps", _parse_reps, defaults.get("reps", 1))
    _check_value(path, "plates.unit", Unit.parse, plates.get("unit", "kg"))
    _check_value(path, "plates.available", _parse_weights, plates.get("available", DEFAULT_PLATES))
    _check_value(path, "plates.selected", _parse_weights, plates.get("selected", DEFAULT_PLATES))

    for barbell_id, item in custom.items():
        key = f"barbells.custom.{barbell_id}"
        if not isinstance(item, dict):
            raise ConfigError(f"Config section [{key}] in {path} must be a table")
        _check_value(path, f"{key}.weight", float, item.get("weight"))
        _check_value(path, f"{key}.unit", Unit.parse, item.get("unit", "kg"))


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()
    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))
        _validate_config(cfg, cfg_path)
    return cfg


_TOML_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _toml_escape(value: str) -> str:
    parts = []
    for ch in value:
        if ch in _TOML_ESCAPES:
            parts.append(_TOML_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{ord(ch):04X}")
        else:
            parts.append(ch)
    return "".join(parts)


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return f'"{_toml_escape(value)}"'
    if isinstance(value, list):
        items = ", ".join(_toml_literal(item) for item in value if item is not None)
        return f"[{items}]"
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _toml_key(key: str) -> str:
    if key and all(ch.isalnum() or ch in "-_" for ch in key):
        return key
    return _toml_literal(key)


def _dict_to_toml(data: Dict[str, Any], prefix: Optional[str] = None) -> str:
    lines = []
    plain_keys = []
    nested_keys = []

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested_keys.append((key, value))
        else:
            plain_keys.append((key, value))

    if prefix is not None:
        lines.append(f"[{prefix}]")

    for key, value in plain_keys:
        lines.append(f"{_toml_key(key)} = {_toml_literal(value)}")

    if plain_keys and nested_keys:
        lines.append("")

    for index, (key, value) in enumerate(nested_keys):
        table_name = _toml_key(key) if prefix is None else f"{prefix}.{_toml_key(key)}"
        lines.append(_dict_to_toml(value, prefix=table_name))
        if index != len(nested_keys) - 1:
            lines.append("")

    return "\n".join(lines)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default), JSON or YAML."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    suffix = cfg_path.suffix.lower()
    if suffix == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n")
        return cfg_path
    if suffix in {".yaml", ".yml"}:
        cfg_path.write_text(yaml.safe_dump(config, sort_keys=False))
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n")
    return cfg_path
