#!/usr/bin/env python3
# terminal/config/config.py
from __future__ import annotations

"""
Console configuration.

Sources, later ones win:
  1) DEFAULTS below
  2) Files in the working directory: .env, config.ini, config.json, config.toml
  3) Environment variables prefixed with TERMINAL_ (prefix stripped)

Keys are case-insensitive in files and may carry the TERMINAL_ prefix.
Nested tables are joined with underscores, so `[list] column_width = 50`
sets LIST_COLUMN_WIDTH. Unknown keys end up in AppConfig.extra.

Invalid values raise ValueError; load_config() never writes anything.
"""

import configparser
import json
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

ENV_PREFIX = "TERMINAL_"

DEFAULTS: dict[str, Any] = {
    "COMMANDS_PACKAGE": "plugins",
    "PROMPT": "> ",
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
    "HISTORY_LIMIT": 0,              # 0 keeps every line
    "LIST_COLUMN_WIDTH": 39,
    "FALLBACK_COMMAND": "list",
    "SCHEDULE_EXECUTABLE": None,
    "SHOW_BOOT": False,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MIN_COLUMN_WIDTH = 10


@dataclass(frozen=True)
class AppConfig:
    commands_package: str = DEFAULTS["COMMANDS_PACKAGE"]
    prompt: str = DEFAULTS["PROMPT"]
    log_level: str = DEFAULTS["LOG_LEVEL"]
    log_file_path: Path | None = None
    history_limit: int = DEFAULTS["HISTORY_LIMIT"]
    list_column_width: int = DEFAULTS["LIST_COLUMN_WIDTH"]
    fallback_command: str = DEFAULTS["FALLBACK_COMMAND"]
    schedule_executable: Path | None = None
    show_boot: bool = DEFAULTS["SHOW_BOOT"]
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- readers ----------

_ENV_LINE = re.compile(r"([A-Za-z_]\w*)\s*=\s*(.*)")


def _read_env_file(path: Path) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        match = _ENV_LINE.fullmatch(line)
        if match is None:
            continue
        key, value = match.group(1), match.group(2).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        values[key] = value
    return values


def _read_ini_file(path: Path) -> dict[str, Any]:
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as exc:
        raise ValueError(f"{path.name}: {exc}") from exc
    # Section names are only grouping in INI files
    return {key: value for section in parser.sections()
            for key, value in parser.items(section)}


def _read_json_file(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: top level must be an object")
    return _flatten(data)


def _read_toml_file(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        return _flatten(tomllib.load(fh))


def _flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}_{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(_flatten(value, name))
        else:
            flat[name] = value
    return flat


_FILE_SOURCES: tuple[tuple[str, Callable[[Path], dict[str, Any]]], ...] = (
    (".env", _read_env_file),
    ("config.ini", _read_ini_file),
    ("config.json", _read_json_file),
    ("config.toml", _read_toml_file),
)


def _canonical_key(key: str) -> str:
    return key.upper().removeprefix(ENV_PREFIX)


def _collect(base: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)
    for name, reader in _FILE_SOURCES:
        path = base / name
        if not path.is_file():
            continue
        try:
            values = reader(path)
        except ValueError as exc:
            raise ValueError(f"Cannot read {name}: {exc}") from exc
        merged.update((_canonical_key(k), v) for k, v in values.items())

    for key, value in environ.items():
        if key.startswith(ENV_PREFIX) and key.isupper():
            merged[key[len(ENV_PREFIX):]] = value
    return merged


# ---------- coercion ----------

def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return None if text.lower() in ("", "none") else text


def _boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "y", "on"):
        return True
    if text in ("0", "false", "no", "n", "off"):
        return False
    raise ValueError(f"expected a boolean, got {value!r}")


def _integer(value: Any, minimum: int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ValueError(f"expected an integer, got {value!r}") from None
    if number < minimum:
        raise ValueError(f"must be >= {minimum}, got {number}")
    return number


def _package(value: Any) -> str:
    name = _text(value) or ""
    if not re.fullmatch(r"[A-Za-z_]\w*(\.[A-Za-z_]\w*)*", name):
        raise ValueError(f"expected a dotted module name, got {value!r}")
    return name


def _log_level(value: Any) -> str:
    level = (_text(value) or DEFAULTS["LOG_LEVEL"]).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"expected one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def _command_name(value: Any) -> str:
    name = _text(value)
    if name is None:
        raise ValueError("must not be empty")
    return name


def _build(raw: dict[str, Any], base: Path) -> AppConfig:
    def path(value: Any) -> Path | None:
        text = _text(value)
        if text is None:
            return None
        candidate = Path(os.path.expandvars(os.path.expanduser(text)))
        return candidate if candidate.is_absolute() else (base / candidate).resolve()

    fields: dict[str, tuple[str, Callable[[Any], Any]]] = {
        "COMMANDS_PACKAGE": ("commands_package", _package),
        "PROMPT": ("prompt", lambda v: "" if v is None else str(v)),
        "LOG_LEVEL": ("log_level", _log_level),
        "LOG_FILE_PATH": ("log_file_path", path),
        "HISTORY_LIMIT": ("history_limit", lambda v: _integer(v, 0)),
        "LIST_COLUMN_WIDTH": ("list_column_width", lambda v: _integer(v, MIN_COLUMN_WIDTH)),
        "FALLBACK_COMMAND": ("fallback_command", _command_name),
        "SCHEDULE_EXECUTABLE": ("schedule_executable", path),
        "SHOW_BOOT": ("show_boot", _boolean),
    }

    values: dict[str, Any] = {}
    for key, (attr, coerce) in fields.items():
        try:
            values[attr] = coerce(raw.get(key))
        except ValueError as exc:
            raise ValueError(f"{key}: {exc}") from exc

    values["extra"] = {k: v for k, v in raw.items() if k not in fields}
    return AppConfig(**values)


def load_config(cwd: Path | str | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Merge every source for `cwd` (default: the working directory) and validate."""
    base = Path(cwd).resolve() if cwd is not None else Path.cwd()
    raw = _collect(base, os.environ if environ is None else environ)
    return _build(raw, base)
