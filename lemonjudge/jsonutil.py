"""Typed access to JSON objects and small directory helpers."""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Any


class JsonFieldError(ValueError):
    """A JSON field is missing or holds a value of the wrong type."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"field {name!r}: {reason}")
        self.name = name
        self.reason = reason


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _convert(value: Any, kind: type, name: str) -> Any:
    if isinstance(kind, type) and issubclass(kind, enum.Enum):
        number = _convert(value, int, name)
        try:
            return kind(number)
        except ValueError as exc:
            raise JsonFieldError(name, f"{number} is not a valid {kind.__name__}") from exc
    if kind is bool:
        if isinstance(value, bool):
            return value
    elif kind is int:
        if _is_number(value):
            # Non-integral numbers read as zero, like a JSON integer conversion with no default.
            return int(value) if float(value).is_integer() else 0
    elif kind is float:
        if _is_number(value):
            return float(value)
    elif kind is str:
        if isinstance(value, str):
            return value
    elif kind is dict:
        if isinstance(value, dict):
            return value
    elif kind is list:
        if isinstance(value, list):
            return value
    else:
        raise TypeError(f"unsupported field kind: {kind!r}")
    raise JsonFieldError(name, f"expected {kind.__name__}, got {type(value).__name__}")


def read_field(data: dict, name: str, kind: type) -> Any:
    """Return ``data[name]`` converted to ``kind``; raise JsonFieldError if impossible."""
    if name not in data:
        raise JsonFieldError(name, "missing")
    return _convert(data[name], kind, name)


def read_list(data: dict, name: str, kind: type) -> list:
    """Return ``data[name]`` as a list whose items are all converted to ``kind``."""
    items = read_field(data, name, list)
    return [_convert(item, kind, name) for item in items]


def _to_json(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return int(value.value)
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


def write_field(data: dict, name: str, value: Any) -> dict:
    """Store ``value`` under ``name`` in JSON form; enums become integers."""
    data[name] = _to_json(value)
    return data


def get_file_list(directory: str | os.PathLike) -> list[str]:
    """Names of all regular files in ``directory``, hidden ones included, sorted by name."""
    names = [entry.name for entry in os.scandir(directory) if entry.is_file()]
    return sorted(names, key=lambda name: (name.lower(), name))


def file_exists_in(directory: str | os.PathLike, file_name: str) -> bool:
    """Whether ``file_name`` is one of the files listed directly in ``directory``."""
    if not Path(directory).is_dir():
        return False
    return file_name in get_file_list(directory)