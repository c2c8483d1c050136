"""Grouped key/value configuration stored in INI-like text files.

A file holds ``[group]`` headers followed by ``key=value`` lines; lines that
start with ``#`` are comments. Keys, values and group names are whitespace
simplified when stored. Missing keys and unparsable values are reported
through :mod:`enctools.log` and the caller's default is returned.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, Union

from . import log
from .textconv import format_float, number, simplified, to_double, to_long, to_ulong

DEFAULT_SEPARATOR = ":"
_TAG = "Config"

Value = Union[str, int, float]
PathLike = Union[str, "os.PathLike[str]"]


def _render(value: Value) -> str:
    if isinstance(value, str):
        return simplified(value)
    if isinstance(value, int):
        return number(int(value))
    if isinstance(value, float):
        return format_float(value, "g", 6)
    raise TypeError(f"unsupported configuration value: {value!r}")


class ConfigGroup:
    """A named, ordered set of key/value entries."""

    def __init__(self, name: str = "") -> None:
        self.name = simplified(name)
        self._entries: dict[str, str] = {}

    def _add(self, key: str, value: str) -> None:
        self._entries[simplified(key)] = simplified(value)

    @classmethod
    def from_string(cls, text: str, sep: str = DEFAULT_SEPARATOR) -> "ConfigGroup":
        """Parse ``<name><sep><key>=<val><sep>...``; parsing stops at a field without '='."""
        group = cls()
        fields = text.split(sep)
        group.name = fields[0]
        for field in fields[1:]:
            key, eq, value = field.partition("=")
            if not eq:
                break
            group._add(key, value)
        return group

    def __repr__(self) -> str:
        return f"ConfigGroup({self.name!r}, {self._entries!r})"

    def is_empty(self) -> bool:
        """Return True when the group holds no entries."""
        return not self._entries

    def has_key(self, key: str) -> bool:
        """Return True when ``key`` is present."""
        return key in self._entries

    def set_value(self, key: str, value: Value) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        rendered = _render(value)
        if key in self._entries:
            self._entries[key] = rendered
        else:
            self._entries[simplified(key)] = rendered

    def get_value(self, key: str, default: str | None = None) -> str | None:
        """Return the value stored under ``key``, or ``default`` if absent."""
        if key in self._entries:
            return self._entries[key]
        log.e(_TAG, "no such key: " + key)
        return default

    def _get_parsed(self, key, default, parse, kind):
        if key not in self._entries:
            log.e(_TAG, "no such key: " + key)
            return default
        raw = self._entries[key]
        try:
            return parse(raw)
        except ValueError:
            log.e(_TAG, f"invalid {kind} entry: {key}={raw}")
            return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Return the value under ``key`` as a signed integer."""
        return self._get_parsed(key, default, to_long, "INT")

    def get_uint(self, key: str, default: int = 0) -> int:
        """Return the value under ``key`` as an unsigned integer."""
        return self._get_parsed(key, default, to_ulong, "UINT")

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return the value under ``key`` as a float."""
        return self._get_parsed(key, default, to_double, "FLOAT")

    def to_string(self, sep: str = DEFAULT_SEPARATOR) -> str:
        """Render as ``<name><sep><key>=<val>...``."""
        parts = [self.name]
        parts.extend(f"{key}={value}" for key, value in self._entries.items())
        return sep.join(parts)

    def write(self, stream: IO[str]) -> None:
        """Write the group as an INI section with CRLF line endings."""
        stream.write(f"[{self.name}]\r\n")
        for key, value in self._entries.items():
            if key:
                stream.write(f"{key}={value}\r\n")


class Config:
    """A configuration file made of groups, with a current group for access."""

    def __init__(self, filename: PathLike | None = None) -> None:
        self.filename: PathLike | None = None
        self._groups: list[ConfigGroup] = []
        self._current: ConfigGroup | None = None
        self._dirty = False
        if filename is not None:
            self.open(filename)

    def open(self, filename: PathLike) -> bool:
        """Read groups and entries from ``filename``; return False if it cannot be read."""
        self.filename = filename
        try:
            with open(filename, encoding="utf-8", errors="replace", newline="") as fp:
                for line in fp:
                    self._parse_line(line)
        except OSError:
            log.e(_TAG, f"Can not open file: {os.fspath(filename)}")
            return False
        return True

    def _parse_line(self, line: str) -> None:
        if line.startswith("["):
            end = line.find("]")
            if end >= 0:
                self.set_group(line[1:end])
        elif not line.startswith("#"):
            key, eq, value = line.partition("=")
            if eq and self._current is not None:
                self._current.set_value(key, value)

    def save(self) -> bool:
        """Write all groups back to the file; return False on failure."""
        if self.filename is None:
            log.e(_TAG, "Can not open file: no file name")
            return False
        try:
            with open(self.filename, "w", encoding="utf-8", newline="") as fp:
                for group in self._groups:
                    group.write(fp)
        except OSError:
            log.e(_TAG, f"Can not open file: {os.fspath(self.filename)}")
            return False
        self._dirty = False
        return True

    def close(self) -> None:
        """Save pending changes, if any."""
        if self._dirty:
            self.save()

    def __enter__(self) -> "Config":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[ConfigGroup]:
        return iter(list(self._groups))

    def is_null(self) -> bool:
        """Return True when there are no groups."""
        return not self._groups

    def _find_group(self, name: str) -> ConfigGroup | None:
        return next((g for g in self._groups if g.name == name), None)

    def has_group(self, name: str) -> bool:
        """Return True when a group called ``name`` exists."""
        return self._find_group(name) is not None

    def set_group(self, name: str) -> None:
        """Make ``name`` the current group, creating it if needed."""
        group = self._find_group(name)
        if group is None:
            group = ConfigGroup(name)
            self._groups.append(group)
        self._current = group

    def remove_group(self, name: str) -> None:
        """Remove the group called ``name``."""
        group = self._find_group(name)
        if group is None:
            log.e(_TAG, "group not exists: " + name)
            return
        if self._current is group:
            self._current = None
        self._groups.remove(group)
        self._dirty = True

    def set_value(self, key: str, value: Value) -> None:
        """Store a value in the current group; ignored without a current group."""
        if self._current is not None:
            self._current.set_value(key, value)
            self._dirty = True

    def get_value(self, key: str, default: str | None = None) -> str | None:
        """Return a value from the current group."""
        if self._current is None:
            log.e(_TAG, "no current group, default value returned")
            return default
        return self._current.get_value(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Return a signed integer from the current group."""
        if self._current is None:
            log.e(_TAG, "no current group, default INT value returned")
            return default
        return self._current.get_int(key, default)

    def get_uint(self, key: str, default: int = 0) -> int:
        """Return an unsigned integer from the current group."""
        if self._current is None:
            log.e(_TAG, "no current group, default UINT value returned")
            return default
        return self._current.get_uint(key, default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return a float from the current group."""
        if self._current is None:
            log.e(_TAG, "no current group, default FLOAT value returned")
            return default
        return self._current.get_float(key, default)

    def to_string(self, sep: str = DEFAULT_SEPARATOR) -> str:
        """Render the current group, or an empty string without one."""
        return self._current.to_string(sep) if self._current is not None else ""