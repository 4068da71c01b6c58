"""Reading and writing INI-style configuration files."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from contextlib import suppress
from pathlib import Path

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_int(text):
    """Parse the leading integer of ``text`` the way ``atoi`` does; 0 if none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _section_name(line):
    stripped = line.strip()
    if stripped.startswith("[") and "]" in stripped:
        return stripped[1 : stripped.index("]")].strip()
    return None


def _split_entry(line):
    stripped = line.strip()
    if not stripped or stripped.startswith(";") or "=" not in stripped:
        return None
    key, _, value = stripped.partition("=")
    return key.strip(), value.strip()


def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


class IniFile:
    """A sectioned ``key=value`` file, read and written on every call."""

    def __init__(self, path):
        self.path = Path(path)

    def _read_lines(self):
        try:
            with self.path.open(encoding="utf-8-sig", newline="") as fh:
                return fh.read().splitlines()
        except FileNotFoundError:
            return []

    def _write_lines(self, lines):
        text = "\n".join(lines) + "\n" if lines else ""
        with self.path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)

    def _lookup(self, section, key):
        target = section.lower()
        wanted = key.lower()
        current = None
        for line in self._read_lines():
            name = _section_name(line)
            if name is not None:
                current = name.lower()
                continue
            if current != target:
                continue
            entry = _split_entry(line)
            if entry and entry[0].lower() == wanted:
                return _unquote(entry[1])
        return None

    def get(self, section, key, default=""):
        """Return the value of ``key`` in ``section``, or ``default`` if absent."""
        value = self._lookup(section, key)
        return default if value is None else value

    def get_int(self, section, key, default=0):
        """Return the integer value of ``key``; ``default`` if absent, 0 if not numeric."""
        value = self._lookup(section, key)
        return default if value is None else parse_int(value)

    def get_bool(self, section, key, default=False):
        """Return True when the stored value is ``TRUE`` in any letter case."""
        value = self.get(section, key, "TRUE" if default else "FALSE")
        return value.upper() == "TRUE"

    def set(self, section, key, value):
        """Store ``value`` under ``key``; a value of None removes the key."""
        lines = self._read_lines()
        target = section.lower()
        wanted = key.lower()
        current = None
        section_seen = False
        in_target = False
        section_end = None
        key_index = None

        for index, line in enumerate(lines):
            name = _section_name(line)
            if name is not None:
                current = name.lower()
                in_target = current == target and not section_seen
                if in_target:
                    section_seen = True
                    section_end = index + 1
                continue
            if not in_target:
                continue
            if line.strip():
                section_end = index + 1
            entry = _split_entry(line)
            if key_index is None and entry and entry[0].lower() == wanted:
                key_index = index

        if key_index is not None:
            if value is None:
                del lines[key_index]
            else:
                lines[key_index] = f"{key}={value}"
        elif value is None:
            return
        elif section_seen:
            lines.insert(section_end, f"{key}={value}")
        else:
            lines.append(f"[{section}]")
            lines.append(f"{key}={value}")
        self._write_lines(lines)

    def set_int(self, section, key, value):
        """Store an integer value."""
        self.set(section, key, str(int(value)))

    def set_bool(self, section, key, value):
        """Store a boolean as ``TRUE`` or ``FALSE``."""
        self.set(section, key, "TRUE" if value else "FALSE")


def replace_key_lines(config_path, values: Mapping):
    """Rewrite every ``KEY=`` line for the given keys, appending keys not found.

    Other lines are kept byte for byte. The file is rewritten through a
    ``.tmp`` sibling. Raises FileNotFoundError when the file does not exist.
    """
    path = Path(config_path)
    with path.open(encoding="utf-8", newline="") as fh:
        lines = fh.readlines()

    found = set()
    out = []
    for line in lines:
        for key, value in values.items():
            if line.startswith(f"{key}="):
                out.append(f"{key}={value}\n")
                found.add(key)
                break
        else:
            out.append(line)

    if out and not out[-1].endswith(("\n", "\r")):
        out[-1] += "\n"
    out.extend(f"{key}={value}\n" for key, value in values.items() if key not in found)

    temp_path = path.with_name(path.name + ".tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="") as fh:
            fh.writelines(out)
        os.replace(temp_path, path)
    except BaseException:
        with suppress(FileNotFoundError):
            temp_path.unlink()
        raise