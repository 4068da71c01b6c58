"""The list of recently opened files."""

from __future__ import annotations

import os

from .defaults import MAX_RECENT_FILES
from .paths import extract_file_name
from .settings import RecentFile
from .writer import write_config

_NUMBERED_PREFIX = "CLOCK_RECENT_FILE_"
_OLD_PREFIX = "CLOCK_RECENT_FILE="


def _entry_path(line):
    if line.startswith(_NUMBERED_PREFIX):
        _, sep, path = line[len(_NUMBERED_PREFIX):].partition("=")
        return path if sep else None
    if line.startswith(_OLD_PREFIX):
        return line[len(_OLD_PREFIX):]
    return None


def load_recent_files(config_path):
    """Return the recent files listed in ``config_path`` that still exist.

    Both ``CLOCK_RECENT_FILE_N=path`` and the older ``CLOCK_RECENT_FILE=path``
    lines are read, up to the maximum number of entries. A missing
    configuration file gives an empty list.
    """
    try:
        with open(config_path, encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except FileNotFoundError:
        return []

    files = []
    for line in lines:
        path = _entry_path(line)
        if path is None or len(files) >= MAX_RECENT_FILES:
            continue
        if path and os.path.exists(path):
            files.append(RecentFile(path, path.rpartition("\\")[2]))
    return files


def add_recent_file(files, file_path):
    """Return a new list with ``file_path`` first, without duplicates.

    An entry already in the list is moved to the front; a new one pushes the
    oldest out once the list is full.
    """
    existing = next((entry for entry in files if entry.path == file_path), None)
    if existing is not None:
        return [existing] + [entry for entry in files if entry is not existing]
    entry = RecentFile(file_path, extract_file_name(file_path))
    return ([entry] + list(files))[:MAX_RECENT_FILES]


def save_recent_file(config_path, settings, file_path):
    """Put an existing file first in the recent list and save the configuration.

    Returns True when the list changed and was written, False when the file
    does not exist or is already first.
    """
    if not file_path or not os.path.exists(file_path):
        return False
    updated = add_recent_file(settings.recent_files, file_path)
    if updated == settings.recent_files:
        return False
    settings.recent_files = updated
    write_config(config_path, settings)
    return True