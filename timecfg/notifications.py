"""Reading and writing the notification entries of the configuration file."""

from __future__ import annotations

import os
from contextlib import suppress
from pathlib import Path

from .defaults import (
    DEFAULT_NOTIFICATION_MAX_OPACITY,
    DEFAULT_NOTIFICATION_TIMEOUT_MS,
    DEFAULT_POMODORO_CYCLE_COMPLETE,
    DEFAULT_POMODORO_TIMEOUT_MESSAGE,
    DEFAULT_TIMEOUT_MESSAGE,
)
from .ini import parse_int, replace_key_lines
from .options import NotificationType

_MAX_PATH = 260
_TIMEOUT_MSG_KEY = "CLOCK_TIMEOUT_MESSAGE_TEXT"
_POMODORO_MSG_KEY = "POMODORO_TIMEOUT_MESSAGE_TEXT"
_CYCLE_MSG_KEY = "POMODORO_CYCLE_COMPLETE_TEXT"
_SOUND_PREFIX = "NOTIFICATION_SOUND_FILE"


def _read_lines(config_path):
    """Return the file's lines with carriage returns removed, or None if missing."""
    try:
        with open(config_path, encoding="utf-8-sig", newline="") as fh:
            text = fh.read()
    except FileNotFoundError:
        return None
    return text.replace("\r", "").split("\n")


def _rewrite_normalized(config_path, values):
    """Replace ``KEY=`` lines, writing every line back with a plain newline."""
    path = Path(config_path)
    with path.open(encoding="utf-8", newline="") as fh:
        text = fh.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    found = set()
    out = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        for key, value in values.items():
            if line.startswith(f"{key}="):
                out.append(f"{key}={value}")
                found.add(key)
                break
        else:
            out.append(line)
    out.extend(f"{key}={value}" for key, value in values.items() if key not in found)

    temp_path = path.with_name(path.name + ".tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="") as fh:
            fh.writelines(f"{line}\n" for line in out)
        os.replace(temp_path, path)
    except BaseException:
        with suppress(FileNotFoundError):
            temp_path.unlink()
        raise


def _first_value(config_path, key):
    """Return the value of the first ``KEY=`` line; None if absent or no file."""
    lines = _read_lines(config_path)
    if lines is None:
        return None
    prefix = f"{key}="
    for line in lines:
        if line.startswith(prefix):
            return line[len(prefix):]
    return None


def write_notification_messages(config_path, timeout_msg, pomodoro_msg, cycle_complete_msg):
    """Store the three notification texts and return them as a tuple."""
    _rewrite_normalized(
        config_path,
        {
            _TIMEOUT_MSG_KEY: timeout_msg,
            _POMODORO_MSG_KEY: pomodoro_msg,
            _CYCLE_MSG_KEY: cycle_complete_msg,
        },
    )
    return timeout_msg, pomodoro_msg, cycle_complete_msg


def read_notification_messages(config_path):
    """Return the timeout, pomodoro and cycle-complete texts.

    Texts not in the file take their defaults. Returns None when the file
    cannot be opened, so the caller keeps its current texts.
    """
    lines = _read_lines(config_path)
    if lines is None:
        return None
    messages = {}
    keys = (_TIMEOUT_MSG_KEY, _POMODORO_MSG_KEY, _CYCLE_MSG_KEY)
    for line in lines:
        for key in keys:
            if line.startswith(f"{key}="):
                messages[key] = line[len(key) + 1:]
                break
        if len(messages) == len(keys):
            break
    return (
        messages.get(_TIMEOUT_MSG_KEY, DEFAULT_TIMEOUT_MESSAGE),
        messages.get(_POMODORO_MSG_KEY, DEFAULT_POMODORO_TIMEOUT_MESSAGE),
        messages.get(_CYCLE_MSG_KEY, DEFAULT_POMODORO_CYCLE_COMPLETE),
    )


def read_notification_timeout(config_path):
    """Return the notification display time in milliseconds.

    An absent entry gives the default. None means the caller keeps its
    current value: the file is missing or the stored time is not positive.
    """
    if _read_lines(config_path) is None:
        return None
    value = _first_value(config_path, "NOTIFICATION_TIMEOUT_MS")
    if value is None:
        return DEFAULT_NOTIFICATION_TIMEOUT_MS
    timeout = parse_int(value)
    return timeout if timeout > 0 else None


def write_notification_timeout(config_path, timeout_ms):
    """Store the notification display time in milliseconds."""
    timeout_ms = int(timeout_ms)
    _rewrite_normalized(config_path, {"NOTIFICATION_TIMEOUT_MS": timeout_ms})
    return timeout_ms


def read_notification_opacity(config_path):
    """Return the notification window's maximum opacity, 1 to 100.

    An absent entry gives the default. None means the caller keeps its
    current value: the file is missing or the stored value is out of range.
    """
    if _read_lines(config_path) is None:
        return None
    value = _first_value(config_path, "NOTIFICATION_MAX_OPACITY")
    if value is None:
        return DEFAULT_NOTIFICATION_MAX_OPACITY
    opacity = parse_int(value)
    return opacity if 1 <= opacity <= 100 else None


def write_notification_opacity(config_path, opacity):
    """Store the notification window's maximum opacity."""
    opacity = int(opacity)
    _rewrite_normalized(config_path, {"NOTIFICATION_MAX_OPACITY": opacity})
    return opacity


def read_notification_type(config_path):
    """Return the stored notification type; unknown names give CATIME.

    None when the file or the entry is missing.
    """
    value = _first_value(config_path, "NOTIFICATION_TYPE")
    if value is None:
        return None
    words = value.split()
    return NotificationType.from_config(words[0][:31] if words else "")


def write_notification_type(config_path, notification_type):
    """Store the notification type; invalid values are stored as CATIME."""
    try:
        kind = NotificationType(notification_type)
    except ValueError:
        kind = NotificationType.CATIME
    replace_key_lines(config_path, {"NOTIFICATION_TYPE": kind.config_name()})
    return kind


def read_notification_sound(config_path):
    """Return the stored notification sound path; None when not stored."""
    lines = _read_lines(config_path)
    if lines is None:
        return None
    for line in lines:
        if line.startswith(_SOUND_PREFIX):
            value = line[len(_SOUND_PREFIX):]
            if value.startswith("="):
                value = value[1:]
            return value[: _MAX_PATH - 1]
    return None


def write_notification_sound(config_path, sound_file):
    """Store the notification sound path with any ``=`` removed; return it."""
    clean = sound_file.replace("=", "")[: _MAX_PATH - 1]
    replace_key_lines(config_path, {_SOUND_PREFIX: clean})
    return clean


def read_notification_volume(config_path):
    """Return the stored sound volume, or None when absent or out of range."""
    value = _first_value(config_path, "NOTIFICATION_SOUND_VOLUME")
    if value is None:
        return None
    volume = parse_int(value)
    return volume if 0 <= volume <= 100 else None


def write_notification_volume(config_path, volume):
    """Store the sound volume clamped to 0..100 and return it."""
    volume = min(100, max(0, int(volume)))
    replace_key_lines(config_path, {"NOTIFICATION_SOUND_VOLUME": volume})
    return volume