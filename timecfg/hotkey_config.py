"""Reading and writing the hotkey entries of the configuration file."""

from __future__ import annotations

from pathlib import Path

from .defaults import HOTKEY_KEYS
from .hotkeys import hotkey_to_string, string_to_hotkey
from .ini import replace_key_lines

_CUSTOM_KEY = "HOTKEY_CUSTOM_COUNTDOWN"
_MAIN_KEYS = tuple(key for key in HOTKEY_KEYS if key != _CUSTOM_KEY)


def _read_lines(config_path):
    """Return the file's lines without line endings, or None if it is missing."""
    try:
        with open(config_path, encoding="utf-8-sig", newline="") as fh:
            text = fh.read()
    except FileNotFoundError:
        return None
    return [line.rstrip("\r") for line in text.split("\n")]


def read_hotkeys(config_path):
    """Return the packed value of every hotkey except the custom countdown one.

    Hotkeys not in the file, or a missing file, give 0. When a key appears
    more than once the last line wins.
    """
    result = dict.fromkeys(_MAIN_KEYS, 0)
    for line in _read_lines(config_path) or ():
        for key in _MAIN_KEYS:
            prefix = f"{key}="
            if line.startswith(prefix):
                result[key] = string_to_hotkey(line[len(prefix):])
                break
    return result


def read_custom_countdown_hotkey(config_path):
    """Return the packed custom countdown hotkey; 0 when absent or no file."""
    prefix = f"{_CUSTOM_KEY}="
    for line in _read_lines(config_path) or ():
        if line.startswith(prefix):
            return string_to_hotkey(line[len(prefix):])
    return 0


def write_hotkeys(config_path, hotkeys):
    """Store the hotkeys in readable form and return the texts written.

    ``hotkeys`` maps hotkey keys to packed values; keys it lacks are stored
    as ``None``. The custom countdown hotkey is left as it is, except that a
    new file gets it as ``None``.
    """
    texts = {key: hotkey_to_string(hotkeys.get(key, 0)) for key in _MAIN_KEYS}
    path = Path(config_path)
    if not path.exists():
        lines = [f"{key}={value}\n" for key, value in texts.items()]
        lines.append(f"{_CUSTOM_KEY}={hotkey_to_string(0)}\n")
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.writelines(lines)
        return texts
    replace_key_lines(config_path, texts)
    return texts