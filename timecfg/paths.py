"""Locations of the configuration file and resource folders."""

from __future__ import annotations

import logging
import os

_MAX_PATH = 260
_APP_DIR = "Catime"
_RESOURCE_SUBFOLDERS = ("audio", "images", "animations", "themes", "plug-in")

_log = logging.getLogger(__name__)


def _make_dir(path):
    """Create one directory level; True if it exists afterwards."""
    try:
        os.mkdir(path)
    except FileExistsError:
        return True
    except OSError:
        return False
    return True


def _appdata(environ):
    if environ is None:
        environ = os.environ
    return environ.get("LOCALAPPDATA")


def get_config_path(environ=None):
    """Return the configuration file path, creating its folder if needed.

    Uses the LOCALAPPDATA folder and falls back to a path beside the program
    when it is unset, too long, or its folder cannot be created.
    """
    fallback = os.path.join(".", "asset", "config.ini")
    appdata = _appdata(environ)
    if not appdata:
        return fallback
    path = os.path.join(appdata, _APP_DIR, "config.ini")
    if len(path) >= _MAX_PATH:
        return fallback
    if not _make_dir(os.path.join(appdata, _APP_DIR)):
        return fallback
    return path


def get_audio_folder_path(environ=None):
    """Return the folder holding notification sounds, creating it if possible."""
    fallback = os.path.join(".", "resources", "audio")
    appdata = _appdata(environ)
    if not appdata:
        return fallback
    path = os.path.join(appdata, _APP_DIR, "resources", "audio")
    if len(path) >= _MAX_PATH:
        return fallback
    if not _make_dir(path):
        return fallback
    return path


def ensure_resource_folders(config_path):
    """Create the ``resources`` folder tree beside the configuration file.

    Returns the resources folder path, or None when ``config_path`` has no
    folder part or the resources folder cannot be created.
    """
    config_path = str(config_path)
    cut = config_path.rfind("\\")
    if cut < 0:
        cut = config_path.rfind("/")
    if cut < 0:
        return None

    resources = os.path.join(config_path[: cut + 1], "resources")
    if not _make_dir(resources):
        _log.warning("Failed to create resources folder: %s", resources)
        return None

    for name in _RESOURCE_SUBFOLDERS:
        folder = os.path.join(resources, name)
        if not _make_dir(folder):
            _log.warning("Failed to create %s folder: %s", name, folder)
    return resources


def extract_file_name(path):
    """Return the part of ``path`` after the last backslash, else the last slash."""
    for separator in ("\\", "/"):
        head, sep, tail = path.rpartition(separator)
        if sep:
            return tail
    return path