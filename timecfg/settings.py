"""The full set of settings and reading them from the configuration file."""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field

from . import defaults as d
from .hotkeys import string_to_hotkey
from .ini import IniFile, parse_int
from .options import (
    SECTION_COLORS,
    SECTION_DISPLAY,
    SECTION_GENERAL,
    SECTION_HOTKEYS,
    SECTION_NOTIFICATION,
    SECTION_POMODORO,
    SECTION_RECENTFILES,
    SECTION_TIMER,
    Language,
    NotificationType,
    TimeoutAction,
)
from .paths import ensure_resource_folders, extract_file_name

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_float(text):
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _split_tokens(text):
    return [token for token in text.split(",") if token]


@dataclass
class RecentFile:
    """A recently opened file and its display name."""

    path: str
    name: str


@dataclass
class Settings:
    """Every value held in the configuration file."""

    language: Language = Language.ENGLISH
    text_color: str = "#FFFFFF"
    base_font_size: int = d.DEFAULT_BASE_FONT_SIZE
    font_file_name: str = d.DEFAULT_FONT_FILE_NAME
    font_internal_name: str = "Wallpoet Essence"
    window_pos_x: int = d.DEFAULT_WINDOW_POS_X
    window_pos_y: int = d.DEFAULT_WINDOW_POS_Y
    window_scale: float = 1.62
    window_topmost: bool = True
    default_start_time: int = d.DEFAULT_START_TIME
    use_24hour: bool = False
    show_seconds: bool = False
    timeout_text: str = d.DEFAULT_TIMEOUT_TEXT
    timeout_action: TimeoutAction = TimeoutAction.MESSAGE
    timeout_file_path: str = ""
    timeout_website_url: str = ""
    time_options: list = field(default_factory=lambda: [25, 10, 5])
    startup_mode: str = d.DEFAULT_STARTUP_MODE
    pomodoro_times: list = field(default_factory=lambda: [1500, 300, 1500, 600])
    pomodoro_work_time: int = d.DEFAULT_POMODORO_WORK_TIME
    pomodoro_short_break: int = d.DEFAULT_POMODORO_SHORT_BREAK
    pomodoro_long_break: int = d.DEFAULT_POMODORO_LONG_BREAK
    pomodoro_loop_count: int = d.DEFAULT_POMODORO_LOOP_COUNT
    timeout_message_text: str = d.DEFAULT_TIMEOUT_MESSAGE
    pomodoro_timeout_message_text: str = d.DEFAULT_POMODORO_TIMEOUT_MESSAGE
    pomodoro_cycle_complete_text: str = d.DEFAULT_POMODORO_CYCLE_COMPLETE
    notification_timeout_ms: int = d.DEFAULT_NOTIFICATION_TIMEOUT_MS
    notification_max_opacity: int = d.DEFAULT_NOTIFICATION_MAX_OPACITY
    notification_type: NotificationType = NotificationType.CATIME
    notification_sound_file: str = ""
    notification_sound_volume: int = d.DEFAULT_NOTIFICATION_SOUND_VOLUME
    color_options: list = field(
        default_factory=lambda: _split_tokens(d.DEFAULT_COLOR_OPTIONS)
    )
    recent_files: list = field(default_factory=list)
    hotkeys: dict = field(default_factory=lambda: dict.fromkeys(d.HOTKEY_KEYS, 0))
    last_config_time: float = 0.0


def _font_internal_name(file_name):
    if len(file_name) > 4 and file_name.endswith(".ttf"):
        return file_name[:-4]
    return file_name


def read_config(config_path):
    """Read the configuration file into a Settings object.

    Creates the resource folders beside the file, and writes a default
    configuration when the file is missing or its version does not match.
    """
    ensure_resource_folders(config_path)
    ini = IniFile(config_path)

    if not ini.path.exists():
        d.create_default_config(config_path)
    if ini.get(SECTION_GENERAL, "CONFIG_VERSION", "") != d.CONFIG_VERSION:
        d.create_default_config(config_path)

    s = Settings()
    s.language = Language.from_config(ini.get(SECTION_GENERAL, "LANGUAGE", "English"))

    s.text_color = ini.get(SECTION_DISPLAY, "CLOCK_TEXT_COLOR", d.DEFAULT_TEXT_COLOR)
    s.base_font_size = ini.get_int(
        SECTION_DISPLAY, "CLOCK_BASE_FONT_SIZE", d.DEFAULT_BASE_FONT_SIZE
    )
    s.font_file_name = ini.get(SECTION_DISPLAY, "FONT_FILE_NAME", d.DEFAULT_FONT_FILE_NAME)
    s.font_internal_name = _font_internal_name(s.font_file_name)
    s.window_pos_x = ini.get_int(SECTION_DISPLAY, "CLOCK_WINDOW_POS_X", d.DEFAULT_WINDOW_POS_X)
    s.window_pos_y = ini.get_int(SECTION_DISPLAY, "CLOCK_WINDOW_POS_Y", d.DEFAULT_WINDOW_POS_Y)
    s.window_scale = _parse_float(
        ini.get(SECTION_DISPLAY, "WINDOW_SCALE", d.DEFAULT_WINDOW_SCALE)
    )
    s.window_topmost = ini.get_bool(SECTION_DISPLAY, "WINDOW_TOPMOST", True)
    if s.text_color.lower() == "#000000":
        s.text_color = "#000001"

    s.default_start_time = ini.get_int(
        SECTION_TIMER, "CLOCK_DEFAULT_START_TIME", d.DEFAULT_START_TIME
    )
    s.use_24hour = ini.get_bool(SECTION_TIMER, "CLOCK_USE_24HOUR", False)
    s.show_seconds = ini.get_bool(SECTION_TIMER, "CLOCK_SHOW_SECONDS", False)
    s.timeout_text = ini.get(SECTION_TIMER, "CLOCK_TIMEOUT_TEXT", d.DEFAULT_TIMEOUT_TEXT)

    action = TimeoutAction.from_config(
        ini.get(SECTION_TIMER, "CLOCK_TIMEOUT_ACTION", "MESSAGE")
    )
    if action is not None:
        s.timeout_action = action
    s.timeout_file_path = ini.get(SECTION_TIMER, "CLOCK_TIMEOUT_FILE", "")
    s.timeout_website_url = ini.get(SECTION_TIMER, "CLOCK_TIMEOUT_WEBSITE", "")
    if s.timeout_file_path and os.path.exists(s.timeout_file_path):
        s.timeout_action = TimeoutAction.OPEN_FILE
    if s.timeout_website_url:
        s.timeout_action = TimeoutAction.OPEN_WEBSITE

    options = ini.get(SECTION_TIMER, "CLOCK_TIME_OPTIONS", d.DEFAULT_TIME_OPTIONS)
    s.time_options = [
        parse_int(token.lstrip(" ")) for token in _split_tokens(options)
    ][: d.MAX_TIME_OPTIONS]
    s.startup_mode = ini.get(SECTION_TIMER, "STARTUP_MODE", d.DEFAULT_STARTUP_MODE)

    pomodoro = ini.get(
        SECTION_POMODORO, "POMODORO_TIME_OPTIONS", d.DEFAULT_POMODORO_TIME_OPTIONS
    )
    s.pomodoro_times = [parse_int(token) for token in _split_tokens(pomodoro)][
        : d.MAX_POMODORO_TIMES
    ]
    times = s.pomodoro_times
    if times:
        s.pomodoro_work_time = times[0]
        if len(times) > 1:
            s.pomodoro_short_break = times[1]
        if len(times) > 3:
            s.pomodoro_long_break = times[3]
    s.pomodoro_loop_count = max(
        1, ini.get_int(SECTION_POMODORO, "POMODORO_LOOP_COUNT", d.DEFAULT_POMODORO_LOOP_COUNT)
    )

    s.timeout_message_text = ini.get(
        SECTION_NOTIFICATION, "CLOCK_TIMEOUT_MESSAGE_TEXT", d.DEFAULT_TIMEOUT_MESSAGE
    )
    s.pomodoro_timeout_message_text = ini.get(
        SECTION_NOTIFICATION,
        "POMODORO_TIMEOUT_MESSAGE_TEXT",
        d.DEFAULT_POMODORO_TIMEOUT_MESSAGE,
    )
    s.pomodoro_cycle_complete_text = ini.get(
        SECTION_NOTIFICATION,
        "POMODORO_CYCLE_COMPLETE_TEXT",
        d.DEFAULT_POMODORO_CYCLE_COMPLETE,
    )
    s.notification_timeout_ms = ini.get_int(
        SECTION_NOTIFICATION, "NOTIFICATION_TIMEOUT_MS", d.DEFAULT_NOTIFICATION_TIMEOUT_MS
    )
    opacity = ini.get_int(
        SECTION_NOTIFICATION, "NOTIFICATION_MAX_OPACITY", d.DEFAULT_NOTIFICATION_MAX_OPACITY
    )
    s.notification_max_opacity = min(100, max(1, opacity))
    s.notification_type = NotificationType.from_config(
        ini.get(SECTION_NOTIFICATION, "NOTIFICATION_TYPE", "CATIME")
    )
    s.notification_sound_file = ini.get(SECTION_NOTIFICATION, "NOTIFICATION_SOUND_FILE", "")
    volume = ini.get_int(
        SECTION_NOTIFICATION,
        "NOTIFICATION_SOUND_VOLUME",
        d.DEFAULT_NOTIFICATION_SOUND_VOLUME,
    )
    s.notification_sound_volume = min(100, max(0, volume))

    s.color_options = _split_tokens(
        ini.get(SECTION_COLORS, "COLOR_OPTIONS", d.DEFAULT_COLOR_OPTIONS)
    )

    s.recent_files = []
    for number in range(1, d.MAX_RECENT_FILES + 1):
        path = ini.get(SECTION_RECENTFILES, d.recent_file_key(number), "")
        if path and os.path.exists(path):
            s.recent_files.append(RecentFile(path, extract_file_name(path)))

    s.hotkeys = {
        key: string_to_hotkey(ini.get(SECTION_HOTKEYS, key, "None"))
        for key in d.HOTKEY_KEYS
    }

    s.last_config_time = time.time()
    return s