"""Default configuration values and creation of a default configuration file."""

from __future__ import annotations

from .ini import IniFile
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
    language_for_locale,
)

CONFIG_VERSION = "1.0.0"

MAX_RECENT_FILES = 5
MAX_TIME_OPTIONS = 10
MAX_POMODORO_TIMES = 10

DEFAULT_TEXT_COLOR = "#FFB6C1"
DEFAULT_BASE_FONT_SIZE = 20
DEFAULT_FONT_FILE_NAME = "Wallpoet Essence.ttf"
DEFAULT_WINDOW_POS_X = 960
DEFAULT_WINDOW_POS_Y = -1
DEFAULT_WINDOW_SCALE = "1.62"
DEFAULT_START_TIME = 1500
DEFAULT_TIME_OPTIONS = "25,10,5"
DEFAULT_TIMEOUT_TEXT = "0"
DEFAULT_STARTUP_MODE = "COUNTDOWN"
DEFAULT_POMODORO_TIME_OPTIONS = "1500,300,1500,600"
DEFAULT_POMODORO_LOOP_COUNT = 1
DEFAULT_POMODORO_WORK_TIME = 1500
DEFAULT_POMODORO_SHORT_BREAK = 300
DEFAULT_POMODORO_LONG_BREAK = 600
DEFAULT_TIMEOUT_MESSAGE = "时间到啦！"
DEFAULT_POMODORO_TIMEOUT_MESSAGE = "番茄钟时间到！"
DEFAULT_POMODORO_CYCLE_COMPLETE = "所有番茄钟循环完成！"
DEFAULT_NOTIFICATION_TIMEOUT_MS = 3000
DEFAULT_NOTIFICATION_MAX_OPACITY = 95
DEFAULT_NOTIFICATION_SOUND_VOLUME = 100
DEFAULT_COLOR_OPTIONS = (
    "#FFFFFF,#F9DB91,#F4CAE0,#FFB6C1,#A8E7DF,#A3CFB3,#92CBFC,#BDA5E7,"
    "#9370DB,#8C92CF,#72A9A5,#EB99A7,#EB96BD,#FFAE8B,#FF7F50,#CA6174"
)

HOTKEY_KEYS = (
    "HOTKEY_SHOW_TIME",
    "HOTKEY_COUNT_UP",
    "HOTKEY_COUNTDOWN",
    "HOTKEY_QUICK_COUNTDOWN1",
    "HOTKEY_QUICK_COUNTDOWN2",
    "HOTKEY_QUICK_COUNTDOWN3",
    "HOTKEY_POMODORO",
    "HOTKEY_TOGGLE_VISIBILITY",
    "HOTKEY_EDIT_MODE",
    "HOTKEY_PAUSE_RESUME",
    "HOTKEY_RESTART_TIMER",
    "HOTKEY_CUSTOM_COUNTDOWN",
)


def recent_file_key(number):
    """Return the key of the recent file entry with the given 1-based number."""
    return f"CLOCK_RECENT_FILE_{number}"


def create_default_config(
    config_path, language=None, notification_type=NotificationType.CATIME
):
    """Write every setting with its default value into ``config_path``.

    With no ``language`` the language of the current locale is used. Keys
    already in the file are overwritten; other keys are kept.
    """
    if language is None:
        language = language_for_locale()
    language = Language(language)
    notification_type = NotificationType(notification_type)

    ini = IniFile(config_path)
    ini.path.parent.mkdir(parents=True, exist_ok=True)

    ini.set(SECTION_GENERAL, "CONFIG_VERSION", CONFIG_VERSION)
    ini.set(SECTION_GENERAL, "LANGUAGE", language.config_name())
    ini.set(SECTION_GENERAL, "SHORTCUT_CHECK_DONE", "FALSE")

    ini.set(SECTION_DISPLAY, "CLOCK_TEXT_COLOR", DEFAULT_TEXT_COLOR)
    ini.set_int(SECTION_DISPLAY, "CLOCK_BASE_FONT_SIZE", DEFAULT_BASE_FONT_SIZE)
    ini.set(SECTION_DISPLAY, "FONT_FILE_NAME", DEFAULT_FONT_FILE_NAME)
    ini.set_int(SECTION_DISPLAY, "CLOCK_WINDOW_POS_X", DEFAULT_WINDOW_POS_X)
    ini.set_int(SECTION_DISPLAY, "CLOCK_WINDOW_POS_Y", DEFAULT_WINDOW_POS_Y)
    ini.set(SECTION_DISPLAY, "WINDOW_SCALE", DEFAULT_WINDOW_SCALE)
    ini.set(SECTION_DISPLAY, "WINDOW_TOPMOST", "TRUE")

    ini.set_int(SECTION_TIMER, "CLOCK_DEFAULT_START_TIME", DEFAULT_START_TIME)
    ini.set(SECTION_TIMER, "CLOCK_USE_24HOUR", "FALSE")
    ini.set(SECTION_TIMER, "CLOCK_SHOW_SECONDS", "FALSE")
    ini.set(SECTION_TIMER, "CLOCK_TIME_OPTIONS", DEFAULT_TIME_OPTIONS)
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_TEXT", DEFAULT_TIMEOUT_TEXT)
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_ACTION", TimeoutAction.MESSAGE.config_name())
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_FILE", "")
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_WEBSITE", "")
    ini.set(SECTION_TIMER, "STARTUP_MODE", DEFAULT_STARTUP_MODE)

    ini.set(SECTION_POMODORO, "POMODORO_TIME_OPTIONS", DEFAULT_POMODORO_TIME_OPTIONS)
    ini.set_int(SECTION_POMODORO, "POMODORO_LOOP_COUNT", DEFAULT_POMODORO_LOOP_COUNT)

    ini.set(SECTION_NOTIFICATION, "CLOCK_TIMEOUT_MESSAGE_TEXT", DEFAULT_TIMEOUT_MESSAGE)
    ini.set(
        SECTION_NOTIFICATION,
        "POMODORO_TIMEOUT_MESSAGE_TEXT",
        DEFAULT_POMODORO_TIMEOUT_MESSAGE,
    )
    ini.set(
        SECTION_NOTIFICATION,
        "POMODORO_CYCLE_COMPLETE_TEXT",
        DEFAULT_POMODORO_CYCLE_COMPLETE,
    )
    ini.set_int(
        SECTION_NOTIFICATION, "NOTIFICATION_TIMEOUT_MS", DEFAULT_NOTIFICATION_TIMEOUT_MS
    )
    ini.set_int(
        SECTION_NOTIFICATION,
        "NOTIFICATION_MAX_OPACITY",
        DEFAULT_NOTIFICATION_MAX_OPACITY,
    )
    ini.set(SECTION_NOTIFICATION, "NOTIFICATION_TYPE", notification_type.config_name())
    ini.set(SECTION_NOTIFICATION, "NOTIFICATION_SOUND_FILE", "")
    ini.set_int(
        SECTION_NOTIFICATION,
        "NOTIFICATION_SOUND_VOLUME",
        DEFAULT_NOTIFICATION_SOUND_VOLUME,
    )

    for key in HOTKEY_KEYS:
        ini.set(SECTION_HOTKEYS, key, "None")

    for number in range(1, MAX_RECENT_FILES + 1):
        ini.set(SECTION_RECENTFILES, recent_file_key(number), "")

    ini.set(SECTION_COLORS, "COLOR_OPTIONS", DEFAULT_COLOR_OPTIONS)