"""Enumerated configuration values and the section each key belongs to."""

from __future__ import annotations

import enum
import locale

from .ini import parse_int

SECTION_GENERAL = "General"
SECTION_DISPLAY = "Display"
SECTION_TIMER = "Timer"
SECTION_POMODORO = "Pomodoro"
SECTION_NOTIFICATION = "Notification"
SECTION_HOTKEYS = "Hotkeys"
SECTION_RECENTFILES = "RecentFiles"
SECTION_COLORS = "Colors"
SECTION_OPTIONS = "Options"


class Language(enum.IntEnum):
    """User interface languages."""

    CHINESE_SIMP = 0
    CHINESE_TRAD = 1
    ENGLISH = 2
    SPANISH = 3
    FRENCH = 4
    GERMAN = 5
    RUSSIAN = 6
    PORTUGUESE = 7
    JAPANESE = 8
    KOREAN = 9

    def config_name(self):
        """Return the name stored in the configuration file."""
        return _LANGUAGE_NAMES[self]

    @classmethod
    def from_config(cls, text):
        """Parse a stored language name, accepting old numeric values too."""
        for language, name in _LANGUAGE_NAMES.items():
            if text == name:
                return language
        value = parse_int(text)
        if 0 <= value < len(cls):
            return cls(value)
        return cls.ENGLISH


_LANGUAGE_NAMES = {
    Language.CHINESE_SIMP: "Chinese_Simplified",
    Language.CHINESE_TRAD: "Chinese_Traditional",
    Language.ENGLISH: "English",
    Language.SPANISH: "Spanish",
    Language.FRENCH: "French",
    Language.GERMAN: "German",
    Language.RUSSIAN: "Russian",
    Language.PORTUGUESE: "Portuguese",
    Language.JAPANESE: "Japanese",
    Language.KOREAN: "Korean",
}


class TimeoutAction(enum.Enum):
    """What happens when a countdown ends."""

    MESSAGE = "MESSAGE"
    LOCK = "LOCK"
    SHUTDOWN = "SHUTDOWN"
    RESTART = "RESTART"
    OPEN_FILE = "OPEN_FILE"
    SHOW_TIME = "SHOW_TIME"
    COUNT_UP = "COUNT_UP"
    OPEN_WEBSITE = "OPEN_WEBSITE"
    SLEEP = "SLEEP"

    @property
    def is_one_shot(self):
        """True for actions that are never kept in the configuration file."""
        return self in (TimeoutAction.SHUTDOWN, TimeoutAction.RESTART, TimeoutAction.SLEEP)

    def config_name(self):
        """Return the stored name; one-shot actions are stored as ``MESSAGE``."""
        return TimeoutAction.MESSAGE.value if self.is_one_shot else self.value

    @classmethod
    def from_config(cls, text):
        """Parse a stored action; one-shot actions read back as MESSAGE.

        Returns None for unrecognised text, so the caller keeps its value.
        """
        if text in (cls.SHUTDOWN.value, cls.RESTART.value):
            return cls.MESSAGE
        if text == cls.SLEEP.value:
            return None
        try:
            return cls(text)
        except ValueError:
            return None


class NotificationType(enum.Enum):
    """How timeout notifications are shown."""

    CATIME = "CATIME"
    SYSTEM_MODAL = "SYSTEM_MODAL"
    OS = "OS"

    def config_name(self):
        """Return the name stored in the configuration file."""
        return self.value

    @classmethod
    def from_config(cls, text):
        """Parse a stored notification type; unknown text gives CATIME."""
        try:
            return cls(text)
        except ValueError:
            return cls.CATIME


_LANGUAGE_CODES = {
    "es": Language.SPANISH,
    "fr": Language.FRENCH,
    "de": Language.GERMAN,
    "ru": Language.RUSSIAN,
    "pt": Language.PORTUGUESE,
    "ja": Language.JAPANESE,
    "ko": Language.KOREAN,
    "en": Language.ENGLISH,
}


def language_for_locale(locale_name=None):
    """Pick the interface language for a locale name such as ``zh_CN`` or ``de-DE``.

    Chinese is simplified for mainland China or the Hans script and
    traditional otherwise. Unknown locales give English. With no name the
    current process locale is used.
    """
    if locale_name is None:
        locale_name = locale.getlocale()[0]
    if not locale_name:
        return Language.ENGLISH

    base = locale_name.split(".", 1)[0].split("@", 1)[0].replace("-", "_")
    parts = [part for part in base.split("_") if part]
    if not parts:
        return Language.ENGLISH
    code = parts[0].lower()

    if code == "zh":
        rest = {part.upper() for part in parts[1:]}
        if "CN" in rest or ("HANS" in rest and not rest & {"TW", "HK", "MO"}):
            return Language.CHINESE_SIMP
        return Language.CHINESE_TRAD
    return _LANGUAGE_CODES.get(code, Language.ENGLISH)


_GENERAL_KEYS = frozenset({"CONFIG_VERSION", "LANGUAGE", "SHORTCUT_CHECK_DONE"})

_SECTION_PREFIXES = (
    (
        SECTION_DISPLAY,
        (
            "CLOCK_TEXT_COLOR",
            "FONT_FILE_NAME",
            "CLOCK_BASE_FONT_SIZE",
            "WINDOW_SCALE",
            "CLOCK_WINDOW_POS_X",
            "CLOCK_WINDOW_POS_Y",
            "WINDOW_TOPMOST",
        ),
    ),
    (
        SECTION_TIMER,
        (
            "CLOCK_DEFAULT_START_TIME",
            "CLOCK_USE_24HOUR",
            "CLOCK_SHOW_SECONDS",
            "CLOCK_TIME_OPTIONS",
            "STARTUP_MODE",
            "CLOCK_TIMEOUT_TEXT",
            "CLOCK_TIMEOUT_ACTION",
            "CLOCK_TIMEOUT_FILE",
            "CLOCK_TIMEOUT_WEBSITE",
        ),
    ),
    (SECTION_POMODORO, ("POMODORO_",)),
    (SECTION_NOTIFICATION, ("NOTIFICATION_", "CLOCK_TIMEOUT_MESSAGE_TEXT")),
    (SECTION_HOTKEYS, ("HOTKEY_",)),
    (SECTION_RECENTFILES, ("CLOCK_RECENT_FILE",)),
    (SECTION_COLORS, ("COLOR_OPTIONS",)),
)


def section_for_key(key):
    """Return the configuration section a key is stored in."""
    if key in _GENERAL_KEYS:
        return SECTION_GENERAL
    for section, prefixes in _SECTION_PREFIXES:
        if key.startswith(prefixes):
            return section
    return SECTION_OPTIONS