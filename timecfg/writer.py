"""Writing the full set of settings, and single keys, to the configuration file."""

from __future__ import annotations

from . import defaults as d
from .hotkeys import hotkey_to_string
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
    section_for_key,
)


def _bool_text(value):
    return "TRUE" if value else "FALSE"


def is_shortcut_check_done(config_path):
    """Return True when the file records that the shortcut check was done."""
    return IniFile(config_path).get_bool(SECTION_GENERAL, "SHORTCUT_CHECK_DONE", False)


def set_shortcut_check_done(config_path, done):
    """Record whether the shortcut check was done."""
    IniFile(config_path).set(SECTION_GENERAL, "SHORTCUT_CHECK_DONE", _bool_text(done))


def write_config(config_path, settings):
    """Write every value of ``settings`` into its section of ``config_path``.

    The shortcut check flag already in the file is kept. One-shot timeout
    actions are stored as ``MESSAGE``; unused recent file entries are cleared.
    """
    ini = IniFile(config_path)
    ini.path.parent.mkdir(parents=True, exist_ok=True)
    shortcut_done = is_shortcut_check_done(config_path)

    language = Language(settings.language)
    action = TimeoutAction(settings.timeout_action)
    notification_type = NotificationType(settings.notification_type)

    ini.set(SECTION_GENERAL, "CONFIG_VERSION", d.CONFIG_VERSION)
    ini.set(SECTION_GENERAL, "LANGUAGE", language.config_name())
    ini.set(SECTION_GENERAL, "SHORTCUT_CHECK_DONE", _bool_text(shortcut_done))

    ini.set(SECTION_DISPLAY, "CLOCK_TEXT_COLOR", settings.text_color)
    ini.set_int(SECTION_DISPLAY, "CLOCK_BASE_FONT_SIZE", settings.base_font_size)
    ini.set(SECTION_DISPLAY, "FONT_FILE_NAME", settings.font_file_name)
    ini.set_int(SECTION_DISPLAY, "CLOCK_WINDOW_POS_X", settings.window_pos_x)
    ini.set_int(SECTION_DISPLAY, "CLOCK_WINDOW_POS_Y", settings.window_pos_y)
    ini.set(SECTION_DISPLAY, "WINDOW_SCALE", f"{settings.window_scale:.2f}")
    ini.set(SECTION_DISPLAY, "WINDOW_TOPMOST", _bool_text(settings.window_topmost))

    ini.set_int(SECTION_TIMER, "CLOCK_DEFAULT_START_TIME", settings.default_start_time)
    ini.set(SECTION_TIMER, "CLOCK_USE_24HOUR", _bool_text(settings.use_24hour))
    ini.set(SECTION_TIMER, "CLOCK_SHOW_SECONDS", _bool_text(settings.show_seconds))
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_TEXT", settings.timeout_text)
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_ACTION", action.config_name())
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_FILE", settings.timeout_file_path)
    ini.set(SECTION_TIMER, "CLOCK_TIMEOUT_WEBSITE", settings.timeout_website_url)
    ini.set(
        SECTION_TIMER,
        "CLOCK_TIME_OPTIONS",
        ",".join(str(option) for option in settings.time_options),
    )
    ini.set(SECTION_TIMER, "STARTUP_MODE", settings.startup_mode)

    ini.set(
        SECTION_POMODORO,
        "POMODORO_TIME_OPTIONS",
        ",".join(str(seconds) for seconds in settings.pomodoro_times),
    )
    ini.set_int(SECTION_POMODORO, "POMODORO_LOOP_COUNT", settings.pomodoro_loop_count)

    ini.set(SECTION_NOTIFICATION, "CLOCK_TIMEOUT_MESSAGE_TEXT", settings.timeout_message_text)
    ini.set(
        SECTION_NOTIFICATION,
        "POMODORO_TIMEOUT_MESSAGE_TEXT",
        settings.pomodoro_timeout_message_text,
    )
    ini.set(
        SECTION_NOTIFICATION,
        "POMODORO_CYCLE_COMPLETE_TEXT",
        settings.pomodoro_cycle_complete_text,
    )
    ini.set_int(
        SECTION_NOTIFICATION, "NOTIFICATION_TIMEOUT_MS", settings.notification_timeout_ms
    )
    ini.set_int(
        SECTION_NOTIFICATION, "NOTIFICATION_MAX_OPACITY", settings.notification_max_opacity
    )
    ini.set(SECTION_NOTIFICATION, "NOTIFICATION_TYPE", notification_type.config_name())
    ini.set(SECTION_NOTIFICATION, "NOTIFICATION_SOUND_FILE", settings.notification_sound_file)
    ini.set_int(
        SECTION_NOTIFICATION,
        "NOTIFICATION_SOUND_VOLUME",
        settings.notification_sound_volume,
    )

    for key in d.HOTKEY_KEYS:
        ini.set(SECTION_HOTKEYS, key, hotkey_to_string(settings.hotkeys.get(key, 0)))

    recent = list(settings.recent_files)[: d.MAX_RECENT_FILES]
    for number in range(1, d.MAX_RECENT_FILES + 1):
        path = recent[number - 1].path if number <= len(recent) else ""
        ini.set(SECTION_RECENTFILES, d.recent_file_key(number), path)

    ini.set(SECTION_COLORS, "COLOR_OPTIONS", ",".join(settings.color_options))


def write_config_key_value(config_path, key, value):
    """Store one key in the section its name belongs to."""
    IniFile(config_path).set(section_for_key(key), key, value)


def write_config_language(config_path, language):
    """Store the interface language; unknown values are stored as English."""
    try:
        name = Language(language).config_name()
    except ValueError:
        name = Language.ENGLISH.config_name()
    write_config_key_value(config_path, "LANGUAGE", name)