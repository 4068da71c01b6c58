from timecfg.defaults import (
    CONFIG_VERSION,
    DEFAULT_COLOR_OPTIONS,
    HOTKEY_KEYS,
    MAX_RECENT_FILES,
    create_default_config,
    recent_file_key,
)
from timecfg.ini import IniFile
from timecfg.options import Language, NotificationType


def _make(tmp_path, **kwargs):
    path = tmp_path / "config.ini"
    create_default_config(path, **kwargs)
    return IniFile(path)


def test_general_section(tmp_path):
    ini = _make(tmp_path, language=Language.GERMAN)
    assert ini.get("General", "CONFIG_VERSION", "") == CONFIG_VERSION
    assert ini.get("General", "LANGUAGE", "") == "German"
    assert ini.get_bool("General", "SHORTCUT_CHECK_DONE", True) is False


def test_display_and_timer_values(tmp_path):
    ini = _make(tmp_path, language=Language.ENGLISH)
    assert ini.get("Display", "CLOCK_TEXT_COLOR", "") == "#FFB6C1"
    assert ini.get("Display", "FONT_FILE_NAME", "") == "Wallpoet Essence.ttf"
    assert ini.get_int("Display", "CLOCK_WINDOW_POS_Y", 0) == -1
    assert ini.get_bool("Display", "WINDOW_TOPMOST", False) is True
    assert ini.get("Timer", "CLOCK_TIME_OPTIONS", "") == "25,10,5"
    assert ini.get("Timer", "CLOCK_TIMEOUT_ACTION", "") == "MESSAGE"
    assert ini.get("Timer", "STARTUP_MODE", "") == "COUNTDOWN"
    assert ini.get("Timer", "CLOCK_TIMEOUT_FILE", "x") == ""


def test_pomodoro_and_notification(tmp_path):
    ini = _make(tmp_path, language=Language.ENGLISH, notification_type=NotificationType.OS)
    assert ini.get("Pomodoro", "POMODORO_TIME_OPTIONS", "") == "1500,300,1500,600"
    assert ini.get_int("Pomodoro", "POMODORO_LOOP_COUNT", 0) == 1
    assert ini.get("Notification", "NOTIFICATION_TYPE", "") == "OS"
    assert ini.get_int("Notification", "NOTIFICATION_TIMEOUT_MS", 0) == 3000
    assert ini.get("Notification", "CLOCK_TIMEOUT_MESSAGE_TEXT", "") == "时间到啦！"


def test_hotkeys_recent_and_colors(tmp_path):
    ini = _make(tmp_path, language=Language.ENGLISH)
    assert all(ini.get("Hotkeys", key, "") == "None" for key in HOTKEY_KEYS)
    assert all(
        ini.get("RecentFiles", recent_file_key(n), "x") == ""
        for n in range(1, MAX_RECENT_FILES + 1)
    )
    assert ini.get("Colors", "COLOR_OPTIONS", "") == DEFAULT_COLOR_OPTIONS


def test_existing_values_overwritten_and_other_keys_kept(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[Display]\nCLOCK_TEXT_COLOR=#123456\n[Extra]\nKEEP=yes\n", encoding="utf-8")
    create_default_config(path, language=Language.ENGLISH)
    ini = IniFile(path)
    assert ini.get("Display", "CLOCK_TEXT_COLOR", "") == "#FFB6C1"
    assert ini.get("Extra", "KEEP", "") == "yes"


def test_language_from_locale_when_not_given(tmp_path):
    ini = _make(tmp_path)
    name = ini.get("General", "LANGUAGE", "")
    assert name in {language.config_name() for language in Language}