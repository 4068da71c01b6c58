import pytest

from timecfg import options
from timecfg.options import (
    Language,
    NotificationType,
    TimeoutAction,
    language_for_locale,
    section_for_key,
)


@pytest.mark.parametrize("language", list(Language))
def test_language_round_trip(language):
    assert Language.from_config(language.config_name()) is language


def test_language_names_from_source():
    assert Language.CHINESE_SIMP.config_name() == "Chinese_Simplified"
    assert Language.from_config("Korean") is Language.KOREAN


def test_language_numeric_value_accepted():
    assert Language.from_config(str(int(Language.GERMAN))) is Language.GERMAN


def test_language_out_of_range_number_is_english():
    assert Language.from_config(str(len(Language))) is Language.ENGLISH
    assert Language.from_config("-1") is Language.ENGLISH


def test_language_non_numeric_text_reads_as_zero():
    assert Language.from_config("Klingon") is Language(0)


@pytest.mark.parametrize("action", [a for a in TimeoutAction if not a.is_one_shot])
def test_timeout_action_round_trip(action):
    assert TimeoutAction.from_config(action.config_name()) is action


@pytest.mark.parametrize(
    "action", [TimeoutAction.RESTART, TimeoutAction.SHUTDOWN, TimeoutAction.SLEEP]
)
def test_one_shot_actions_stored_as_message(action):
    assert action.config_name() == "MESSAGE"


@pytest.mark.parametrize("text", ["SHUTDOWN", "RESTART"])
def test_one_shot_actions_read_as_message(text):
    assert TimeoutAction.from_config(text) is TimeoutAction.MESSAGE


def test_unknown_timeout_action_is_none():
    assert TimeoutAction.from_config("EXPLODE") is None


@pytest.mark.parametrize("kind", list(NotificationType))
def test_notification_type_round_trip(kind):
    assert NotificationType.from_config(kind.config_name()) is kind


def test_unknown_notification_type_is_catime():
    assert NotificationType.from_config("popup") is NotificationType.CATIME


@pytest.mark.parametrize(
    "name, expected",
    [
        ("zh_CN", Language.CHINESE_SIMP),
        ("zh-CN.UTF-8", Language.CHINESE_SIMP),
        ("zh_TW", Language.CHINESE_TRAD),
        ("zh_HK", Language.CHINESE_TRAD),
        ("es_ES", Language.SPANISH),
        ("fr_FR", Language.FRENCH),
        ("de-DE", Language.GERMAN),
        ("ru_RU", Language.RUSSIAN),
        ("pt_BR", Language.PORTUGUESE),
        ("ja_JP", Language.JAPANESE),
        ("ko_KR", Language.KOREAN),
        ("en_US", Language.ENGLISH),
        ("nl_NL", Language.ENGLISH),
        ("", Language.ENGLISH),
    ],
)
def test_language_for_locale(name, expected):
    assert language_for_locale(name) is expected


@pytest.mark.parametrize(
    "key, section",
    [
        ("LANGUAGE", options.SECTION_GENERAL),
        ("CONFIG_VERSION", options.SECTION_GENERAL),
        ("CLOCK_TEXT_COLOR", options.SECTION_DISPLAY),
        ("WINDOW_TOPMOST", options.SECTION_DISPLAY),
        ("CLOCK_TIME_OPTIONS", options.SECTION_TIMER),
        ("CLOCK_TIMEOUT_WEBSITE", options.SECTION_TIMER),
        ("POMODORO_LOOP_COUNT", options.SECTION_POMODORO),
        ("NOTIFICATION_SOUND_FILE", options.SECTION_NOTIFICATION),
        ("CLOCK_TIMEOUT_MESSAGE_TEXT", options.SECTION_NOTIFICATION),
        ("HOTKEY_EDIT_MODE", options.SECTION_HOTKEYS),
        ("CLOCK_RECENT_FILE_3", options.SECTION_RECENTFILES),
        ("COLOR_OPTIONS", options.SECTION_COLORS),
        ("SOMETHING_ELSE", options.SECTION_OPTIONS),
    ],
)
def test_section_for_key(key, section):
    assert section_for_key(key) == section


def test_general_keys_must_match_exactly():
    assert section_for_key("LANGUAGE_EXTRA") == options.SECTION_OPTIONS