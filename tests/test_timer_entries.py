import pytest

from timecfg.defaults import create_default_config
from timecfg.ini import IniFile
from timecfg.options import SECTION_DISPLAY, SECTION_POMODORO, SECTION_TIMER, Language, TimeoutAction
from timecfg.settings import read_config
from timecfg.timer_entries import (
    write_pomodoro_loop_count,
    write_pomodoro_time_options,
    write_pomodoro_times,
    write_startup_mode,
    write_time_options,
    write_timeout_action,
    write_timeout_website,
    write_topmost,
)


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "config.ini"
    create_default_config(path, Language.ENGLISH)
    return path


@pytest.mark.parametrize(
    "action", ["RESTART", "SHUTDOWN", "SLEEP", TimeoutAction.SHUTDOWN, TimeoutAction.SLEEP]
)
def test_one_shot_actions_are_stored_as_message(config, action):
    assert write_timeout_action(config, action) == "MESSAGE"
    assert IniFile(config).get(SECTION_TIMER, "CLOCK_TIMEOUT_ACTION") == "MESSAGE"


def test_regular_action_is_stored(config):
    write_timeout_action(config, TimeoutAction.LOCK)
    assert IniFile(config).get(SECTION_TIMER, "CLOCK_TIMEOUT_ACTION") == "LOCK"


def test_missing_key_is_appended_and_other_lines_kept(tmp_path):
    path = tmp_path / "plain.ini"
    path.write_text("A=1\r\nB=2\n", encoding="utf-8", newline="")
    write_timeout_action(path, "LOCK")
    assert path.read_bytes() == b"A=1\r\nB=2\nCLOCK_TIMEOUT_ACTION=LOCK\n"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_startup_mode(tmp_path / "absent.ini", "COUNT_UP")


def test_time_options_round_trip(config):
    write_time_options(config, [30, 15, 45])
    assert read_config(config).time_options == [30, 15, 45]


def test_time_options_text_is_written_as_given(config):
    write_time_options(config, "25,10,5")
    assert IniFile(config).get(SECTION_TIMER, "CLOCK_TIME_OPTIONS") == "25,10,5"


@pytest.mark.parametrize("value, stored", [(True, "TRUE"), (False, "FALSE"), ("FALSE", "FALSE")])
def test_topmost(config, value, stored):
    write_topmost(config, value)
    assert IniFile(config).get(SECTION_DISPLAY, "WINDOW_TOPMOST") == stored


def test_startup_mode(config):
    assert write_startup_mode(config, "SHOW_TIME") == "SHOW_TIME"
    assert read_config(config).startup_mode == "SHOW_TIME"


def test_empty_website_changes_nothing(config):
    before = config.read_bytes()
    assert write_timeout_website(config, "") is False
    assert config.read_bytes() == before


def test_website_sets_action(config):
    url = "https://example.com/done"
    assert write_timeout_website(config, url) is True
    ini = IniFile(config)
    assert ini.get(SECTION_TIMER, "CLOCK_TIMEOUT_ACTION") == "OPEN_WEBSITE"
    assert ini.get(SECTION_TIMER, "CLOCK_TIMEOUT_WEBSITE") == url
    assert read_config(config).timeout_action is TimeoutAction.OPEN_WEBSITE


def test_pomodoro_times_replace_first_three(config):
    result = write_pomodoro_times(config, [1500, 300, 1500, 600], 1200, 240, 900)
    assert result == [1200, 240, 900, 600]
    assert read_config(config).pomodoro_times == result


def test_pomodoro_times_from_empty_sequence(config):
    assert write_pomodoro_times(config, [], 1200, 0, 0) == [1200]
    assert read_config(config).pomodoro_times == [1200]


def test_pomodoro_times_adds_positive_break(config):
    assert write_pomodoro_times(config, [1500], 1200, 240, 0) == [1200, 240]


def test_pomodoro_times_does_not_change_input(config):
    original = [1500, 300, 1500, 600]
    write_pomodoro_times(config, original, 1, 2, 3)
    assert original == [1500, 300, 1500, 600]


def test_pomodoro_loop_count(config):
    assert write_pomodoro_loop_count(config, 4) == 4
    assert IniFile(config).get_int(SECTION_POMODORO, "POMODORO_LOOP_COUNT", 0) == 4


def test_empty_pomodoro_time_options_changes_nothing(config):
    before = config.read_bytes()
    assert write_pomodoro_time_options(config, []) is False
    assert config.read_bytes() == before


def test_pomodoro_time_options_round_trip(config):
    assert write_pomodoro_time_options(config, [1500, 300]) is True
    assert read_config(config).pomodoro_times == [1500, 300]