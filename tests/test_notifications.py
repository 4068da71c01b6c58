import pytest

from timecfg.defaults import (
    DEFAULT_NOTIFICATION_MAX_OPACITY,
    DEFAULT_NOTIFICATION_TIMEOUT_MS,
    DEFAULT_POMODORO_CYCLE_COMPLETE,
    DEFAULT_POMODORO_TIMEOUT_MESSAGE,
    DEFAULT_TIMEOUT_MESSAGE,
    create_default_config,
)
from timecfg.ini import IniFile
from timecfg.notifications import (
    read_notification_messages,
    read_notification_opacity,
    read_notification_sound,
    read_notification_timeout,
    read_notification_type,
    read_notification_volume,
    write_notification_messages,
    write_notification_opacity,
    write_notification_sound,
    write_notification_timeout,
    write_notification_type,
    write_notification_volume,
)
from timecfg.options import SECTION_NOTIFICATION, Language, NotificationType


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "config.ini"
    create_default_config(path, Language.ENGLISH)
    return path


def _plain(tmp_path, text):
    path = tmp_path / "plain.ini"
    path.write_bytes(text.encode("utf-8"))
    return path


def test_messages_round_trip(config):
    written = write_notification_messages(config, "Done", "Break time", "All cycles done")
    assert read_notification_messages(config) == written
    assert IniFile(config).get(SECTION_NOTIFICATION, "CLOCK_TIMEOUT_MESSAGE_TEXT") == "Done"


def test_default_file_messages(config):
    assert read_notification_messages(config) == (
        DEFAULT_TIMEOUT_MESSAGE,
        DEFAULT_POMODORO_TIMEOUT_MESSAGE,
        DEFAULT_POMODORO_CYCLE_COMPLETE,
    )


def test_messages_missing_file(tmp_path):
    assert read_notification_messages(tmp_path / "absent.ini") is None


def test_messages_absent_keys_take_defaults(tmp_path):
    path = _plain(tmp_path, "CLOCK_TIMEOUT_MESSAGE_TEXT=Hi\r\n")
    assert read_notification_messages(path) == (
        "Hi",
        DEFAULT_POMODORO_TIMEOUT_MESSAGE,
        DEFAULT_POMODORO_CYCLE_COMPLETE,
    )


def test_message_write_normalizes_line_endings(tmp_path):
    path = _plain(tmp_path, "A=1\r\nB=2\r\n")
    write_notification_messages(path, "x", "y", "z")
    data = path.read_bytes()
    assert b"\r" not in data
    assert data.startswith(b"A=1\nB=2\n")


def test_timeout_round_trip(config):
    assert write_notification_timeout(config, 5000) == 5000
    assert read_notification_timeout(config) == 5000


def test_timeout_absent_gives_default(tmp_path):
    assert read_notification_timeout(_plain(tmp_path, "A=1\n")) == DEFAULT_NOTIFICATION_TIMEOUT_MS


def test_timeout_not_positive_keeps_current(tmp_path):
    assert read_notification_timeout(_plain(tmp_path, "NOTIFICATION_TIMEOUT_MS=0\n")) is None


def test_timeout_after_bom(tmp_path):
    path = _plain(tmp_path, "\ufeffNOTIFICATION_TIMEOUT_MS=4500\n")
    assert read_notification_timeout(path) == 4500


def test_timeout_missing_file(tmp_path):
    assert read_notification_timeout(tmp_path / "absent.ini") is None


def test_opacity_round_trip(config):
    write_notification_opacity(config, 80)
    assert read_notification_opacity(config) == 80


def test_opacity_absent_gives_default(tmp_path):
    assert read_notification_opacity(_plain(tmp_path, "A=1\n")) == DEFAULT_NOTIFICATION_MAX_OPACITY


def test_opacity_out_of_range_keeps_current(tmp_path):
    assert read_notification_opacity(_plain(tmp_path, "NOTIFICATION_MAX_OPACITY=150\n")) is None


def test_type_round_trip(config):
    assert write_notification_type(config, NotificationType.SYSTEM_MODAL) is NotificationType.SYSTEM_MODAL
    assert read_notification_type(config) is NotificationType.SYSTEM_MODAL


def test_invalid_type_is_stored_as_catime(config):
    write_notification_type(config, NotificationType.OS)
    assert write_notification_type(config, "BOGUS") is NotificationType.CATIME
    assert IniFile(config).get(SECTION_NOTIFICATION, "NOTIFICATION_TYPE") == "CATIME"


def test_unknown_stored_type_reads_as_catime(tmp_path):
    path = _plain(tmp_path, "NOTIFICATION_TYPE=BOGUS\n")
    assert read_notification_type(path) is NotificationType.CATIME


def test_type_absent(tmp_path):
    assert read_notification_type(_plain(tmp_path, "A=1\n")) is None


def test_sound_strips_equals_and_round_trips(config):
    stored = write_notification_sound(config, "C:\\sounds\\a=b.wav")
    assert "=" not in stored
    assert stored.startswith("C:\\sounds\\")
    assert read_notification_sound(config) == stored


def test_sound_absent(tmp_path):
    assert read_notification_sound(_plain(tmp_path, "A=1\n")) is None


@pytest.mark.parametrize("given, stored", [(150, 100), (-5, 0), (40, 40)])
def test_volume_is_clamped(config, given, stored):
    assert write_notification_volume(config, given) == stored
    assert read_notification_volume(config) == stored


def test_volume_absent(tmp_path):
    assert read_notification_volume(_plain(tmp_path, "A=1\n")) is None


def test_volume_out_of_range_ignored(tmp_path):
    assert read_notification_volume(_plain(tmp_path, "NOTIFICATION_SOUND_VOLUME=101\n")) is None


def test_writers_raise_on_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_notification_volume(tmp_path / "absent.ini", 50)