"""Updating single timer and pomodoro entries in the configuration file."""

from __future__ import annotations

from .ini import replace_key_lines
from .options import TimeoutAction

_ONE_SHOT_NAMES = frozenset(
    action.value for action in TimeoutAction if action.is_one_shot
)


def _join(values):
    if isinstance(values, str):
        return values
    return ",".join(str(int(value)) for value in values)


def write_timeout_action(config_path, action):
    """Store the timeout action and return the name written.

    Shutdown, restart and sleep are one-shot actions and are stored as
    ``MESSAGE``. Raises FileNotFoundError when the file does not exist.
    """
    if isinstance(action, TimeoutAction):
        name = action.config_name()
    else:
        name = TimeoutAction.MESSAGE.value if action in _ONE_SHOT_NAMES else action
    replace_key_lines(config_path, {"CLOCK_TIMEOUT_ACTION": name})
    return name


def write_time_options(config_path, options):
    """Store the countdown presets, given as text or as a sequence of numbers."""
    text = _join(options)
    replace_key_lines(config_path, {"CLOCK_TIME_OPTIONS": text})
    return text


def write_topmost(config_path, topmost):
    """Store whether the window stays on top; a bool is written as TRUE or FALSE."""
    if isinstance(topmost, bool):
        topmost = "TRUE" if topmost else "FALSE"
    replace_key_lines(config_path, {"WINDOW_TOPMOST": topmost})
    return topmost


def write_startup_mode(config_path, mode):
    """Store the timer mode used at start-up."""
    replace_key_lines(config_path, {"STARTUP_MODE": mode})
    return mode


def write_timeout_website(config_path, url):
    """Store a website to open on timeout and set the action to open it.

    An empty URL changes nothing and gives False; otherwise True.
    """
    if not url:
        return False
    replace_key_lines(
        config_path,
        {
            "CLOCK_TIMEOUT_ACTION": TimeoutAction.OPEN_WEBSITE.value,
            "CLOCK_TIMEOUT_WEBSITE": url,
        },
    )
    return True


def write_pomodoro_times(config_path, times, work, short_break, long_break):
    """Set the first three pomodoro periods and store the whole sequence.

    The work time always becomes the first entry. A break replaces an
    existing entry, or is added when the sequence is too short and the break
    is positive. Returns the new sequence.
    """
    updated = list(times)
    if updated:
        updated[0] = work
    else:
        updated.append(work)

    if len(updated) > 1:
        updated[1] = short_break
    elif short_break > 0:
        updated.append(short_break)

    if len(updated) > 2:
        updated[2] = long_break
    elif long_break > 0:
        updated.extend([0] * (2 - len(updated)))
        updated.append(long_break)

    replace_key_lines(config_path, {"POMODORO_TIME_OPTIONS": _join(updated)})
    return updated


def write_pomodoro_loop_count(config_path, loop_count):
    """Store how many times the pomodoro sequence repeats."""
    loop_count = int(loop_count)
    replace_key_lines(config_path, {"POMODORO_LOOP_COUNT": str(loop_count)})
    return loop_count


def write_pomodoro_time_options(config_path, times):
    """Store a pomodoro sequence; an empty one changes nothing and gives False."""
    times = list(times or ())
    if not times:
        return False
    replace_key_lines(config_path, {"POMODORO_TIME_OPTIONS": _join(times)})
    return True