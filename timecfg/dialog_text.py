"""Localised texts for dialog titles and controls."""

from __future__ import annotations

import enum
import re


class Dialog(enum.Enum):
    """Dialogs whose texts are localised."""

    ABOUT = enum.auto()
    NOTIFICATION_SETTINGS = enum.auto()
    POMODORO_LOOP = enum.auto()
    POMODORO_COMBO = enum.auto()
    POMODORO_TIME = enum.auto()
    SHORTCUT = enum.auto()
    WEBSITE = enum.auto()
    COUNTDOWN = enum.auto()


class Control(enum.Enum):
    """Controls that get special texts."""

    ABOUT_TITLE = enum.auto()
    VERSION_TEXT = enum.auto()
    BUILD_DATE = enum.auto()
    COPYRIGHT = enum.auto()
    CREDITS = enum.auto()
    STATIC = enum.auto()
    TEST_SOUND_BUTTON = enum.auto()
    OPEN_SOUND_DIR_BUTTON = enum.auto()
    OK = enum.auto()
    CANCEL = enum.auto()
    BUTTON_OK = enum.auto()


_TITLES = {
    Dialog.ABOUT: "About",
    Dialog.NOTIFICATION_SETTINGS: "Notification Settings",
    Dialog.POMODORO_LOOP: "Set Pomodoro Loop Count",
    Dialog.POMODORO_COMBO: "Set Pomodoro Time Combination",
    Dialog.POMODORO_TIME: "Set Pomodoro Time",
    Dialog.SHORTCUT: "Countdown Presets",
    Dialog.WEBSITE: "Open Website",
    Dialog.COUNTDOWN: "Set Countdown",
}

# (dialog, control) -> (lookup key, fallback text)
_SPECIAL_CONTROLS = {
    (Dialog.ABOUT, Control.ABOUT_TITLE): ("关于", "About"),
    (Dialog.ABOUT, Control.VERSION_TEXT): ("版本: %hs", "Version: %hs"),
    (Dialog.ABOUT, Control.BUILD_DATE): ("构建日期:", "Build Date:"),
    (Dialog.ABOUT, Control.COPYRIGHT): ("COPYRIGHT_TEXT", "COPYRIGHT_TEXT"),
    (Dialog.ABOUT, Control.CREDITS): ("鸣谢", "Credits"),
    (Dialog.POMODORO_TIME, Control.STATIC): (
        "25=25 minutes\\n25h=25 hours\\n25s=25 seconds\\n25 30=25 minutes 30 seconds"
        "\\n25 30m=25 hours 30 minutes\\n1 30 20=1 hour 30 minutes 20 seconds",
        "25=25 minutes\n25h=25 hours\n25s=25 seconds\n25 30=25 minutes 30 seconds"
        "\n25 30m=25 hours 30 minutes\n1 30 20=1 hour 30 minutes 20 seconds",
    ),
    (Dialog.POMODORO_COMBO, Control.STATIC): (
        "Enter pomodoro time sequence, separated by spaces:\\n\\n25m = 25 minutes"
        "\\n30s = 30 seconds\\n1h30m = 1 hour 30 minutes\\nExample: 25m 5m 25m 10m"
        " - work 25min, short break 5min, work 25min, long break 10min",
        "Enter pomodoro time sequence, separated by spaces:\n\n25m = 25 minutes"
        "\n30s = 30 seconds\n1h30m = 1 hour 30 minutes\nExample: 25m 5m 25m 10m"
        " - work 25min, short break 5min, work 25min, long break 10min",
    ),
    (Dialog.WEBSITE, Control.STATIC): (
        "Enter the website URL to open when the countdown ends:\\n"
        "Example: https://example.com",
        "Enter the website URL to open when the countdown ends:\n"
        "Example: https://example.com",
    ),
    (Dialog.SHORTCUT, Control.STATIC): (
        "CountdownPresetDialogStaticText",
        "Enter numbers (minutes), separated by spaces\n\n25 10 5\n\n"
        "This will create options for 25 minutes, 10 minutes, and 5 minutes",
    ),
    (Dialog.COUNTDOWN, Control.STATIC): (
        "CountdownDialogStaticText",
        "25=25 minutes\n25h=25 hours\n25s=25 seconds\n25 30=25 minutes 30 seconds"
        "\n25 30m=25 hours 30 minutes\n1 30 20=1 hour 30 minutes 20 seconds"
        "\n17 20t=Countdown to 17:20\n9 9 9t=Countdown to 09:09:09",
    ),
}

_SPECIAL_BUTTONS = {
    (Dialog.NOTIFICATION_SETTINGS, Control.TEST_SOUND_BUTTON): "Test",
    (Dialog.NOTIFICATION_SETTINGS, Control.OPEN_SOUND_DIR_BUTTON): "Audio folder",
    (Dialog.NOTIFICATION_SETTINGS, Control.OK): "OK",
    (Dialog.NOTIFICATION_SETTINGS, Control.CANCEL): "Cancel",
    (Dialog.POMODORO_LOOP, Control.BUTTON_OK): "OK",
    (Dialog.POMODORO_COMBO, Control.BUTTON_OK): "OK",
    (Dialog.POMODORO_TIME, Control.BUTTON_OK): "OK",
    (Dialog.WEBSITE, Control.BUTTON_OK): "OK",
    (Dialog.SHORTCUT, Control.BUTTON_OK): "OK",
    (Dialog.COUNTDOWN, Control.BUTTON_OK): "OK",
}

_MULTILINE_DIALOGS = frozenset(
    {
        Dialog.POMODORO_COMBO,
        Dialog.POMODORO_TIME,
        Dialog.WEBSITE,
        Dialog.SHORTCUT,
        Dialog.COUNTDOWN,
    }
)

_FORMAT_RE = re.compile(r"%(?:h?s|%)")


def expand_newlines(text):
    """Turn each escaped ``\\n`` sequence into a real newline."""
    return text.replace("\\n", "\n")


def _format_version(template, version):
    used = False

    def substitute(match):
        nonlocal used
        if match.group() == "%%":
            return "%"
        if used:
            return ""
        used = True
        return version

    return _FORMAT_RE.sub(substitute, template)


def _no_translation(key):
    return None


class DialogLocalizer:
    """Works out the localised texts of dialog titles and controls.

    ``lookup`` maps a text key to its translation, returning None when there
    is none; ``version`` fills the version line of the about dialog.
    """

    def __init__(self, lookup=None, version=""):
        self.lookup = lookup or _no_translation
        self.version = version

    def dialog_title(self, dialog):
        """Return the localised title of ``dialog``, or None."""
        key = _TITLES.get(dialog)
        return None if key is None else self.lookup(key)

    def _special_text(self, dialog, control):
        entry = _SPECIAL_CONTROLS.get((dialog, control))
        if entry is None:
            return None
        key, fallback = entry
        text = self.lookup(key)
        return fallback if text is None else text

    def _button_text(self, dialog, control):
        key = _SPECIAL_BUTTONS.get((dialog, control))
        return None if key is None else self.lookup(key)

    def control_text(self, dialog, control=None):
        """Return the localised text of a special control, or None.

        With ``control`` None the dialog title is returned.
        """
        text = self._special_text(dialog, control)
        if text is not None:
            return text
        text = self._button_text(dialog, control)
        if text is not None:
            return text
        if control is None:
            return self.dialog_title(dialog)
        return None

    def _finish_special(self, dialog, control, text):
        if dialog in _MULTILINE_DIALOGS and control is Control.STATIC:
            return expand_newlines(text)
        if dialog is Dialog.ABOUT and control is Control.VERSION_TEXT:
            return _format_version(text, self.version)
        return text

    def apply(self, dialog, controls):
        """Localise a dialog whose controls currently show the given texts.

        ``controls`` maps each control (a Control, or any other identifier)
        to its current text. Returns the new title, or None, and a dict of
        the controls whose text is to be replaced.
        """
        changes = {}
        for control, original in controls.items():
            special = self._special_text(dialog, control)
            if special is not None:
                changes[control] = self._finish_special(dialog, control, special)
                continue
            button = self._button_text(dialog, control)
            if button is not None:
                changes[control] = button
                continue
            if original:
                localized = self.lookup(original)
                if localized and localized != original:
                    changes[control] = localized
        return self.dialog_title(dialog), changes