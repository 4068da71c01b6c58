"""Conversion between packed hotkey values and their readable form.

A hotkey is a 16-bit value: the low byte is the virtual key code and the
high byte holds the modifier flags.
"""

from __future__ import annotations

import enum
import re

from .ini import parse_int


class Modifier(enum.IntFlag):
    """Modifier flags stored in the high byte of a hotkey."""

    SHIFT = 0x01
    CONTROL = 0x02
    ALT = 0x04
    EXT = 0x08


_VK_F1 = 0x70
_VK_F24 = 0x87

_NAMED_KEYS = {
    0x08: "Backspace",
    0x09: "Tab",
    0x0D: "Enter",
    0x1B: "Esc",
    0x20: "Space",
    0x21: "PageUp",
    0x22: "PageDown",
    0x23: "End",
    0x24: "Home",
    0x25: "Left",
    0x26: "Up",
    0x27: "Right",
    0x28: "Down",
    0x2D: "Insert",
    0x2E: "Delete",
    **{0x60 + digit: f"Num{digit}" for digit in range(10)},
    0x6A: "Num*",
    0x6B: "Num+",
    0x6D: "Num-",
    0x6E: "Num.",
    0x6F: "Num/",
}

# Punctuation keys are only ever written, never parsed back.
_PUNCTUATION_KEYS = {
    0xBA: ";",
    0xBB: "=",
    0xBC: ",",
    0xBD: "-",
    0xBE: ".",
    0xBF: "/",
    0xC0: "`",
    0xDB: "[",
    0xDC: "\\",
    0xDD: "]",
    0xDE: "'",
}

_KEYS_BY_NAME = {name.lower(): code for code, name in _NAMED_KEYS.items()}

_MODIFIER_NAMES = (
    (Modifier.CONTROL, "Ctrl"),
    (Modifier.SHIFT, "Shift"),
    (Modifier.ALT, "Alt"),
)

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_LONG_MAX = 0x7FFFFFFF


def _key_name(vk):
    if ord("A") <= vk <= ord("Z") or ord("0") <= vk <= ord("9"):
        return chr(vk)
    if _VK_F1 <= vk <= _VK_F24:
        return f"F{vk - _VK_F1 + 1}"
    if vk in _NAMED_KEYS:
        return _NAMED_KEYS[vk]
    if vk in _PUNCTUATION_KEYS:
        return _PUNCTUATION_KEYS[vk]
    return f"0x{vk:02X}"


def hotkey_to_string(hotkey):
    """Return the readable form of ``hotkey``, such as ``Ctrl+Alt+A``; ``None`` for 0."""
    if hotkey == 0:
        return "None"
    vk = hotkey & 0xFF
    mod = (hotkey >> 8) & 0xFF

    text = "+".join(name for flag, name in _MODIFIER_NAMES if mod & flag)
    if text and vk != 0:
        text += "+"
    return text + _key_name(vk)


def _parse_key(token):
    if len(token) == 1:
        ch = token.upper()
        if "A" <= ch <= "Z" or "0" <= ch <= "9":
            return ord(ch)
        return 0
    if token[0] == "F" and "0" <= token[1] <= "9":
        number = parse_int(token[1:])
        if 1 <= number <= 24:
            return _VK_F1 + number - 1
        return 0
    code = _KEYS_BY_NAME.get(token.lower())
    if code is not None:
        return code
    if token.startswith("0x"):
        match = _HEX_RE.match(token, 2)
        value = int(match.group(), 16) if match else 0
        return min(value, _LONG_MAX) & 0xFF
    return 0


def string_to_hotkey(text):
    """Parse a readable hotkey such as ``Ctrl+Shift+F5`` into its packed value.

    Empty text and ``None`` give 0; text starting with a digit is read as a
    plain number. Unknown key names leave the key code at 0.
    """
    if not text or text == "None":
        return 0
    if "0" <= text[0] <= "9":
        return parse_int(text) & 0xFFFF

    mod = 0
    last_token = None
    for token in filter(None, text.split("+")):
        lowered = token.lower()
        if lowered == "ctrl":
            mod |= Modifier.CONTROL
        elif lowered == "shift":
            mod |= Modifier.SHIFT
        elif lowered == "alt":
            mod |= Modifier.ALT
        else:
            last_token = token

    vk = _parse_key(last_token) if last_token else 0
    return (vk & 0xFF) | ((int(mod) & 0xFF) << 8)