# timecfg

`timecfg` manages the configuration file of a desktop countdown, count-up and
pomodoro timer. The configuration is a plain INI file with the sections
`General`, `Display`, `Timer`, `Pomodoro`, `Notification`, `Hotkeys`,
`RecentFiles`, `Colors` and `Options`. The package creates the file with
default values, reads it into a settings object, writes it back, and updates
single entries in place while leaving the other lines alone.

It uses only the Python standard library and supports Python 3.10 and later.

## Modules

- `timecfg.ini` – `IniFile` reads and writes strings (`get`/`set`), integers
  (`get_int`/`set_int`) and `TRUE`/`FALSE` flags (`get_bool`/`set_bool`) by
  section and key. `parse_int` reads a leading integer the way C's `atoi`
  does. `replace_key_lines` rewrites every `KEY=value` line for the given keys
  through a `.tmp` file and appends the keys it did not find.
- `timecfg.paths` – `get_config_path` and `get_audio_folder_path` work out,
  from an environment mapping (default `os.environ`), where the configuration
  file and the audio folder live under `LOCALAPPDATA`, falling back to
  `./asset/config.ini` and `./resources/audio`. `ensure_resource_folders`
  creates a `resources` folder with `audio`, `images`, `animations`, `themes`
  and `plug-in` beside the configuration file. `extract_file_name` returns the
  last component of a path.
- `timecfg.options` – the `Language`, `TimeoutAction` and `NotificationType`
  enums with `config_name()` and `from_config()`, `language_for_locale` to pick
  a language from a locale name such as `zh_CN` or `de-DE`, and
  `section_for_key` to find the section a key belongs in.
- `timecfg.defaults` – default values, the list of hotkey keys, and
  `create_default_config`, which writes every setting with its default.
- `timecfg.settings` – the `Settings` and `RecentFile` dataclasses and
  `read_config`, which reads the whole file.
- `timecfg.writer` – `write_config` stores a `Settings` object;
  `write_config_key_value` and `write_config_language` store single keys in
  their section; `is_shortcut_check_done` and `set_shortcut_check_done` handle
  the shortcut-check flag.
- `timecfg.timer_entries` – single timer entries: timeout action, time
  options, topmost flag, startup mode, timeout website, pomodoro times, loop
  count and pomodoro time options.
- `timecfg.notifications` – notification texts, display time, maximum
  opacity, notification type, sound file and volume.
- `timecfg.hotkeys` – `Modifier` flags, `hotkey_to_string` and
  `string_to_hotkey` to convert packed 16-bit hotkeys to and from text such as
  `Ctrl+Alt+A` or `Shift+F5`.
- `timecfg.hotkey_config` – `read_hotkeys`, `write_hotkeys` and
  `read_custom_countdown_hotkey` for the `HOTKEY_*` entries.
- `timecfg.recent` – `load_recent_files`, `add_recent_file` and
  `save_recent_file` for the list of up to five recently used files, most
  recent first.
- `timecfg.dialog_text` – `DialogLocalizer` picks localised titles and control
  texts for the timer's dialogs (`Dialog`, `Control`) from a lookup function
  you supply; `expand_newlines` turns escaped `\n` into real newlines.

## Examples

Read the configuration and write it back:

```python
from timecfg.paths import get_config_path
from timecfg.settings import read_config
from timecfg.writer import write_config

path = get_config_path({"LOCALAPPDATA": "/home/me/.local/share"})
settings = read_config(path)
settings.pomodoro_loop_count = 3
write_config(path, settings)
```

Update one entry without rewriting the whole file:

```python
from timecfg.notifications import read_notification_volume, write_notification_volume

write_notification_volume(path, 150)   # stored clamped to 100
read_notification_volume(path)         # -> 100
```

Hotkeys:

```python
from timecfg.hotkeys import hotkey_to_string, string_to_hotkey

key = string_to_hotkey("Ctrl+Alt+A")
hotkey_to_string(key)        # -> "Ctrl+Alt+A"
hotkey_to_string(0)          # -> "None"
```

Configuration names:

```python
from timecfg.options import Language, TimeoutAction, section_for_key

Language.from_config("Japanese").config_name()   # -> "Japanese"
TimeoutAction.from_config("SHUTDOWN")            # -> TimeoutAction.MESSAGE
section_for_key("POMODORO_LOOP_COUNT")           # -> "Pomodoro"
```

## Behaviour worth knowing

- Restart, shutdown and sleep are one-shot timeout actions and are stored as
  `MESSAGE`. Reading `SHUTDOWN` or `RESTART` gives `MESSAGE`; reading `SLEEP`
  or an unknown name gives `None`, and `read_config` then keeps `MESSAGE`.
- `read_config` switches the timeout action to `OPEN_FILE` when the stored
  file exists and to `OPEN_WEBSITE` when a website is stored.
- A text colour of pure black `#000000` is read back as `#000001`.
- Notification opacity is kept within 1–100 and sound volume within 0–100.
- A sound file path has any `=` characters removed before it is stored.
- When the file is missing or its `CONFIG_VERSION` is not `1.0.0`,
  `read_config` writes the defaults into it before reading.
- Recent files that no longer exist are skipped when the list is read.

## What it does not do

This package only handles the configuration file and the texts of the
timer's dialogs. It does not run a timer, play notification sounds, show
windows or dialogs, register hotkeys with the operating system, or provide a
command-line program.

## Running the tests

Install the `test` extra and run `pytest`.