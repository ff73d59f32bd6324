"""User options, read once at startup.

Options live in a single JSON settings file with one object per section::

    {
      "menu-engine": {"fontFace": "Source Code Pro", "fontSize": "9"},
      "gui-dialogs": {"dialogPref": "zenity", "addFiles": "Ctrl+f"},
      "context-menu": {"seekSmall": 5}
    }

Missing sections/keys keep their defaults. Values of the wrong type are
ignored (with a console note) rather than aborting startup.
"""

import json
import os
import platform
from dataclasses import dataclass, field, fields

from services import event_log


APP_DIR_NAME = 'mpv-context-menu'


def _opt(default, key):
    return field(default=default, metadata={'key': key})


@dataclass
class MenuEngineOptions:
    # Font used by the menu builders. Builders expect a monospace face since
    # accelerator alignment is done with spaces.
    font_face: str = _opt('Source Code Pro', 'fontFace')
    font_size: str = _opt('9', 'fontSize')
    menu_limit: int = _opt(10, 'menuLimit')
    # Directory holding menu-builder-tk.tcl / menu-builder-gtk.js.
    script_dir: str = _opt('', 'scriptDir')
    tk_interpreter: str = _opt('wish', 'tkInterpreter')
    gtk_interpreter: str = _opt('gjs', 'gtkInterpreter')
    builder: str = _opt('tk', 'builder')
    menu_key: str = _opt('MBTN_RIGHT', 'menuKey')


@dataclass
class DialogOptions:
    dialog_pref: str = _opt('', 'dialogPref')
    add_files: str = _opt('Ctrl+f', 'addFiles')
    add_folder: str = _opt('Ctrl+g', 'addFolder')
    append_files: str = _opt('Ctrl+Shift+f', 'appendFiles')
    append_folder: str = _opt('Ctrl+Shift+g', 'appendFolder')
    add_subtitle: str = _opt('F', 'addSubtitle')
    # No default keys for these; they are reachable from the menu only.
    add_url: str = _opt('', 'addURL')
    open_url: str = _opt('', 'openURL')
    open_playlist: str = _opt('', 'openPlaylist')
    add_audio: str = _opt('', 'addAudio')
    kdialog: str = _opt('kdialog', 'kdialogPath')
    zenity: str = _opt('zenity', 'zenityPath')


@dataclass
class MenuOptions:
    # Play > Speed (percentage)
    play_speed: float = _opt(5, 'playSpeed')
    # Play > Seek (seconds)
    seek_small: float = _opt(5, 'seekSmall')
    seek_medium: float = _opt(30, 'seekMedium')
    seek_large: float = _opt(60, 'seekLarge')
    # Video > Aspect / Zoom / Screen Position (percentage)
    vid_aspect: float = _opt(0.1, 'vidAspect')
    vid_zoom: float = _opt(0.1, 'vidZoom')
    vid_pos: float = _opt(0.1, 'vidPos')
    # Video > Color (percentage)
    vid_color: float = _opt(1, 'vidColor')
    # Audio > Sync (milliseconds)
    aud_sync: float = _opt(100, 'audSync')
    # Audio > Volume (percentage)
    aud_vol: float = _opt(2, 'audVol')
    # Subtitle > Position / Scale (percentage)
    sub_pos: float = _opt(1, 'subPos')
    sub_scale: float = _opt(1, 'subScale')
    # Subtitle > Sync (milliseconds)
    sub_sync: float = _opt(100, 'subSync')


@dataclass
class Options:
    engine: MenuEngineOptions = field(default_factory=MenuEngineOptions)
    dialogs: DialogOptions = field(default_factory=DialogOptions)
    menu: MenuOptions = field(default_factory=MenuOptions)


SECTIONS = {
    'menu-engine': 'engine',
    'gui-dialogs': 'dialogs',
    'context-menu': 'menu',
}


def get_user_config_dir() -> str:
    home = os.path.expanduser("~")
    if platform.system().lower().startswith("win"):
        base = os.getenv("APPDATA") or os.path.join(home, "AppData", "Roaming")
        return os.path.join(base, APP_DIR_NAME)
    if platform.system().lower() == "darwin":
        return os.path.join(home, "Library", "Application Support", APP_DIR_NAME)
    xdg = os.getenv("XDG_CONFIG_HOME")
    return os.path.join(xdg if xdg else os.path.join(home, ".config"), APP_DIR_NAME)


def get_user_settings_path() -> str:
    return os.path.join(get_user_config_dir(), "settings.json")


def _coerce(value, default):
    """Coerce a JSON value to the type of `default`, or raise TypeError."""
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        raise TypeError(f'expected boolean, got {type(value).__name__}')
    if isinstance(default, (int, float)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'expected number, got {type(value).__name__}')
        return type(default)(value) if isinstance(default, int) and float(value).is_integer() else value
    if isinstance(default, str):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if not isinstance(value, str):
            raise TypeError(f'expected string, got {type(value).__name__}')
        return value
    return value


def apply_section(target, data: dict, section: str = ''):
    for f in fields(target):
        key = f.metadata.get('key', f.name)
        if key not in data:
            continue
        try:
            setattr(target, f.name, _coerce(data[key], getattr(target, f.name)))
        except TypeError as e:
            event_log.debug(f'Ignoring option {section}.{key}: {e}')
    return target


def options_from_dict(data: dict) -> Options:
    opts = Options()
    if not isinstance(data, dict):
        return opts
    for section, attr in SECTIONS.items():
        values = data.get(section)
        if isinstance(values, dict):
            apply_section(getattr(opts, attr), values, section)
    return opts


def load_options(path: str | None = None) -> Options:
    src = str(path or get_user_settings_path())
    try:
        if not os.path.exists(src):
            return Options()
        with open(src, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        event_log.debug(f'Could not read settings from {src}: {e}')
        return Options()

    if not isinstance(data, dict):
        event_log.debug(f'Invalid settings file format in {src} (expected JSON object).')
        return Options()

    return options_from_dict(data)
