"""KDialog/Zenity pickers for opening files, folders, URLs and tracks.

Supports:
- Opening files/folders (replacing the current playlist)
- Appending files/folders/URLs to the playlist
- Loading separate audio/subtitle tracks
- Opening URLs and playlist files

The picker is an external process; its stdout is one selected path per line.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from flatpak_check import host_prefix, is_sandboxed
from services import event_log
from services.event_log import NullEventLog
from services.process_runner import run_process


KINDS = ('file', 'folder', 'url', 'playlist', 'subtitle', 'audio')
MODES = ('add', 'append', 'open')

KDIALOG = 'kdialog'
ZENITY = 'zenity'


@dataclass(frozen=True)
class FileFilter:
    label: str
    extensions: tuple


# Add more types here as desired.
FILE_FILTERS = {
    'video_files': FileFilter('Videos', (
        '3gp', 'asf', 'avi', 'bdm', 'bdmv', 'clpi', 'cpi', 'dat', 'divx', 'dv', 'fli', 'flv',
        'ifo', 'm2t', 'm2ts', 'm4v', 'mkv', 'mov', 'mp4', 'mpeg', 'mpg', 'mpg2', 'mpg4', 'mpls',
        'mts', 'nsv', 'nut', 'nuv', 'ogg', 'ogm', 'qt', 'rm', 'rmvb', 'trp', 'tp', 'ts', 'vcd',
        'vfw', 'vob', 'webm', 'wmv',
    )),
    'audio_files': FileFilter('Audio', (
        'aac', 'ac3', 'aiff', 'ape', 'flac', 'it', 'm4a', 'mka', 'mod', 'mp2', 'mp3', 'ogg',
        'pcm', 'wav', 'wma', 'xm',
    )),
    'image_files': FileFilter('Images', ('bmp', 'gif', 'jpeg', 'jpg', 'png', 'tif', 'tiff')),
    'playlist_files': FileFilter('Playlists', ('cue', 'pls', 'm3u', 'm3u8')),
    'subtitle_files': FileFilter('Subtitles', ('ass', 'smi', 'srt', 'ssa', 'sub', 'txt')),
}

MULTIMEDIA = ('video_files', 'audio_files', 'image_files', 'playlist_files')

ALL_FILES = {
    ZENITY: '--file-filter=All Files | *',
    KDIALOG: 'All Files (*)',
}


@dataclass(frozen=True)
class Binding:
    option: str
    kind: str
    mode: str


# Binding name -> option holding its key, and what it opens. Every binding is
# also a script message of the same name.
BINDINGS = {
    'add_files_dialog': Binding('add_files', 'file', 'add'),
    'add_folder_dialog': Binding('add_folder', 'folder', 'add'),
    'append_files_dialog': Binding('append_files', 'file', 'append'),
    'append_folder_dialog': Binding('append_folder', 'folder', 'append'),
    'add_subtitle_dialog': Binding('add_subtitle', 'subtitle', 'add'),
    'append_url_dialog': Binding('add_url', 'url', 'append'),
    'open_url_dialog': Binding('open_url', 'url', 'open'),
    'open_playlist_dialog': Binding('open_playlist', 'playlist', 'open'),
    'add_audio_dialog': Binding('add_audio', 'audio', 'add'),
}


def _patterns(extensions) -> str:
    return ' '.join(f'*.{ext}' for ext in extensions)


def _render_filter(label: str, extensions, dialog: str) -> str:
    if dialog == ZENITY:
        return f'--file-filter={label} | {_patterns(extensions)}'
    return f'{label} ({_patterns(extensions)})'


def build_filter(name: str, dialog: str) -> str:
    file_filter = FILE_FILTERS[name]
    return _render_filter(file_filter.label, file_filter.extensions, dialog)


def build_multimedia(dialog: str) -> str:
    """One filter matching every video/audio/image/playlist type."""
    extensions = []
    for name in MULTIMEDIA:
        for ext in FILE_FILTERS[name].extensions:
            if ext not in extensions:
                extensions.append(ext)
    return _render_filter('All Types', extensions, dialog)


def _kdialog_filters(*names: str, multimedia: bool = False) -> str:
    # KDialog takes all filters as one newline-separated argument.
    parts = [build_filter(n, KDIALOG) for n in names]
    if multimedia:
        parts.append(build_multimedia(KDIALOG))
    parts.append(ALL_FILES[KDIALOG])
    return '\n'.join(parts)


def _zenity_filters(*names: str, multimedia: bool = False) -> list:
    parts = [build_filter(n, ZENITY) for n in names]
    if multimedia:
        parts.append(build_multimedia(ZENITY))
    parts.append(ALL_FILES[ZENITY])
    return parts


_KIND_FILTERS = {
    'playlist': ('Select Playlist', ('playlist_files',)),
    'subtitle': ('Select Subtitle', ('subtitle_files',)),
    'audio': ('Select Audio', ('audio_files',)),
}


def build_kdialog_args(kind: str, directory: str, filename: str = '', focus: str = '') -> list:
    args = []
    if focus:
        args.append(f'--attach={focus}')

    if kind == 'url':
        args += ['--title=Open URL', '--inputbox=Enter URL:']
        return args

    args += ['--icon=mpv', '--separate-output']
    if kind == 'file':
        args += ['--multiple', '--title=Select Files', '--getopenfilename', f'{directory}{filename}',
                 _kdialog_filters(*MULTIMEDIA, multimedia=True)]
    elif kind == 'folder':
        args += ['--multiple', '--title=Select Folders', '--getexistingdirectory']
    else:
        title, names = _KIND_FILTERS[kind]
        args += [f'--title={title}', '--getopenfilename', directory, _kdialog_filters(*names)]
    return args


def build_zenity_args(kind: str, directory: str) -> list:
    if kind == 'url':
        return ['--entry', '--text=Enter URL:', '--title=Open URL']

    args = ['--file-selection', f'--filename={directory}']
    if kind == 'file':
        args += ['--multiple', '--title=Select Files'] + _zenity_filters(*MULTIMEDIA, multimedia=True)
    elif kind == 'folder':
        args += ['--multiple', '--title=Select Folders', '--directory']
    else:
        title, names = _KIND_FILTERS[kind]
        args += [f'--title={title}'] + _zenity_filters(*names)
    return args


_LINE_RE = re.compile(r'\r\n|\r|\n')


def split_dialog_output(text: str) -> list:
    """Split picker output into paths.

    Both pickers print one path per line; Zenity on Windows uses CRLF and may
    add trailing separators.
    """
    return [p for p in _LINE_RE.split(str(text or '')) if p]


class DialogLauncher:
    def __init__(self, host, options, runner=run_process, sandboxed: bool | None = None, events=None):
        self.host = host
        self.options = options
        self.runner = runner
        self.sandboxed = is_sandboxed() if sandboxed is None else bool(sandboxed)
        self.events = events or NullEventLog()

    def start_location(self, dialog: str) -> tuple:
        """Directory (with trailing separator) and file name of the current media."""
        path = self.host.get_property('path')
        if not path:
            return ('.' if dialog == KDIALOG else '', '')
        cwd = self.host.get_property('working-directory') or ''
        full = os.path.join(str(cwd), str(path))
        directory, filename = os.path.split(full)
        if directory and not directory.endswith(os.sep):
            directory += os.sep
        return directory, filename

    def window_focus(self) -> str:
        # Only used to attach KDialog to the player window; failure is fine.
        result = self.runner(host_prefix(self.sandboxed) + ['xdotool', 'getwindowfocus'], capture_stderr=False)
        if not result.ok:
            event_log.info(f'xdotool getwindowfocus failed (status {result.status})')
            return ''
        return result.stdout.strip()

    def picker_args(self, kind: str) -> list | None:
        pref = str(self.options.dialog_pref or '').strip().lower()
        if pref == KDIALOG:
            directory, filename = self.start_location(KDIALOG)
            args = [self.options.kdialog] + build_kdialog_args(kind, directory, filename, self.window_focus())
        elif pref == ZENITY:
            # Zenity has no --attach, so the focused window is not looked up.
            directory, _filename = self.start_location(ZENITY)
            args = [self.options.zenity] + build_zenity_args(kind, directory)
        else:
            return None
        return host_prefix(self.sandboxed) + args

    def launch(self, kind: str, mode: str) -> list:
        """Show a picker of `kind` and load the chosen paths per `mode`.

        Returns the chosen paths (empty when nothing was picked).
        """
        if kind not in KINDS:
            raise ValueError(f'Unknown dialog type: {kind}')
        if mode not in MODES:
            raise ValueError(f'Unknown dialog mode: {mode}')

        args = self.picker_args(kind)
        if args is None:
            self.host.osd_message('No dialog preference configured for gui-dialogs')
            return []

        result = self.runner(args, capture_stderr=False)
        if not result.ok:
            # Cancelled or closed: nothing chosen.
            event_log.info(f'Dialog closed without selection (status {result.status})')
            return []

        files = split_dialog_output(result.stdout)
        self.load(files, kind, mode)
        self.events.log('dialog', kind=kind, mode=mode, count=len(files))
        return files

    def load(self, files: list, kind: str, mode: str):
        if mode == 'add':
            first = True
            for path in files:
                if kind in ('file', 'folder'):
                    self.host.commandv('loadfile', path, 'replace' if first else 'append')
                    first = False
                elif kind == 'subtitle':
                    self.host.commandv('sub-add', path, 'select')
                elif kind == 'audio':
                    self.host.commandv('audio-add', path, 'select')

        elif mode == 'append':
            if kind not in ('file', 'folder', 'url'):
                return
            was_empty = int(self.host.get_property('playlist-count') or 0) == 0
            for i, path in enumerate(files):
                self.host.commandv('loadfile', path, 'replace' if (i == 0 and was_empty) else 'append')
            if kind == 'file':
                self.host.osd_message(f'Added {len(files)} file(s) to playlist')
            elif kind == 'folder':
                self.host.osd_message(f'Added {len(files)} folder(s) to playlist')

        elif mode == 'open':
            if kind in ('url', 'playlist'):
                for path in files:
                    self.host.commandv('loadfile', path, 'replace')

    def register(self, host=None, guard=None):
        """Bind the configured keys and the matching script messages."""
        host = host or self.host
        for name, binding in BINDINGS.items():
            handler = self._handler(binding.kind, binding.mode)
            if guard is not None:
                handler = guard(handler)
            host.register_script_message(name, handler)
            key = str(getattr(self.options, binding.option, '') or '').strip()
            if key:
                host.add_key_binding(key, name, handler)

    def _handler(self, kind, mode):
        def _run(*_args):
            self.launch(kind, mode)
        return _run
