import pytest

from gui_dialogs import (BINDINGS, DialogLauncher, build_filter, build_kdialog_args,
                         build_multimedia, build_zenity_args, split_dialog_output)
from services.process_runner import ProcessResult


@pytest.fixture
def launcher(host, runner, options):
    options.dialogs.dialog_pref = 'zenity'
    return DialogLauncher(host, options.dialogs, runner=runner, sandboxed=False)


class TestOutput:
    def test_crlf_with_trailing_separator(self):
        assert split_dialog_output('a.mkv\r\nb.mkv\r\n') == ['a.mkv', 'b.mkv']

    def test_single_line(self):
        assert split_dialog_output('a.mkv\n') == ['a.mkv']

    def test_empty(self):
        assert split_dialog_output('') == []


class TestArguments:
    def test_filters(self):
        assert build_filter('subtitle_files', 'zenity') == \
            '--file-filter=Subtitles | *.ass *.smi *.srt *.ssa *.sub *.txt'
        assert build_filter('playlist_files', 'kdialog') == 'Playlists (*.cue *.pls *.m3u *.m3u8)'

    def test_multimedia_has_no_duplicates(self):
        text = build_multimedia('kdialog')
        assert text.startswith('All Types (')
        assert text.count('*.ogg ') + text.count('*.ogg)') == 1

    def test_zenity_files(self):
        args = build_zenity_args('file', '/media/')
        assert args[:4] == ['--file-selection', '--filename=/media/', '--multiple', '--title=Select Files']
        assert args[-1] == '--file-filter=All Files | *'

    def test_zenity_url(self):
        assert build_zenity_args('url', '/x/') == ['--entry', '--text=Enter URL:', '--title=Open URL']

    def test_kdialog_folder_with_focus(self):
        args = build_kdialog_args('folder', '/media/', focus='1234')
        assert args[0] == '--attach=1234'
        assert '--getexistingdirectory' in args

    def test_kdialog_subtitle_filters(self):
        args = build_kdialog_args('subtitle', '/media/')
        assert args[-1].split('\n') == ['Subtitles (*.ass *.smi *.srt *.ssa *.sub *.txt)', 'All Files (*)']


class TestLaunch:
    def test_no_preference(self, host, runner, options):
        launcher = DialogLauncher(host, options.dialogs, runner=runner, sandboxed=False)
        assert launcher.launch('file', 'add') == []
        assert host.osd == [('No dialog preference configured for gui-dialogs', 1)]
        assert runner.calls == []

    def test_unknown_kind(self, launcher):
        with pytest.raises(ValueError):
            launcher.launch('video', 'add')
        with pytest.raises(ValueError):
            launcher.launch('file', 'insert')

    def test_start_directory_from_current_file(self, launcher, host, runner):
        host.properties.update({'path': 'show/ep1.mkv', 'working-directory': '/media'})
        runner.queue(ProcessResult(status=1))
        launcher.launch('subtitle', 'add')
        assert '--filename=/media/show/' in runner.calls[0]

    def test_cancel_loads_nothing(self, launcher, host, runner):
        runner.queue(ProcessResult(status=1))
        assert launcher.launch('file', 'add') == []
        assert host.commands == []

    def test_sandboxed(self, host, runner, options):
        options.dialogs.dialog_pref = 'zenity'
        launcher = DialogLauncher(host, options.dialogs, runner=runner, sandboxed=True)
        runner.queue(ProcessResult(status=1))
        launcher.launch('url', 'open')
        assert runner.calls[0][:3] == ['flatpak-spawn', '--host', 'zenity']

    def test_kdialog_asks_for_window(self, host, runner, options):
        options.dialogs.dialog_pref = 'kdialog'
        launcher = DialogLauncher(host, options.dialogs, runner=runner, sandboxed=False)
        runner.queue(ProcessResult(status=0, stdout='777\n'))
        runner.queue(ProcessResult(status=0, stdout='/a.mkv\n'))
        launcher.launch('file', 'add')
        assert runner.calls[0] == ['xdotool', 'getwindowfocus']
        assert runner.calls[1][:2] == ['kdialog', '--attach=777']
        assert host.commands == [('loadfile', '/a.mkv', 'replace')]


    def test_zenity_skips_window_lookup(self, launcher, runner):
        runner.queue(ProcessResult(status=1))
        launcher.launch('file', 'add')
        assert len(runner.calls) == 1
        assert runner.calls[0][0] == 'zenity'

    def test_kdialog_without_focus(self, host, runner, options):
        options.dialogs.dialog_pref = 'kdialog'
        launcher = DialogLauncher(host, options.dialogs, runner=runner, sandboxed=False)
        runner.queue(ProcessResult(status=-3, error='xdotool not found'))
        runner.queue(ProcessResult(status=1))
        launcher.launch('folder', 'add')
        assert not any(arg.startswith('--attach') for arg in runner.calls[1])


class TestLoad:
    def test_add_files_replaces_then_appends(self, launcher, host, runner):
        runner.queue(ProcessResult(status=0, stdout='a.mkv\nb.mkv\nc.mkv\n'))
        assert launcher.launch('file', 'add') == ['a.mkv', 'b.mkv', 'c.mkv']
        assert host.commands == [
            ('loadfile', 'a.mkv', 'replace'),
            ('loadfile', 'b.mkv', 'append'),
            ('loadfile', 'c.mkv', 'append'),
        ]

    def test_append_to_empty_playlist(self, launcher, host):
        host.properties['playlist-count'] = 0
        launcher.load(['a.mkv', 'b.mkv', 'c.mkv'], 'file', 'append')
        assert host.commands == [
            ('loadfile', 'a.mkv', 'replace'),
            ('loadfile', 'b.mkv', 'append'),
            ('loadfile', 'c.mkv', 'append'),
        ]
        assert host.osd == [('Added 3 file(s) to playlist', 1)]

    def test_append_to_playlist(self, launcher, host):
        host.properties['playlist-count'] = 4
        launcher.load(['/music'], 'folder', 'append')
        assert host.commands == [('loadfile', '/music', 'append')]
        assert host.osd == [('Added 1 folder(s) to playlist', 1)]

    def test_append_url_has_no_message(self, launcher, host):
        host.properties['playlist-count'] = 2
        launcher.load(['https://example.org/v.mp4'], 'url', 'append')
        assert host.commands == [('loadfile', 'https://example.org/v.mp4', 'append')]
        assert host.osd == []

    def test_add_tracks(self, launcher, host):
        launcher.load(['en.srt'], 'subtitle', 'add')
        launcher.load(['dub.mka'], 'audio', 'add')
        assert host.commands == [('sub-add', 'en.srt', 'select'), ('audio-add', 'dub.mka', 'select')]

    def test_open_playlist(self, launcher, host):
        launcher.load(['list.m3u'], 'playlist', 'open')
        assert host.commands == [('loadfile', 'list.m3u', 'replace')]


def test_register_binds_messages_and_keys(host, options):
    launcher = DialogLauncher(host, options.dialogs, runner=None, sandboxed=False)
    launcher.register()
    assert set(host.messages) == set(BINDINGS)
    assert host.keys['Ctrl+f'][0] == 'add_files_dialog'
    assert host.keys['F'][0] == 'add_subtitle_dialog'
    # Empty key options bind the message only.
    assert 'open_url_dialog' not in [name for name, _ in host.keys.values()]
