import pytest

from conftest import selection
from context_menu import ContextMenu
from menu_model import MenuResponseError
from services.process_runner import ProcessResult


@pytest.fixture
def menu(host, runner, scheduler, options):
    cm = ContextMenu(host, options, runner=runner, scheduler=scheduler, sandboxed=False)
    cm.start()
    return cm


def test_starts_with_no_file_menu(menu):
    assert menu.menu_set.file_loaded is False
    assert 'play_menu' not in menu.menu_set.menus


def test_registers_handlers(menu, host):
    assert {'mpv_context_menu_tk', 'mpv_context_menu_gtk', 'add_files_dialog'} <= set(host.messages)
    assert host.keys['MBTN_RIGHT'][0] == 'context_menu'
    assert 'video-rotate' in host.observers
    assert {'file-loaded', 'end-file'} <= set(host.events)


def test_variant_follows_playback(menu, host):
    host.properties['track-list'] = []
    host.fire('file-loaded')
    assert menu.menu_set.file_loaded is True
    assert 'play_menu' in menu.menu_set.menus
    host.fire('end-file')
    assert menu.menu_set.file_loaded is False


def test_script_message_opens_builder(menu, host, runner):
    runner.queue(selection('context_menu', 6, '.context_menu'))
    host.messages['mpv_context_menu_gtk']()
    assert runner.calls[0][0] == 'gjs'
    assert host.command_strings == ['quit']


def test_menu_key_uses_configured_builder(menu, host, runner, options):
    runner.queue(selection(index=-1))
    host.keys['MBTN_RIGHT'][1]()
    assert runner.calls[0][0] == options.engine.tk_interpreter


def test_errors_end_the_action_only(menu, host, runner):
    runner.queue(ProcessResult(status=0, stdout='nonsense'))
    assert host.messages['mpv_context_menu_tk']() is None
    assert len(host.osd) == 1
    assert host.osd[0][0].startswith('Menu builder returned invalid JSON')


def test_guarded_reports_unexpected_errors(menu, host):
    def boom():
        raise RuntimeError('broken')

    assert menu.guarded(boom)() is None
    assert host.osd == [('context-menu: broken', 1)]


def test_guarded_passes_results_through(menu):
    assert menu.guarded(lambda: 42)() == 42


def test_guarded_menu_error(menu, host):
    def bad():
        raise MenuResponseError('Menu builder returned no response.')

    menu.guarded(bad)()
    assert host.osd == [('Menu builder returned no response.', 1)]
