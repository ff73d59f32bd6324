"""Ties the menu definitions, synchronizer, engine and dialogs to the player."""

import functools
import traceback

from gui_dialogs import DialogLauncher
from menu_definitions import BASE_MENU, REBUILD_WATCH, MenuDefinitions
from menu_engine import MenuEngine
from menu_model import MenuError
from menu_sync import MenuSynchronizer
from services import event_log
from services.event_log import NullEventLog
from services.process_runner import run_process


SCRIPT_MESSAGES = {
    'mpv_context_menu_tk': 'tk',
    'mpv_context_menu_gtk': 'gtk',
}


class ContextMenu:
    def __init__(self, host, options, runner=run_process, scheduler=None,
                 sandboxed: bool | None = None, events=None):
        self.host = host
        self.options = options
        self.events = events or NullEventLog()
        self.definitions = MenuDefinitions(host, options.menu)
        self.synchronizer = MenuSynchronizer(REBUILD_WATCH, BASE_MENU)
        self.engine = MenuEngine(
            host,
            self.synchronizer,
            options.engine,
            runner=runner,
            scheduler=scheduler,
            sandboxed=sandboxed,
            events=self.events,
            guard=self.guarded,
        )
        self.dialogs = DialogLauncher(host, options.dialogs, runner=runner,
                                      sandboxed=self.engine.sandboxed, events=self.events)

    @property
    def menu_set(self):
        return self.engine.menu_set

    def guarded(self, fn):
        """Wrap a handler so a failure ends that action only.

        Menu errors are shown on screen; anything else is logged with its
        traceback. Nothing propagates into the event loop.
        """
        @functools.wraps(fn)
        def _wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except MenuError as e:
                event_log.error(str(e))
                self.host.osd_message(str(e))
                self.events.log('menu_error', error=str(e), kind=type(e).__name__)
            except Exception as e:
                event_log.error(f'{fn.__name__} failed: {e}')
                event_log.error(traceback.format_exc())
                self.host.osd_message(f'context-menu: {e}')
                self.events.log('handler_error', handler=fn.__name__, error=repr(e))
            return None
        return _wrapper

    def install(self, file_loaded: bool):
        if file_loaded:
            definitions = self.definitions.file_loaded_menus()
        else:
            definitions = self.definitions.no_file_menus()
        self.engine.menu_set = self.synchronizer.install(definitions, file_loaded)
        event_log.info(f'Installed {"file loaded" if file_loaded else "no file"} menus')

    def show(self, builder: str | None = None):
        return self.engine.create_menu(builder or self.options.engine.builder)

    def _on_file_loaded(self, *_args):
        self.install(True)

    def _on_end_file(self, *_args):
        # Stopped: fall back to the menu that works without a file.
        self.install(False)

    def start(self):
        self.install(False)
        self.synchronizer.attach(self.host)
        self.host.on_event('file-loaded', self.guarded(self._on_file_loaded))
        self.host.on_event('end-file', self.guarded(self._on_end_file))

        for message, builder in SCRIPT_MESSAGES.items():
            self.host.register_script_message(message, self.guarded(self._menu_handler(builder)))

        menu_key = str(self.options.engine.menu_key or '').strip()
        if menu_key:
            self.host.add_key_binding(menu_key, 'context_menu', self.guarded(self._on_menu_key))

        self.dialogs.register(self.host, guard=self.guarded)

    def _menu_handler(self, builder: str):
        def _show_menu(*_args):
            self.show(builder)
        return _show_menu

    def _on_menu_key(self, *_args):
        self.show()
