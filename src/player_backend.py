from PySide6.QtCore import QObject, Qt, Signal, Slot

from services import event_log


def _libmpv_command_string(handle, data: bytes):
    import mpv
    mpv._mpv_command_string(handle, data)


class HostBridge(QObject):
    """Runs callables on the Qt thread.

    python-mpv calls observers, event and message handlers on its own event
    thread; everything that touches menu state goes through `post`.
    """

    invoke = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.invoke.connect(self._run, Qt.QueuedConnection)

    @Slot(object)
    def _run(self, fn):
        fn()

    def post(self, fn, *args):
        self.invoke.emit(lambda: fn(*args))


class MpvHost:
    """The player surface the context menu and dialogs talk to."""

    def __init__(self, player, bridge: HostBridge, run_command_string=None):
        self.mpv = player
        self.bridge = bridge
        self._run_command_string = run_command_string or _libmpv_command_string
        self._key_handlers = {}

    @classmethod
    def create(cls, bridge: HostBridge, **mpv_options):
        import mpv

        def _log_handler(*args):
            try:
                parts = [str(a).strip() for a in args if a is not None]
                if parts:
                    event_log.info("MPV: " + " ".join(parts))
            except Exception:
                return

        player = mpv.MPV(
            log_handler=_log_handler,
            loglevel='warn',
            input_default_bindings=True,
            input_vo_keyboard=True,
            osc=True,
            idle='yes',
            force_window='yes',
            **mpv_options,
        )
        return cls(player, bridge)

    def get_property(self, name: str):
        try:
            return self.mpv[name]
        except (AttributeError, RuntimeError, TypeError, ValueError):
            # Unavailable right now (no file, no track, ...)
            return None

    def commandv(self, name: str, *args):
        self.mpv.command(name, *[str(a) for a in args])

    def command_string(self, text: str):
        # Parsed by mpv like an input.conf line: prefixes, `;` chains, property
        # expansion and OSD feedback all apply.
        self._run_command_string(self.mpv.handle, str(text).encode('utf-8'))

    def osd_message(self, text: str, duration=1):
        try:
            self.mpv.show_text(str(text), int(float(duration) * 1000))
        except Exception as e:
            event_log.error(f'OSD message failed: {e}')

    def mouse_pos(self) -> tuple:
        pos = self.get_property('mouse-pos')
        if isinstance(pos, dict):
            return pos.get('x', 0), pos.get('y', 0)
        return 0, 0

    def observe_property(self, name: str, handler):
        def _observer(prop_name, value):
            self.bridge.post(handler, prop_name, value)
        self.mpv.observe_property(name, _observer)

    def on_event(self, name: str, handler):
        @self.mpv.event_callback(name)
        def _callback(event):
            self.bridge.post(handler, event)

    def register_script_message(self, name: str, handler):
        def _message(*args):
            self.bridge.post(handler, *args)
        self.mpv.register_message_handler(name, _message)

    def add_key_binding(self, key: str, name: str, handler):
        # python-mpv keeps the binding alive only while the function is referenced.
        def _pressed():
            self.bridge.post(handler)
        self._key_handlers[name] = _pressed
        self.mpv.on_key_press(key)(_pressed)

    def play(self, path: str, mode: str = 'append-play'):
        self.commandv('loadfile', path, mode)

    def terminate(self):
        if self.mpv:
            try:
                self.mpv.terminate()
            except Exception as e:
                event_log.error(f'mpv terminate failed: {e}')
