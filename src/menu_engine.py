"""Hand a menu description to an external menu builder and act on its answer.

The builder is a separate small program (Tk via `wish`, GTK via `gjs`). It
gets one JSON argument describing the menu tree and prints exactly one JSON
line back: which menu/index was picked, or index -1 when dismissed.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass

from PySide6.QtCore import QTimer

from command_dispatch import find_item, run_command
from flatpak_check import host_prefix, is_sandboxed
from menu_model import (ItemKind, MenuDepthError, MenuDesyncError, MenuError,
                        MenuResponseError, MenuSet, MenuStructureError, menu_to_wire)
from services import event_log
from services.event_log import NullEventLog
from services.process_runner import run_process


CANCEL = -1
UNSET = -1
NO_ERROR = 'errorValue'
REPOST_DELAY_MS = 50

FLATPAK_PORTAL_ERROR = 'Portal call failed: org.freedesktop.DBus.Error.ServiceUnknown'
FLATPAK_MESSAGE = ('Error: mpv is in a flatpak. Enable talk-name for '
                   'org.freedesktop.Flatpak (Note: This negates the flatpak sandbox)')

RESPONSE_KEYS = ('x', 'y', 'menuname', 'index', 'menupath', 'errorvalue')


@dataclass(frozen=True)
class BuilderSpec:
    kind: str
    interpreter: str
    script: str
    # Only the Tk builder can re-open the menu at the submenu it was left on.
    supports_repost: bool = False
    # The Tk builder looks up the pointer itself when given -1.
    resolves_pointer: bool = False

    @property
    def script_name(self) -> str:
        return os.path.basename(self.script)


def default_script_dir() -> str:
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, 'builders')


def builder_specs(options) -> dict:
    script_dir = options.script_dir or default_script_dir()
    return {
        'tk': BuilderSpec(
            kind='tk',
            interpreter=options.tk_interpreter,
            script=os.path.join(script_dir, 'menu-builder-tk.tcl'),
            supports_repost=True,
            resolves_pointer=True,
        ),
        'gtk': BuilderSpec(
            kind='gtk',
            interpreter=options.gtk_interpreter,
            script=os.path.join(script_dir, 'menu-builder-gtk.js'),
        ),
    }


@dataclass(frozen=True)
class Selection:
    x: float
    y: float
    menu_name: str
    index: int
    menu_path: str
    error_value: str

    @property
    def cancelled(self) -> bool:
        return self.index == CANCEL

    @property
    def has_error(self) -> bool:
        return self.error_value != NO_ERROR


@dataclass
class MenuIndex:
    """Result of the pre-pass over the menu tree reachable from one root."""
    positions: dict
    reachable: list


def _number(value, key: str) -> float:
    if isinstance(value, bool):
        raise MenuResponseError(f'Menu builder response field "{key}" is not a number: {value!r}')
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise MenuResponseError(f'Menu builder response field "{key}" is not a number: {value!r}') from None
    return int(num) if num.is_integer() else num


def parse_selection(stdout: str) -> Selection:
    """Parse the single JSON line a builder prints.

    Anything other than a complete, well-typed response is an error; a half
    understood selection is never dispatched.
    """
    line = ''
    for raw in str(stdout or '').splitlines():
        if raw.strip():
            line = raw.strip()
            break
    if not line:
        raise MenuResponseError('Menu builder returned no response.')

    try:
        data = json.loads(line)
    except ValueError as e:
        raise MenuResponseError(f'Menu builder returned invalid JSON: {e}') from None
    if not isinstance(data, dict):
        raise MenuResponseError('Invalid menu builder response (expected JSON object).')

    missing = [k for k in RESPONSE_KEYS if k not in data]
    if missing:
        raise MenuResponseError(f'Menu builder response is missing: {", ".join(missing)}')

    index = _number(data['index'], 'index')
    if not isinstance(index, int):
        raise MenuResponseError(f'Menu builder response index is not an integer: {data["index"]!r}')

    for key in ('menuname', 'menupath', 'errorvalue'):
        if not isinstance(data[key], str):
            raise MenuResponseError(f'Menu builder response field "{key}" is not a string.')

    return Selection(
        x=_number(data['x'], 'x'),
        y=_number(data['y'], 'y'),
        menu_name=data['menuname'],
        index=index,
        menu_path=data['menupath'],
        error_value=data['errorvalue'],
    )


def build_index_table(menu_set: MenuSet, root: str, limit: int = 10) -> MenuIndex:
    """Walk every cascade reachable from `root`.

    Records the zero-based position of each cascade within its parent, keyed
    by (parent, submenu); the Tk builder needs these to re-open submenus.
    """
    positions = {}
    reachable = []

    def walk(name, level):
        if level > limit:
            raise MenuDepthError(f'Too many menu levels. No more than {limit} menu levels total.')
        menu = menu_set.get(name)
        if menu is None:
            raise MenuStructureError(f'Menu "{name}" is referenced but not defined.')
        if name not in reachable:
            reachable.append(name)
        for i in sorted(menu):
            item = menu[i]
            if item.kind == ItemKind.CASCADE:
                positions[(name, item.submenu)] = i - 1
                walk(item.submenu, level + 1)

    walk(root, 1)
    return MenuIndex(positions=positions, reachable=reachable)


def repost_paths(menu_path: str, positions: dict) -> tuple[str, str]:
    """Turn a dotted Tk menu path into the menuPaths/menuIndexes strings.

    For a path of depth D, both strings carry D-1 entries joined by '?': the
    Tk path of every parent menu to re-open, and the index of each submenu
    inside its parent.
    """
    names = [p for p in str(menu_path or '').split('.') if p]
    if not names:
        return '', ''

    paths = []
    for depth in range(1, max(len(names) - 1, 1) + 1):
        paths.append('.' + '.'.join(names[:depth]))

    indexes = []
    for i in range(1, len(names)):
        key = (names[i - 1], names[i])
        if key not in positions:
            raise MenuDesyncError(f'Menu "{names[i]}" is not a submenu of "{names[i - 1]}"')
        indexes.append(str(positions[key]))

    return '?'.join(paths), '?'.join(indexes)


def spawn_error_message(status: int, builder: BuilderSpec) -> str:
    if status == -1:
        return (f"Possible error in {builder.script_name} script "
                f"(Unknown error with '{builder.kind}' menu builder).")
    if status == -2:
        return 'Subprocess killed by mpv (mp_cancel).'
    if status == -3:
        return f'Error during initialization of subprocess (Script: {builder.script_name})'
    if status == -4:
        return 'API not supported.'
    return f"Menu builder '{builder.kind}' failed (exit status {status})."


def script_missing_message(builder: BuilderSpec) -> str:
    return (f"Menu builder script not found: {builder.script} "
            f"(set scriptDir in the menu-engine settings)")


def _coord(value) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


class MenuEngine:
    def __init__(self, host, synchronizer, options, menu_set: MenuSet | None = None,
                 runner=run_process, scheduler=None, sandboxed: bool | None = None, events=None, guard=None):
        self.host = host
        self.synchronizer = synchronizer
        self.options = options
        self.menu_set = menu_set or MenuSet()
        self.builders = builder_specs(options)
        self.runner = runner
        self.scheduler = scheduler or QTimer.singleShot
        self.sandboxed = is_sandboxed() if sandboxed is None else bool(sandboxed)
        self.events = events or NullEventLog()
        # Wraps deferred callbacks so their errors are handled like any other action.
        self.guard = guard

    def create_menu(self, builder_kind: str, menu_name: str | None = None, x=UNSET, y=UNSET,
                    menu_paths: str = '', menu_indexes: str = ''):
        """Bring stale menus up to date, then show `menu_name`."""
        self.menu_set = self.synchronizer.reconcile(self.menu_set)
        return self.present(self.menu_set, menu_name or self.menu_set.base_menu, x, y,
                            builder_kind, menu_paths, menu_indexes)

    def _resolve_pointer(self, x, y):
        if x != UNSET and y != UNSET:
            return x, y
        mx, my = self.host.mouse_pos()
        return (mx if x == UNSET else x), (my if y == UNSET else y)

    def build_envelope(self, menu_set: MenuSet, menu_name: str, index: MenuIndex, x, y,
                       menu_paths: str = '', menu_indexes: str = '') -> dict:
        return {
            'x': _coord(x),
            'y': _coord(y),
            'menu': {name: menu_to_wire(menu_set.menus[name]) for name in index.reachable},
            'menuName': menu_name,
            'menuLimit': int(self.options.menu_limit),
            'menuPaths': str(menu_paths or ''),
            'menuIndexes': str(menu_indexes or ''),
            'fontFace': str(self.options.font_face),
            'fontSize': str(self.options.font_size),
        }

    def present(self, menu_set: MenuSet, menu_name: str, x, y, builder_kind: str,
                menu_paths: str = '', menu_indexes: str = ''):
        builder = self.builders.get(builder_kind)
        if builder is None:
            raise MenuError(f'Unknown menu builder "{builder_kind}".')

        try:
            index = build_index_table(menu_set, menu_name, int(self.options.menu_limit))
        except MenuDepthError as e:
            # Same as a dismissed menu: nothing to run.
            event_log.debug(str(e))
            self.host.osd_message(str(e))
            return None

        if not builder.resolves_pointer:
            x, y = self._resolve_pointer(x, y)

        envelope = self.build_envelope(menu_set, menu_name, index, x, y, menu_paths, menu_indexes)
        args = host_prefix(self.sandboxed) + [builder.interpreter, builder.script, json.dumps(envelope)]
        result = self.runner(args, capture_stderr=True)

        if not result.ok:
            self._report_spawn_failure(builder, result)
            return None

        event_log.info(f'ret: {result.stdout.strip()}')
        selection = parse_selection(result.stdout)

        if selection.has_error:
            event_log.debug(f'Error Value: {selection.error_value}')
            self.host.osd_message(selection.error_value)

        if selection.cancelled:
            event_log.info('Context menu cancelled')
            return selection

        try:
            item = find_item(menu_set, selection.menu_name, selection.index)
        except MenuDesyncError as e:
            event_log.error(str(e))
            self.events.log('menu_desync', menu=selection.menu_name, index=selection.index)
            return None

        run_command(self.host, item)
        self.events.log('menu_command', builder=builder.kind, menu=selection.menu_name,
                        index=selection.index)

        if builder.supports_repost and item.repost:
            self._schedule_repost(builder, menu_name, selection, index)
        return selection

    def _report_spawn_failure(self, builder: BuilderSpec, result):
        stderr = str(result.stderr or '').replace('\r', '').replace('\n', '')
        if stderr == FLATPAK_PORTAL_ERROR:
            event_log.debug(FLATPAK_MESSAGE)
            self.host.osd_message(FLATPAK_MESSAGE, 5)
        elif not os.path.isfile(builder.script):
            message = script_missing_message(builder)
            event_log.debug(message)
            self.host.osd_message(message, 5)
        else:
            message = spawn_error_message(result.status, builder)
            event_log.debug(f'{message} {result.error}'.strip())
            self.host.osd_message(message)
        self.events.log('menu_spawn_failed', builder=builder.kind, status=result.status,
                        error=result.error or stderr)

    def _schedule_repost(self, builder: BuilderSpec, menu_name: str, selection: Selection, index: MenuIndex):
        menu_paths, menu_indexes = repost_paths(selection.menu_path, index.positions)
        event_log.info(f'Reposting menu at {menu_paths or menu_name} ({menu_indexes})')

        # Deferred so the builder is never re-spawned from inside its own
        # completion, and pending property changes get processed first.
        def _repost():
            self.create_menu(builder.kind, menu_name, selection.x, selection.y, menu_paths, menu_indexes)

        self.scheduler(REPOST_DELAY_MS, self.guard(_repost) if self.guard else _repost)
