"""Declarative menu description shared by the synchronizer and the menu engine.

A menu is a 1-indexed mapping of MenuItem records. Items hold either static
values or zero-argument callables for label/state/disabled; the callables are
evaluated during reconciliation and the results kept in `MenuItem.resolved`,
so the original callables survive for the next pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Union


class MenuError(Exception):
    """Base for errors that abort a single menu action."""


class MenuStructureError(MenuError):
    pass


class MenuDepthError(MenuError):
    pass


class MenuResponseError(MenuError):
    pass


class MenuDesyncError(MenuError):
    pass


class ItemKind(str, Enum):
    SEPARATOR = 'separator'
    CASCADE = 'cascade'
    COMMAND = 'command'
    CHECK = 'checkbutton'
    RADIO = 'radiobutton'
    AB = 'ab-button'


AB_STATES = ('off', 'a', 'b')

Command = Union[str, Callable[[], None]]


def is_computed(value) -> bool:
    return callable(value)


def resolve(value):
    return value() if callable(value) else value


@dataclass
class ResolvedItem:
    label: str = ''
    state: object = False
    disabled: bool = False


@dataclass
class MenuItem:
    kind: ItemKind
    label: object = ''
    shortcut: str = ''
    submenu: str = ''
    command: Command = ''
    state: object = False
    disabled: object = False
    repost: bool = False
    resolved: ResolvedItem | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        self.kind = ItemKind(self.kind)
        if self.kind == ItemKind.CASCADE:
            if not self.submenu:
                raise MenuStructureError(f'Cascade item "{self.label}" has no submenu.')
        elif self.submenu:
            raise MenuStructureError(f'Only cascade items can open a submenu ({self.kind.value}).')

        if self.kind in (ItemKind.SEPARATOR, ItemKind.CASCADE) and self.command:
            raise MenuStructureError(f'{self.kind.value} items cannot carry a command.')

        if self.kind == ItemKind.AB and isinstance(self.state, str) and self.state not in AB_STATES:
            raise MenuStructureError(f'Invalid A-B state "{self.state}" (expected one of {", ".join(AB_STATES)}).')

    @property
    def selectable(self) -> bool:
        return self.kind not in (ItemKind.SEPARATOR, ItemKind.CASCADE)

    def has_computed_fields(self) -> bool:
        return any(is_computed(v) for v in (self.label, self.state, self.disabled))

    def evaluate(self) -> ResolvedItem:
        """Evaluate label/state/disabled without storing the result."""
        label = resolve(self.label)
        return ResolvedItem(
            label='' if label is None else str(label),
            state=resolve(self.state),
            disabled=bool(resolve(self.disabled)),
        )


Menu = dict  # dict[int, MenuItem]
MenuGenerator = Callable[[], Menu]


def separator() -> MenuItem:
    return MenuItem(ItemKind.SEPARATOR)


def cascade(label, submenu: str, disabled=False) -> MenuItem:
    return MenuItem(ItemKind.CASCADE, label=label, submenu=submenu, disabled=disabled)


def command(label, shortcut: str = '', cmd: Command = '', disabled=False, repost: bool = False) -> MenuItem:
    return MenuItem(ItemKind.COMMAND, label=label, shortcut=shortcut, command=cmd,
                    disabled=disabled, repost=repost)


def check(label, shortcut: str = '', cmd: Command = '', state=False, disabled=False, repost: bool = False) -> MenuItem:
    return MenuItem(ItemKind.CHECK, label=label, shortcut=shortcut, command=cmd,
                    state=state, disabled=disabled, repost=repost)


def radio(label, shortcut: str = '', cmd: Command = '', state=False, disabled=False, repost: bool = False) -> MenuItem:
    return MenuItem(ItemKind.RADIO, label=label, shortcut=shortcut, command=cmd,
                    state=state, disabled=disabled, repost=repost)


def ab_toggle(label, shortcut: str = '', cmd: Command = '', state='off', disabled=False, repost: bool = False) -> MenuItem:
    return MenuItem(ItemKind.AB, label=label, shortcut=shortcut, command=cmd,
                    state=state, disabled=disabled, repost=repost)


def numbered(*items: MenuItem) -> Menu:
    """Build a menu keyed 1..N from the given items, in order."""
    return {i: item for i, item in enumerate(items, start=1)}


def validate_menu(name: str, menu) -> None:
    """Check that `menu` is keyed by exactly 1..N with no gaps."""
    if not isinstance(menu, dict):
        raise MenuStructureError(f'Menu "{name}" is not a mapping of index to item.')
    for i in range(1, len(menu) + 1):
        if i not in menu:
            raise MenuStructureError(
                f'Menu "{name}" with property/index "{i}" is undefined. Confirm that the property exists.'
            )
        if not isinstance(menu[i], MenuItem):
            raise MenuStructureError(f'Menu "{name}" index {i} is not a menu item.')


@dataclass
class MenuSet:
    menus: dict = field(default_factory=dict)
    file_loaded: bool = False
    base_menu: str = 'context_menu'

    def get(self, name: str):
        return self.menus.get(name)


def item_to_wire(item: MenuItem) -> dict:
    """Serialize an item to the shape the menu builders read.

    Computed fields are sent as `<field>Val` next to the static fields, which
    is where the builders look first.
    """
    out = {'itemType': item.kind.value}
    if item.kind == ItemKind.SEPARATOR:
        return out

    res = item.resolved
    if res is None:
        res = ResolvedItem(
            label='' if is_computed(item.label) else str(item.label or ''),
            state=False if is_computed(item.state) else item.state,
            disabled=False if is_computed(item.disabled) else bool(item.disabled),
        )

    if is_computed(item.label):
        out['labelVal'] = res.label
    else:
        out['label'] = str(item.label or '')

    # The builders read the cascade target from the accelerator slot.
    if item.kind == ItemKind.CASCADE:
        out['accelerator'] = item.submenu
    elif item.shortcut:
        out['accelerator'] = item.shortcut

    if isinstance(item.command, str) and item.command:
        out['command'] = item.command

    if item.kind != ItemKind.CASCADE:
        if is_computed(item.state):
            out['itemStateVal'] = res.state
        else:
            out['itemState'] = item.state

    if is_computed(item.disabled):
        out['itemDisableVal'] = res.disabled
    else:
        out['itemDisable'] = bool(item.disabled)

    if item.repost:
        out['repostMenu'] = True
    return out


def menu_to_wire(menu: Menu) -> dict:
    # JSON object keys are strings; builders iterate them in insertion order.
    return {str(i): item_to_wire(menu[i]) for i in sorted(menu)}
