from __future__ import annotations

import dataclasses

from menu_model import MenuSet, MenuStructureError, validate_menu
from services import event_log


class MenuSynchronizer:
    """Track which menus are stale and regenerate only those.

    Property observers mark menus dirty; `reconcile` runs right before a menu
    is shown. It calls the generators of dirty generator-backed menus and, when
    the base menu is dirty, re-evaluates every computed label/state/disabled
    field. Nothing is committed unless the whole pass succeeds.
    """

    def __init__(self, watch_list: dict, base_menu: str = 'context_menu'):
        self.watch_list = dict(watch_list or {})
        self.base_menu = base_menu
        self.dirty: set[str] = set()
        self.generators: dict = {}

    def watched_menus(self, prop: str) -> list[str]:
        names = self.watch_list.get(prop, ())
        if isinstance(names, str):
            return [names]
        return list(names)

    def mark_dirty(self, *names: str):
        for name in names:
            if name:
                self.dirty.add(name)

    def mark_all_dirty(self):
        for prop in self.watch_list:
            self.mark_dirty(*self.watched_menus(prop))
        self.mark_dirty(*self.generators)
        self.mark_dirty(self.base_menu)

    def on_property_change(self, prop: str, _value=None):
        names = self.watched_menus(prop)
        if names:
            event_log.info(f'{prop} changed, marking {", ".join(names)} for rebuild')
            self.mark_dirty(*names)

    def attach(self, host):
        for prop in self.watch_list:
            host.observe_property(prop, self.on_property_change)

    def install(self, definitions: dict, file_loaded: bool) -> MenuSet:
        """Swap in a new set of menu definitions.

        `definitions` maps menu names to static menus or to zero-argument
        generators. Static menus are validated up front; a gap aborts the swap
        without touching the current generators or dirty set.
        """
        menus = {}
        generators = {}
        for name, value in definitions.items():
            if callable(value):
                generators[name] = value
            else:
                validate_menu(name, value)
                menus[name] = value

        self.generators = generators
        self.mark_all_dirty()
        return MenuSet(menus=menus, file_loaded=file_loaded, base_menu=self.base_menu)

    def pending(self, menu_set: MenuSet) -> set[str]:
        stale = set(self.dirty)
        stale.update(name for name in self.generators if name not in menu_set.menus)
        return stale

    def reconcile(self, menu_set: MenuSet) -> MenuSet:
        stale = self.pending(menu_set)
        if not stale:
            return menu_set

        # Generated menus first: the field sweep has to see their current items.
        staged = {}
        for name, generator in self.generators.items():
            if name not in stale:
                continue
            menu = generator()
            validate_menu(name, menu)
            staged[name] = menu

        menus = dict(menu_set.menus)
        menus.update(staged)

        if self.base_menu in stale:
            if self.base_menu not in menus:
                raise MenuStructureError(f'Menu "{self.base_menu}" is not defined.')
            sweep = list(menus)
        else:
            sweep = [name for name in menus if name in stale]

        resolved = []
        for name in sweep:
            menu = menus[name]
            for index in sorted(menu):
                item = menu[index]
                if item.has_computed_fields() or item.resolved is None:
                    resolved.append((item, item.evaluate()))

        for item, value in resolved:
            item.resolved = value

        # Every stale name is handled now: generated, swept, or not part of
        # the installed variant at all.
        handled = stale
        self.dirty.difference_update(handled)

        event_log.info(f'Rebuilt menus: {", ".join(sorted(handled))}')
        return dataclasses.replace(menu_set, menus=menus)
