from menu_model import MenuDesyncError, MenuItem, MenuSet
from services import event_log


def find_item(menu_set: MenuSet, menu_name: str, index: int) -> MenuItem:
    """Map a builder selection back to the item that was sent."""
    menu = menu_set.get(menu_name)
    item = menu.get(index) if menu else None
    if item is None or not item.selectable:
        raise MenuDesyncError(f'Unknown menu item index: {index} for menu {menu_name}')
    return item


def run_command(host, item: MenuItem) -> None:
    cmd = item.command
    if isinstance(cmd, str):
        event_log.info(f'string: {cmd}')
        if cmd:
            host.command_string(cmd)
        return
    event_log.info(f'command: {getattr(cmd, "__name__", cmd)!r}')
    cmd()
