import argparse
import locale
import os
import sys

from PySide6.QtWidgets import QApplication

from context_menu import ContextMenu
from player_backend import HostBridge, MpvHost
from services import event_log
from services.event_log import EventLog
from services.options import get_user_config_dir, load_options


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='mpv-context-menu',
        description='mpv with a right-click context menu and file dialogs.',
    )
    parser.add_argument('files', nargs='*', help='files or URLs to play')
    parser.add_argument('--settings', help='path to settings.json')
    parser.add_argument('--verbose', action='store_true', help='print diagnostics')
    parser.add_argument('--builder', choices=('tk', 'gtk'),
                        help='menu builder used by the menu key (default from settings)')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    event_log.set_verbose(args.verbose)

    options = load_options(args.settings)
    if args.builder:
        options.engine.builder = args.builder

    app = QApplication(sys.argv[:1])
    # libmpv refuses to start unless LC_NUMERIC is "C"; QApplication resets it.
    locale.setlocale(locale.LC_NUMERIC, 'C')

    bridge = HostBridge()
    host = MpvHost.create(bridge)
    events = EventLog(os.path.join(get_user_config_dir(), 'events.jsonl'))

    menu = ContextMenu(host, options, events=events)
    menu.start()
    host.on_event('shutdown', lambda *_args: app.quit())

    for path in args.files:
        host.play(path)
    events.log('startup', files=len(args.files), builder=options.engine.builder)

    try:
        return app.exec()
    finally:
        host.terminate()


if __name__ == "__main__":
    sys.exit(main())
