"""Shared fakes for the context menu tests."""
import json

import pytest

from services.options import Options
from services.process_runner import ProcessResult


class FakeHost:
    """Records everything the menu and dialogs ask of the player."""

    def __init__(self, properties=None):
        self.properties = dict(properties or {})
        self.command_strings = []
        self.commands = []
        self.osd = []
        self.observers = {}
        self.events = {}
        self.messages = {}
        self.keys = {}
        self.pointer = (100, 200)

    def get_property(self, name):
        return self.properties.get(name)

    def command_string(self, text):
        self.command_strings.append(text)

    def commandv(self, name, *args):
        self.commands.append((name,) + tuple(str(a) for a in args))

    def osd_message(self, text, duration=1):
        self.osd.append((text, duration))

    def mouse_pos(self):
        return self.pointer

    def observe_property(self, name, handler):
        self.observers.setdefault(name, []).append(handler)

    def on_event(self, name, handler):
        self.events.setdefault(name, []).append(handler)

    def register_script_message(self, name, handler):
        self.messages[name] = handler

    def add_key_binding(self, key, name, handler):
        self.keys[key] = (name, handler)

    # Test helpers

    def set_property(self, name, value):
        self.properties[name] = value
        for handler in self.observers.get(name, []):
            handler(name, value)

    def fire(self, event):
        for handler in self.events.get(event, []):
            handler({'event': event})


class FakeRunner:
    """Returns queued ProcessResults and records every argv."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def queue(self, result):
        self.results.append(result)

    def __call__(self, args, *, capture_stderr=True):
        self.calls.append(list(args))
        if not self.results:
            raise AssertionError(f'Unexpected process spawn: {args}')
        return self.results.pop(0)

    def envelope(self, call=-1):
        return json.loads(self.calls[call][-1])


class FakeScheduler:
    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, fn):
        self.pending.append((delay_ms, fn))

    def run_all(self):
        pending, self.pending = self.pending, []
        for _delay, fn in pending:
            fn()


def selection(menuname='context_menu', index=-1, menupath='', x=10, y=20, errorvalue='errorValue'):
    """Stdout of a builder reporting one selection."""
    line = json.dumps({
        'x': x, 'y': y, 'menuname': menuname, 'index': index,
        'menupath': menupath, 'errorvalue': errorvalue,
    })
    return ProcessResult(status=0, stdout=line + '\n')


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def options():
    return Options()
