import json

from services import event_log
from services.event_log import EventLog, NullEventLog


def test_lines_are_json(tmp_path):
    path = tmp_path / 'logs' / 'events.jsonl'
    log = EventLog(str(path))
    log.log('menu_command', menu='play_menu', index=3)
    log.log('dialog', files=object())

    lines = path.read_text(encoding='utf-8').splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first['event'] == 'menu_command'
    assert first['menu'] == 'play_menu'
    assert first['index'] == 3
    assert 'ts' in first
    assert second['files'].startswith('<object')


def test_rotation(tmp_path, monkeypatch):
    path = tmp_path / 'events.jsonl'
    monkeypatch.setattr(EventLog, 'MAX_BYTES', 10)
    log = EventLog(str(path))
    log.log('first', padding='x' * 20)
    log.log('second')
    assert json.loads((tmp_path / 'events.jsonl.1').read_text(encoding='utf-8'))['event'] == 'first'
    assert json.loads(path.read_text(encoding='utf-8'))['event'] == 'second'


def test_null_log_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    NullEventLog().log('anything', a=1)
    assert list(tmp_path.iterdir()) == []


def test_info_only_when_verbose(capsys):
    event_log.set_verbose(False)
    event_log.info('quiet')
    assert capsys.readouterr().out == ''
    event_log.set_verbose(True)
    try:
        event_log.info('loud')
        assert 'context-menu: loud' in capsys.readouterr().out
    finally:
        event_log.set_verbose(False)
