import datetime
import json
import os
import sys


_VERBOSE = False


def set_verbose(enabled: bool) -> None:
    global _VERBOSE
    _VERBOSE = bool(enabled)


def is_verbose() -> bool:
    return _VERBOSE


def info(msg) -> None:
    """Console diagnostics that only show up with --verbose."""
    if _VERBOSE:
        print("context-menu:", msg)


def debug(msg) -> None:
    print("context-menu:", msg)


def error(msg) -> None:
    try:
        print("context-menu: [error]", msg, file=sys.stderr)
    except Exception:
        return


class EventLog:
    """Append-only JSON-lines event log.

    Best-effort: a log that cannot be written never interrupts the caller.
    The file is soft-rotated at ~1MB into a single `.1` backup.
    """

    MAX_BYTES = 1_000_000

    def __init__(self, path: str):
        self.path = str(path or '')

    def _rotate(self):
        try:
            if os.path.exists(self.path) and os.path.getsize(self.path) > self.MAX_BYTES:
                backup = self.path + '.1'
                if os.path.exists(backup):
                    os.remove(backup)
                os.replace(self.path, backup)
        except Exception:
            pass

    def log(self, event: str, **fields):
        if not self.path:
            return
        try:
            os.makedirs(os.path.dirname(self.path), exist_ok=True)
        except Exception:
            pass

        self._rotate()

        try:
            payload = {
                'ts': datetime.datetime.now().isoformat(timespec='seconds'),
                'event': str(event or ''),
            }
            for k, v in (fields or {}).items():
                try:
                    json.dumps(v)
                    payload[str(k)] = v
                except (TypeError, ValueError):
                    payload[str(k)] = repr(v)
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(json.dumps(payload, ensure_ascii=False) + "\n")
        except Exception:
            return


class NullEventLog(EventLog):
    def __init__(self):
        super().__init__('')
