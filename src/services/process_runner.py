import subprocess
from dataclasses import dataclass


# Status sentinels, matching what mpv's own subprocess command reports.
STATUS_UNKNOWN_ERROR = -1
STATUS_KILLED = -2
STATUS_INIT_FAILED = -3
STATUS_UNSUPPORTED = -4


@dataclass(frozen=True)
class ProcessResult:
    status: int
    stdout: str = ''
    stderr: str = ''
    error: str = ''

    @property
    def ok(self) -> bool:
        return self.status == 0


def run_process(args, *, capture_stderr: bool = True) -> ProcessResult:
    """Run `args` to completion and return its normalized outcome.

    Blocks the caller. Negative return codes (killed by a signal) become
    STATUS_KILLED and spawn failures become STATUS_INIT_FAILED, so callers
    only ever deal with one status table.
    """
    argv = [str(a) for a in args]
    try:
        cp = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE if capture_stderr else subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            text=True,
            check=False,
        )
    except OSError as e:
        return ProcessResult(status=STATUS_INIT_FAILED, error=str(e))
    except subprocess.SubprocessError as e:
        return ProcessResult(status=STATUS_UNKNOWN_ERROR, error=str(e))

    status = int(cp.returncode)
    if status < 0:
        status = STATUS_KILLED
    return ProcessResult(status=status, stdout=cp.stdout or '', stderr=cp.stderr or '')
