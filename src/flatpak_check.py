import os
import re


_SANDBOX_RE = re.compile(r'FLATPAK_ID=')
# Set when run from an interactive shell inside the sandbox (e.g. `flatpak run --command=sh`).
_SHELL_RE = re.compile(r'PS1=')


def environment_list() -> list[str]:
    return [f'{k}={v}' for k, v in os.environ.items()]


def is_sandboxed(env_list=None) -> bool:
    """Return True when running inside a flatpak.

    Inside a flatpak, host executables have to be launched through
    `flatpak-spawn --host`, which needs the org.freedesktop.Flatpak talk-name.
    """
    entries = environment_list() if env_list is None else list(env_list)
    found = False
    for entry in entries:
        if _SHELL_RE.search(entry):
            return False
        if _SANDBOX_RE.search(entry):
            found = True
    return found


def host_prefix(sandboxed: bool) -> list[str]:
    return ['flatpak-spawn', '--host'] if sandboxed else []
