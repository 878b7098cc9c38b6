"""
External command execution for fetchcli.

Only whitelisted executables may run. The child is waited for without a
timeout and its output is returned in a small result dict; nothing is
written to disk.
"""

import logging
import os
import shlex
import subprocess

from .config import DEFAULT_WHITELIST
from .errors import SourceUnavailableError

logger = logging.getLogger(__name__)


class SafeExecutionError(SourceUnavailableError):
    pass


def run_safe_command(cmd, whitelist=None):
    """
    Execute an external command and wait for it.
    - cmd: list of arguments, executable first
    - whitelist: set of allowed executable basenames (overrides default)

    Returns a dict: {ok: bool, returncode: int, stdout: str, stderr: str, cmd: str}
    """
    if not isinstance(cmd, (list, tuple)):
        raise SafeExecutionError(f"Command must be a list of arguments, got {type(cmd).__name__}", operation="run")
    parts = [str(x) for x in cmd]

    if not parts:
        raise SafeExecutionError("Empty command", operation="run")

    exe = os.path.basename(parts[0])
    allowed = set(DEFAULT_WHITELIST) if whitelist is None else set(whitelist)
    if exe not in allowed:
        raise SafeExecutionError(f"Executable '{exe}' not allowed by whitelist", operation=exe)

    cmd_str = " ".join(shlex.quote(p) for p in parts)
    logger.debug("running %s", cmd_str)

    try:
        p = subprocess.Popen(parts, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    except OSError as e:
        raise SafeExecutionError(f"cannot run {cmd_str}: {e.strerror or e}", operation=exe) from e

    out, err = p.communicate()
    logger.debug("%s exited with %s", cmd_str, p.returncode)
    return {"ok": p.returncode == 0, "returncode": p.returncode, "stdout": out or "", "stderr": err or "", "cmd": cmd_str}


__all__ = ["SafeExecutionError", "run_safe_command"]
