"""
Host fact readers.

Each reader comes in two layers: a `read_*` function that works on an
already-open text stream (what the tests drive), and a thin wrapper that
opens the real file under /etc or /proc.
"""

import logging
import os
import platform
import socket
import string
import time
from contextlib import contextmanager
from typing import NamedTuple

import psutil

from . import config
from .errors import FieldParseError, MissingFieldError, SourceUnavailableError, SystemCallError
from .kvparse import STOP, Delimiter, has_keys, parse_fields

logger = logging.getLogger(__name__)

KB_PER_MB = 1024
BYTES_PER_GB = 1_000_000_000

MEMINFO_DELIMITER = Delimiter.any_of(":" + string.whitespace)


class MemoryUsage(NamedTuple):
    available_mb: int
    total_mb: int


class DiskSpace(NamedTuple):
    available_gb: float
    total_gb: float


class CpuInfo(NamedTuple):
    model: str
    cores: str


@contextmanager
def _open_source(path, operation):
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceUnavailableError(f"cannot open {path}: {e.strerror or e}", operation=operation) from e
    with f:
        yield f


def _tag(operation, exc):
    if exc.operation is None:
        exc.operation = operation
    return exc


def user(environ=None) -> str:
    env = os.environ if environ is None else environ
    name = env.get("USER")
    if not name:
        raise MissingFieldError("USER", source="environment", operation="user")
    return name


def hostname() -> str:
    return socket.gethostname()


def kernel() -> str:
    return platform.release()


def read_os_name(stream, source=config.OS_RELEASE_PATH) -> str:
    """
    Return PRETTY_NAME without its surrounding quotes.

    The whole file is scanned, so a repeated key keeps its last value.
    Exactly one character is dropped from each end; the quotes are assumed,
    not checked.
    """
    table = parse_fields(stream, Delimiter.char("="), source=source)
    try:
        value = table.require("PRETTY_NAME")
    except MissingFieldError as e:
        raise _tag("os", e)
    return value[1:-1]


def os_name(path=config.OS_RELEASE_PATH) -> str:
    with _open_source(path, "os") as f:
        name = read_os_name(f, source=path)
    logger.debug("os: %s", name)
    return name


def _kilobytes(table, key):
    raw = table.require(key)
    if not (raw.isascii() and raw.isdigit()):
        raise FieldParseError(f"{key} is not an unsigned integer: {raw!r}", operation="memory")
    return int(raw)


def read_memory(stream, source=config.MEMINFO_PATH) -> MemoryUsage:
    """Return (available, total) memory in MiB, from kB values."""
    table = parse_fields(
        stream,
        MEMINFO_DELIMITER,
        stop_when=has_keys("MemAvailable", "MemTotal"),
        source=source,
    )
    try:
        available = _kilobytes(table, "MemAvailable")
        total = _kilobytes(table, "MemTotal")
    except MissingFieldError as e:
        raise _tag("memory", e)
    return MemoryUsage(available // KB_PER_MB, total // KB_PER_MB)


def memory(path=config.MEMINFO_PATH) -> MemoryUsage:
    with _open_source(path, "memory") as f:
        usage = read_memory(f, source=path)
    logger.debug("memory: %s", usage)
    return usage


def read_cpu(stream, source=config.CPUINFO_PATH) -> CpuInfo:
    """
    Return the model name and core count of the first processor block.

    The scan ends at the first line without a colon (the blank line after
    the first block) or as soon as both keys are seen, so later blocks
    never overwrite the first one.
    """
    table = parse_fields(
        stream,
        Delimiter.char(":"),
        on_malformed=STOP,
        stop_when=has_keys("model name", "cpu cores"),
        source=source,
    )
    try:
        return CpuInfo(table.require("model name"), table.require("cpu cores"))
    except MissingFieldError as e:
        raise _tag("cpu", e)


def cpu(path=config.CPUINFO_PATH) -> CpuInfo:
    with _open_source(path, "cpu") as f:
        info = read_cpu(f, source=path)
    logger.debug("cpu: %s", info)
    return info


def disk_space(path=config.ROOT_MOUNT, usage=None) -> DiskSpace:
    """
    Return (available, total) space on `path` in decimal gigabytes.

    `usage` defaults to psutil.disk_usage, whose `total` is f_blocks *
    f_frsize and `free` is f_bavail * f_frsize.
    """
    usage = psutil.disk_usage if usage is None else usage
    try:
        st = usage(path)
    except OSError as e:
        raise SystemCallError(f"statvfs({path}) failed: {e.strerror or e}", errno=e.errno, operation="disk") from e
    space = DiskSpace(st.free / BYTES_PER_GB, st.total / BYTES_PER_GB)
    logger.debug("disk: %s", space)
    return space


def uptime(boot_time=None, clock=None) -> int:
    """Seconds since boot, never negative."""
    boot_time = psutil.boot_time if boot_time is None else boot_time
    clock = time.time if clock is None else clock
    try:
        booted = boot_time()
    except (OSError, psutil.Error) as e:
        raise SystemCallError(f"cannot read boot time: {e}", errno=getattr(e, "errno", None), operation="uptime") from e
    seconds = max(0, int(clock() - booted))
    logger.debug("uptime: %ds", seconds)
    return seconds


__all__ = [
    "MemoryUsage",
    "DiskSpace",
    "CpuInfo",
    "user",
    "hostname",
    "kernel",
    "read_os_name",
    "os_name",
    "read_memory",
    "memory",
    "read_cpu",
    "cpu",
    "disk_space",
    "uptime",
]
