"""
System Snapshot
Collects every host fact once, in order, for a single render pass.
"""

from dataclasses import dataclass
from typing import Optional

from . import gpu as gpu_reader
from . import sysinfo
from .config import Settings
from .sysinfo import CpuInfo, DiskSpace, MemoryUsage


@dataclass
class SystemSnapshot:
    """All gathered host facts for one invocation."""
    user: str
    host: str
    os_name: str
    kernel: str
    memory: MemoryUsage
    disk: DiskSpace
    cpu: CpuInfo
    uptime: int
    gpu: Optional[str] = None


def collect(settings: Optional[Settings] = None, run=None, environ=None) -> SystemSnapshot:
    """
    Run each reader in turn and build the snapshot.

    The first reader to fail raises and nothing is returned.
    """
    settings = settings or Settings()
    user = sysinfo.user(environ)
    host = sysinfo.hostname()
    os_name = sysinfo.os_name()
    kernel = sysinfo.kernel()
    memory = sysinfo.memory()
    disk = sysinfo.disk_space()
    cpu = sysinfo.cpu()
    gpu = gpu_reader.gpu(run=run) if settings.gpu else None
    uptime = sysinfo.uptime()
    return SystemSnapshot(
        user=user,
        host=host,
        os_name=os_name,
        kernel=kernel,
        memory=memory,
        disk=disk,
        cpu=cpu,
        uptime=uptime,
        gpu=gpu,
    )
