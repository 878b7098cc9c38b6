"""
Shared fixtures: sample /etc and /proc contents, lspci output and a
fully populated snapshot.
"""
import io

import pytest

from fetchcli.snapshot import SystemSnapshot
from fetchcli.sysinfo import CpuInfo, DiskSpace, MemoryUsage

OS_RELEASE = """\
NAME="Ubuntu"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Ubuntu 22.04 LTS"
VERSION_ID="22.04"
HOME_URL="https://www.ubuntu.com/"
"""

MEMINFO = """\
MemTotal:       16384000 kB
MemFree:         1024000 kB
MemAvailable:    8192000 kB
Buffers:          204800 kB
Cached:          4096000 kB
SwapTotal:       2097148 kB
"""

CPUINFO = """\
processor\t: 0
vendor_id\t: GenuineIntel
cpu family\t: 6
model name\t: Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz
cpu MHz\t\t: 1992.000
physical id\t: 0
cpu cores\t: 4
flags\t\t: fpu vme de pse

processor\t: 1
vendor_id\t: GenuineIntel
model name\t: Some Other CPU
cpu cores\t: 8
"""

LSPCI = """\
00:00.0 Host bridge: Intel Corporation Xeon E3-1200 v6/7th Gen Core Processor Host Bridge/DRAM Registers (rev 08)
00:02.0 VGA compatible controller: Intel Corporation UHD Graphics (rev 02)
00:14.0 USB controller: Intel Corporation Sunrise Point-LP USB 3.0 xHCI Controller (rev 21)
"""


@pytest.fixture
def os_release_stream():
    return io.StringIO(OS_RELEASE)


@pytest.fixture
def meminfo_stream():
    return io.StringIO(MEMINFO)


@pytest.fixture
def cpuinfo_stream():
    return io.StringIO(CPUINFO)


@pytest.fixture
def lspci_output():
    return LSPCI


@pytest.fixture
def proc_files(tmp_path):
    """Write the sample files to disk and return their paths."""
    paths = {}
    for name, body in (("os-release", OS_RELEASE), ("meminfo", MEMINFO), ("cpuinfo", CPUINFO)):
        p = tmp_path / name
        p.write_text(body)
        paths[name] = p
    return paths


@pytest.fixture
def snapshot():
    return SystemSnapshot(
        user="tux",
        host="iceberg",
        os_name="Ubuntu 22.04 LTS",
        kernel="6.5.0-14-generic",
        memory=MemoryUsage(8000, 16000),
        disk=DiskSpace(123.456, 500.0),
        cpu=CpuInfo("Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz", "4"),
        uptime=3725,
        gpu="Intel Corporation UHD Graphics",
    )


def fake_run(stdout="", returncode=0, stderr=""):
    """Stand-in for run_safe_command that records its calls."""
    calls = []

    def _run(cmd, whitelist=None):
        calls.append({"cmd": cmd, "whitelist": whitelist})
        return {
            "ok": returncode == 0,
            "returncode": returncode,
            "stdout": stdout,
            "stderr": stderr,
            "cmd": " ".join(cmd),
        }

    _run.calls = calls
    return _run
