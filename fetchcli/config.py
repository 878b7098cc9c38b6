"""
Configuration for fetchcli.

Paths and the command whitelist are module constants; the two runtime
switches come from the environment (there are no command-line flags).
"""

import os
from dataclasses import dataclass

# Data sources
OS_RELEASE_PATH = "/etc/os-release"
MEMINFO_PATH = "/proc/meminfo"
CPUINFO_PATH = "/proc/cpuinfo"
ROOT_MOUNT = "/"

# External commands
GPU_COMMAND = ["lspci"]
DEFAULT_WHITELIST = {"lspci"}

# Environment
ENV_GPU = "FETCHCLI_GPU"
ENV_LOG_LEVEL = "FETCHCLI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Settings:
    gpu: bool = True
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_bool(name, raw):
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE | _FALSE)}, got {raw!r}")


def load_settings(environ=None) -> Settings:
    """
    Build Settings from environment variables.

    Unset variables fall back to defaults; an unrecognised FETCHCLI_GPU
    value raises ValueError.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    raw_gpu = env.get(ENV_GPU)
    if raw_gpu is not None and raw_gpu.strip():
        settings.gpu = _parse_bool(ENV_GPU, raw_gpu)

    raw_level = env.get(ENV_LOG_LEVEL)
    if raw_level and raw_level.strip():
        settings.log_level = raw_level.strip().upper()

    return settings
