"""GPU model lookup from `lspci` output."""

import logging
from typing import Optional

from . import config
from .runner import run_safe_command

logger = logging.getLogger(__name__)

# "00:02.0 " - the PCI address is skipped before looking for the class colon
PCI_ADDRESS_WIDTH = 8


def extract_gpu(line: str) -> str:
    """
    Cut the vendor/model out of one lspci line.

    `00:02.0 VGA compatible controller: Intel Corporation UHD Graphics (rev 02)`
    gives `Intel Corporation UHD Graphics`. Without a trailing `(...)` tag
    the rest of the line is kept.
    """
    colon = line.find(":", PCI_ADDRESS_WIDTH)
    start = colon + 2 if colon != -1 else PCI_ADDRESS_WIDTH
    paren = line.rfind("(")
    end = paren - 1 if paren > start else len(line)
    return line[start:end].strip()


def find_gpu(output: str) -> Optional[str]:
    """Return the first VGA controller in `output`, or None."""
    for line in output.splitlines():
        if line.count("VGA") == 1:
            return extract_gpu(line)
    return None


def gpu(run=None) -> Optional[str]:
    """
    Run lspci and report the first VGA controller.

    Blocks until lspci exits. Failing to start it raises
    SafeExecutionError; finding no VGA line returns None.
    """
    run = run or run_safe_command
    result = run(config.GPU_COMMAND, whitelist=config.DEFAULT_WHITELIST)
    if not result["ok"]:
        logger.warning("%s exited with %s: %s", result["cmd"], result["returncode"], result["stderr"].strip())

    name = find_gpu(result["stdout"])
    if name is None:
        logger.info("no VGA controller in %s output", result["cmd"])
    else:
        logger.debug("gpu: %s", name)
    return name


__all__ = ["extract_gpu", "find_gpu", "gpu"]
