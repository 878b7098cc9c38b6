"""
fetchcli
Prints host facts next to a small ANSI-coloured logo.
"""

from .snapshot import SystemSnapshot, collect
from .banner import build_banner, format_uptime, print_banner

__version__ = "0.1.0"

__all__ = [
    "SystemSnapshot",
    "collect",
    "build_banner",
    "format_uptime",
    "print_banner",
]
