import sys

from rich.console import Console
from rich.style import Style
from rich.text import Text

TITLE = Style(bold=True, color="rgb(112,103,207)")
LABEL = Style(color="rgb(102,178,255)")
GRAY = Style(color="rgb(140,140,140)")
ORANGE = Style(color="rgb(255,165,0)")

ART_WIDTH = 16
LABEL_WIDTH = 12

# penguin, one list of (text, style) segments per row
LOGO = [
    [("       ___", GRAY)],
    [("      (.· |", GRAY)],
    [("      (", GRAY), ("<>", ORANGE), (" |", GRAY)],
    [("     / __  \\", GRAY)],
    [("    ( /  \\ /|", GRAY)],
    [("  ", None), ("_/\\", ORANGE), (" __)", GRAY), ("/_)", ORANGE)],
    [("  \\/-____\\/", GRAY)],
]


def format_uptime(seconds):
    """45 -> '45s', 125 -> '2m 5s', 3725 -> '1h 2m 5s'"""
    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 60 * 60:
        return f"{seconds // 60}m {seconds % 60}s"
    return f"{seconds // 3600}h {seconds // 60 % 60}m {seconds % 60}s"


def _art(text, row):
    segments = LOGO[row] if row < len(LOGO) else []
    used = 0
    for chunk, style in segments:
        text.append(chunk, style=style)
        used += len(chunk)
    text.append(" " * max(ART_WIDTH - used, 1))


def _field(text, row, label, value, sep=None):
    _art(text, row)
    text.append(label.ljust(LABEL_WIDTH), style=LABEL)
    if sep is None:
        text.append(value)
        return
    left, right = value
    text.append(left)
    text.append(f" {sep} ", style=GRAY)
    text.append(right)


def build_banner(snapshot):
    """Lay out the logo and every snapshot field as styled text."""
    text = Text()

    _art(text, 0)
    text.append(snapshot.user, style=TITLE)
    text.append("@")
    text.append(snapshot.host, style=TITLE)

    mem = snapshot.memory
    disk = snapshot.disk
    rows = [
        ("os", snapshot.os_name, None),
        ("kernel", snapshot.kernel, None),
        ("memory", (f"{mem.available_mb}M", f"{mem.total_mb}M"), "/"),
        ("disk", (f"{disk.available_gb:.1f}G", f"{disk.total_gb:.1f}G"), "/"),
        ("cpu", (snapshot.cpu.model, snapshot.cpu.cores), "*"),
        ("uptime", format_uptime(snapshot.uptime), None),
    ]
    if snapshot.gpu is not None:
        rows.append(("gpu", snapshot.gpu, None))

    for row, (label, value, sep) in enumerate(rows, 1):
        text.append("\n")
        _field(text, row, label, value, sep)
    return text


def make_console(file=None):
    """Console that always emits 24-bit colour and never wraps."""
    return Console(
        file=file or sys.stdout,
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
        soft_wrap=True,
    )


def print_banner(snapshot, console=None):
    console = console or make_console()
    console.print()
    console.print(build_banner(snapshot))
    console.print()
    console.file.flush()
