"""
Line-oriented key/value parsing for the small text files Linux exposes
(/etc/os-release, /proc/meminfo, /proc/cpuinfo).

Usage:
    with open("/proc/meminfo") as f:
        table = parse_fields(f, Delimiter.any_of(":" + string.whitespace),
                             stop_when=has_keys("MemTotal"))
    table.require("MemTotal")
"""

import logging
import re
from typing import Callable, Iterable, Optional, Tuple

from .errors import MissingFieldError

logger = logging.getLogger(__name__)

SKIP = "skip"
STOP = "stop"


class Delimiter:
    """
    How a line is split into key and value.

    A single character splits on its first occurrence. A character set
    (`any_of`) tokenises the line on runs of those characters and takes
    the first two tokens.
    """

    def __init__(self, chars: str, any_of: bool = False):
        if not chars:
            raise ValueError("delimiter must not be empty")
        if not any_of and len(chars) != 1:
            raise ValueError("a single-character delimiter needs exactly one character")
        self.chars = chars
        self.is_set = any_of
        self._splitter = re.compile("[" + re.escape(chars) + "]+") if any_of else None

    @classmethod
    def char(cls, c: str) -> "Delimiter":
        return cls(c)

    @classmethod
    def any_of(cls, chars: str) -> "Delimiter":
        return cls(chars, any_of=True)

    def split(self, line: str) -> Optional[Tuple[str, str]]:
        """Return (key, value) or None when the line has no delimiter."""
        if self.is_set:
            tokens = [t for t in self._splitter.split(line) if t]
            if len(tokens) < 2:
                return None
            return tokens[0], tokens[1]

        key, sep, value = line.partition(self.chars)
        if not sep:
            return None
        return key.strip(), value.strip()

    def __repr__(self):
        kind = "any_of" if self.is_set else "char"
        return f"Delimiter.{kind}({self.chars!r})"


class FieldTable(dict):
    """Mapping of field name to raw text value for one input source."""

    def __init__(self, source=None):
        super().__init__()
        self.source = source

    def require(self, key: str) -> str:
        try:
            return self[key]
        except KeyError:
            raise MissingFieldError(key, source=self.source) from None


def has_keys(*keys: str) -> Callable[[FieldTable], bool]:
    """Stopping predicate: true once every key is in the table."""
    def _predicate(table):
        return all(k in table for k in keys)
    return _predicate


def parse_fields(
    stream: Iterable[str],
    delimiter: Delimiter,
    *,
    on_malformed: str = SKIP,
    stop_when: Optional[Callable[[FieldTable], bool]] = None,
    source: Optional[str] = None,
) -> FieldTable:
    """
    Scan `stream` line by line into a FieldTable.

    A line without a delimiter is skipped or ends the scan, depending on
    `on_malformed`; under STOP a blank line also ends it (the blank line
    between /proc/cpuinfo processor blocks relies on this). Duplicate keys keep the last
    value seen. `stop_when` is checked after every insert and ends the
    scan as soon as it returns True.
    """
    if on_malformed not in (SKIP, STOP):
        raise ValueError(f"on_malformed must be '{SKIP}' or '{STOP}'")

    table = FieldTable(source=source)
    for lineno, raw in enumerate(stream, 1):
        line = raw.rstrip("\r\n")
        pair = delimiter.split(line) if line.strip() else None
        if pair is None:
            if on_malformed == STOP:
                logger.debug("%s: malformed line %d ends scan", source, lineno)
                break
            continue

        key, value = pair
        table[key] = value
        if stop_when is not None and stop_when(table):
            logger.debug("%s: required keys found at line %d", source, lineno)
            break

    return table


__all__ = ["Delimiter", "FieldTable", "has_keys", "parse_fields", "SKIP", "STOP"]
