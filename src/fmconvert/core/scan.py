"""Front matter scanner: isolate the lines between the opening and closing '---'"""

import logging
import re
from enum import Enum
from typing import Iterable

from fmconvert.core.errors import ScanError


log = logging.getLogger(__name__)

DELIMITER_RE = re.compile(r'---\s*')


class ScanState(Enum):
    WAITING = "waiting"
    STARTED = "started"


def is_delimiter(line: str) -> bool:
    """True if line is exactly three hyphens, optionally followed by whitespace."""
    return DELIMITER_RE.fullmatch(line) is not None


def scan_front_matter(lines: Iterable[str]) -> list[str]:
    """Return the lines strictly between the first two delimiters.

    The opening delimiter must be the first line. Iteration stops at the
    closing delimiter, so the document body is never read. A stream that
    fails to decode while being read is reported as a ScanError.
    """
    state = ScanState.WAITING
    block: list[str] = []
    consumed = 0
    try:
        for raw in lines:
            consumed += 1
            line = raw.rstrip("\r\n")
            if state is ScanState.WAITING:
                if not is_delimiter(line):
                    raise ScanError(f"no opening '---' delimiter on line 1 (found {line[:40]!r})")
                state = ScanState.STARTED
                log.debug("front matter opened")
                continue
            if is_delimiter(line):
                log.debug("front matter closed after %d line(s)", len(block))
                return block
            block.append(line)
    except UnicodeDecodeError as e:
        raise ScanError(f"input is not valid {e.encoding} near line {consumed + 1}: {e.reason}") from e

    if state is ScanState.WAITING:
        raise ScanError("empty input: no front matter")
    raise ScanError(f"no closing '---' delimiter after {consumed} line(s)")
