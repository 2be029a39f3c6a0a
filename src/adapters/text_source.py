"""Reading candidate numbers from text files.

One candidate per line. Blank lines and `#` comments are skipped. Only the
line terminator is removed, so stray whitespace reaches the parser and the
entry is reported as malformed rather than silently fixed.
"""

from __future__ import annotations

from pathlib import Path


def parse_lines(text: str) -> list[str]:
    numbers: list[str] = []
    for raw_line in text.splitlines():
        if not raw_line or raw_line.startswith("#"):
            continue
        numbers.append(raw_line)
    return numbers


def read_numbers(path: Path) -> list[str]:
    return parse_lines(path.read_text(encoding="utf-8"))
