"""Utility functions for splitting srt text into caption blocks."""

import re
from typing import Iterator, Tuple

_NEWLINE_RE = re.compile(r'\r\n|\r|\n')

BLOCK_SEPARATOR = '\n\n'


def normalize_text(text: str) -> str:
    """Trim every line and rejoin with ``\\n``.

    Blocks are separated by an empty line, but the empty line may still hold
    spaces or tabs. Trimming each line lets a plain split on two newline
    characters find every separator.
    """
    return '\n'.join(line.strip() for line in _NEWLINE_RE.split(text))


def count_lines(text: str) -> int:
    """Number of physical lines in ``text``."""
    return text.count('\n') + 1


def split_blocks(text: str) -> Iterator[Tuple[str, int]]:
    """Yield each caption block of normalized text with its starting line.

    Line numbers are 1-based and refer to the text as given. Runs of extra
    blank lines, including ones before the first block, produce no block but
    still advance the line counter.
    """
    line_number = 1
    # Trailing blank lines would otherwise end up in the last caption
    text = text.rstrip('\n')
    if not text:
        return

    for piece in text.split(BLOCK_SEPARATOR):
        block = piece.lstrip('\n')
        if block:
            # Leading newlines are blank lines ahead of the block
            yield block, line_number + len(piece) - len(block)
        # The piece's own lines plus the blank separator line
        line_number += count_lines(piece) + 1
