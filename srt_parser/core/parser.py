"""Core parsing and serialization of srt text."""

import logging
import re
from dataclasses import asdict
from typing import Iterable, List, Optional, Tuple

from ..utils.config import ParserConfig
from ..utils.subtitle_parser import normalize_text, split_blocks
from .exceptions import SRTParseError
from .models import Subtitle, Timestamp

logger = logging.getLogger(__name__)

TIMELINE_SEPARATOR = ' --> '

MAX_MINUTES = 59
MAX_SECONDS = 59
MAX_MILLISECONDS = 999

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


def _parse_int(value: str) -> Optional[int]:
    """Parse a plain integer, or return None.

    Unlike ``int()`` this rejects surrounding whitespace, underscores and
    non-ASCII digits.
    """
    if _INTEGER_RE.fullmatch(value) is None:
        return None
    return int(value)


def _parse_field(value: str, upper: int, name: str, line: int) -> int:
    number = _parse_int(value)
    if number is None or not 0 <= number <= upper:
        raise SRTParseError(line, f"{name} should be integer between 0 - {upper}")
    return number


class SRTParser:
    """Reads srt text into subtitles and writes subtitles back to srt text."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """Initialize the parser with the given configuration."""
        self.config = config or ParserConfig()

    def update_config(self, **kwargs):
        """Update the parser configuration.

        Raises:
            ConfigurationError: If the new values are invalid; the current
                configuration is kept
        """
        self.config = ParserConfig.from_dict({**asdict(self.config), **kwargs})

    def parse(self, text: str) -> List[Subtitle]:
        """Convert srt text into subtitles, in order of appearance.

        Args:
            text: Contents of an srt file

        Returns:
            The parsed subtitles

        Raises:
            SRTParseError: On the first invalid line; no partial result is kept
        """
        subs: List[Subtitle] = []

        try:
            for block, line in split_blocks(normalize_text(text)):
                sub, consumed = self.parse_subtitle(block, line)
                logger.debug(f"Parsed subtitle {sub.index} from lines {line}-{line + consumed - 1}")
                subs.append(sub)
        except SRTParseError as e:
            logger.warning(f"Rejected srt input: {e}")
            raise

        logger.debug(f"Parsed {len(subs)} subtitles")
        return subs

    def serialize(self, subtitles: Iterable[Subtitle]) -> str:
        """Convert subtitles back to srt text.

        Blocks are separated by a single empty line and the text ends with
        one newline. Timestamps are written as held, without validation.
        """
        return '\n'.join(str(sub) for sub in subtitles)

    def parse_subtitle(self, block: str, line: int) -> Tuple[Subtitle, int]:
        """Parse one caption block starting at ``line``.

        Returns:
            The subtitle and the number of physical lines it spans
        """
        block_lines = block.split('\n')

        index = _parse_int(block_lines[0])
        if index is None:
            raise SRTParseError(line, "Failed to parse index as an integer")

        timeline = block_lines[1] if len(block_lines) > 1 else ''
        start, end = self.parse_timestamps(timeline, line + 1)
        caption_lines = block_lines[2:]

        # Index and timestamp lines, then the caption lines
        consumed = 2 + len(caption_lines)

        return Subtitle(index, start, end, '\n'.join(caption_lines)), consumed

    def parse_timestamps(self, text: str, line: int) -> Tuple[Timestamp, Timestamp]:
        """Parse a ``start --> end`` timeline."""
        timestamps = text.split(TIMELINE_SEPARATOR)
        if len(timestamps) != 2:
            raise SRTParseError(line, "Failed to parse start and end timestamps")

        return self.parse_timestamp(timestamps[0], line), self.parse_timestamp(timestamps[1], line)

    def parse_timestamp(self, text: str, line: int) -> Timestamp:
        """Parse ``HH:MM:SS,sss`` into a Timestamp.

        Hours are checked against ``config.max_hours`` (59 by default),
        minutes and seconds must be between 0 - 59 and milliseconds
        between 0 - 999. The first failing field is reported.
        """
        time_ms = text.split(',')
        if len(time_ms) != 2:
            raise SRTParseError(line, "Failed to parse timestamp. Should be formatted like HH:MM:SS,sss")

        hms = time_ms[0].split(':')
        if len(hms) != 3:
            raise SRTParseError(line, "Failed to parse timestamp. Should be formatted like HH:MM:SS,sss")

        h = _parse_field(hms[0], self.config.max_hours, "Hours", line)
        m = _parse_field(hms[1], MAX_MINUTES, "Minutes", line)
        s = _parse_field(hms[2], MAX_SECONDS, "Seconds", line)
        ms = _parse_field(time_ms[1], MAX_MILLISECONDS, "Milliseconds", line)

        return Timestamp(h, m, s, ms)


def parse_text(text: str, config: Optional[ParserConfig] = None) -> List[Subtitle]:
    """Parse srt text with a one-off parser."""
    return SRTParser(config).parse(text)


def serialize(subtitles: Iterable[Subtitle]) -> str:
    """Write subtitles as srt text."""
    return SRTParser().serialize(subtitles)
