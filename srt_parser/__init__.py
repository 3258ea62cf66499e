"""SRT Parser - Read and write SubRip (.srt) subtitle text."""

# Version of the package
__version__ = "0.1.0"

from .core import (
    ConfigurationError,
    SRTParseError,
    SRTParser,
    Subtitle,
    Timestamp,
    parse_text,
    serialize,
)
from .utils import ParserConfig, normalize_text, split_blocks

__all__ = [
    'SRTParser',
    'Subtitle',
    'Timestamp',
    'SRTParseError',
    'ConfigurationError',
    'ParserConfig',
    'parse_text',
    'serialize',
    'normalize_text',
    'split_blocks',
    '__version__',
]
