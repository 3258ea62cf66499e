"""Text helpers and configuration for the srt parser."""

from .config import ParserConfig
from .subtitle_parser import normalize_text, split_blocks

__all__ = ['ParserConfig', 'normalize_text', 'split_blocks']
