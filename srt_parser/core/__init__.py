"""Core functionality for the srt parser."""

from .exceptions import SRTParseError, ConfigurationError
from .models import Timestamp, Subtitle
from .parser import SRTParser, parse_text, serialize

__all__ = ['SRTParser', 'Subtitle', 'Timestamp', 'SRTParseError', 'ConfigurationError', 'parse_text', 'serialize']
