"""Custom exceptions for the srt parser."""


class SRTParseError(Exception):
    """Raised when srt text is not valid.

    Carries the 1-based line of the original input where the fault lies
    and a stable, human-readable reason.
    """

    def __init__(self, line_number: int, reason: str):
        super().__init__(line_number, reason)
        self.line_number = line_number
        self.reason = reason

    def __str__(self) -> str:
        return f"Failed to parse srt on line {self.line_number}: {self.reason}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SRTParseError):
            return NotImplemented
        return (self.line_number, self.reason) == (other.line_number, other.reason)

    def __hash__(self) -> int:
        return hash((self.line_number, self.reason))


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""
    pass
