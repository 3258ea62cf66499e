"""Data models for srt subtitles."""

from dataclasses import FrozenInstanceError, dataclass


@dataclass(frozen=True)
class Timestamp:
    """Hours, minutes, seconds and milliseconds at which a subtitle is shown.

    Instances built by the parser are always in range. Instances built
    directly are not validated.
    """
    h: int
    m: int
    s: int
    ms: int

    @property
    def total_milliseconds(self) -> int:
        """Offset from zero in milliseconds."""
        return ((self.h * 60 + self.m) * 60 + self.s) * 1000 + self.ms

    def __str__(self) -> str:
        return f"{self.h:02d}:{self.m:02d}:{self.s:02d},{self.ms:03d}"


@dataclass(unsafe_hash=True)
class Subtitle:
    """A single srt caption block.

    Holds the declared index, the start and end timestamps and the caption
    text. Only ``caption`` may be reassigned after construction. The hash
    covers every field, so editing the caption changes it.
    """
    index: int
    start: Timestamp
    end: Timestamp
    caption: str = ""

    _READ_ONLY = ("index", "start", "end")

    def __setattr__(self, name, value):
        if name in self._READ_ONLY and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        if name in self._READ_ONLY:
            raise FrozenInstanceError(f"cannot delete field '{name}'")
        super().__delattr__(name)

    @property
    def timeline(self) -> str:
        return f"{self.start} --> {self.end}"

    def __str__(self) -> str:
        lines = [str(self.index), self.timeline]
        if self.caption:
            lines.append(self.caption)
        lines.append("")  # Separates this block from the next one
        return "\n".join(lines)
