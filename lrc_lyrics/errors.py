from __future__ import annotations

from enum import Enum


class LyricsError(ValueError):
    pass


class ParseError(LyricsError):
    """Malformed timestamp text."""


class IDTagErrorKind(str, Enum):
    LABEL = "label"
    TEXT = "text"


class IDTagError(LyricsError):
    def __init__(self, kind: IDTagErrorKind):
        super().__init__(f"Set a wrong {kind.value}.")
        self.kind = kind


class FormatError(LyricsError):
    """Line content holds control characters or an embedded tag."""
