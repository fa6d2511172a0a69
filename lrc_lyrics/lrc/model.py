from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable

import regex

from lrc_lyrics.config import LrcConfig
from lrc_lyrics.errors import FormatError

from .tags import MetadataSet, TimeTag, trim
from .timestamp import Timestamp

_LYRICS_RE = regex.compile(r"[^\x00-\x08\x0A-\x1F\x7F]*")
_TAG_RE = regex.compile(r"\[.*:.*\]")

_time_of = attrgetter("time_tag")


def check_line(line: str) -> None:
    if _LYRICS_RE.fullmatch(line) is None:
        raise FormatError("Incorrect lyrics.")
    if _TAG_RE.search(line) is not None:
        raise FormatError("Lyrics contain tags.")


@dataclass(frozen=True, slots=True)
class TimedLine:
    time_tag: TimeTag
    text: str

    def __str__(self) -> str:
        return f"{self.time_tag}{self.text}"


class Lyrics:
    """
    An LRC document: metadata tags, timed lines kept sorted by time,
    and plain lines kept in insertion order.
    """

    def __init__(self, config: LrcConfig | None = None):
        self.config = config or LrcConfig()
        self.metadata = MetadataSet(duplicate_tags=self.config.duplicate_tags)
        self._timed_lines: list[TimedLine] = []
        self._lines: list[str] = []

    @classmethod
    def from_str(cls, text: str, config: LrcConfig | None = None) -> "Lyrics":
        from .parse import parse_lrc

        return parse_lrc(text, config=config)

    @property
    def timed_lines(self) -> tuple[TimedLine, ...]:
        return tuple(self._timed_lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def add_line(self, line: str) -> None:
        check_line(line)
        self._lines.append(line)

    def add_timed_line(self, time_tag: TimeTag, line: str) -> None:
        check_line(line)
        self._insert_timed(TimedLine(time_tag, line))

    def add_line_with_multiple_time_tags(self, time_tags: Iterable[TimeTag], line: str) -> None:
        """
        All created entries share the same ``line`` object. Without any
        time tag the line is stored as a plain line.
        """
        time_tags = list(time_tags)
        check_line(line)
        if not time_tags:
            self._lines.append(line)
            return
        for time_tag in time_tags:
            self._insert_timed(TimedLine(time_tag, line))

    def _insert_timed(self, entry: TimedLine) -> None:
        # after every entry with an equal or earlier time: ties keep insertion order
        i = bisect_right(self._timed_lines, entry.time_tag, key=_time_of)
        self._timed_lines.insert(i, entry)

    def remove_line(self, index: int) -> str:
        return self._lines.pop(index)

    def remove_timed_line(self, index: int) -> TimedLine:
        return self._timed_lines.pop(index)

    def find_timed_line_index(self, target: TimeTag | Timestamp | int) -> int | None:
        """Index of the last timed line not later than ``target``, or None."""
        if isinstance(target, Timestamp):
            target = TimeTag(target)
        elif not isinstance(target, TimeTag):
            target = TimeTag.from_millis(int(target))
        i = bisect_right(self._timed_lines, target, key=_time_of) - 1
        return i if i >= 0 else None

    def plain_block(self) -> str:
        return trim("\n".join(self._lines))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lyrics):
            return NotImplemented
        return (
            self.metadata == other.metadata
            and self._timed_lines == other._timed_lines
            and self.plain_block() == other.plain_block()
        )

    def __str__(self) -> str:
        from .export import export_lrc

        return export_lrc(self)

    def __repr__(self) -> str:
        return (
            f"Lyrics(metadata={len(self.metadata)}, "
            f"timed_lines={len(self._timed_lines)}, lines={len(self._lines)})"
        )
