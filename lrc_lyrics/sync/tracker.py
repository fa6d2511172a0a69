from __future__ import annotations

from dataclasses import dataclass

from lrc_lyrics.lrc.model import Lyrics, TimedLine


@dataclass(slots=True)
class LineTracker:
    """
    Follows a playback position through a document's timed lines.

    Lookups go through `Lyrics.find_timed_line_index`, so lines added to or
    removed from the document are seen on the next `update`.
    """

    doc: Lyrics
    index: int | None = None

    def update(self, now_ms: int) -> bool:
        """Move to the line active at ``now_ms``; True when it differs from before."""
        index = self.doc.find_timed_line_index(now_ms)
        if index == self.index:
            return False
        self.index = index
        return True

    @property
    def line(self) -> TimedLine | None:
        if self.index is None or self.index >= len(self.doc.timed_lines):
            return None
        return self.doc.timed_lines[self.index]

    def reset(self) -> None:
        self.index = None
