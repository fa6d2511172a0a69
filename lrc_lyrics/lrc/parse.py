from __future__ import annotations

import logging

import regex

from lrc_lyrics.config import LrcConfig
from lrc_lyrics.errors import LyricsError, ParseError

from .model import Lyrics
from .tags import IDTag, TimeTag, trim, trim_start

logger = logging.getLogger(__name__)

# A [label:text] tag at the very start of what is left of a line.
# Empty labels are allowed here: they mark comment tags.
_LEADING_TAG_RE = regex.compile(
    r"\[([^\x00-\x08\x0A-\x1F\x7F\[\]:]*):([^\x00-\x08\x0A-\x1F\x7F\[\]]*)\]"
)


def _parse_line(doc: Lyrics, line: str) -> None:
    time_tags: list[TimeTag] = []
    has_id_tag = False

    line = trim(line)
    while (m := _LEADING_TAG_RE.match(line)) is not None:
        try:
            time_tags.append(TimeTag.parse(m.group(0)))
        except ParseError:
            label = trim(m.group(1))
            if not label:
                # comment tag such as [:] drops the rest of the line
                logger.debug("Comment tag, discarding %r", line[m.end() :])
                line = ""
                break
            has_id_tag = True
            doc.metadata.add(IDTag._trusted(label, trim(m.group(2))))

        line = trim_start(line[m.end() :])

    if has_id_tag and not time_tags:
        return
    doc.add_line_with_multiple_time_tags(time_tags, line)


def parse_lrc(text: str, config: LrcConfig | None = None) -> Lyrics:
    """
    Parse LRC text into a `Lyrics` document.

    Every line may start with any number of tags:
    - [mm:ss.xx] time tags: the rest of the line becomes a timed line per tag
    - [label:text] ID tags go to metadata; a line with only ID tags adds no lyric
    - [:] comment tags discard the rest of the line
    Lines without time tags are kept as plain lines.

    Stops at the first invalid line and raises its error.
    """
    doc = Lyrics(config=config)
    for line_no, line in enumerate(text.split("\n"), start=1):
        try:
            _parse_line(doc, line)
        except LyricsError as e:
            logger.debug("Invalid LRC line %d: %s", line_no, e)
            raise
    return doc
