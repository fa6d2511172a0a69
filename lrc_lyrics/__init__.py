"""Parse and serialize LRC synchronized lyrics."""

from lrc_lyrics.config import LrcConfig, load_config
from lrc_lyrics.errors import FormatError, IDTagError, IDTagErrorKind, LyricsError, ParseError
from lrc_lyrics.logging_setup import setup_logging
from lrc_lyrics.lrc.export import export_json, export_lrc, export_srt
from lrc_lyrics.lrc.model import Lyrics, TimedLine
from lrc_lyrics.lrc.parse import parse_lrc
from lrc_lyrics.lrc.tags import IDTag, MetadataSet, TimeTag
from lrc_lyrics.lrc.timestamp import Timestamp

__all__ = [
    "FormatError",
    "IDTag",
    "IDTagError",
    "IDTagErrorKind",
    "LrcConfig",
    "Lyrics",
    "LyricsError",
    "MetadataSet",
    "ParseError",
    "TimeTag",
    "TimedLine",
    "Timestamp",
    "export_json",
    "export_lrc",
    "export_srt",
    "load_config",
    "parse_lrc",
    "setup_logging",
]
