import json

from lrc_lyrics.config import LrcConfig
from lrc_lyrics.lrc.export import export_json, export_lrc, export_srt
from lrc_lyrics.lrc.model import Lyrics
from lrc_lyrics.lrc.parse import parse_lrc
from lrc_lyrics.lrc.tags import TimeTag


def test_export_srt_basic():
    doc = parse_lrc("[00:00.00]a\n[00:01.00]b")
    srt = export_srt(doc, last_line_duration_ms=2000)
    assert "00:00:00,000 --> 00:00:01,000" in srt
    assert "00:00:01,000 --> 00:00:03,000" in srt
    assert "\na\n" in srt
    assert "\nb\n" in srt


def test_export_srt_uses_config_default_and_clamps_negative():
    doc = Lyrics(config=LrcConfig(srt_last_line_ms=500))
    doc.add_timed_line(TimeTag.from_millis(-1500), "early")
    doc.add_timed_line(TimeTag.from_millis(3_723_450), "late")
    srt = export_srt(doc)
    assert srt.startswith("1\n00:00:00,000 --> 01:02:03,450\nearly\n")
    assert "2\n01:02:03,450 --> 01:02:03,950\nlate\n" in srt


def test_export_srt_empty():
    assert export_srt(parse_lrc("[ti:x]\nplain")) == ""


def test_export_json():
    doc = parse_lrc("[ti: Título ]\n[00:01.00][00:02.00]hey\nplain")
    data = json.loads(export_json(doc))
    assert data == {
        "metadata": {"ti": "Título"},
        "timed_lines": [{"t_ms": 1000, "text": "hey"}, {"t_ms": 2000, "text": "hey"}],
        "lines": ["plain"],
    }
    assert "Título" in export_json(doc)


def test_export_lrc_without_metadata():
    doc = parse_lrc("[ti:x]\n[00:01.00]a\nplain")
    assert export_lrc(doc, include_metadata=False) == "[00:01.00]a\n\nplain"
    assert export_lrc(doc) == str(doc)


def test_export_srt_full_output_and_tied_start():
    doc = parse_lrc("[00:01.00]a\n[00:01.00]b\n[01:00.00]c")
    assert export_srt(doc, last_line_duration_ms=1000) == (
        "1\n00:00:01,000 --> 00:00:01,001\na\n"
        "\n"
        "2\n00:00:01,000 --> 00:01:00,000\nb\n"
        "\n"
        "3\n00:01:00,000 --> 00:01:01,000\nc\n"
    )
