from __future__ import annotations

import json

from .model import Lyrics


def export_json(doc: Lyrics) -> str:
    return json.dumps(
        {
            "metadata": doc.metadata.as_dict(),
            "timed_lines": [{"t_ms": e.time_tag.millis, "text": e.text} for e in doc.timed_lines],
            "lines": list(doc.lines),
        },
        ensure_ascii=False,
        indent=2,
    )


def export_lrc(doc: Lyrics, include_metadata: bool = True) -> str:
    """
    Canonical LRC text: metadata, timed lines, plain lines.
    Non-empty blocks are separated by one blank line.
    """
    blocks: list[str] = []
    if include_metadata and len(doc.metadata):
        blocks.append("\n".join(str(tag) for tag in doc.metadata))
    if doc.timed_lines:
        blocks.append("\n".join(str(e) for e in doc.timed_lines))
    plain = doc.plain_block()
    if plain:
        blocks.append(plain)
    return "\n\n".join(blocks)


def _srt_clock(ms: int) -> str:
    seconds, millis = divmod(ms, 1_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def _srt_spans(starts: list[int], last_line_duration_ms: int) -> list[tuple[int, int]]:
    # a cue lasts until the next one starts, and at least 1 ms
    ends = [max(nxt, start + 1) for start, nxt in zip(starts, starts[1:])]
    ends.append(starts[-1] + last_line_duration_ms)
    return list(zip(starts, ends))


def export_srt(doc: Lyrics, last_line_duration_ms: int | None = None) -> str:
    """
    One SRT cue per timed line. Times before zero are clamped to zero;
    the last cue lasts ``last_line_duration_ms`` (the document's
    ``srt_last_line_ms`` setting by default).
    """
    timed = doc.timed_lines
    if not timed:
        return ""
    if last_line_duration_ms is None:
        last_line_duration_ms = doc.config.srt_last_line_ms

    starts = [max(e.time_tag.millis, 0) for e in timed]
    cues = [
        f"{n}\n{_srt_clock(start)} --> {_srt_clock(end)}\n{e.text}\n"
        for n, (e, (start, end)) in enumerate(
            zip(timed, _srt_spans(starts, last_line_duration_ms)), start=1
        )
    ]
    return "\n".join(cues)
