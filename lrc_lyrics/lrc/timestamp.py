from __future__ import annotations

from dataclasses import dataclass

import regex

from lrc_lyrics.errors import ParseError

# [-]mm:[-]ss[.[-]xx]; minutes up to 10 digits, seconds and hundredths up to 2
_TIMESTAMP_RE = regex.compile(r"(-)?([0-9]{1,10}):(-)?([0-9]{1,2})(?:\.(-)?([0-9]{1,2}))?")

_BAD_FORMAT = "The format of the string is incorrect."


@dataclass(frozen=True, slots=True, order=True)
class Timestamp:
    """Signed number of milliseconds, rendered as ``[-]mm:ss.xx``."""

    millis: int

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """
        Only the sign of the most significant nonzero component counts:
        ``00:-12.34`` is -12340 ms, ``12:-34.56`` is rejected.
        A minus sign on a zero component is ignored.
        """
        m = _TIMESTAMP_RE.fullmatch(text)
        if m is None:
            raise ParseError(f"{_BAD_FORMAT} Is it mm:ss.xx?")

        minute = int(m.group(2))
        second = int(m.group(4))
        hundredth = int(m.group(6)) if m.group(6) is not None else 0

        neg_minute = m.group(1) is not None and minute != 0
        neg_second = m.group(3) is not None and second != 0
        neg_hundredth = m.group(5) is not None and hundredth != 0

        if sum((neg_minute, neg_second, neg_hundredth)) > 1:
            raise ParseError(f"{_BAD_FORMAT} Too many negative signs.")

        if minute > 0:
            if neg_second:
                raise ParseError(f"{_BAD_FORMAT} The number of seconds cannot be negative.")
            if neg_hundredth:
                raise ParseError(
                    f"{_BAD_FORMAT} The number of hundredths of a second cannot be negative."
                )

        if second > 0:
            if neg_hundredth:
                raise ParseError(
                    f"{_BAD_FORMAT} The number of hundredths of a second cannot be negative."
                )
            if second >= 60:
                raise ParseError(f"{_BAD_FORMAT} The number of seconds must be smaller than 60.")

        millis = minute * 60_000 + second * 1_000 + hundredth * 10
        if neg_minute or neg_second or neg_hundredth:
            millis = -millis
        return cls(millis)

    def format(self) -> str:
        sign = "-" if self.millis < 0 else ""
        # round half up to whole hundredths, carrying into seconds/minutes
        hundredths = (abs(self.millis) + 5) // 10
        m, rem = divmod(hundredths, 6_000)
        s, xx = divmod(rem, 100)
        return f"{sign}{m:02d}:{s:02d}.{xx:02d}"

    def __str__(self) -> str:
        return self.format()

    def __int__(self) -> int:
        return self.millis
