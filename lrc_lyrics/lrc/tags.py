from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from functools import total_ordering
import logging
from typing import Iterable, Iterator

import regex

from lrc_lyrics.config import DUPLICATE_TAG_POLICIES
from lrc_lyrics.errors import IDTagError, IDTagErrorKind

from .timestamp import Timestamp

logger = logging.getLogger(__name__)

_ID_LABEL_RE = regex.compile(r"[^\x00-\x08\x0A-\x1F\x7F\[\]:]+")
_ID_TEXT_RE = regex.compile(r"[^\x00-\x08\x0A-\x1F\x7F\[\]]*")

# Unicode White_Space only: str.strip() would also eat 0x1C-0x1F
_LEADING_WS_RE = regex.compile(r"^\p{White_Space}+")
_TRAILING_WS_RE = regex.compile(r"\p{White_Space}+\Z")


def trim_start(s: str) -> str:
    return _LEADING_WS_RE.sub("", s, count=1)


def trim_end(s: str) -> str:
    return _TRAILING_WS_RE.sub("", s, count=1)


def trim(s: str) -> str:
    return trim_end(trim_start(s))


@dataclass(frozen=True, slots=True, order=True)
class TimeTag:
    """``[mm:ss.xx]`` prefix of a timed lyric line."""

    timestamp: Timestamp

    @classmethod
    def from_millis(cls, millis: int) -> "TimeTag":
        return cls(Timestamp(millis))

    @classmethod
    def parse(cls, text: str) -> "TimeTag":
        # brackets are optional; whitespace is only trimmed next to a removed bracket
        if text.startswith("["):
            text = trim_start(text[1:])
        if text.endswith("]"):
            text = trim_end(text[:-1])
        return cls(Timestamp.parse(text))

    @property
    def millis(self) -> int:
        return self.timestamp.millis

    def __str__(self) -> str:
        return f"[{self.timestamp}]"

    def __int__(self) -> int:
        return self.timestamp.millis


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class IDTag:
    """
    Metadata tag ``[label: text]``.

    Equality, hashing and ordering only look at the label, case-insensitively,
    so a set of IDTags holds at most one tag per label.
    """

    label: str
    text: str = ""

    def __post_init__(self) -> None:
        if _ID_LABEL_RE.fullmatch(self.label) is None or not trim(self.label):
            raise IDTagError(IDTagErrorKind.LABEL)
        if _ID_TEXT_RE.fullmatch(self.text) is None:
            raise IDTagError(IDTagErrorKind.TEXT)

    @classmethod
    def _trusted(cls, label: str, text: str) -> "IDTag":
        # Skips validation. Only for callers whose own pattern already
        # enforces the label/text character classes (the tokenizer).
        tag = object.__new__(cls)
        object.__setattr__(tag, "label", label)
        object.__setattr__(tag, "text", text)
        return tag

    @property
    def key(self) -> str:
        return _label_key(self.label)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IDTag):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "IDTag") -> bool:
        if not isinstance(other, IDTag):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"[{trim(self.label)}: {trim(self.text)}]"


def _label_key(label: str) -> str:
    return trim(label).casefold()


class MetadataSet:
    """
    IDTags unique by label, always iterated in ascending label order.

    With the default ``duplicate_tags="first"`` a later tag with an already
    present label is ignored; ``"last"`` replaces the stored tag instead.
    """

    __slots__ = ("_keys", "_tags", "_duplicate_tags")

    def __init__(self, tags: Iterable[IDTag] = (), duplicate_tags: str = "first"):
        self._keys: list[str] = []
        self._tags: list[IDTag] = []
        self.duplicate_tags = duplicate_tags
        for tag in tags:
            self.add(tag)

    @property
    def duplicate_tags(self) -> str:
        return self._duplicate_tags

    @duplicate_tags.setter
    def duplicate_tags(self, policy: str) -> None:
        if policy not in DUPLICATE_TAG_POLICIES:
            raise ValueError(
                f"Unknown duplicate tag policy {policy!r}, expected one of {DUPLICATE_TAG_POLICIES}"
            )
        self._duplicate_tags = policy

    def _find(self, key: str) -> int | None:
        i = bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            return i
        return None

    def add(self, tag: IDTag) -> bool:
        key = tag.key
        i = bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            if self.duplicate_tags == "last":
                logger.debug("Replacing metadata tag '%s'", trim(tag.label))
                self._tags[i] = tag
            else:
                logger.debug("Ignoring duplicate metadata tag '%s'", trim(tag.label))
            return False
        self._keys.insert(i, key)
        self._tags.insert(i, tag)
        return True

    def get(self, label: str) -> IDTag | None:
        i = self._find(_label_key(label))
        return self._tags[i] if i is not None else None

    def discard(self, label: str) -> IDTag | None:
        i = self._find(_label_key(label))
        if i is None:
            return None
        del self._keys[i]
        return self._tags.pop(i)

    def clear(self) -> None:
        self._keys.clear()
        self._tags.clear()

    def as_dict(self) -> dict[str, str]:
        return {trim(t.label): trim(t.text) for t in self._tags}

    def __contains__(self, item: object) -> bool:
        if isinstance(item, IDTag):
            return self._find(item.key) is not None
        if isinstance(item, str):
            return self._find(_label_key(item)) is not None
        return False

    def __iter__(self) -> Iterator[IDTag]:
        return iter(tuple(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MetadataSet):
            return NotImplemented
        return self._keys == other._keys

    def __repr__(self) -> str:
        return f"MetadataSet({self._tags!r})"
