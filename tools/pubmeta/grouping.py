"""
Group contents by tag, archive year, author or stream.

Grouping is two-phase: a GroupedContentBuilder owned by a single writer
collects buckets while documents are scanned, then `build()` hands out a
read-only GroupedContent. Presentation order is recomputed on every
`iterate()` call:

- Tag: biggest bucket first, ties by tag name
- Archive: newest period first
- Author, Stream: by name

Within a bucket contents are newest first, undated ones last.
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple

from .config import ARCHIVE_KEY_FORMAT, DEFAULT_STREAM
from .content import Content

logger = logging.getLogger(__name__)


class Kind(StrEnum):
    TAG = "tag"
    ARCHIVE = "archive"
    AUTHOR = "author"
    STREAM = "stream"


def _by_date_desc(contents: Iterable[Content]) -> List[Content]:
    return sorted(
        contents,
        key=lambda c: (c.date is not None, c.date or datetime.min),
        reverse=True,
    )


class GroupedContent:
    """Read-only grouping snapshot produced by GroupedContentBuilder."""

    def __init__(self, kind: Kind, buckets: Mapping[str, Sequence[Content]]):
        self._kind = kind
        self._map = MappingProxyType(
            {key: tuple(contents) for key, contents in buckets.items()}
        )

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def map(self) -> Mapping[str, Tuple[Content, ...]]:
        return self._map

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[Tuple[str, List[Content]]]:
        return iter(self.iterate())

    def iterate(self) -> List[Tuple[str, List[Content]]]:
        groups = [
            (key, _by_date_desc(contents)) for key, contents in self._map.items()
        ]
        if self._kind is Kind.TAG:
            groups.sort(key=lambda g: (-len(g[1]), g[0]))
        elif self._kind is Kind.ARCHIVE:
            groups.sort(key=lambda g: g[0], reverse=True)
        else:
            groups.sort(key=lambda g: g[0])
        return groups

    def __repr__(self) -> str:
        return f"GroupedContent(kind={self._kind.value!r}, groups={len(self._map)})"


class GroupedContentBuilder:
    def __init__(self, kind: Kind):
        self.kind = kind
        self._buckets: Dict[str, List[Content]] = {}

    def entry(self, key: str) -> List[Content]:
        return self._buckets.setdefault(key, [])

    def add(self, key: str, content: Content) -> None:
        self.entry(key).append(content)

    def build(self) -> GroupedContent:
        return GroupedContent(self.kind, self._buckets)


def _keys_for(content: Content, kind: Kind) -> List[str]:
    if kind is Kind.TAG:
        keys = content.tags
    elif kind is Kind.AUTHOR:
        keys = content.authors
    elif kind is Kind.ARCHIVE:
        if content.date is None:
            return []
        keys = [content.date.strftime(ARCHIVE_KEY_FORMAT)]
    else:
        keys = [content.stream or DEFAULT_STREAM]
    # a tag listed twice still files the content once
    return list(dict.fromkeys(keys))


def group_contents(contents: Iterable[Content], kind: Kind) -> GroupedContent:
    builder = GroupedContentBuilder(kind)
    for content in contents:
        for key in _keys_for(content, kind):
            builder.add(key, content)
    grouped = builder.build()
    logger.debug("Grouped contents by %s into %d groups", kind.value, len(grouped))
    return grouped
