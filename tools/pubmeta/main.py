"""
Metadata pass for a static site build.

- One Content per document, fields resolved from front-matter and file name
- Slugs checked for uniqueness (first duplicate aborts)
- Back-links recorded once every document is known
- One grouping per kind: tags, archive years, authors, streams

Front-matter parsing, markdown rendering and file I/O belong to the caller:
documents arrive with their front-matter already parsed into a mapping.
An InvalidDateError raised from here means the build must stop.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .content import Content, build_content, check_for_duplicate_slugs
from .grouping import GroupedContent, Kind, group_contents
from .links import populate_back_links

logger = logging.getLogger(__name__)


class Document(BaseModel):
    """A source document as handed over by the file discovery step."""

    path: str
    frontmatter: Dict[str, Any] = Field(default_factory=dict)
    markdown: str = ""

    @field_validator("path", mode="before")
    @classmethod
    def _path_as_str(cls, v: Any) -> Any:
        if isinstance(v, pathlib.PurePath):
            return str(v)
        return v


class SiteIndex(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    contents: List[Content]
    groups: Dict[Kind, GroupedContent]

    @property
    def by_slug(self) -> Dict[str, Content]:
        return {c.slug: c for c in self.contents}

    @property
    def tags(self) -> GroupedContent:
        return self.groups[Kind.TAG]

    @property
    def archive(self) -> GroupedContent:
        return self.groups[Kind.ARCHIVE]

    @property
    def authors(self) -> GroupedContent:
        return self.groups[Kind.AUTHOR]

    @property
    def streams(self) -> GroupedContent:
        return self.groups[Kind.STREAM]


def process_documents(
    documents: Iterable[Document],
    renderer: Optional[Callable[[str], str]] = None,
) -> SiteIndex:
    contents = [
        build_content(doc.path, doc.frontmatter, doc.markdown, renderer)
        for doc in documents
    ]
    check_for_duplicate_slugs(contents)
    populate_back_links(contents)

    groups = {kind: group_contents(contents, kind) for kind in Kind}
    logger.info(
        "Indexed %d contents: %d tags, %d archive periods, %d authors, %d streams",
        len(contents),
        len(groups[Kind.TAG]),
        len(groups[Kind.ARCHIVE]),
        len(groups[Kind.AUTHOR]),
        len(groups[Kind.STREAM]),
    )
    return SiteIndex(contents=contents, groups=groups)
