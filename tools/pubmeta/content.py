"""Canonical per-document metadata and slug validation across documents."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from .config import BANNER_IMAGE_KEY, CARD_IMAGE_KEY, EXTRA_KEY, LINKS_TO_KEY
from .dates import PathLike, get_date
from .errors import DuplicateSlugError
from .fields import (
    get_authors,
    get_description,
    get_slug,
    get_stream,
    get_tags,
    get_title,
)
from .utils import split_list

logger = logging.getLogger(__name__)


class Content(BaseModel):
    """Fully resolved metadata for one document.

    Frozen once built; only `back_links` is filled in afterwards, in place,
    by the back-link pass. It holds slugs of the linking documents.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: Optional[str] = None
    slug: str
    html: str = ""
    tags: List[str] = Field(default_factory=list)
    date: Optional[datetime] = None
    extra: Optional[Any] = None
    links_to: Optional[List[str]] = None
    back_links: List[str] = Field(default_factory=list)
    card_image: Optional[str] = None
    banner_image: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    stream: Optional[str] = None


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def build_content(
    path: PathLike,
    frontmatter: Mapping[str, Any],
    markdown: str,
    renderer: Optional[Callable[[str], str]] = None,
) -> Content:
    """
    Resolve every field for one document.

    `renderer` turns the body left after the title is stripped into HTML.
    Without one the remaining body is kept verbatim.

    Raises InvalidDateError for a malformed front-matter date.
    """
    title, body = get_title(frontmatter, markdown)
    html = renderer(body) if renderer is not None else body

    links_to = None
    if LINKS_TO_KEY in frontmatter:
        links_to = split_list(frontmatter[LINKS_TO_KEY])

    content = Content(
        title=title,
        description=get_description(frontmatter),
        slug=get_slug(frontmatter, path),
        html=html,
        tags=get_tags(frontmatter),
        date=get_date(frontmatter, path),
        extra=frontmatter.get(EXTRA_KEY),
        links_to=links_to,
        card_image=_optional_str(frontmatter.get(CARD_IMAGE_KEY)),
        banner_image=_optional_str(frontmatter.get(BANNER_IMAGE_KEY)),
        authors=get_authors(frontmatter),
        stream=get_stream(frontmatter),
    )
    logger.debug(
        "Resolved %s as slug=%s date=%s stream=%s",
        path,
        content.slug,
        content.date,
        content.stream,
    )
    return content


def check_for_duplicate_slugs(contents: Iterable[Content]) -> None:
    """Raise DuplicateSlugError on the first slug seen twice."""
    seen: Set[str] = set()
    for content in contents:
        if content.slug in seen:
            raise DuplicateSlugError(content.slug)
        seen.add(content.slug)
