from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from .content import Content

logger = logging.getLogger(__name__)


def populate_back_links(contents: Sequence[Content]) -> None:
    """
    Second pass once every document is known: record on each link target
    the slugs of the documents pointing at it, in document order.
    """
    by_slug: Dict[str, Content] = {c.slug: c for c in contents}
    for source in contents:
        for target_slug in source.links_to or []:
            target = by_slug.get(target_slug)
            if target is None:
                logger.warning(
                    "%s links to unknown content %s", source.slug, target_slug
                )
                continue
            if target is source or source.slug in target.back_links:
                continue
            target.back_links.append(source.slug)
    logger.debug("Back-links populated for %d contents", len(contents))


def resolve_back_links(
    content: Content, by_slug: Mapping[str, Content]
) -> List[Content]:
    return [by_slug[s] for s in content.back_links if s in by_slug]
