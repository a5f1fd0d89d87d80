"""
Publishing metadata for static site content.

Resolves title, slug, date, tags, authors and stream for each document from
its parsed front-matter and file name, and groups documents by tag, archive
year, author or stream in presentation order.
"""

from .content import Content, build_content, check_for_duplicate_slugs
from .errors import DuplicateSlugError, InvalidDateError, PubmetaError
from .grouping import GroupedContent, GroupedContentBuilder, Kind, group_contents
from .main import Document, SiteIndex, process_documents
from .utils import slugify

__all__ = [
    "Content",
    "Document",
    "DuplicateSlugError",
    "GroupedContent",
    "GroupedContentBuilder",
    "InvalidDateError",
    "Kind",
    "PubmetaError",
    "SiteIndex",
    "build_content",
    "check_for_duplicate_slugs",
    "group_contents",
    "process_documents",
    "slugify",
]
