from __future__ import annotations

import pathlib
from typing import Any, List, Mapping, Optional, Tuple

from .config import (
    AUTHORS_KEY,
    DEFAULT_STREAM,
    DESCRIPTION_KEY,
    SLUG_KEY,
    STREAM_KEY,
    TAGS_KEY,
    TITLE_KEY,
)
from .dates import PathLike, extract_date_from_filename
from .utils import _norm_text, slugify, split_list, unquote, value_to_string


def _heading_text(line: str) -> str:
    return line.strip().lstrip("#").strip()


def get_title(frontmatter: Mapping[str, Any], markdown: str) -> Tuple[str, str]:
    """
    Title from the front-matter, else the first non-empty line of the body
    without its leading '#', else "".

    Returns (title, markdown with the leading title line removed).
    """
    # Only "\n" breaks lines; a final newline does not start an empty line
    lines = _norm_text(markdown).split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    title = frontmatter.get(TITLE_KEY)
    if not isinstance(title, str):
        first = next((line for line in lines if line.strip()), "")
        title = _heading_text(first)

    start = 0
    for start, line in enumerate(lines):
        s = line.strip()
        if not s:
            continue
        if s.startswith("#") and _heading_text(s) == title:
            continue
        if s == title:
            continue
        break
    else:
        start = len(lines)

    return title, "\n".join(lines[start:])


def get_description(frontmatter: Mapping[str, Any]) -> Optional[str]:
    # Passed through in its serialized form, quotes included
    if DESCRIPTION_KEY in frontmatter:
        return value_to_string(frontmatter[DESCRIPTION_KEY])
    return None


def get_stream(frontmatter: Mapping[str, Any]) -> Optional[str]:
    """`stream` from the front-matter, "index" when not defined."""
    value = frontmatter.get(STREAM_KEY)
    if value is None:
        return DEFAULT_STREAM
    if isinstance(value, str):
        return unquote(value)
    return unquote(value_to_string(value))


def get_slug(frontmatter: Mapping[str, Any], path: PathLike) -> str:
    """
    Slug precedence:
    - front-matter `slug`
    - front-matter `title`
    - file name without extension, minus a leading `YYYY-MM-DD-`

    Documents outside the default stream get `<stream>-` prepended.
    """
    stream = get_stream(frontmatter)

    if SLUG_KEY in frontmatter:
        slug = slugify(value_to_string(frontmatter[SLUG_KEY]))
    elif TITLE_KEY in frontmatter:
        slug = slugify(value_to_string(frontmatter[TITLE_KEY]))
    else:
        slug = pathlib.PurePath(str(path)).stem
        dt = extract_date_from_filename(path)
        if dt is not None:
            slug = slug.replace(f"{dt.date().isoformat()}-", "", 1)

    if stream != DEFAULT_STREAM:
        slug = f"{stream}-{slug}"

    return slug


def get_tags(frontmatter: Mapping[str, Any]) -> List[str]:
    return split_list(frontmatter.get(TAGS_KEY))


def get_authors(frontmatter: Mapping[str, Any]) -> List[str]:
    return split_list(frontmatter.get(AUTHORS_KEY))
