from __future__ import annotations

import logging
import pathlib
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from .config import DATE_FORMATS, DATE_KEY, FILENAME_DATE_FORMAT, FILENAME_DATE_RE
from .errors import InvalidDateError

logger = logging.getLogger(__name__)

PathLike = Union[str, pathlib.PurePath]


def try_to_parse_date(s: str) -> datetime:
    """
    Parse "2024-01-01 15:40:56", "2024-01-01 15:40" or "2024-01-01".

    Raises ValueError from the last format when none matches.
    """
    for fmt in DATE_FORMATS[:-1]:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    return datetime.strptime(s, DATE_FORMATS[-1])


def extract_date_from_filename(path: PathLike) -> Optional[datetime]:
    """First `YYYY-MM-DD` anywhere in the path, at midnight."""
    m = FILENAME_DATE_RE.search(str(path))
    if not m:
        return None
    try:
        return datetime.strptime(m.group(0), FILENAME_DATE_FORMAT)
    except ValueError:
        # e.g. 2024-13-45
        return None


def get_date(frontmatter: Mapping[str, Any], path: PathLike) -> Optional[datetime]:
    """
    Front-matter `date` first, then the file name.

    frontmatter = {"date": "2024-10-10"}, path = "2024-01-01-myfile.md"
    resolves to 2024-10-10 00:00.
    """
    value = frontmatter.get(DATE_KEY)
    if isinstance(value, str):
        try:
            return try_to_parse_date(value)
        except ValueError as e:
            logger.error(
                "Invalid date format %s when parsing %s, %s", value, path, e
            )
            raise InvalidDateError(str(path), value, str(e)) from e
    # YAML loaders hand back timestamps already typed
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return extract_date_from_filename(path)
