from __future__ import annotations

import json
import unicodedata
from datetime import date, datetime
from typing import Any, List

from .config import SLUG_RE


def slugify(s: str) -> str:
    """Lowercase ASCII slug; accents are dropped after NFD decomposition."""
    normalized = unicodedata.normalize("NFD", s).lower()
    return SLUG_RE.sub("-", normalized).strip("-")


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def _fmt(v):
    if isinstance(v, datetime):
        return v.isoformat(sep=" ")
    if isinstance(v, date):
        return v.isoformat()
    return v


def value_to_string(value: Any) -> str:
    """
    Render a front-matter value the way its serialized form prints.

    Strings come back double-quoted, so callers that want the bare text
    have to `unquote` it.
    """
    return json.dumps(_fmt(value), ensure_ascii=False, default=str)


def unquote(s: str) -> str:
    return s.strip('"')


def split_list(value: Any) -> List[str]:
    """Front-matter list field: a YAML sequence or a comma separated string."""
    if isinstance(value, list):
        return [
            unquote(v) if isinstance(v, str) else unquote(value_to_string(v))
            for v in value
        ]
    if isinstance(value, str):
        return [piece.strip() for piece in value.split(",")]
    return []
