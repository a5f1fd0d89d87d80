from __future__ import annotations

import re

# ---------- Defaults

DEFAULT_STREAM = "index"

# Front-matter `date` formats, tried in order. The last one carries no time.
DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)
FILENAME_DATE_FORMAT = "%Y-%m-%d"

# Archive buckets are keyed by year
ARCHIVE_KEY_FORMAT = "%Y"

# Front-matter keys read by the field extractors
TITLE_KEY = "title"
DESCRIPTION_KEY = "description"
SLUG_KEY = "slug"
STREAM_KEY = "stream"
TAGS_KEY = "tags"
AUTHORS_KEY = "authors"
DATE_KEY = "date"
EXTRA_KEY = "extra"
CARD_IMAGE_KEY = "card_image"
BANNER_IMAGE_KEY = "banner_image"
LINKS_TO_KEY = "links_to"

# Some shared regexes

FILENAME_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
SLUG_RE = re.compile(r"[^a-z0-9]+")
