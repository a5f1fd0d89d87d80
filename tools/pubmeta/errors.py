from __future__ import annotations


class PubmetaError(Exception):
    """Base class for metadata resolution failures."""


class InvalidDateError(PubmetaError):
    """A front-matter `date` matched none of the accepted formats.

    Fatal to the build: the caller must stop and not produce any content
    once this is raised.
    """

    def __init__(self, path: str, value: str, reason: str):
        self.path = path
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid date format {value!r} when parsing {path}: {reason}"
        )


class DuplicateSlugError(PubmetaError):
    """Two documents resolved to the same slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Duplicate slug: {slug}")
