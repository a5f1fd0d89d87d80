"""Tests for the back-link pass."""

import logging

from pubmeta.content import Content
from pubmeta.links import populate_back_links, resolve_back_links


def _content(slug, links_to=None):
    return Content(title=slug, slug=slug, links_to=links_to)


class TestPopulateBackLinks:
    def test_reverse_references(self):
        a = _content("a", ["b"])
        b = _content("b")
        c = _content("c", ["b", "a"])
        populate_back_links([a, b, c])

        assert b.back_links == ["a", "c"]
        assert a.back_links == ["c"]
        assert c.back_links == []

    def test_self_link_ignored(self):
        a = _content("a", ["a"])
        populate_back_links([a])
        assert a.back_links == []

    def test_repeated_link_recorded_once(self):
        a = _content("a", ["b", "b"])
        b = _content("b")
        populate_back_links([a, b])
        assert b.back_links == ["a"]

    def test_unknown_target_logged(self, caplog):
        a = _content("a", ["missing"])
        with caplog.at_level(logging.WARNING, logger="pubmeta.links"):
            populate_back_links([a])
        assert "missing" in caplog.text
        assert a.back_links == []

    def test_cycle(self):
        a = _content("a", ["b"])
        b = _content("b", ["a"])
        populate_back_links([a, b])
        assert a.back_links == ["b"]
        assert b.back_links == ["a"]


class TestResolveBackLinks:
    def test_resolves_to_records(self):
        a = _content("a", ["b"])
        b = _content("b")
        populate_back_links([a, b])
        assert resolve_back_links(b, {"a": a, "b": b}) == [a]

    def test_unknown_slugs_skipped(self):
        b = _content("b")
        b.back_links.append("gone")
        assert resolve_back_links(b, {"b": b}) == []
