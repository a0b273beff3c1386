# tests/test_tags.py

from __future__ import annotations

import pytest

from task_scanner.tags import TagSet


def test_parse_trims_and_drops_empty_parts() -> None:
    tags = TagSet.parse(" FIXME , ,TODO,, ")

    assert list(tags) == ["FIXME", "TODO"]


def test_parse_is_whitespace_tolerant() -> None:
    assert TagSet.parse("FIXME,TODO") == TagSet.parse(" FIXME , TODO ")


def test_parse_drops_duplicates_keeping_order() -> None:
    tags = TagSet.parse("TODO,FIXME,TODO")

    assert list(tags) == ["TODO", "FIXME"]
    assert len(tags) == 2


@pytest.mark.parametrize("raw", [None, "", "   ", ",", " , , "])
def test_blank_input_is_empty(raw) -> None:
    tags = TagSet.parse(raw)

    assert not tags
    assert len(tags) == 0
    assert tags.compile() is None


def test_tags_are_case_sensitive() -> None:
    tags = TagSet.parse("TODO")

    assert "TODO" in tags
    assert "todo" not in tags


def test_compile_escapes_tags() -> None:
    pattern = TagSet.parse("C++,a.b").compile()

    assert pattern.search("x C++ y").group("tag") == "C++"
    assert pattern.search("axb") is None


def test_str_round_trips_through_parse() -> None:
    tags = TagSet.parse(" XXX , NOTE ")

    assert str(tags) == "XXX,NOTE"
    assert TagSet.parse(str(tags)) == tags
