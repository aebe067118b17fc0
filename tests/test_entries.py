"""Tests for entry construction, classification and ordering."""

from jsoutline_mcp.parser import (
    NameStats,
    OutlineEntry,
    classify,
    compare_entries,
    make_entry,
    sort_entries,
)


def entry(name: str, anonymous: bool = False, line: int = 0) -> OutlineEntry:
    return OutlineEntry(
        name=name,
        is_anonymous=anonymous,
        line=line,
        column=0,
        depth=0,
        kind="function",
        classification="",
    )


def test_fallback_label_priority():
    """Test generator > arrow > class > method > function."""
    assert make_entry("", NameStats(is_generator=True, is_method=True), "", 0, 0, 1).name == "generator"
    assert make_entry("", NameStats(is_arrow=True), "", 0, 0, 1).name == "arrow"
    assert make_entry("", NameStats(is_class=True), "", 0, 0, 1).name == "class"
    assert make_entry("", NameStats(is_method=True), "", 0, 0, 1).name == "method"
    assert make_entry("", NameStats(), "", 0, 0, 1).name == "function"


def test_named_entry_keeps_name():
    """Test that a resolved name is used as-is."""
    e = make_entry("load", NameStats(is_arrow=True), "(url)", 3, 7, 2)
    assert e.name == "load"
    assert e.is_anonymous is False
    assert e.kind == "arrow"
    assert (e.line, e.column, e.depth, e.signature) == (3, 7, 2, "(url)")


def test_anonymous_entry_is_flagged():
    """Test that a fallback label marks the entry anonymous."""
    e = make_entry("", NameStats(), "()", 0, 0, 1)
    assert e.is_anonymous is True


def test_classification_visibility():
    """Test public, private and unnamed tags."""
    assert classify("run", 1, NameStats()) == (
        "outline-entry-function outline-entry-public outline-entry-depth-1"
    )
    assert classify("_run", 1, NameStats(is_arrow=True)) == (
        "outline-entry-arrow outline-entry-private outline-entry-depth-1"
    )
    assert classify("", 3, NameStats(is_class=True)) == (
        "outline-entry-class outline-entry-unnamed outline-entry-depth-3"
    )


def test_classification_constructor():
    """Test that only methods get the constructor tag."""
    assert "outline-entry-constructor" in classify("constructor", 2, NameStats(is_method=True))
    assert "outline-entry-constructor" not in classify("constructor", 2, NameStats())


def test_classification_depth_bucket():
    """Test that the depth tag is clamped to 8."""
    assert classify("f", 8, NameStats()).endswith("outline-entry-depth-8")
    assert classify("f", 42, NameStats()).endswith("outline-entry-depth-8")
    assert classify("f", 0, NameStats()).endswith("outline-entry-depth-0")


def test_compare_anonymous_first():
    """Test that any anonymous entry sorts before any named one."""
    anon = entry("zzz", anonymous=True)
    named = entry("aaa")
    assert compare_entries(anon, named) == -1
    assert compare_entries(named, anon) == 1
    assert compare_entries(anon, entry("fn", anonymous=True)) == 0


def test_compare_by_code_point():
    """Test lexicographic order of names."""
    assert compare_entries(entry("a"), entry("b")) == -1
    assert compare_entries(entry("b"), entry("a")) == 1
    assert compare_entries(entry("Z"), entry("a")) == -1
    assert compare_entries(entry("same"), entry("same")) == 0


def test_sort_entries():
    """Test alphabetic display order."""
    entries = [entry("b"), entry("a"), entry("fn", anonymous=True)]
    assert [e.name for e in sort_entries(entries)] == ["fn", "a", "b"]


def test_sort_is_stable_for_equal_names():
    """Test that equal names keep document order."""
    entries = [entry("init", line=9), entry("a"), entry("init", line=2)]
    result = sort_entries(entries)
    assert [(e.name, e.line) for e in result] == [("a", 0), ("init", 9), ("init", 2)]


def test_to_dict():
    """Test the output record shape."""
    d = make_entry("f", NameStats(), "(a)", 1, 2, 1).to_dict()
    assert set(d) == {
        "name", "is_anonymous", "line", "column", "depth",
        "kind", "classification", "signature",
    }
