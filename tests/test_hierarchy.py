"""Tests for nesting a flat outline into a tree."""

from jsoutline_mcp.parser import build_outline_tree, get_outline


SOURCE = '''class Shape {
  area() {
    const square = (n) => n * n;
  }
  draw() {}
}

function main() {}
'''


def test_build_outline_tree():
    """Test that entries nest under the closest shallower entry."""
    roots = build_outline_tree(get_outline(SOURCE))

    assert [r.entry.name for r in roots] == ["Shape", "main"]
    shape = roots[0]
    assert [c.entry.name for c in shape.children] == ["area", "draw"]
    assert [c.entry.name for c in shape.children[0].children] == ["square"]
    assert roots[1].children == []


def test_depth_gap_attaches_to_nearest_entry():
    """Test that children of a hidden unnamed function stay nested."""
    source = '''function outer() {
  setTimeout(function () {
    function tick() {}
  }, 0);
}
'''
    entries = get_outline(source, show_unnamed=False)
    assert [(e.name, e.depth) for e in entries] == [("outer", 1), ("tick", 3)]

    roots = build_outline_tree(entries)
    assert len(roots) == 1
    assert [c.entry.name for c in roots[0].children] == ["tick"]


def test_to_dict_includes_children():
    """Test nested dict output."""
    roots = build_outline_tree(get_outline(SOURCE))
    d = roots[0].to_dict()

    assert d["name"] == "Shape"
    assert [c["name"] for c in d["children"]] == ["area", "draw"]
    assert "children" not in roots[1].to_dict()


def test_empty_outline():
    """Test that no entries build no tree."""
    assert build_outline_tree([]) == []
