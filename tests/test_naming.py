"""Tests for name resolution rules and signature formatting."""

from jsoutline_mcp.parser import JAVASCRIPT_SPEC, NAME_RULES, parse_source
from jsoutline_mcp.parser.naming import format_params, member_access_name


def test_rule_order():
    """Test that naming rules run in their documented order."""
    assert [rule.name for rule in NAME_RULES] == [
        "own-identifier",
        "method-key",
        "member-assignment",
        "variable-declarator",
        "property-key",
    ]
    assert [rule.marks_method for rule in NAME_RULES] == [False, True, False, False, False]


def _first_of_type(node, node_type):
    if node.type == node_type:
        return node
    for child in node.named_children:
        found = _first_of_type(child, node_type)
        if found is not None:
            return found
    return None


def _member_name(expression: str) -> str:
    source = f"{expression};"
    tree = parse_source(source)
    stmt = tree.root_node.named_children[0]
    return member_access_name(stmt.named_children[0], source.encode("utf-8"))


def test_member_access_name():
    """Test dotted, computed and unnameable member accesses."""
    assert _member_name("obj.prop") == "obj.prop"
    assert _member_name("obj[prop]") == "obj[prop]"
    assert _member_name("a.b.prop") == "prop"
    assert _member_name("this.prop") == "prop"
    assert _member_name('obj["prop"]') == ""
    assert _member_name("plain") == ""


class _NoParams:
    """A callable-shaped node without any parameter list."""

    def child_by_field_name(self, name):
        return None


def test_missing_parameter_list():
    """Test that an absent parameter list renders as (?)."""
    assert format_params(_NoParams(), b"", JAVASCRIPT_SPEC) == "(?)"


def test_empty_parameter_list():
    """Test that an empty parameter list renders as ()."""
    source = "function f() {}"
    fn = _first_of_type(parse_source(source).root_node, "function_declaration")
    assert format_params(fn, source.encode("utf-8"), JAVASCRIPT_SPEC) == "()"


def test_parameter_comments_are_ignored():
    """Test that comments between parameters are not rendered."""
    source = "function f(a /* first */, b) {}"
    fn = _first_of_type(parse_source(source).root_node, "function_declaration")
    assert format_params(fn, source.encode("utf-8"), JAVASCRIPT_SPEC) == "(a, b)"
