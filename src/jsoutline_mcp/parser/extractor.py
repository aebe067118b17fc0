"""Outline extraction over a tree-sitter JavaScript tree."""

from dataclasses import dataclass, field

from ..logger import logger
from .adapter import ParseError, parse_source
from .entries import OutlineEntry, make_entry
from .languages import NodeKind, OutlineSpec, ParserOptions, DEFAULT_PARSER_OPTIONS, JAVASCRIPT_SPEC
from .naming import NameContext, resolve_name, compute_stats, format_params, format_superclass


@dataclass
class _OutlineWalk:
    """Settings and output list for a single traversal."""
    spec: OutlineSpec
    source_bytes: bytes
    show_arguments: bool
    show_unnamed: bool
    sort_alphabetically: bool
    output: list[OutlineEntry] = field(default_factory=list)


def get_outline(
    text: str,
    show_arguments: bool = True,
    show_unnamed: bool = True,
    sort_alphabetically: bool = False,
    options: ParserOptions = DEFAULT_PARSER_OPTIONS,
    spec: OutlineSpec = JAVASCRIPT_SPEC,
) -> list[OutlineEntry]:
    """Extract outline entries from source text, in document order.

    Malformed source, or a failure anywhere in the traversal, yields an
    empty list; no partial outline is ever returned.

    Args:
        text: Source code with normalized line endings
        show_arguments: Render parameter lists as signatures
        show_unnamed: Emit entries for constructs with no recoverable name
        sort_alphabetically: Caller will sort; depths are flattened to 0
        options: Parser tolerances
        spec: Node-kind table for the grammar

    Returns:
        List of OutlineEntry objects
    """
    try:
        tree = parse_source(text, options, spec)
    except ParseError as e:
        logger.debug("Source did not parse, outline is empty", error=str(e))
        return []

    walk = _OutlineWalk(
        spec=spec,
        source_bytes=text.encode("utf-8"),
        show_arguments=show_arguments,
        show_unnamed=show_unnamed,
        sort_alphabetically=sort_alphabetically,
    )

    try:
        _walk_tree(tree.root_node, walk, (), 1)
    except Exception as e:
        logger.warning("Outline traversal failed", error=str(e), exc_info=True)
        return []

    return walk.output


def _walk_tree(node, walk: _OutlineWalk, ancestors: tuple, depth: int) -> None:
    """Recursively walk the tree, dispatching on node kind.

    `ancestors` holds only visited nodes, so its last item is the nearest
    ancestor that can lend a name to a definition.
    """
    kind = walk.spec.kind_of(node)

    if kind is None or kind == NodeKind.VARIABLE_DECLARATOR:
        if node.type in walk.spec.terminal_node_types:
            return
        for child in node.named_children:
            _walk_tree(child, walk, ancestors, depth)
    elif kind == NodeKind.VARIABLE_DECLARATION:
        _walk_declaration(node, walk, ancestors, depth)
    else:
        _visit_node(node, kind, walk, ancestors, depth)


def _walk_declaration(node, walk: _OutlineWalk, ancestors: tuple, depth: int) -> None:
    """Walk `var a = ..., b = ...` with each declarator as the visible parent."""
    for child in node.named_children:
        if walk.spec.kind_of(child) != NodeKind.VARIABLE_DECLARATOR:
            _walk_tree(child, walk, ancestors, depth)
            continue
        inner = ancestors + (child,)
        for part in child.named_children:
            _walk_tree(part, walk, inner, depth)


def _visit_node(node, kind: NodeKind, walk: _OutlineWalk, ancestors: tuple, depth: int) -> None:
    """Emit an entry for a displayed node, then descend with it as parent."""
    if kind in walk.spec.displayed_kinds:
        entry = _extract_entry(node, kind, walk, ancestors, depth)
        if entry is not None:
            walk.output.append(entry)
        depth += 1

    inner = ancestors + (node,)
    for child in node.named_children:
        _walk_tree(child, walk, inner, depth)


def _extract_entry(node, kind: NodeKind, walk: _OutlineWalk, ancestors: tuple, depth: int):
    """Build the OutlineEntry for a displayed node, or None when it stays hidden."""
    spec = walk.spec

    if kind == NodeKind.METHOD_DEFINITION:
        # tree-sitter folds the method wrapper and its function into one
        # node, so a method is its own naming parent.
        parent = node
        in_class = node.parent is not None and node.parent.type == "class_body"
        parent_kind = NodeKind.METHOD_DEFINITION if in_class else NodeKind.PROPERTY
    elif ancestors:
        parent = ancestors[-1]
        parent_kind = spec.kind_of(parent)
        if parent_kind == NodeKind.METHOD_DEFINITION:
            # Functions nested in a method body see the method as a plain
            # function; only the method itself takes its key.
            parent_kind = NodeKind.FUNCTION_EXPRESSION
    else:
        parent = None
        parent_kind = None

    ctx = NameContext(
        node=node,
        kind=kind,
        parent=parent,
        parent_kind=parent_kind,
        source_bytes=walk.source_bytes,
    )
    name, is_method = resolve_name(ctx)
    if not (walk.show_unnamed or name):
        return None

    stats = compute_stats(ctx, is_method)
    if stats.is_class:
        signature = format_superclass(node, walk.source_bytes, spec)
    elif walk.show_arguments:
        signature = format_params(node, walk.source_bytes, spec)
    else:
        signature = ""

    body = node.child_by_field_name("body")
    if body is None:
        raise ValueError(f"{node.type} at line {node.start_point[0] + 1} has no body")
    line, column = _body_position(body, walk.source_bytes)

    return make_entry(
        name,
        stats,
        signature,
        line,
        column,
        0 if walk.sort_alphabetically else depth,
    )


def _body_position(body, source_bytes: bytes) -> tuple[int, int]:
    """Zero-based (line, column) just inside a body's opening brace."""
    line = body.start_point[0]
    line_start = source_bytes.rfind(b"\n", 0, body.start_byte) + 1
    column = len(source_bytes[line_start:body.start_byte].decode("utf-8"))
    if source_bytes[body.start_byte:body.start_byte + 1] == b"{":
        column += 1
    return line, column
