"""Parse JavaScript source into a tree-sitter tree."""

from tree_sitter_language_pack import get_parser

from .languages import ParserOptions, OutlineSpec, DEFAULT_PARSER_OPTIONS, JAVASCRIPT_SPEC


class ParseError(ValueError):
    """Raised when source text does not parse cleanly."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(f"{message} at {line + 1}:{column + 1}")
        self.line = line
        self.column = column


def parse_source(
    text: str,
    options: ParserOptions = DEFAULT_PARSER_OPTIONS,
    spec: OutlineSpec = JAVASCRIPT_SPEC,
):
    """Parse source text and return the tree-sitter tree.

    tree-sitter always produces a tree, recovering from syntax errors by
    inserting ERROR and MISSING nodes. Any such node makes the whole parse
    a failure here.

    Args:
        text: Source code with normalized line endings
        options: Tolerances to enforce on top of the grammar
        spec: Node-kind table for the grammar

    Returns:
        tree_sitter.Tree

    Raises:
        ParseError: Source is malformed or violates one of the options
    """
    source_bytes = text.encode("utf-8")
    parser = get_parser(options.ts_language)
    tree = parser.parse(source_bytes)
    root = tree.root_node

    if root.has_error:
        bad = _first_error(root) or root
        raise ParseError("Syntax error", bad.start_point[0], bad.start_point[1])

    if not options.allow_hash_bang and text.startswith("#!"):
        raise ParseError("Interpreter directive not allowed")

    if not options.allow_return_outside_function or not options.allow_import_export_everywhere:
        _check_placement(root, options, spec)

    return tree


def _first_error(node):
    """Find the first ERROR or MISSING node in document order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found:
                return found
    return None


def _check_placement(root, options: ParserOptions, spec: OutlineSpec) -> None:
    """Reject `return` and module statements the options do not tolerate."""
    stack = [(root, False)]
    while stack:
        node, in_function = stack.pop()

        if node.type == "return_statement" and not in_function:
            if not options.allow_return_outside_function:
                raise ParseError("'return' outside of function", *node.start_point)

        if node.type in ("import_statement", "export_statement"):
            if not options.allow_import_export_everywhere and node.parent.type != root.type:
                raise ParseError(
                    f"'{node.type.split('_')[0]}' may only appear at the top level",
                    *node.start_point,
                )

        if node.type in spec.terminal_node_types:
            continue

        child_in_function = in_function or node.type in spec.function_node_types
        for child in reversed(node.named_children):
            stack.append((child, child_in_function))
