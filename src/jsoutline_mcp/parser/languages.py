"""Parser options and the JavaScript node-kind table used by the outline walker."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NodeKind(str, Enum):
    """Node kinds the outline walker dispatches on."""
    FUNCTION_DECLARATION = "FunctionDeclaration"
    FUNCTION_EXPRESSION = "FunctionExpression"
    ARROW_FUNCTION = "ArrowFunctionExpression"
    GENERATOR_EXPRESSION = "GeneratorExpression"
    CLASS_DECLARATION = "ClassDeclaration"
    METHOD_DEFINITION = "MethodDefinition"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    ASSIGNMENT_PATTERN = "AssignmentPattern"
    PROPERTY = "Property"
    CALL_EXPRESSION = "CallExpression"


@dataclass(frozen=True)
class ParserOptions:
    """Tolerances applied on top of the grammar when parsing source."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str = "javascript"

    # `return` at program level
    allow_return_outside_function: bool = True

    # `import` / `export` statements nested below the program
    allow_import_export_everywhere: bool = True

    # Leading `#!/usr/bin/env node` line
    allow_hash_bang: bool = True


DEFAULT_PARSER_OPTIONS = ParserOptions()


@dataclass
class OutlineSpec:
    """Specification for mapping a grammar's node types onto outline kinds."""
    # Maps tree-sitter node_type -> NodeKind
    node_kinds: dict[str, NodeKind]

    # Kinds that produce outline entries and open a new depth level
    displayed_kinds: frozenset[NodeKind]

    # Node types that can never contain a definition
    terminal_node_types: frozenset[str]

    # Node types that count as a function boundary for `return`
    function_node_types: frozenset[str]

    # Node types that hold the superclass expression of a class
    heritage_node_type: str

    # Parameter node types that carry a simple bound name
    simple_param_types: frozenset[str]

    # Maps (node_type, parent node_type) -> NodeKind where context changes the kind
    contextual_kinds: dict[tuple[str, str], NodeKind]

    def kind_of(self, node) -> Optional[NodeKind]:
        """Return the walker kind for a node, or None for the default arm."""
        if not node.is_named:
            return None
        if node.parent is not None:
            kind = self.contextual_kinds.get((node.type, node.parent.type))
            if kind is not None:
                return kind
        return self.node_kinds.get(node.type)


# JavaScript specification
JAVASCRIPT_SPEC = OutlineSpec(
    node_kinds={
        "function_declaration": NodeKind.FUNCTION_DECLARATION,
        "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
        "function_expression": NodeKind.FUNCTION_EXPRESSION,
        # tree-sitter-javascript < 0.21 named function expressions "function"
        "function": NodeKind.FUNCTION_EXPRESSION,
        "generator_function": NodeKind.GENERATOR_EXPRESSION,
        "arrow_function": NodeKind.ARROW_FUNCTION,
        "class_declaration": NodeKind.CLASS_DECLARATION,
        "method_definition": NodeKind.METHOD_DEFINITION,
        "variable_declaration": NodeKind.VARIABLE_DECLARATION,
        "lexical_declaration": NodeKind.VARIABLE_DECLARATION,
        "variable_declarator": NodeKind.VARIABLE_DECLARATOR,
        "assignment_expression": NodeKind.ASSIGNMENT_EXPRESSION,
        "augmented_assignment_expression": NodeKind.ASSIGNMENT_EXPRESSION,
        "assignment_pattern": NodeKind.ASSIGNMENT_PATTERN,
        "pair": NodeKind.PROPERTY,
        "call_expression": NodeKind.CALL_EXPRESSION,
    },
    displayed_kinds=frozenset({
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.ARROW_FUNCTION,
        NodeKind.GENERATOR_EXPRESSION,
        NodeKind.CLASS_DECLARATION,
        NodeKind.METHOD_DEFINITION,
    }),
    terminal_node_types=frozenset({
        "comment",
        "hash_bang_line",
        "identifier",
        "property_identifier",
        "private_property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "statement_identifier",
        "string",
        "number",
        "regex",
        "true",
        "false",
        "null",
        "undefined",
        "this",
        "super",
    }),
    function_node_types=frozenset({
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
        "generator_function",
        "arrow_function",
        "method_definition",
    }),
    heritage_node_type="class_heritage",
    simple_param_types=frozenset({"identifier"}),
    contextual_kinds={
        # `export default class extends B {}` parses as a class expression
        ("class", "export_statement"): NodeKind.CLASS_DECLARATION,
    },
)


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}
