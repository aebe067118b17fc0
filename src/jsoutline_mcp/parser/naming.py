"""Display-name and signature recovery for outline entries.

Names are recovered purely from syntax: a construct's own identifier, or
the shape of the nearest visited ancestor (method wrapper, member
assignment, variable declarator, object property).
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .languages import NodeKind, OutlineSpec

MEMBER_PROPERTY_TYPES = ("property_identifier", "private_property_identifier", "identifier")
KEY_TYPES = ("property_identifier", "private_property_identifier")


def node_text(node, source_bytes: bytes) -> str:
    """Return the source text covered by a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8")


@dataclass(frozen=True)
class NameStats:
    """Shape flags for a displayed node."""
    is_generator: bool = False
    is_arrow: bool = False
    is_class: bool = False
    is_method: bool = False


@dataclass(frozen=True)
class NameContext:
    """A displayed node together with its nearest visited ancestor."""
    node: object
    kind: NodeKind
    parent: Optional[object]
    parent_kind: Optional[NodeKind]
    source_bytes: bytes

    def text(self, node) -> str:
        return node_text(node, self.source_bytes)


@dataclass(frozen=True)
class NameRule:
    """One naming rule: when `applies` holds, `extract` replaces the name."""
    name: str
    applies: Callable[[NameContext, str], bool]
    extract: Callable[[NameContext], str]
    marks_method: bool = False


def member_access_name(node, source_bytes: bytes) -> str:
    """Name a member access as `object.property` or `object[property]`.

    Returns the bare property name when the object is not a simple
    identifier, and "" when the property itself has no simple name.
    """
    if node.type == "member_expression":
        prop = node.child_by_field_name("property")
        computed = False
    elif node.type == "subscript_expression":
        prop = node.child_by_field_name("index")
        computed = True
    else:
        return ""

    if prop is None or prop.type not in MEMBER_PROPERTY_TYPES:
        return ""

    name = node_text(prop, source_bytes)
    obj = node.child_by_field_name("object")
    if obj is not None and obj.type == "identifier":
        obj_name = node_text(obj, source_bytes)
        if computed:
            return f"{obj_name}[{name}]"
        return f"{obj_name}.{name}"
    return name


def _own_identifier(ctx: NameContext) -> str:
    ident = ctx.node.child_by_field_name("name")
    if ident is not None and ident.type == "identifier":
        return ctx.text(ident)
    return ""


def _wrapper_key(ctx: NameContext) -> str:
    key = ctx.parent.child_by_field_name("key")
    if key is None:
        # method_definition keeps its key under "name"
        key = ctx.parent.child_by_field_name("name")
    if key is not None and key.type in KEY_TYPES:
        return ctx.text(key)
    return ""


def _assignment_target(ctx: NameContext) -> str:
    left = ctx.parent.child_by_field_name("left")
    if left is None:
        return ""
    return member_access_name(left, ctx.source_bytes)


def _declarator_binding(ctx: NameContext) -> str:
    binding = ctx.parent.child_by_field_name("name")
    if binding is not None and binding.type == "identifier":
        return ctx.text(binding)
    return ""


# Evaluated in order; every matching rule overwrites the name so far.
NAME_RULES: tuple[NameRule, ...] = (
    NameRule(
        name="own-identifier",
        applies=lambda ctx, name: ctx.kind != NodeKind.METHOD_DEFINITION,
        extract=_own_identifier,
    ),
    NameRule(
        name="method-key",
        applies=lambda ctx, name: ctx.parent_kind == NodeKind.METHOD_DEFINITION,
        extract=_wrapper_key,
        marks_method=True,
    ),
    NameRule(
        name="member-assignment",
        applies=lambda ctx, name: (
            ctx.parent_kind == NodeKind.ASSIGNMENT_EXPRESSION and bool(_assignment_target(ctx))
        ),
        extract=_assignment_target,
    ),
    NameRule(
        name="variable-declarator",
        applies=lambda ctx, name: ctx.parent_kind == NodeKind.VARIABLE_DECLARATOR,
        extract=_declarator_binding,
    ),
    NameRule(
        name="property-key",
        applies=lambda ctx, name: not name and ctx.parent_kind == NodeKind.PROPERTY,
        extract=_wrapper_key,
    ),
)


def resolve_name(ctx: NameContext, rules: tuple[NameRule, ...] = NAME_RULES) -> tuple[str, bool]:
    """Run the naming rules over a node.

    Returns:
        (name, is_method); name is "" when no rule recovered one
    """
    name = ""
    is_method = False
    for rule in rules:
        if rule.applies(ctx, name):
            name = rule.extract(ctx)
            is_method = is_method or rule.marks_method
    return name, is_method


def compute_stats(ctx: NameContext, is_method: bool) -> NameStats:
    """Classify a displayed node's shape."""
    if ctx.kind == NodeKind.CLASS_DECLARATION:
        return NameStats(is_class=True)
    is_generator = any(
        not child.is_named and child.type == "*" for child in ctx.node.children
    )
    return NameStats(
        is_generator=is_generator,
        is_arrow=ctx.kind == NodeKind.ARROW_FUNCTION,
        is_method=is_method,
    )


def format_params(node, source_bytes: bytes, spec: OutlineSpec) -> str:
    """Render a callable's parameter list, e.g. `(a, ?, c)`."""
    params = node.child_by_field_name("parameters")
    if params is not None:
        items = [p for p in params.named_children if p.type != "comment"]
    else:
        # Arrow functions with a single bare parameter: `x => x`
        single = node.child_by_field_name("parameter")
        if single is None:
            return "(?)"
        items = [single]

    names = [
        node_text(p, source_bytes) if p.type in spec.simple_param_types else "?"
        for p in items
    ]
    return "(" + ", ".join(names) + ")"


def format_superclass(node, source_bytes: bytes, spec: OutlineSpec) -> str:
    """Render a class's ` extends X` clause, or "" without a superclass."""
    heritage = next(
        (c for c in node.named_children if c.type == spec.heritage_node_type), None
    )
    if heritage is None:
        return ""

    expr = next((c for c in heritage.named_children if c.type != "comment"), None)
    if expr is None:
        return ""

    if expr.type == "identifier":
        name = node_text(expr, source_bytes)
    else:
        # `class A extends require("./base")` and the like
        name = member_access_name(expr, source_bytes) or "<expression>"
    return f" extends {name}"
