"""Build a nested outline tree from a flat, depth-annotated entry list."""

from dataclasses import dataclass, field

from .entries import OutlineEntry


@dataclass
class OutlineNode:
    """A node in the outline tree with children."""
    entry: OutlineEntry
    children: list["OutlineNode"] = field(default_factory=list)

    def to_dict(self) -> dict:
        result = self.entry.to_dict()
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result


def build_outline_tree(entries: list[OutlineEntry]) -> list[OutlineNode]:
    """Build a hierarchical tree from a flat entry list in document order.

    Each entry becomes a child of the closest preceding entry with a
    smaller depth. Depth gaps (left by hidden unnamed parents) attach to
    the nearest shallower entry.
    Returns top-level nodes.
    """
    roots: list[OutlineNode] = []
    stack: list[OutlineNode] = []

    for entry in entries:
        node = OutlineNode(entry=entry)
        while stack and stack[-1].entry.depth >= entry.depth:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)

    return roots

