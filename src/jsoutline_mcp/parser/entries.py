"""OutlineEntry dataclass, classification and ordering."""

import functools
from dataclasses import dataclass, asdict

from .naming import NameStats

MAX_DEPTH_BUCKET = 8
CLASS_PREFIX = "outline-entry-"


@dataclass(frozen=True)
class OutlineEntry:
    """A named construct in a source file's outline."""
    name: str                       # Display name (never empty)
    is_anonymous: bool              # True when `name` is a fallback label
    line: int                       # Body start line (0-indexed)
    column: int                     # Body start column, just inside `{`
    depth: int                      # Nesting level (0 when sorted)
    kind: str                       # "generator" | "arrow" | "class" | "method" | "function"
    classification: str             # Space-separated styling tags
    signature: str = ""             # "(a, b)" or " extends Base"

    def to_dict(self) -> dict:
        return asdict(self)


def entry_kind(stats: NameStats) -> str:
    """Category label for a node shape, in fallback priority order."""
    if stats.is_generator:
        return "generator"
    if stats.is_arrow:
        return "arrow"
    if stats.is_class:
        return "class"
    if stats.is_method:
        return "method"
    return "function"


def classify(name: str, depth: int, stats: NameStats) -> str:
    """Compose the classification tags for an entry.

    Order is kind, visibility, depth bucket, e.g.
    "outline-entry-method outline-entry-constructor outline-entry-public outline-entry-depth-2".
    """
    kind = entry_kind(stats)
    tags = [kind]
    if kind == "method" and name == "constructor":
        tags.append("constructor")

    if not name:
        tags.append("unnamed")
    elif name[0] == "_":
        tags.append("private")
    else:
        tags.append("public")

    tags.append(f"depth-{min(depth, MAX_DEPTH_BUCKET)}")
    return " ".join(CLASS_PREFIX + tag for tag in tags)


def make_entry(
    name: str,
    stats: NameStats,
    signature: str,
    line: int,
    column: int,
    depth: int,
) -> OutlineEntry:
    """Build an entry, substituting the category label for a missing name."""
    kind = entry_kind(stats)
    return OutlineEntry(
        name=name or kind,
        is_anonymous=not name,
        line=line,
        column=column,
        depth=depth,
        kind=kind,
        classification=classify(name, depth, stats),
        signature=signature,
    )


def compare_entries(a: OutlineEntry, b: OutlineEntry) -> int:
    """Alphabetic order with anonymous entries first.

    Equal names compare as 0, so a stable sort keeps document order.
    """
    if a.is_anonymous or b.is_anonymous:
        if a.is_anonymous and b.is_anonymous:
            return 0
        return -1 if a.is_anonymous else 1
    if a.name > b.name:
        return 1
    if a.name < b.name:
        return -1
    return 0


def sort_entries(entries: list[OutlineEntry]) -> list[OutlineEntry]:
    """Return entries in alphabetic display order."""
    return sorted(entries, key=functools.cmp_to_key(compare_entries))
