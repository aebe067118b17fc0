"""Get source outline - outline of raw JavaScript text."""

from ..parser import get_outline
from .get_file_outline import format_outline, _normalize_newlines


def get_source_outline(
    content: str,
    show_arguments: bool = True,
    show_unnamed: bool = True,
    sort_alphabetically: bool = False,
    nested: bool = False,
) -> dict:
    """Get the outline of JavaScript source text.

    An empty entry list means either no definitions or unparseable source.
    """
    entries = get_outline(
        _normalize_newlines(content),
        show_arguments=show_arguments,
        show_unnamed=show_unnamed,
        sort_alphabetically=sort_alphabetically,
    )
    return {
        "language": "javascript",
        "entry_count": len(entries),
        "entries": format_outline(entries, sort_alphabetically, nested),
    }
