"""Get file outline - functions, classes and methods in a single file."""

from pathlib import Path

from ..parser import LANGUAGE_EXTENSIONS, OutlineEntry, build_outline_tree, get_outline, sort_entries


def format_outline(
    entries: list[OutlineEntry],
    sort_alphabetically: bool = False,
    nested: bool = False,
) -> list[dict]:
    """Convert entries to output dicts.

    Sorted outlines are always flat; depth is meaningless once reordered.
    """
    if sort_alphabetically:
        return [e.to_dict() for e in sort_entries(entries)]
    if nested:
        return [n.to_dict() for n in build_outline_tree(entries)]
    return [e.to_dict() for e in entries]


def get_file_outline(
    file_path: str,
    show_arguments: bool = True,
    show_unnamed: bool = True,
    sort_alphabetically: bool = False,
    nested: bool = False,
) -> dict:
    """Get the outline of a JavaScript file on disk.

    Args:
        file_path: Path to the file (supports ~ for home directory)
        show_arguments: Include parameter lists in signatures
        show_unnamed: Include constructs with no recoverable name
        sort_alphabetically: Return entries in alphabetic order
        nested: Return entries as a tree (ignored when sorting)

    Returns:
        Dict with outline entries, or an "error" key
    """
    path = Path(file_path).expanduser().resolve()

    if not path.exists():
        return {"error": f"File not found: {file_path}"}

    if not path.is_file():
        return {"error": f"Path is not a file: {file_path}"}

    language = LANGUAGE_EXTENSIONS.get(path.suffix)
    if not language:
        return {"error": f"Unsupported file type: {path.suffix or file_path}"}

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return {"error": f"Failed to read {file_path}: {e}"}

    entries = get_outline(
        _normalize_newlines(content),
        show_arguments=show_arguments,
        show_unnamed=show_unnamed,
        sort_alphabetically=sort_alphabetically,
    )

    return {
        "file": str(path),
        "language": language,
        "entry_count": len(entries),
        "entries": format_outline(entries, sort_alphabetically, nested),
    }


def _normalize_newlines(content: str) -> str:
    """Convert CRLF and CR line endings to LF."""
    return content.replace("\r\n", "\n").replace("\r", "\n")
