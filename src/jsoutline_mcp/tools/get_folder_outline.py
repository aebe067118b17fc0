"""Get folder outline - walk a local folder and outline every JavaScript file."""

import os
from pathlib import Path

from ..logger import logger
from ..parser import LANGUAGE_EXTENSIONS, get_outline
from .get_file_outline import format_outline, _normalize_newlines


# Directories never descended into
SKIP_DIRS = frozenset({
    "node_modules", "bower_components", "vendor", ".git",
    "dist", "build", "coverage", ".next", ".nuxt", "generated",
})

# Bundler output that happens to carry a JavaScript extension
SKIP_SUFFIXES = (".min.js", ".bundle.js", ".chunk.js")

# Preferred top-level folders when over the file limit
PRIORITY_DIRS = ("src", "lib", "app")


def should_skip_file(path: str) -> bool:
    """Check whether a relative path is not worth outlining.

    A path is skipped when any directory component is in SKIP_DIRS, when
    it is bundler output, or when it is not a JavaScript file.
    """
    parts = path.replace("\\", "/").split("/")
    if any(part in SKIP_DIRS for part in parts[:-1]):
        return True
    filename = parts[-1]
    if filename.endswith(SKIP_SUFFIXES):
        return True
    return os.path.splitext(filename)[1] not in LANGUAGE_EXTENSIONS


def _priority_key(rel_path: str) -> tuple:
    top, _, rest = rel_path.partition("/")
    if rest and top in PRIORITY_DIRS:
        rank = PRIORITY_DIRS.index(top)
    else:
        rank = len(PRIORITY_DIRS)
    return (rank, rel_path.count("/"), rel_path)


def discover_local_files(
    folder_path: Path,
    max_files: int = 500,
    max_size: int = 500 * 1024,  # 500KB
) -> list[Path]:
    """Discover JavaScript files in a local folder.

    Skipped directories are pruned during the walk, so large dependency
    trees are never listed.

    Args:
        folder_path: Root folder to scan
        max_files: Maximum number of files to outline
        max_size: Maximum file size in bytes

    Returns:
        List of Path objects, preferring src/, lib/ and app/ when over
        the limit
    """
    candidates = []

    for dirpath, dirnames, filenames in os.walk(folder_path):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        rel_dir = Path(dirpath).relative_to(folder_path).as_posix()

        for filename in filenames:
            rel_path = filename if rel_dir == "." else f"{rel_dir}/{filename}"
            if should_skip_file(rel_path):
                continue
            file_path = Path(dirpath) / filename
            try:
                if not file_path.is_file() or file_path.stat().st_size > max_size:
                    continue
            except OSError:
                continue
            candidates.append(rel_path)

    candidates.sort(key=_priority_key if len(candidates) > max_files else None)
    return [folder_path / rel_path for rel_path in candidates[:max_files]]


def get_folder_outline(
    path: str,
    show_arguments: bool = True,
    show_unnamed: bool = True,
    sort_alphabetically: bool = False,
    nested: bool = False,
    max_files: int = 500,
) -> dict:
    """Outline every JavaScript file in a local folder.

    Args:
        path: Path to local folder (absolute or relative, supports ~)
        show_arguments: Include parameter lists in signatures
        show_unnamed: Include constructs with no recoverable name
        sort_alphabetically: Return each file's entries in alphabetic order
        nested: Return each file's entries as a tree (ignored when sorting)
        max_files: Maximum number of files to outline

    Returns:
        Dict mapping relative file paths to their outlines
    """
    folder_path = Path(path).expanduser().resolve()

    if not folder_path.exists():
        return {"error": f"Folder not found: {path}"}

    if not folder_path.is_dir():
        return {"error": f"Path is not a directory: {path}"}

    source_files = discover_local_files(folder_path, max_files=max_files)
    if not source_files:
        return {"error": "No JavaScript files found"}

    warnings = []
    outlines = {}
    empty_files = []

    for file_path in source_files:
        rel_path = file_path.relative_to(folder_path).as_posix()
        try:
            content = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            warnings.append(f"Failed to read {rel_path}: {e}")
            continue

        entries = get_outline(
            _normalize_newlines(content),
            show_arguments=show_arguments,
            show_unnamed=show_unnamed,
            sort_alphabetically=sort_alphabetically,
        )
        if not entries:
            empty_files.append(rel_path)
        outlines[rel_path] = format_outline(entries, sort_alphabetically, nested)

    logger.debug(
        "Outlined folder",
        folder=str(folder_path),
        file_count=len(outlines),
        empty_count=len(empty_files),
    )

    result = {
        "folder_path": str(folder_path),
        "file_count": len(outlines),
        "entry_count": sum(_count_entries(v) for v in outlines.values()),
        "files": outlines,
    }

    if empty_files:
        # No definitions, or source that does not parse
        result["empty_files"] = empty_files

    if warnings:
        result["warnings"] = warnings

    if len(source_files) >= max_files:
        result["note"] = f"Folder has many files; outlined first {max_files}"

    return result


def _count_entries(items: list[dict]) -> int:
    return sum(1 + _count_entries(item.get("children", [])) for item in items)
