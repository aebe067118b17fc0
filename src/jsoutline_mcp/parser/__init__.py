"""Parser package for extracting outline entries from JavaScript source."""

from .languages import NodeKind, ParserOptions, OutlineSpec, DEFAULT_PARSER_OPTIONS, JAVASCRIPT_SPEC, LANGUAGE_EXTENSIONS
from .adapter import ParseError, parse_source
from .naming import NameStats, NameRule, NAME_RULES, resolve_name
from .entries import OutlineEntry, make_entry, classify, compare_entries, sort_entries
from .extractor import get_outline
from .hierarchy import OutlineNode, build_outline_tree

__all__ = [
    "NodeKind",
    "ParserOptions",
    "OutlineSpec",
    "DEFAULT_PARSER_OPTIONS",
    "JAVASCRIPT_SPEC",
    "LANGUAGE_EXTENSIONS",
    "ParseError",
    "parse_source",
    "NameStats",
    "NameRule",
    "NAME_RULES",
    "resolve_name",
    "OutlineEntry",
    "make_entry",
    "classify",
    "compare_entries",
    "sort_entries",
    "get_outline",
    "OutlineNode",
    "build_outline_tree",
]
