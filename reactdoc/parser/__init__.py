"""Tree-sitter backend for reactdoc.

Parses JavaScript, JSX, TypeScript and TSX source into a `SourceTree`
that the classifier and finder navigate.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from tree_sitter import Parser
from tree_sitter_language_pack import get_language

from ..config import detect_language
from ..core.path import SourceTree

# =============================================================================
# Parser Infrastructure
# =============================================================================

_THREAD_LOCAL = threading.local()


def _get_parser(language_name: str) -> Parser:
    """Get or create a thread-local parser for the given language."""
    parsers = getattr(_THREAD_LOCAL, "parsers", None)
    if parsers is None:
        parsers = {}
        _THREAD_LOCAL.parsers = parsers

    parser = parsers.get(language_name)
    if parser is None:
        lang = get_language(language_name)
        parser = Parser()
        if hasattr(parser, "set_language"):
            parser.set_language(lang)
        else:
            parser.language = lang
        parsers[language_name] = parser
    return parser


# =============================================================================
# Core Parsing
# =============================================================================


def parse_source(text: str, *, file_path: Path | str) -> Optional[SourceTree]:
    """Parse source code with tree-sitter.

    Args:
        text: Source code text
        file_path: Path to source file (used for language detection)

    Returns:
        SourceTree or None if the file type is not supported
    """
    language = detect_language(str(file_path))
    if language is None:
        return None

    src = text.encode("utf-8", errors="replace")
    tree = _get_parser(language).parse(src)
    return SourceTree(language=language, src=src, tree=tree)


def parse_file(file_path: Path | str) -> Optional[SourceTree]:
    """Read and parse a source file. Raises OSError if it cannot be read."""
    path = Path(file_path)
    text = path.read_text(encoding="utf-8", errors="replace")
    return parse_source(text, file_path=path)


__all__ = ["parse_file", "parse_source"]
