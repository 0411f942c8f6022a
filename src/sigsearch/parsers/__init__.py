from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language

from sigsearch.parsers.base import BaseParser
from sigsearch.parsers.typescript_parser import TypeScriptParser

TSX_SUFFIXES = (".tsx",)


def typescript_language() -> Language:
    """Load the tree-sitter TypeScript grammar."""
    return Language(tree_sitter_typescript.language_typescript())


def tsx_language() -> Language:
    """Load the tree-sitter TSX grammar (TypeScript with JSX)."""
    return Language(tree_sitter_typescript.language_tsx())


def get_parser_for_file(file_path: Path) -> BaseParser:
    """Return a parser constructed with the grammar for the file.

    `.tsx` files get the TSX grammar; every other path is parsed as
    TypeScript, whatever its suffix.

    Args:
        file_path: Path of the source file; only its suffix is inspected
    """
    if file_path.suffix.lower() in TSX_SUFFIXES:
        return TypeScriptParser(tsx_language())

    return TypeScriptParser(typescript_language())
