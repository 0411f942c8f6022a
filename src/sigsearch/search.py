"""Signature search over a single TypeScript file.

Reads the file, extracts its function-like declarations and ranks them by
edit distance between their canonical signatures and the query.
"""

import logging
from pathlib import Path

from sigsearch.config import SearchConfig, load_search_config
from sigsearch.models import Declaration, DeclarationError, SearchResult
from sigsearch.parsers import get_parser_for_file
from sigsearch.ranker import LevenshteinRanker

logger = logging.getLogger(__name__)


def list_declarations(file_path: str | Path, skip_malformed: bool = False) -> list[Declaration]:
    """Extract every declaration from a source file, in source order.

    Args:
        file_path: Path to the TypeScript file.
        skip_malformed: Log and drop malformed declarations instead of failing.

    Returns:
        List of Declaration objects in document order.

    Raises:
        OSError: If the file cannot be read.
        SourceParseError: If the file has syntax errors.
        MalformedDeclarationError: If a declaration is malformed and
            skip_malformed is False.
    """
    path = Path(file_path)

    parser = get_parser_for_file(path)
    source_code = path.read_bytes()

    if not skip_malformed:
        return parser.extract_declarations(source_code)

    declarations = []
    for outcome in parser.extract_outcomes(source_code):
        if isinstance(outcome, DeclarationError):
            logger.warning(
                f"Skipping malformed {outcome.kind} at {file_path}:{outcome.position.line} "
                f"({outcome.reason}): {outcome.text}"
            )
            continue
        declarations.append(outcome)

    return declarations


def rank_declarations(declarations: list[Declaration], query: str, k: int = 10) -> list[SearchResult]:
    """Rank declarations by edit distance to query and return the top k.

    Declarations with equal distance keep their relative order.
    """
    ranker = LevenshteinRanker([declaration.signature for declaration in declarations])
    return [
        SearchResult(declaration=declarations[idx], distance=distance)
        for idx, distance in ranker.search(query, k=k)
    ]


def search_signatures(
    file_path: str | Path,
    query: str,
    config: SearchConfig | None = None,
    skip_malformed: bool = False,
) -> list[SearchResult]:
    """Search a file's declarations for signatures resembling query.

    Args:
        file_path: Path to the TypeScript file.
        query: Signature-shaped query, e.g. "(number, number) -> number".
        config: Search configuration. If None, loads from .sigsearch file.
        skip_malformed: Log and drop malformed declarations instead of failing.

    Returns:
        Up to config.k SearchResult objects, closest first.

    Examples:
        >>> results = search_signatures("src/math.ts", "(number, number) -> number")
        >>> for result in results:
        ...     print(result.declaration.format("src/math.ts"))
    """
    if config is None:
        config = load_search_config()

    declarations = list_declarations(file_path, skip_malformed=skip_malformed)
    logger.info(f"Ranking {len(declarations)} declarations from {file_path}")

    return rank_declarations(declarations, query, k=config.k)
