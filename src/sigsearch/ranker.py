"""Edit-distance ranking of canonical signatures.

This module wraps rapidfuzz's Levenshtein distance to order declaration
signatures by how closely they resemble a query signature.
"""

from rapidfuzz.distance import Levenshtein


class LevenshteinRanker:
    """Ranks a corpus of signature strings by edit distance to a query.

    Attributes:
        signatures: The indexed signature strings, in corpus order.
    """

    def __init__(self, signatures: list[str]):
        """Initialize the ranker with a signature corpus.

        Args:
            signatures: Canonical signatures, in the order they were extracted.

        Examples:
            >>> ranker = LevenshteinRanker(["(number) -> string", "(string) -> void"])
            >>> ranker.search("(string) -> void", k=1)
            [(1, 0)]
        """
        self.signatures = list(signatures)

    def distances(self, query: str) -> list[int]:
        """Return the edit distance from every signature to query, in corpus order."""
        return [Levenshtein.distance(signature, query) for signature in self.signatures]

    def search(self, query: str, k: int = 10) -> list[tuple[int, int]]:
        """Return the k signatures closest to query.

        The query is compared as-is; the empty query ranks signatures by
        length. Ties keep corpus order.

        Args:
            query: Signature-shaped query string, e.g. "(number, number) -> number".
            k: Number of results to return.

        Returns:
            List of (signature_index, distance) tuples sorted by distance
            ascending. At most k entries; empty if k <= 0.

        Examples:
            >>> ranker = LevenshteinRanker(["() -> void", "(a) -> b", "() -> void"])
            >>> ranker.search("", k=2)
            [(1, 8), (0, 10)]
        """
        if k <= 0:
            return []

        indexed_distances = list(enumerate(self.distances(query)))
        # sort() is stable, so equal distances stay in corpus order
        indexed_distances.sort(key=lambda x: x[1])

        return indexed_distances[:k]
