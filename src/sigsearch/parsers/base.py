from abc import ABC, abstractmethod

from sigsearch.models import Declaration, DeclarationError, Position


class SourceParseError(ValueError):
    """Raised when source text cannot be parsed into a clean syntax tree."""

    def __init__(self, position: Position, text: str):
        self.position = position
        self.text = text
        super().__init__(
            f"Syntax error at line {position.line}, column {position.column}: {text!r}"
        )


class MalformedDeclarationError(ValueError):
    """Raised when a matched declaration node lacks a field the extractor requires."""

    def __init__(self, error: DeclarationError):
        self.error = error
        super().__init__(
            f"Can't parse node {error.text} ({error.reason} at line {error.position.line})"
        )


class BaseParser(ABC):
    """Abstract base class for language-specific declaration parsers."""

    @abstractmethod
    def extract_outcomes(self, source_code: bytes) -> list[Declaration | DeclarationError]:
        """Extract one outcome per matched declaration node, in source order.

        Args:
            source_code: Raw bytes of the source file

        Returns:
            List of Declaration objects, with a DeclarationError in place of
            every matched node that could not be extracted
        """
        pass

    def extract_declarations(self, source_code: bytes) -> list[Declaration]:
        """Extract all declarations, failing on the first malformed one.

        Raises:
            MalformedDeclarationError: If any matched node is malformed
        """
        declarations = []
        for outcome in self.extract_outcomes(source_code):
            if isinstance(outcome, DeclarationError):
                raise MalformedDeclarationError(outcome)
            declarations.append(outcome)
        return declarations
