from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point in a source file (0-indexed line and column)."""
    line: int
    column: int


@dataclass(frozen=True)
class Declaration:
    """A function-like declaration found in a source file."""
    name: str  # Qualified as "Owner.method" for methods
    signature: str  # Canonical "(P1, P2) -> R", or a bare type for non-function bindings
    position: Position

    def format(self, file_path: str) -> str:
        """Render as a single `path:line;  name :: signature` output line."""
        return f"{file_path}:{self.position.line};  {self.name} :: {self.signature}"


@dataclass(frozen=True)
class DeclarationError:
    """A matched declaration node that could not be turned into a Declaration."""
    kind: str  # Syntax node type, e.g. "function_declaration"
    position: Position
    text: str  # Normalized source text of the offending node
    reason: str


@dataclass
class SearchResult:
    """A declaration paired with its edit distance to the query."""
    declaration: Declaration
    distance: int
