"""Structural node matching over tree-sitter syntax trees.

A NodeMatcher tests a single node against one declaration shape. find_matches
walks a tree in pre-order and reports, for every node, the first matcher that
accepts it, so matches come out in document order and no node is reported
twice.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tree_sitter import Node


@dataclass(frozen=True)
class Match:
    """A matcher hit: the pattern that fired and the nodes it captured."""
    pattern: str
    captures: tuple[Node, ...]


class NodeMatcher(ABC):
    """Tests whether a syntax node has a particular declaration shape."""

    pattern: str = ""

    @abstractmethod
    def match(self, node: Node) -> Match | None:
        """Return a Match if node has this matcher's shape, otherwise None."""
        pass


class NodeTypeMatcher(NodeMatcher):
    """Matches any node whose type is one of the given node types."""

    def __init__(self, *node_types: str):
        self.node_types = frozenset(node_types)
        self.pattern = "|".join(node_types)

    def match(self, node: Node) -> Match | None:
        if node.type in self.node_types:
            return Match(self.pattern, (node,))
        return None


class FieldMatcher(NodeMatcher):
    """Matches a node of a given type whose field holds a node of a given type.

    If through_annotation is set, the field must hold a type_annotation whose
    inner type has the expected node type, e.g. `x: (a: number) => void`.
    """

    def __init__(self, node_type: str, field: str, field_type: str, through_annotation: bool = False):
        self.node_type = node_type
        self.field = field
        self.field_type = field_type
        self.through_annotation = through_annotation
        self.pattern = f"{node_type}.{field}={field_type}"

    def match(self, node: Node) -> Match | None:
        if node.type != self.node_type:
            return None

        child = node.child_by_field_name(self.field)
        if child is None:
            return None

        if self.through_annotation:
            if child.type != "type_annotation" or not child.named_children:
                return None
            child = child.named_children[0]

        if child.type == self.field_type:
            return Match(self.pattern, (node,))
        return None


class MemberMatcher(NodeMatcher):
    """Matches member nodes whose grandparent is a named owning declaration.

    Class and interface members sit inside a body node, so the owner is two
    levels up: method_definition -> class_body -> class_declaration.
    """

    def __init__(self, member_types: Iterable[str], owner_types: Iterable[str]):
        self.member_types = frozenset(member_types)
        self.owner_types = frozenset(owner_types)
        self.pattern = f"{'|'.join(sorted(self.owner_types))} > {'|'.join(sorted(self.member_types))}"

    def match(self, node: Node) -> Match | None:
        if node.type not in self.member_types:
            return None

        body = node.parent
        owner = body.parent if body is not None else None
        if owner is not None and owner.type in self.owner_types:
            return Match(self.pattern, (node,))
        return None


def walk(root: Node) -> Iterator[Node]:
    """Yield every node of the tree rooted at root in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find_matches(root: Node, matchers: Iterable[NodeMatcher]) -> Iterator[Match]:
    """Yield matches for all nodes under root, in document order.

    Each node yields at most one match: the first matcher that accepts it.
    """
    matchers = list(matchers)
    for node in walk(root):
        for matcher in matchers:
            match = matcher.match(node)
            if match is not None:
                yield match
                break
