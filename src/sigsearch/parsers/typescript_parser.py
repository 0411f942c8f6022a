import logging
from collections.abc import Iterable

from tree_sitter import Language, Node, Parser, Tree

from sigsearch.models import Declaration, DeclarationError, Position
from sigsearch.parsers.base import BaseParser, SourceParseError
from sigsearch.parsers.matchers import (
    FieldMatcher,
    MemberMatcher,
    NodeMatcher,
    NodeTypeMatcher,
    find_matches,
    walk,
)
from sigsearch.parsers.typescript_types import (
    canonicalize_type,
    node_text,
    normalize_content,
    render_signature,
)

logger = logging.getLogger(__name__)

FUNCTION_NODE_TYPES = ("function_declaration", "function_signature", "generator_function_declaration")
CLASS_MEMBER_TYPES = ("method_definition", "abstract_method_signature")
INTERFACE_MEMBER_TYPES = ("method_signature",)
METHOD_NODE_TYPES = CLASS_MEMBER_TYPES + INTERFACE_MEMBER_TYPES
CLASS_OWNER_TYPES = ("class_declaration", "abstract_class_declaration")
INTERFACE_OWNER_TYPES = ("interface_declaration",)


def default_matchers() -> list[NodeMatcher]:
    """Build the matchers for every declaration shape the extractor understands."""
    return [
        NodeTypeMatcher(*FUNCTION_NODE_TYPES),
        FieldMatcher("variable_declarator", "type", "function_type", through_annotation=True),
        FieldMatcher("variable_declarator", "value", "arrow_function"),
        MemberMatcher(CLASS_MEMBER_TYPES, CLASS_OWNER_TYPES),
        MemberMatcher(INTERFACE_MEMBER_TYPES, INTERFACE_OWNER_TYPES),
    ]


def _position(node: Node) -> Position:
    return Position(line=node.start_point[0], column=node.start_point[1])


class TypeScriptParser(BaseParser):
    """Extracts function-like declarations from TypeScript using tree-sitter.

    Args:
        language: tree-sitter Language for the grammar to parse with
            (TypeScript or TSX)
        matchers: Declaration shapes to look for; defaults to default_matchers()
    """

    def __init__(self, language: Language, matchers: Iterable[NodeMatcher] | None = None):
        self.language = language
        self.parser = Parser(self.language)
        self.matchers = list(matchers) if matchers is not None else default_matchers()

    def parse(self, source_code: bytes) -> Tree:
        """Parse source bytes into a syntax tree.

        Raises:
            SourceParseError: If the source contains syntax errors
        """
        tree = self.parser.parse(source_code)
        if tree.root_node.has_error:
            for node in walk(tree.root_node):
                if node.type == "ERROR" or node.is_missing:
                    text = normalize_content(node_text(node)) or f"missing {node.type}"
                    raise SourceParseError(_position(node), text)
            raise SourceParseError(_position(tree.root_node), "unparseable source")
        return tree

    def extract_outcomes(self, source_code: bytes) -> list[Declaration | DeclarationError]:
        """Extract functions, function-typed bindings and methods from TypeScript.

        Args:
            source_code: TypeScript source bytes

        Returns:
            One Declaration (or DeclarationError) per matched node, in
            pre-order traversal order

        Raises:
            SourceParseError: If the source contains syntax errors
        """
        tree = self.parse(source_code)
        outcomes = []

        for match in find_matches(tree.root_node, self.matchers):
            if not match.captures:
                logger.debug(f"Match for '{match.pattern}' captured no nodes, stopping extraction")
                return []

            outcomes.append(self._build_declaration(match.captures[0]))

        logger.debug(f"Extracted {len(outcomes)} declarations")
        return outcomes

    def _build_declaration(self, node: Node) -> Declaration | DeclarationError:
        if node.type in FUNCTION_NODE_TYPES:
            return self._build_function(node)
        if node.type == "variable_declarator":
            return self._build_binding(node)
        if node.type in METHOD_NODE_TYPES:
            return self._build_method(node)

        return self._error(node, f"unsupported declaration node '{node.type}'")

    def _build_function(self, node: Node) -> Declaration | DeclarationError:
        """Build a Declaration for a function declaration or signature."""
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return self._error(node, "missing name")

        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return self._error(node, "missing parameters")

        return Declaration(
            name=node_text(name_node),
            signature=render_signature(params_node, node.child_by_field_name("return_type")),
            position=_position(node),
        )

    def _build_binding(self, node: Node) -> Declaration | DeclarationError:
        """Build a Declaration for `const f: T = ...` or `const f = (...) => ...`.

        An explicit type annotation wins over the initializer's shape.
        """
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return self._error(node, "missing name")

        type_node = node.child_by_field_name("type")
        if type_node is None:
            type_node = node.child_by_field_name("value")
        if type_node is None:
            return self._error(node, "missing type and value")

        return Declaration(
            name=node_text(name_node),
            signature=canonicalize_type(type_node),
            position=_position(node),
        )

    def _build_method(self, node: Node) -> Declaration | DeclarationError:
        """Build a Declaration named `Owner.method` for a class or interface member."""
        owner = node.parent.parent if node.parent is not None else None
        owner_name_node = owner.child_by_field_name("name") if owner is not None else None
        if owner_name_node is None:
            return self._error(node, "missing owner name")

        name_node = node.child_by_field_name("name")
        if name_node is None:
            return self._error(node, "missing name")

        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return self._error(node, "missing parameters")

        return Declaration(
            name=f"{node_text(owner_name_node)}.{node_text(name_node)}",
            signature=render_signature(params_node, node.child_by_field_name("return_type")),
            position=_position(node),
        )

    def _error(self, node: Node, reason: str) -> DeclarationError:
        return DeclarationError(
            kind=node.type,
            position=_position(node),
            text=normalize_content(node_text(node)),
            reason=reason,
        )
