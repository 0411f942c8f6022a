import pytest
from tree_sitter import Parser

from sigsearch.parsers import typescript_language
from sigsearch.parsers.matchers import (
    FieldMatcher,
    Match,
    MemberMatcher,
    NodeMatcher,
    NodeTypeMatcher,
    find_matches,
    walk,
)


def _parse(source: str):
    parser = Parser(typescript_language())
    return parser.parse(source.encode("utf8")).root_node


def test_cannot_instantiate_node_matcher():
    with pytest.raises(TypeError):
        NodeMatcher()


def test_walk_is_pre_order():
    root = _parse("function a() {}\nfunction b() {}\n")

    types = [node.type for node in walk(root)]

    assert types[0] == "program"
    first = types.index("function_declaration")
    second = types.index("function_declaration", first + 1)
    # Everything inside the first function comes before the second one
    assert types[first + 1:second].count("formal_parameters") == 1


def test_node_type_matcher():
    root = _parse("function a() {}\n")
    matcher = NodeTypeMatcher("function_declaration", "function_signature")

    matches = list(find_matches(root, [matcher]))

    assert len(matches) == 1
    assert matches[0].captures[0].type == "function_declaration"
    assert matches[0].pattern == "function_declaration|function_signature"


def test_field_matcher_through_annotation():
    root = _parse("const f: (x: number) => string = null;\nconst g: number = 1;\n")
    matcher = FieldMatcher("variable_declarator", "type", "function_type", through_annotation=True)

    matches = list(find_matches(root, [matcher]))

    assert len(matches) == 1
    assert matches[0].captures[0].child_by_field_name("name").text == b"f"


def test_field_matcher_direct_field():
    root = _parse("const f = (x: number) => x;\nconst g = 1;\n")
    matcher = FieldMatcher("variable_declarator", "value", "arrow_function")

    matches = list(find_matches(root, [matcher]))

    assert len(matches) == 1
    assert matches[0].captures[0].child_by_field_name("name").text == b"f"


def test_member_matcher_requires_owner_type():
    root = _parse(
        "class A { m(): void {} }\n"
        "const B = class { n(): void {} };\n"
    )
    matcher = MemberMatcher(["method_definition"], ["class_declaration"])

    matches = list(find_matches(root, [matcher]))

    assert len(matches) == 1
    assert matches[0].captures[0].child_by_field_name("name").text == b"m"


def test_find_matches_reports_each_node_once():
    # Both binding shapes match this declarator
    root = _parse("const f: (x: number) => number = (x: number): number => x;\n")
    matchers = [
        FieldMatcher("variable_declarator", "type", "function_type", through_annotation=True),
        FieldMatcher("variable_declarator", "value", "arrow_function"),
    ]

    matches = list(find_matches(root, matchers))

    assert len(matches) == 1
    assert matches[0].pattern == "variable_declarator.type=function_type"


def test_find_matches_in_document_order():
    root = _parse(
        "class A {\n"
        "  m(): void {}\n"
        "}\n"
        "function b() {}\n"
    )
    matchers = [
        NodeTypeMatcher("function_declaration"),
        MemberMatcher(["method_definition"], ["class_declaration"]),
    ]

    matches = list(find_matches(root, matchers))

    assert [m.captures[0].type for m in matches] == ["method_definition", "function_declaration"]


def test_find_matches_accepts_custom_matcher():
    class ProgramMatcher(NodeMatcher):
        pattern = "program"

        def match(self, node):
            if node.type == "program":
                return Match(self.pattern, (node,))
            return None

    root = _parse("let x = 1;\n")

    matches = list(find_matches(root, [ProgramMatcher()]))

    assert len(matches) == 1
    assert matches[0].captures[0].type == "program"
