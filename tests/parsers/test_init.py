from pathlib import Path

from sigsearch.parsers import get_parser_for_file
from sigsearch.parsers.typescript_parser import TypeScriptParser


def test_get_parser_for_typescript_file():
    parser = get_parser_for_file(Path("test.ts"))

    assert parser is not None
    assert isinstance(parser, TypeScriptParser)


def test_get_parser_for_uppercase_extension():
    parser = get_parser_for_file(Path("test.TS"))

    assert parser is not None
    assert isinstance(parser, TypeScriptParser)


def test_get_parser_for_module_typescript_files():
    assert isinstance(get_parser_for_file(Path("test.mts")), TypeScriptParser)
    assert isinstance(get_parser_for_file(Path("test.cts")), TypeScriptParser)


def test_get_parser_for_declaration_file():
    parser = get_parser_for_file(Path("index.d.ts"))

    assert isinstance(parser, TypeScriptParser)


def test_get_parser_for_tsx_file():
    parser = get_parser_for_file(Path("component.tsx"))

    assert isinstance(parser, TypeScriptParser)


def test_tsx_parser_understands_jsx():
    parser = get_parser_for_file(Path("component.tsx"))
    source = b"const C = (props: Props): JSX.Element => <div>{props.x}</div>;\n"

    declarations = parser.extract_declarations(source)

    assert len(declarations) == 1
    assert declarations[0].name == "C"
    assert declarations[0].signature == "(Props) -> JSX.Element"


def test_get_parser_for_other_suffix_uses_typescript():
    parser = get_parser_for_file(Path("test.txt"))

    assert isinstance(parser, TypeScriptParser)


def test_get_parser_for_javascript_file():
    parser = get_parser_for_file(Path("legacy.js"))
    source = b"function add(a, b) { return a + b }\n"

    declarations = parser.extract_declarations(source)

    assert [(d.name, d.signature) for d in declarations] == [("add", "(unknown, unknown) -> unknown")]


def test_get_parser_for_file_without_suffix():
    parser = get_parser_for_file(Path("Makefile"))

    assert isinstance(parser, TypeScriptParser)


def test_each_parser_gets_its_own_language():
    first = get_parser_for_file(Path("a.ts"))
    second = get_parser_for_file(Path("b.ts"))

    assert first is not second
    assert first.parser is not second.parser
