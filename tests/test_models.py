from dataclasses import FrozenInstanceError, asdict

import pytest

from sigsearch.models import Declaration, DeclarationError, Position, SearchResult


def test_position_creation():
    position = Position(line=3, column=4)
    assert position.line == 3
    assert position.column == 4


def test_declaration_creation():
    declaration = Declaration(name="add", signature="(number, number) -> number", position=Position(0, 0))

    assert declaration.name == "add"
    assert declaration.signature == "(number, number) -> number"
    assert declaration.position == Position(0, 0)


def test_declaration_is_immutable():
    declaration = Declaration(name="add", signature="() -> void", position=Position(0, 0))

    with pytest.raises(FrozenInstanceError):
        declaration.name = "sub"


def test_declaration_format():
    declaration = Declaration(name="Foo.bar", signature="(string) -> void", position=Position(12, 2))

    assert declaration.format("src/foo.ts") == "src/foo.ts:12;  Foo.bar :: (string) -> void"


def test_declaration_to_dict():
    declaration = Declaration(name="f", signature="(number) -> string", position=Position(1, 6))

    assert asdict(declaration) == {
        "name": "f",
        "signature": "(number) -> string",
        "position": {"line": 1, "column": 6},
    }


def test_declaration_error_creation():
    error = DeclarationError(
        kind="method_definition",
        position=Position(2, 2),
        text="m(): void {}",
        reason="missing owner name",
    )

    assert error.kind == "method_definition"
    assert error.reason == "missing owner name"


def test_search_result_to_dict():
    declaration = Declaration(name="f", signature="() -> void", position=Position(0, 0))
    result = SearchResult(declaration=declaration, distance=3)

    assert asdict(result) == {
        "declaration": {
            "name": "f",
            "signature": "() -> void",
            "position": {"line": 0, "column": 0},
        },
        "distance": 3,
    }
