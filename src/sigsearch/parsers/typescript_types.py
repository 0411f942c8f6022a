"""Canonical rendering of TypeScript type expressions.

Type nodes are reduced to single-line strings so that signatures written with
different formatting compare equal, e.g.

    (a: number,
     b: Array<string>) => void

becomes `(number, Array<string>) -> void`. Canonicalization is purely
syntactic: aliases and imported names are rendered as written.
"""

import re

from tree_sitter import Node

# Rendered in place of an absent type node (no return annotation, untyped parameter)
MISSING_TYPE = "unknown"

# Prefix for type syntax the canonicalizer has no rule for
UNKNOWN_PREFIX = "UNKNOWN: "

FUNCTION_TYPES = frozenset({"function_type", "arrow_function"})

# Rendered as their normalized source text
LITERAL_TYPES = frozenset({
    "type_identifier",
    "predefined_type",
    "union_type",
    "intersection_type",
    "nested_type_identifier",
    "array_type",
    "object_type",
})

PARAMETER_TYPES = frozenset({"required_parameter", "optional_parameter"})

_MULTIPLE_SPACES = re.compile(r" {2,}")


def node_text(node: Node) -> str:
    """Return the source text spanned by node."""
    return node.text.decode("utf8")


def normalize_content(content: str) -> str:
    """Collapse source text onto one line.

    Newlines are removed, runs of two or more spaces become a single space and
    surrounding whitespace is trimmed.

    Examples:
        >>> normalize_content("{\\n  a: string;\\n  b: number\\n}")
        '{ a: string; b: number}'
    """
    single_line = content.replace("\r", "").replace("\n", "")
    return _MULTIPLE_SPACES.sub(" ", single_line).strip()


def normalize_param(param: str) -> str:
    """Strip the leading colon of an annotation, e.g. ': number' -> 'number'."""
    if param.startswith(":"):
        param = param[1:]
    return param.strip()


def canonicalize_type(node: Node | None) -> str:
    """Render a type expression node as a canonical single-line string.

    Args:
        node: A type node, a type_annotation wrapping one, or None

    Returns:
        The canonical type string. Function types render in arrow form
        `(P1, P2) -> R`, generic types as `Name<A1, A2>`, unsupported syntax
        as `UNKNOWN: <text>`, and None as MISSING_TYPE.
    """
    if node is None:
        return MISSING_TYPE

    if node.type == "type_annotation":
        inner = node.named_children
        if len(inner) != 1:
            return UNKNOWN_PREFIX + normalize_param(normalize_content(node_text(node)))
        return canonicalize_type(inner[0])

    if node.type in FUNCTION_TYPES:
        return render_function_type(node)

    if node.type in LITERAL_TYPES:
        return normalize_param(normalize_content(node_text(node)))

    if node.type == "readonly_type" and node.named_children:
        return canonicalize_type(node.named_children[0])

    if node.type == "generic_type":
        name = node.child_by_field_name("name")
        type_arguments = node.child_by_field_name("type_arguments")
        if name is not None and type_arguments is not None:
            args = [canonicalize_type(arg) for arg in type_arguments.children if arg.is_named]
            return f"{normalize_content(node_text(name))}<{', '.join(args)}>"

    return UNKNOWN_PREFIX + normalize_param(normalize_content(node_text(node)))


def render_parameters(node: Node | None) -> str:
    """Render a formal_parameters node as comma-separated canonical types.

    Only required and optional parameters contribute; punctuation and any
    other parameter syntax is skipped. Both kinds are read through their
    `type` field, so `name?: T` and `name: T` render identically.
    """
    if node is None:
        return ""

    types = []
    for child in node.children:
        if child.type in PARAMETER_TYPES:
            types.append(canonicalize_type(child.child_by_field_name("type")))

    return ", ".join(types)


def render_signature(parameters: Node | None, return_type: Node | None) -> str:
    """Combine a parameter list and return type into `(P1, P2) -> R`."""
    return f"({render_parameters(parameters)}) -> {canonicalize_type(return_type)}"


def render_function_type(node: Node) -> str:
    """Render a function_type or arrow_function node in arrow form."""
    parameters = node.child_by_field_name("parameters")
    return_type = node.child_by_field_name("return_type")

    # `x => ...` has a bare identifier instead of a parameter list
    if parameters is None and node.child_by_field_name("parameter") is not None:
        return f"({MISSING_TYPE}) -> {canonicalize_type(return_type)}"

    return render_signature(parameters, return_type)
