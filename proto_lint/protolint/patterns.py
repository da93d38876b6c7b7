"""Line-shape catalog for .proto source text.

Every check in the validator and the formatter is expressed as a predicate
over a single trimmed line. Nothing here builds a parse tree.
"""

from __future__ import annotations

import re

MAX_LINE_LENGTH = 80

PASCAL_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
SNAKE_RE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")
UPPER_SNAKE_RE = re.compile(r"^[A-Z][A-Z0-9]*(_[A-Z0-9]+)*$")

INLINE_COMMENT_RE = re.compile(r"//.*$")

# [optional|repeated|required] <type> <name> ...
FIELD_SHAPE_RE = re.compile(
    r"^(?:optional\s+|repeated\s+|required\s+)?(?:map<[^>]+>|\w+(?:\.\w+)*)\s+\w+"
)
# Same shape with a numeric assignment; group 1 is the field name.
FIELD_ASSIGNMENT_RE = re.compile(
    r"^(?:optional\s+|repeated\s+|required\s+)?(?:map<[^>]+>|\w+(?:\.\w+)*)\s+(\w+)\s*=\s*\d+"
)
FIELD_NUMBER_TERMINATED_RE = re.compile(r"=\s*\d+\s*[;\[]")
FIELD_NUMBER_UNTERMINATED_RE = re.compile(r"=\s*\d+\s*$")
NESTED_DEFINITION_RE = re.compile(
    r"^(?:message|enum|oneof|extend|reserved|option|extensions)\b"
)

ENUM_VALUE_RE = re.compile(r"^(\w+)\s*=\s*(-?\d+)")
ENUM_VALUE_TERMINATED_RE = re.compile(r"^\w+\s*=\s*-?\d+\s*[;\[]")
ENUM_VALUE_UNTERMINATED_RE = re.compile(r"^\w+\s*=\s*-?\d+\s*$")

BLOCK_OPENER_RE = re.compile(r"^(message|enum|service|oneof)(?:\s+(\w*)|\s*(?=\{)|$)")
FORMAT_OPENER_RE = re.compile(r"^(message|enum|service|oneof|extend)\s+")
MESSAGE_NAME_RE = re.compile(r"^message\s+(\w+)")
ENUM_NAME_RE = re.compile(r"^enum\s+(\w+)")

RPC_SIGNATURE_RE = re.compile(r"^rpc\s+\w+\s*\([^)]*\)\s+returns\s+\([^)]*\)\s*[;{]")
SYNTAX_VALUE_RE = re.compile(r'^syntax\s*=\s*"([^"]*)"\s*;')
TERMINATED_STATEMENT_RE = re.compile(r"^(syntax|package|import|option)\s+")
TOP_LEVEL_RE = re.compile(
    r"^(?:(?:syntax|package|import|option|message|enum|service|extend)\s"
    r"|(?:message|enum|service|extend)(?:$|\{)|/[/*])"
)

CLOSE_RE = re.compile(r"^\};?(?:\s*//.*)?$")
STATEMENT_THEN_CLOSE_RE = re.compile(r"^([^{}]*;)\s*(\};?)$")

VALID_SYNTAX_VALUES = ("proto2", "proto3")


def is_comment(trimmed: str) -> bool:
    """True for lines that begin a line comment, a block comment, or continue one."""
    return trimmed.startswith(("//", "/*", "*"))


def strip_inline_comment(trimmed: str) -> str:
    return INLINE_COMMENT_RE.sub("", trimmed).strip()


def is_bare_close(code: str) -> bool:
    return code in ("}", "};")


def is_field_declaration(code: str) -> bool:
    """A line shaped like a field that is not a nested definition or a brace."""
    if is_bare_close(code) or NESTED_DEFINITION_RE.match(code):
        return False
    return FIELD_SHAPE_RE.match(code) is not None


def has_terminated_field_number(code: str) -> bool:
    return FIELD_NUMBER_TERMINATED_RE.search(code) is not None


def has_unterminated_field_number(code: str) -> bool:
    return FIELD_NUMBER_UNTERMINATED_RE.search(code) is not None


def is_enum_value_candidate(code: str) -> bool:
    """A bare-identifier line inside an enum body."""
    if is_bare_close(code) or code.startswith(("option ", "reserved ")):
        return False
    return re.match(r"^\w+", code) is not None


def is_well_formed_rpc(code: str) -> bool:
    return RPC_SIGNATURE_RE.match(code) is not None


def is_known_top_level(code: str) -> bool:
    return code in ("{", "}", "};") or TOP_LEVEL_RE.match(code) is not None


def needs_semicolon(code: str) -> bool:
    """syntax/package/import/option statements with no semicolon that do not open a brace."""
    return (
        TERMINATED_STATEMENT_RE.match(code) is not None
        and ";" not in code
        and "{" not in code
    )


def is_pascal_case(name: str) -> bool:
    return PASCAL_RE.match(name) is not None


def is_snake_case(name: str) -> bool:
    return SNAKE_RE.match(name) is not None


def is_upper_snake_case(name: str) -> bool:
    return UPPER_SNAKE_RE.match(name) is not None
