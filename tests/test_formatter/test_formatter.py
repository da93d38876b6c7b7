"""Tests for the proto formatter."""

from __future__ import annotations

import pytest

from protolint.formatter import FormatCategory, FormatToken, format_proto
from protolint.formatter.engine import (
    classify,
    classify_lines,
    needs_blank_line,
    split_closing_braces,
)


def _token(category: FormatCategory, depth: int = 0, text: str = "x") -> FormatToken:
    return FormatToken(text=text, depth=depth, category=category)


class TestSplitClosingBraces:
    def test_statement_and_brace_are_split(self) -> None:
        assert split_closing_braces(["  a = 1; };"]) == ["a = 1;", "};"]

    def test_comment_lines_are_untouched(self) -> None:
        assert split_closing_braces(["// a; }"]) == ["// a; }"]

    def test_block_comment_body_is_untouched(self) -> None:
        lines = ["/* start", "x; }", "*/"]
        assert split_closing_braces(lines) == lines

    def test_statement_with_its_own_brace_is_untouched(self) -> None:
        assert split_closing_braces(["enum E { A = 0; }"]) == ["enum E { A = 0; }"]


class TestClassify:
    @pytest.mark.parametrize(
        "line,category,text",
        [
            ('syntax="proto3";', FormatCategory.syntax, 'syntax = "proto3";'),
            ("package   a.b;", FormatCategory.package, "package a.b;"),
            ('import  public "x.proto";', FormatCategory.import_, 'import public "x.proto";'),
            ("option  go_package = \"x\";", FormatCategory.option, 'option go_package = "x";'),
            ("message   Foo  {", FormatCategory.block, "message Foo {"),
            ("oneof kind{", FormatCategory.block, "oneof kind {"),
            ("extend  Foo {", FormatCategory.block, "extend Foo {"),
            ("reserved   2, 3;", FormatCategory.reserved, "reserved 2, 3;"),
            ("optional int32 x=1 ;", FormatCategory.field, "optional int32 x = 1;"),
            ("map<string, int32> m   =   2;", FormatCategory.field, "map<string, int32> m = 2;"),
            ("FOO_BAR=-1;", FormatCategory.enumval, "FOO_BAR = -1;"),
            ("// note", FormatCategory.comment, "// note"),
            ("extensions 100 to 199;", FormatCategory.other, "extensions 100 to 199;"),
        ],
    )
    def test_categories(self, line: str, category: FormatCategory, text: str) -> None:
        assert classify(line) == (category, text)

    def test_rpc_spacing(self) -> None:
        line = "rpc  Get ( GetRequest )returns( GetResponse ) ;"
        assert classify(line) == (
            FormatCategory.rpc,
            "rpc Get(GetRequest) returns (GetResponse);",
        )

    def test_rpc_with_body(self) -> None:
        assert classify("rpc Get(A) returns (B){")[1] == "rpc Get(A) returns (B) {"


class TestClassifyLines:
    def test_depth_follows_braces(self) -> None:
        tokens = classify_lines(["message A {", "string a = 1;", "}"])
        assert [(t.depth, t.category) for t in tokens] == [
            (0, FormatCategory.block),
            (1, FormatCategory.field),
            (0, FormatCategory.close),
        ]

    def test_blank_lines_are_dropped(self) -> None:
        tokens = classify_lines(["", "message A {", "", "}", ""])
        assert len(tokens) == 2

    def test_lone_brace_is_merged_into_opener(self) -> None:
        tokens = classify_lines(["service Api", "", "{", "}"])
        assert [t.text for t in tokens] == ["service Api {", "}"]

    def test_close_never_goes_negative(self) -> None:
        tokens = classify_lines(["}", "};", "message A {"])
        assert [t.depth for t in tokens] == [0, 0, 0]

    def test_comment_ending_in_brace_does_not_indent(self) -> None:
        tokens = classify_lines(["// example {", "message A {"])
        assert [t.depth for t in tokens] == [0, 0]


class TestBlankLinePolicy:
    def test_after_close(self) -> None:
        assert needs_blank_line(_token(FormatCategory.close), _token(FormatCategory.block)) is True
        assert needs_blank_line(_token(FormatCategory.close), _token(FormatCategory.close)) is False

    def test_never_inside_a_body(self) -> None:
        assert needs_blank_line(
            _token(FormatCategory.close, depth=1), _token(FormatCategory.field, depth=1)
        ) is False

    def test_header_runs(self) -> None:
        assert needs_blank_line(_token(FormatCategory.import_), _token(FormatCategory.import_)) is False
        assert needs_blank_line(_token(FormatCategory.import_), _token(FormatCategory.option)) is True
        assert needs_blank_line(_token(FormatCategory.syntax), _token(FormatCategory.comment)) is True

    def test_comment_sticks_to_declaration(self) -> None:
        assert needs_blank_line(_token(FormatCategory.comment), _token(FormatCategory.block)) is False
        assert needs_blank_line(_token(FormatCategory.other), _token(FormatCategory.block)) is True

    def test_comment_after_other(self) -> None:
        assert needs_blank_line(_token(FormatCategory.other), _token(FormatCategory.comment)) is True
        assert needs_blank_line(_token(FormatCategory.comment), _token(FormatCategory.comment)) is False

    def test_between_fields_at_top_level(self) -> None:
        assert needs_blank_line(_token(FormatCategory.field), _token(FormatCategory.field)) is False


class TestFormatProto:
    def test_normalizes_message(self) -> None:
        assert format_proto("message  Foo{\nstring name=1;\n}") == (
            "message Foo {\n  string name = 1;\n}\n"
        )

    def test_header_blank_lines(self) -> None:
        source = (
            'syntax  =  "proto3";\n'
            "package   foo;\n"
            'import "a.proto";\n'
            'import "b.proto";\n'
            'option java_package = "x";\n'
            "message A {\n"
            "}\n"
        )
        assert format_proto(source) == (
            'syntax = "proto3";\n'
            "\n"
            "package foo;\n"
            "\n"
            'import "a.proto";\n'
            'import "b.proto";\n'
            "\n"
            'option java_package = "x";\n'
            "\n"
            "message A {\n"
            "}\n"
        )

    def test_collapses_blank_lines(self) -> None:
        source = "message A {\n\n\n  string a = 1;\n\n  string b = 2;\n}\n\n\n\nmessage B {\n}\n"
        assert format_proto(source) == (
            "message A {\n  string a = 1;\n  string b = 2;\n}\n\nmessage B {\n}\n"
        )

    def test_comment_stays_with_declaration(self) -> None:
        source = "message A {\n}\n// About B.\nmessage B {\n}\n"
        assert format_proto(source) == "message A {\n}\n\n// About B.\nmessage B {\n}\n"

    def test_brace_on_next_line(self) -> None:
        assert format_proto("message A\n{\n  string a = 1;\n}\n") == (
            "message A {\n  string a = 1;\n}\n"
        )

    def test_statement_then_brace(self) -> None:
        assert format_proto("message A {\n  string a = 1; }\n") == (
            "message A {\n  string a = 1;\n}\n"
        )

    def test_service_and_rpc(self) -> None:
        source = (
            "// Api.\n"
            "service Api {\n"
            "  // Get.\n"
            "  rpc  Get ( GetRequest )returns( GetResponse ) ;\n"
            "}\n"
        )
        assert format_proto(source) == (
            "// Api.\n"
            "service Api {\n"
            "  // Get.\n"
            "  rpc Get(GetRequest) returns (GetResponse);\n"
            "}\n"
        )

    def test_nested_enum(self) -> None:
        source = "message A {\nenum Kind {\nKIND_UNSPECIFIED=0 ;\n}\nKind kind=1;\n}\n"
        assert format_proto(source) == (
            "message A {\n"
            "  enum Kind {\n"
            "    KIND_UNSPECIFIED = 0;\n"
            "  }\n"
            "  Kind kind = 1;\n"
            "}\n"
        )

    def test_block_comment_is_indented_not_reclassified(self) -> None:
        source = "message A {\n/*\n   * Doc; }\n */\nstring a = 1;\n}\n"
        assert format_proto(source) == (
            "message A {\n  /*\n  * Doc; }\n  */\n  string a = 1;\n}\n"
        )

    def test_close_with_trailing_comment(self) -> None:
        source = "message A {\n  string a = 1;\n  } // end A\nmessage B {\n}\n"
        assert format_proto(source) == (
            "message A {\n  string a = 1;\n} // end A\n\nmessage B {\n}\n"
        )

    def test_opener_with_trailing_comment_still_indents(self) -> None:
        assert format_proto("message A { // c\nstring a = 1;\n}") == (
            "message A { // c\n  string a = 1;\n}\n"
        )

    def test_trailing_whitespace_and_newlines(self) -> None:
        assert format_proto('syntax = "proto3";   \n\n\n') == 'syntax = "proto3";\n'

    def test_empty_input(self) -> None:
        assert format_proto("") == ""
        assert format_proto("  \n\n") == ""

    def test_unbalanced_closing_braces(self) -> None:
        assert format_proto("}\n}\nmessage A {\n}\n") == "}\n}\n\nmessage A {\n}\n"

    def test_example_is_a_fixed_point(self, well_formed_proto: str) -> None:
        assert format_proto(well_formed_proto) == well_formed_proto

    @pytest.mark.parametrize(
        "source",
        [
            "message  Foo{\nstring name=1;\n}",
            "syntax='proto3';package a;import \"b.proto\";\n",
            "message A\n\n{\n  string a = 1; }\n}}}\n",
            "/* open\n message A {\n",
            "service S\n// c\n{\nrpc A ( B )returns(C){\noption x = 1; }\n}\n",
            "enum E { A = 0; }\n\n\nmessage M {\n  oneof o {\n    int32 a = 1;  };\n}",
            "\t\tmessage   Tabs\t{\n\t\tint32   x\t=\t1 ;\n}\n",
            "",
            "{\n{\n{\n",
        ],
    )
    def test_idempotent(self, source: str) -> None:
        once = format_proto(source)
        assert format_proto(once) == once
