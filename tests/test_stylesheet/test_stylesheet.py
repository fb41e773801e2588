"""Tests for the stylesheet tree: parsing, traversal, mutation and output."""

import pytest

from opacity_fallback.errors import StylesheetParseError
from opacity_fallback.stylesheet import (
    AtRule,
    Comment,
    Declaration,
    Rule,
    Stylesheet,
    parse_stylesheet,
    serialize,
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseRules:
    def test_single_rule(self):
        ss = parse_stylesheet(":root { --brand: #3366ff; }")
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selector == ":root"
        assert [(d.prop, d.value) for d in rule.declarations()] == [
            ("--brand", "#3366ff")
        ]

    def test_escaped_selector_round_trips(self):
        ss = parse_stylesheet(r".hover\:bg-primary\/10:hover { color: var(--brand); }")
        assert ss.rules[0].selector == r".hover\:bg-primary\/10:hover"

    def test_multiline_selector_is_collapsed(self):
        ss = parse_stylesheet(".a,\n.b { color: red; }")
        assert ss.rules[0].selector == ".a, .b"

    def test_quoted_whitespace_kept(self):
        ss = parse_stylesheet('[title="a  b"] { color: red; }')
        assert ss.rules[0].selector == '[title="a  b"]'
        assert serialize(ss).startswith('[title="a  b"] {')

    def test_whitespace_inside_functions_collapsed(self):
        ss = parse_stylesheet(":is(.a,\n    .b)   .c { color: red; }")
        assert ss.rules[0].selector == ":is(.a, .b) .c"

    def test_standard_property_lowercased(self):
        ss = parse_stylesheet(".a { COLOR: red; }")
        assert ss.rules[0].declarations()[0].prop == "color"

    def test_custom_property_case_kept(self):
        ss = parse_stylesheet(":root { --Brand: red; }")
        assert ss.rules[0].declarations()[0].prop == "--Brand"

    def test_important(self):
        ss = parse_stylesheet(".a { color: red !important; }")
        decl = ss.rules[0].declarations()[0]
        assert decl.value == "red"
        assert decl.important is True

    def test_function_values_kept(self):
        ss = parse_stylesheet(".a { color: rgb(255 0 0 / .2); }")
        assert ss.rules[0].declarations()[0].value == "rgb(255 0 0 / .2)"

    def test_multiple_rules_in_order(self):
        ss = parse_stylesheet(":root { --a: red; } .dark { --a: blue; } .x { color: var(--a); }")
        assert [r.selector for r in ss.rules] == [":root", ".dark", ".x"]


class TestParseAtRules:
    def test_nested_rules_in_media(self):
        ss = parse_stylesheet(
            r"@media (min-width: 640px) { .sm\:text-brand\/50 { color: var(--brand); } }"
        )
        media = ss.nodes[0]
        assert isinstance(media, AtRule)
        assert media.name == "media"
        assert media.params == "(min-width: 640px)"
        assert [r.selector for r in ss.rules] == [r".sm\:text-brand\/50"]
        assert ss.rules[0].parent is media

    def test_at_rule_params_collapse_only_whitespace(self):
        ss = parse_stylesheet('@media (min-width:\n  640px) { .a { color: red; } } @import "a  b.css";')
        assert ss.nodes[0].params == "(min-width: 640px)"
        assert ss.nodes[1].params == '"a  b.css"'

    def test_statement_at_rule(self):
        ss = parse_stylesheet('@import url("base.css");')
        at = ss.nodes[0]
        assert isinstance(at, AtRule)
        assert at.nodes is None
        assert ss.rules == []

    def test_comments_kept(self):
        ss = parse_stylesheet("/* theme */ :root { --a: red; }")
        assert isinstance(ss.nodes[0], Comment)
        assert ss.nodes[0].text == " theme "


class TestParseErrors:
    def test_rule_without_block(self):
        with pytest.raises(StylesheetParseError) as excinfo:
            parse_stylesheet(".a { color: red; } .b")
        assert excinfo.value.line == 1

    def test_empty_source(self):
        assert parse_stylesheet("").nodes == []
        assert parse_stylesheet("   \n\t  ").nodes == []


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


class TestWalk:
    def test_walk_rules_depth_first(self):
        ss = parse_stylesheet(".a { color: red; } @media print { .b { color: blue; } } .c {}")
        seen = []
        ss.walk_rules(lambda r: seen.append(r.selector))
        assert seen == [".a", ".b", ".c"]

    def test_walk_decls_includes_nested(self):
        ss = parse_stylesheet("@media print { .b { color: blue; fill: red; } }")
        seen = []
        ss.walk_decls(lambda d: seen.append(d.prop))
        assert seen == ["color", "fill"]

    def test_inserted_sibling_not_visited(self):
        ss = parse_stylesheet(".a { color: red; } .b { color: blue; }")
        seen = []

        def visit(rule):
            seen.append(rule.selector)
            rule.after(rule.clone(selector=rule.selector + "-copy"))

        ss.walk_rules(visit)
        assert seen == [".a", ".b"]
        assert [r.selector for r in ss.rules] == [".a", ".a-copy", ".b", ".b-copy"]

    def test_inserted_declaration_not_visited(self):
        ss = parse_stylesheet(":root { --a: red; --b: blue; }")
        seen = []

        def visit(decl):
            seen.append(decl.prop)
            decl.after(Declaration(prop=decl.prop + "-x", value="1"))

        ss.walk_decls(visit)
        assert seen == ["--a", "--b"]
        assert [d.prop for d in ss.rules[0].declarations()] == ["--a", "--a-x", "--b", "--b-x"]


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------


class TestMutation:
    def test_insert_after_sets_parent(self):
        rule = Rule(selector=".a", nodes=[Declaration("color", "red")])
        first = rule.nodes[0]
        new = Declaration("fill", "blue")
        rule.insert_after(first, new)
        assert rule.nodes == [first, new]
        assert new.parent is rule

    def test_insert_after_unknown_child(self):
        rule = Rule(selector=".a")
        with pytest.raises(ValueError):
            rule.insert_after(Declaration("color", "red"), Declaration("fill", "blue"))

    def test_after_without_parent(self):
        with pytest.raises(ValueError):
            Declaration("color", "red").after(Declaration("fill", "blue"))

    def test_clone_is_deep(self):
        rule = Rule(selector=".a", nodes=[Declaration("color", "red")])
        copy = rule.clone(selector=".dark .a")
        copy.nodes[0].value = "blue"
        assert copy.selector == ".dark .a"
        assert rule.nodes[0].value == "red"
        assert copy.nodes[0].parent is copy
        assert copy.parent is None

    def test_clone_keeps_selector_by_default(self):
        rule = Rule(selector=".a")
        assert rule.clone().selector == ".a"


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_rule(self):
        ss = parse_stylesheet(":root{--brand:#3366ff;color:red !important}")
        assert serialize(ss) == (
            ":root {\n"
            "  --brand: #3366ff;\n"
            "  color: red !important;\n"
            "}\n"
        )

    def test_rules_separated_by_blank_line(self):
        ss = parse_stylesheet(".a { color: red; } .b {}")
        assert serialize(ss) == ".a {\n  color: red;\n}\n\n.b {}\n"

    def test_nested_indentation(self):
        ss = parse_stylesheet("@media print { .a { color: red; } }")
        assert serialize(ss) == "@media print {\n  .a {\n    color: red;\n  }\n}\n"

    def test_statement_at_rule_and_comment(self):
        ss = parse_stylesheet('/* x */ @import "a.css";')
        assert serialize(ss) == '/* x */\n\n@import "a.css";\n'

    def test_empty(self):
        assert serialize(Stylesheet()) == ""

    def test_reparse_is_stable(self):
        source = r":root { --a: #fff; } .text-a\/50 { color: var(--a); }"
        once = serialize(parse_stylesheet(source))
        assert serialize(parse_stylesheet(once)) == once
