"""Structural checks over the built-in grammars and per-language classification."""

import pytest

import syntok as stk
from syntok import Grammar, GrammarError, Rule, Token, TokenType
from syntok.grammars import BUILTIN_GRAMMARS


T = TokenType


def kinds(code: str, language: str) -> list[tuple[str, str]]:
    """Tokenize and return ``(type, content)`` pairs for compact assertions."""
    return [(tok.type.value, tok.content) for tok in stk.tokenize(code, language)]


# Structure
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", sorted(BUILTIN_GRAMMARS))
def test_labels_align_with_groups(name):
    """Every grammar declares exactly one label per capturing group."""
    grammar = BUILTIN_GRAMMARS[name]
    assert len(grammar.labels) == grammar.group_count
    assert grammar.name == name


@pytest.mark.parametrize("name", sorted(BUILTIN_GRAMMARS))
def test_no_rule_is_shadowed(name):
    """No earlier alternative claims the examples of a later rule."""
    assert BUILTIN_GRAMMARS[name].find_shadowed() == []


@pytest.mark.parametrize("name", sorted(BUILTIN_GRAMMARS))
def test_every_label_has_a_style(name):
    """The theme covers every label a grammar can emit."""
    for label in BUILTIN_GRAMMARS[name].labels:
        assert label in stk.THEME


@pytest.mark.parametrize("name", ["html", "xml", "vue", "css", "yaml", "sql"])
def test_case_insensitive_grammars(name):
    """Markup, stylesheet, YAML and SQL grammars ignore case."""
    assert BUILTIN_GRAMMARS[name].ignore_case


def test_plaintext_has_no_rules():
    """The plaintext grammar never classifies anything."""
    grammar = BUILTIN_GRAMMARS["plaintext"]
    assert grammar.rules == ()
    assert grammar.pattern == ""
    assert kinds("<b>const</b>", "plaintext") == [("text", "<b>const</b>")]


def test_find_shadowed_reports_misordered_rules():
    """A general rule before a specific one shadows it."""
    grammar = Grammar(
        "misordered",
        [
            Rule(T.FUNCTION, r"[a-z]+", ("foo",)),
            Rule(T.KEYWORD, r"\bif\b", ("if",)),
        ],
    )
    shadowed = grammar.find_shadowed()
    assert len(shadowed) == 1
    rule, example, got = shadowed[0]
    assert rule.label is T.KEYWORD
    assert example == "if"
    assert got is T.FUNCTION


# Validation
# ---------------------------------------------------------------------------


def test_rule_rejects_unknown_label():
    """Labels must come from the closed token vocabulary."""
    with pytest.raises(GrammarError, match="unknown token label"):
        Rule("bracket", r">")


def test_rule_accepts_label_strings():
    """String labels are coerced to TokenType."""
    assert Rule("attr-name", r"\w+=").label is T.ATTR_NAME


def test_grammar_rejects_capturing_groups():
    """Rule patterns may only use non-capturing groups."""
    with pytest.raises(GrammarError, match="capturing groups") as exc_info:
        Grammar("bad", [Rule(T.KEYWORD, r"(a|b)")])
    assert exc_info.value.grammar == "bad"
    assert exc_info.value.pattern == "(a|b)"


def test_grammar_rejects_invalid_regex():
    """Invalid regex is reported with the underlying reason."""
    with pytest.raises(GrammarError, match="invalid regex pattern") as exc_info:
        Grammar("bad", [Rule(T.KEYWORD, r"[unclosed")])
    assert exc_info.value.regex_err is not None


def test_grammar_is_immutable():
    """Grammars cannot be modified after construction."""
    grammar = BUILTIN_GRAMMARS["javascript"]
    with pytest.raises(AttributeError):
        grammar.name = "other"
    with pytest.raises(AttributeError):
        grammar._labels = ()


# Per-language classification
# ---------------------------------------------------------------------------


def test_html_tag_and_attributes():
    assert kinds('<a href="x">Hi</a>', "html") == [
        ("tag", "<a"),
        ("text", " "),
        ("attr-name", "href"),
        ("punctuation", "="),
        ("attr-value", '"x"'),
        ("punctuation", ">"),
        ("text", "Hi"),
        ("tag", "</a"),
        ("punctuation", ">"),
    ]


def test_xml_prolog_and_self_closing_tag():
    assert kinds('<?xml version="1.0"?>\n<root/>', "xml") == [
        ("annotation", '<?xml version="1.0"?>'),
        ("text", "\n"),
        ("tag", "<root"),
        ("punctuation", "/>"),
    ]


def test_vue_directive_and_mustache():
    assert kinds('<div v-if="ok">{{ msg }}</div>', "vue") == [
        ("tag", "<div"),
        ("text", " "),
        ("keyword", "v-if"),
        ("punctuation", "="),
        ("attr-value", '"ok"'),
        ("punctuation", ">"),
        ("annotation", "{{ msg }}"),
        ("tag", "</div"),
        ("punctuation", ">"),
    ]


def test_css_rule():
    assert kinds("body { background: #f0f0f0; }", "css") == [
        ("text", "body "),
        ("punctuation", "{"),
        ("text", " "),
        ("property", "background"),
        ("punctuation", ":"),
        ("text", " "),
        ("number", "#f0f0f0"),
        ("punctuation", ";"),
        ("text", " "),
        ("punctuation", "}"),
    ]


def test_css_selectors_and_at_rules():
    tokens = kinds("@media (max-width: 768px) { .card:hover { opacity: 0.8; } }", "css")
    assert ("keyword", "@media") in tokens
    assert ("selector", ".card") in tokens
    assert ("number", "768px") in tokens
    assert ("property", "opacity") in tokens
    # pseudo-classes are not declarations
    assert ("property", "card") not in tokens


@pytest.mark.parametrize(
    "selector", ["a:hover {", "li:nth-child(2) {", "a:hover .title {", "p::before,"]
)
def test_css_pseudo_class_subject_is_not_a_property(selector):
    assert [c for t, c in kinds(selector, "css") if t == "property"] == []


def test_css_minified_declarations():
    tokens = kinds("a{color:red;display:flex}", "css")
    assert [c for t, c in tokens if t == "property"] == ["color", "display"]


def test_call_name_is_one_function_token():
    assert kinds("xgetValue(", "javascript")[0] == ("function", "xgetValue")
    assert kinds("my_len(", "python")[0] == ("function", "my_len")


def test_python_function():
    assert kinds("def hello():\n    print('Hi')", "python") == [
        ("keyword", "def"),
        ("text", " "),
        ("function", "hello"),
        ("punctuation", "("),
        ("punctuation", ")"),
        ("punctuation", ":"),
        ("text", "\n    "),
        ("keyword", "print"),
        ("punctuation", "("),
        ("string", "'Hi'"),
        ("punctuation", ")"),
    ]


def test_python_decorator_and_prefixed_string():
    tokens = kinds('@cache\ndef f(): return f"x"', "python")
    assert tokens[0] == ("annotation", "@cache")
    assert ("string", 'f"x"') in tokens


def test_json_keys_and_literals():
    assert kinds('{"a": [1, true]}', "json") == [
        ("punctuation", "{"),
        ("keyword", '"a"'),
        ("punctuation", ":"),
        ("text", " "),
        ("punctuation", "["),
        ("number", "1"),
        ("punctuation", ","),
        ("text", " "),
        ("number", "true"),
        ("punctuation", "]"),
        ("punctuation", "}"),
    ]


def test_yaml_keys():
    code = "version: 1.0\nservices:\n  web:\n    image: nginx # latest"
    tokens = kinds(code, "yaml")
    assert [c for t, c in tokens if t == "keyword"] == [
        "version",
        "services",
        "web",
        "image",
    ]
    assert ("number", "1.0") in tokens
    assert tokens[-1] == ("comment", "# latest")


def test_yaml_url_value_is_not_a_key():
    tokens = kinds("url: http://example.com", "yaml")
    assert [c for t, c in tokens if t == "keyword"] == ["url"]


def test_markdown_front_matter_and_heading():
    assert kinds("---\ntitle: x\n---\n# Hi", "markdown") == [
        ("keyword", "---"),
        ("text", "\ntitle: x\n"),
        ("keyword", "---"),
        ("text", "\n"),
        ("keyword", "# Hi"),
    ]


def test_markdown_inline_styles():
    assert kinds("**b** *i* `c` [l](u)", "markdown") == [
        ("string", "**b**"),
        ("text", " "),
        ("italic", "*i*"),
        ("text", " "),
        ("function", "`c`"),
        ("text", " "),
        ("link", "[l](u)"),
    ]


def test_markdown_list_marker():
    assert kinds("- item", "markdown") == [("punctuation", "-"), ("text", " item")]


def test_markdown_nested_list_marker_keeps_indent_as_text():
    assert kinds("1. a\n  - b", "markdown") == [
        ("punctuation", "1."),
        ("text", " a\n  "),
        ("punctuation", "-"),
        ("text", " b"),
    ]


def test_markdown_bold_may_contain_single_star():
    assert kinds("**a*b** c", "markdown")[0] == ("string", "**a*b**")


def test_java_annotation_and_keywords():
    tokens = kinds("@Override\npublic void run() {}", "java")
    assert tokens[0] == ("annotation", "@Override")
    assert ("keyword", "public") in tokens
    assert ("keyword", "void") in tokens
    assert ("function", "run") in tokens


def test_typescript_keywords():
    assert kinds("interface Props { name: string; }", "typescript") == [
        ("keyword", "interface"),
        ("text", " Props "),
        ("punctuation", "{"),
        ("text", " name: "),
        ("keyword", "string"),
        ("punctuation", ";"),
        ("text", " "),
        ("punctuation", "}"),
    ]


def test_react_component_tag():
    tokens = kinds("return <App />;", "react")
    assert tokens[0] == ("keyword", "return")
    assert ("tag", "<App") in tokens


def test_sql_column_types_and_parameters():
    tokens = kinds("CREATE TABLE t (id INT PRIMARY KEY, name VARCHAR(255)) -- users", "sql")
    assert ("property", "INT") in tokens
    assert ("property", "VARCHAR") in tokens
    assert ("number", "255") in tokens
    assert tokens[-1] == ("comment", "-- users")
    assert ("annotation", ":id") in kinds("WHERE id = :id", "sql")


def test_properties_key_value():
    assert kinds("server.port=8080\n# c\nname = nebula app", "properties") == [
        ("keyword", "server.port"),
        ("punctuation", "="),
        ("string", "8080"),
        ("text", "\n"),
        ("comment", "# c"),
        ("text", "\n"),
        ("keyword", "name"),
        ("text", " "),
        ("punctuation", "="),
        ("text", " "),
        ("string", "nebula app"),
    ]


def test_properties_indented_key_and_comment():
    assert kinds("  key: v\n  ! note", "properties") == [
        ("text", "  "),
        ("keyword", "key"),
        ("punctuation", ":"),
        ("text", " "),
        ("string", "v"),
        ("text", "\n  "),
        ("comment", "! note"),
    ]


def test_log_levels():
    assert kinds("2024-01-01T10:00:00 ERROR [main] boom", "log") == [
        ("number", "2024-01-01T10:00:00"),
        ("text", " "),
        ("string", "ERROR"),
        ("text", " "),
        ("annotation", "[main]"),
        ("text", " boom"),
    ]


def test_token_types_compare_as_strings():
    """Token types are plain strings to the rendering layer."""
    tok = stk.tokenize("1", "json")[0]
    assert tok == Token("number", "1")
    assert tok.type == "number"
