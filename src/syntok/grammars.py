"""
Built-in grammars for the languages highlighted in the editor.

Rule order matters: at each scan position the first rule that matches wins,
so comments and strings come first, keywords before the identifier rules that
would otherwise swallow them. Multi-line constructs end at their terminator or
at end of input (``\\Z``), never earlier.

Rules that read a run of word characters start only at the head of the run,
and variable-width lookbehinds sit after a consumed character. Otherwise a
failed attempt is retried at every position inside a long run and scanning
turns quadratic.
"""

from typing import Final

from .grammar import Grammar, Rule
from .languages import Language
from .types import TokenType as T


def _words(*words: str) -> str:
    """Whole-word alternation of ``words``."""
    return r"\b(?:" + "|".join(words) + r")\b"


def _line_head(char: str) -> str:
    """One ``char`` that opens a line, after optional indentation."""
    return rf"{char}(?<=(?:^|\n)[ \t]*{char})"


# Shared building blocks
# ---------------------------------------------------------------------------

_C_COMMENT = r"//[^\n]*|/\*[\s\S]*?(?:\*/|\Z)"
_DQ_STRING = r'"(?:[^"\\\n]|\\.)*"'
_SQ_STRING = r"'(?:[^'\\\n]|\\.)*'"
_TEMPLATE_STRING = r"`(?:[^`\\]|\\[\s\S])*(?:`|\Z)"
_NUMBER = r"\b(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)\b"
_CALL = r"(?<![\w$])[A-Za-z_$][\w$]*(?=\()"
_BRACKETS = r"[{}()\[\];,]"

_JS_KEYWORDS = (
    "const", "let", "var", "function", "return", "if", "else", "for", "while",
    "do", "switch", "case", "break", "continue", "default", "try", "catch",
    "finally", "throw", "import", "export", "from", "async", "await", "new",
    "this", "super", "class", "extends", "typeof", "instanceof", "in", "of",
    "delete", "void", "yield", "null", "undefined", "true", "false",
)  # fmt: skip

_TS_KEYWORDS = _JS_KEYWORDS + (
    "interface", "type", "enum", "implements", "declare", "namespace",
    "readonly", "public", "private", "protected", "abstract", "as", "keyof",
    "any", "unknown", "never", "string", "number", "boolean",
)  # fmt: skip


def _script_rules(keywords: tuple[str, ...], *extra: Rule) -> list[Rule]:
    """Rules shared by the JavaScript family; ``extra`` goes before calls."""
    return [
        Rule(T.COMMENT, _C_COMMENT, ("// note", "/* block */")),
        Rule(
            T.STRING,
            f"{_DQ_STRING}|{_SQ_STRING}|{_TEMPLATE_STRING}",
            ('"a"', "'b'", "`c ${d}`"),
        ),
        Rule(T.KEYWORD, _words(*keywords), ("const", "return")),
        *extra,
        Rule(T.FUNCTION, _CALL, ("log(", "fetch(")),
        Rule(T.PUNCTUATION, _BRACKETS, ("{", ";")),
        Rule(T.NUMBER, _NUMBER, ("1", "0xff", "3.14")),
    ]


def _markup_rules(*prolog: Rule, attrs: tuple[Rule, ...] = ()) -> list[Rule]:
    """
    Rules shared by HTML-like languages.

    ``prolog`` rules are tried right after comments; ``attrs`` right before
    plain attribute names.
    """
    return [
        Rule(T.COMMENT, r"<!--[\s\S]*?(?:-->|\Z)", ("<!-- note -->",)),
        *prolog,
        Rule(T.KEYWORD, r"<![A-Za-z][^>]*>?", ("<!DOCTYPE html>",)),
        Rule(T.TAG, r"</?[A-Za-z][\w:.-]*", ("<div", "</p")),
        Rule(T.PUNCTUATION, r"/?>|=", (">", "/>")),
        Rule(T.ATTR_VALUE, r""""(?<==[ \t]*")[^"]*"|'(?<==[ \t]*')[^']*'"""),
        Rule(T.STRING, r'"[^"]*"', ('"quoted"',)),
        *attrs,
        Rule(T.ATTR_NAME, r"(?<![\w:.-])[A-Za-z_:][\w:.-]*(?=[ \t]*=)", ("class=",)),
        Rule(T.KEYWORD, r"&(?:#\d+|#x[0-9a-f]+|\w+);", ("&amp;",)),
    ]


# Grammars
# ---------------------------------------------------------------------------

JAVASCRIPT = Grammar("javascript", _script_rules(_JS_KEYWORDS))

TYPESCRIPT = Grammar(
    "typescript",
    _script_rules(
        _TS_KEYWORDS,
        Rule(T.ANNOTATION, r"@[A-Za-z_]\w*", ("@Component",)),
    ),
)

REACT = Grammar(
    "react",
    _script_rules(
        _TS_KEYWORDS,
        # lowercase tags only when they read as markup, not comparisons
        Rule(
            T.TAG,
            r"</?[A-Z][\w.]*|</?>|</?[a-z][\w-]*(?=\s+[\w-]+=|\s*/?>)",
            ("<App", "</Button", "<div>", "<>"),
        ),
    ),
)

JAVA = Grammar(
    "java",
    [
        Rule(T.COMMENT, _C_COMMENT, ("// note", "/** doc */")),
        Rule(
            T.STRING,
            rf'"""[\s\S]*?(?:"""|\Z)|{_DQ_STRING}|' r"'(?:[^'\\\n]|\\.)'",
            ('"a"', "'c'", '"""\ntext\n"""'),
        ),
        Rule(
            T.KEYWORD,
            _words(
                "public", "private", "protected", "class", "interface", "enum",
                "record", "void", "static", "final", "abstract", "int", "long",
                "short", "byte", "char", "float", "double", "boolean", "String",
                "var", "return", "if", "else", "for", "while", "do", "switch",
                "case", "default", "break", "continue", "try", "catch",
                "finally", "throw", "throws", "new", "this", "super", "extends",
                "implements", "import", "package", "null", "true", "false",
            ),  # fmt: skip
            ("public", "String"),
        ),
        Rule(T.ANNOTATION, r"@[A-Za-z_]\w*", ("@Override",)),
        Rule(T.FUNCTION, _CALL, ("println(",)),
        Rule(T.PUNCTUATION, _BRACKETS, ("{", ";")),
        Rule(
            T.NUMBER,
            r"\b(?:0[xX][0-9a-fA-F_]+|\d[\d_]*(?:\.\d+)?(?:[eE][+-]?\d+)?[lLfFdD]?)\b",
            ("42", "10L", "1_000"),
        ),
    ],
)

PYTHON = Grammar(
    "python",
    [
        Rule(T.COMMENT, r"#[^\n]*", ("# note",)),
        Rule(
            T.STRING,
            r"(?:\b[rRbBuUfF]{1,2})?"
            r'(?:"""[\s\S]*?(?:"""|\Z)|' r"'''[\s\S]*?(?:'''|\Z)|"
            rf"{_DQ_STRING}|{_SQ_STRING})",
            ('"""doc"""', "f'x'", "'a'", 'rb"raw"'),
        ),
        Rule(T.ANNOTATION, r"(?<![\w)\]])@[A-Za-z_][\w.]*", ("@property",)),
        Rule(
            T.KEYWORD,
            _words(
                "def", "class", "if", "else", "elif", "for", "while", "import",
                "from", "return", "print", "try", "except", "finally", "raise",
                "with", "as", "pass", "break", "continue", "lambda", "yield",
                "global", "nonlocal", "del", "assert", "async", "await", "in",
                "is", "not", "and", "or", "True", "False", "None",
            ),  # fmt: skip
            ("def", "None"),
        ),
        Rule(T.FUNCTION, r"\b[A-Za-z_]\w*(?=\()", ("len(",)),
        Rule(T.PUNCTUATION, r"[{}()\[\],;:]", ("(", ":")),
        Rule(
            T.NUMBER,
            r"\b(?:0[xXoObB][0-9a-fA-F_]+|\d[\d_]*(?:\.\d+)?(?:[eE][+-]?\d+)?j?)\b",
            ("7", "0b101", "2.5e-3"),
        ),
    ],
)

SQL = Grammar(
    "sql",
    [
        Rule(T.COMMENT, r"--[^\n]*|/\*[\s\S]*?(?:\*/|\Z)", ("-- note", "/* c */")),
        Rule(T.STRING, r"'(?:[^']|'')*'|\"[^\"]*\"|`[^`]*`", ("'active'", '"Users"')),
        Rule(
            T.KEYWORD,
            _words(
                "SELECT", "DISTINCT", "FROM", "WHERE", "INSERT", "INTO",
                "UPDATE", "DELETE", "JOIN", "INNER", "LEFT", "RIGHT", "FULL",
                "OUTER", "CROSS", "ON", "AS", "GROUP", "BY", "ORDER", "HAVING",
                "LIMIT", "OFFSET", "UNION", "ALL", "CREATE", "ALTER", "DROP",
                "TABLE", "VIEW", "INDEX", "TRIGGER", "PROCEDURE", "FUNCTION",
                "PRIMARY", "FOREIGN", "KEY", "REFERENCES", "UNIQUE", "DEFAULT",
                "CONSTRAINT", "VALUES", "SET", "AND", "OR", "NOT", "NULL", "IS",
                "IN", "LIKE", "BETWEEN", "EXISTS", "CASE", "WHEN", "THEN",
                "ELSE", "END", "ASC", "DESC", "BEGIN", "COMMIT", "ROLLBACK",
                "RETURNS", "RETURN", "DECLARE", "BEFORE", "AFTER", "FOR",
                "EACH", "ROW",
            ),  # fmt: skip
            ("SELECT", "select", "From"),
        ),
        # column types
        Rule(
            T.PROPERTY,
            _words(
                "INT", "INTEGER", "BIGINT", "SMALLINT", "SERIAL", "DECIMAL",
                "NUMERIC", "FLOAT", "REAL", "DOUBLE", "CHAR", "VARCHAR",
                "TEXT", "BOOLEAN", "BOOL", "DATE", "TIME", "TIMESTAMP",
                "DATETIME", "UUID", "JSON", "JSONB", "BLOB",
            ),  # fmt: skip
            ("VARCHAR(255)", "int"),
        ),
        Rule(T.ANNOTATION, r"(?<![:\w])[:@][A-Za-z_]\w*", (":id", "@name")),
        Rule(T.FUNCTION, r"\b[A-Za-z_]\w*(?=\()", ("count(",)),
        Rule(T.NUMBER, r"\b\d+(?:\.\d+)?\b", ("42", "0.5")),
        Rule(T.PUNCTUATION, r"[*;,().]", ("*", ";")),
    ],
    ignore_case=True,
)

JSON = Grammar(
    "json",
    [
        Rule(T.KEYWORD, rf"{_DQ_STRING}(?=\s*:)", ('"name": 1',)),
        Rule(T.STRING, _DQ_STRING, ('"value"',)),
        Rule(T.PUNCTUATION, r"[{}\[\]:,]", ("{", ",")),
        Rule(
            T.NUMBER,
            r"-?\b\d+(?:\.\d+)?(?:[eE][+-]?\d+)?\b|\b(?:true|false|null)\b",
            ("-1", "2e5", "true", "null"),
        ),
    ],
)

YAML = Grammar(
    "yaml",
    [
        Rule(T.COMMENT, r"(?<!\S)#[^\n]*", ("# note",)),
        Rule(
            T.PUNCTUATION,
            r"(?<![^\n])(?:---|\.\.\.)(?=[ \t]*(?:\n|\Z))",
            ("---", "..."),
        ),
        Rule(
            T.KEYWORD,
            rf"(?:{_DQ_STRING}|'(?:[^'\n]|'')*'|(?<![\w.$/-])[\w.$/-]+)"
            r"(?=[ \t]*:(?!\S))",
            ("name: app", '"quoted key": 1', "services:"),
        ),
        Rule(T.STRING, rf"{_DQ_STRING}|'(?:[^'\n]|'')*'", ('"v"', "'v'")),
        Rule(
            T.PUNCTUATION,
            r"-(?=\s|\Z)|:(?!\S)|[\[\]{},]|[|>][+-]?(?=[ \t]*(?:\n|\Z))",
            ("- item", "[", "|"),
        ),
        Rule(T.ANNOTATION, r"(?<!\S)(?:[&*][\w-]+|!!?[\w-]+)", ("&base", "!!str")),
        Rule(T.NUMBER, r"\b(?:true|false|null)\b|~|[-+]?\b\d+(?:\.\d+)?\b", ("true", "~", "42")),
    ],
    ignore_case=True,
)

MARKDOWN = Grammar(
    "markdown",
    [
        # front matter fence and thematic breaks
        Rule(T.KEYWORD, r"(?<![^\n])---[ \t]*(?=\n|\Z)", ("---",)),
        Rule(T.COMMENT, r"```[\s\S]*?(?:```|\Z)|~~~[\s\S]*?(?:~~~|\Z)", ("```js\nx\n```",)),
        Rule(T.KEYWORD, r"(?<![^\n])#{1,6}[ \t][^\n]*", ("# Title", "### Sub")),
        Rule(
            T.PUNCTUATION,
            "(?:" + _line_head("[-*+>]") + "|" + _line_head(r"\d") + r"\d*\.)(?=[ \t])",
            ("- item", "1. one", "> quote"),
        ),
        Rule(
            T.STRING,
            r"\*\*(?=\S)(?:[^*\n]|\*(?!\*))*\*\*|__(?=\S)(?:[^_\n]|_(?!_))*__",
            ("**bold**", "**a*b**"),
        ),
        Rule(
            T.ITALIC,
            r"\*(?=[^\s*])[^*\n]*\*|(?<!\w)_(?=[^\s_])[^_\n]*_(?!\w)",
            ("*it*", "_it_"),
        ),
        Rule(T.FUNCTION, r"`[^`\n]+`", ("`code`",)),
        Rule(
            T.LINK,
            r"!?\[[^\[\]\n]*\]\([^()\n]*\)|<https?://[^>\s]+>|\bhttps?://[^\s)<>]+",
            ("[a](b)", "![img](x.png)", "https://example.com"),
        ),
    ],
)

HTML = Grammar("html", _markup_rules(), ignore_case=True)

XML = Grammar(
    "xml",
    _markup_rules(
        Rule(T.STRING, r"<!\[CDATA\[[\s\S]*?(?:\]\]>|\Z)", ("<![CDATA[x]]>",)),
        Rule(T.ANNOTATION, r"<\?[\s\S]*?(?:\?>|\Z)", ('<?xml version="1.0"?>',)),
    ),
    ignore_case=True,
)

VUE = Grammar(
    "vue",
    _markup_rules(
        Rule(T.ANNOTATION, r"\{\{[\s\S]*?(?:\}\}|\Z)", ("{{ msg }}",)),
        attrs=(
            Rule(
                T.KEYWORD,
                r"(?<![\w:.@#-])(?:v-[\w-]+(?::[\w-]+)?|[@:#][\w.-]+)(?=[ \t]*=)",
                ("v-if=", "@click=", ":value="),
            ),
        ),
    ),
    ignore_case=True,
)

CSS = Grammar(
    "css",
    [
        Rule(T.COMMENT, r"/\*[\s\S]*?(?:\*/|\Z)", ("/* note */",)),
        Rule(T.STRING, f"{_DQ_STRING}|{_SQ_STRING}", ('"a.png"',)),
        Rule(T.KEYWORD, r"@[\w-]+|!\s*important\b", ("@media", "!important")),
        Rule(T.NUMBER, r"#[0-9a-f]{3,8}\b", ("#fff", "#f0f0f0")),
        # a declaration, not a pseudo-class followed by more selector
        Rule(
            T.PROPERTY,
            r"(?<![\w-])-{0,2}[a-z][\w-]*"
            r"(?=\s*:(?!:?[\w-]+(?:\([^(){};]*\))?\s*[{,.#:>+~\[]))",
            ("color: red;", "--main-bg: #fff;", "display:flex}"),
        ),
        Rule(T.SELECTOR, r"[.#][a-z_-][\w-]*", (".btn", "#header")),
        Rule(T.FUNCTION, r"(?<![\w-])-?[a-z_][\w-]*(?=\()", ("rgba(",)),
        Rule(
            T.NUMBER,
            r"-?(?:\b\d+(?:\.\d+)?|\.\d+)(?:%|[a-z]+\b)?",
            ("12px", "50%", "0.8"),
        ),
        Rule(T.PUNCTUATION, r"[{}:;,()>+~]", ("{", ";")),
    ],
    ignore_case=True,
)

PROPERTIES = Grammar(
    "properties",
    [
        Rule(T.COMMENT, _line_head("[#!]") + r"[^\n]*", ("# note", "! note")),
        Rule(
            T.KEYWORD,
            _line_head(r"[\w.\-]") + r"[\w.\-]*(?=[ \t]*[=:])",
            ("server.port=8080", "name: x"),
        ),
        # value of a key, up to end of line
        Rule(T.STRING, r"\S(?<=[=:][ \t]*\S)[^\n]*"),
        Rule(T.PUNCTUATION, r"[=:]", ("=",)),
    ],
)

LOG = Grammar(
    "log",
    [
        Rule(
            T.NUMBER,
            r"\b\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}(?:[.,]\d+)?(?:Z|[+-]\d{2}:?\d{2})?",
            ("2024-01-01T10:00:00", "2024-01-01 10:00:00,123"),
        ),
        Rule(T.FUNCTION, r"\bINFO\b", ("INFO",)),
        Rule(T.KEYWORD, r"\bWARN(?:ING)?\b", ("WARN", "WARNING")),
        Rule(T.STRING, r"\b(?:ERROR|FATAL|SEVERE|CRITICAL)\b", ("ERROR",)),
        Rule(T.COMMENT, r"\b(?:DEBUG|TRACE)\b", ("DEBUG",)),
        Rule(T.ANNOTATION, r"\[[^\[\]\n]*\]", ("[main]",)),
    ],
)

PLAINTEXT = Grammar("plaintext", ())


BUILTIN_GRAMMARS: Final[dict[str, Grammar]] = {
    Language.JAVASCRIPT.value: JAVASCRIPT,
    Language.TYPESCRIPT.value: TYPESCRIPT,
    Language.REACT.value: REACT,
    Language.VUE.value: VUE,
    Language.HTML.value: HTML,
    Language.CSS.value: CSS,
    Language.JSON.value: JSON,
    Language.JAVA.value: JAVA,
    Language.PYTHON.value: PYTHON,
    Language.SQL.value: SQL,
    Language.XML.value: XML,
    Language.YAML.value: YAML,
    Language.PROPERTIES.value: PROPERTIES,
    Language.LOG.value: LOG,
    Language.MARKDOWN.value: MARKDOWN,
    Language.PLAINTEXT.value: PLAINTEXT,
}
