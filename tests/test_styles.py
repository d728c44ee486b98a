"""Unit tests for the token theme table and HTML rendering."""

import syntok as stk
from syntok import DEFAULT_STYLE, THEME, Token, TokenType


def test_theme_covers_every_token_type():
    """Each token type has an entry, including plain text."""
    assert set(THEME) == set(TokenType)
    assert THEME[TokenType.TEXT] == DEFAULT_STYLE


def test_style_for_known_and_unknown_types():
    """Unknown labels fall back to the unstyled default."""
    assert "font-bold" in stk.style_for("keyword")
    assert stk.style_for(TokenType.LINK) == "text-blue-500 underline"
    assert stk.style_for("bracket") == DEFAULT_STYLE


def test_render_html_escapes_content():
    """Token content is HTML-escaped inside styled spans."""
    html = stk.render_html([Token(TokenType.TAG, "<div"), Token(TokenType.TEXT, " & ")])
    assert html == (
        f'<span class="{THEME[TokenType.TAG]}">&lt;div</span>'
        f'<span class="{DEFAULT_STYLE}"> &amp; </span>'
    )


def test_render_html_of_tokenized_code():
    """Rendering tokenizer output keeps every character."""
    html = stk.render_html(stk.tokenize("const x = 1;", "javascript"))
    assert html.count("<span") == 4
    assert "const" in html
