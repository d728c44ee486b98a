"""
Static theme table mapping token types to CSS classes.

Classes are Tailwind utilities chosen to read in both light and dark mode.
"""

from collections.abc import Iterable
from html import escape
from typing import Final

from .types import Token, TokenType

DEFAULT_STYLE: Final[str] = "text-gray-800 dark:text-gray-300"

THEME: Final[dict[TokenType, str]] = {
    TokenType.TEXT: DEFAULT_STYLE,
    TokenType.COMMENT: "text-gray-400 dark:text-gray-500 italic",
    TokenType.STRING: "text-green-600 dark:text-green-400",
    TokenType.KEYWORD: "text-purple-600 dark:text-purple-400 font-bold",
    TokenType.FUNCTION: "text-blue-600 dark:text-blue-400",
    TokenType.NUMBER: "text-orange-600 dark:text-orange-400",
    TokenType.TAG: "text-blue-700 dark:text-blue-300 font-bold",
    TokenType.ATTR_NAME: "text-sky-600 dark:text-sky-300",
    TokenType.ATTR_VALUE: "text-orange-600 dark:text-orange-300",
    TokenType.SELECTOR: "text-amber-600 dark:text-amber-400",
    TokenType.PROPERTY: "text-cyan-700 dark:text-cyan-300",
    TokenType.ANNOTATION: "text-yellow-600 dark:text-yellow-400",
    TokenType.ITALIC: "italic text-gray-600 dark:text-gray-400",
    TokenType.LINK: "text-blue-500 underline",
    TokenType.PUNCTUATION: DEFAULT_STYLE,
}


def style_for(token_type: TokenType | str) -> str:
    """Return the CSS classes for a token type; unknown types get the default style."""
    try:
        return THEME.get(TokenType(token_type), DEFAULT_STYLE)
    except ValueError:
        return DEFAULT_STYLE


def render_html(tokens: Iterable[Token]) -> str:
    """Render tokens as escaped ``<span>`` elements carrying their theme classes."""
    return "".join(
        f'<span class="{style_for(tok.type)}">{escape(tok.content, quote=False)}</span>'
        for tok in tokens
    )
