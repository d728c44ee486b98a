"""SynTok: Grammar-driven syntax tokenization for code highlighting."""

from importlib.metadata import PackageNotFoundError, version

from .errors import GrammarError, LanguageError, RegistryError, SynTokError
from .factory import get_grammar, get_tokenizer, list_languages
from .grammar import Grammar, Rule
from .languages import Language, language_for_filename, list_extensions
from .registry import GrammarRegistry, build_default_registry, default_registry
from .styles import DEFAULT_STYLE, THEME, render_html, style_for
from .tokenizer import Tokenizer, format_tokens, scan, tokenize
from .types import Token, TokenType

try:
    __version__ = version("syntok")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Token",
    "TokenType",
    "Rule",
    "Grammar",
    "GrammarRegistry",
    "Language",
    "Tokenizer",
    "SynTokError",
    "GrammarError",
    "RegistryError",
    "LanguageError",
    "DEFAULT_STYLE",
    "THEME",
    "tokenize",
    "scan",
    "format_tokens",
    "get_tokenizer",
    "get_grammar",
    "list_languages",
    "list_extensions",
    "language_for_filename",
    "build_default_registry",
    "default_registry",
    "style_for",
    "render_html",
]
