"""Grammar-driven scanner that splits source text into classified tokens."""

import logging

from ._config import match_timeout
from ._sanitise import escape_ctrl_chars
from .grammar import Grammar
from .languages import language_for_filename
from .registry import GrammarRegistry, default_registry
from .types import LanguageId, Token, TokenType

log = logging.getLogger(__name__)


class Tokenizer:
    """
    Tokenizer bound to a grammar registry.

    Tokenization is total: any string in any language identifier produces a
    token list whose contents concatenate back to the input. Unknown languages
    use the registry's fallback grammar.
    """

    def __init__(
        self, registry: GrammarRegistry | None = None, *, timeout: float | None = None
    ) -> None:
        """
        :param registry: Grammars to tokenize with; defaults to the built-in registry.
        :param timeout: Optional regex timeout in seconds for one scan. Input
                        left unscanned when it expires is emitted as ``text``.
        """
        self.registry: GrammarRegistry = (
            registry if registry is not None else default_registry()
        )
        self.timeout = timeout if timeout is not None else match_timeout()

    def tokenize(self, code: str, language: LanguageId) -> list[Token]:
        """
        Tokenize ``code`` with the grammar registered for ``language``.

        :param code: Source text, possibly empty.
        :param language: Language identifier, compared case-sensitively.
        :return: Ordered tokens covering ``code`` exactly.

        .. code-block:: python

            tok = Tokenizer()
            tok.tokenize("const x = 1;", "javascript")
        """
        return scan(code, self.registry.lookup(language), timeout=self.timeout)

    def tokenize_file(self, code: str, filename: str) -> list[Token]:
        """Tokenize ``code`` using the language implied by ``filename``'s extension."""
        return self.tokenize(code, language_for_filename(filename).value)


def scan(code: str, grammar: Grammar, *, timeout: float | None = None) -> list[Token]:
    """
    Scan ``code`` left to right with ``grammar``.

    Each match becomes one token labelled by the first rule that fired; spans
    between matches become ``text`` tokens. Zero-width matches are skipped.
    """
    tokens: list[Token] = []
    last = 0

    try:
        for match in grammar.finditer(code, timeout=timeout):
            start, end = match.span()
            if start == end:
                continue
            # untouched gap before this match
            if start > last:
                tokens.append(Token(TokenType.TEXT, code[last:start]))
            tokens.append(Token(grammar.classify(match), match.group()))
            last = end
    except TimeoutError:
        # remaining input falls through to the trailing text token below
        log.warning(
            f"{grammar.name} scan timed out after {timeout}s at offset {last} "
            f"of {len(code)}; remaining input left unclassified"
        )

    if last < len(code):
        tokens.append(Token(TokenType.TEXT, code[last:]))

    return tokens


def tokenize(
    code: str, language: LanguageId, registry: GrammarRegistry | None = None
) -> list[Token]:
    """Tokenize ``code`` as ``language`` using ``registry`` (built-in grammars by default)."""
    return Tokenizer(registry).tokenize(code, language)


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens one per line with control characters escaped, for debugging."""
    return "\n".join(
        f"{str(tok.type):<12} {escape_ctrl_chars(tok.content)}" for tok in tokens
    )


__all__ = [
    "Tokenizer",
    "scan",
    "tokenize",
    "format_tokens",
]
