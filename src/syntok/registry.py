"""Immutable mapping from language identifiers to grammars."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
import logging

from ._config import DEFAULT_FALLBACK, fallback_language
from .errors import RegistryError
from .grammar import Grammar
from .grammars import BUILTIN_GRAMMARS
from .types import LanguageId

log = logging.getLogger(__name__)


class GrammarRegistry(Mapping[str, Grammar]):
    """
    Read-only language -> grammar mapping with a total ``lookup``.

    Identifiers are compared case-sensitively. The registry never changes after
    construction; ``with_grammar`` returns a new registry instead.
    """

    def __init__(
        self, grammars: Mapping[LanguageId, Grammar], *, default: LanguageId
    ) -> None:
        if default not in grammars:
            raise RegistryError(
                "default language has no grammar",
                language=default,
                available=list(grammars.keys()),
            )
        self._grammars: Mapping[LanguageId, Grammar] = MappingProxyType(dict(grammars))
        self._default = default

    def __getitem__(self, language: LanguageId) -> Grammar:
        return self._grammars[language]

    def __iter__(self) -> Iterator[LanguageId]:
        return iter(self._grammars)

    def __len__(self) -> int:
        return len(self._grammars)

    def __repr__(self) -> str:
        return f"GrammarRegistry(languages={list(self._grammars)}, default={self._default!r})"

    @property
    def default(self) -> LanguageId:
        """Identifier of the fallback grammar."""
        return self._default

    @property
    def fallback(self) -> Grammar:
        return self._grammars[self._default]

    def lookup(self, language: LanguageId) -> Grammar:
        """Return the grammar for ``language``, or the fallback grammar if unknown."""
        grammar = self._grammars.get(language)
        if grammar is None:
            log.debug(f"no grammar for {language!r}, using {self._default!r}")
            return self.fallback
        return grammar

    def with_grammar(self, language: LanguageId, grammar: Grammar) -> "GrammarRegistry":
        """Return a copy of this registry with ``grammar`` registered as ``language``."""
        grammars = dict(self._grammars)
        grammars[language] = grammar
        return GrammarRegistry(grammars, default=self._default)

    def with_default(self, language: LanguageId) -> "GrammarRegistry":
        """Return a copy of this registry that falls back to ``language``."""
        return GrammarRegistry(self._grammars, default=language)


def build_default_registry() -> GrammarRegistry:
    """
    Build a registry of all built-in grammars.

    The fallback language is read from ``SYNTOK_FALLBACK_LANGUAGE``; an
    unregistered value is ignored with a warning.
    """
    default = fallback_language()
    if default not in BUILTIN_GRAMMARS:
        log.warning(
            f"fallback language {default!r} has no grammar, using {DEFAULT_FALLBACK!r}"
        )
        default = DEFAULT_FALLBACK
    return GrammarRegistry(BUILTIN_GRAMMARS, default=default)


_default_registry: GrammarRegistry | None = None


def default_registry() -> GrammarRegistry:
    """Return the process-wide registry of built-in grammars, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry


__all__ = [
    "GrammarRegistry",
    "build_default_registry",
    "default_registry",
]
