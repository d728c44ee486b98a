"""Factory functions for tokenizers and grammars."""

from typing import overload

from .errors import LanguageError
from .grammar import Grammar
from .languages import Language
from .registry import GrammarRegistry, default_registry
from .tokenizer import Tokenizer


def list_languages() -> list[str]:
    """Return identifiers of all built-in grammars."""
    return [lang.value for lang in Language]


def get_grammar(language: str, *, strict: bool = False) -> Grammar:
    """
    Return the built-in grammar for a language.

    :param language: Language identifier.
    :param strict: Resolve ``language`` through ``Language.get`` (case-insensitive,
                   accepts member names) and raise instead of falling back.
    :return: The registered grammar, or the fallback grammar when not strict.
    :raises LanguageError: If strict and the language is unknown.
    """
    registry = default_registry()
    if strict:
        return registry[Language.get(language).value]
    return registry.lookup(language)


@overload
def get_tokenizer(*, timeout: float | None = None) -> Tokenizer: ...


@overload
def get_tokenizer(
    *, registry: GrammarRegistry, timeout: float | None = None
) -> Tokenizer: ...


@overload
def get_tokenizer(*, fallback: str, timeout: float | None = None) -> Tokenizer: ...


def get_tokenizer(
    *,
    registry: GrammarRegistry | None = None,
    fallback: str | None = None,
    timeout: float | None = None,
) -> Tokenizer:
    """
    Create a tokenizer over the built-in or a custom grammar registry.

    :param registry: Custom registry. Defaults to the built-in grammars.
    :param fallback: Language used for unknown identifiers instead of the
                     registry default.
    :param timeout: Regex timeout in seconds for a single scan.
    :return: Configured tokenizer instance.
    :raises LanguageError: If ``fallback`` has no grammar in the registry.

    .. code-block:: python

        # built-in grammars, JavaScript fallback
        tokenizer = get_tokenizer()

        # unknown languages render as plain text
        tokenizer = get_tokenizer(fallback="plaintext")
    """
    if registry is None:
        registry = default_registry()

    if fallback is not None:
        if fallback not in registry:
            raise LanguageError(
                "fallback language has no grammar",
                invalid_name=fallback,
                available=list(registry.keys()),
            )
        registry = registry.with_default(fallback)

    return Tokenizer(registry, timeout=timeout)
