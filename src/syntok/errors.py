"""Custom exception hierarchy for syntok grammar and registry errors."""

import regex as re


class SynTokError(Exception):
    """Base exception for all syntok errors."""


class GrammarError(SynTokError):
    """Raised when compiling and/or validating a grammar."""

    def __init__(
        self,
        message: str,
        *,
        grammar: str | None = None,
        pattern: str | None = None,
        regex_err: re.error | None = None,
    ) -> None:
        """
        Initialize GrammarError with grammar details.

        Args:
            message: Error message.
            grammar: Name of the grammar being built.
            pattern: The regex pattern that failed.
            regex_err: The underlying regex error from the regex library.
        """
        extra = " "
        if grammar:
            extra += f"(grammar: {grammar}) "
        if pattern:
            extra += f"(pattern: {pattern!r}) "
        if regex_err:
            extra += f"(reason: {regex_err}) "
        super().__init__(message + extra)
        self.grammar = grammar
        self.pattern = pattern
        self.regex_err = regex_err


class RegistryError(SynTokError):
    """Raised when a grammar registry cannot be built."""

    def __init__(
        self,
        message: str,
        *,
        language: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if language:
            extra += f"(language: {language}) "
        if available is not None:
            extra += f"(available: {available}) "
        super().__init__(message + extra)
        self.language = language
        self.available = available


class LanguageError(SynTokError):
    """Raised when a language name is not recognised."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available
