"""Declarative grammars compiled into a single regex alternation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import logging

import regex as re
from typing_extensions import deprecated

from .errors import GrammarError
from .types import Label, TokenType

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Rule:
    """
    A single lexical rule: a token label paired with the pattern that produces it.

    The pattern must not contain capturing groups of its own; the grammar wraps
    each rule in exactly one group so rule order and group order stay aligned.
    ``examples`` are sample inputs whose first token the owning grammar must
    classify with ``label``.
    """

    label: TokenType
    pattern: str
    examples: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", _coerce_label(self.label, self.pattern))
        object.__setattr__(self, "examples", tuple(self.examples))


class Grammar:
    """
    Named, immutable lexical grammar for one language.

    Rules are tried in declared order at every scan position (first alternative
    wins, not longest match), so more specific rules must come before more
    general ones. ``find_shadowed`` reports rules whose examples are claimed by
    an earlier rule.
    """

    __slots__ = ("_name", "_rules", "_labels", "_ignore_case", "_compiled_pat")

    def __init__(
        self, name: str, rules: Iterable[Rule], *, ignore_case: bool = False
    ) -> None:
        rules = tuple(rules)
        flags = re.IGNORECASE if ignore_case else 0

        for rule in rules:
            compiled = _compile_pattern(rule.pattern, flags, grammar=name)
            # nested groups would shift every later rule's group index
            if compiled.groups:
                raise GrammarError(
                    "rule pattern must not contain capturing groups",
                    grammar=name,
                    pattern=rule.pattern,
                )

        self._init(
            name,
            rules,
            tuple(rule.label for rule in rules),
            ignore_case,
            # grammar with no rules never matches; everything is plain text
            _compile_pattern(
                "|".join(f"({rule.pattern})" for rule in rules), flags, grammar=name
            )
            if rules
            else None,
        )

    @classmethod
    @deprecated("parallel label tables drift out of sync; build a Grammar from Rules")
    def from_table(
        cls,
        name: str,
        pattern: str,
        labels: Iterable[Label],
        *,
        ignore_case: bool = False,
    ) -> "Grammar":
        """
        Build a grammar from one combined pattern and index-aligned labels.

        A label/group count mismatch is tolerated: matches whose group has no
        label are classified as ``text``.

        :param name: Grammar name.
        :param pattern: Combined regex with one capturing group per alternative.
        :param labels: Token labels, one per capturing group, in group order.
        :raises GrammarError: If the pattern is invalid or a label is unknown.
        """
        flags = re.IGNORECASE if ignore_case else 0
        compiled = _compile_pattern(pattern, flags, grammar=name)
        labels = tuple(_coerce_label(label, pattern) for label in labels)

        if len(labels) != compiled.groups:
            log.warning(
                f"grammar {name!r} declares {len(labels)} labels for "
                f"{compiled.groups} capturing groups; unlabelled matches become text"
            )

        grammar = cls.__new__(cls)
        grammar._init(name, (), labels, ignore_case, compiled)
        return grammar

    def _init(
        self,
        name: str,
        rules: tuple[Rule, ...],
        labels: tuple[TokenType, ...],
        ignore_case: bool,
        compiled_pat: re.Pattern[str] | None,
    ) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_rules", rules)
        object.__setattr__(self, "_labels", labels)
        object.__setattr__(self, "_ignore_case", ignore_case)
        object.__setattr__(self, "_compiled_pat", compiled_pat)

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Grammar({self._name!r}, labels={len(self._labels)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def labels(self) -> tuple[TokenType, ...]:
        return self._labels

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    @property
    def group_count(self) -> int:
        """Number of capturing groups in the combined pattern."""
        if self._compiled_pat is None:
            return 0
        return self._compiled_pat.groups

    @property
    def pattern(self) -> str:
        """Combined pattern source, empty for a grammar with no rules."""
        if self._compiled_pat is None:
            return ""
        return self._compiled_pat.pattern

    def finditer(
        self, text: str, timeout: float | None = None
    ) -> Iterator[re.Match[str]]:
        """Yield non-overlapping matches of the combined pattern, left to right."""
        if self._compiled_pat is None:
            return iter(())
        return self._compiled_pat.finditer(text, timeout=timeout)

    def classify(self, match: re.Match[str]) -> TokenType:
        """
        Return the label of the first participating group in ``match``.

        Groups without a label, or a match in which no group participated,
        are classified as ``text``.
        """
        n = min(len(self._labels), match.re.groups)
        for idx in range(n):
            if match.group(idx + 1) is not None:
                return self._labels[idx]
        return TokenType.TEXT

    def find_shadowed(self) -> list[tuple[Rule, str, TokenType]]:
        """
        Return ``(rule, example, got)`` for each rule example whose first token
        is not classified with the rule's own label.
        """
        shadowed = []
        for rule in self._rules:
            for example in rule.examples:
                got = self._first_label(example)
                if got is not rule.label:
                    shadowed.append((rule, example, got))
        return shadowed

    def _first_label(self, text: str) -> TokenType:
        for match in self.finditer(text):
            # zero-width matches never become tokens
            if match.end() == match.start():
                continue
            if match.start() == 0:
                return self.classify(match)
            break
        return TokenType.TEXT


def _coerce_label(label: Label, pattern: str) -> TokenType:
    try:
        return TokenType(label)
    except ValueError:
        raise GrammarError(f"unknown token label {label!r}", pattern=pattern)


def _compile_pattern(pattern: str, flags: int, *, grammar: str) -> re.Pattern[str]:
    """
    Compile and validate a regex pattern.

    :param pattern: Regex pattern string to compile.
    :param flags: ``regex`` flags applied to the whole pattern.
    :return: Compiled regex pattern.
    :raises GrammarError: If pattern is invalid.
    """
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise GrammarError(
            "invalid regex pattern", grammar=grammar, pattern=pattern, regex_err=e
        )
