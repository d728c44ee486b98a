"""
Core types for syntax tokenization.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class TokenType(str, Enum):
    """Closed set of token labels understood by the rendering layer."""

    TEXT = "text"
    COMMENT = "comment"
    STRING = "string"
    KEYWORD = "keyword"
    FUNCTION = "function"
    NUMBER = "number"
    TAG = "tag"
    ATTR_NAME = "attr-name"
    ATTR_VALUE = "attr-value"
    SELECTOR = "selector"
    PROPERTY = "property"
    ANNOTATION = "annotation"
    ITALIC = "italic"
    LINK = "link"
    PUNCTUATION = "punctuation"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, contiguous span of source text."""

    type: TokenType
    content: str


LanguageId: TypeAlias = str
Label: TypeAlias = TokenType | str
