from enum import Enum
from pathlib import PurePath
from typing import Final

from .errors import LanguageError


class Language(str, Enum):
    """Language identifiers with a built-in grammar."""

    # web / frontend
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    REACT = "react"  # JSX and TSX
    VUE = "vue"
    HTML = "html"
    CSS = "css"
    JSON = "json"

    # backend / data
    JAVA = "java"
    PYTHON = "python"
    SQL = "sql"
    XML = "xml"
    YAML = "yaml"
    PROPERTIES = "properties"
    LOG = "log"

    # docs
    MARKDOWN = "markdown"
    PLAINTEXT = "plaintext"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def get(cls, name: str) -> "Language":
        """Get language by identifier or member name (case-insensitive)."""
        try:
            return cls(name.lower())
        except ValueError:
            pass
        try:
            return cls[name.upper().replace("-", "_")]
        except KeyError:
            raise LanguageError(
                "unknown language",
                invalid_name=name,
                available=[lang.value for lang in cls],
            )


_EXTENSIONS: Final[dict[str, Language]] = {
    "js": Language.JAVASCRIPT,
    "ts": Language.TYPESCRIPT,
    "jsx": Language.REACT,
    "tsx": Language.REACT,
    "vue": Language.VUE,
    "html": Language.HTML,
    "css": Language.CSS,
    "json": Language.JSON,
    "java": Language.JAVA,
    "py": Language.PYTHON,
    "sql": Language.SQL,
    "xml": Language.XML,
    "yaml": Language.YAML,
    "yml": Language.YAML,
    "properties": Language.PROPERTIES,
    "log": Language.LOG,
    "md": Language.MARKDOWN,
    "txt": Language.PLAINTEXT,
}


def list_extensions() -> list[str]:
    """Return file extensions with a known language."""
    return list(_EXTENSIONS.keys())


def language_for_filename(filename: str) -> Language:
    """
    Resolve the language of a file from its extension.

    Matching is case-insensitive; unknown or missing extensions resolve to
    ``Language.PLAINTEXT``.

    .. code-block:: python

        language_for_filename("App.tsx")       # Language.REACT
        language_for_filename("README")        # Language.PLAINTEXT
    """
    ext = PurePath(filename).suffix.lstrip(".").lower()
    return _EXTENSIONS.get(ext, Language.PLAINTEXT)


__all__ = [
    "Language",
    "list_extensions",
    "language_for_filename",
]
