"""Language utilities for valida-br.

This module centralizes the language options used for failure messages.
Keeping it in the domain layer allows the validators, the CLI and the
exporters to share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    PORTUGUESE = "pt"
    ENGLISH = "en"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.PORTUGUESE

    @classmethod
    def from_bool(cls, english: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.ENGLISH if english else cls.PORTUGUESE

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "English" if self is Language.ENGLISH else "Português"
