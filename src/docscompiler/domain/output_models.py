from __future__ import annotations

"""
Output Domain Enumerations.

Defines the switches exposed by output sinks: the content type that gates
HTML rendering and the compilation mode that gates synthetic index pages.
"""

from enum import Enum


class OutputType(Enum):
    """Content type produced by an output sink."""
    HTML = "html"
    MARKDOWN = "markdown"


class CompilationMode(Enum):
    """Build mode. LEGACY additionally emits one index page per folder."""
    NORMAL = "normal"
    LEGACY = "legacy"

    @classmethod
    def parse(cls, name: str) -> "CompilationMode":
        key = str(name).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown compilation mode '{name}'.")
