from __future__ import annotations

"""
Client Language Definitions.

Provides the closed enumeration of documentation target languages and the
policy helpers shared by both traversal passes: the default fan-out set,
the primary language, and the filename heuristic used to resolve the
language-agnostic marker.
"""

from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# LANGUAGE ENUMERATION
# -----------------------------------------------------------------------------

class ClientType(Enum):
    """
    Target client of a documentation page.

    The value is the token used in file names and URL segments
    (e.g. 'intro.DotNet.markdown', 'guide/DotNet/intro.html').
    """
    NONE = "None"
    JAVA = "Java"
    DOTNET = "DotNet"
    HTTP = "Http"

    @property
    def description(self) -> str:
        """Human readable label used in generated pages."""
        return _DESCRIPTIONS.get(self, self.value)

    @classmethod
    def parse(cls, name: str) -> "ClientType":
        """
        Resolve a language from its token or member name (case-insensitive).

        Args:
            name: Raw identifier, e.g. 'DotNet', 'dotnet' or 'JAVA'.

        Returns:
            ClientType: The matching member.

        Raises:
            ValueError: If the name does not match any language.
        """
        key = str(name).strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown client language '{name}'.")


_DESCRIPTIONS = {
    ClientType.DOTNET: ".NET",
    ClientType.HTTP: "HTTP",
}

# -----------------------------------------------------------------------------
# FAN-OUT POLICY
# -----------------------------------------------------------------------------

SUPPORTED_LANGUAGES: Tuple[ClientType, ...] = (
    ClientType.DOTNET,
    ClientType.HTTP,
    ClientType.JAVA,
)

PRIMARY_LANGUAGE = ClientType.DOTNET

_BRUSHES = {
    ClientType.DOTNET: "csharp",
    ClientType.JAVA: "java",
    ClientType.HTTP: "plain",
}


def resolve_language(
        path: str,
        language: ClientType,
        primary: ClientType = PRIMARY_LANGUAGE,
) -> ClientType:
    """
    Resolve the language-agnostic marker using a filename heuristic.

    A path ending in 'java' is treated as Java; anything else falls back to
    the primary language. This is a known approximation and is kept as is.

    Args:
        path: Contextual path string (usually a code-sample file).
        language: Requested language.
        primary: Language used when the heuristic finds no marker.

    Returns:
        ClientType: A concrete language.
    """
    if language is not ClientType.NONE:
        return language
    return ClientType.JAVA if path.endswith("java") else primary


def get_brush(language: ClientType) -> str:
    """Return the syntax highlighter brush for a language."""
    return _BRUSHES.get(language, "csharp")
