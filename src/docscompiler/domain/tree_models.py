from __future__ import annotations

"""
Documentation Tree Data Models.

Provides the two node kinds of the documentation hierarchy (Folder and
Document) together with the pure path-composition helpers used to stamp
physical and virtual trails onto them during traversal.
"""

import weakref
from dataclasses import InitVar, dataclass, field
from typing import Iterator, List, Optional, Union

from docscompiler.domain.constants import SOURCE_EXTENSION
from docscompiler.domain.languages import ClientType

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Document:
    """
    Leaf entry of the documentation tree.

    Attributes:
        title: Display title declared in the manifest.
        slug: Source file name (extension-bearing until compiled).
        trail: Physical container path accumulated from ancestors.
        virtual_trail: Public URL container path, may carry a language segment.
        language: Resolved target language.
        content: Rendered output, populated by the Compile Pass.
        owner: Containing folder. Stored as a weak reference.
    """
    title: str
    slug: str
    trail: str = ""
    virtual_trail: str = ""
    language: ClientType = ClientType.NONE
    content: Optional[str] = None
    owner: InitVar[Optional["Folder"]] = None

    def __post_init__(self, owner: Optional["Folder"]) -> None:
        self._parent = weakref.ref(owner) if owner is not None else None

    @property
    def parent(self) -> Optional["Folder"]:
        return self._parent() if self._parent is not None else None


@dataclass(eq=False)
class Folder:
    """
    Container entry of the documentation tree.

    Attributes:
        title: Display title declared in the manifest.
        slug: Directory name (empty for the root).
        trail: Physical container path accumulated from ancestors.
        virtual_trail: Public URL container path, may carry a language segment.
        multilanguage: Whether the folder content is replicated per language.
        language: Language resolved for this folder by its caller.
        children: Ordered child items, exclusively owned by this folder.
        owner: Containing folder. Stored as a weak reference.
    """
    title: str
    slug: str = ""
    trail: str = ""
    virtual_trail: str = ""
    multilanguage: bool = False
    language: ClientType = ClientType.NONE
    children: List["TreeItem"] = field(default_factory=list)
    owner: InitVar[Optional["Folder"]] = None

    def __post_init__(self, owner: Optional["Folder"]) -> None:
        self._parent = weakref.ref(owner) if owner is not None else None

    @property
    def parent(self) -> Optional["Folder"]:
        return self._parent() if self._parent is not None else None

    @property
    def full_slug(self) -> str:
        """Physical path of the folder itself (trail joined with slug)."""
        return compose_trail(self.trail, self.slug)


TreeItem = Union[Folder, Document]

# -----------------------------------------------------------------------------
# PATH COMPOSITION
# -----------------------------------------------------------------------------

def _join(*segments: Optional[str]) -> str:
    parts: List[str] = []
    for segment in segments:
        if segment:
            parts.extend(p for p in segment.replace("\\", "/").split("/") if p)
    return "/".join(parts)


def compose_trail(parent_trail: str, parent_slug: Optional[str]) -> str:
    """
    Compose the container path of a child item.

    The result is the parent's trail joined with the parent's slug. The
    child's own slug is never part of it.

    Args:
        parent_trail: Trail of the owning folder.
        parent_slug: Slug of the owning folder (empty for the root).

    Returns:
        str: Forward-slash separated container path.
    """
    return _join(parent_trail, parent_slug)


def inject_language_segment(path: str, language: ClientType) -> str:
    """
    Append the language segment to a path unless already present.

    Args:
        path: Forward-slash separated path.
        language: Resolved language. NONE leaves the path untouched.

    Returns:
        str: Path carrying the language segment at most once.
    """
    if language is ClientType.NONE:
        return path
    if language.value in path.split("/"):
        return path
    return _join(path, language.value)


def compose_virtual_trail(
        parent_virtual_trail: str,
        parent_slug: Optional[str],
        language: ClientType,
) -> str:
    """
    Compose the public URL container path of a child item.

    Follows the trail composition rule and then injects the language
    segment. Applying the language twice yields the same path as once.

    Args:
        parent_virtual_trail: Virtual trail of the owning folder.
        parent_slug: Slug of the owning folder.
        language: Language resolved for the child.

    Returns:
        str: Forward-slash separated virtual container path.
    """
    return inject_language_segment(_join(parent_virtual_trail, parent_slug), language)


def strip_extension(slug: str) -> str:
    """Drop the source extension from a document slug."""
    return slug.replace(SOURCE_EXTENSION, "")


def iter_tree(folder: Folder) -> Iterator[TreeItem]:
    """Yield every descendant of a folder depth-first, in manifest order."""
    for child in folder.children:
        yield child
        if isinstance(child, Folder):
            yield from iter_tree(child)
