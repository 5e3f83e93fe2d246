from __future__ import annotations

"""
Navigation Index Builder.

Serializes the compiled documentation tree into the nested structure
persisted as the site's navigation index. Manifest order is preserved.
"""

from typing import Any, Dict, List

from docscompiler.core.rendering.links import resolve_site_url
from docscompiler.domain.constants import HTML_EXTENSION
from docscompiler.domain.tree_models import Document, Folder


def build_navigation(folder: Folder, root_url: str = "/") -> List[Dict[str, Any]]:
    """
    Build the navigation entries of a folder.

    Documents that were never compiled (no content) are left out.

    Args:
        folder: Folder whose children are serialized.
        root_url: Site root used to build page URLs.

    Returns:
        List[Dict[str, Any]]: One entry per child, folders nesting their own.
    """
    entries: List[Dict[str, Any]] = []
    for child in folder.children:
        if isinstance(child, Folder):
            entries.append({
                "kind": "folder",
                "title": child.title,
                "slug": child.slug,
                "language": child.language.value,
                "multilanguage": child.multilanguage,
                "children": build_navigation(child, root_url),
            })
        elif isinstance(child, Document) and child.content is not None:
            entries.append({
                "kind": "document",
                "title": child.title,
                "slug": child.slug,
                "language": child.language.value,
                "url": resolve_site_url(
                    root_url, f"{child.virtual_trail}/{child.slug}{HTML_EXTENSION}"
                ),
            })
    return entries
