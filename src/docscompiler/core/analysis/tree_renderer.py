from __future__ import annotations

"""
Documentation Tree Renderer.

Converts the resolved documentation tree into a visual ASCII
representation, annotating each item with its kind and language.
"""

from typing import List

from docscompiler.domain.languages import ClientType
from docscompiler.domain.tree_models import Document, Folder

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_doc_tree(folder: Folder, lines: List[str], prefix: str = "") -> None:
    """
    Recursively transform a folder into a list of strings.

    Uses standard ASCII connectors (├──, └──) and keeps the manifest
    order of the children.

    Args:
        folder: Current folder to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(folder.children)

    for i, child in enumerate(folder.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        tag = f" [{child.language.value}]" if child.language is not ClientType.NONE else ""

        # Scenario A: Folder
        if isinstance(child, Folder):
            marker = " (multilanguage)" if child.multilanguage else ""
            lines.append(f"{prefix}{connector}{child.slug}/{tag}{marker}")
            render_doc_tree(child, lines, prefix + ("    " if is_last else "│   "))
            continue

        # Scenario B: Document
        if isinstance(child, Document):
            lines.append(f"{prefix}{connector}{child.slug}{tag} - {child.title}")


def generate_tree_lines(root: Folder) -> List[str]:
    """Render a whole tree, headed by the root title."""
    lines: List[str] = [root.title]
    render_doc_tree(root, lines)
    return lines
