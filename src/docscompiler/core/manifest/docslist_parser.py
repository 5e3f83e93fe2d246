from __future__ import annotations

"""
Manifest (.docslist) Parser.

Turns a folder's listing file into the ordered sequence of child tree
items. Each line declares one child:

    <slug> | <title> [| multilanguage]

A slug ending with a path separator declares a folder; any other slug
declares a document. Blank lines and lines starting with '#' are ignored.
"""

import logging
from typing import List, Optional

from docscompiler.domain.tree_models import Document, Folder, TreeItem

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = "|"
_MULTILANGUAGE_FLAG = "multilanguage"


class DocsListParser:
    """Manifest resolver reading the pipe-separated .docslist format."""

    def parse(self, manifest_path: str, owner: Folder) -> List[TreeItem]:
        """
        Parse a manifest file into freshly created child items.

        Items are returned in declaration order with only title, slug and
        kind populated; trails and languages are stamped by the caller.

        Args:
            manifest_path: Absolute path to the .docslist file.
            owner: Folder that will own the returned items.

        Returns:
            List[TreeItem]: Ordered child items.

        Raises:
            ValueError: If a line is malformed.
            OSError: If the manifest cannot be read.
        """
        with open(manifest_path, "r", encoding="utf-8-sig") as f:
            lines = f.read().splitlines()

        items: List[TreeItem] = []
        for line_no, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            items.append(self._parse_line(line, owner, manifest_path, line_no))

        logger.debug(f"Manifest {manifest_path}: {len(items)} entries")
        return items

    @staticmethod
    def _parse_line(line: str, owner: Folder, manifest_path: str, line_no: int) -> TreeItem:
        fields = [part.strip() for part in line.split(_FIELD_SEPARATOR)]
        slug = fields[0]
        title: Optional[str] = fields[1] if len(fields) > 1 and fields[1] else None
        flags = [flag.lower() for flag in fields[2:] if flag]

        where = f"{manifest_path}:{line_no}"
        is_folder = slug.endswith(("/", "\\"))
        slug = slug.rstrip("/\\")
        if not slug.strip("/\\"):
            raise ValueError(f"{where}: empty slug.")

        unknown = [flag for flag in flags if flag != _MULTILANGUAGE_FLAG]
        if unknown:
            raise ValueError(f"{where}: unknown flag(s) {', '.join(unknown)}.")

        multilanguage = _MULTILANGUAGE_FLAG in flags
        if not is_folder:
            if multilanguage:
                raise ValueError(f"{where}: '{_MULTILANGUAGE_FLAG}' is only valid on folders.")
            return Document(title=title or slug, slug=slug, owner=owner)

        return Folder(
            title=title or slug.strip("/\\"),
            slug=slug,
            multilanguage=multilanguage,
            owner=owner,
        )
