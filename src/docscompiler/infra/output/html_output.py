from __future__ import annotations

"""
HTML Output Sink.

Writes compiled documents as standalone HTML files laid out by virtual
trail, copies images next to their physical folder path, and stores the
navigation index as JSON.
"""

import html
import json
import logging
import os
import shutil
from typing import Any, Dict, List

from docscompiler.domain.constants import (
    DEFAULT_ROOT_URL,
    HTML_EXTENSION,
    IMAGES_DIR_NAME,
    NAVIGATION_FILE_NAME,
)
from docscompiler.domain.output_models import CompilationMode, OutputType
from docscompiler.domain.tree_models import Document, Folder
from docscompiler.infra.fs import safe_mkdir
from docscompiler.infra.output.base import DocsOutput

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html lang=\"en\">\n"
    "<head>\n"
    "<meta charset=\"utf-8\">\n"
    "<title>{title}</title>\n"
    "</head>\n"
    "<body>\n"
    "{content}\n"
    "</body>\n"
    "</html>\n"
)


class HtmlOutput(DocsOutput):
    """
    File system sink producing one HTML page per compiled document.

    Attributes:
        output_path: Root directory of the generated site.
        documents_saved: Relative paths of written pages, in write order.
        images_saved: Relative paths of copied images, in copy order.
    """

    content_type = OutputType.HTML

    def __init__(
            self,
            output_path: str,
            root_url: str = DEFAULT_ROOT_URL,
            compilation_mode: CompilationMode = CompilationMode.NORMAL,
    ) -> None:
        super().__init__(root_url=root_url, compilation_mode=compilation_mode)
        self.output_path = os.path.abspath(output_path)
        self.documents_saved: List[str] = []
        self.images_saved: List[str] = []

    def save_doc_item(self, document: Document) -> None:
        rel_path = _site_path(document.virtual_trail, document.slug + HTML_EXTENSION)
        target = self._prepare(rel_path)

        page = PAGE_TEMPLATE.format(
            title=html.escape(document.title or document.slug),
            content=document.content or "",
        )
        with open(target, "w", encoding="utf-8") as f:
            f.write(page)

        self.documents_saved.append(rel_path)
        logger.debug(f"Saved document: {rel_path}")

    def save_image(self, folder: Folder, image_path: str) -> None:
        rel_path = _site_path(folder.full_slug, IMAGES_DIR_NAME, os.path.basename(image_path))
        target = self._prepare(rel_path)

        shutil.copy2(image_path, target)

        self.images_saved.append(rel_path)
        logger.debug(f"Copied image: {rel_path}")

    def save_navigation(self, navigation: List[Dict[str, Any]]) -> str:
        target = self._prepare(NAVIGATION_FILE_NAME)
        with open(target, "w", encoding="utf-8") as f:
            json.dump(navigation, f, ensure_ascii=False, indent=2)
        logger.info(f"Navigation index saved to: {target}")
        return target

    def _prepare(self, rel_path: str) -> str:
        target = os.path.join(self.output_path, *rel_path.split("/"))
        ok, err = safe_mkdir(os.path.dirname(target))
        if not ok:
            raise OSError(f"Cannot create output directory for '{rel_path}': {err}")
        return target


def _site_path(*segments: str) -> str:
    parts: List[str] = []
    for segment in segments:
        parts.extend(p for p in segment.replace("\\", "/").split("/") if p)
    return "/".join(parts)
