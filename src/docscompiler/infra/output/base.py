from __future__ import annotations

"""
Base Definitions for Output Sinks.

Provides the abstract interface through which the compiler persists
compiled documents, images and the navigation index.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from docscompiler.domain.constants import DEFAULT_ROOT_URL
from docscompiler.domain.output_models import CompilationMode, OutputType
from docscompiler.domain.tree_models import Document, Folder


class DocsOutput(ABC):
    """
    Abstract sink receiving the artifacts of the Compile Pass.

    Attributes:
        content_type: Gates whether HTML rendering runs at all.
        compilation_mode: Gates the synthetic per-folder index page.
        root_url: Site root used for absolute cross-links.
    """

    content_type: OutputType = OutputType.HTML

    def __init__(
            self,
            root_url: str = DEFAULT_ROOT_URL,
            compilation_mode: CompilationMode = CompilationMode.NORMAL,
    ) -> None:
        self.root_url = root_url
        self.compilation_mode = compilation_mode

    @abstractmethod
    def save_doc_item(self, document: Document) -> None:
        """
        Persist a compiled document.

        Args:
            document: Document with its content and canonical slug set.
        """
        pass

    @abstractmethod
    def save_image(self, folder: Folder, image_path: str) -> None:
        """
        Persist an image found in a folder's images directory.

        Args:
            folder: Folder the image belongs to.
            image_path: Absolute path of the source image.
        """
        pass

    def save_navigation(self, navigation: List[Dict[str, Any]]) -> str:
        """Persist the navigation index. Sinks without one return ''."""
        return ""
