from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Recording doubles for the output sink and the render collaborator.
3. Builders for on-disk documentation trees.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from docscompiler.domain.config import CompilerSettings  # noqa: E402
from docscompiler.domain.languages import ClientType  # noqa: E402
from docscompiler.domain.output_models import CompilationMode, OutputType  # noqa: E402
from docscompiler.domain.tree_models import Document, Folder  # noqa: E402
from docscompiler.infra.output.base import DocsOutput  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class RecordingOutput(DocsOutput):
    """Output sink keeping every call in memory."""

    def __init__(
            self,
            root_url: str = "/",
            compilation_mode: CompilationMode = CompilationMode.NORMAL,
            content_type: OutputType = OutputType.HTML,
    ) -> None:
        super().__init__(root_url=root_url, compilation_mode=compilation_mode)
        self.content_type = content_type
        self.documents: List[Document] = []
        self.images: List[Tuple[Folder, str]] = []

    def save_doc_item(self, document: Document) -> None:
        self.documents.append(document)

    def save_image(self, folder: Folder, image_path: str) -> None:
        self.images.append((folder, image_path))

    def pages(self) -> Dict[str, Document]:
        """Saved documents keyed by their site path."""
        return {
            "/".join(p for p in (d.virtual_trail, d.slug + ".html") if p): d
            for d in self.documents
        }


class StubRenderer:
    """Render collaborator returning the raw source text."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Optional[Folder], Document, str, str]] = []

    def render(self, compiler: Any, folder: Optional[Folder], document: Document,
               source_path: str, trail: str) -> str:
        self.calls.append((folder, document, source_path, trail))
        with open(source_path, "r", encoding="utf-8") as f:
            return f.read()


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def recording_output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def make_output() -> Callable[..., RecordingOutput]:
    return RecordingOutput


@pytest.fixture
def stub_renderer() -> StubRenderer:
    return StubRenderer()


@pytest.fixture
def write_tree() -> Callable[[Path, Dict[str, Any]], Path]:
    """
    Return a helper materializing a nested dict as files under a root.

    Dict values are file contents (str) or nested dicts (directories).
    """
    def _write(root: Path, layout: Dict[str, Any]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for name, value in layout.items():
            if isinstance(value, dict):
                _write(root / name, value)
            else:
                (root / name).write_text(value, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def guide_site(tmp_path: Path, write_tree) -> Path:
    """
    Create the reference documentation tree.

    Structure:
    /docs
      .docslist               -> guide/ (multilanguage)
      not-documented.markdown
      /guide
        .docslist             -> intro.markdown
        intro.DotNet.markdown
        intro.Java.markdown
    """
    return write_tree(tmp_path / "docs", {
        ".docslist": "guide/ | Guide | multilanguage\n",
        "not-documented.markdown": "Missing for {language}.\n\n{links}\n",
        "guide": {
            ".docslist": "intro.markdown | Introduction\n",
            "intro.DotNet.markdown": "Intro for .NET",
            "intro.Java.markdown": "Intro for Java",
        },
    })


@pytest.fixture
def make_settings() -> Callable[..., CompilerSettings]:
    def _make(docs_root: Path, **kwargs: Any) -> CompilerSettings:
        kwargs.setdefault("code_samples_paths", {})
        return CompilerSettings(docs_root=str(docs_root), **kwargs)

    return _make


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Mirrors the structure of 'docscompiler.domain.config'.
    """
    return {
        "source_path": str(tmp_path),
        "docs_subdir": "docs",
        "output_path": str(tmp_path / "site"),
        "root_url": "/",
        "home_title": "Test Docs",
        "compilation_mode": "normal",
        "supported_languages": ["DotNet", "Http", "Java"],
        "primary_language": "DotNet",
        "code_samples": {"DotNet": "code-samples", "Java": "java-samples"},
        "print_tree": False,
        "write_navigation": True,
    }


@pytest.fixture
def all_languages() -> Tuple[ClientType, ...]:
    return (ClientType.DOTNET, ClientType.HTTP, ClientType.JAVA)
