from __future__ import annotations

"""
Documentation Renderer.

Turns a Markdown source file into HTML content. Before conversion it
expands code-sample directives against the configured code-sample
directories and rewrites relative image references into site-absolute
links based on the trail of the document.
"""

import html
import logging
import os
import re
import textwrap
from typing import TYPE_CHECKING, List, Optional

import markdown

from docscompiler.core.rendering.links import resolve_site_url
from docscompiler.domain.constants import IMAGES_DIR_NAME
from docscompiler.domain.tree_models import Document, Folder

if TYPE_CHECKING:
    from docscompiler.core.compiler import Compiler

logger = logging.getLogger(__name__)

# {CODE region_name@Relative\Path\File.cs /}
_CODE_DIRECTIVE = re.compile(r"\{CODE\s+(?P<region>[^@\s]+)@(?P<file>[^\s}]+)\s*/\}")
_IMAGE_REFERENCE = re.compile(r"(\]\(|src=[\"'])(?:\./)?" + IMAGES_DIR_NAME + "/")
_REGION_END = re.compile(r"^\s*(?:#|//\s*)endregion\b")

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

# -----------------------------------------------------------------------------
# RENDER COLLABORATOR
# -----------------------------------------------------------------------------

class DocumentationRenderer:
    """Markdown based render collaborator used by the Compile Pass."""

    def __init__(self) -> None:
        self._md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)

    def render(
            self,
            compiler: "Compiler",
            folder: Optional[Folder],
            document: Document,
            source_path: str,
            trail: str,
    ) -> str:
        """
        Render a source file for a document.

        Literal '{language}' and '{links}' placeholders pass through
        untouched so the caller can substitute them afterwards.

        Args:
            compiler: Compiler context (code-sample lookup, brushes, output).
            folder: Owning folder for synthetic index pages, otherwise None.
            document: Document being rendered.
            source_path: Absolute path of the Markdown source.
            trail: Site path used to resolve relative image links.

        Returns:
            str: Rendered HTML.

        Raises:
            OSError: If the source or a referenced code sample cannot be read.
            KeyError: If a code sample targets an unconfigured language.
            ValueError: If a referenced code region does not exist.
        """
        logger.debug(
            f"Rendering {source_path} (language={document.language.value}, "
            f"index={'yes' if folder is not None else 'no'})"
        )
        with open(source_path, "r", encoding="utf-8-sig") as f:
            text = f.read()

        text = _CODE_DIRECTIVE.sub(
            lambda m: self._code_block(compiler, document, m.group("region"), m.group("file")),
            text,
        )

        images_url = resolve_site_url(compiler.output.root_url, f"{trail}/{IMAGES_DIR_NAME}/")
        text = _IMAGE_REFERENCE.sub(lambda m: m.group(1) + images_url, text)

        return self._md.reset().convert(text)

    @staticmethod
    def _code_block(compiler: "Compiler", document: Document, region: str, rel_file: str) -> str:
        rel_file = rel_file.replace("\\", "/")
        language = compiler.resolve_language(rel_file, document.language)
        base_dir = compiler.get_code_samples_path(rel_file, document.language)
        sample_path = os.path.join(base_dir, *rel_file.split("/"))

        with open(sample_path, "r", encoding="utf-8-sig") as f:
            code = extract_region(f.read().splitlines(), region, sample_path)

        brush = compiler.get_brush(language)
        return f'\n\n<pre class="brush: {brush}">{html.escape(code)}</pre>\n\n'

# -----------------------------------------------------------------------------
# CODE SAMPLE HELPERS
# -----------------------------------------------------------------------------

def extract_region(lines: List[str], region: str, source: str = "") -> str:
    """
    Extract a named region from code sample lines.

    Supports C# ('#region name' / '#endregion') and Java
    ('// region name' / '// endregion') markers.

    Args:
        lines: Source lines of the sample file.
        region: Region name to extract.
        source: File name used in error messages.

    Returns:
        str: Dedented region body.

    Raises:
        ValueError: If the region start or end marker is missing.
    """
    start = re.compile(r"^\s*(?:#|//\s*)region\s+" + re.escape(region) + r"\s*$")
    body: List[str] = []
    inside = False

    for line in lines:
        if not inside:
            inside = bool(start.match(line))
            continue
        if _REGION_END.match(line):
            return textwrap.dedent("\n".join(body)).strip("\n")
        body.append(line)

    state = "not terminated" if inside else "not found"
    raise ValueError(f"Code region '{region}' {state} in {source or '<sample>'}.")
