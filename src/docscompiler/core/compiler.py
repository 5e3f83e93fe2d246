from __future__ import annotations

"""
Documentation Compiler.

Implements the two-pass build over the documentation tree:
1. Parse Pass: walks folders that carry a manifest, asks the manifest
   resolver for their children and stamps trail, virtual trail and
   language on every item, fanning multilanguage folders out once per
   supported language.
2. Compile Pass: walks the resolved tree per language, renders every
   matching document (or a "not documented" page when no source exists
   for that language), optionally synthesizes legacy index pages, and
   copies folder images to the output sink.

The Parse Pass always completes for the whole tree before the Compile
Pass starts.
"""

import html
import logging
import os
import re
from typing import Dict, List, Optional, Tuple

from docscompiler.core.manifest.docslist_parser import DocsListParser
from docscompiler.core.rendering.documentation_renderer import DocumentationRenderer
from docscompiler.core.rendering.links import resolve_site_url
from docscompiler.domain.config import CompilerSettings
from docscompiler.domain.constants import (
    DOCS_LIST_FILE_NAME,
    HTML_EXTENSION,
    IMAGES_DIR_NAME,
    INDEX_SLUG,
    NOT_DOCUMENTED_FILE_NAME,
    SOURCE_EXTENSION,
)
from docscompiler.domain.languages import ClientType, get_brush, resolve_language
from docscompiler.domain.output_models import CompilationMode, OutputType
from docscompiler.domain.tree_models import (
    Document,
    Folder,
    compose_trail,
    compose_virtual_trail,
    strip_extension,
)
from docscompiler.infra.fs import list_files, to_native
from docscompiler.infra.output.base import DocsOutput

logger = logging.getLogger(__name__)

# Used when the docs root ships no not-documented.markdown template
DEFAULT_NOT_DOCUMENTED_CONTENT = (
    "<p>This page is not documented for {language} yet.</p>\n"
    "<p>Documentation is available for:</p>\n"
    "{links}"
)
_LINKS_PLACEHOLDER = "{links}"
_LINKS_PARAGRAPH = re.compile(r"<p>\s*\{links\}\s*</p>")


class Compiler:
    """
    Two-pass documentation compiler.

    Attributes:
        settings: Immutable traversal configuration.
        output: Sink receiving compiled documents and images.
        manifest_parser: Resolver turning a manifest into child items.
        renderer: Collaborator turning a source file into content.
        root_folder: Root of the last parsed tree.
        stats: Counters of the artifacts produced by the Compile Pass.
    """

    def __init__(
            self,
            settings: CompilerSettings,
            output: Optional[DocsOutput],
            manifest_parser: Optional[DocsListParser] = None,
            renderer: Optional[DocumentationRenderer] = None,
    ) -> None:
        if output is None:
            raise ValueError("An output sink is required to compile documentation.")

        self.settings = settings
        self.output = output
        self.manifest_parser = manifest_parser or DocsListParser()
        self.renderer = renderer or DocumentationRenderer()
        self.root_folder: Optional[Folder] = None
        self.stats: Dict[str, int] = {
            "documents": 0,
            "fallbacks": 0,
            "index_pages": 0,
            "images": 0,
        }

    # -------------------------------------------------------------------------
    # CONTEXT API (used by render collaborators)
    # -------------------------------------------------------------------------

    @property
    def supported_languages(self) -> Tuple[ClientType, ...]:
        return self.settings.supported_languages

    @property
    def convert_to_html(self) -> bool:
        return self.output.content_type is OutputType.HTML

    def resolve_language(self, path: str, language: ClientType) -> ClientType:
        """Resolve NONE through the filename heuristic."""
        return resolve_language(path, language, self.settings.primary_language)

    def get_code_samples_path(self, path: str, language: ClientType) -> str:
        """
        Look up the code-sample directory for a language.

        Args:
            path: Code-sample file reference, used when language is NONE.
            language: Language of the requesting document.

        Returns:
            str: Configured directory.

        Raises:
            KeyError: If no directory is configured for the resolved language.
        """
        return self.settings.code_samples_paths[self.resolve_language(path, language)]

    def get_brush(self, language: ClientType) -> str:
        return get_brush(language)

    # -------------------------------------------------------------------------
    # ENTRY POINTS
    # -------------------------------------------------------------------------

    @classmethod
    def compile_folder(
            cls,
            output: Optional[DocsOutput],
            settings: CompilerSettings,
            home_title: str,
            **collaborators: object,
    ) -> "Compiler":
        """
        Build the whole documentation tree rooted at settings.docs_root.

        Args:
            output: Output sink. Required.
            settings: Traversal configuration.
            home_title: Title of the root folder.
            **collaborators: Optional manifest_parser / renderer overrides.

        Returns:
            Compiler: The compiler, holding the compiled tree and stats.
        """
        if output is None:
            raise ValueError("An output sink is required to compile documentation.")

        compiler = cls(settings, output, **collaborators)  # type: ignore[arg-type]
        compiler.compile(home_title)
        return compiler

    def compile(self, home_title: str) -> Folder:
        """Run the Parse Pass to completion, then the Compile Pass."""
        self.root_folder = Folder(title=home_title)

        logger.info("Parsing documentation.")
        self.build_tree(self.root_folder, ClientType.NONE)
        logger.info("Finished parsing.")

        logger.info("Starting actual compilation.")
        self.render_tree(self.root_folder, ClientType.NONE)
        logger.info("Finished actual compilation.")

        return self.root_folder

    # -------------------------------------------------------------------------
    # PARSE PASS
    # -------------------------------------------------------------------------

    def build_tree(self, folder: Folder, inherited_language: ClientType) -> None:
        """
        Populate folder.children recursively from the manifest files.

        Args:
            folder: Folder to populate.
            inherited_language: Language passed down by the caller.
        """
        _, full_path = self._folder_paths(folder)
        manifest_path = os.path.join(full_path, DOCS_LIST_FILE_NAME)

        if not os.path.isfile(manifest_path):
            return

        for language in self._languages_for(folder, inherited_language):
            for item in self.manifest_parser.parse(manifest_path, folder):
                item.language = language
                item.slug = item.slug.lstrip("\\/")
                item.trail = compose_trail(folder.trail, folder.slug)
                item.virtual_trail = compose_virtual_trail(
                    folder.virtual_trail, folder.slug, language
                )
                folder.children.append(item)

                if isinstance(item, Folder):
                    self.build_tree(item, language)

    # -------------------------------------------------------------------------
    # COMPILE PASS
    # -------------------------------------------------------------------------

    def render_tree(self, folder: Folder, current_language: ClientType) -> None:
        """
        Compile every document of a folder subtree.

        Args:
            folder: Folder already populated by the Parse Pass.
            current_language: Language the caller is processing.
        """
        logger.info(
            f"Processing folder: {folder.slug or '/'} | Path: {folder.trail or '/'} "
            f"| Language: {folder.language.description}"
        )

        full_slug, full_path = self._folder_paths(folder)
        if not os.path.isfile(os.path.join(full_path, DOCS_LIST_FILE_NAME)):
            return

        if not self.convert_to_html:
            logger.debug(f"Output type {self.output.content_type.value}: nothing to render.")
            return

        for language in self._languages_for(folder, current_language):
            matching = [child for child in folder.children if child.language is language]
            for child in matching:
                if isinstance(child, Document):
                    self.render_document(child, full_path, language)
                else:
                    self.render_tree(child, language)

        if self.output.compilation_mode is CompilationMode.LEGACY:
            self._render_index(folder, full_slug, full_path)

        self._copy_images(folder, full_path)

    def render_document(self, document: Document, folder_path: str, language: ClientType) -> str:
        """
        Render a document, falling back to a "not documented" page.

        Args:
            document: Document to compile.
            folder_path: Physical directory of the owning folder.
            language: Language being processed.

        Returns:
            str: The rendered content.
        """
        canonical_slug = strip_extension(document.slug)

        path = os.path.join(folder_path, _qualified_name(canonical_slug, language))
        if not os.path.isfile(path):
            path = os.path.join(folder_path, document.slug)

        if not os.path.isfile(path):
            return self.render_not_documented(document, canonical_slug, folder_path, language)

        logger.debug(f"Compiling {document.slug} [{language.value}] from {path}")
        document.content = self.renderer.render(self, None, document, path, document.trail)
        document.slug = canonical_slug
        self.output.save_doc_item(document)
        self.stats["documents"] += 1
        return document.content

    def render_not_documented(
            self,
            document: Document,
            canonical_slug: str,
            folder_path: str,
            current_language: ClientType,
    ) -> str:
        """
        Generate the placeholder page of a document missing for a language.

        Links to every other supported language that has a qualified
        source file next to the missing one.

        Args:
            document: Document without a source for current_language.
            canonical_slug: Slug without the source extension.
            folder_path: Physical directory of the owning folder.
            current_language: Language being processed.

        Returns:
            str: The rendered placeholder content.
        """
        links: List[str] = []
        for language in self.supported_languages:
            if language is current_language:
                continue
            if not os.path.isfile(os.path.join(folder_path, _qualified_name(canonical_slug, language))):
                continue

            rel_url = (
                document.virtual_trail
                .replace(current_language.value, language.value)
                .replace("\\", "/")
                + "/" + canonical_slug + HTML_EXTENSION
            )
            url = resolve_site_url(self.output.root_url, rel_url)
            links.append(f'<li><a href="{html.escape(url)}">{html.escape(language.description)}</a></li>')

        logger.debug(
            f"No source for {canonical_slug} [{current_language.value}]; "
            f"{len(links)} alternate language(s) linked."
        )

        template_path = os.path.join(self.settings.docs_root, NOT_DOCUMENTED_FILE_NAME)
        if os.path.isfile(template_path):
            content = self.renderer.render(self, None, document, template_path, document.trail)
        else:
            content = DEFAULT_NOT_DOCUMENTED_CONTENT

        # Unwrap a paragraph holding only the links placeholder
        content = _LINKS_PARAGRAPH.sub(_LINKS_PLACEHOLDER, content)
        document.content = (
            content
            .replace("{language}", current_language.description)
            .replace(_LINKS_PLACEHOLDER, "<ul>" + "".join(links) + "</ul>")
        )
        document.slug = canonical_slug
        self.output.save_doc_item(document)
        self.stats["fallbacks"] += 1
        return document.content

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _folder_paths(self, folder: Folder) -> Tuple[str, str]:
        full_slug = folder.full_slug
        return full_slug, to_native(self.settings.docs_root, full_slug)

    def _languages_for(self, folder: Folder, inherited: ClientType) -> List[ClientType]:
        if folder.multilanguage:
            return list(self.settings.supported_languages)
        return [inherited]

    def _render_index(self, folder: Folder, full_slug: str, full_path: str) -> None:
        source = os.path.join(full_path, INDEX_SLUG + SOURCE_EXTENSION)

        document = Document(
            title=folder.title,
            slug=INDEX_SLUG,
            trail=full_slug,
            virtual_trail=full_slug,
            language=self.settings.primary_language,
            owner=folder,
        )
        folder.children.append(document)

        document.content = self.renderer.render(self, folder, document, source, full_slug)
        self.output.save_doc_item(document)
        self.stats["index_pages"] += 1

    def _copy_images(self, folder: Folder, full_path: str) -> None:
        for image in list_files(os.path.join(full_path, IMAGES_DIR_NAME)):
            self.output.save_image(folder, image)
            self.stats["images"] += 1


def _qualified_name(canonical_slug: str, language: ClientType) -> str:
    return f"{canonical_slug}.{language.value}{SOURCE_EXTENSION}"
