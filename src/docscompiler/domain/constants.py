from __future__ import annotations

"""
Domain Constants.

Centralizes the filesystem conventions consumed by the documentation
compiler: manifest and template file names, source extensions, and the
reserved names of generated artifacts.
"""

DOCS_LIST_FILE_NAME = ".docslist"
SOURCE_EXTENSION = ".markdown"
HTML_EXTENSION = ".html"

IMAGES_DIR_NAME = "images"
INDEX_SLUG = "index"
NOT_DOCUMENTED_FILE_NAME = "not-documented.markdown"
NAVIGATION_FILE_NAME = "navigation.json"

DEFAULT_DOCS_SUBDIR = "docs"
DEFAULT_OUTPUT_SUBDIR = "site"
DEFAULT_HOME_TITLE = "Documentation"
DEFAULT_ROOT_URL = "/"
