from __future__ import annotations

from .base import DocsOutput
from .html_output import HtmlOutput

__all__ = [
    "DocsOutput",
    "HtmlOutput",
]
