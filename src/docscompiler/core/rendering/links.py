from __future__ import annotations

"""
Site Link Helpers.

Resolves site-relative paths against the configured root URL.
"""

import re
from urllib.parse import urlsplit, urlunsplit

_REPEATED_SLASHES = re.compile(r"/{2,}")


def resolve_site_url(root_url: str, path: str) -> str:
    """
    Resolve a site-relative path against the root URL.

    Doubled separators in the resulting path are collapsed; the scheme and
    host part of the root URL are left untouched.

    Args:
        root_url: Site root, either a path ('/') or an absolute URL.
        path: Path relative to the site root. Backslashes are normalized.

    Returns:
        str: Absolute path or URL.
    """
    base = urlsplit(root_url or "/")
    joined = "/" + (base.path or "/") + "/" + path.replace("\\", "/")
    collapsed = _REPEATED_SLASHES.sub("/", joined)
    return urlunsplit((base.scheme, base.netloc, collapsed, "", ""))
