from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, directory creation and directory listing
utilities shared by the build engine, the compiler and the output sinks.
"""

import os
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def to_native(root: str, rel_path: str) -> str:
    """Join a forward-slash relative path onto a native root directory."""
    parts = [p for p in rel_path.replace("\\", "/").split("/") if p]
    return os.path.join(root, *parts)

# -----------------------------------------------------------------------------
# FILESYSTEM API
# -----------------------------------------------------------------------------

def list_files(directory: str) -> List[str]:
    """
    List the regular files of a directory, sorted by name.

    Args:
        directory: Directory to inspect.

    Returns:
        List[str]: Absolute file paths. Empty if the directory does not exist.
    """
    if not os.path.isdir(directory):
        return []
    names = sorted(os.listdir(directory))
    return [
        os.path.join(directory, name)
        for name in names
        if os.path.isfile(os.path.join(directory, name))
    ]


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
