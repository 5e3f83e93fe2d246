from __future__ import annotations

"""
Configuration Domain Management.

Handles the default build configuration, loading of JSON configuration
files, and the freezing of a validated configuration into the immutable
settings object consumed by the compiler during traversal.
"""

import json
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from docscompiler.domain.constants import (
    DEFAULT_DOCS_SUBDIR,
    DEFAULT_HOME_TITLE,
    DEFAULT_OUTPUT_SUBDIR,
    DEFAULT_ROOT_URL,
)
from docscompiler.domain.languages import (
    PRIMARY_LANGUAGE,
    SUPPORTED_LANGUAGES,
    ClientType,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_CODE_SAMPLES: Dict[str, str] = {
    "DotNet": "code-samples",
    "Java": "java-code-samples/src/test/java/net/ravendb",
}


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default build configuration.

    Relative paths in 'code_samples' and 'docs_subdir' are resolved
    against 'source_path'.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    base = os.getcwd()
    return {
        # IO Paths
        "source_path": base,
        "docs_subdir": DEFAULT_DOCS_SUBDIR,
        "output_path": os.path.join(base, DEFAULT_OUTPUT_SUBDIR),

        # Site
        "root_url": DEFAULT_ROOT_URL,
        "home_title": DEFAULT_HOME_TITLE,
        "compilation_mode": "normal",

        # Languages
        "supported_languages": [lang.value for lang in SUPPORTED_LANGUAGES],
        "primary_language": PRIMARY_LANGUAGE.value,
        "code_samples": dict(DEFAULT_CODE_SAMPLES),

        # Diagnostics
        "print_tree": False,
        "write_navigation": True,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a JSON configuration file merged over the defaults.

    Args:
        path: Path to the configuration file. None returns the defaults.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found at '{path}'. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config


# -----------------------------------------------------------------------------
# Immutable Compiler Settings
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CompilerSettings:
    """
    Read-only configuration handed down through the traversal.

    Attributes:
        docs_root: Absolute directory holding the root manifest.
        code_samples_paths: Code sample directory per concrete language.
        supported_languages: Languages a multilanguage folder fans out to.
        primary_language: Fallback language for heuristics and index pages.
    """
    docs_root: str
    code_samples_paths: Mapping[ClientType, str]
    supported_languages: Tuple[ClientType, ...] = SUPPORTED_LANGUAGES
    primary_language: ClientType = PRIMARY_LANGUAGE


def build_settings(cfg: Dict[str, Any]) -> CompilerSettings:
    """
    Freeze a validated configuration into CompilerSettings.

    Args:
        cfg: Configuration already normalized by validate_config.

    Returns:
        CompilerSettings: Settings with absolute paths.
    """
    source_path = os.path.abspath(cfg["source_path"])
    docs_root = os.path.join(source_path, cfg.get("docs_subdir") or "")

    samples: Dict[ClientType, str] = {}
    for name, rel_path in cfg.get("code_samples", {}).items():
        samples[ClientType.parse(name)] = os.path.join(source_path, rel_path)

    return CompilerSettings(
        docs_root=os.path.normpath(docs_root),
        code_samples_paths=MappingProxyType(samples),
        supported_languages=tuple(ClientType.parse(x) for x in cfg["supported_languages"]),
        primary_language=ClientType.parse(cfg["primary_language"]),
    )
