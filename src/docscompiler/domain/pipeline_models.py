from __future__ import annotations

"""
Build Domain Data Models.

Defines the result object and factory functions used to communicate
build outcomes between the build engine and the CLI layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified result object of a complete documentation build.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        source_path: Normalized documentation source root.
        output_path: Directory receiving the compiled site.
        root_url: Site root used for absolute cross-links.
        compilation_mode: Mode identifier used for the run.
        tree_lines: Optional ASCII preview of the parsed tree.
        navigation_path: Path of the persisted navigation index.
        summary: Counters and technical metadata of the run.
    """
    ok: bool
    error: str

    source_path: str
    output_path: str
    root_url: str
    compilation_mode: str

    tree_lines: List[str] = field(default_factory=list)
    navigation_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        source_path: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> BuildResult:
    """
    Create a failed build result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        source_path: The documentation source directory.
        output_path: Calculated output directory.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        source_path=source_path,
        output_path=output_path,
        root_url=cfg.get("root_url", ""),
        compilation_mode=cfg.get("compilation_mode", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        source_path: str,
        output_path: str,
        tree_lines: Optional[List[str]] = None,
        navigation_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> BuildResult:
    """
    Create a successful build result instance.

    Args:
        cfg: Final configuration used during execution.
        source_path: Normalized documentation source directory.
        output_path: Directory containing the compiled site.
        tree_lines: Generated ASCII tree preview.
        navigation_path: Path of the navigation index, if written.
        summary_extra: Final execution metrics.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        source_path=source_path,
        output_path=output_path,
        root_url=cfg.get("root_url", ""),
        compilation_mode=cfg.get("compilation_mode", ""),
        tree_lines=tree_lines or [],
        navigation_path=navigation_path,
        summary=summary_extra or {},
    )
