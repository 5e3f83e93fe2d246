from __future__ import annotations

"""
Build Orchestration.

Coordinates a complete documentation build:
1. Validates configuration and paths.
2. Freezes the configuration into compiler settings.
3. Prepares the output sink.
4. Runs the two-pass compiler.
5. Produces the optional tree preview and navigation index.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from docscompiler.core.analysis.navigation import build_navigation
from docscompiler.core.analysis.tree_renderer import generate_tree_lines
from docscompiler.core.compiler import Compiler
from docscompiler.core.pipeline.validator import validate_config
from docscompiler.domain.config import build_settings
from docscompiler.domain.constants import DOCS_LIST_FILE_NAME, DEFAULT_OUTPUT_SUBDIR
from docscompiler.domain.output_models import CompilationMode
from docscompiler.domain.pipeline_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from docscompiler.domain.tree_models import Folder, iter_tree
from docscompiler.infra.fs import normalize_path, safe_mkdir
from docscompiler.infra.output import HtmlOutput

logger = logging.getLogger(__name__)


def run_build(config: Optional[Dict[str, Any]]) -> BuildResult:
    """
    Execute a full documentation build.

    Errors raised by collaborators (manifest parsing, rendering, output)
    are not caught here; they abort the build and reach the caller.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        BuildResult: Object containing status, counters and artifact paths.
    """
    logger.info("Documentation build started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    source_path = normalize_path(cfg["source_path"], os.getcwd())
    cfg["source_path"] = source_path

    if not os.path.isdir(source_path):
        msg = f"Invalid source directory: {source_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, source_path)

    output_path = normalize_path(cfg["output_path"], os.path.join(source_path, DEFAULT_OUTPUT_SUBDIR))

    settings = build_settings(cfg)
    if not os.path.isfile(os.path.join(settings.docs_root, DOCS_LIST_FILE_NAME)):
        logger.warning(f"No {DOCS_LIST_FILE_NAME} at {settings.docs_root}; the site will be empty.")

    # -------------------------------------------------------------------------
    # 2) Output Preparation
    # -------------------------------------------------------------------------
    ok, err = safe_mkdir(output_path)
    if not ok:
        msg = f"Cannot create output directory '{output_path}': {err}"
        logger.error(msg)
        return create_error_result(msg, cfg, source_path, output_path)

    output = HtmlOutput(
        output_path,
        root_url=cfg["root_url"],
        compilation_mode=CompilationMode.parse(cfg["compilation_mode"]),
    )

    # -------------------------------------------------------------------------
    # 3) Two-pass Compilation
    # -------------------------------------------------------------------------
    compiler = Compiler(settings, output)
    root = compiler.compile(cfg["home_title"])

    # -------------------------------------------------------------------------
    # 4) Post-build Artifacts
    # -------------------------------------------------------------------------
    tree_lines: List[str] = []
    if cfg["print_tree"]:
        tree_lines = generate_tree_lines(root)
        logger.info("Tree Preview:\n" + "\n".join(tree_lines))

    navigation_path = ""
    if cfg["write_navigation"]:
        navigation_path = output.save_navigation(build_navigation(root, cfg["root_url"]))

    summary = dict(compiler.stats)
    summary["generated_files"] = list(output.documents_saved)
    summary["languages"] = [lang.value for lang in settings.supported_languages]
    summary["tree_folders"] = sum(1 for item in iter_tree(root) if isinstance(item, Folder))
    summary["tree_documents"] = sum(1 for item in iter_tree(root) if not isinstance(item, Folder))

    logger.info(
        f"Build finished: {summary['documents']} documents, {summary['fallbacks']} fallbacks, "
        f"{summary['images']} images."
    )

    return create_success_result(
        cfg,
        source_path,
        output_path,
        tree_lines=tree_lines,
        navigation_path=navigation_path,
        summary_extra=summary,
    )
