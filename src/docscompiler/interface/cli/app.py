from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, JSON file, CLI overrides), build
execution, and rendering of the result.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from docscompiler.core.pipeline.engine import run_build
from docscompiler.core.pipeline.validator import validate_config
from docscompiler.domain.config import load_config
from docscompiler.domain.pipeline_models import BuildResult
from docscompiler.infra.logging import LoggingConfig, configure_logging, get_logger
from docscompiler.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 build failure, 2 bad input,
             130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(args.debug, args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Configuration hierarchy: defaults < JSON file < CLI flags
    base_conf = load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    source_path = clean_conf["source_path"]
    if not os.path.isdir(source_path):
        msg = f"Source directory does not exist: {source_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Build phase
    logger.info(f"Compiling documentation from: {source_path}")
    try:
        result = run_build(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Build interrupted by user.")
        print("Build interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Documentation build failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge non-empty override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult) -> None:
    """
    Format and print the build result to the standard output.

    Args:
        result: The build result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    summary = result.summary
    print("Documentation compiled successfully.")
    print(f"Output directory: {result.output_path}")

    stats_keys = {
        "documents": "Documents compiled",
        "fallbacks": "Not-documented pages",
        "index_pages": "Index pages",
        "images": "Images copied",
    }
    for key, label in stats_keys.items():
        if key in summary:
            print(f"{label}: {summary[key]}")

    if result.navigation_path:
        print(f"Navigation index: {result.navigation_path}")

    if result.tree_lines:
        print("")
        print("\n".join(result.tree_lines))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
