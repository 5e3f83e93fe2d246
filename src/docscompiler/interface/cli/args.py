from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the docscompiler CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="docscompiler",
        description="Compile a multi-language documentation tree into a static site.",
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="source_path",
        default=None,
        help="Source root holding the docs directory and code samples.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Directory receiving the compiled site.",
    )
    p.add_argument(
        "--docs-subdir",
        dest="docs_subdir",
        default=None,
        help="Directory under the source root holding the root manifest.",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )

    # --- Site Options ---
    p.add_argument(
        "--root-url",
        dest="root_url",
        default=None,
        help="Site root used for absolute cross-language links.",
    )
    p.add_argument(
        "--title",
        dest="home_title",
        default=None,
        help="Title of the documentation home.",
    )
    p.add_argument(
        "--legacy",
        action="store_true",
        help="Legacy compilation: emit an index page for every folder.",
    )
    p.add_argument(
        "--languages",
        dest="supported_languages",
        default=None,
        help="Comma-separated client languages for multilanguage folders.",
    )
    p.add_argument(
        "--primary-language",
        dest="primary_language",
        default=None,
        help="Language used for index pages and unresolved code samples.",
    )

    # --- Artifacts ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Log and print the parsed documentation tree.",
    )
    p.add_argument(
        "--no-navigation",
        action="store_true",
        help="Do not write navigation.json.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write the build log to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the build result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["source_path"] = args.source_path
    overrides["output_path"] = args.output_path
    overrides["docs_subdir"] = args.docs_subdir
    overrides["root_url"] = args.root_url
    overrides["home_title"] = args.home_title
    overrides["primary_language"] = args.primary_language

    if args.legacy:
        overrides["compilation_mode"] = "legacy"
    if args.supported_languages:
        overrides["supported_languages"] = _split_csv(args.supported_languages)

    if args.print_tree:
        overrides["print_tree"] = True
    if args.no_navigation:
        overrides["write_navigation"] = False

    return overrides

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated string into a list of stripped items."""
    if not value:
        return []
    return [x.strip() for x in value.split(",") if x.strip()]
