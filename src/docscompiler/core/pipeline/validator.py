from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the build engine, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion, language
and mode validation, and default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from docscompiler.domain.config import get_default_config
from docscompiler.domain.languages import ClientType
from docscompiler.domain.output_models import CompilationMode

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (CLI flags, JSON files) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition
    string_fields = [
        "source_path", "output_path", "root_url", "home_title",
    ]
    bool_fields = ["print_tree", "write_navigation"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults[field], field, warnings, strict
        )

    # Empty docs subdirectory means the root manifest sits at source_path
    docs_subdir = merged.get("docs_subdir")
    if isinstance(docs_subdir, str):
        merged["docs_subdir"] = docs_subdir.strip()
    else:
        merged["docs_subdir"] = _as_str(
            docs_subdir, defaults["docs_subdir"], "docs_subdir", warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults[field], field, warnings, strict
        )

    # 4. Domain-Specific Normalization
    merged["compilation_mode"] = _as_choice(
        merged.get("compilation_mode"), CompilationMode, defaults["compilation_mode"],
        "compilation_mode", warnings, strict
    )
    merged["supported_languages"] = _normalize_languages(
        merged.get("supported_languages"), defaults["supported_languages"], warnings, strict
    )
    merged["primary_language"] = _normalize_primary(
        merged.get("primary_language"), defaults["primary_language"], warnings, strict
    )
    merged["code_samples"] = _normalize_code_samples(
        merged.get("code_samples"), defaults["code_samples"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        enum_cls: Any,
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Validate an enumerated string option and return its canonical value."""
    if value is None:
        return fallback
    try:
        return enum_cls.parse(value).value
    except ValueError as e:
        if strict:
            raise
        warnings.append(f"Invalid field '{field}': {e} Using fallback.")
        return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: LANGUAGE NORMALIZATION
# -----------------------------------------------------------------------------

def _parse_concrete_language(value: Any) -> ClientType:
    language = ClientType.parse(value)
    if language is ClientType.NONE:
        raise ValueError("'None' is not a concrete client language.")
    return language


def _normalize_languages(
        value: Any,
        fallback: List[str],
        warnings: List[str],
        strict: bool,
) -> List[str]:
    """Ensure the fan-out set is a non-empty list of distinct concrete languages."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append("Field 'supported_languages' converted from CSV string to list.")
        value = [x for x in value.split(",") if x.strip()]

    if not isinstance(value, list):
        msg = f"Invalid field 'supported_languages': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return list(fallback)

    out: List[str] = []
    for item in value:
        try:
            token = _parse_concrete_language(item).value
        except ValueError as e:
            if strict:
                raise
            warnings.append(f"{e} Item discarded.")
            continue
        if token not in out:
            out.append(token)
    return out if out else list(fallback)


def _normalize_primary(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    try:
        return _parse_concrete_language(value).value
    except ValueError as e:
        if strict:
            raise
        warnings.append(f"Invalid field 'primary_language': {e} Using fallback.")
        return fallback


def _normalize_code_samples(
        value: Any,
        fallback: Dict[str, str],
        warnings: List[str],
        strict: bool,
) -> Dict[str, str]:
    """Ensure code sample directories are keyed by concrete language tokens."""
    if value is None:
        return dict(fallback)

    if not isinstance(value, dict):
        msg = f"Invalid field 'code_samples': expected dict, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return dict(fallback)

    out: Dict[str, str] = {}
    for key, path in value.items():
        try:
            token = _parse_concrete_language(key).value
        except ValueError as e:
            if strict:
                raise
            warnings.append(f"{e} Code sample entry discarded.")
            continue
        if not isinstance(path, str) or not path.strip():
            msg = f"Invalid code sample path for '{key}'."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Entry discarded.")
            continue
        out[token] = path.strip()
    return out
