from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration coming from JSON files and CLI overrides into the
typed values the engine expects. Lenient mode coerces what it can and
collects warnings; strict mode raises on the first invalid field.
"""

import logging
from typing import Any, Dict, List, Tuple

from treeutil.core.sizing import parse_size_literal
from treeutil.domain.config import get_default_config
from treeutil.domain.errors import MalformedInputError
from treeutil.infra.logging import LEVELS

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
    Validate and normalize a configuration dictionary.

    Missing keys are filled from the defaults, unknown keys are dropped and
    'chunk_size' is converted from a size literal to a byte count.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    unknown = sorted(k for k in config if k not in defaults)
    for key in unknown:
        msg = f"Unknown config key '{key}'."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("strict", "rollback_move"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("log_level", "log_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["log_level"] = _normalize_level(merged["log_level"], warnings, strict)
    merged["chunk_size"] = _as_chunk_size(
        merged.get("chunk_size"), defaults["chunk_size"], warnings, strict
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
        return value.strip()

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
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_chunk_size(value: Any, fallback: str, warnings: List[str], strict: bool) -> int:
    """Accept a positive int or a size literal and return a byte count."""
    default_bytes = parse_size_literal(fallback)

    if isinstance(value, bool):
        size = -1
    elif isinstance(value, int):
        size = value
    elif isinstance(value, str):
        try:
            size = parse_size_literal(value)
        except MalformedInputError as e:
            if strict:
                raise
            warnings.append(f"{e}. Using default chunk size.")
            return default_bytes
    elif value is None:
        return default_bytes
    else:
        size = -1

    if size <= 0:
        msg = f"Invalid field 'chunk_size': expected a positive size, received {value!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using default chunk size.")
        return default_bytes
    return size


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_level(level: str, warnings: List[str], strict: bool) -> str:
    """Ensure the log level is one of the names the logging layer knows."""
    name = level.strip().upper()
    if name in LEVELS:
        return name
    msg = f"Unknown log level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using INFO.")
    return "INFO"
