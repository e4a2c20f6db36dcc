"""Centralized environment configuration management for resume-insights.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from resume_insights.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> limit = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT)  # Returns int
    >>> high = get_environment(EnvVar.ATS_HIGH_SCORE)  # Returns float
    >>>
    >>> # Override at runtime
    >>> limit = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT, override=5)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, float, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by resume-insights.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - logging: Log output configuration
        - scoring: ATS score band thresholds
        - dashboard: Dashboard summary settings
        - data: Data file locations
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # ATS Score Bands (0-10 scale)
    # -------------------------------------------------------------------------
    ATS_HIGH_SCORE = EnvConfig(
        name="ATS_HIGH_SCORE",
        default=7.0,
        var_type=float,
        description="Minimum score for the high band",
        category="scoring",
    )
    ATS_MEDIUM_SCORE = EnvConfig(
        name="ATS_MEDIUM_SCORE",
        default=5.0,
        var_type=float,
        description="Minimum score for the medium band",
        category="scoring",
    )
    ATS_MAX_SCORE = EnvConfig(
        name="ATS_MAX_SCORE",
        default=10.0,
        var_type=float,
        description="Top of the ATS score scale",
        category="scoring",
    )

    # -------------------------------------------------------------------------
    # Dashboard
    # -------------------------------------------------------------------------
    DASHBOARD_RECENT_LIMIT = EnvConfig(
        name="DASHBOARD_RECENT_LIMIT",
        default=3,
        var_type=int,
        description="Number of recent uploads shown on the dashboard",
        category="dashboard",
    )

    # -------------------------------------------------------------------------
    # Data Paths
    # -------------------------------------------------------------------------
    HISTORY_FILE = EnvConfig(
        name="HISTORY_FILE",
        default=None,  # Computed from repo root
        var_type=Path,
        description="Resume history export (JSON) read by the CLI",
        category="data",
    )


# =============================================================================
# Repository Root Detection
# =============================================================================


def _find_repo_root(start_path: Path | None = None) -> Path:
    """Find repository root by searching for .gitignore file.

    Args:
        start_path: Directory to start search from. Defaults to cwd.

    Returns:
        Path to repository root directory.

    Raises:
        RuntimeError: If .gitignore is not found.
    """
    current = (start_path or Path.cwd()).resolve()

    while True:
        if (current / ".gitignore").exists():
            return current

        parent = current.parent
        if parent == current:
            raise RuntimeError(
                f"Could not find repository root. No .gitignore found "
                f"starting from: {start_path or Path.cwd()}"
            )
        current = parent


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type in (int, float):
        try:
            return var_type(value)
        except ValueError:
            return default

    if var_type is Path:
        return Path(value)

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: float) -> float: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int, float, or Path).

    Example:
        >>> get_environment(EnvVar.DASHBOARD_RECENT_LIMIT)
        3
        >>> get_environment(EnvVar.DASHBOARD_RECENT_LIMIT, override=5)
        5
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> int:
    """Get the numeric log level.

    Unknown level names resolve to INFO.
    """
    name = str(get_environment(EnvVar.LOG_LEVEL, override)).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_score_thresholds() -> tuple[float, float]:
    """Get (high, medium) ATS band thresholds."""
    return (
        get_environment(EnvVar.ATS_HIGH_SCORE),
        get_environment(EnvVar.ATS_MEDIUM_SCORE),
    )


def get_max_score() -> float:
    """Get the top of the ATS score scale."""
    return get_environment(EnvVar.ATS_MAX_SCORE)


def get_recent_limit(override: int | None = None) -> int:
    """Get the number of recent uploads shown on the dashboard."""
    return get_environment(EnvVar.DASHBOARD_RECENT_LIMIT, override)


def get_history_file(override: Path | str | None = None) -> Path:
    """Get the resume history export path.

    Resolution: override > HISTORY_FILE > {repo_root}/data/history.json
    """
    if override is not None:
        return Path(override)

    env_path = get_environment(EnvVar.HISTORY_FILE)
    if env_path:
        return env_path

    return _find_repo_root() / "data" / "history.json"


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, scoring, dashboard, data).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_score_thresholds",
    "get_max_score",
    "get_recent_limit",
    "get_history_file",
    # Introspection
    "list_environment_variables",
]
