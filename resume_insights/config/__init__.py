"""Centralized configuration management for resume-insights.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from resume_insights.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> limit = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT)  # Returns int: 3
    >>>
    >>> # Override at runtime
    >>> limit = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT, override=10)
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("scoring"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    logging: Log output configuration
    scoring: ATS score band thresholds and scale
    dashboard: Dashboard summary settings
    data: Data file locations
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_history_file,
    get_log_level,
    get_max_score,
    get_recent_limit,
    get_score_thresholds,
    # Introspection
    list_environment_variables,
)

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
