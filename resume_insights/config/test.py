"""Tests for configuration management."""

import logging
from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    _find_repo_root,
    get_environment,
    get_environment_info,
    get_history_file,
    get_log_level,
    get_max_score,
    get_recent_limit,
    get_score_thresholds,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("DASHBOARD_RECENT_LIMIT", raising=False)
        result = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT)
        assert result == 3

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("DASHBOARD_RECENT_LIMIT", "9")
        result = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT, override=5)
        assert result == 5

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("DASHBOARD_RECENT_LIMIT", "12")
        result = get_environment(EnvVar.DASHBOARD_RECENT_LIMIT)
        assert result == 12
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("ATS_HIGH_SCORE", "7.5")
        result = get_environment(EnvVar.ATS_HIGH_SCORE)
        assert result == 7.5
        assert isinstance(result, float)

    @pytest.mark.unit
    def test_invalid_number_returns_default(self, monkeypatch):
        """Invalid numeric value returns default."""
        monkeypatch.setenv("ATS_MEDIUM_SCORE", "five")
        monkeypatch.setenv("DASHBOARD_RECENT_LIMIT", "3.5")
        assert get_environment(EnvVar.ATS_MEDIUM_SCORE) == 5.0
        assert get_environment(EnvVar.DASHBOARD_RECENT_LIMIT) == 3

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        result = get_environment(EnvVar.LOG_LEVEL)
        assert result == "debug"

    @pytest.mark.unit
    def test_path_type(self, monkeypatch, tmp_path):
        """Path type converts to Path."""
        monkeypatch.setenv("HISTORY_FILE", str(tmp_path / "h.json"))
        assert get_environment(EnvVar.HISTORY_FILE) == tmp_path / "h.json"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.ATS_HIGH_SCORE)
        assert isinstance(info, EnvConfig)
        assert info.name == "ATS_HIGH_SCORE"
        assert info.default == 7.0
        assert info.var_type is float
        assert info.category == "scoring"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.DASHBOARD_RECENT_LIMIT)
        assert "recent" in info.description

    @pytest.mark.unit
    def test_only_converted_types_registered(self):
        """Every variable uses a type get_environment converts."""
        for var in EnvVar:
            assert get_environment_info(var).var_type in (str, int, float, Path)


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        scoring_vars = list_environment_variables("scoring")
        assert EnvVar.ATS_HIGH_SCORE in scoring_vars
        assert EnvVar.ATS_MEDIUM_SCORE in scoring_vars
        assert EnvVar.LOG_LEVEL not in scoring_vars

    @pytest.mark.unit
    def test_unknown_category(self):
        """Unknown categories yield nothing."""
        assert list_environment_variables("nope") == []


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestConvenienceFunctions:
    """Tests for typed convenience accessors."""

    @pytest.mark.unit
    def test_log_level_default(self, monkeypatch):
        """Default log level is INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    @pytest.mark.unit
    def test_log_level_from_env(self, monkeypatch):
        """Level names are case-insensitive."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    @pytest.mark.unit
    def test_log_level_unknown(self):
        """Unknown level names resolve to INFO."""
        assert get_log_level(override="loud") == logging.INFO

    @pytest.mark.unit
    def test_score_thresholds(self, monkeypatch):
        """Thresholds come back as (high, medium)."""
        monkeypatch.setenv("ATS_HIGH_SCORE", "8")
        monkeypatch.delenv("ATS_MEDIUM_SCORE", raising=False)
        assert get_score_thresholds() == (8.0, 5.0)

    @pytest.mark.unit
    def test_max_score(self, monkeypatch):
        """Score scale defaults to 10."""
        monkeypatch.delenv("ATS_MAX_SCORE", raising=False)
        assert get_max_score() == 10.0

    @pytest.mark.unit
    def test_recent_limit_override(self, monkeypatch):
        """Override beats environment."""
        monkeypatch.setenv("DASHBOARD_RECENT_LIMIT", "7")
        assert get_recent_limit() == 7
        assert get_recent_limit(override=1) == 1


class TestGetHistoryFile:
    """Tests for history file resolution."""

    @pytest.mark.unit
    def test_override_takes_priority(self, tmp_path, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("HISTORY_FILE", str(tmp_path / "env.json"))
        result = get_history_file(str(tmp_path / "override.json"))
        assert result == tmp_path / "override.json"

    @pytest.mark.unit
    def test_env_var_used(self, tmp_path, monkeypatch):
        """HISTORY_FILE env var used when no override."""
        monkeypatch.setenv("HISTORY_FILE", str(tmp_path / "env.json"))
        assert get_history_file() == tmp_path / "env.json"

    @pytest.mark.unit
    def test_default_finds_repo_root(self, tmp_path, monkeypatch):
        """Default behavior finds repo root and returns data/history.json."""
        repo_root = tmp_path / "fake_repo"
        repo_root.mkdir()
        (repo_root / ".gitignore").touch()
        subdir = repo_root / "reports" / "2026"
        subdir.mkdir(parents=True)
        monkeypatch.chdir(subdir)
        monkeypatch.delenv("HISTORY_FILE", raising=False)

        assert get_history_file() == repo_root / "data" / "history.json"


class TestFindRepoRoot:
    """Tests for repository root detection."""

    @pytest.mark.unit
    def test_finds_gitignore(self, tmp_path):
        """Walks up to the directory holding .gitignore."""
        (tmp_path / ".gitignore").touch()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert _find_repo_root(nested) == tmp_path.resolve()
