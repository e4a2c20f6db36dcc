"""Tests for the parse CLI command."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=30,
    )


@pytest.mark.integration
def test_parse_file(tmp_path, sample_feedback):
    """parse prints camelCase JSON for a feedback file."""
    path = tmp_path / "feedback.txt"
    path.write_text(sample_feedback, encoding="utf-8")

    result = _run("parse", str(path))

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["missingKeywords"] == ["Python", "Docker", "CI/CD"]
    assert len(data["suggestions"]) == 3


@pytest.mark.integration
def test_parse_stdin():
    """parse reads stdin when no file is given."""
    result = _run("parse", stdin="Grammar Issues: Inconsistent tense usage throughout.")

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["formattingIssues"] == ["Inconsistent tense usage throughout."]


@pytest.mark.integration
def test_parse_missing_file(tmp_path):
    """A missing input file is reported with exit code 1."""
    result = _run("parse", str(tmp_path / "absent.txt"))
    assert result.returncode == 1
    assert "Could not read feedback" in result.stderr


@pytest.mark.integration
def test_parse_non_utf8_file(tmp_path):
    """A file that is not UTF-8 is reported with exit code 1."""
    path = tmp_path / "feedback.txt"
    path.write_bytes(b"Missing keywords: caf\xe9 SQL")

    result = _run("parse", str(path))
    assert result.returncode == 1
    assert "Could not read feedback" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.integration
def test_unknown_command():
    """Unknown commands print help and fail."""
    result = _run("frobnicate")
    assert result.returncode == 1
    assert "Usage: python ." in result.stdout
