"""Tests for the history, stats and report CLI commands."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def history_file(tmp_path, history_payload) -> Path:
    path = tmp_path / "history.json"
    path.write_text(json.dumps(history_payload), encoding="utf-8")
    return path


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=30,
    )


@pytest.mark.integration
def test_history_sorted_by_score(history_file):
    """history lists records in the requested order."""
    result = _run("history", str(history_file), "--sort", "score", "--order", "asc")

    assert result.returncode == 0
    ids = [line.split("\t")[0] for line in result.stdout.splitlines()]
    assert ids == ["r0", "r1", "r2", "r3"]


@pytest.mark.integration
def test_history_search(history_file):
    """history filters by name or role."""
    result = _run("history", str(history_file), "--search", "engineer")

    assert result.returncode == 0
    ids = [line.split("\t")[0] for line in result.stdout.splitlines()]
    assert ids == ["r3", "r1"]


@pytest.mark.integration
def test_history_bad_file(tmp_path):
    """Malformed exports fail with exit code 1."""
    path = tmp_path / "history.json"
    path.write_text('{"history": "nope"}', encoding="utf-8")

    result = _run("history", str(path))
    assert result.returncode == 1
    assert "Could not load history" in result.stderr


@pytest.mark.integration
def test_history_non_utf8_file(tmp_path):
    """Exports that are not UTF-8 fail with exit code 1."""
    path = tmp_path / "history.json"
    path.write_bytes(b'{"history": [{"_id": "r1", "jobRole": "Caf\xe9"}]}')

    result = _run("history", str(path))
    assert result.returncode == 1
    assert "Could not load history" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.integration
@pytest.mark.parametrize("args", [["history"], ["stats"], ["report", "r1"]])
def test_no_repo_root(tmp_path, args):
    """Without HISTORY_FILE or a repo root the commands fail cleanly."""
    if any((p / ".gitignore").exists() for p in (tmp_path, *tmp_path.parents)):
        pytest.skip("tmp_path sits inside a directory with a .gitignore")
    dotenv = REPO_ROOT / ".env"
    if dotenv.exists() and "HISTORY_FILE" in dotenv.read_text(encoding="utf-8"):
        pytest.skip(".env sets HISTORY_FILE")
    env = {k: v for k, v in os.environ.items() if k != "HISTORY_FILE"}

    result = subprocess.run(
        [sys.executable, str(REPO_ROOT), *args],
        capture_output=True,
        text=True,
        cwd=tmp_path,
        env=env,
        timeout=30,
    )
    assert result.returncode == 1
    assert "Could not load history" in result.stderr
    assert "Traceback" not in result.stderr


@pytest.mark.integration
def test_stats(history_file):
    """stats prints dashboard figures."""
    result = _run("stats", str(history_file), "--recent", "2")

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["totalResumes"] == 4
    assert data["averageScore"] == "5.5"
    assert [r["_id"] for r in data["recentUploads"]] == ["r3", "r2"]


@pytest.mark.integration
def test_report(history_file):
    """report prints one record's report."""
    result = _run("report", "r2", str(history_file))

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["id"] == "r2"
    assert data["feedback"]["formattingIssues"] == [
        "Inconsistent tense usage throughout."
    ]


@pytest.mark.integration
def test_report_unknown_id(history_file):
    """Unknown ids fail with exit code 1."""
    result = _run("report", "missing", str(history_file))
    assert result.returncode == 1
    assert "Resume not found" in result.stderr
