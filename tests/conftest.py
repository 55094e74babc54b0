"""Shared test fixtures — sample listings and logs, fake collaborators, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

from prevdiff.git.models import CommitRecord, FileStatus

SHA_A = "a" * 40
SHA_B = "b" * 40
SHA_C = "c" * 40


@pytest.fixture
def sample_remote_listing() -> str:
    """Two remotes, origin listed for fetch and push."""
    return (
        "origin\thttps://host/a/b.git (fetch)\n"
        "origin\thttps://host/a/b.git (push)\n"
        "upstream\tgit@host:c/d.git (fetch)\n"
    )


@pytest.fixture
def sample_file_log() -> str:
    """Name-status log of a file renamed from docs/old.md to docs/new.md."""
    return (
        f"\x1e{SHA_C}\n"
        "\n"
        "R087\tdocs/old.md\tdocs/new.md\n"
        f"\x1e{SHA_B}\n"
        "\n"
        "M\tdocs/old.md\n"
        f"\x1e{SHA_A}\n"
        "\n"
        "A\tdocs/old.md\n"
    )


class FakeHistory:
    """In-memory history provider keyed by (ref, max_entries); records every call."""

    def __init__(self, responses: Optional[Dict[Tuple[Optional[str], int], List[CommitRecord]]] = None) -> None:
        self.responses = responses or {}
        self.calls: List[dict] = []
        self.error: Optional[Exception] = None

    def get_history_for_file(self, repo_path, file_path, *, max_entries, ref=None, follow_renames=True):
        self.calls.append(
            {
                "repo_path": repo_path,
                "file_path": file_path,
                "max_entries": max_entries,
                "ref": ref,
                "follow_renames": follow_renames,
            }
        )
        if self.error is not None:
            raise self.error
        return self.responses.get((ref, max_entries))


class FakeStatus:
    """Status provider returning a fixed status; records every call."""

    def __init__(self, status: Optional[FileStatus] = None) -> None:
        self.status = status
        self.calls: List[Tuple[str, str]] = []

    def get_status_for_file(self, repo_path, file_path):
        self.calls.append((repo_path, file_path))
        return self.status


@pytest.fixture
def fake_history() -> FakeHistory:
    return FakeHistory()


@pytest.fixture
def fake_status() -> FakeStatus:
    return FakeStatus()


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True,
    )
    return result.stdout


@pytest.fixture
def git():
    """Run a git command in a directory and return stdout."""
    return _git


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def renamed_repo(tmp_git_repo: Path) -> Path:
    """Repo where notes.txt is added, edited, then renamed to guide.txt."""
    notes = tmp_git_repo / "notes.txt"
    notes.write_text(textwrap.dedent("""\
        line one
        line two
        line three
    """))
    _git(tmp_git_repo, "add", "notes.txt")
    _git(tmp_git_repo, "commit", "-m", "add notes")

    notes.write_text(notes.read_text() + "line four\n")
    _git(tmp_git_repo, "commit", "-am", "edit notes")

    _git(tmp_git_repo, "mv", "notes.txt", "guide.txt")
    _git(tmp_git_repo, "commit", "-m", "rename notes")
    return tmp_git_repo
