"""Git subprocess wrapper — repo root, remotes, file history, file status."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from prevdiff.git.log_parser import LOG_FORMAT

logger = logging.getLogger(__name__)

# Print non-ASCII paths verbatim instead of as octal escapes
_PATH_CONFIG = ["-c", "core.quotePath=false"]

# stderr fragments git prints when a revision does not resolve
_UNKNOWN_REVISION_MARKERS = (
    "unknown revision",
    "bad revision",
    "ambiguous argument",
)


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr

    @property
    def is_unknown_revision(self) -> bool:
        lowered = self.stderr.lower()
        return any(marker in lowered for marker in _UNKNOWN_REVISION_MARKERS)


def run_git(
    args: List[str],
    cwd: Path,
    *,
    binary: str = "git",
    timeout: int = 30,
) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    logger.debug("running %s %s (cwd=%s)", binary, " ".join(args), cwd)
    try:
        result = subprocess.run(
            [binary, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError(f"{binary} is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(f"git error: {stderr or f'exit status {result.returncode}'}", stderr)
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None, **kwargs) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    out = run_git(["rev-parse", "--show-toplevel"], cwd=cwd, **kwargs)
    return Path(out.strip())


def get_remotes(repo_root: Path, **kwargs) -> str:
    """Return the raw ``git remote -v`` listing."""
    return run_git(["remote", "-v"], cwd=repo_root, **kwargs)


def get_file_log(
    repo_root: Path,
    file_path: str,
    *,
    max_count: int,
    ref: Optional[str] = None,
    follow_renames: bool = True,
    **kwargs,
) -> str:
    """Return name-status log output for *file_path*, newest first.

    *file_path* is relative to *repo_root*. An empty string is returned when
    *ref* does not resolve (for example the parent of a root commit).
    """
    args = [*_PATH_CONFIG, "log", f"--format={LOG_FORMAT}", "--name-status", f"-n{max_count}"]
    if follow_renames:
        args.extend(["-M", "--follow"])
    if ref:
        args.append(ref)
    args.extend(["--", file_path])

    try:
        return run_git(args, cwd=repo_root, **kwargs)
    except GitError as exc:
        if exc.is_unknown_revision:
            logger.debug("no history for %s at %s: %s", file_path, ref, exc.stderr)
            return ""
        raise


def get_file_status(repo_root: Path, file_path: str, **kwargs) -> str:
    """Return ``git status --porcelain`` output restricted to *file_path*."""
    return run_git(
        [*_PATH_CONFIG, "status", "--porcelain", "--untracked-files=all", "--", file_path],
        cwd=repo_root,
        **kwargs,
    )
