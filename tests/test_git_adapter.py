"""Integration tests for the git adapter and provider against real repositories."""

from pathlib import Path

import pytest

from prevdiff.git.adapter import GitError, get_file_log, get_remotes, get_repo_root, run_git
from prevdiff.git.provider import GitProvider
from prevdiff.git.remote_parser import RemoteParser
from prevdiff.resolver import ComparisonSide, PreviousRevisionResolver, RevisionQuery


@pytest.fixture
def provider() -> GitProvider:
    return GitProvider()


def _shas(git, repo: Path):
    """Commit shas oldest first."""
    return git(repo, "rev-list", "--reverse", "HEAD").split()


class TestAdapter:
    def test_repo_root(self, tmp_git_repo: Path):
        assert get_repo_root(tmp_git_repo).resolve() == tmp_git_repo.resolve()

    def test_not_a_repo(self, tmp_path: Path):
        with pytest.raises(GitError):
            get_repo_root(tmp_path)

    def test_missing_binary(self, tmp_git_repo: Path):
        with pytest.raises(GitError, match="not installed"):
            run_git(["status"], cwd=tmp_git_repo, binary="definitely-not-git-xyz")

    def test_unknown_revision_is_empty_log(self, tmp_git_repo: Path, git):
        (root,) = _shas(git, tmp_git_repo)
        assert get_file_log(tmp_git_repo, "README.md", max_count=2, ref=f"{root}^") == ""

    def test_remotes_listing(self, tmp_git_repo: Path, git):
        git(tmp_git_repo, "remote", "add", "origin", "https://example.com/org/repo.git")
        git(tmp_git_repo, "remote", "add", "upstream", "git@example.com:up/repo.git")

        remotes = RemoteParser.parse(get_remotes(tmp_git_repo), str(tmp_git_repo))

        assert [r.name for r in remotes] == ["origin", "upstream"]
        assert remotes[0].capabilities == ["fetch", "push"]
        assert (remotes[0].host, remotes[0].path) == ("example.com", "org/repo")
        assert (remotes[1].host, remotes[1].path) == ("example.com", "up/repo")


class TestProvider:
    def test_history_follows_rename(self, renamed_repo: Path, provider, git):
        add, edit, rename = _shas(git, renamed_repo)[1:]

        commits = provider.get_history_for_file(str(renamed_repo), "guide.txt", max_entries=3)

        assert [c.sha for c in commits] == [rename, edit, add]
        assert [c.status for c in commits] == ["R", "M", "A"]
        assert commits[0].file_name == "guide.txt"
        assert commits[0].previous_path == "notes.txt"
        assert commits[0].previous_sha == edit
        assert commits[2].previous_sha is None

    def test_truncated_history_points_at_parent(self, renamed_repo: Path, provider, git):
        edit = _shas(git, renamed_repo)[2]
        commits = provider.get_history_for_file(str(renamed_repo), "guide.txt", max_entries=2)
        assert commits[-1].sha == edit
        assert commits[-1].previous_sha == f"{edit}^"

    def test_untracked_file_has_no_history(self, tmp_git_repo: Path, provider):
        (tmp_git_repo / "scratch.txt").write_text("x\n")
        assert provider.get_history_for_file(str(tmp_git_repo), "scratch.txt", max_entries=2) is None

    def test_status(self, tmp_git_repo: Path, provider, git):
        repo = str(tmp_git_repo)
        assert provider.get_status_for_file(repo, "README.md") is None

        (tmp_git_repo / "README.md").write_text("# Changed\n")
        status = provider.get_status_for_file(repo, "README.md")
        assert status.has_index_entry is False
        assert status.work_tree_status == "M"

        git(tmp_git_repo, "add", "README.md")
        assert provider.get_status_for_file(repo, "README.md").has_index_entry is True


class TestResolveAgainstGit:
    def test_non_ascii_file(self, tmp_git_repo: Path, provider, git):
        name = "caf\u00e9.txt"
        (tmp_git_repo / name).write_text("one\n", encoding="utf-8")
        git(tmp_git_repo, "add", name)
        git(tmp_git_repo, "commit", "-m", "add cafe")
        (tmp_git_repo / name).write_text("one\ntwo\n", encoding="utf-8")
        git(tmp_git_repo, "commit", "-am", "edit cafe")
        (tmp_git_repo / name).write_text("one\ntwo\nthree\n", encoding="utf-8")
        add, edit = _shas(git, tmp_git_repo)[1:]
        resolver = PreviousRevisionResolver(provider, provider)

        result = resolver.resolve(RevisionQuery(name, str(tmp_git_repo)))

        assert provider.get_status_for_file(str(tmp_git_repo), name).path == name
        assert result.left == ComparisonSide(edit, name)
        assert result.right == ComparisonSide("", name)

        result = resolver.resolve(RevisionQuery(name, str(tmp_git_repo), starting_revision=edit))
        assert result.left == ComparisonSide(add, name)
        assert result.right == ComparisonSide(edit, name)

    def test_working_tree_after_rename(self, renamed_repo: Path, provider, git):
        edit, rename = _shas(git, renamed_repo)[2:]
        resolver = PreviousRevisionResolver(provider, provider)

        result = resolver.resolve(RevisionQuery("guide.txt", str(renamed_repo)))

        assert result.left == ComparisonSide(edit, "notes.txt")
        assert result.right == ComparisonSide(rename, "guide.txt")

    def test_diff_view_across_rename(self, renamed_repo: Path, provider, git):
        add, edit, rename = _shas(git, renamed_repo)[1:]
        resolver = PreviousRevisionResolver(provider, provider)

        result = resolver.resolve(
            RevisionQuery("guide.txt", str(renamed_repo), starting_revision=rename, in_diff_view=True)
        )

        assert result.left == ComparisonSide(add, "notes.txt")
        assert result.right == ComparisonSide(edit, "notes.txt")
