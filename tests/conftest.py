"""Pytest configuration and fixtures."""

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from git_web_links.config.settings import Settings
from git_web_links.git.runner import Git


def _run_git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def run_git() -> Callable[..., str]:
    """Run a git command in a directory and return its trimmed stdout."""
    return _run_git


@pytest.fixture
def make_git_repo(tmp_path: Path) -> Callable[[str], Path]:
    """Create temporary Git repositories with one commit on "master"."""

    def _make(name: str = "repo") -> Path:
        repo_path = tmp_path / name
        repo_path.mkdir(parents=True)

        _run_git(repo_path, "init")
        _run_git(repo_path, "symbolic-ref", "HEAD", "refs/heads/master")
        _run_git(repo_path, "config", "user.email", "test@test.com")
        _run_git(repo_path, "config", "user.name", "Test")
        _run_git(repo_path, "config", "commit.gpgsign", "false")

        (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")
        (repo_path / "src").mkdir()
        (repo_path / "src" / "app.py").write_text("print('hello')\n")

        _run_git(repo_path, "add", ".")
        _run_git(repo_path, "commit", "-m", "Initial commit")
        return repo_path

    return _make


@pytest.fixture
def git_repo(make_git_repo: Callable[[str], Path]) -> Path:
    """Create a temporary Git repository with some files."""
    return make_git_repo("test-repo")


@pytest.fixture
def git() -> Git:
    return Git(timeout=30)


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the environment's .env file."""
    return Settings(_env_file=None)
