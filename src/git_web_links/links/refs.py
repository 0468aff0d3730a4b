"""Resolves the git ref that a link points at."""

import threading
from dataclasses import dataclass

import structlog

from git_web_links.config.settings import SettingsProvider
from git_web_links.core.exceptions import (
    DetachedHeadError,
    ExternalCommandError,
    NoRemoteError,
    NoRemoteHeadError,
)
from git_web_links.core.models.link import BranchRefType, LinkType
from git_web_links.core.models.repository import Repository
from git_web_links.git.runner import Git

logger = structlog.get_logger(__name__)

_HEADS_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class ResolvedRef:
    """The ref to link to, and the link type it was resolved as."""

    link_type: LinkType
    ref: str


class RefResolver:
    """Decides which commit hash or branch name a link uses."""

    def __init__(self, git: Git, settings: SettingsProvider) -> None:
        self._git = git
        self._settings = settings

    def resolve(
        self,
        link_type: LinkType | None,
        repository: Repository,
        branch_ref: BranchRefType = BranchRefType.ABBREVIATED,
        cancel: threading.Event | None = None,
    ) -> str:
        """Get the ref string for a link of the given type."""
        return self.resolve_ref(link_type, repository, branch_ref, cancel).ref

    def resolve_ref(
        self,
        link_type: LinkType | None,
        repository: Repository,
        branch_ref: BranchRefType = BranchRefType.ABBREVIATED,
        cancel: threading.Event | None = None,
    ) -> ResolvedRef:
        """Get the ref for a link, falling back to the configured link type.

        A detached HEAD is an error when a branch link was requested
        explicitly. When the branch link type only came from the settings, the
        link is made to the current commit instead.
        """
        requested = link_type
        if link_type is None:
            link_type = self._settings.default_link_type or LinkType.CURRENT_BRANCH

        if link_type == LinkType.COMMIT:
            return ResolvedRef(
                LinkType.COMMIT,
                self.get_commit(repository, short=self._settings.use_short_hashes, cancel=cancel),
            )

        if link_type == LinkType.CURRENT_BRANCH:
            branch = self.get_current_branch(repository, branch_ref, cancel=cancel)
            if branch is not None:
                return ResolvedRef(LinkType.CURRENT_BRANCH, branch)
            if requested is not None:
                raise DetachedHeadError()
            logger.debug("HEAD is detached, linking to the current commit")
            return self.resolve_ref(LinkType.COMMIT, repository, branch_ref, cancel)

        return ResolvedRef(
            LinkType.DEFAULT_BRANCH,
            self.get_default_branch(repository, branch_ref, cancel=cancel),
        )

    def get_commit(
        self,
        repository: Repository,
        short: bool = False,
        cancel: threading.Event | None = None,
    ) -> str:
        """Get the current HEAD commit hash."""
        if short:
            return self._git.run(repository.root, "rev-parse", "--short", "HEAD", cancel=cancel)
        return self._git.run(repository.root, "rev-parse", "HEAD", cancel=cancel)

    def get_current_branch(
        self,
        repository: Repository,
        branch_ref: BranchRefType,
        cancel: threading.Event | None = None,
    ) -> str | None:
        """Get the current branch name, or None when HEAD is detached."""
        args = ["symbolic-ref", "-q", "HEAD"]
        if branch_ref == BranchRefType.ABBREVIATED:
            args.insert(2, "--short")

        result = self._git.execute(repository.root, *args, cancel=cancel)
        if result.exit_code == 1:
            return None
        if not result.ok:
            raise ExternalCommandError(
                args, result.stderr.strip(), exit_code=result.exit_code, stderr=result.stderr
            )
        return result.stdout.strip()

    def get_default_branch(
        self,
        repository: Repository,
        branch_ref: BranchRefType,
        cancel: threading.Event | None = None,
    ) -> str:
        """Get the configured default branch, or the branch the remote's HEAD points at."""
        name = self._settings.default_branch.strip()

        if not name:
            if repository.remote is None:
                raise NoRemoteError(str(repository.root))

            remote = repository.remote.name
            target = self._git.run(
                repository.root,
                "for-each-ref",
                "--format=%(symref)",
                f"refs/remotes/{remote}/HEAD",
                cancel=cancel,
            )
            if not target:
                raise NoRemoteHeadError(remote)

            name = target.removeprefix(f"refs/remotes/{remote}/")
            logger.debug("Using the remote's default branch", remote=remote, branch=name)

        if branch_ref == BranchRefType.FULL and not name.startswith(_HEADS_PREFIX):
            return _HEADS_PREFIX + name
        return name
