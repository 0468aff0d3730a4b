"""Finds the git repository and remote that a file belongs to."""

from pathlib import Path

import structlog

from git_web_links.core.models.repository import Remote, Repository
from git_web_links.git.runner import Git

logger = structlog.get_logger(__name__)


class RepositoryFinder:
    """Locates the working copy containing a path and picks its remote."""

    def __init__(self, git: Git, preferred_remote_name: str = "origin") -> None:
        self._git = git
        self._preferred_remote_name = preferred_remote_name

    def find_repository(self, path: str | Path) -> Repository | None:
        """Find the repository containing ``path``, or None if it is not in one."""
        path = Path(path).absolute()
        directory = path if path.is_dir() else path.parent
        if not directory.exists():
            return None

        result = self._git.execute(directory, "rev-parse", "--show-toplevel")
        if not result.ok:
            logger.debug("Path is not in a git repository", path=str(path))
            return None

        root = Path(result.stdout.strip())
        return Repository(root=root, remote=self.find_remote(root))

    def find_remote(self, root: str | Path) -> Remote | None:
        """Pick the remote to link to: the preferred one, then origin, then the first."""
        names = [name for name in self._git.run(root, "remote").splitlines() if name]
        if not names:
            return None

        for candidate in (self._preferred_remote_name, "origin"):
            if candidate in names:
                name = candidate
                break
        else:
            name = names[0]

        url = self._git.run(root, "remote", "get-url", name)
        logger.debug("Using remote", name=name, url=url)
        return Remote(name=name, url=url)
