"""Resolves file paths relative to a repository root."""

import os
from pathlib import Path

from git_web_links.core.exceptions import FileNotInRepositoryError


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def _relative_to_root(path: Path, root: Path, real_root: Path) -> Path | None:
    for base in (root, real_root):
        if _is_within(path, base):
            return path.relative_to(base)

    # The path may reach the repository through a symlink of its own.
    for ancestor in path.parents:
        if Path(os.path.realpath(ancestor)) == real_root:
            return path.relative_to(ancestor)

    return None


def get_repository_relative_path(root: str | Path, path: str | Path) -> str:
    """Get the path of a file relative to the repository root.

    Symbolic links inside the repository are resolved, so a file reached
    through a linked directory gets the path of the real file. Nothing above
    the repository root is resolved: when the root itself is reached through
    a link, the link target is the base. Links pointing outside the
    repository are left as they are. Relative paths are taken relative to
    the root. The result always uses forward slashes.
    """
    root = Path(os.path.abspath(root))
    path = Path(path)
    if not path.is_absolute():
        path = root / path
    path = Path(os.path.abspath(path))

    real_root = Path(os.path.realpath(root))
    relative = _relative_to_root(path, root, real_root)
    if relative is None:
        raise FileNotInRepositoryError(str(path), str(root))

    current = real_root
    for part in relative.parts:
        candidate = current / part
        if candidate.is_symlink():
            target = Path(os.path.realpath(candidate))
            if _is_within(target, real_root):
                current = target
                continue
        current = candidate

    return current.relative_to(real_root).as_posix()
