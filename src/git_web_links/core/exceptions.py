"""Exceptions raised while creating or resolving links."""

from enum import Enum


class ErrorKind(str, Enum):
    """Tag identifying which failure occurred."""

    SERVER_NOT_MATCHED = "server_not_matched"
    NO_REMOTE = "no_remote"
    NO_REMOTE_HEAD = "no_remote_head"
    DETACHED_HEAD = "detached_head"
    EXTERNAL_COMMAND = "external_command"
    FILE_NOT_IN_REPOSITORY = "file_not_in_repository"


class GitWebLinksError(Exception):
    """Base exception for all link failures.

    Callers that need to react differently to each failure can branch on
    ``kind`` instead of catching every subclass.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ServerNotMatchedError(GitWebLinksError):
    """No configured server matches the repository's remote."""

    kind = ErrorKind.SERVER_NOT_MATCHED

    def __init__(self, remote_url: str) -> None:
        super().__init__(f"No provider server matches the remote '{remote_url}'")
        self.remote_url = remote_url


class NoRemoteError(GitWebLinksError):
    """The repository does not have a remote to link to."""

    kind = ErrorKind.NO_REMOTE

    def __init__(self, root: str) -> None:
        super().__init__(f"The repository at '{root}' does not have a remote")
        self.root = root


class NoRemoteHeadError(GitWebLinksError):
    """The remote has no recorded HEAD and no default branch is configured."""

    kind = ErrorKind.NO_REMOTE_HEAD

    def __init__(self, remote_name: str) -> None:
        super().__init__(
            f"The remote '{remote_name}' does not have a HEAD ref. "
            f"Run 'git remote set-head {remote_name} --auto' or configure a default branch."
        )
        self.remote_name = remote_name


class DetachedHeadError(GitWebLinksError):
    """A branch link was requested while HEAD is not on a branch."""

    kind = ErrorKind.DETACHED_HEAD

    def __init__(self) -> None:
        super().__init__("Cannot link to the current branch because HEAD is detached")


class ExternalCommandError(GitWebLinksError):
    """The git command failed, timed out or was cancelled."""

    kind = ErrorKind.EXTERNAL_COMMAND

    def __init__(
        self,
        args: list[str],
        reason: str,
        exit_code: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(f"git {' '.join(args)} failed: {reason}")
        self.command_args = args
        self.exit_code = exit_code
        self.stderr = stderr


class FileNotInRepositoryError(GitWebLinksError):
    """The file being linked to is not inside a repository."""

    kind = ErrorKind.FILE_NOT_IN_REPOSITORY

    def __init__(self, path: str, root: str | None = None) -> None:
        if root is None:
            super().__init__(f"'{path}' is not inside a git repository")
        else:
            super().__init__(f"'{path}' is not inside the repository at '{root}'")
        self.path = path
        self.root = root
