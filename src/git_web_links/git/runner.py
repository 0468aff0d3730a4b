"""Runs git commands using subprocess."""

import subprocess
import threading
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

from git_web_links.core.exceptions import ExternalCommandError

logger = structlog.get_logger(__name__)

# How often a running command checks whether it has been cancelled.
_CANCEL_POLL_SECONDS = 0.05


@dataclass(frozen=True)
class GitResult:
    """Output of a git command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Git:
    """Thin wrapper around the git CLI.

    Uses subprocess + git CLI directly (no gitpython dependency). Every call
    is an independent process, so one instance can be shared freely.
    """

    def __init__(self, executable: str = "git", timeout: float | None = None) -> None:
        self._executable = executable
        self._timeout = timeout

    def execute(
        self,
        cwd: str | Path,
        *args: str,
        cancel: threading.Event | None = None,
    ) -> GitResult:
        """Run a git command and return its output, whatever the exit code.

        The process is killed when ``cancel`` is set or the timeout elapses,
        and an ExternalCommandError is raised.
        """
        logger.debug("Running git", cwd=str(cwd), args=args)
        try:
            process = subprocess.Popen(
                [self._executable, *args],
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise ExternalCommandError(list(args), str(e)) from e

        deadline = None if self._timeout is None else time.monotonic() + self._timeout
        while True:
            if cancel is not None and cancel.is_set():
                self._kill(process)
                raise ExternalCommandError(list(args), "cancelled")

            wait = _CANCEL_POLL_SECONDS if cancel is not None else None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    self._kill(process)
                    raise ExternalCommandError(list(args), f"timed out after {self._timeout}s")
                wait = remaining if wait is None else min(wait, remaining)

            try:
                stdout, stderr = process.communicate(timeout=wait)
                break
            except subprocess.TimeoutExpired:
                continue

        return GitResult(stdout=stdout, stderr=stderr, exit_code=process.returncode)

    def run(
        self,
        cwd: str | Path,
        *args: str,
        cancel: threading.Event | None = None,
    ) -> str:
        """Run a git command and return its trimmed stdout.

        Raises ExternalCommandError when git exits with a non-zero code.
        """
        result = self.execute(cwd, *args, cancel=cancel)
        if not result.ok:
            raise ExternalCommandError(
                list(args),
                result.stderr.strip() or f"exit code {result.exit_code}",
                exit_code=result.exit_code,
                stderr=result.stderr,
            )
        return result.stdout.strip()

    @staticmethod
    def _kill(process: subprocess.Popen) -> None:
        process.kill()
        process.communicate()
