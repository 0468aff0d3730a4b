"""Models describing what a link points at."""

from enum import Enum

from pydantic import BaseModel, Field


class LinkType(str, Enum):
    """The kind of git ref that a link is created against.

    The values are the names exposed to templates and settings.
    """

    COMMIT = "commit"
    CURRENT_BRANCH = "branch"
    DEFAULT_BRANCH = "defaultBranch"


class BranchRefType(str, Enum):
    """How branch names are written into URLs."""

    ABBREVIATED = "abbreviated"
    FULL = "full"


class StaticServer(BaseModel):
    """A hosting server identified by its web address and SSH address."""

    http: str
    ssh: str | None = None

    class Config:
        frozen = True


class SelectedRange(BaseModel):
    """A selection within a file. ``None`` means the value is not specified."""

    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None

    class Config:
        frozen = True


class FileInfo(BaseModel):
    """The file (and optional selection) to create a link to."""

    file_path: str
    selection: SelectedRange | None = None


class LinkOptions(BaseModel):
    """Options for creating a link. A ``None`` link type uses the configured default."""

    link_type: LinkType | None = None


class UrlInfo(BaseModel):
    """Information extracted from a hosting provider URL."""

    file_path: str
    server: StaticServer
    selection: SelectedRange = Field(default_factory=SelectedRange)
    file_may_start_with_branch: bool = False

    def candidate_paths(self) -> list[str]:
        """Repository-relative paths the URL could refer to.

        When the path may start with a branch name, the branch could contain
        any number of slashes, so every split point is a candidate, shortest
        branch name first.
        """
        if not self.file_may_start_with_branch:
            return [self.file_path]

        segments = [s for s in self.file_path.split("/") if s]
        return ["/".join(segments[i:]) for i in range(1, len(segments))]
