"""Repository models."""

from pathlib import Path

from pydantic import BaseModel, field_validator


class Remote(BaseModel):
    """A git remote of a repository."""

    name: str
    url: str

    @field_validator("url")
    @classmethod
    def _url_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("remote URL must not be empty")
        return value.strip()

    class Config:
        frozen = True


class Repository(BaseModel):
    """A local working copy and the remote that links point to."""

    root: Path
    remote: Remote | None = None

    class Config:
        frozen = True
