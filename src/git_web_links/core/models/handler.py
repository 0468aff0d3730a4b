"""Provider handler definitions.

Definitions are plain data loaded from the bundled JSON files. Templates are
kept as source text here and compiled by the link handler; regular
expressions are compiled during validation.
"""

from re import Pattern
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from git_web_links.core.models.link import BranchRefType, LinkType, StaticServer


class QueryModification(BaseModel):
    """A query string parameter added when the file path matches ``pattern``."""

    pattern: Pattern[str]
    key: str
    value: str

    class Config:
        frozen = True


class ReverseServerSettings(BaseModel):
    """Templates producing the server identity of a reverse-parsed URL."""

    http: str = ""
    ssh: str = ""

    class Config:
        frozen = True


class ReverseSelectionSettings(BaseModel):
    """Templates producing the selection of a reverse-parsed URL."""

    start_line: str | None = None
    start_column: str | None = None
    end_line: str | None = None
    end_column: str | None = None

    class Config:
        frozen = True


class ReverseSettings(BaseModel):
    """How to turn a provider URL back into a file and selection."""

    pattern: Pattern[str]
    file: str = ""
    file_may_start_with_branch: bool = False
    server: ReverseServerSettings = Field(default_factory=ReverseServerSettings)
    selection: ReverseSelectionSettings = Field(default_factory=ReverseSelectionSettings)

    class Config:
        frozen = True


def _expand_servers(entries: list[Any]) -> list[Any]:
    """Expand entries whose ``ssh`` is a list into one server per SSH form."""
    expanded: list[Any] = []
    for entry in entries:
        if isinstance(entry, dict) and isinstance(entry.get("ssh"), list):
            forms = entry["ssh"] or [None]
            expanded.extend({"http": entry["http"], "ssh": form} for form in forms)
        else:
            expanded.append(entry)
    return expanded


class HandlerDefinition(BaseModel):
    """Everything needed to create and parse links for one provider.

    Public definitions list their servers. Private definitions (self-hosted
    providers) name the settings key that the servers are read from.
    """

    name: str
    branch_ref: BranchRefType = BranchRefType.ABBREVIATED
    url: str
    query: list[QueryModification] = Field(default_factory=list)
    selection: str = ""
    exclude_selection_for: list[LinkType] = Field(default_factory=list)
    reverse: ReverseSettings
    servers: list[StaticServer] = Field(default_factory=list)
    private: str | None = None

    @field_validator("servers", mode="before")
    @classmethod
    def _expand_ssh_forms(cls, value: Any) -> Any:
        if isinstance(value, list):
            return _expand_servers(value)
        return value

    @model_validator(mode="after")
    def _check_servers(self) -> "HandlerDefinition":
        if self.private is None and not self.servers:
            raise ValueError(f"handler '{self.name}' must define at least one server")
        return self

    @property
    def is_private(self) -> bool:
        return self.private is not None

    class Config:
        frozen = True
