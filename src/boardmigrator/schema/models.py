"""Pydantic models for GitHub Project schemas and items.

These mirror the JSON emitted by ``gh project ... --format json``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator

DRAFT_ISSUE = "DraftIssue"


class Project(BaseModel):
    """A project board as returned by ``gh project list``."""

    id: str
    number: int


class ProjectList(BaseModel):
    """Project listing. ``gh`` returns ``{"projects": [...]}``; older output is a bare list."""

    projects: list[Project] = PydanticField(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> ProjectList:
        if isinstance(payload, list):
            payload = {"projects": payload}
        return cls.model_validate(payload)

    def find(self, number: int | str) -> Project | None:
        """Return the project with the given number, if listed."""
        for project in self.projects:
            if str(project.number) == str(number):
                return project
        return None


class Option(BaseModel):
    """A selectable value of a single-select field."""

    id: str
    name: str


class Field(BaseModel):
    """A named attribute on a board's items.

    Date and text fields carry no options.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    options: list[Option] = PydanticField(default_factory=list)

    @field_validator("options", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Schema(BaseModel):
    """All fields of one board, as returned by ``gh project field-list``."""

    fields: list[Field] = PydanticField(default_factory=list)


class ItemContent(BaseModel):
    """The issue, pull request or draft behind a project item."""

    type: str = ""
    title: str = ""
    url: str = ""


class Item(BaseModel):
    """A project item snapshot as returned by ``gh project item-list``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: str = ""
    content: ItemContent = PydanticField(default_factory=ItemContent)
    status: str | None = None
    kind: str | None = None
    workstream: str | None = None
    start_date: str | None = PydanticField(default=None, alias="start Date")
    target_date: str | None = PydanticField(default=None, alias="target Date")

    @field_validator("status", "kind", "workstream", mode="before")
    @classmethod
    def _select_value(cls, value: Any) -> str | None:
        # Only plain strings name an option; anything else counts as unset.
        if isinstance(value, str) and value:
            return value
        return None

    @field_validator("start_date", "target_date", mode="before")
    @classmethod
    def _date_value(cls, value: Any) -> str | None:
        if not isinstance(value, str) or value in ("", "null"):
            return None
        return value

    @field_validator("content", mode="before")
    @classmethod
    def _none_to_empty_content(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_draft(self) -> bool:
        """Drafts have no linked issue or pull request."""
        return self.content.type == DRAFT_ISSUE


class ItemList(BaseModel):
    """Item listing wrapper."""

    items: list[Item] = PydanticField(default_factory=list)


class AddedItem(BaseModel):
    """Response of ``gh project item-add``."""

    model_config = ConfigDict(extra="ignore")

    id: str


class BoardType(str, Enum):
    """Kind of group that owns the migrated items on the roadmap."""

    TEAM = "team"
    SIG = "sig"
    WG = "wg"

    @property
    def field_name(self) -> str:
        """Roadmap field holding the owning group."""
        return _BOARD_TYPE_FIELDS[self]

    @property
    def label(self) -> str:
        """Short name used in messages."""
        return _BOARD_TYPE_LABELS[self]

    @classmethod
    def from_value(cls, value: str) -> BoardType:
        """Parse ``team``, ``sig`` or ``wg``.

        Raises:
            ValueError: For any other value.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"type must be either team, sig or wg, got {value!r}") from None


_BOARD_TYPE_FIELDS = {
    BoardType.TEAM: "Team",
    BoardType.SIG: "SIG",
    BoardType.WG: "Working Group",
}

_BOARD_TYPE_LABELS = {
    BoardType.TEAM: "Team",
    BoardType.SIG: "SIG",
    BoardType.WG: "WG",
}
