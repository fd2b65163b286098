"""Data models for the Migration module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from boardmigrator.migration.exceptions import ConfigurationError
from boardmigrator.schema.models import BoardType


class ItemOutcome(StrEnum):
    """Terminal state of one item."""

    MIGRATED = "migrated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class MigrationParams:
    """What to migrate and how to label it on the roadmap.

    Attributes:
        source_project: Number of the board to migrate (e.g. "301").
        board_type: Whether ``name`` is a team, SIG or working group.
        name: Team, SIG or WG name; may be abbreviated.
        area: Optional area name; may be abbreviated.
        function: Optional function name; may be abbreviated.
        dry_run: Leave the source items in place instead of archiving them.
    """

    source_project: str
    board_type: BoardType
    name: str
    area: str | None = None
    function: str | None = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        self.source_project = str(self.source_project or "").strip()
        if not self.source_project:
            raise ConfigurationError("Project number is missing")
        if not self.source_project.isdigit():
            raise ConfigurationError(f"Project number must be numeric, got '{self.source_project}'")
        if not isinstance(self.board_type, BoardType):
            if not self.board_type:
                raise ConfigurationError("Type is missing")
            try:
                self.board_type = BoardType.from_value(self.board_type)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        if not self.name:
            raise ConfigurationError("Name is missing")
        # Empty strings mean "not requested"
        self.area = self.area or None
        self.function = self.function or None


@dataclass
class ItemResult:
    """What happened to one source item.

    Attributes:
        item_id: Source project item ID.
        title: Item title.
        outcome: Terminal state.
        new_item_id: Roadmap item ID, when created.
        errors: Failures that did not stop the item (field edits, archiving).
        archived: Whether the source item was archived.
    """

    item_id: str
    title: str
    outcome: ItemOutcome
    new_item_id: str | None = None
    errors: list[str] = field(default_factory=list)
    archived: bool = False


@dataclass
class MigrationReport:
    """Result of a migration run."""

    source_project: str
    roadmap_project: int
    dry_run: bool = False
    results: list[ItemResult] = field(default_factory=list)

    def _count(self, outcome: ItemOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def migrated(self) -> int:
        return self._count(ItemOutcome.MIGRATED)

    @property
    def skipped(self) -> int:
        return self._count(ItemOutcome.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(ItemOutcome.FAILED)

    @property
    def has_errors(self) -> bool:
        """True if any item failed or had a partial failure."""
        return any(r.outcome == ItemOutcome.FAILED or r.errors for r in self.results)

    def summary(self) -> str:
        return (
            f"{self.migrated} migrated, {self.skipped} skipped, {self.failed} failed"
            + (" (dry run)" if self.dry_run else "")
        )
