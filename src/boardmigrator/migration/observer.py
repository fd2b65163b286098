"""Per-item migration events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from boardmigrator.logging import get_logger

if TYPE_CHECKING:
    from boardmigrator.migration.models import ItemResult
    from boardmigrator.schema.models import Item


class MigrationObserver(Protocol):
    """Receives what happens to each item during a migration run."""

    def item_skipped(self, item: Item, reason: str) -> None: ...

    def item_created(self, item: Item, new_item_id: str) -> None: ...

    def item_failed(self, item: Item, error: Exception) -> None: ...

    def field_set(self, item: Item, field_name: str, value: str) -> None: ...

    def field_failed(self, item: Item, field_name: str, error: Exception) -> None: ...

    def value_unmapped(self, item: Item, field_name: str, value: str) -> None: ...

    def item_archived(self, item: Item) -> None: ...

    def archive_failed(self, item: Item, error: Exception) -> None: ...

    def item_migrated(self, item: Item, result: ItemResult) -> None: ...


class LoggingObserver:
    """Writes migration events to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("migration")

    def item_skipped(self, item: Item, reason: str) -> None:
        self.logger.info("Skipping %s: %s", reason, item.content.title or item.title)

    def item_created(self, item: Item, new_item_id: str) -> None:
        self.logger.info("Added issue '%s' to the roadmap board as %s", item.title, new_item_id)

    def item_failed(self, item: Item, error: Exception) -> None:
        self.logger.error("Error adding item '%s' (%s): %s", item.title, item.id, error)

    def field_set(self, item: Item, field_name: str, value: str) -> None:
        self.logger.debug("Set %s to '%s' for '%s'", field_name, value, item.title)

    def field_failed(self, item: Item, field_name: str, error: Exception) -> None:
        self.logger.error("Error editing %s for item '%s': %s", field_name, item.title, error)

    def value_unmapped(self, item: Item, field_name: str, value: str) -> None:
        self.logger.error("%s '%s' not found in roadmap (item '%s')", field_name, value, item.title)

    def item_archived(self, item: Item) -> None:
        self.logger.info("Archived '%s' on the source board", item.title)

    def archive_failed(self, item: Item, error: Exception) -> None:
        self.logger.error("Error archiving item '%s' (%s): %s", item.title, item.id, error)

    def item_migrated(self, item: Item, result: ItemResult) -> None:
        if result.errors:
            self.logger.warning(
                "Migrated '%s' with %d error(s)", item.title, len(result.errors)
            )
        else:
            self.logger.info("Migrated '%s'", item.title)
