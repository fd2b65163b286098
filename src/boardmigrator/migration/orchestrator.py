"""Migrator - Copies the items of a project board onto the roadmap board."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from tqdm import tqdm

from boardmigrator.gateway import GatewayError
from boardmigrator.logging import get_logger
from boardmigrator.migration.exceptions import MigrationError, ProjectNotFoundError
from boardmigrator.migration.models import ItemOutcome, ItemResult, MigrationParams, MigrationReport
from boardmigrator.migration.observer import LoggingObserver, MigrationObserver
from boardmigrator.schema import ProjectList, find_option_by_name, validate_schemas
from boardmigrator.schema.validator import KIND, STATUS, WORKSTREAM

if TYPE_CHECKING:
    from collections.abc import Callable

    from boardmigrator.config import MigratorConfig
    from boardmigrator.gateway import GhClient
    from boardmigrator.schema import Field, Item, ResolvedTargets

T = TypeVar("T")

logger = get_logger("migration")


class Migrator:
    """Moves every item of a source board onto the roadmap board.

    A run fetches both schemas, validates them, then walks the source items in
    listing order. Per item it:
    - skips drafts
    - adds the underlying issue to the roadmap
    - sets the team/SIG/WG, area and function fields
    - copies Status, Kind, Workstream and the start/target dates
    - archives the source item unless this is a dry run

    Failures from here on are reported through the observer and never stop
    the run. Everything before the first item is fatal.
    """

    def __init__(
        self,
        gateway: GhClient,
        config: MigratorConfig,
        observer: MigrationObserver | None = None,
        show_progress: bool = False,
    ) -> None:
        """Initialize the Migrator.

        Args:
            gateway: Client running the GitHub CLI.
            config: Owner and roadmap board settings.
            observer: Receives per-item events. Defaults to logging them.
            show_progress: Display a progress bar over the items.
        """
        self.gateway = gateway
        self.config = config
        self.observer: MigrationObserver = observer or LoggingObserver()
        self.show_progress = show_progress

    def run(self, params: MigrationParams) -> MigrationReport:
        """Run a migration.

        Args:
            params: Validated migration parameters.

        Returns:
            Report with one result per source item.

        Raises:
            ProjectNotFoundError: If the source or roadmap project isn't listed.
            SchemaValidationError: If the boards' schemas don't line up.
            MigrationError: If listing projects, fields or items fails.
        """
        roadmap_number = self.config.roadmap.number
        logger.info(
            "Migrating project %s to roadmap %s (%s '%s'%s)",
            params.source_project,
            roadmap_number,
            params.board_type.value,
            params.name,
            ", dry run" if params.dry_run else "",
        )

        roadmap_id = self._resolve_projects(params.source_project)

        source_schema = self._fetch(
            "fields of project", params.source_project, self.gateway.list_fields
        )
        roadmap_schema = self._fetch("fields of roadmap", roadmap_number, self.gateway.list_fields)

        targets = validate_schemas(
            source_schema,
            roadmap_schema,
            params.board_type,
            params.name,
            area=params.area,
            function=params.function,
        )

        items = self._fetch("items of project", params.source_project, self.gateway.list_items)
        logger.info("Found %d item(s) in project %s", len(items), params.source_project)

        report = MigrationReport(
            source_project=params.source_project,
            roadmap_project=roadmap_number,
            dry_run=params.dry_run,
        )
        for item in tqdm(
            items,
            desc="Migrating",
            unit="item",
            disable=not self.show_progress or len(items) <= 1,
        ):
            report.results.append(self._migrate_item(item, params, targets, roadmap_id))

        logger.info(
            "Migration of project %s finished: %s", params.source_project, report.summary()
        )
        return report

    def _fetch(self, what: str, number: int | str, call: Callable[[str], T]) -> T:
        try:
            return call(str(number))
        except GatewayError as e:
            raise MigrationError(f"Error retrieving {what} {number}: {e}") from e

    def _resolve_projects(self, source_project: str) -> str:
        """Check the source project exists and return the roadmap's project ID."""
        try:
            projects = ProjectList(projects=self.gateway.list_projects())
        except GatewayError as e:
            raise MigrationError(f"Error retrieving project list: {e}") from e

        if projects.find(source_project) is None:
            raise ProjectNotFoundError(f"Project '{source_project}' not found")

        roadmap_id = self.config.roadmap.project_id
        if not roadmap_id:
            roadmap = projects.find(self.config.roadmap.number)
            if roadmap is None:
                raise ProjectNotFoundError(
                    f"Roadmap project '{self.config.roadmap.number}' not found"
                )
            roadmap_id = roadmap.id
            logger.debug("Resolved roadmap project ID %s", roadmap_id)
        return roadmap_id

    def _migrate_item(
        self,
        item: Item,
        params: MigrationParams,
        targets: ResolvedTargets,
        roadmap_id: str,
    ) -> ItemResult:
        """Migrate one item. Only adding it to the roadmap can fail it."""
        if item.is_draft:
            self.observer.item_skipped(item, "draft")
            return ItemResult(item_id=item.id, title=item.title, outcome=ItemOutcome.SKIPPED)

        try:
            new_id = self.gateway.create_item(self.config.roadmap.number, item.content.url)
        except GatewayError as e:
            self.observer.item_failed(item, e)
            return ItemResult(
                item_id=item.id,
                title=item.title,
                outcome=ItemOutcome.FAILED,
                errors=[str(e)],
            )
        self.observer.item_created(item, new_id)

        result = ItemResult(
            item_id=item.id,
            title=item.title,
            outcome=ItemOutcome.MIGRATED,
            new_item_id=new_id,
        )
        edit = _ItemEdit(self, item, result, roadmap_id, new_id)

        for selection in (targets.owner, targets.area, targets.function):
            if selection is not None:
                edit.set_option(selection.field, selection.option.id, selection.option.name)

        for field_name, value in (
            (STATUS, item.status),
            (KIND, item.kind),
            (WORKSTREAM, item.workstream),
        ):
            if value is not None:
                edit.copy_option(targets.select_field(field_name), value)

        for date_field, date in (
            (targets.start_date, item.start_date),
            (targets.target_date, item.target_date),
        ):
            if date_field is not None and date is not None:
                edit.set_date(date_field, date)

        if not params.dry_run:
            try:
                self.gateway.archive_item(params.source_project, item.id)
            except GatewayError as e:
                self.observer.archive_failed(item, e)
                result.errors.append(f"archive: {e}")
            else:
                result.archived = True
                self.observer.item_archived(item)

        self.observer.item_migrated(item, result)
        return result


class _ItemEdit:
    """Field edits on one new roadmap item. A failed edit is recorded, not raised."""

    def __init__(
        self,
        migrator: Migrator,
        item: Item,
        result: ItemResult,
        roadmap_id: str,
        new_item_id: str,
    ) -> None:
        self.gateway = migrator.gateway
        self.observer = migrator.observer
        self.item = item
        self.result = result
        self.roadmap_id = roadmap_id
        self.new_item_id = new_item_id

    def _failed(self, field: Field, error: GatewayError) -> None:
        self.observer.field_failed(self.item, field.name, error)
        self.result.errors.append(f"{field.name}: {error}")

    def set_option(self, field: Field, option_id: str, value: str) -> None:
        try:
            self.gateway.set_single_select(self.roadmap_id, self.new_item_id, field.id, option_id)
        except GatewayError as e:
            self._failed(field, e)
        else:
            self.observer.field_set(self.item, field.name, value)

    def copy_option(self, field: Field, value: str) -> None:
        """Set ``field`` to the option named exactly like the source value."""
        option = find_option_by_name(field, value)
        if option is None:
            self.observer.value_unmapped(self.item, field.name, value)
            return
        self.set_option(field, option.id, value)

    def set_date(self, field: Field, date: str) -> None:
        try:
            self.gateway.set_date(self.roadmap_id, self.new_item_id, field.id, date)
        except GatewayError as e:
            self._failed(field, e)
        else:
            self.observer.field_set(self.item, field.name, date)


def run_migration(
    params: MigrationParams,
    gateway: GhClient,
    config: MigratorConfig,
    observer: MigrationObserver | None = None,
) -> MigrationReport:
    """Run a migration with the given collaborators.

    See Migrator.run for the errors raised.
    """
    return Migrator(gateway, config, observer=observer).run(params)
