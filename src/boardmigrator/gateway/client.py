"""GhClient - Wraps ``gh project`` commands for GitHub Projects (ProjectsV2)."""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from boardmigrator.config import DEFAULT_GH_LIMIT, DEFAULT_OWNER
from boardmigrator.gateway.exceptions import CommandError, ResponseParseError
from boardmigrator.logging import get_logger, sanitize_for_log, truncate_output
from boardmigrator.schema.models import AddedItem, Item, ItemList, Project, ProjectList, Schema

logger = get_logger("gateway")

ModelT = TypeVar("ModelT", bound=BaseModel)


class GhClient:
    """Runs GitHub CLI project commands and decodes their JSON output.

    Every call blocks until ``gh`` exits. Nothing is retried.
    """

    def __init__(
        self,
        owner: str = DEFAULT_OWNER,
        limit: int = DEFAULT_GH_LIMIT,
        executable: str = "gh",
        timeout: float | None = None,
        verbose: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            owner: Organization or user owning the projects.
            limit: Maximum number of projects, fields or items to list.
            executable: Name or path of the GitHub CLI binary.
            timeout: Optional timeout in seconds per command.
            verbose: Log every command line and its output at INFO level.
        """
        self.owner = owner
        self.limit = limit
        self.executable = executable
        self.timeout = timeout
        self.verbose = verbose

    @property
    def _list_flags(self) -> list[str]:
        return ["--owner", self.owner, "-L", str(self.limit), "--format", "json"]

    def _log(self, message: str, *args: Any) -> None:
        logger.log(logging.INFO if self.verbose else logging.DEBUG, message, *args)

    def _run_gh(self, *args: str) -> str:
        """Run a gh command.

        Args:
            *args: gh command arguments

        Returns:
            Command stdout

        Raises:
            CommandError: If the command fails, is missing or times out
        """
        cmd = [self.executable, *args]
        cmd_line = sanitize_for_log(shlex.join(cmd))
        self._log("Executing command: %s", cmd_line)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.error("Command failed (exit %d): %s: %s", e.returncode, cmd_line, stderr)
            raise CommandError(
                f"{cmd_line} exited with code {e.returncode}: {stderr}",
                command=cmd,
                stderr=stderr,
            ) from e
        except FileNotFoundError as e:
            logger.error("GitHub CLI not found: %s", self.executable)
            raise CommandError(
                f"GitHub CLI '{self.executable}' not found. Ensure 'gh' is installed and in PATH.",
                command=cmd,
            ) from e
        except subprocess.TimeoutExpired as e:
            logger.error("Command timed out after %s seconds: %s", self.timeout, cmd_line)
            raise CommandError(
                f"Command timed out after {self.timeout} seconds: {cmd_line}",
                command=cmd,
            ) from e

        self._log("Command output: %s", truncate_output(sanitize_for_log(result.stdout)))
        return result.stdout

    def _run_json(self, parse: Callable[[Any], ModelT], *args: str) -> ModelT:
        """Run a gh command and hand its decoded JSON output to ``parse``."""
        output = self._run_gh(*args)
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Invalid JSON from gh {' '.join(args[:2])}: {e}") from e
        try:
            return parse(payload)
        except ValidationError as e:
            raise ResponseParseError(
                f"Unexpected response from gh {' '.join(args[:2])}: {e}"
            ) from e

    def list_projects(self) -> list[Project]:
        """List the owner's projects.

        Raises:
            CommandError: If gh fails
            ResponseParseError: If the output can't be decoded
        """
        projects = self._run_json(ProjectList.from_payload, "project", "list", *self._list_flags)
        logger.debug("Found %d project(s) for %s", len(projects.projects), self.owner)
        return projects.projects

    def list_fields(self, project_number: int | str) -> Schema:
        """List the fields and their options of a project."""
        schema = self._run_json(
            Schema.model_validate, "project", "field-list", str(project_number), *self._list_flags
        )
        logger.debug("Project %s has %d field(s)", project_number, len(schema.fields))
        return schema

    def list_items(self, project_number: int | str) -> list[Item]:
        """List the items of a project."""
        items = self._run_json(
            ItemList.model_validate, "project", "item-list", str(project_number), *self._list_flags
        )
        logger.debug("Project %s has %d item(s)", project_number, len(items.items))
        return items.items

    def create_item(self, project_number: int | str, url: str) -> str:
        """Add the issue or pull request at ``url`` to a project.

        Returns:
            ID of the new project item
        """
        added = self._run_json(
            AddedItem.model_validate,
            "project",
            "item-add",
            str(project_number),
            "--owner",
            self.owner,
            "--format",
            "json",
            "--url",
            url,
        )
        return added.id

    def set_single_select(
        self, project_id: str, item_id: str, field_id: str, option_id: str
    ) -> None:
        """Set a single-select field of a project item."""
        self._run_gh(
            "project",
            "item-edit",
            "--project-id",
            project_id,
            "--id",
            item_id,
            "--field-id",
            field_id,
            "--single-select-option-id",
            option_id,
        )

    def set_date(self, project_id: str, item_id: str, field_id: str, date: str) -> None:
        """Set a date field of a project item."""
        self._run_gh(
            "project",
            "item-edit",
            "--project-id",
            project_id,
            "--id",
            item_id,
            "--field-id",
            field_id,
            "--date",
            date,
        )

    def archive_item(self, project_number: int | str, item_id: str) -> None:
        """Archive an item of a project."""
        self._run_gh(
            "project",
            "item-archive",
            str(project_number),
            "--id",
            item_id,
            "--owner",
            self.owner,
        )
