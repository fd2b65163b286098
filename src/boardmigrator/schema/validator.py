"""Cross-checks a source board schema against the roadmap board schema."""

from __future__ import annotations

from dataclasses import dataclass

from boardmigrator.logging import get_logger
from boardmigrator.schema.exceptions import SchemaValidationError
from boardmigrator.schema.models import BoardType, Field, Option, Schema
from boardmigrator.schema.resolver import find_field, find_option_by_name, matching_options

logger = get_logger("schema")

STATUS = "Status"
KIND = "Kind"
WORKSTREAM = "Workstream"
AREA = "Area"
FUNCTION = "Function"
START_DATE = "Start Date"
TARGET_DATE = "Target Date"

# Single-select fields whose source options must all exist on the roadmap
REQUIRED_FIELDS = (STATUS, KIND, WORKSTREAM)


@dataclass(frozen=True)
class FieldSelection:
    """A roadmap field together with the option picked for every migrated item."""

    field: Field
    option: Option


@dataclass(frozen=True)
class ResolvedTargets:
    """Roadmap fields and options resolved before any item is touched.

    Attributes:
        status: Roadmap Status field.
        kind: Roadmap Kind field.
        workstream: Roadmap Workstream field.
        owner: Team, SIG or Working Group selection.
        area: Area selection, if requested.
        function: Function selection, if requested.
        start_date: Roadmap Start Date field, if the board has one.
        target_date: Roadmap Target Date field, if the board has one.
    """

    status: Field
    kind: Field
    workstream: Field
    owner: FieldSelection
    area: FieldSelection | None = None
    function: FieldSelection | None = None
    start_date: Field | None = None
    target_date: Field | None = None

    def select_field(self, name: str) -> Field:
        """Return the roadmap field copied from the source item's value."""
        return {STATUS: self.status, KIND: self.kind, WORKSTREAM: self.workstream}[name]


def _resolve_prefix(
    roadmap: Schema,
    field_name: str,
    label: str,
    value: str,
    errors: list[str],
) -> FieldSelection | None:
    roadmap_field = find_field(roadmap, field_name)
    matches = matching_options(roadmap_field, value)
    if roadmap_field is None or not matches:
        errors.append(f"{label} '{value}' not found in roadmap")
        return None
    if len(matches) > 1:
        logger.warning(
            "%s '%s' matches several roadmap options (%s); using '%s'",
            label,
            value,
            ", ".join(o.name for o in matches),
            matches[0].name,
        )
    return FieldSelection(field=roadmap_field, option=matches[0])


def validate_schemas(
    source: Schema,
    roadmap: Schema,
    board_type: BoardType,
    name: str,
    area: str | None = None,
    function: str | None = None,
) -> ResolvedTargets:
    """Check that items of ``source`` can be migrated onto ``roadmap``.

    Every option of the source Status, Kind and Workstream fields has to exist
    under the same name on the roadmap, and the team/SIG/WG ``name`` as well as
    the optional ``area`` and ``function`` have to identify a roadmap option by
    prefix. All problems are collected before reporting.

    Args:
        source: Schema of the board being migrated.
        roadmap: Schema of the roadmap board.
        board_type: Selects the roadmap field receiving ``name``.
        name: Team, SIG or WG name, possibly abbreviated.
        area: Optional area name, possibly abbreviated.
        function: Optional function name, possibly abbreviated.

    Returns:
        The resolved roadmap targets.

    Raises:
        SchemaValidationError: With one message per problem found.
    """
    errors: list[str] = []
    required: dict[str, Field] = {}

    for field_name in REQUIRED_FIELDS:
        source_field = find_field(source, field_name)
        roadmap_field = find_field(roadmap, field_name)
        if source_field is None:
            errors.append(f"{field_name} field missing in project")
        if roadmap_field is None:
            errors.append(f"{field_name} field missing in roadmap")
        if source_field is None or roadmap_field is None:
            continue
        required[field_name] = roadmap_field
        for option in source_field.options:
            if find_option_by_name(roadmap_field, option.name) is None:
                errors.append(f"Project's {field_name} {option.name} doesn't exist in roadmap")

    owner = _resolve_prefix(roadmap, board_type.field_name, board_type.label, name, errors)
    area_selection = _resolve_prefix(roadmap, AREA, AREA, area, errors) if area else None
    function_selection = (
        _resolve_prefix(roadmap, FUNCTION, FUNCTION, function, errors) if function else None
    )

    if errors or owner is None:
        for message in errors:
            logger.error("Validation: %s", message)
        raise SchemaValidationError(errors)

    logger.info(
        "Schemas validated; %s '%s' resolved to '%s'",
        board_type.label,
        name,
        owner.option.name,
    )

    return ResolvedTargets(
        status=required[STATUS],
        kind=required[KIND],
        workstream=required[WORKSTREAM],
        owner=owner,
        area=area_selection,
        function=function_selection,
        start_date=find_field(roadmap, START_DATE),
        target_date=find_field(roadmap, TARGET_DATE),
    )
