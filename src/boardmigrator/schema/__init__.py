"""Schema - board fields, options and the checks run before migrating."""

from boardmigrator.schema.exceptions import SchemaError, SchemaValidationError
from boardmigrator.schema.models import (
    AddedItem,
    BoardType,
    Field,
    Item,
    ItemContent,
    ItemList,
    Option,
    Project,
    ProjectList,
    Schema,
)
from boardmigrator.schema.resolver import (
    find_field,
    find_option_by_name,
    find_option_by_prefix,
    matching_options,
)
from boardmigrator.schema.validator import FieldSelection, ResolvedTargets, validate_schemas

__all__ = [
    "AddedItem",
    "BoardType",
    "Field",
    "FieldSelection",
    "Item",
    "ItemContent",
    "ItemList",
    "Option",
    "Project",
    "ProjectList",
    "ResolvedTargets",
    "Schema",
    "SchemaError",
    "SchemaValidationError",
    "find_field",
    "find_option_by_name",
    "find_option_by_prefix",
    "matching_options",
    "validate_schemas",
]
