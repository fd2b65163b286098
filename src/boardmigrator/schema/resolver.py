"""Field and option lookup within a board schema."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boardmigrator.schema.models import Field, Option, Schema


def find_field(schema: Schema, name: str) -> Field | None:
    """Return the first field named exactly ``name``."""
    for f in schema.fields:
        if f.name == name:
            return f
    return None


def find_option_by_name(field: Field | None, name: str) -> Option | None:
    """Return the first option of ``field`` named exactly ``name``."""
    if field is None:
        return None
    for option in field.options:
        if option.name == name:
            return option
    return None


def _is_prefix(prefix: str, name: str) -> bool:
    if not prefix or not name.startswith(prefix):
        return False
    if len(name) == len(prefix):
        return True
    # The prefix has to end on a word boundary: "Rocket" -> "Rocket Team", not "Rocketry".
    return not name[len(prefix)].isalnum() or not prefix[-1].isalnum()


def matching_options(field: Field | None, prefix: str) -> list[Option]:
    """Return every option of ``field`` identified by ``prefix``, in option order."""
    if field is None:
        return []
    return [option for option in field.options if _is_prefix(prefix, option.name)]


def find_option_by_prefix(field: Field | None, prefix: str) -> Option | None:
    """Return the first option of ``field`` whose name starts with ``prefix``.

    Used for user supplied team, SIG, working group, area and function names,
    which are often abbreviations of the full option label.
    """
    matches = matching_options(field, prefix)
    return matches[0] if matches else None
