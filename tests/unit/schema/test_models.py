"""Unit tests for schema models."""

import pytest
from pydantic import ValidationError

from boardmigrator.schema import BoardType, Item, ProjectList, Schema


@pytest.mark.unit
class TestProjectList:
    """Tests for ProjectList parsing and lookup."""

    def test_accepts_wrapped_listing(self) -> None:
        projects = ProjectList.from_payload(
            {"projects": [{"id": "PVT_1", "number": 301, "title": "Rocket"}], "totalCount": 1}
        )

        assert projects.find("301").id == "PVT_1"

    def test_accepts_bare_listing(self) -> None:
        projects = ProjectList.from_payload([{"id": "PVT_1", "number": 301}])

        assert projects.find(301).id == "PVT_1"

    def test_find_missing_returns_none(self) -> None:
        projects = ProjectList.from_payload([{"id": "PVT_1", "number": 301}])

        assert projects.find("30") is None

    def test_rejects_invalid_shape(self) -> None:
        with pytest.raises(ValidationError):
            ProjectList.from_payload("not a listing")


@pytest.mark.unit
class TestSchema:
    """Tests for field-list parsing."""

    def test_parses_fields_and_options(self, roadmap_schema: Schema) -> None:
        team = roadmap_schema.fields[3]

        assert team.name == "Team"
        assert [o.name for o in team.options] == ["Rocketry", "Rocket Team"]

    def test_fields_without_options(self, source_schema: Schema) -> None:
        """Text and date fields have no options."""
        assert source_schema.fields[0].name == "Title"
        assert source_schema.fields[0].options == []

    def test_null_options(self) -> None:
        schema = Schema.model_validate(
            {"fields": [{"id": "f", "name": "Start Date", "options": None}]}
        )

        assert schema.fields[0].options == []

    def test_field_order_kept(self, source_schema: Schema) -> None:
        assert [f.name for f in source_schema.fields] == ["Title", "Status", "Kind", "Workstream"]


@pytest.mark.unit
class TestItem:
    """Tests for item-list parsing."""

    def test_parses_item(self) -> None:
        item = Item.model_validate(
            {
                "id": "PVTI_1",
                "title": "Test Issue",
                "status": "Backlog",
                "kind": "Feature",
                "workstream": "Engineering",
                "start Date": "2023-10-01",
                "target Date": "2023-11-01",
                "content": {"type": "Issue", "title": "Test Issue", "url": "https://x/1"},
                "repository": "https://github.com/giantswarm/roadmap",
            }
        )

        assert item.status == "Backlog"
        assert item.kind == "Feature"
        assert item.workstream == "Engineering"
        assert item.start_date == "2023-10-01"
        assert item.target_date == "2023-11-01"
        assert item.content.url == "https://x/1"
        assert not item.is_draft

    def test_missing_values_are_none(self) -> None:
        item = Item.model_validate({"id": "PVTI_1", "title": "Bare"})

        assert item.status is None
        assert item.kind is None
        assert item.workstream is None
        assert item.start_date is None
        assert item.content.type == ""

    def test_non_string_select_values_are_none(self) -> None:
        item = Item.model_validate(
            {"id": "PVTI_1", "status": {"name": "Backlog"}, "kind": 3, "workstream": ""}
        )

        assert item.status is None
        assert item.kind is None
        assert item.workstream is None

    def test_null_literal_dates_are_none(self) -> None:
        item = Item.model_validate({"id": "PVTI_1", "start Date": "null", "target Date": ""})

        assert item.start_date is None
        assert item.target_date is None

    def test_populate_by_field_name(self) -> None:
        item = Item(id="PVTI_1", start_date="2024-01-01")

        assert item.start_date == "2024-01-01"

    def test_draft(self) -> None:
        item = Item.model_validate(
            {"id": "PVTI_1", "content": {"type": "DraftIssue", "title": "Idea"}}
        )

        assert item.is_draft


@pytest.mark.unit
class TestBoardType:
    """Tests for BoardType."""

    @pytest.mark.parametrize(
        "value,field_name,label",
        [
            ("team", "Team", "Team"),
            ("sig", "SIG", "SIG"),
            ("wg", "Working Group", "WG"),
        ],
    )
    def test_field_and_label(self, value: str, field_name: str, label: str) -> None:
        board_type = BoardType.from_value(value)

        assert board_type.field_name == field_name
        assert board_type.label == label

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError, match="team, sig or wg"):
            BoardType.from_value("squad")
