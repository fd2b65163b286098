"""Shared pytest fixtures and configuration."""

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from boardmigrator.config import MigratorConfig
from boardmigrator.logging import ROOT_LOGGER
from boardmigrator.schema import Schema


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def source_fields_payload() -> dict[str, Any]:
    """field-list output of source project 301."""
    return {
        "fields": [
            {"id": "f-title", "name": "Title", "type": "ProjectV2Field"},
            {
                "id": "f-status",
                "name": "Status",
                "type": "ProjectV2SingleSelectField",
                "options": [
                    {"id": "s-backlog", "name": "Backlog"},
                    {"id": "s-later", "name": "Later 🌃"},
                ],
            },
            {
                "id": "f-kind",
                "name": "Kind",
                "options": [{"id": "k-feature", "name": "Feature"}],
            },
            {
                "id": "f-workstream",
                "name": "Workstream",
                "options": [{"id": "w-eng", "name": "Engineering"}],
            },
        ],
        "totalCount": 4,
    }


@pytest.fixture
def roadmap_fields_payload() -> dict[str, Any]:
    """field-list output of roadmap project 273."""
    return {
        "fields": [
            {
                "id": "rf-status",
                "name": "Status",
                "options": [
                    {"id": "rs-backlog", "name": "Backlog"},
                    {"id": "rs-later", "name": "Later 🌃"},
                ],
            },
            {
                "id": "rf-kind",
                "name": "Kind",
                "options": [{"id": "rk-feature", "name": "Feature"}],
            },
            {
                "id": "rf-workstream",
                "name": "Workstream",
                "options": [{"id": "rw-eng", "name": "Engineering"}],
            },
            {
                "id": "rf-team",
                "name": "Team",
                "options": [
                    {"id": "team-rocketry", "name": "Rocketry"},
                    {"id": "team-rocket", "name": "Rocket Team"},
                ],
            },
            {
                "id": "rf-sig",
                "name": "SIG",
                "options": [{"id": "sig-rocket", "name": "Rocket SIG"}],
            },
            {
                "id": "rf-wg",
                "name": "Working Group",
                "options": [{"id": "wg-rocket", "name": "Rocket WG"}],
            },
            {"id": "rf-area", "name": "Area", "options": [{"id": "area-kaas", "name": "KaaS"}]},
            {
                "id": "rf-function",
                "name": "Function",
                "options": [
                    {"id": "func-strat", "name": "Product Strategy"},
                    {"id": "func-design", "name": "Product Design"},
                ],
            },
            {"id": "rf-start", "name": "Start Date", "type": "ProjectV2Field"},
            {"id": "rf-target", "name": "Target Date", "type": "ProjectV2Field"},
        ]
    }


@pytest.fixture
def source_schema(source_fields_payload: dict[str, Any]) -> Schema:
    """Schema of source project 301."""
    return Schema.model_validate(source_fields_payload)


@pytest.fixture
def roadmap_schema(roadmap_fields_payload: dict[str, Any]) -> Schema:
    """Schema of roadmap project 273."""
    return Schema.model_validate(roadmap_fields_payload)


@pytest.fixture
def config() -> MigratorConfig:
    """Default configuration (roadmap 273 with a known project ID)."""
    return MigratorConfig()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers and level installed by setup_logging during a test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
