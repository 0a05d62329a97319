"""Test configuration and fixtures."""

import json

import pytest

CONFIG_ENV_VARS = [
    "SCHEMA_AUTOFIX_INDENT",
    "SCHEMA_AUTOFIX_ENSURE_ASCII",
    "SCHEMA_AUTOFIX_LOG_LEVEL",
    "SCHEMA_AUTOFIX_BLOCK_KEYS",
]


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch):
    """Keep configuration variables, including ones loaded from .env files, out of other tests."""
    for name in CONFIG_ENV_VARS:
        # setenv first so monkeypatch restores the original state on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def make_field(unique_id, order=1, input_type="text", value_type="manual"):
    return {
        "unique_id": unique_id,
        "display_attributes": {
            "display_name": unique_id.replace("_", " ").title(),
            "input_type": input_type,
            "order": order,
            "value": {"type": value_type},
        },
    }


@pytest.fixture
def sample_schema():
    """Two valid schema fields."""
    return [
        make_field("tenant_name", order=1),
        make_field("move_in_date", order=2),
    ]


@pytest.fixture
def sample_schema_text(sample_schema):
    return json.dumps(sample_schema, indent=2)


@pytest.fixture
def field_factory():
    """Build a single valid schema field."""
    return make_field
