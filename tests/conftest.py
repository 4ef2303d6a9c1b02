"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def nested_document():
    """Nested document mixing objects, arrays and scalars."""
    return {
        "users": [
            {"name": "alice", "roles": ["admin", "dev"]},
            {"name": "bob", "roles": []}
        ],
        "settings": {
            "theme": "dark",
            "notifications": True,
            "limits": {"daily": 10, "burst": None}
        },
        "empty": {}
    }


@pytest.fixture
def nested_yaml():
    """YAML rendition of a small nested document."""
    return (
        "service:\n"
        "  name: api\n"
        "  ports:\n"
        "    - 80\n"
        "    - 443\n"
        "  tls:\n"
        "    enabled: true\n"
    )
