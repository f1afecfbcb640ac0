"""
Pytest configuration and fixtures for rbaclite tests.
"""

import json
from pathlib import Path
from typing import Any, Dict
from uuid import UUID, uuid4

import pytest

from rbaclite.client import RbacStore
from rbaclite.config import RbacLiteConfig


@pytest.fixture
def store():
    """Create an empty store."""
    return RbacStore()


@pytest.fixture
def rbaclite_config():
    """Create a test RbacLiteConfig."""
    return RbacLiteConfig(debug=True)


@pytest.fixture
def sample_role_id() -> UUID:
    """Generate a sample role UUID."""
    return uuid4()


@pytest.fixture
def sample_permission_id() -> UUID:
    """Generate a sample permission UUID."""
    return uuid4()


@pytest.fixture
def sample_seed_data() -> Dict[str, Any]:
    """Create sample seed file data."""
    return {
        "roles": [
            {"system_name": "admin", "display_name": "Administrator", "description": "Full access"},
            {"system_name": "viewer", "display_name": "Viewer"},
        ],
        "permissions": [
            {"system_name": "posts.read", "display_name": "Read posts"},
            {"system_name": "posts.write", "display_name": "Write posts"},
        ],
        "grants": [
            {"role": "admin", "permission": "posts.read"},
            {"role": "admin", "permission": "posts.write"},
            {"role": "viewer", "permission": "posts.read"},
        ],
    }


@pytest.fixture
def seed_path(tmp_path: Path, sample_seed_data) -> Path:
    """Write the sample seed data to a temporary file."""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(sample_seed_data), encoding="utf-8")
    return path

