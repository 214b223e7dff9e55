"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_config_json():
    """Sample configuration document for testing."""
    return '''
    {
        "server": {
            "host": "localhost",
            "port": 8080,
            "tls": {
                "enabled": false
            }
        },
        "workers": 4,
        "max_upload": 9999999999,
        "ratio": 0.75,
        "tags": ["primary", "eu-west"],
        "routes": [
            {"path": "/", "handler": "index"},
            {"path": "/health", "handler": "health"}
        ],
        "comment": null
    }
    '''


@pytest.fixture
def sample_tree():
    """Sample generic configuration tree for testing."""
    return {
        "name": "service",
        "enabled": True,
        "port": 8080,
        "max_upload": 9999999999,
        "ratio": 0.5,
        "tags": ["a", "b"],
        "limits": {
            "cpu": 2,
            "memory": {"soft": 512, "hard": 1024}
        },
        "matrix": [[1, 2], [3, 4]],
        "routes": [{"path": "/", "weight": 1.5}]
    }
