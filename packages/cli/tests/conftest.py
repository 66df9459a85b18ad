"""Pytest configuration and fixtures for CLI tests."""

import json
import logging

import pytest
from typer.testing import CliRunner

from pinlock_common.logger import ROOT_LOGGER_NAME


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers bound to a runner's captured stderr once the test is done."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def project(tmp_path):
    """Project with a dependency report for the default configuration."""
    root = tmp_path / "project"
    report = root / "build" / "dependency-report.json"
    report.parent.mkdir(parents=True)
    report.write_text(
        json.dumps(
            {
                "configurations": {
                    "testRuntime": [
                        {"coordinate": "com.example:foo", "requested": "1.+", "resolved": "1.0.0"},
                        {"coordinate": "com.example:internal", "project": True},
                    ]
                }
            }
        )
    )
    return root


@pytest.fixture
def canonical_lock(project):
    path = project / "dependencies.lock"
    path.write_text(
        json.dumps({"com.example:foo": {"locked": "1.0.0"}, "com.example:internal": {}})
    )
    return path
