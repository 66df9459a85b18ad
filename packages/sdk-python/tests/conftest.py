"""Pytest configuration and fixtures for SDK tests."""

import io
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from pinlock_common import configure_logging
from pinlock_common.logger import ROOT_LOGGER_NAME
from pinlock_schema import ForceDirective, LockSettings, lock_from_data


class RecordingResolver:
    """Resolver returning a fixed lock and recording each call."""

    def __init__(self, lock_data: Optional[Dict] = None, error: Optional[Exception] = None):
        self.lock_data = lock_data or {}
        self.error = error
        self.calls: List[Dict] = []

    def resolve(self, configuration_names, include_transitives, forces):
        self.calls.append(
            {
                "configurations": set(configuration_names),
                "include_transitives": include_transitives,
                "forces": list(forces),
            }
        )
        if self.error is not None:
            raise self.error
        forced = {f.coordinate: f.version for f in forces}
        data = {}
        for coordinate, entry in self.lock_data.items():
            entry = dict(entry)
            if coordinate in forced and "locked" in entry:
                entry["locked"] = forced[coordinate]
            data[coordinate] = entry
        return lock_from_data(data)


class RecordingStrategy:
    """Resolution strategy recording the forces it receives."""

    def __init__(self):
        self.applied: List[List[ForceDirective]] = []

    def apply_forces(self, forces):
        self.applied.append(list(forces))


class FakeScm:
    """SCM collaborator that succeeds or fails on demand."""

    def __init__(self, succeed: bool = True, last_error: Optional[str] = None):
        self.succeed = succeed
        self.last_error = last_error
        self.calls: List[Dict] = []

    def commit(self, paths, message, tag, retries):
        self.calls.append({"paths": list(paths), "message": message, "tag": tag, "retries": retries})
        return self.succeed


def _write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def write_json():
    """Write JSON data to a path, creating parents."""
    return _write_json


@pytest.fixture
def project(tmp_path):
    """Empty root project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def settings(project):
    return LockSettings(project_dir=project)


@pytest.fixture
def scenario_lock_data():
    """Lock with one external dependency and one internal project reference."""
    return {
        "com.example:foo": {"locked": "1.0.0"},
        "com.example:internal": {},
    }


@pytest.fixture
def canonical_lock(project, scenario_lock_data):
    return _write_json(project / "dependencies.lock", scenario_lock_data)


@pytest.fixture
def recording_strategy():
    return RecordingStrategy()


@pytest.fixture
def fake_scm():
    return FakeScm()


@pytest.fixture
def make_resolver():
    """Factory for RecordingResolver instances."""
    return RecordingResolver


@pytest.fixture
def make_scm():
    """Factory for FakeScm instances."""
    return FakeScm


@pytest.fixture
def log_stream():
    """Route the pinlock logger hierarchy to a buffer at debug level."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    yield stream
    root.handlers = handlers
    root.setLevel(level)
