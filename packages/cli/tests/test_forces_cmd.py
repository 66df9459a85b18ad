"""Tests for the forces command."""

import json

from pinlock_cli.main import app


def invoke_json(runner, project, *args):
    result = runner.invoke(app, ["-C", str(project), *args, "forces", "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_forces_from_lock(runner, project, canonical_lock):
    payload = invoke_json(runner, project)
    assert payload["mode"] == "apply_lock"
    assert payload["forces"] == ["com.example:foo:1.0.0"]


def test_forces_with_inline_override(runner, project, canonical_lock):
    payload = invoke_json(runner, project, "--override", "com.example:bar:3.0.0")
    assert payload["forces"] == ["com.example:foo:1.0.0", "com.example:bar:3.0.0"]


def test_forces_without_lock(runner, project):
    payload = invoke_json(runner, project, "--override", "com.example:foo:1.2.0")
    assert payload["mode"] == "apply_overrides_only"
    assert payload["lock"] is None
    assert payload["forces"] == ["com.example:foo:1.2.0"]


def test_forces_ignored(runner, project, canonical_lock):
    payload = invoke_json(runner, project, "--ignore", "--override", "not-valid")
    assert payload == {"mode": "ignore", "lock": None, "forces": []}


def test_forces_written_per_configuration(runner, project, canonical_lock):
    result = runner.invoke(app, ["-C", str(project), "-c", "compile", "-c", "runtime", "forces"])
    assert result.exit_code == 0, result.output
    for name in ("compile", "runtime"):
        assert (project / "build" / "forces" / f"{name}.txt").read_text() == "com.example:foo:1.0.0\n"


def test_no_write(runner, project, canonical_lock):
    result = runner.invoke(app, ["-C", str(project), "forces", "--no-write"])
    assert result.exit_code == 0
    assert "com.example:foo" in result.stdout
    assert not (project / "build" / "forces").exists()


def test_malformed_lock_exits_with_error(runner, project):
    (project / "dependencies.lock").write_text("{ nope")
    result = runner.invoke(app, ["-C", str(project), "forces"])
    assert result.exit_code == 1
    assert "MALFORMED_LOCK" in result.output


def test_invalid_override_exits_with_error(runner, project):
    result = runner.invoke(app, ["-C", str(project), "--override", "com.example:foo", "forces"])
    assert result.exit_code == 1
    assert "INVALID_OVERRIDE" in result.output
