import json
from pathlib import Path

from typer.testing import CliRunner

from matchkit.cli import app

runner = CliRunner()


def _write_checks(tmp_path: Path, matcher: str) -> Path:
    path = tmp_path / "checks.yaml"
    path.write_text(
        "checks:\n"
        "  - name: ordered\n"
        "    actual: [1, 5, 2, 3]\n"
        "    matcher:\n"
        f"      {matcher}\n"
    )
    return path


def test_check_passing_file(tmp_path):
    config = _write_checks(tmp_path, "sequence: [1, 2, 3]")
    result = runner.invoke(
        app, ["check", str(config), "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 0, result.output
    assert "PASS ordered: values equal to <[1, 2, 3]> in order" in result.output
    assert "1/1 checks passed" in result.output


def test_check_failing_file_exits_nonzero(tmp_path):
    config = _write_checks(tmp_path, "sequence: [3, 1]")
    result = runner.invoke(
        app, ["check", str(config), "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 1
    assert "FAIL ordered" in result.output
    assert "but: did not contain <1>" in result.output
    assert "0/1 checks passed" in result.output


def test_check_missing_config():
    result = runner.invoke(app, ["check", "nonexistent.yaml"])
    assert result.exit_code != 0


def test_check_invalid_config(tmp_path):
    config = _write_checks(tmp_path, "items: []")
    result = runner.invoke(
        app, ["check", str(config), "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 1
    assert not (tmp_path / "runs").exists()


def test_check_malformed_actual_file(tmp_path):
    (tmp_path / "values.json").write_text("[1, 2")
    config = tmp_path / "checks.yaml"
    config.write_text(
        "checks:\n"
        "  - name: broken\n"
        "    actual_file: values.json\n"
        "    matcher:\n"
        "      item: 1\n"
    )
    result = runner.invoke(
        app, ["check", str(config), "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_check_malformed_config(tmp_path):
    config = tmp_path / "checks.yaml"
    config.write_text("checks: [\n")
    result = runner.invoke(app, ["check", str(config)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_check_unknown_filter(tmp_path):
    config = _write_checks(tmp_path, "item: 5")
    result = runner.invoke(
        app,
        ["check", str(config), "--check", "other", "--output-dir", str(tmp_path / "runs")],
    )
    assert result.exit_code == 1


def test_check_writes_run_directory(tmp_path):
    config = _write_checks(tmp_path, "item: 5")
    result = runner.invoke(
        app, ["check", str(config), "--output-dir", str(tmp_path / "runs")]
    )
    assert result.exit_code == 0, result.output
    run_dirs = list((tmp_path / "runs").iterdir())
    assert len(run_dirs) == 1
    results = json.loads((run_dirs[0] / "results.json").read_text())
    assert results[0]["passed"] is True


def test_init_creates_example_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    assert (tmp_path / "matchkit" / "checks.yaml").exists()
    assert (tmp_path / "matchkit" / "data" / "tags.json").exists()


def test_init_with_custom_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["init", "--dir", "my-checks"])
    assert result.exit_code == 0
    assert (tmp_path / "my-checks" / "checks.yaml").exists()


def test_init_skips_existing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "matchkit").mkdir()
    (tmp_path / "matchkit" / "checks.yaml").write_text("keep me")
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    assert "skipping" in result.output
    assert (tmp_path / "matchkit" / "checks.yaml").read_text() == "keep me"


def test_init_example_passes(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner.invoke(app, ["init"])
    result = runner.invoke(app, ["check", "matchkit/checks.yaml"])
    assert result.exit_code == 0, result.output
    assert "3/3 checks passed" in result.output


def test_schema_generate_command_writes_files(tmp_path):
    out = tmp_path / "schema.json"
    doc = tmp_path / "schema.md"
    result = runner.invoke(
        app, ["schema", "generate", "--out", str(out), "--doc", str(doc)]
    )
    assert result.exit_code == 0
    assert out.exists()
    assert doc.exists()


def test_schema_generate_defaults_to_init_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["schema", "generate"])
    assert result.exit_code == 0
    assert (tmp_path / "matchkit" / "schemas" / "matchkit.schema.json").exists()
    assert (tmp_path / "matchkit" / "docs" / "schema.md").exists()
