from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="matchkit", help="Evaluate matcher checks against values")
schema_app = typer.Typer(name="schema", help="Generate schema tooling")
app.add_typer(schema_app, name="schema")


@app.command()
def check(
    config: str = typer.Argument(help="Path to check file YAML"),
    only: str | None = typer.Option(None, "--check", help="Run only this check"),
    output_dir: str = typer.Option("runs", help="Output directory for run results"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Evaluate every check in a check file."""
    import yaml
    from pydantic import ValidationError

    from matchkit.config import load_config
    from matchkit.reporting.junit import summarize
    from matchkit.runner import Runner

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        check_config = load_config(config_path)
    except (ValidationError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid check file {config}:\n{e}", err=True)
        raise typer.Exit(1)

    runner = Runner(
        config=check_config,
        output_dir=Path(output_dir),
        check_filter=only,
        verbose=verbose,
        suite_name=config_path.stem,
    )

    try:
        run_dir = runner.execute()
    except (ValueError, OSError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for result in runner.results:
        status = "PASS" if result.passed else "FAIL"
        typer.echo(f"{status} {result.name}: {result.description}")
        if not result.passed:
            typer.echo(f"     but: {result.message}")

    total, failures = summarize(run_dir / "junit.xml")
    typer.echo(f"{total - failures}/{total} checks passed")
    typer.echo(f"Run saved: {run_dir}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    if failures:
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(
        "matchkit", "--dir", help="Directory to initialize check project in"
    ),
):
    """Initialize a new check project with an example check file."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "checks.yaml"
    if example.exists():
        typer.echo(f"checks.yaml already exists in {dir}, skipping.")
        return

    example.write_text("""\
checks:
  - name: steps-in-order
    actual: [checkout, build, test, deploy]
    matcher:
      sequence: [checkout, test, deploy]

  - name: required-tags
    actual_file: data/tags.json
    matcher:
      items: [release, stable]

  - name: all-small
    actual: [1, 2, 2, 1]
    matcher:
      every_item:
        one_of: [1, 2]
""")

    data = project_dir / "data"
    data.mkdir(parents=True, exist_ok=True)
    (data / "tags.json").write_text('["stable", "latest", "release"]\n')

    typer.echo(f"Initialized check project in {dir}:")
    typer.echo("  checks.yaml      - example check file")
    typer.echo("  data/tags.json   - example value file")


@schema_app.command("generate")
def schema_generate(
    dir: str = typer.Option(
        "matchkit", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/matchkit.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/schema.md)"
    ),
):
    """Generate JSON Schema and docs for the check file format."""
    from matchkit.schema import write_json_schema, write_schema_doc

    project_dir = Path(dir)
    out_path = (
        Path(out)
        if out is not None
        else project_dir / "schemas" / "matchkit.schema.json"
    )
    doc_path = Path(doc) if doc is not None else project_dir / "docs" / "schema.md"
    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")
