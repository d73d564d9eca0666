from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="pointwise", help="Check sequences element by element")

EXAMPLE_CONFIG = """\
checks:
  - name: bounded
    pointwise: lt
    actual: [1, 2]
    expected: [2, 3]
  - name: exact
    pointwise: eq
    actual: [1, 2, 3]
    expected: [1, 2, 3]
    weight: 2.0
"""


@app.command()
def run(
    config: str = typer.Argument(help="Path to checks YAML config"),
    check: str | None = typer.Option(
        None, "--check", "-c", help="Comma-separated names of checks to run"
    ),
    output_dir: str = typer.Option("runs", help="Output directory for run results"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Evaluate the checks in a config file."""
    from pydantic import ValidationError

    from pointwise.config import load_config
    from pointwise.reporting.junit import count_failures
    from pointwise.runner import Runner

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        suite = load_config(config_path)
    except ValidationError as e:
        typer.echo(f"Error: invalid config {config}:\n{e}", err=True)
        raise typer.Exit(1)

    runner = Runner(
        config=suite,
        output_dir=Path(output_dir),
        check_filter=check,
        verbose=verbose,
    )

    try:
        run_dir = runner.execute()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for result in runner.results:
        status = "PASS" if result.passed else "FAIL"
        typer.echo(f"{status} {result.name}")
        if not result.passed:
            for line in result.message.splitlines():
                typer.echo(f"    {line}")

    typer.echo(f"Run complete: {run_dir}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    # Exit with non-zero if any check failed
    if count_failures(run_dir / "junit.xml") > 0:
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(
        "pointwise", "--dir", help="Directory to initialize the checks project in"
    ),
):
    """Initialize a new project with an example checks config."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "checks.yaml"
    if example.exists():
        typer.echo(f"checks.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_CONFIG)
    typer.echo(f"Initialized checks project in {dir}:")
    typer.echo("  checks.yaml      - example checks config")


if __name__ == "__main__":
    app()
