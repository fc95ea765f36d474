from __future__ import annotations

from pathlib import Path

import typer

from xctest.testing import XCTest, XCTestSuite

app = typer.Typer(name="xctest", help="Run XCTest-style test suites")


def _load(config: str):
    from xctest.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)
    try:
        return load_config(config_path)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def run(
    config: str = typer.Argument(help="Path to run YAML config"),
    output_dir: str | None = typer.Option(
        None, help="Output directory for run results (overrides the config)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Run the configured suites and write junit.xml."""
    from xctest.runner import Runner

    run_config = _load(config)
    runner = Runner(
        config=run_config,
        output_dir=Path(output_dir) if output_dir else None,
        verbose=verbose,
    )

    try:
        run_dir = runner.execute()
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = runner.result
    typer.echo(
        f"Executed {result.execution_count} test(s), with "
        f"{result.total_failure_count} failure(s) "
        f"({result.unexpected_exception_count} unexpected) "
        f"in {result.total_duration:.3f} seconds"
    )
    typer.echo(f"Run complete: {run_dir}")
    typer.echo(f"JUnit report: {run_dir / 'junit.xml'}")
    if not verbose:
        typer.echo(f"Debug log: {run_dir / 'debug.log'}")

    if not result.has_succeeded:
        raise typer.Exit(1)


def _render_tree(test: XCTest, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(test, XCTestSuite):
        lines = [f"{indent}{test.name} ({test.test_case_count})"]
        for child in test.tests:
            lines.extend(_render_tree(child, depth + 1))
        return lines
    return [f"{indent}{test.name}"]


@app.command(name="list")
def list_tests(
    config: str = typer.Argument(help="Path to run YAML config"),
):
    """Print the suite tree with test case counts, without running anything."""
    from xctest.loader import build_suite

    run_config = _load(config)
    try:
        suite = build_suite(run_config)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for line in _render_tree(suite):
        typer.echo(line)
