import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from shamir_recovery.common.constants import DEFAULT_CASES_DIR, DEFAULT_CASES_PATTERN
from shamir_recovery.common.errors import CaseProcessingFailed, RecoveryError
from shamir_recovery.driver import report
from shamir_recovery.driver.loader import discover_cases, load_case
from shamir_recovery.driver.runner import CaseRunner

app = typer.Typer()


def _set_log_level(log_level: str):
    logging.getLogger().setLevel(log_level.upper())


@app.command()
def recover(
    cases_dir: Annotated[
        Path, typer.Argument(envvar="CASES_DIR")
    ] = Path(DEFAULT_CASES_DIR),
    pattern: Annotated[
        str, typer.Option(envvar="CASES_PATTERN")
    ] = DEFAULT_CASES_PATTERN,
    as_json: Annotated[bool, typer.Option("--json")] = False,
    log_level: Annotated[str, typer.Option(envvar="LOG_LEVEL")] = "INFO",
):
    """Recover the secret of every case file in a directory."""
    _set_log_level(log_level)
    try:
        paths = discover_cases(cases_dir, pattern)
    except OSError as e:
        typer.echo(f"Error processing test cases: {e}", err=True)
        raise typer.Exit(code=1)
    if not paths:
        typer.echo(f"No cases matching {pattern} in {cases_dir}", err=True)
        raise typer.Exit(code=1)

    results = asyncio.run(CaseRunner().run_all(paths))

    if as_json:
        typer.echo(json.dumps(report.as_mapping(results), indent=2))
    else:
        typer.echo(report.format_results(results))
    if not all(result.ok for result in results):
        raise typer.Exit(code=1)
    typer.echo("\nProcessing completed successfully.")


@app.command()
def secret(
    case_file: Annotated[Path, typer.Argument()],
    log_level: Annotated[str, typer.Option(envvar="LOG_LEVEL")] = "WARNING",
):
    """Recover the secret of a single case file and print it."""
    _set_log_level(log_level)
    try:
        case = load_case(case_file)
        typer.echo(CaseRunner().process_case(case))
    except CaseProcessingFailed as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    except (RecoveryError, OSError) as e:
        typer.echo(str(CaseProcessingFailed(case_file.name, e)), err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app(prog_name="shamir-recovery")
