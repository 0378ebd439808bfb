"""CLI bootstrap for despesas-divididas."""

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from despesas_divididas.application.use_cases.run_ledger_script import (
    LedgerScriptRequest,
    RunLedgerScriptUseCase,
)
from despesas_divididas.core.logging import configure_logging
from despesas_divididas.core.settings import get_settings
from despesas_divididas.domain.errors import DomainError

app = typer.Typer(help="CLI for shared-expense ledgers.")
INPUT_FILE_OPTION = typer.Option(..., exists=True, dir_okay=False)


@app.callback()
def setup() -> None:
    """Configure logging before any command runs."""
    configure_logging(get_settings())


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("despesas-divididas is ready")


@app.command("run-script")
def run_script(input: Path = INPUT_FILE_OPTION) -> None:
    """Replay a JSON ledger script and print the open balances."""
    try:
        payload = json.loads(input.read_text(encoding="utf-8"))
        request = LedgerScriptRequest.model_validate(payload)
        report = RunLedgerScriptUseCase().execute(request)
    except ValidationError as error:
        typer.echo(f"Invalid script: {error.error_count()} error(s)", err=True)
        for issue in error.errors():
            location = ".".join(str(part) for part in issue["loc"])
            typer.echo(f"- {location}: {issue['msg']}", err=True)
        raise typer.Exit(code=1) from error
    except json.JSONDecodeError as error:
        typer.echo(
            f"Invalid script: not JSON (line {error.lineno}, column {error.colno})",
            err=True,
        )
        raise typer.Exit(code=1) from error
    except DomainError as error:
        typer.echo(f"{error.code}: {error.message}", err=True)
        raise typer.Exit(code=1) from error

    typer.echo(
        f"Users: {report.users} | "
        f"Groups: {report.groups} | "
        f"Expenses: {report.expenses} | "
        f"Settlements: {report.settlements}"
    )
    if not report.balances:
        typer.echo("No balances.")
        return
    typer.echo("Balances:")
    for line in report.balances:
        typer.echo(f"- {line.message}")


def main() -> None:
    """Run the despesas-divididas CLI application."""
    app()


if __name__ == "__main__":
    main()
