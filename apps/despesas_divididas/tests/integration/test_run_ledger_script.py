from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from despesas_divididas.application.use_cases.run_ledger_script import (
    LedgerScriptRequest,
    RunLedgerScriptUseCase,
)
from despesas_divididas.cli import app
from despesas_divididas.domain.errors import SplitMismatchError


def _trip_script_path() -> Path:
    return Path(__file__).resolve().parent / "fixtures" / "trip_script.json"


def _trip_payload() -> dict[str, object]:
    return json.loads(_trip_script_path().read_text(encoding="utf-8"))


def test_use_case_replays_trip_script() -> None:
    request = LedgerScriptRequest.model_validate(_trip_payload())

    report = RunLedgerScriptUseCase().execute(request)

    assert (report.users, report.groups, report.expenses, report.settlements) == (
        3,
        1,
        2,
        1,
    )
    assert [line.message for line in report.balances] == [
        "Bob owes 10.00 to Alice.",
        "Charlie owes 100.00 to Alice.",
        "Charlie owes 40.00 to Bob.",
    ]


def test_use_case_surfaces_domain_errors() -> None:
    payload = _trip_payload()
    operations = payload["operations"]
    assert isinstance(operations, list)
    operations[2]["splits"][2]["amount"] = "39.99"
    request = LedgerScriptRequest.model_validate(payload)

    with pytest.raises(SplitMismatchError):
        RunLedgerScriptUseCase().execute(request)


def test_cli_healthcheck() -> None:
    result = CliRunner().invoke(app, ["healthcheck"])

    assert result.exit_code == 0
    assert "despesas-divididas is ready" in result.output


def test_cli_run_script_prints_balances() -> None:
    result = CliRunner().invoke(app, ["run-script", "--input", str(_trip_script_path())])

    lines = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert result.exit_code == 0
    assert lines[-5:] == [
        "Users: 3 | Groups: 1 | Expenses: 2 | Settlements: 1",
        "Balances:",
        "- Bob owes 10.00 to Alice.",
        "- Charlie owes 100.00 to Alice.",
        "- Charlie owes 40.00 to Bob.",
    ]


def test_cli_run_script_reports_settled_ledger(tmp_path: Path) -> None:
    script = {
        "users": [{"name": "Alice"}, {"name": "Bob"}],
        "operations": [
            {
                "kind": "expense",
                "payer_id": 1,
                "amount": "20.00",
                "participants": [1, 2],
            },
            {"kind": "settlement", "payer_id": 2, "payee_id": 1, "amount": "10.00"},
        ],
    }
    input_file = tmp_path / "script.json"
    input_file.write_text(json.dumps(script), encoding="utf-8")

    result = CliRunner().invoke(app, ["run-script", "--input", str(input_file)])

    assert result.exit_code == 0
    assert "No balances." in result.output


def test_cli_run_script_fails_on_invalid_script(tmp_path: Path) -> None:
    input_file = tmp_path / "script.json"
    input_file.write_text(
        json.dumps({"users": [], "operations": [{"kind": "refund"}]}),
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, ["run-script", "--input", str(input_file)])

    assert result.exit_code == 1


def test_cli_run_script_fails_on_domain_error(tmp_path: Path) -> None:
    script = {
        "users": [{"name": "Alice"}],
        "operations": [
            {"kind": "settlement", "payer_id": 1, "payee_id": 2, "amount": "1.00"}
        ],
    }
    input_file = tmp_path / "script.json"
    input_file.write_text(json.dumps(script), encoding="utf-8")

    result = CliRunner().invoke(app, ["run-script", "--input", str(input_file)])

    assert result.exit_code == 1


def test_cli_run_script_fails_on_malformed_json(tmp_path: Path) -> None:
    input_file = tmp_path / "script.json"
    input_file.write_text('{"users": [', encoding="utf-8")

    result = CliRunner().invoke(app, ["run-script", "--input", str(input_file)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, json.JSONDecodeError)
    assert "Invalid script: not JSON" in result.output
