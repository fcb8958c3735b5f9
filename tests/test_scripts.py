"""Tests for the command-line scripts."""

import importlib
import json
from pathlib import Path
from types import ModuleType
from unittest.mock import MagicMock, patch

import psycopg
import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"

LEASE_ARGS = [
    "--tenant-id",
    "tenant-test-001",
    "--property-id",
    "prop-test-001",
    "--rent",
    "5000",
    "--start",
    "2025-08-01",
    "--end",
    "2025-10-31",
    "--due-day",
    "5",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment without configuration overrides."""
    for name in ("SEED", "OUTPUT_DIR", "PRETTY_JSON", "CURRENCY_SYMBOL", "SKIP_EXISTING", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
def generate_payments(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> ModuleType:
    monkeypatch.syspath_prepend(str(SCRIPTS_DIR))
    return importlib.import_module("generate_payments")


@pytest.fixture
def generate_sample_data(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> ModuleType:
    monkeypatch.syspath_prepend(str(SCRIPTS_DIR))
    return importlib.import_module("generate_sample_data")


class TestGeneratePaymentsScript:
    """Tests for scripts/generate_payments.py."""

    def test_dry_run(
        self, generate_payments: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        code = generate_payments.main([*LEASE_ARGS, "--dry-run", "--output-dir", str(tmp_path)])
        out = capsys.readouterr().out

        assert code == 0
        assert "1. Aug 5, 2025 - RENT: ₱5,000" in out
        assert "3. Oct 5, 2025 - RENT: ₱5,000" in out
        assert "Total Months: 3" in out
        assert "Grand Total: ₱15,000" in out
        assert "Generation Summary" not in out
        assert not (tmp_path / "payments.json").exists()

    def test_invalid_lease_exit_code(
        self, generate_payments: ModuleType, capsys: pytest.CaptureFixture
    ) -> None:
        args = [*LEASE_ARGS, "--dry-run"]
        args[args.index("--rent") + 1] = "0"

        code = generate_payments.main(args)
        err = capsys.readouterr().err

        assert code == 1
        assert "error: Monthly rent must be greater than 0" in err

    def test_generate_to_json(
        self, generate_payments: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        code = generate_payments.main(
            [*LEASE_ARGS, "--utility-amount", "500", "--created-by", "owner-001", "--output-dir", str(tmp_path)]
        )
        out = capsys.readouterr().out

        assert code == 0
        assert "Total Payments Created: 6" in out
        assert "Months Covered: 3" in out
        data = json.loads((tmp_path / "payments.json").read_text(encoding="utf-8"))
        assert len(data) == 6
        assert {row["payment_type"] for row in data} == {"rent", "utility"}
        assert all(row["created_by"] == "owner-001" for row in data)

    def test_postgres_unreachable(self, generate_payments: ModuleType, tmp_path: Path) -> None:
        json_sink = MagicMock()
        with patch.object(generate_payments, "JsonFileSink", return_value=json_sink), patch(
            "lease_schedule.sinks.postgres.psycopg.connect",
            side_effect=psycopg.OperationalError("connection refused"),
        ):
            code = generate_payments.main([*LEASE_ARGS, "--output-dir", str(tmp_path), "--postgres"])

        assert code == 1
        json_sink.close.assert_called_once()
        json_sink.write_batch.assert_not_called()

    def test_rejects_non_numeric_rent(self, generate_payments: ModuleType) -> None:
        args = list(LEASE_ARGS)
        args[args.index("--rent") + 1] = "lots"

        with pytest.raises(SystemExit):
            generate_payments.main(args)


class TestGenerateSampleDataScript:
    """Tests for scripts/generate_sample_data.py."""

    def test_writes_leases_and_payments(
        self, generate_sample_data: ModuleType, tmp_path: Path
    ) -> None:
        code = generate_sample_data.main(["--leases", "3", "--output-dir", str(tmp_path)])

        assert code == 0
        leases = json.loads((tmp_path / "leases.json").read_text(encoding="utf-8"))
        payments = json.loads((tmp_path / "payments.json").read_text(encoding="utf-8"))
        assert len(leases) == 3
        assert {row["tenant_id"] for row in payments} == {row["tenant_id"] for row in leases}

    def test_seed_from_environment(
        self,
        generate_sample_data: ModuleType,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("SEED", "7")
        generate_sample_data.main(["--leases", "2", "--output-dir", str(tmp_path / "env")])
        monkeypatch.delenv("SEED")
        generate_sample_data.main(["--leases", "2", "--seed", "7", "--output-dir", str(tmp_path / "flag")])

        from_env = (tmp_path / "env" / "leases.json").read_text(encoding="utf-8")
        from_flag = (tmp_path / "flag" / "leases.json").read_text(encoding="utf-8")
        assert from_env == from_flag
