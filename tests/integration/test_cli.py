"""
Tests for the operator CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from calcverse.app_shell.cli import main


@pytest.fixture
def store_file(tmp_path: Path, store_data: dict[str, Any]) -> Path:
    path = tmp_path / "calculators.yaml"
    path.write_text(yaml.safe_dump(store_data), encoding="utf-8")
    return path


def _args(store_file: Path, *rest: str) -> list[str]:
    missing_site = store_file.parent / "no-site.yaml"
    return ["--store", str(store_file), "--site-config", str(missing_site), *rest]


class TestCli:
    def test_validate(self, store_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(_args(store_file, "validate")) == 0
        assert "5 calculators in 4 categories" in capsys.readouterr().out

    def test_validate_rejects_bad_store(
        self, store_file: Path, store_data: dict[str, Any]
    ) -> None:
        store_data["categories"]["health"]["count"] = 2
        store_file.write_text(yaml.safe_dump(store_data), encoding="utf-8")
        assert main(_args(store_file, "validate")) == 1

    def test_missing_store_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(_args(tmp_path / "absent.yaml", "validate"))
        assert exc_info.value.code == 1

    def test_generate_then_check(self, store_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "generated_site"

        assert main(_args(store_file, "generate", "--out", str(out))) == 0
        assert (out / "components" / "BmiCalculatorComponent.py").is_file()
        assert main(_args(store_file, "check", "--out", str(out))) == 0

    def test_check_reports_drift(
        self,
        store_file: Path,
        store_data: dict[str, Any],
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out = tmp_path / "generated_site"
        main(_args(store_file, "generate", "--out", str(out)))

        store_data["calculators"][2]["title"] = "Body Mass Index Calculator"
        store_file.write_text(yaml.safe_dump(store_data), encoding="utf-8")

        assert main(_args(store_file, "check", "--out", str(out))) == 1
        assert "Stale: components/BmiCalculatorComponent.py" in capsys.readouterr().out

    def test_generate_refuses_foreign_directory(self, store_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "src"
        out.mkdir()
        (out / "main.py").write_text("print('hi')\n", encoding="utf-8")

        assert main(_args(store_file, "generate", "--out", str(out))) == 1
        assert (out / "main.py").is_file()

    def test_routes(self, store_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(_args(store_file, "routes")) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == (
            "/calculators/mortgage-calculator\tMortgageCalculatorPage\tMortgageCalculatorComponent"
        )
        assert len(lines) == 5
