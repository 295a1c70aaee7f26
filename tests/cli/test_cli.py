"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from regimen.cli.main import build_parser, main
from regimen.constants.reporting import CATALOG_UNAVAILABLE_MESSAGE, NO_PRODUCTS_MESSAGE
from regimen.exceptions import CatalogUnavailableError
from regimen.model import Parameter

CATALOG_YAML = """\
parameters:
  - id: p-dandruff
    name: Dandruff
    category: Scalp Flaking
  - id: p-frizz
    name: Frizzy Hair
products:
  - id: keto
    parameter_id: p-dandruff
    severity_level: High
    name: Ketoconazole Shampoo
    is_primary: true
  - id: argan
    parameter_id: p-frizz
    severity_level: Medium
    name: Argan Serum
"""


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.yaml"
    path.write_text(CATALOG_YAML, encoding="utf-8")
    return path


def _write_findings(tmp_path: Path, findings: list[dict[str, object]]) -> Path:
    path = tmp_path / "findings.json"
    path.write_text(json.dumps({"parameters": findings}), encoding="utf-8")
    return path


def _recommend_args(tmp_path: Path, catalog: Path, findings: Path, *extra: str) -> list[str]:
    return ["recommend", "-C", str(catalog), "-F", str(findings), "-r", str(tmp_path), *extra]


def test_build_parser_accepts_recommend_flags() -> None:
    args = build_parser().parse_args(
        ["recommend", "-C", "catalog.yaml", "-F", "findings.json", "--format", "json", "--no-color", "-v"]
    )

    assert args.command == "recommend"
    assert args.catalog == Path("catalog.yaml")
    assert args.findings == Path("findings.json")
    assert args.format == "json"
    assert args.no_color is True
    assert args.verbose is True
    assert args.out is None


def test_build_parser_rejects_unknown_format() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["recommend", "-C", "c.yaml", "-F", "f.json", "--format", "csv"])


def test_recommend_text_output(
    tmp_path: Path, catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    findings = _write_findings(tmp_path, [{"category": "Dandruff", "severity": "Severe"}])

    code = main(_recommend_args(tmp_path, catalog_path, findings, "--no-color"))

    out = capsys.readouterr().out
    assert code == 0
    assert "Ketoconazole Shampoo" in out
    assert "Dandruff (High)" in out


def test_recommend_json_output_and_report_file(
    tmp_path: Path, catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    findings = _write_findings(tmp_path, [{"category": "Frizzy Hair & Texture", "severity": "Mild"}])
    report = tmp_path / "out" / "report.json"

    code = main(_recommend_args(tmp_path, catalog_path, findings, "--format", "json", "-o", str(report)))

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["fallback_used"] is True
    assert [p["id"] for p in payload["products"]] == ["argan"]
    assert payload["products"][0]["matched_parameters"] == [
        {"category": "Frizzy Hair & Texture", "severity": "Medium"}
    ]
    assert json.loads(report.read_text(encoding="utf-8")) == payload


def test_recommend_empty_result_prints_message(
    tmp_path: Path, catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    findings = _write_findings(tmp_path, [{"category": "Hyperpigmentation", "severity": "Severe"}])

    code = main(_recommend_args(tmp_path, catalog_path, findings, "--no-color"))

    assert code == 0
    assert NO_PRODUCTS_MESSAGE in capsys.readouterr().out


def test_recommend_config_error_exit_code(
    tmp_path: Path, catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    findings = _write_findings(tmp_path, [])
    (tmp_path / "regimen.yaml").write_text("max_workers: 0\n", encoding="utf-8")

    code = main(_recommend_args(tmp_path, catalog_path, findings))

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_recommend_missing_catalog_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    findings = _write_findings(tmp_path, [])

    code = main(_recommend_args(tmp_path, tmp_path / "absent.yaml", findings))

    assert code == 2
    assert "Catalog error" in capsys.readouterr().err


def test_recommend_unreadable_inputs_exit_code(
    tmp_path: Path, catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    findings = _write_findings(tmp_path, [])
    folder = tmp_path / "folder"
    folder.mkdir()

    catalog_code = main(_recommend_args(tmp_path, folder, findings))
    findings_code = main(_recommend_args(tmp_path, catalog_path, folder))

    err = capsys.readouterr().err
    assert catalog_code == 2
    assert findings_code == 2
    assert "Catalog error: Cannot read catalog file" in err
    assert "Findings error: Cannot read findings file" in err


def test_recommend_bad_findings_exit_code(
    tmp_path: Path, catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    findings = tmp_path / "findings.json"
    findings.write_text("[1, 2]", encoding="utf-8")

    code = main(_recommend_args(tmp_path, catalog_path, findings))

    assert code == 2
    assert "Findings error" in capsys.readouterr().err


def test_recommend_unavailable_catalog_exit_code(
    tmp_path: Path,
    catalog_path: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    findings = _write_findings(tmp_path, [{"category": "Dandruff", "severity": "Severe"}])

    def _unavailable(self: object) -> list[Parameter]:
        raise CatalogUnavailableError("connection refused")

    monkeypatch.setattr("regimen.catalog.memory.InMemoryCatalogStore.list_parameters", _unavailable)

    code = main(_recommend_args(tmp_path, catalog_path, findings, "--no-color"))

    captured = capsys.readouterr()
    assert code == 1
    assert CATALOG_UNAVAILABLE_MESSAGE in captured.out
    assert "connection refused" in captured.err


@pytest.mark.parametrize(
    ("rating", "expected"),
    [("5", "Medium"), ("1", "Low"), ("10", "High"), ("0", "N/A")],
    ids=["five", "one", "ten", "zero"],
)
def test_classify(tmp_path: Path, capsys: pytest.CaptureFixture[str], rating: str, expected: str) -> None:
    code = main(["classify", rating, "-r", str(tmp_path)])

    assert code == 0
    assert capsys.readouterr().out.strip() == expected


def test_classify_uses_configured_ranges(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "regimen.yaml").write_text("rating:\n  low_max: 5\n  medium_min: 6\n", encoding="utf-8")

    code = main(["classify", "5", "-r", str(tmp_path)])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Low"


def test_validate_config_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "-r", str(tmp_path)])

    assert code == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "regimen.yaml").write_text("fallbak: true\nrating:\n  high_max: 12\n", encoding="utf-8")

    code = main(["validate-config", "-r", str(tmp_path)])

    err = capsys.readouterr().err
    assert code == 2
    assert "[CFG004]" in err
    assert "[RAT001]" in err


def test_validate_config_missing_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "-r", str(tmp_path), "-c", str(tmp_path / "nope.yaml")])

    assert code == 2
    assert "[CFG001]" in capsys.readouterr().err
