"""Tests for the command line interface."""

import json
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from click.testing import CliRunner

from docperiod import cli
from docperiod.config import Settings

SOURCE = """/// <summary>
/// Adds numbers
/// </summary>
public class Calc
{
    /// <include file='docs.xml' path='/doc/Add/*'/>
    public int Add() => 0;
}
"""

DOCS = """<doc>
  <Add><summary>Adds</summary></Add>
</doc>
"""


def _write_sources(root: Path) -> Path:
    source = root / "Calc.cs"
    source.write_text(SOURCE, encoding="utf-8")
    (root / "docs.xml").write_text(DOCS, encoding="utf-8")
    return source


def test_check_reports_text(tmp_path: Path) -> None:
    """Ensure violations are listed with positions and fix availability."""

    source = _write_sources(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", str(source)])

    assert result.exit_code == 1
    lines = result.output.strip().splitlines()
    assert lines == [
        f"{source}:2:17: documentation-text-must-end-with-period",
        f"{source}:6:9: documentation-text-must-end-with-period"
        " (no fix available)",
    ]


def test_check_outputs_json(tmp_path: Path) -> None:
    """Ensure JSON records carry the violation details."""

    source = _write_sources(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["check", str(source), "--format", "json"]
    )

    assert result.exit_code == 1
    records = json.loads(result.output)
    assert [(r["line"], r["column"], r["fixable"]) for r in records] == [
        (2, 17, True),
        (6, 9, False),
    ]
    assert records[0]["offset"] == SOURCE.index("numbers") + len("numbers")


def test_check_outputs_yaml(tmp_path: Path) -> None:
    source = _write_sources(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["check", str(source), "--format", "yaml"]
    )

    records = yaml.safe_load(result.output)
    assert records[0]["path"] == str(source)
    assert records[0]["message"] == "documentation-text-must-end-with-period"


def test_check_clean_file_exits_zero(tmp_path: Path) -> None:
    source = tmp_path / "Ok.cs"
    source.write_text("/// <summary>Fine.</summary>\nclass Ok {}\n")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", str(source)])

    assert result.exit_code == 0
    assert result.output == ""


def test_fix_rewrites_file(tmp_path: Path) -> None:
    """Ensure fixable violations are repaired and the rest still reported."""

    source = _write_sources(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", str(source), "--fix"])

    assert "/// Adds numbers.\n" in source.read_text(encoding="utf-8")
    assert result.exit_code == 1
    assert f"{source}:6:9:" in result.output
    assert f"{source}:2:17:" not in result.output


def test_fix_everything_exits_zero(tmp_path: Path) -> None:
    source = tmp_path / "A.cs"
    source.write_text("/// <summary>Almost</summary>\nclass A {}\n")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", "--fix", str(source)])

    assert result.exit_code == 0
    assert source.read_text().startswith("/// <summary>Almost.</summary>")


def test_directory_is_walked_for_configured_extensions(
    tmp_path: Path,
) -> None:
    """Ensure directories are scanned using the configured suffixes."""

    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "A.cs").write_text("/// <summary>A</summary>\n")
    (tmp_path / "src" / "B.vb").write_text("/// <summary>B</summary>\n")
    config = tmp_path / "settings.yaml"
    config.write_text("extensions: [.vb]\n")

    runner = CliRunner()
    result = runner.invoke(
        cli.cli,
        ["check", str(tmp_path / "src"), "--config", str(config)],
    )

    assert result.exit_code == 1
    assert "B.vb:1:15:" in result.output
    assert "A.cs" not in result.output


def test_invalid_config_is_reported(tmp_path: Path) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text("nonsense: true\n")
    runner = CliRunner()
    result = runner.invoke(
        cli.cli, ["check", str(tmp_path), "--config", str(config)]
    )

    assert result.exit_code != 0
    assert "unknown settings nonsense" in result.output


def test_version_option() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["--version"])

    assert result.exit_code == 0
    assert "docperiod" in result.output


def test_fix_keeps_crlf_line_endings(tmp_path: Path) -> None:
    """Ensure a fix inserts only the period and keeps CRLF line breaks."""

    source = tmp_path / "Win.cs"
    source.write_bytes(b"/// <summary>Text</summary>\r\nclass A {}\r\n")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", "--fix", str(source)])

    assert result.exit_code == 0
    assert source.read_bytes() == (
        b"/// <summary>Text.</summary>\r\nclass A {}\r\n"
    )


def test_crlf_positions_match_lines(tmp_path: Path) -> None:
    source = tmp_path / "Win.cs"
    source.write_bytes(
        b"/// <summary>\r\n/// Text\r\n/// </summary>\r\nclass A {}\r\n"
    )
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", str(source)])

    assert result.exit_code == 1
    assert result.output.strip().splitlines() == [
        f"{source}:2:9: documentation-text-must-end-with-period"
    ]


def test_unreadable_file_does_not_stop_the_run(tmp_path: Path) -> None:
    """Ensure a file that is not UTF-8 is skipped and the rest checked."""

    skipped = tmp_path / "a.cs"
    skipped.write_bytes(
        "/// <summary>Café</summary>\n".encode("latin-1")
    )
    (tmp_path / "b.cs").write_text("/// <summary>B</summary>\n")
    runner = CliRunner()
    result = runner.invoke(cli.cli, ["check", str(tmp_path)])

    assert not isinstance(result.exception, UnicodeDecodeError)
    assert result.exit_code == 1
    assert "b.cs:1:15:" in result.output
    reported = result.output.splitlines()
    assert not any(line.startswith(f"{skipped}:") for line in reported)


def test_check_file_records_read_errors(tmp_path: Path) -> None:
    path = tmp_path / "a.cs"
    path.write_bytes(b"/// <summary>\xff</summary>\n")

    report = cli._check_file(path, Settings(), fix=True)

    assert report.violations == []
    assert report.fixed == 0
    assert len(report.errors) == 1
    assert path.read_bytes() == b"/// <summary>\xff</summary>\n"
