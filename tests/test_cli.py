"""Tests for the redactcheck CLI.

This module tests the command-line interface using Typer's CliRunner for
the command itself and ``main()`` for exit-code handling of usage errors.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from redactcheck import __version__
from redactcheck.cli.main import app, main

runner = CliRunner()


class TestVersionAndHelp:
    """Test --version and --help output."""

    def test_version_flag_outputs_version(self) -> None:
        """Test that --version outputs the version number."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
        assert "redactcheck" in result.output

    def test_version_is_2_0_0(self) -> None:
        """Test that version is 2.0.0 as expected."""
        assert __version__ == "2.0.0"

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag: str) -> None:
        """Test that both help flags show usage and exit 0."""
        result = runner.invoke(app, [flag])
        assert result.exit_code == 0
        assert "--strict" in result.output
        assert "--recursive" in result.output


class TestScanCommand:
    """Test scanning targets through the CLI."""

    def test_password_file(self, tmp_path: Path) -> None:
        """Test that a password is reported redacted and the run succeeds."""
        path = tmp_path / "a.txt"
        path.write_text("password=hunter2\n")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 0
        assert "[T1-PASSWORD] line 1: password=[VALUE-REDACTED]" in result.output
        assert "hunter2" not in result.output

    def test_private_ip_file(self, tmp_path: Path) -> None:
        """Test that a private IP is reported verbatim."""
        path = tmp_path / "hosts.txt"
        path.write_text("192.168.1.50\n")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 0
        assert "[T2-IPV4_PRIVATE_192] line 1: 192.168.1.50" in result.output

    def test_directory_summary(self, sample_tree: Path) -> None:
        """Test the summary for the three-file sample directory."""
        result = runner.invoke(app, [str(sample_tree)])
        assert result.exit_code == 0
        assert "Files scanned   2" in result.output
        assert "Flagged         1" in result.output
        assert "T1 EXPOSURE DETECTED" in result.output

    def test_strict_fails_on_tier1(self, sample_tree: Path) -> None:
        """Test that --strict exits 1 when Tier-1 findings exist."""
        result = runner.invoke(app, [str(sample_tree), "--strict"])
        assert result.exit_code == 1
        assert "STRICT" in result.output

    def test_strict_passes_on_tier2_only(self, network_file: Path) -> None:
        """Test that --strict exits 0 when there are only Tier-2 findings."""
        result = runner.invoke(app, ["-s", str(network_file)])
        assert result.exit_code == 0
        assert "T2 (RESTRICTED) hits  3" in result.output

    def test_recursive_flag(self, nested_tree: Path) -> None:
        """Test that -r descends into subdirectories."""
        flat = runner.invoke(app, [str(nested_tree), "-s"])
        deep = runner.invoke(app, [str(nested_tree), "-r", "-s"])
        assert flat.exit_code == 0
        assert deep.exit_code == 1
        assert "Recursive" in deep.output
        assert "[T1-MASTER_KEY]" in deep.output

    def test_exclude_option(self, nested_tree: Path) -> None:
        """Test that -x leaves matching paths out of a recursive scan."""
        result = runner.invoke(app, [str(nested_tree), "-r", "-s", "-x", "deploy"])
        assert result.exit_code == 0

    def test_workers_option(self, sample_tree: Path) -> None:
        """Test that a threaded scan reports the same summary."""
        result = runner.invoke(app, [str(sample_tree), "--workers", "4"])
        assert result.exit_code == 0
        assert "Files scanned   2" in result.output

    def test_quiet_prints_summary_only(self, sample_tree: Path) -> None:
        """Test that -q suppresses the header and per-file lines."""
        result = runner.invoke(app, [str(sample_tree), "-q"])
        assert result.exit_code == 0
        assert "SCAN COMPLETE" in result.output
        assert "settings.conf" not in result.output
        assert "TARGET" not in result.output

    def test_output_report(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test that -o writes a plain text copy of the report."""
        report = tmp_path / "report.txt"
        result = runner.invoke(app, [str(sample_tree), "-o", str(report)])
        assert result.exit_code == 0
        content = report.read_text(encoding="utf-8")
        assert "[T1-PASSWORD] line 2: password=[VALUE-REDACTED]" in content
        assert "hunter2" not in content
        assert "Report saved to" in result.output

    def test_output_not_written_in_quiet_mode(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test that a quiet run does not persist a report."""
        report = tmp_path / "report.txt"
        result = runner.invoke(app, [str(sample_tree), "-q", "-o", str(report)])
        assert result.exit_code == 0
        assert not report.exists()

    def test_output_write_failure(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test that a report write failure exits 1 with an error."""
        report = tmp_path / "missing" / "report.txt"
        result = runner.invoke(app, [str(sample_tree), "-o", str(report)])
        assert result.exit_code == 1
        assert "Output Error" in result.output

    def test_config_file_enables_strict(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test that a config file in the working directory is applied."""
        (tmp_path / ".redactcheck.toml").write_text("strict = true\n")
        result = runner.invoke(app, [str(sample_tree)])
        assert result.exit_code == 1

    def test_explicit_config_option(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test that --config selects a config file."""
        config_path = tmp_path / "ci.yml"
        config_path.write_text("strict: true\nquiet: true\n")
        result = runner.invoke(app, [str(sample_tree), "-c", str(config_path)])
        assert result.exit_code == 1
        assert "TARGET" not in result.output

    def test_invalid_config_fails(self, sample_tree: Path, tmp_path: Path) -> None:
        """Test that an invalid config file exits 1 before scanning."""
        (tmp_path / ".redactcheck.toml").write_text("workers = 0\n")
        result = runner.invoke(app, [str(sample_tree)])
        assert result.exit_code == 1
        assert "Configuration Error" in result.output
        assert "SCAN COMPLETE" not in result.output


class TestTargetErrors:
    """Test target resolution errors."""

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes need POSIX")
    def test_special_file_target(self, tmp_path: Path) -> None:
        """Test that a named pipe target exits 1 with a target error."""
        fifo = tmp_path / "pipe"
        os.mkfifo(fifo)
        result = runner.invoke(app, [str(fifo)])
        assert result.exit_code == 1
        assert "Target Error" in result.output
        assert main([str(fifo)]) == 1

    def test_missing_target_argument(self) -> None:
        """Test that no target exits 1 with a usage error."""
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Usage Error" in result.output

    def test_nonexistent_target(self, tmp_path: Path) -> None:
        """Test that a missing path exits 1 with a target error."""
        result = runner.invoke(app, [str(tmp_path / "does_not_exist")])
        assert result.exit_code == 1
        assert "Target Error" in result.output

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Test that a directory with no files exits 1."""
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, [str(empty)])
        assert result.exit_code == 1
        assert "No scannable files" in result.output


class TestMainEntryPoint:
    """Test exit codes from the main() entry point."""

    def test_success(self, network_file: Path) -> None:
        """Test that a completed scan returns 0."""
        assert main([str(network_file)]) == 0

    def test_strict_failure(self, sample_tree: Path) -> None:
        """Test that a strict failure returns 1."""
        assert main([str(sample_tree), "--strict"]) == 1

    def test_unknown_option_returns_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that an unknown option is a usage error with exit code 1."""
        assert main(["--bogus"]) == 1
        assert "--bogus" in capsys.readouterr().err

    def test_bad_option_value_returns_1(
        self, network_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that an out-of-range option value exits 1 without scanning."""
        assert main([str(network_file), "--workers", "0"]) == 1
        captured = capsys.readouterr()
        assert "SCAN COMPLETE" not in captured.out
        assert "--workers" in captured.err

    def test_missing_target_returns_1(self) -> None:
        """Test that a missing target returns 1."""
        assert main([]) == 1

    def test_help_returns_0(self) -> None:
        """Test that --help returns 0."""
        assert main(["--help"]) == 0
