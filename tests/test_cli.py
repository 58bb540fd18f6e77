from __future__ import annotations

import json
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from pkgid.__version__ import __version__
from pkgid.cli import cli, main


def _invoke(args: List[str]):
    runner = CliRunner()
    with runner.isolated_filesystem():
        return runner.invoke(cli, ["--no-color", *args], env={"COLUMNS": "240"})


@pytest.mark.unit
class TestGroup:
    """Tests for the top-level pkgid group."""

    def test_version(self) -> None:
        """Test --version prints the program version."""
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert result.output.strip() == f"pkgid {__version__}"

    def test_help_lists_commands(self) -> None:
        """Test both subcommands are registered."""
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "show" in result.output
        assert "prefixes" in result.output

    def test_invalid_config_exits_with_error(self, tmp_path: Path) -> None:
        """Test a bad configuration file aborts before the command runs."""
        config_file = tmp_path / "pkgid.toml"
        config_file.write_text("[pkgid]\ngit_timeout = -1\n", encoding="utf-8")

        result = CliRunner().invoke(
            cli, ["--no-color", "--config", str(config_file), "show", "foo", "--offline"],
            env={"COLUMNS": "240"},
        )

        assert result.exit_code == 1
        assert "git_timeout must be a positive integer" in result.output


@pytest.mark.unit
class TestShowCommand:
    """Tests for pkgid show."""

    def test_json_output(self) -> None:
        """Test identifiers are serialized with every label."""
        result = _invoke(["show", "github.com/a/b#0.1", "foo", "--format", "json", "--offline"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["path"] for item in data] == ["github.com/a/b", "foo"]
        assert data[0]["version"] == "0.1"
        assert data[0]["complex"] is True
        assert data[0]["install_tag"] == "install(github.com/a/b-0.1)"
        assert data[1]["version"] is None
        assert data[1]["complex"] is False

    def test_table_output(self) -> None:
        """Test the table shows path, short name and version."""
        result = _invoke(["show", "github.com/a/proj.git#2.0", "--offline"])

        assert result.exit_code == 0
        assert "Package identifiers" in result.output
        assert "github.com/a/proj.git" in result.output
        assert "proj" in result.output
        assert "2.0" in result.output

    def test_failure_exits_nonzero(self) -> None:
        """Test an unparseable identifier is reported and fails the command."""
        result = _invoke(["show", "foo", "a b", "--offline"])

        assert result.exit_code == 1
        assert "Can't parse a b as a package ID" in result.output
        assert "foo" in result.output

    def test_url_gets_suggestion(self) -> None:
        """Test a URL-looking identifier produces a did-you-mean hint."""
        result = _invoke(["show", "https://github.com/a/b.git", "--offline"])

        assert result.exit_code == 1
        assert "did you mean `github.com/a/b`" in result.output

    def test_requires_identifier(self) -> None:
        """Test at least one identifier is required."""
        result = _invoke(["show"])

        assert result.exit_code == 2


@pytest.mark.unit
class TestPrefixesCommand:
    """Tests for pkgid prefixes."""

    def test_lists_splits(self) -> None:
        """Test splits are listed longest ancestor first."""
        result = _invoke(["prefixes", "github.com/a/b"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Prefixes of github.com/a/b",
            "github.com/a  |  b",
            "github.com  |  a/b",
        ]

    def test_single_component(self) -> None:
        """Test a one-component path reports there is nothing to list."""
        result = _invoke(["prefixes", "foo"])

        assert result.exit_code == 0
        assert "foo has a single component; no prefixes" in result.output

    def test_absolute_path_fails(self) -> None:
        """Test an absolute path is rejected."""
        result = _invoke(["prefixes", "/foo/bar"])

        assert result.exit_code == 1
        assert "absolute pkgid" in result.output


@pytest.mark.unit
class TestMain:
    """Tests for the main() wrapper around the Click group."""

    def test_success_returns_zero(self) -> None:
        """Test a successful command returns 0."""
        with patch("sys.argv", ["pkgid", "--no-color", "show", "foo", "--offline"]):
            assert main() == 0

    def test_usage_error_returns_click_code(self) -> None:
        """Test Click usage errors return their exit code."""
        with patch("sys.argv", ["pkgid", "no-such-command"]):
            assert main() == 2

    def test_keyboard_interrupt_returns_130(self) -> None:
        """Test Ctrl+C is reported with exit code 130."""
        with patch("pkgid.cli.cli", side_effect=KeyboardInterrupt):
            assert main() == 130

    def test_pkgid_error_returns_one(self) -> None:
        """Test library errors escaping a command return 1."""
        from pkgid.exceptions import PkgIdError

        with patch("pkgid.cli.cli", side_effect=PkgIdError("boom")):
            assert main() == 1

    def test_unexpected_error_returns_one(self, capsys: pytest.CaptureFixture) -> None:
        """Test unexpected exceptions are reported and return 1."""
        with patch("pkgid.cli.cli", side_effect=RuntimeError("kaput")):
            assert main() == 1

        assert "Unexpected error: kaput" in capsys.readouterr().out
