"""Tests for CLI commands via click.testing.CliRunner."""

from __future__ import annotations

import importlib.metadata
import json
from pathlib import Path

from click.testing import CliRunner

from envstrata.cli import cli


def test_version():
    """Version output must match the package version from the project."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    expected_version = importlib.metadata.version("envstrata")
    assert expected_version in result.output


def test_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("check", "list", "get", "export", "sources"):
        assert command in result.output


def test_check_valid_file(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(sample_env)])
    assert result.exit_code == 0
    assert "OK" in result.output
    assert "10 key(s)" in result.output


def test_check_reports_error_code_and_line(write_env):
    bad = write_env("bad.env", 'OK=1\nKEY="a"b"\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(bad)])
    assert result.exit_code == 1
    assert "FAIL" in result.output
    assert "line 2: ENV004 Unclosed double quote" in result.output
    assert "1 file(s) failed validation." in result.output


def test_check_continues_after_failure(write_env, sample_env):
    bad = write_env("bad.env", "SECRET=password\\\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(bad), str(sample_env)])
    assert result.exit_code == 1
    assert "ENV005" in result.output
    assert "10 key(s)" in result.output


def test_check_strict_flag(write_env):
    env = write_env("lenient.env", "GOOD=1\nno_equals_here\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(env)])
    assert result.exit_code == 0

    result = runner.invoke(cli, ["--strict", "check", str(env)])
    assert result.exit_code == 1
    assert "line 2: ENV001" in result.output


def test_check_duplicates_flag(write_env):
    env = write_env("dup.env", "KEY=1\nkey=2\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["--duplicates", "error", "check", str(env)])
    assert result.exit_code == 1
    assert "ENV002" in result.output


def test_check_missing_explicit_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(tmp_path / "missing.env")])
    assert result.exit_code == 1
    assert "was not found" in result.output


def test_check_default_env_missing_is_skipped():
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 0
    assert "SKIP" in result.output


def test_list_masks_values(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["list", str(sample_env)])
    assert result.exit_code == 0
    assert "DATABASE_HOST" in result.output
    assert "my secret password" not in result.output
    assert "my ****ord" in result.output
    assert "(absent)" in result.output


def test_list_reveal(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["list", "--reveal", str(sample_env)])
    assert result.exit_code == 0
    assert "my secret password" in result.output


def test_list_empty():
    runner = CliRunner()
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    assert "(empty)" in result.output


def test_list_parse_error_is_reported(write_env):
    bad = write_env("bad.env", 'OK=1\nKEY="a"b"\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["list", str(bad)])
    assert result.exit_code == 1
    assert "ENV004 at line 2: Unclosed double quote" in result.output


def test_get_value(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "DATABASE_URL", str(sample_env)])
    assert result.exit_code == 0
    assert result.output == "postgres://myuser@localhost:5432/app\n"


def test_get_is_case_insensitive(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "database_host", str(sample_env)])
    assert result.exit_code == 0
    assert result.output == "localhost\n"


def test_get_missing_key(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "NOPE", str(sample_env)])
    assert result.exit_code == 1
    assert "Key 'NOPE' not found." in result.output


def test_get_later_file_wins(write_env):
    base = write_env("base.env", "MODE=base\nONLY_BASE=1\n")
    local = write_env("local.env", "mode=local\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "MODE", str(base), str(local)])
    assert result.output == "local\n"
    result = runner.invoke(cli, ["get", "ONLY_BASE", str(base), str(local)])
    assert result.output == "1\n"


def test_get_no_expand(write_env):
    env = write_env("e.env", "A=1\nB=${A}\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["--no-expand", "get", "B", str(env)])
    assert result.output == "${A}\n"


def test_get_reads_default_env_file():
    Path(".env").write_text("FROM_DEFAULT=yes\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "FROM_DEFAULT"])
    assert result.exit_code == 0
    assert result.output == "yes\n"


def test_export_dotenv(write_env):
    env = write_env("e.env", "B=two words\nA=1\nEMPTY=\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["export", str(env)])
    assert result.exit_code == 0
    assert result.output == 'A=1\nB="two words"\nEMPTY=\n'


def test_export_unix(write_env):
    env = write_env("e.env", "A=it's\nEMPTY=\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "unix", str(env)])
    assert result.exit_code == 0
    assert result.output == "export A='it'\\''s'\n"


def test_export_win(write_env):
    env = write_env("e.env", "A=it's\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "win", str(env)])
    assert result.output == "$env:A = 'it''s'\n"


def test_export_json(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "json", str(sample_env)])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["DATABASE_PORT"] == "5432"
    assert data["EMPTY_VALUE"] is None


def test_export_yaml(write_env):
    import yaml

    env = write_env("e.env", "A=1\nB=x y\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "yaml", str(env)])
    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == {"A": "1", "B": "x y"}


def test_export_to_file(sample_env, tmp_path):
    out = tmp_path / "out.env"
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "-o", str(out), str(sample_env)])
    assert result.exit_code == 0
    assert "Exported 10 variable(s)" in result.output
    from envstrata.env_file import parse_env_file

    assert parse_env_file(out) == parse_env_file(sample_env)


def test_config_file_supplies_files_and_options(tmp_path):
    (tmp_path / "work" / ".envstrata.toml").write_text(
        '[envstrata]\nfiles = [".env", ".env.local"]\nduplicate_keys = "first"\n'
    )
    (tmp_path / "work" / ".env").write_text("A=base\n")
    (tmp_path / "work" / ".env.local").write_text("A=local\nB=2\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "B"])
    assert result.output == "2\n"
    # duplicate policy applies within a file, not across layered files
    result = runner.invoke(cli, ["get", "A"])
    assert result.output == "local\n"


def test_invalid_config_is_usage_error(tmp_path):
    (tmp_path / "work" / ".envstrata.toml").write_text(
        '[envstrata]\nduplicate_keys = "sometimes"\n'
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 2
    assert "Invalid configuration" in result.output


def test_sources_lists_builtins():
    runner = CliRunner()
    result = runner.invoke(cli, ["sources"])
    assert result.exit_code == 0
    assert "file" in result.output
    assert "stream" in result.output


def test_non_string_duplicate_policy_in_config_is_usage_error(tmp_path):
    (tmp_path / "work" / ".envstrata.toml").write_text("[envstrata]\nduplicate_keys = 1\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check"])
    assert result.exit_code == 2
    assert "must be a string" in result.output


def test_export_rejects_unknown_format(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--format", "csv", str(sample_env)])
    assert result.exit_code == 2
    for fmt in ("dotenv", "unix", "win", "json", "yaml"):
        assert fmt in result.output
