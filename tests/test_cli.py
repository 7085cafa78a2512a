"""CLI behaviour through click's test runner."""

import pytest
from click.testing import CliRunner

from crimson import __version__
from crimson.cli.main import cli


@pytest.fixture
def runner():
	return CliRunner()


def _write(tmp_path, name, source):
	path = tmp_path / name
	path.write_text(source, encoding="utf-8")
	return str(path)


def test_run_program(runner, tmp_path):
	path = _write(tmp_path, "hello.crm", 'void main() {\n  crym("Hello, Crimson");\n}\n')
	result = runner.invoke(cli, ["run", path])
	assert result.exit_code == 0
	assert result.output == "Hello, Crimson\n"


def test_run_reads_stdin_for_inp(runner, tmp_path):
	path = _write(tmp_path, "ask.crm", 'void main() {\n  inp("Name? ");\n  crym("thanks");\n}\n')
	result = runner.invoke(cli, ["run", path], input="Ada\n")
	assert result.exit_code == 0
	assert result.output == "Name? thanks\n"


def test_run_structural_error_exits_nonzero(runner, tmp_path):
	path = _write(tmp_path, "broken.crm", 'crym("no main");\n')
	result = runner.invoke(cli, ["run", path])
	assert result.exit_code == 1
	assert "No main function found" in result.output


def test_run_rejects_wrong_extension(runner, tmp_path):
	path = _write(tmp_path, "hello.txt", 'void main() { crym("x"); }')
	result = runner.invoke(cli, ["run", path])
	assert result.exit_code == 1
	assert "File must have .crm extension" in result.output
	assert "x\n" not in result.output


def test_run_rejects_undecodable_file(runner, tmp_path):
	path = tmp_path / "latin1.crm"
	path.write_bytes(b'void main() {\n  crym("caf\xe9");\n}\n')
	result = runner.invoke(cli, ["run", str(path)])
	assert result.exit_code == 1
	assert isinstance(result.exception, SystemExit)
	assert "not valid UTF-8" in result.output


def test_run_missing_file(runner, tmp_path):
	result = runner.invoke(cli, ["run", str(tmp_path / "absent.crm")])
	assert result.exit_code != 0


def test_run_requires_exactly_one_file(runner):
	result = runner.invoke(cli, ["run"])
	assert result.exit_code != 0


def test_check_valid_program(runner, tmp_path):
	path = _write(tmp_path, "ok.crm", 'void main() {\n  crym("not printed");\n}\n')
	result = runner.invoke(cli, ["check", path])
	assert result.exit_code == 0
	assert "Structure is valid" in result.output
	assert "not printed" not in result.output


def test_check_reports_builtin_outside_main(runner, tmp_path):
	path = _write(tmp_path, "bad.crm", 'void main() { }\nSleep(1);\n')
	result = runner.invoke(cli, ["check", path])
	assert result.exit_code == 1
	assert "Line 2" in result.output


def test_tokens_table(runner, tmp_path):
	path = _write(tmp_path, "t.crm", "int x = 5;\n")
	result = runner.invoke(cli, ["tokens", path])
	assert result.exit_code == 0
	assert "KEYWORD" in result.output
	assert "IDENTIFIER" in result.output
	assert "EOF" in result.output


def test_init_creates_runnable_project(runner, tmp_path):
	with runner.isolated_filesystem(temp_dir=tmp_path):
		result = runner.invoke(cli, ["init", "demo"])
		assert result.exit_code == 0

		run_result = runner.invoke(cli, ["run", "demo/main.crm"])
		assert run_result.exit_code == 0
		assert run_result.output == "Hello from demo\nThe answer is big enough\n"


def test_init_refuses_non_empty_directory(runner, tmp_path):
	with runner.isolated_filesystem(temp_dir=tmp_path):
		runner.invoke(cli, ["init", "demo"])
		result = runner.invoke(cli, ["init", "demo"])
		assert result.exit_code == 1


def test_version(runner):
	result = runner.invoke(cli, ["--version"])
	assert result.exit_code == 0
	assert __version__ in result.output


def test_tokens_table_keeps_bracketed_text(runner, tmp_path):
	path = _write(tmp_path, "brackets.crm", 'crym("[/x]");\ncrym("[bold]hi");\n')
	result = runner.invoke(cli, ["tokens", path])
	assert result.exit_code == 0
	assert '"[/x]"' in result.output
	assert '"[bold]hi"' in result.output
