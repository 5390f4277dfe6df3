"""
Tests for the shell command runners.
"""
import sys

import pytest

from smake.core.runner import CommandResult, CommandRunner, DryRunRunner

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="uses POSIX shell commands")


class TestCommandRunner:
    def test_success_captures_output(self):
        result = CommandRunner().run("echo hello")
        assert isinstance(result, CommandResult)
        assert result.success
        assert result.returncode == 0
        assert result.output == "hello\n"

    def test_failure(self):
        result = CommandRunner().run("exit 3")
        assert not result.success
        assert result.returncode == 3

    def test_stderr_is_merged(self):
        result = CommandRunner().run("echo out; echo err 1>&2")
        assert "out" in result.output
        assert "err" in result.output

    def test_runs_in_cwd(self, tmp_path):
        result = CommandRunner(cwd=str(tmp_path)).run("pwd")
        assert result.output.strip().endswith(tmp_path.name)

    def test_env_overlay(self):
        result = CommandRunner(env={"SMAKE_TEST_VALUE": "xyz"}).run("echo $SMAKE_TEST_VALUE")
        assert result.output.strip() == "xyz"

    def test_spawn_failure_is_a_failed_result(self, tmp_path):
        runner = CommandRunner(cwd=str(tmp_path / "does-not-exist"))
        result = runner.run("echo hi")
        assert not result.success
        assert result.returncode is None
        assert result.output


class TestDryRunRunner:
    def test_records_without_running(self, tmp_path):
        marker = tmp_path / "marker"
        runner = DryRunRunner()
        result = runner.run(f"touch {marker}")
        assert result.success
        assert result.output == ""
        assert runner.commands == [f"touch {marker}"]
        assert not marker.exists()
