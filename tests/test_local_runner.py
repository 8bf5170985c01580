"""Tests for local script execution."""

import shutil
from unittest.mock import MagicMock

import pytest

from shipit.services.local_runner import LocalRunner


class TestLocalRunnerCommand:
    """Test how scripts are handed to the shell."""

    def test_errexit_shell(self):
        runner = MagicMock(return_value=MagicMock(returncode=0))

        result = LocalRunner(runner=runner, cwd="/work").run("npm run build")

        runner.assert_called_once_with(["bash", "-e", "-c", "npm run build"], cwd="/work")
        assert result.is_success
        assert result.command == "npm run build"

    def test_failure_is_returned_not_raised(self):
        runner = MagicMock(return_value=MagicMock(returncode=1))

        result = LocalRunner(runner=runner).run("false")

        assert result.is_failure
        assert result.returncode == 1

    def test_missing_shell(self):
        runner = MagicMock(side_effect=FileNotFoundError("bash"))

        result = LocalRunner(runner=runner).run("ls")

        assert result.returncode == 127


@pytest.mark.skipif(shutil.which("bash") is None, reason="bash not installed")
class TestLocalRunnerBash:
    """Run real scripts through bash."""

    def test_stops_at_first_failure(self, tmp_path):
        script = "touch first\nfalse\ntouch second"

        result = LocalRunner(cwd=str(tmp_path)).run(script)

        assert result.is_failure
        assert (tmp_path / "first").exists()
        assert not (tmp_path / "second").exists()

    def test_success(self, tmp_path):
        result = LocalRunner(cwd=str(tmp_path)).run("echo hi > out.txt\ntest -f out.txt")

        assert result.is_success
        assert (tmp_path / "out.txt").read_text() == "hi\n"
