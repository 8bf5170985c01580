"""Local script execution for the local phase of a target."""

import subprocess
import time
from typing import Callable, Optional

from shipit.constants import LOCAL_SHELL, SHELL_NOT_FOUND_EXIT
from shipit.models.results import ExecutionResult


class LocalRunner:
    """
    Runs a script in the caller's environment.

    The script is handed to the shell with errexit on, so the first failing
    statement stops the rest of the script. Failure comes back as an
    ExecutionResult and never raises.
    """

    def __init__(
        self,
        shell: str = LOCAL_SHELL,
        cwd: Optional[str] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        Initialize local runner.

        Args:
            shell: Shell binary to run scripts with
            cwd: Working directory (default: inherit the caller's)
            runner: subprocess.run compatible callable
        """
        self.shell = shell
        self.cwd = cwd
        self.runner = runner

    def build_command(self, script_body: str) -> list[str]:
        return [self.shell, "-e", "-c", script_body]

    def run(self, script_body: str) -> ExecutionResult:
        """
        Execute a script, stopping at the first failing statement.

        Args:
            script_body: Script text, one or more statements

        Returns:
            ExecutionResult with the shell's exit status
        """
        start_time = time.time()

        try:
            result = self.runner(self.build_command(script_body), cwd=self.cwd)
            returncode = result.returncode
        except FileNotFoundError:
            returncode = SHELL_NOT_FOUND_EXIT

        return ExecutionResult(
            returncode=returncode,
            command=script_body,
            duration_seconds=time.time() - start_time,
        )
