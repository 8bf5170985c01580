"""SSH service for running scripts and copying files to the remote host."""

import shlex
import subprocess
import time
from typing import Callable, Optional

from shipit.constants import REMOTE_DIRECTORY_MISSING_EXIT
from shipit.models.results import SSHResult
from shipit.models.ssh import DeploymentContext


def quote_remote_path(path: str) -> str:
    """
    Shell-quote a remote path, keeping a leading '~' expandable.

    Args:
        path: Remote path as written in the config header

    Returns:
        Shell word safe to embed in the guard script
    """
    if path == "~":
        return '"$HOME"'
    if path.startswith("~/"):
        return '"$HOME"/' + shlex.quote(path[2:])
    return shlex.quote(path)


class RemoteSession:
    """
    Runs scripts on the remote host inside the configured directory.

    Every script is wrapped in a guard that stops on the first failing
    command, checks that the remote path is a directory and changes into it.
    """

    def __init__(
        self,
        context: DeploymentContext,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        """
        Initialize remote session.

        Args:
            context: Deployment context (host, path, verbosity)
            runner: subprocess.run compatible callable
        """
        self.context = context
        self.runner = runner

    def build_guard_script(self, script_body: str) -> str:
        """Wrap a script so it runs fail-fast inside the remote path."""
        path = quote_remote_path(self.context.ssh_path)
        return (
            "set -e\n"
            f"if [ ! -d {path} ]; then\n"
            f"  printf '\\033[1;31mRemote directory %s does not exist\\033[0m\\n' {path} >&2\n"
            f"  exit {REMOTE_DIRECTORY_MISSING_EXIT}\n"
            "fi\n"
            f"cd {path}\n"
            f"{script_body}\n"
        )

    def run(self, script_body: str, tty: bool = False) -> SSHResult:
        """
        Execute a script on the remote host.

        Output is streamed straight to the terminal; there is no timeout.

        Args:
            script_body: Script to run after the guard preamble
            tty: Request a pseudo-terminal (interactive sessions)

        Returns:
            SSHResult with the remote exit status
        """
        ssh_cmd = self.context.build_command(self.build_guard_script(script_body), tty=tty)

        start_time = time.time()
        result = self.runner(ssh_cmd)

        return SSHResult(
            returncode=result.returncode,
            host=self.context.ssh_host,
            command=script_body,
            duration_seconds=time.time() - start_time,
        )


class FileCopier:
    """Copies local files into the remote path over scp."""

    def __init__(
        self,
        context: DeploymentContext,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.context = context
        self.runner = runner

    def copy(
        self, local_path: str, recursive: bool = False, cwd: Optional[str] = None
    ) -> SSHResult:
        """
        Copy a file to <ssh_path>/<local_path> on the host.

        Args:
            local_path: Path of the file, relative to the working directory
            recursive: Copy a directory tree
            cwd: Working directory local_path is relative to

        Returns:
            SSHResult with scp's exit status
        """
        scp_cmd = self.context.build_copy_command(local_path, recursive=recursive)

        start_time = time.time()
        result = self.runner(scp_cmd, cwd=cwd)

        return SSHResult(
            returncode=result.returncode,
            host=self.context.ssh_host,
            command=" ".join(scp_cmd),
            duration_seconds=time.time() - start_time,
        )
