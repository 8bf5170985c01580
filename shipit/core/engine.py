"""
Deployment engine.

Loads the nearest config file and runs targets: the local phase first, in
the caller's environment, then the remote phase over SSH. A failing local
phase means the remote phase never starts.
"""

import os
from pathlib import Path
from typing import Callable, Optional

from shipit.constants import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_TARGET,
    LOGIN_SHELL_COMMAND,
    REMOTE_DIRECTORY_MISSING_EXIT,
    SSH_CONNECTION_FAILED_EXIT,
)
from shipit.core.locator import locate_config
from shipit.core.parser import parse_config
from shipit.core.resolver import list_targets, resolve_target
from shipit.exceptions import (
    DeploymentError,
    LocalFileNotFoundError,
    LocalScriptFailedError,
    RemoteDirectoryMissingError,
    RemoteScriptFailedError,
    TargetNotFoundError,
)
from shipit.logger import DeployLogger
from shipit.models.config import ConfigDocument
from shipit.models.results import DeploymentOutcome, SSHResult
from shipit.models.ssh import DeploymentContext
from shipit.services.local_runner import LocalRunner
from shipit.services.ssh_service import FileCopier, RemoteSession


class DeploymentEngine:
    """
    Runs shipit operations against the nearest config file.

    The config is located and parsed once, on first use. The deployment
    context is built once from the header and the host override, and is
    not modified afterwards.
    """

    def __init__(
        self,
        config_name: str = DEFAULT_CONFIG_NAME,
        host_override: Optional[str] = None,
        verbose: bool = False,
        start_dir: Optional[str] = None,
        logger: Optional[DeployLogger] = None,
        local_runner: Optional[LocalRunner] = None,
        session_factory: Callable[[DeploymentContext], RemoteSession] = RemoteSession,
        copier_factory: Callable[[DeploymentContext], FileCopier] = FileCopier,
    ):
        """
        Initialize deployment engine.

        Args:
            config_name: Config file name searched for upward
            host_override: Host to use instead of the header's 'host'
            verbose: Ask the transport for diagnostic output
            start_dir: Directory the search starts in (default: cwd)
            logger: Progress reporter
            local_runner: Runner for local scripts
            session_factory: Builds the remote session for a context
            copier_factory: Builds the file copier for a context
        """
        self.config_name = config_name
        self.host_override = host_override
        self.verbose = verbose
        self.start_dir = start_dir
        self.logger = logger or DeployLogger("shipit", verbose=verbose)
        self.local_runner = local_runner or LocalRunner(cwd=start_dir)
        self.session_factory = session_factory
        self.copier_factory = copier_factory

        self.config_path: Optional[Path] = None
        self.document: Optional[ConfigDocument] = None
        self.context: Optional[DeploymentContext] = None

    def load(self) -> ConfigDocument:
        """Locate and parse the config file (cached)."""
        if self.document is None:
            self.config_path = locate_config(self.start_dir, self.config_name)
            self.logger.log(f"Config: {self.config_path}", "DEBUG")
            self.document = parse_config(self.config_path)
        return self.document

    def build_context(self) -> DeploymentContext:
        """Deployment context for this invocation (cached)."""
        if self.context is None:
            document = self.load()
            self.context = DeploymentContext(
                ssh_host=self.host_override or document.host,
                ssh_path=document.path,
                verbose=self.verbose,
            )
            self.logger.log(f"Remote: {self.context.ssh_host}:{self.context.ssh_path}", "DEBUG")
        return self.context

    def deploy(self, target_name: str = DEFAULT_TARGET) -> DeploymentOutcome:
        """
        Run a target's local phase, then its remote phase.

        Args:
            target_name: Target to deploy

        Returns:
            DeploymentOutcome listing the phases that ran

        Raises:
            TargetNotFoundError: If the target has no section
            LocalScriptFailedError: If the local phase fails
            RemoteScriptFailedError: If the remote phase fails
        """
        document = self.load()
        target = resolve_target(document, target_name)
        if not target.exists:
            raise TargetNotFoundError(target_name, list_targets(document))

        context = self.build_context()
        outcome = DeploymentOutcome(target=target_name)

        if target.has_local:
            self.logger.step(f"Running local script: {target_name}")
            self.logger.log_command(target.local_script)

            result = self.local_runner.run(target.local_script)
            if result.is_failure:
                raise LocalScriptFailedError(target_name, result.returncode)
            outcome.ran_local = True

        if target.has_remote:
            self.logger.step(f"Running remote script: {target_name} on {context.ssh_host}")
            self.logger.log_command(target.remote_script)

            result = self.session_factory(context).run(target.remote_script)
            self._check_remote_result(result)
            outcome.ran_remote = True

        return outcome

    def list_targets(self) -> list[str]:
        """Names of all targets in the config file."""
        return list_targets(self.load())

    def open_console(self) -> SSHResult:
        """Open an interactive login shell in the remote path."""
        context = self.build_context()
        self.logger.log(f"Opening console on {context.ssh_host}", "DEBUG")

        result = self.session_factory(context).run(LOGIN_SHELL_COMMAND, tty=True)
        self._check_remote_result(result)
        return result

    def exec_command(self, cmdline: str) -> SSHResult:
        """Run a command line in the remote path."""
        context = self.build_context()
        self.logger.log_command(cmdline)

        result = self.session_factory(context).run(cmdline)
        self._check_remote_result(result)
        return result

    def copy_to_remote(self, local_file: str) -> SSHResult:
        """
        Copy a local file to the same relative path under the remote root.

        Raises:
            LocalFileNotFoundError: If the file does not exist locally
            DeploymentError: If scp fails
        """
        self.load()

        local_path = Path(self.start_dir or os.getcwd()) / local_file
        if not local_path.exists():
            raise LocalFileNotFoundError(local_file)

        context = self.build_context()
        self.logger.step(f"Copying {local_file} to {context.remote_destination(local_file)}")

        result = self.copier_factory(context).copy(
            local_file, recursive=local_path.is_dir(), cwd=self.start_dir
        )
        if result.is_failure:
            raise DeploymentError(
                f"Copy failed: {local_file}",
                context=f"Host: {context.ssh_host}, exit code: {result.returncode}",
            )
        return result

    def _check_remote_result(self, result: SSHResult) -> None:
        if result.is_success:
            return

        context = self.build_context()
        if result.returncode == REMOTE_DIRECTORY_MISSING_EXIT:
            raise RemoteDirectoryMissingError(context.ssh_path, context.ssh_host, result.returncode)
        if result.returncode == SSH_CONNECTION_FAILED_EXIT:
            raise RemoteScriptFailedError(
                result.returncode,
                context.ssh_host,
                context=f"Could not connect to {context.ssh_host} (ssh exit code {result.returncode})",
            )
        raise RemoteScriptFailedError(result.returncode, context.ssh_host)
