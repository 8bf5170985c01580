"""
SSH Models

Deployment context shared by the remote session and the file copier.
"""

from dataclasses import dataclass

from shipit.constants import SCP_BINARY, SSH_BINARY


@dataclass(frozen=True)
class DeploymentContext:
    """Where and how to reach the remote side for one invocation."""

    ssh_host: str
    ssh_path: str
    verbose: bool = False

    @property
    def ssh_command_prefix(self) -> list[str]:
        """Get SSH command prefix for subprocess (agent forwarding on)."""
        cmd = [SSH_BINARY, "-A"]
        if self.verbose:
            cmd.append("-v")
        return cmd

    def build_command(self, remote_script: str, tty: bool = False) -> list[str]:
        """Build full SSH command running a script on the host."""
        cmd = self.ssh_command_prefix
        if tty:
            cmd.append("-t")
        return cmd + [self.ssh_host, remote_script]

    def remote_destination(self, relative_path: str) -> str:
        """scp destination for a path relative to the remote root."""
        return f"{self.ssh_host}:{self.ssh_path.rstrip('/')}/{relative_path}"

    def build_copy_command(self, local_path: str, recursive: bool = False) -> list[str]:
        """Build scp command copying a local path into the remote root."""
        cmd = [SCP_BINARY]
        if recursive:
            cmd.append("-r")
        if self.verbose:
            cmd.append("-v")
        return cmd + [local_path, self.remote_destination(local_path)]

    def __repr__(self) -> str:
        return f"DeploymentContext(host={self.ssh_host}, path={self.ssh_path})"
