"""
Result Models

Dataclass models for operation results and command outputs.
"""

from dataclasses import dataclass


@dataclass
class ExecutionResult:
    """Result of a local script execution."""

    returncode: int
    command: str = ""
    duration_seconds: float = 0.0

    @property
    def is_success(self) -> bool:
        """Check if execution succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if execution failed."""
        return self.returncode != 0

    def __repr__(self) -> str:
        return f"ExecutionResult(returncode={self.returncode}, command='{self.command[:50]}...')"


@dataclass
class SSHResult:
    """Result of an SSH or scp execution."""

    returncode: int
    host: str = ""
    command: str = ""
    duration_seconds: float = 0.0

    @property
    def is_success(self) -> bool:
        """Check if SSH command succeeded."""
        return self.returncode == 0

    @property
    def is_failure(self) -> bool:
        """Check if SSH command failed."""
        return self.returncode != 0

    def __repr__(self) -> str:
        return f"SSHResult(host={self.host}, returncode={self.returncode}, duration={self.duration_seconds:.2f}s)"


@dataclass
class DeploymentOutcome:
    """Which phases a successful deploy ran."""

    target: str
    ran_local: bool = False
    ran_remote: bool = False

    @property
    def phases(self) -> list[str]:
        phases = []
        if self.ran_local:
            phases.append("local")
        if self.ran_remote:
            phases.append("remote")
        return phases
