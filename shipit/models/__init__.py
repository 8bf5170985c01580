"""
shipit Domain Models

Clean dataclass-based models for type-safe data handling.
"""

from .config import (
    ConfigDocument,
    ResolvedTarget,
    Section,
)
from .results import (
    DeploymentOutcome,
    ExecutionResult,
    SSHResult,
)
from .ssh import DeploymentContext

__all__ = [
    # Config
    "ConfigDocument",
    "ResolvedTarget",
    "Section",
    # Results
    "DeploymentOutcome",
    "ExecutionResult",
    "SSHResult",
    # SSH
    "DeploymentContext",
]
