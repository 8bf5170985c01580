"""
shipit Services Layer

Local and remote execution used by the deployment engine.
"""

from .local_runner import LocalRunner
from .ssh_service import FileCopier, RemoteSession

__all__ = [
    "LocalRunner",
    "FileCopier",
    "RemoteSession",
]
