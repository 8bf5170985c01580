"""
shipit Base Command Classes

Abstract base classes for consistent command structure.
"""

from .base_command import BaseCommand
from .config_command import CliOptions, ConfigCommand

__all__ = [
    "BaseCommand",
    "CliOptions",
    "ConfigCommand",
]
