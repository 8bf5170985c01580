"""
Config Command Base Class

Base class for commands that need the config file.
Provides lazy engine initialization.
"""

from dataclasses import dataclass
from typing import Optional

from shipit.constants import DEFAULT_CONFIG_NAME
from shipit.core.engine import DeploymentEngine
from .base_command import BaseCommand


@dataclass(frozen=True)
class CliOptions:
    """Global options shared by every command."""

    config_name: str = DEFAULT_CONFIG_NAME
    remote: Optional[str] = None
    verbose: bool = False
    log_file: Optional[str] = None


class ConfigCommand(BaseCommand):
    """
    Base class for commands working on the nearest config file.

    Provides:
    - Engine construction from the global options
    - Logger wired into the engine
    """

    def __init__(self, options: CliOptions, json_output: bool = False):
        super().__init__(verbose=options.verbose, json_output=json_output)
        self.options = options
        self.engine: Optional[DeploymentEngine] = None

    def ensure_engine(self, command_name: str) -> DeploymentEngine:
        """
        Ensure DeploymentEngine is initialized.

        Args:
            command_name: Command name used for the log

        Returns:
            DeploymentEngine instance
        """
        if self.engine is None:
            logger = self.init_logger(command_name, log_path=self.options.log_file)
            self.engine = DeploymentEngine(
                config_name=self.options.config_name,
                host_override=self.options.remote,
                verbose=self.options.verbose,
                logger=logger,
            )
        return self.engine
