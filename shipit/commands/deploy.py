"""Deploy command - run a target's local and remote scripts"""

import click

from shipit.base import CliOptions, ConfigCommand
from shipit.constants import DEFAULT_TARGET


class DeployCommand(ConfigCommand):
    """
    Deploy a target.

    Features:
    - Local phase runs first, in the current directory
    - Remote phase runs in the configured remote path
    - Remote phase skipped when the local phase fails
    """

    def __init__(self, options: CliOptions, target: str = DEFAULT_TARGET):
        super().__init__(options)
        self.target = target

    def execute(self) -> None:
        """Execute deploy command."""
        engine = self.ensure_engine(f"deploy-{self.target}")
        engine.load()

        self.show_header(
            title="Deploy",
            details={
                "Target": self.target,
                "Config": engine.config_path,
            },
        )

        outcome = engine.deploy(self.target)

        self.console.print()
        self.logger.success(
            f"Target '{self.target}' deployed ({' + '.join(outcome.phases)})"
        )
        if self.logger.log_path:
            self.print_dim(f"Logs saved to: {self.logger.log_path}")


def make_deploy_command(target: str) -> click.Command:
    """Build a command deploying the given target name."""

    @click.command(name=target, help=f"Deploy target '{target}'")
    @click.pass_obj
    def deploy_target(options: CliOptions):
        DeployCommand(options, target).run()

    return deploy_target
