"""
Exec Command

Execute a command line in the remote path.
"""

import click

from shipit.base import CliOptions, ConfigCommand


class ExecCommand(ConfigCommand):
    """
    Execute a command on the remote host.

    Features:
    - Runs inside the configured remote path
    - Stops on the first failing command
    - Exit status checked like a remote deploy phase
    """

    def __init__(self, options: CliOptions, command: str):
        super().__init__(options)
        self.command = command

    def execute(self) -> None:
        """Execute exec command."""
        engine = self.ensure_engine("exec")
        context = engine.build_context()

        self.show_header(
            title="Run Command",
            details={"Host": context.ssh_host, "Command": self.command},
        )

        engine.exec_command(self.command)


@click.command(
    name="exec",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def exec_command(options: CliOptions, command):
    """
    Run a command on the remote host

    Examples:
        # Run database migrations
        shipit exec php artisan migrate

        # Inspect the remote directory
        shipit run ls -la

    Alias: run
    """
    ExecCommand(options, " ".join(command)).run()
