"""Console command - interactive shell on the remote host"""

import click

from shipit.base import CliOptions, ConfigCommand


class ConsoleCommand(ConfigCommand):
    """Open a login shell in the remote path (with TTY)."""

    def execute(self) -> None:
        """Execute console command."""
        engine = self.ensure_engine("console")
        context = engine.build_context()

        self.show_header(
            title="Console",
            details={"Host": context.ssh_host, "Path": context.ssh_path},
        )

        engine.open_console()


@click.command(name="console")
@click.pass_obj
def console(options: CliOptions):
    """
    Open a shell on the remote host

    The shell starts in the remote path from the config file.
    Aliases: shell, ssh
    """
    ConsoleCommand(options).run()
