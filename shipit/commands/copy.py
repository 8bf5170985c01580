"""Copy command - upload a file into the remote path"""

import click

from shipit.base import CliOptions, ConfigCommand


class CopyCommand(ConfigCommand):
    """Copy a local file to the same relative path on the remote host."""

    def __init__(self, options: CliOptions, local_file: str):
        super().__init__(options)
        self.local_file = local_file

    def execute(self) -> None:
        """Execute copy command."""
        engine = self.ensure_engine("copy")
        engine.copy_to_remote(self.local_file)
        self.logger.success(f"Copied {self.local_file}")


@click.command(name="copy")
@click.argument("file")
@click.pass_obj
def copy(options: CliOptions, file):
    """
    Copy a file to the remote host

    The file lands at <path>/<file> on the host.
    Alias: cp
    """
    CopyCommand(options, file).run()
