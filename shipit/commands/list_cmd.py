"""List command - show the targets of the config file"""

import click

from shipit.base import CliOptions, ConfigCommand


class ListCommand(ConfigCommand):
    """List target names in declaration order."""

    def execute(self) -> None:
        """Execute list command."""
        engine = self.ensure_engine("list")
        targets = engine.list_targets()

        if self.json_output:
            self.output_json({"config": str(engine.config_path), "targets": targets})
            return

        self.show_header(title="Targets", details={"Config": engine.config_path})

        if not targets:
            self.print_dim("No targets defined")
            return

        for name in targets:
            self.console.print(f"  {name}", markup=False, highlight=False)


@click.command(name="list")
@click.option("--json", "json_output", is_flag=True, help="Output in JSON format")
@click.pass_obj
def list_targets(options: CliOptions, json_output):
    """
    List targets

    Examples:
        shipit list
        shipit ls --json
    """
    ListCommand(options, json_output=json_output).run()
