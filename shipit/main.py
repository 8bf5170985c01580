#!/usr/bin/env python3
"""shipit CLI - Main entry point"""

import functools
import os
import sys

from rich.console import Console
from rich.markup import escape

import rich_click as click

from shipit import __version__
from shipit.base import CliOptions
from shipit.commands.console import console as console_command
from shipit.commands.copy import copy
from shipit.commands.deploy import DeployCommand, make_deploy_command
from shipit.commands.list_cmd import list_targets
from shipit.commands.run_cmd import exec_command
from shipit.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_NAME, DEFAULT_TARGET

click.rich_click.USE_RICH_MARKUP = False
click.rich_click.USE_MARKDOWN = False
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.MAX_WIDTH = 100

click.rich_click.STYLE_COMMAND = "bold cyan"
click.rich_click.STYLE_OPTION = "bold magenta"
click.rich_click.STYLE_SWITCH = "bold green"
click.rich_click.STYLE_ARGUMENT = "bold yellow"
click.rich_click.STYLE_USAGE = "bold yellow"
click.rich_click.STYLE_OPTION_DEFAULT = "dim cyan"

console = Console()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

COMMAND_ALIASES = {
    "ls": "list",
    "shell": "console",
    "ssh": "console",
    "run": "exec",
    "cp": "copy",
}


def handle_cli_errors(func):
    """Decorator to handle CLI errors gracefully."""
    from click.exceptions import ClickException

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ClickException as e:
            e.show()
            sys.exit(e.exit_code)
        except KeyboardInterrupt:
            console.print("\n\n[yellow]⚠️  Operation cancelled by user[/yellow]")
            sys.exit(130)
        except Exception as e:
            console.print(f"\n[bold red]✗ Unexpected error:[/bold red] {escape(str(e))}\n")

            if os.environ.get("DEBUG"):
                import traceback

                console.print("[dim]Traceback:[/dim]")
                traceback.print_exc()
            sys.exit(1)

    return wrapper


class TargetGroup(click.RichGroup):
    """Click group where any unknown command name is a target to deploy"""

    def get_command(self, ctx, cmd_name):
        cmd_name = COMMAND_ALIASES.get(cmd_name, cmd_name)

        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command

        return make_deploy_command(cmd_name)


@click.group(
    cls=TargetGroup,
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--config",
    "-c",
    "config_name",
    default=DEFAULT_CONFIG_NAME,
    envvar=CONFIG_ENV_VAR,
    show_default=True,
    help="Config file name to search for",
)
@click.option("--remote", "-r", help="Remote host (overrides 'host' in the config)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output (ssh -v)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    help="Also write a plain-text log to this file",
)
@click.version_option(__version__, "--version", "-V", prog_name="shipit")
@click.pass_context
def cli(ctx: click.Context, config_name, remote, verbose, log_file) -> None:
    """
    shipit - Minimal remote deployment.

    Looks for a .shipit file in the current directory or any parent and
    runs a target: its [target:local] script here, then its [target]
    script on the remote host.

    \b
    Usage:
      shipit                  # Deploy the 'deploy' target
      shipit <target>         # Deploy another target
      shipit list             # List targets (alias: ls)
      shipit console          # Remote shell (aliases: shell, ssh)
      shipit exec <command>   # Remote command (alias: run)
      shipit copy <file>      # Upload a file (alias: cp)
    """
    ctx.obj = CliOptions(
        config_name=config_name,
        remote=remote,
        verbose=verbose,
        log_file=log_file,
    )

    if ctx.invoked_subcommand is None:
        DeployCommand(ctx.obj, DEFAULT_TARGET).run()


# Register commands
cli.add_command(list_targets)
cli.add_command(console_command)
cli.add_command(exec_command)
cli.add_command(copy)


@handle_cli_errors
def main():
    """Main entry point with error handling."""
    cli()


if __name__ == "__main__":
    main()
