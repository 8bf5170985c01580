"""
Logging system for shipit
Provides clean console output with an optional plain-text log file
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO, Union

from rich.console import Console
from rich.markup import escape

from shipit.constants import LOG_DATETIME_FORMAT

ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


class DeployLogger:
    """
    Reports progress of a shipit operation
    - Announces phases and outcomes on the console
    - Mirrors every message to a log file when one is given
    - Captures errors with context
    """

    def __init__(
        self,
        operation: str,
        verbose: bool = False,
        log_path: Optional[Union[str, Path]] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize logger

        Args:
            operation: Operation name (e.g., 'deploy', 'exec', 'copy')
            verbose: If True, show debug messages in console
            log_path: Optional file to append a plain-text log to
            console: Rich Console to print to (new Console by default)
        """
        self.operation = operation
        self.verbose = verbose
        self.console = console or Console()
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = Path(log_path) if log_path else None
        self.current_step = ""
        self.has_errors = False

        if self.log_path:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self.log_file = open(self.log_path, "a", buffering=1, encoding="utf-8")
            self._write_log_header()

    def _write_log_header(self):
        """Write log file header"""
        header = f"""
{"=" * 80}
shipit log
{"=" * 80}
Operation: {self.operation}
Started: {datetime.now().isoformat()}
{"=" * 80}

"""
        self.log_file.write(header)
        self.log_file.flush()

    def _write(self, line: str) -> None:
        if self.log_file:
            self.log_file.write(ANSI_ESCAPE.sub("", line) + "\n")
            self.log_file.flush()

    def log(self, message: str, level: str = "INFO"):
        """
        Log a message to file and optionally console

        Args:
            message: Message to log
            level: Log level (INFO, WARNING, ERROR, DEBUG)
        """
        timestamp = datetime.now().strftime(LOG_DATETIME_FORMAT)
        self._write(f"[{timestamp}] [{level}] {message}")

        if self.verbose:
            if level == "ERROR":
                self.console.print(f"[red]{escape(message)}[/red]")
            elif level == "WARNING":
                self.console.print(f"[yellow]{escape(message)}[/yellow]")
            elif level == "DEBUG":
                self.console.print(f"[dim]{escape(message)}[/dim]")
            else:
                self.console.print(message, markup=False)

    def log_command(self, command: str):
        """Log a command being executed"""
        self.log(f"Executing: {command}", "DEBUG")

    def log_error(self, error: str, context: Optional[str] = None):
        """
        Log an error with context

        Args:
            error: Error message
            context: Additional context (e.g., exit code)
        """
        self.has_errors = True

        if self.log_file:
            error_block = f"""
{"!" * 80}
ERROR OCCURRED
{"!" * 80}
{error}
"""
            if context:
                error_block += f"\nContext: {context}\n"
            error_block += f"{'!' * 80}\n"
            self._write(error_block)

        self.console.print()
        self.console.print(f"[bold red]✗ {escape(error)}[/bold red]")
        if context:
            self.console.print(f"  [color(208)]{escape(context)}[/color(208)]")

    def step(self, step_name: str):
        """
        Start a new step

        Args:
            step_name: Name of the step
        """
        if self.current_step:
            self.console.print()

        self.current_step = step_name
        self._write(f"Step: {step_name}")
        self.console.print(f"[color(214)]▶[/color(214)] [bold white]{escape(step_name)}[/bold white]")

    def success(self, message: str):
        """Log a success message"""
        self._write(f"OK: {message}")
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def close(self):
        """Close log file"""
        if self.log_file:
            footer = f"""
{"=" * 80}
Completed: {datetime.now().isoformat()}
Status: {"FAILED" if self.has_errors else "SUCCESS"}
{"=" * 80}
"""
            self.log_file.write(footer)
            self.log_file.close()
            self.log_file = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, _exc_tb):
        """Context manager exit"""
        if exc_type is not None and exc_type not in (SystemExit, KeyboardInterrupt):
            self.has_errors = True
        self.close()
        return False
