"""
shipit Exception Hierarchy

Clean exception hierarchy for consistent error handling across the CLI.
"""

from typing import Optional


class ShipitError(Exception):
    """Base exception for all shipit errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class ConfigurationError(ShipitError):
    """Raised when configuration is invalid or missing."""

    pass


class DeploymentError(ShipitError):
    """Raised when a deployment phase fails."""

    pass


class ConfigNotFoundError(ConfigurationError):
    """Raised when no config file exists in any parent directory."""

    def __init__(self, file_name: str, start_dir: str):
        self.file_name = file_name
        self.start_dir = start_dir
        message = f"Config file '{file_name}' not found"
        context = f"Searched {start_dir} and all parent directories"
        super().__init__(message, context)


class IncompleteConfigError(ConfigurationError):
    """Raised when a required header key is missing or empty."""

    def __init__(self, missing_key: str):
        self.missing_key = missing_key
        message = f"Incomplete config: '{missing_key}' is not set"
        context = f"Add '{missing_key} = ...' to the header block"
        super().__init__(message, context)


class MalformedHeaderError(ConfigurationError):
    """Raised when a header line is not a key/value assignment."""

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        message = f"Malformed header line {line_number}: {line!r}"
        context = "Expected 'key = value'"
        super().__init__(message, context)


class MalformedSectionError(ConfigurationError):
    """Raised when a block does not start with a valid section header."""

    def __init__(self, line: str, line_number: int):
        self.line = line
        self.line_number = line_number
        message = f"Malformed section on line {line_number}: {line!r}"
        context = "Expected '[name]' or '[name:local]'"
        super().__init__(message, context)


class DuplicateSectionError(ConfigurationError):
    """Raised when the same section is declared twice."""

    def __init__(self, section_name: str):
        self.section_name = section_name
        message = f"Section '[{section_name}]' is declared more than once"
        super().__init__(message)


class TargetNotFoundError(ConfigurationError):
    """Raised when the requested target has no section."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        message = f"Target not found: {name}"
        context = (
            f"Available targets: {', '.join(available)}"
            if available
            else "No targets defined"
        )
        super().__init__(message, context)


class LocalScriptFailedError(DeploymentError):
    """Raised when the local phase of a target fails."""

    def __init__(self, target: str, returncode: int):
        self.target = target
        self.returncode = returncode
        message = "Local script failed"
        context = f"Target: {target}, exit code: {returncode}"
        super().__init__(message, context)


class RemoteScriptFailedError(DeploymentError):
    """Raised when the remote guard script exits non-zero."""

    def __init__(
        self,
        returncode: int,
        host: str,
        message: str = "Remote script failed",
        context: Optional[str] = None,
    ):
        self.returncode = returncode
        self.host = host
        if context is None:
            context = f"Host: {host}, exit code: {returncode}"
        super().__init__(message, context)


class RemoteDirectoryMissingError(RemoteScriptFailedError):
    """Raised when the remote script ends with the status reserved for a missing path.

    ssh output is streamed, not captured, so a script that exits with the same
    status itself cannot be told apart from the directory check.
    """

    def __init__(self, path: str, host: str, returncode: int):
        self.path = path
        super().__init__(
            returncode,
            host,
            message=f"Remote directory not found: {path}",
            context=(
                f"Host: {host} (exit code {returncode}, also returned when the remote "
                f"script itself exits with status {returncode})"
            ),
        )


class LocalFileNotFoundError(DeploymentError):
    """Raised when a file to copy does not exist locally."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Local file not found: {path}")
