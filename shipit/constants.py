"""
shipit Constants

Centralized constants for magic values, defaults, and configuration.
"""

# Config file discovery
DEFAULT_CONFIG_NAME = ".shipit"
CONFIG_ENV_VAR = "SHIPIT_CONFIG"
REQUIRED_HEADER_KEYS = ("host", "path")

# Targets
DEFAULT_TARGET = "deploy"
LOCAL_SUFFIX = ":local"

# Transport binaries
SSH_BINARY = "ssh"
SCP_BINARY = "scp"
LOCAL_SHELL = "bash"

# Remote console
LOGIN_SHELL_COMMAND = '"${SHELL:-/bin/sh}" --login'

# Exit status reserved by the remote guard script for a missing directory
REMOTE_DIRECTORY_MISSING_EXIT = 66

# ssh exits with 255 when the connection itself fails
SSH_CONNECTION_FAILED_EXIT = 255

# Exit status reported when the local shell binary cannot be started
SHELL_NOT_FOUND_EXIT = 127

# Log Configuration
LOG_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
