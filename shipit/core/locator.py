"""Upward search for the config file."""

import os
from pathlib import Path
from typing import Optional, Union

from shipit.constants import DEFAULT_CONFIG_NAME
from shipit.exceptions import ConfigNotFoundError


def locate_config(
    start_dir: Optional[Union[str, Path]] = None,
    file_name: str = DEFAULT_CONFIG_NAME,
) -> Path:
    """
    Find the nearest config file at or above a directory.

    Args:
        start_dir: Directory to start from (default: current working directory)
        file_name: Config file name to look for

    Returns:
        Absolute path to the first matching file

    Raises:
        ConfigNotFoundError: If no directory up to and including root has it
    """
    start = Path(start_dir if start_dir is not None else os.getcwd()).resolve()
    current = start

    # One iteration per path component; root is its own parent
    for _ in range(len(current.parts)):
        candidate = current / file_name
        if candidate.is_file():
            return candidate

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigNotFoundError(file_name, str(start))
