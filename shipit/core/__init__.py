"""
shipit Core

Config discovery, parsing, target resolution and the deployment engine.
"""

from .engine import DeploymentEngine
from .locator import locate_config
from .parser import parse_config, parse_config_text, render_document, render_section
from .resolver import list_targets, resolve_target, target_exists

__all__ = [
    "DeploymentEngine",
    "locate_config",
    "parse_config",
    "parse_config_text",
    "render_document",
    "render_section",
    "list_targets",
    "resolve_target",
    "target_exists",
]
