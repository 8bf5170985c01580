"""
Config Models

Dataclass models for a parsed config file and a resolved target.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Section:
    """One named script block of a config file."""

    name: str
    is_local: bool
    body: str

    @property
    def header(self) -> str:
        """Section header as written in the config file."""
        suffix = ":local" if self.is_local else ""
        return f"[{self.name}{suffix}]"

    def __repr__(self) -> str:
        return f"Section({self.header}, lines={len(self.body.splitlines())})"


@dataclass(frozen=True)
class ConfigDocument:
    """Parsed config file: header key/values plus ordered sections."""

    header: Dict[str, str] = field(default_factory=dict)
    sections: Tuple[Section, ...] = ()

    @property
    def host(self) -> str:
        return self.header["host"]

    @property
    def path(self) -> str:
        return self.header["path"]

    def find_section(self, name: str, is_local: bool) -> Optional[Section]:
        """Get the section for a base name and variant, if declared."""
        for section in self.sections:
            if section.name == name and section.is_local == is_local:
                return section
        return None


@dataclass(frozen=True)
class ResolvedTarget:
    """Scripts a target runs in each phase."""

    name: str
    local_script: Optional[str] = None
    remote_script: Optional[str] = None

    @property
    def exists(self) -> bool:
        """A target with neither script is not declared at all."""
        return self.local_script is not None or self.remote_script is not None

    @property
    def has_local(self) -> bool:
        return self.local_script is not None

    @property
    def has_remote(self) -> bool:
        return self.remote_script is not None
