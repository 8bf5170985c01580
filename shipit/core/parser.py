"""
Config file parser.

A config file is a header block of key/value assignments followed by
script sections:

    host = example.com
    path = /var/www/app

    [deploy:local]
    npm run build

    [deploy]
    git pull

The header is read with a plain line parser; nothing in it is evaluated.
A section header is only recognised at the start of a block (first line
of the file or right after a blank line), so script lines such as
``[ -f x ] && y`` inside a body are left alone. Section names cannot start
with whitespace: a bracketed line opening with ``[ `` is a shell test and
stays part of the body even when it follows a blank line.
"""

import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from shipit.constants import LOCAL_SUFFIX, REQUIRED_HEADER_KEYS
from shipit.exceptions import (
    ConfigurationError,
    DuplicateSectionError,
    IncompleteConfigError,
    MalformedHeaderError,
    MalformedSectionError,
)
from shipit.models.config import ConfigDocument, Section

SECTION_PATTERN = re.compile(r"^\[([^:\]\s][^:\]]*)(:local)?\]$")
HEADER_LINE_PATTERN = re.compile(r"^([A-Za-z_][\w.-]*)\s*[=:]\s*(.*)$")


def parse_config(path: Union[str, Path]) -> ConfigDocument:
    """
    Read and parse a config file.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read config file: {path}", context=str(e))

    return parse_config_text(text)


def parse_config_text(text: str) -> ConfigDocument:
    """Parse config file contents into a validated ConfigDocument."""
    lines = text.splitlines()
    header, index = _parse_header(lines)
    sections = _parse_sections(lines, index)

    for key in REQUIRED_HEADER_KEYS:
        if not header.get(key):
            raise IncompleteConfigError(key)

    return ConfigDocument(header=header, sections=tuple(sections))


def render_section(section: Section) -> str:
    """Textual form of a single section, as it appears in a config file."""
    return f"{section.header}\n{section.body}\n"


def render_document(document: ConfigDocument) -> str:
    """Textual form of a whole document."""
    blocks = ["\n".join(f"{key} = {value}" for key, value in document.header.items())]
    blocks.extend(render_section(section).rstrip("\n") for section in document.sections)
    return "\n\n".join(blocks) + "\n"


def _is_block_start_section(line: str) -> bool:
    """Looks like a section header (validated separately)."""
    stripped = line.rstrip()
    if len(stripped) > 1 and stripped[1].isspace():
        return False
    return stripped.startswith("[") and stripped.endswith("]")


def _parse_header(lines: List[str]) -> Tuple[Dict[str, str], int]:
    """Parse the first block; returns the mapping and the next line index."""
    header: Dict[str, str] = {}
    index = 0

    while index < len(lines) and not lines[index].strip():
        index += 1

    # File without a header block
    if index < len(lines) and _is_block_start_section(lines[index]):
        return header, index

    while index < len(lines) and lines[index].strip():
        line = lines[index].strip()
        index += 1

        if line.startswith("#"):
            continue

        match = HEADER_LINE_PATTERN.match(line)
        if not match:
            raise MalformedHeaderError(line, index)

        key, value = match.group(1), _unquote(match.group(2).strip())
        header[key] = value

    return header, index


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_sections(lines: List[str], start: int) -> List[Section]:
    sections: List[Section] = []
    declared = set()

    name: Optional[str] = None
    is_local = False
    body: List[str] = []
    after_blank = True

    for index in range(start, len(lines)):
        line = lines[index]

        if after_blank and _is_block_start_section(line):
            match = SECTION_PATTERN.match(line.rstrip())
            if not match:
                raise MalformedSectionError(line.rstrip(), index + 1)

            if name is not None:
                sections.append(_build_section(name, is_local, body))

            name = match.group(1)
            is_local = match.group(2) == LOCAL_SUFFIX
            body = []

            key = (name, is_local)
            if key in declared:
                raise DuplicateSectionError(name + (LOCAL_SUFFIX if is_local else ""))
            declared.add(key)

        elif name is None:
            if line.strip():
                raise MalformedSectionError(line.rstrip(), index + 1)

        else:
            body.append(line)

        after_blank = not line.strip()

    if name is not None:
        sections.append(_build_section(name, is_local, body))

    return sections


def _build_section(name: str, is_local: bool, body: List[str]) -> Section:
    # Blank lines around the body belong to the block separators
    while body and not body[-1].strip():
        body.pop()
    while body and not body[0].strip():
        body.pop(0)
    return Section(name=name, is_local=is_local, body="\n".join(body))
