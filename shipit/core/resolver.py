"""Target resolution against a parsed config document."""

from shipit.models.config import ConfigDocument, ResolvedTarget


def resolve_target(document: ConfigDocument, name: str) -> ResolvedTarget:
    """
    Get the local and remote scripts declared for a target.

    Either script is None when its section is absent; both None means the
    target does not exist.
    """
    local_section = document.find_section(name, is_local=True)
    remote_section = document.find_section(name, is_local=False)

    return ResolvedTarget(
        name=name,
        local_script=local_section.body if local_section else None,
        remote_script=remote_section.body if remote_section else None,
    )


def target_exists(document: ConfigDocument, name: str) -> bool:
    """Check whether a target has at least one section."""
    return resolve_target(document, name).exists


def list_targets(document: ConfigDocument) -> list[str]:
    """Unique target names in declaration order (':local' stripped)."""
    seen = set()
    names = []
    for section in document.sections:
        if section.name not in seen:
            seen.add(section.name)
            names.append(section.name)
    return names
