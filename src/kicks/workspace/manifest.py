"""Gemfile patching for dependency sources."""

import re
from collections.abc import Collection, Sequence
from pathlib import Path

from kicks.core.dependency_sources import DependencyBinding

MANIFEST_FILENAME = "Gemfile"

ASSET_PIPELINE_GEMS = (
    "sprockets-rails",
    "sassc-rails",
    "importmap-rails",
)

_GEM_DECLARATION = re.compile(r"""^\s*gem\s+["']([^"']+)["']""", re.MULTILINE)


def declared_gems(manifest_text: str) -> set[str]:
    """Names of gems declared in Gemfile text. Commented-out declarations are ignored."""
    return set(_GEM_DECLARATION.findall(manifest_text))


def render_dependency_block(
    bindings: Sequence[DependencyBinding],
    *,
    any_local: bool,
    already_declared: Collection[str] = (),
) -> str:
    """Render the lines appended to the Gemfile.

    Asset pipeline gems the generated Gemfile already declares are left out.

    Args:
        bindings: Resolved dependency sources, in declaration order
        any_local: Whether any local flag was given
        already_declared: Gem names present in the Gemfile before patching

    Returns:
        Text to append, starting and ending with a newline
    """
    lines = ["", "# kicks engines"]
    lines.extend(binding.gemfile_line() for binding in bindings)

    if any_local:
        missing = [gem for gem in ASSET_PIPELINE_GEMS if gem not in already_declared]
        if missing:
            lines.append("")
            lines.append("# Asset pipeline for local engine development")
            lines.extend(f'gem "{gem}"' for gem in missing)

    return "\n".join(lines) + "\n"


def append_dependencies(
    workspace: Path, bindings: Sequence[DependencyBinding], *, any_local: bool
) -> Path:
    """Append dependency declarations to the workspace Gemfile in one write.

    Args:
        workspace: Workspace directory
        bindings: Fully resolved dependency sources
        any_local: Whether any local flag was given

    Returns:
        Path to the Gemfile
    """
    manifest = workspace / MANIFEST_FILENAME
    existing = declared_gems(manifest.read_text(encoding="utf-8")) if manifest.exists() else set()
    block = render_dependency_block(bindings, any_local=any_local, already_declared=existing)
    with manifest.open("a", encoding="utf-8") as f:
        f.write(block)
    return manifest
