"""TOML reading utilities.

Uses tomlkit to read pyproject.toml files, both for uv workspace layout
and for hand-written ``[tool.depmap]`` dependency manifests.
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from packaging.utils import canonicalize_name
from pydantic import ValidationError

from .console import fatal
from .models import Manifest


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def get_project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Extract the canonical package name from [project].name.

    Names are normalized per PEP 503 (lowercase, hyphens instead of
    underscores) for consistent comparison.

    Args:
        doc: Parsed pyproject.toml document.
        fallback: Value to return if name is not specified.
    """
    return canonicalize_name(doc.get("project", {}).get("name", fallback))


def get_project_version(doc: tomlkit.TOMLDocument) -> str:
    """Extract version from [project].version, defaulting to '0.0.0'."""
    return doc.get("project", {}).get("version", "0.0.0")


def get_all_dependency_strings(doc: tomlkit.TOMLDocument) -> list[str]:
    """Collect all dependency strings from a pyproject.toml.

    Gathers dependencies from three locations:
    - [project].dependencies (main runtime deps)
    - [project].optional-dependencies.* (extras like [dev], [test])
    - [dependency-groups].* (PEP 735 dependency groups)

    Entries in dependency groups that are not strings (such as
    ``{include-group = "..."}``) are skipped.
    """
    project = doc.get("project", {})
    deps: list[str] = list(project.get("dependencies", []))
    for group_deps in project.get("optional-dependencies", {}).values():
        deps.extend(group_deps)
    for group_deps in doc.get("dependency-groups", {}).values():
        deps.extend(d for d in group_deps if isinstance(d, str))
    return [str(d) for d in deps]


def get_workspace_member_globs(doc: tomlkit.TOMLDocument) -> list[str]:
    """Extract workspace member glob patterns from [tool.uv.workspace].

    Raises:
        SystemExit: If no workspace members are defined.
    """
    members = doc.get("tool", {}).get("uv", {}).get("workspace", {}).get("members")
    if not members:
        fatal("No [tool.uv.workspace] members defined in root pyproject.toml")
    return [str(m) for m in members]


def get_manifest(doc: tomlkit.TOMLDocument) -> Manifest:
    """Read the [tool.depmap] dependency manifest.

    Raises:
        SystemExit: If the table is missing or has the wrong shape.
    """
    table = doc.get("tool", {}).get("depmap")
    if table is None:
        fatal("No [tool.depmap] table defined in manifest")
    try:
        return Manifest.model_validate(table.unwrap())
    except ValidationError as exc:
        fatal(f"Invalid [tool.depmap] table:\n{exc}")
