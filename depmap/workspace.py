"""uv workspace discovery and build ordering.

Finds the packages of a uv workspace, records which of them depend on each
other, and orders them so every package comes after the workspace packages
it depends on.
"""

from __future__ import annotations

import glob
from collections.abc import Callable, Iterable
from pathlib import Path

from packaging.utils import canonicalize_name

from .console import fatal
from .deps import dep_canonical_name
from .graph import process
from .models import PackageInfo
from .toml import (
    get_all_dependency_strings,
    get_project_name,
    get_project_version,
    get_workspace_member_globs,
    load_pyproject,
)


def _member_dirs(root: Path, patterns: Iterable[str]) -> list[Path]:
    """Expand member globs to directories holding a pyproject.toml."""
    return [
        Path(match)
        for pattern in patterns
        for match in sorted(glob.glob(str(root / pattern)))
        if (Path(match) / "pyproject.toml").exists()
    ]


def discover_packages(root: Path | None = None) -> dict[str, PackageInfo]:
    """Read every package of the uv workspace at ``root``.

    Package names and their deps are canonicalized per PEP 503. Only deps on
    other workspace packages are kept, once each, in declaration order.

    Args:
        root: Workspace root. Defaults to the current directory.

    Returns:
        Map of canonical package name to PackageInfo.
    """
    root = root or Path.cwd()
    member_globs = get_workspace_member_globs(load_pyproject(root / "pyproject.toml"))
    dirs = _member_dirs(root, member_globs)
    if not dirs:
        fatal("No packages found matching workspace members")

    docs = {d: load_pyproject(d / "pyproject.toml") for d in dirs}
    names = {d: get_project_name(doc, d.name) for d, doc in docs.items()}
    workspace = set(names.values())

    packages: dict[str, PackageInfo] = {}
    for d, doc in docs.items():
        declared = (dep_canonical_name(s) for s in get_all_dependency_strings(doc))
        packages[names[d]] = PackageInfo(
            path=d.relative_to(root).as_posix(),
            version=get_project_version(doc),
            deps=list(dict.fromkeys(n for n in declared if n in workspace)),
        )
    return packages


def build_order(
    packages: dict[str, PackageInfo],
    targets: Iterable[str] | None = None,
    *,
    on_expand: Callable[[str, list[str]], None] | None = None,
) -> list[str]:
    """Order packages so dependencies are built before their dependents.

    Only the packages reachable from ``targets`` are ordered; each package's
    deps are read the first time the walk reaches it. Roots are visited in
    sorted order so the output is deterministic.

    Args:
        packages: Map of package name → PackageInfo with deps list.
        targets: Packages to build, matched by canonical name. Defaults to
                 all packages.
        on_expand: Called with each package and its deps as they are read.

    Returns:
        List of package names in build order (dependencies first).

    Raises:
        KeyError: If a target is not a workspace package.
        CyclicDependencyError: If the packages depend on each other in a loop.

    Example:
        If A depends on B, and B depends on C:
        build_order({A, B, C}) → [C, B, A]
    """
    if targets is None:
        roots = sorted(packages)
    else:
        roots = sorted({canonicalize_name(t) for t in targets})
    unknown = [name for name in roots if name not in packages]
    if unknown:
        raise KeyError(f"Not workspace packages: {', '.join(unknown)}")

    def internal_deps(name: str) -> list[str]:
        # Deps outside ``packages`` (e.g. unchanged ones) are already built
        deps = [dep for dep in packages[name].deps if dep in packages]
        if on_expand is not None:
            on_expand(name, deps)
        return deps

    return process(roots, internal_deps)
