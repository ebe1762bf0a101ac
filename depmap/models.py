"""Data models for depmap.

These Pydantic models describe the dependency declarations that the CLI
feeds into the ordering engine.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PackageInfo(BaseModel):
    """Metadata for a single package in a uv workspace.

    Attributes:
        path: Relative path from workspace root to the package directory.
        version: Current version string from pyproject.toml.
        deps: List of internal (workspace) dependency names. External deps
              are not tracked since they never take part in build order.
    """

    path: str
    version: str
    deps: list[str] = Field(default_factory=list)


class Manifest(BaseModel):
    """Dependency declarations from a ``[tool.depmap]`` table.

    Attributes:
        roots: Items to start ordering from. When empty, every item that
               declares dependencies is a root, in declaration order.
        deps: Map of item → its direct dependencies. Items that never
              appear as a key have no dependencies.
    """

    roots: list[str] = Field(default_factory=list)
    deps: dict[str, list[str]] = Field(default_factory=dict)

    def initial(self) -> list[str]:
        return list(self.roots) if self.roots else list(self.deps)

    def dependencies_of(self, item: str) -> list[str]:
        return self.deps.get(item, [])
