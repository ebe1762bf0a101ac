"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit


def _write_workspace(root: Path, packages: dict[str, list[str]]) -> None:
    (root / "pyproject.toml").write_text(
        '[tool.uv.workspace]\nmembers = ["packages/*"]\n'
    )
    for name, deps in packages.items():
        package_dir = root / "packages" / name
        package_dir.mkdir(parents=True)
        dep_lines = "".join(f'    "{d}",\n' for d in deps)
        (package_dir / "pyproject.toml").write_text(
            f'[project]\nname = "{name}"\nversion = "1.0.0"\n'
            f"dependencies = [\n{dep_lines}]\n"
        )


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml file."""
    content = """\
[project]
name = "test-package"
version = "1.0.0"
dependencies = [
    "requests>=2.0",
    "internal-dep>=1.0",
]

[project.optional-dependencies]
dev = ["pytest>=8.0", "another-internal>=0.5"]

[dependency-groups]
test = ["pytest>=8.0", "group-internal>=0.1", {include-group = "dev"}]
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """Create a dependency manifest with a diamond under ``app``."""
    content = """\
[tool.depmap]
roots = ["app"]

[tool.depmap.deps]
app = ["lib", "cli"]
lib = ["util"]
cli = ["util"]
"""
    manifest = tmp_path / "deps.toml"
    manifest.write_text(content)
    return manifest


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """Create a sample TOML document."""
    content = """\
[project]
name = "my-package"
version = "2.0.0"
dependencies = ["click>=8.0", "pydantic>=2.0"]

[project.optional-dependencies]
dev = ["pytest>=8.0"]
docs = ["sphinx>=7.0"]

[dependency-groups]
test = ["hypothesis>=6.0"]

[tool.uv.workspace]
members = ["packages/*", "libs/*"]

[tool.depmap]
deps = { app = ["lib"], lib = [] }
"""
    return tomlkit.parse(content)


@pytest.fixture
def make_workspace():
    """Return a helper that writes a uv workspace, one package per entry."""
    return _write_workspace
