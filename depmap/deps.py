"""Dependency string handling.

Parses PEP 508 dependency strings so workspace packages can be matched
against each other by canonical name.
"""

from __future__ import annotations

from packaging.requirements import Requirement
from packaging.utils import canonicalize_name


def dep_canonical_name(dep_str: str) -> str:
    """Extract the canonical package name from a PEP 508 dependency string.

    Handles version specifiers, extras, and environment markers, and
    normalizes the name per PEP 503 (lowercase, hyphens instead of
    underscores).

    Examples:
        "requests>=2.0" → "requests"
        "My_Package[extra]~=1.0" → "my-package"
        "tomli; python_version < '3.11'" → "tomli"
    """
    return canonicalize_name(Requirement(dep_str).name)
