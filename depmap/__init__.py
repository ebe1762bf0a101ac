"""Dependency-first ordering for lazily discovered dependency graphs."""

from .errors import CyclicDependencyError, DepMapError
from .graph import DepMap, process, resolve

__all__ = ["CyclicDependencyError", "DepMap", "DepMapError", "process", "resolve"]
