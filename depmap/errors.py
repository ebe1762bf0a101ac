"""Exceptions raised while ordering dependencies."""

from __future__ import annotations

from typing import Any


class DepMapError(Exception):
    """Base class for all depmap errors."""


class CyclicDependencyError(DepMapError):
    """Raised when an item depends, directly or transitively, on itself.

    Attributes:
        chain: Items forming the cycle, from the shallowest item on the
               exploration path to the item whose dependency closed it.
               For a -> b -> a this is [a, b]; a self-dependency gives [a].
    """

    def __init__(self, chain: list[Any]) -> None:
        self.chain = list(chain)
        super().__init__(self.chain)

    def __str__(self) -> str:
        loop = [*self.chain, self.chain[0]] if self.chain else []
        return "Dependency cycle detected: " + " -> ".join(str(i) for i in loop)
