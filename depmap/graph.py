"""Dependency ordering for lazily discovered graphs.

The graph does not need to be known up front: a producer function is asked
for an item's direct dependencies only when the walk reaches that item.
Every item lands in the result after all of its dependencies, items reached
through several paths are produced once, and cycles are reported with the
exact chain of items involved.

The walk is a depth-first search flattened into a stack of layers. Layer
``i`` holds the pending siblings at depth ``i`` and its first element is
the item being visited at that depth, so the first elements of the in-use
layers, read in order, form the path from a root to the item currently
being expanded.

Example:
    >>> deps = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []}
    >>> process(["a"], lambda item: deps[item])
    ['d', 'b', 'c', 'a']
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Generic, TypeVar

from .errors import CyclicDependencyError

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class DepMap(Generic[T]):
    """Pending work and finished result of a single dependency walk.

    Items only need ``==``; membership checks are linear scans over the
    result and the current path.

    Use :meth:`process` to run a walk to completion, or drive it step by
    step with :meth:`add` and collect the order with :meth:`finish`.
    """

    def __init__(self, initial: Iterable[T]) -> None:
        first = list(initial)
        # Layers at index >= _used are empty and kept for reuse.
        self._layers: list[list[T]] = [first]
        self._used = 1 if first else 0
        self._result: list[T] = []

    @classmethod
    def process(
        cls, initial: Iterable[T], producer: Callable[[T], Iterable[T]]
    ) -> list[T]:
        """Walk the whole graph reachable from ``initial``.

        Args:
            initial: Items to start from, visited in order.
            producer: Called once per item with that item; returns or
                      yields its direct dependencies.

        Returns:
            Every reachable item exactly once, dependencies first.

        Raises:
            CyclicDependencyError: If a dependency loops back onto the
                current path.
            Exception: Anything the producer raises, unchanged.
        """
        state = cls(initial)
        while True:
            result = state.finish()
            if result is not None:
                return result
            cycle = state.add(producer)
            if cycle is not None:
                raise CyclicDependencyError(cycle)

    def __len__(self) -> int:
        return self._used

    def is_empty(self) -> bool:
        """Whether nothing is left to work on."""
        return self._used == 0

    @property
    def path(self) -> list[T]:
        """Items on the current exploration path, root first."""
        return [layer[0] for layer in self._layers[: self._used]]

    @property
    def result(self) -> list[T]:
        """Items finalized so far, in order."""
        return list(self._result)

    def finish(self) -> list[T] | None:
        """Return the result list if the walk is done, else None."""
        if self.is_empty():
            return self._result
        return None

    def add(self, producer: Callable[[T], Iterable[T]]) -> list[T] | None:
        """Expand the deepest item on the path by one step.

        Dependencies that are already finalized are skipped. The rest are
        queued one level deeper, or, when none are left, the item is
        finalized along with any ancestors that are now complete.

        When a dependency is already on the current path, the item stays on
        the path but none of its dependencies are queued, and the cycle is
        returned as a fresh list, shallowest item first.

        Does nothing and returns None when the walk is already done.
        """
        if self.is_empty():
            return None

        free = self._take_free_layer()
        try:
            cycle_at = self._collect(producer(self._layers[self._used - 1][0]), free)
        except Exception:
            self._release(free)
            raise

        if cycle_at is not None:
            self._release(free)
            return self.path[cycle_at:]

        if free:
            self._layers.insert(self._used, free)
            self._used += 1
        else:
            self._release(free)
            self._drop_cur()
        return None

    def _collect(self, deps: Iterable[T], into: list[T]) -> int | None:
        """Queue unseen deps into ``into``; return the path depth of a cycle."""
        for dep in deps:
            if self._is_done(dep):
                continue
            for depth in range(self._used):
                if self._layers[depth][0] == dep:
                    return depth
            into.append(dep)
        return None

    def _is_done(self, item: T) -> bool:
        return any(done == item for done in self._result)

    def _take_free_layer(self) -> list[T]:
        if self._used < len(self._layers):
            return self._layers.pop()
        return []

    def _release(self, layer: list[T]) -> None:
        layer.clear()
        self._layers.append(layer)

    def _drop_cur(self) -> None:
        """Finalize the deepest item and every ancestor it completes."""
        while self._used > 0:
            layer = self._layers[self._used - 1]
            self._result.append(layer.pop(0))
            # Siblings finalized through another path are dropped, not repeated.
            while layer and self._is_done(layer[0]):
                layer.pop(0)
            if layer:
                return
            self._used -= 1


def process(initial: Iterable[T], producer: Callable[[T], Iterable[T]]) -> list[T]:
    """Order everything reachable from ``initial``; see :meth:`DepMap.process`."""
    return DepMap.process(initial, producer)


def resolve(graph: Mapping[H, Iterable[H]], roots: Iterable[H] | None = None) -> list[H]:
    """Order a graph that is already fully known.

    Args:
        graph: Map of item → direct dependencies. Items that are not keys
               are treated as having no dependencies.
        roots: Items to start from. Defaults to every key, in mapping order.
    """
    initial = list(graph) if roots is None else list(roots)
    return process(initial, lambda item: graph.get(item, ()))
