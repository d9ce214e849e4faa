"""Timeout-bounded lookup of hierarchy nodes."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.exceptions import PredicateError
from ..core.logger import log
from ..drivers.base import Driver
from ..hierarchy.models import TreeNode, UiElement
from ..hierarchy.search import Predicate, find_all, find_first


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a lookup.

    ``hierarchy`` is the last snapshot searched, whether or not it matched.
    """

    element: Optional[UiElement]
    hierarchy: TreeNode
    attempts: int

    @property
    def found(self) -> bool:
        return self.element is not None


class ElementLocator:
    """Re-samples the hierarchy until a node matches or the deadline passes."""

    def __init__(self, driver: Driver, *, clock: Callable[[], float] = time.monotonic) -> None:
        self.driver = driver
        self._clock = clock

    def find_with_timeout(self, predicate: Predicate, timeout_ms: int) -> LookupResult:
        """Search fresh snapshots for ``predicate`` until ``timeout_ms`` elapses.

        At least one snapshot is always searched, even for a zero or negative
        timeout. Snapshots are taken back to back with no extra delay. Nodes
        without bounds cannot be interacted with and never count as a match.

        Raises:
            PredicateError: If ``predicate`` raises while being evaluated.
        """
        start = self._clock()
        end_time = start + timeout_ms / 1000
        attempts = 0

        while True:
            hierarchy = self.driver.content_descriptor()
            attempts += 1
            node = self._search(hierarchy, predicate)

            if node is not None:
                log.log_performance(f"lookup ({attempts} sample(s))", (self._clock() - start) * 1000)
                return LookupResult(UiElement.from_tree_node(node), hierarchy, attempts)

            if self._clock() >= end_time:
                log.debug(f"No match after {attempts} sample(s) within {timeout_ms}ms")
                return LookupResult(None, hierarchy, attempts)

    def all_matching(self, predicate: Predicate) -> List[TreeNode]:
        """Return every node matching ``predicate`` in a single snapshot."""
        hierarchy = self.driver.content_descriptor()
        try:
            return find_all(hierarchy, predicate)
        except Exception as e:
            raise PredicateError(f"Predicate failed: {e}") from e

    @staticmethod
    def _search(hierarchy: TreeNode, predicate: Predicate) -> Optional[TreeNode]:
        try:
            return find_first(hierarchy, lambda node: predicate(node) and node.bounds is not None)
        except Exception as e:
            raise PredicateError(f"Predicate failed: {e}") from e
