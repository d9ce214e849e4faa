"""Exceptions raised by the conductor engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..hierarchy.models import TreeNode


class ConductorException(Exception):
    """Base class for errors raised by the engine itself."""


class ElementNotFound(ConductorException):
    """No element matched within the lookup timeout.

    ``hierarchy`` holds the last view hierarchy observed before giving up so
    that a failing test run can be inspected afterwards.
    """

    def __init__(self, message: str, hierarchy: Optional[TreeNode] = None) -> None:
        super().__init__(message)
        self.message = message
        self.hierarchy = hierarchy


class PredicateError(ConductorException):
    """A lookup predicate raised while being evaluated."""
