"""Predicate constructors used to look up hierarchy nodes."""

from __future__ import annotations

import re
from typing import Optional, Union

from .models import TreeNode
from .search import Predicate

Pattern = Union[str, re.Pattern]


def _compile(pattern: Pattern) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def text_matches(text: str) -> Predicate:
    """Match nodes whose text equals ``text``."""

    def predicate(node: TreeNode) -> bool:
        return node.text is not None and node.text == text

    return predicate


def text_matches_regex(pattern: Pattern) -> Predicate:
    """Match nodes whose whole text matches ``pattern``."""
    regex = _compile(pattern)

    def predicate(node: TreeNode) -> bool:
        return node.text is not None and regex.fullmatch(node.text) is not None

    return predicate


def id_matches(pattern: Pattern) -> Predicate:
    """Match nodes whose whole id matches ``pattern``."""
    regex = _compile(pattern)

    def predicate(node: TreeNode) -> bool:
        return node.id is not None and regex.fullmatch(node.id) is not None

    return predicate


def size_matches(
    width: Optional[int] = None,
    height: Optional[int] = None,
    tolerance: Optional[int] = None,
) -> Predicate:
    """Match nodes whose size is within ``tolerance`` pixels of the request.

    A dimension left as ``None`` is not checked. Nodes without bounds never
    match.
    """
    slack = tolerance or 0

    def predicate(node: TreeNode) -> bool:
        if node.bounds is None:
            return False
        if width is not None and abs(node.bounds.width() - width) > slack:
            return False
        if height is not None and abs(node.bounds.height() - height) > slack:
            return False
        return True

    return predicate


def same_element(target: TreeNode) -> Predicate:
    """Match nodes with the same id, text and bounds as ``target``.

    Children are ignored, so a row whose nested labels change still matches.
    """

    def predicate(node: TreeNode) -> bool:
        return node.id == target.id and node.text == target.text and node.bounds == target.bounds

    return predicate
