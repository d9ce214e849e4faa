"""Conversion of ``uiautomator dump`` XML into ``TreeNode`` snapshots.

Input format::

    <hierarchy rotation="0">
        <node index="0" text="" resource-id="" class="android.widget.FrameLayout"
              content-desc="" bounds="[0,0][1080,2400]">
            <node ...>...</node>
        </node>
    </hierarchy>
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Optional

from ..hierarchy.models import Bounds, TreeNode
from .device import ADBError

# Bounds parsing regex: "[left,top][right,bottom]"
BOUNDS_PATTERN = re.compile(r"\[(-?\d+),(-?\d+)\]\[(-?\d+),(-?\d+)\]")

# Used when a node has no parsable bounds attribute
EMPTY_BOUNDS = Bounds(0, 0, 0, 0)


def parse_hierarchy(xml_content: str) -> TreeNode:
    """Parse a uiautomator dump into a snapshot rooted at the ``<hierarchy>`` tag.

    The root node has no id or text; its bounds span all of its children.
    Nodes without usable bounds get an empty rectangle at the origin.

    Raises:
        ADBError: If the dump holds no parsable hierarchy.
    """
    xml_content = xml_content.strip()
    start_idx = xml_content.find("<hierarchy")
    if start_idx == -1:
        raise ADBError("No <hierarchy> tag found in uiautomator output")

    # uiautomator may append a status line after the document
    end_idx = xml_content.rfind("</hierarchy>")
    if end_idx != -1:
        xml_content = xml_content[start_idx:end_idx + len("</hierarchy>")]
    else:
        xml_content = xml_content[start_idx:]

    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError as e:
        raise ADBError(f"Failed to parse uiautomator XML: {e}") from e

    children = tuple(_parse_node(child) for child in root if child.tag == "node")
    return TreeNode(bounds=_span(children), children=children)


def parse_bounds(bounds_str: str) -> Optional[Bounds]:
    """Parse ``"[l,t][r,b]"``; returns ``None`` for anything else."""
    match = BOUNDS_PATTERN.fullmatch(bounds_str.strip())
    if not match:
        return None
    left, top, right, bottom = (int(v) for v in match.groups())
    return Bounds(left, top, right, bottom)


def _parse_node(element: ET.Element) -> TreeNode:
    text = element.get("text") or element.get("content-desc") or None
    children = tuple(_parse_node(child) for child in element if child.tag == "node")
    return TreeNode(
        id=element.get("resource-id") or None,
        text=text,
        bounds=parse_bounds(element.get("bounds", "")) or EMPTY_BOUNDS,
        children=children,
    )


def _span(nodes: tuple[TreeNode, ...]) -> Bounds:
    bounds = [node.bounds for node in nodes if node.bounds is not None]
    if not bounds:
        return EMPTY_BOUNDS
    return Bounds(
        min(b.left for b in bounds),
        min(b.top for b in bounds),
        max(b.right for b in bounds),
        max(b.bottom for b in bounds),
    )
