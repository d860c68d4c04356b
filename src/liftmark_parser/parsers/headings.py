"""
Heading Classifier

Builds a lightweight tree of headings and tags each node by structure,
never by a fixed heading depth.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from .lines import LineKind, SourceLine
from .metadata import find_inline_exercise_starts

logger = logging.getLogger(__name__)


class HeadingRole(str, Enum):
    EXERCISE = "exercise"  # Carries its own set lines, or has no nested headings
    GROUP = "group"        # No set lines, set lines somewhere below it
    PLAIN = "plain"        # Nested headings but no set lines anywhere; absorbed as prose


@dataclass
class HeadingNode:
    """A heading with its own body lines and nested headings"""
    line: SourceLine
    level: int
    text: str
    body: List[SourceLine] = field(default_factory=list)
    children: List["HeadingNode"] = field(default_factory=list)

    @property
    def line_number(self) -> int:
        return self.line.line_number

    @property
    def has_set_lines(self) -> bool:
        return any(line.kind == LineKind.LIST_ITEM for line in self.body)

    def descendants(self) -> Iterator["HeadingNode"]:
        for child in self.children:
            yield child
            yield from child.descendants()


def build_heading_tree(lines: List[SourceLine]) -> List[HeadingNode]:
    """
    Build the heading tree.

    A heading's children are the deeper headings that follow it before the
    next heading at the same or a shallower level. Levels may be skipped.
    Lines before the first heading are not attached to any node.

    Returns:
        Root nodes in document order
    """
    roots: List[HeadingNode] = []
    stack: List[HeadingNode] = []
    current: Optional[HeadingNode] = None

    for line in lines:
        if line.kind != LineKind.HEADING:
            if current is not None:
                current.body.append(line)
            continue

        node = HeadingNode(line=line, level=line.heading_level, text=line.content)
        while stack and stack[-1].level >= node.level:
            stack.pop()
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
        current = node

    return roots


def classify(node: HeadingNode) -> HeadingRole:
    """
    Tag a heading as exercise, group, or plain prose.

    A heading without nested headings is always an exercise, even with no
    set lines, so an empty exercise is reported rather than dropped.
    """
    if node.has_set_lines or not node.children:
        return HeadingRole.EXERCISE
    if any(descendant.has_set_lines for descendant in node.descendants()):
        return HeadingRole.GROUP
    return HeadingRole.PLAIN


def is_workout_header(node: HeadingNode) -> bool:
    """A heading is a workout when set lines hang below it, under headings or inline."""
    if find_inline_exercise_starts(node.body):
        return True
    return any(descendant.has_set_lines for descendant in node.descendants())


def _walk(nodes: List[HeadingNode]) -> Iterator[HeadingNode]:
    for node in nodes:
        yield node
        yield from _walk(node.children)


def find_workout_header(roots: List[HeadingNode]) -> Optional[HeadingNode]:
    """Return the first heading in document order that looks like a workout."""
    for node in _walk(roots):
        if is_workout_header(node):
            logger.debug(f"Workout header at line {node.line_number} (H{node.level}): {node.text!r}")
            return node
    return None
