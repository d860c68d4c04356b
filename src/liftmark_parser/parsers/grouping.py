"""
Grouping Resolver

Turns the workout header's subtree into a flat, document-ordered list of
exercise drafts. Group headers (supersets and sections) become pseudo-exercises
without sets; every exercise below one, at any depth, points back at it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .headings import HeadingNode, HeadingRole, classify
from .lines import SourceLine
from .metadata import extract_exercise_body, prose_lines
from .models import GroupKind
from .sets import SetDraft

logger = logging.getLogger(__name__)

SUPERSET_MARKER = "superset"


@dataclass
class ExerciseDraft:
    """An exercise or group header before validation and id assignment"""
    name: str
    line_number: int
    group_kind: GroupKind = GroupKind.NONE
    group_label: Optional[str] = None
    parent_index: Optional[int] = None
    equipment_type: Optional[str] = None
    note_lines: List[str] = field(default_factory=list)
    set_lines: List[SourceLine] = field(default_factory=list)
    sets: List[SetDraft] = field(default_factory=list)

    @property
    def is_group(self) -> bool:
        return self.group_label is not None


def group_kind_for(text: str) -> GroupKind:
    """Headers mentioning "superset" (any case) are supersets; all others are sections."""
    return GroupKind.SUPERSET if SUPERSET_MARKER in text.lower() else GroupKind.SECTION


def absorbed_text(node: HeadingNode) -> List[str]:
    """Heading text plus all prose in its subtree, for headings kept only as notes."""
    lines = [node.text] + prose_lines(node.body)
    for child in node.children:
        lines.extend(absorbed_text(child))
    return lines


class GroupingResolver:
    """Collects exercise drafts in document order"""

    def __init__(self):
        self.exercises: List[ExerciseDraft] = []

    def add_inline(self, name_line: SourceLine, block: List[SourceLine]) -> ExerciseDraft:
        """Add an exercise named by a prose line rather than a heading."""
        body = extract_exercise_body(block)
        draft = ExerciseDraft(
            name=name_line.stripped,
            line_number=name_line.line_number,
            equipment_type=body.equipment_type,
            note_lines=body.note_lines,
            set_lines=body.set_lines,
        )
        self.exercises.append(draft)
        return draft

    def resolve(
        self,
        nodes: List[HeadingNode],
        container_index: Optional[int],
        absorb_into: List[str],
    ) -> None:
        """
        Resolve headings under a workout header or group header.

        Args:
            nodes: Sibling headings, in document order
            container_index: Index of the enclosing group header, if any
            absorb_into: Notes list that receives plain headings
        """
        for node in nodes:
            role = classify(node)

            if role == HeadingRole.EXERCISE:
                body = extract_exercise_body(node.body)
                draft = ExerciseDraft(
                    name=node.text,
                    line_number=node.line_number,
                    equipment_type=body.equipment_type,
                    note_lines=body.note_lines,
                    set_lines=body.set_lines,
                )
                self._append(draft, container_index)
                # Headings nested under an exercise follow it in the same container
                self.resolve(node.children, container_index, draft.note_lines)

            elif role == HeadingRole.GROUP:
                group = ExerciseDraft(
                    name=node.text,
                    line_number=node.line_number,
                    group_kind=group_kind_for(node.text),
                    group_label=node.text,
                    note_lines=prose_lines(node.body),
                )
                group_index = self._append(group, container_index)
                self.resolve(node.children, group_index, group.note_lines)

            else:
                logger.debug(f"Absorbing heading at line {node.line_number} as notes: {node.text!r}")
                absorb_into.extend(absorbed_text(node))

    def _append(self, draft: ExerciseDraft, container_index: Optional[int]) -> int:
        if container_index is not None:
            draft.parent_index = container_index
            if not draft.is_group:
                draft.group_kind = self.exercises[container_index].group_kind
        self.exercises.append(draft)
        return len(self.exercises) - 1
