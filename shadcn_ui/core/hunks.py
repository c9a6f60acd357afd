"""
Unified diff hunk formatting.

Turns an edit script into position-tagged lines, groups nearby changes into
context-bounded hunks and renders the result as unified diff text.
"""

from typing import List, Optional, Sequence, Tuple

from shadcn_ui.core.differ import diff_lines
from shadcn_ui.models.diff import EditKind, EditOperation, Hunk, TaggedLine

DEFAULT_CONTEXT = 3


def tag_lines(script: Sequence[EditOperation]) -> List[TaggedLine]:
    """
    Annotate each operation with its 0-based old/new positions.

    Equal advances both counters, Remove only the old one, Add only the new one.
    """
    tagged: List[TaggedLine] = []
    old_index = new_index = 0
    for op in script:
        tagged.append(TaggedLine(kind=op.kind, old_index=old_index, new_index=new_index, text=op.line))
        if op.kind != EditKind.ADD:
            old_index += 1
        if op.kind != EditKind.REMOVE:
            new_index += 1
    return tagged


def group_changes(change_indices: Sequence[int], context: int = DEFAULT_CONTEXT) -> List[Tuple[int, int]]:
    """
    Merge change indices into ``(first, last)`` ranges.

    A new range starts when more than ``2 * context`` unchanged lines
    separate a change from the previous one.
    """
    ranges: List[Tuple[int, int]] = []
    for index in change_indices:
        if ranges and index - ranges[-1][1] - 1 <= 2 * context:
            ranges[-1] = (ranges[-1][0], index)
        else:
            ranges.append((index, index))
    return ranges


def build_hunks(tagged: Sequence[TaggedLine], context: int = DEFAULT_CONTEXT) -> List[Hunk]:
    """
    Build context-bounded hunks from tagged lines.

    Args:
        tagged: Output of ``tag_lines``
        context: Unchanged lines kept around each change

    Returns:
        Hunks in ascending, non-overlapping order
    """
    changes = [index for index, line in enumerate(tagged) if line.kind != EditKind.EQUAL]
    hunks: List[Hunk] = []

    for first, last in group_changes(changes, context):
        start = max(0, first - context)
        end = min(len(tagged), last + context + 1)
        window = tuple(tagged[start:end])
        hunks.append(
            Hunk(
                old_start=window[0].old_index + 1,
                old_count=sum(1 for line in window if line.kind != EditKind.ADD),
                new_start=window[0].new_index + 1,
                new_count=sum(1 for line in window if line.kind != EditKind.REMOVE),
                lines=window,
            )
        )
    return hunks


def format_unified_diff(
    old: Sequence[str],
    new: Sequence[str],
    label: str,
    context: int = DEFAULT_CONTEXT,
    old_label: Optional[str] = None,
    new_label: Optional[str] = None,
) -> str:
    """
    Render a unified diff of two line sequences.

    An unchanged pair renders as the two header lines only.

    Args:
        old: Canonical lines
        new: Locally modified lines
        label: Name shown in both header lines
        context: Unchanged lines kept around each change
        old_label: Overrides ``label`` on the ``---`` line
        new_label: Overrides ``label`` on the ``+++`` line

    Returns:
        Diff text, newline-terminated
    """
    output = [
        f"--- a/{old_label or label}",
        f"+++ b/{new_label or label}",
    ]
    for hunk in build_hunks(tag_lines(diff_lines(old, new)), context):
        output.append(hunk.render())
    return "\n".join(output) + "\n"
