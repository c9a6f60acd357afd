"""
Line differ based on a longest-common-subsequence table.
"""

from typing import List, Sequence

from shadcn_ui.models.diff import EditKind, EditOperation


def split_lines(text: str) -> List[str]:
    """
    Split source text into lines on ``\\n`` and ``\\r\\n`` only.

    Other characters ``str.splitlines`` treats as breaks (form feed,
    ``\\u2028``, ...) stay inside the line. A final terminator does not
    start an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def lcs_table(old: Sequence[str], new: Sequence[str]) -> List[List[int]]:
    """
    Build the ``(m+1) x (n+1)`` table of LCS lengths.

    ``table[i][j]`` is the LCS length of ``old[:i]`` and ``new[:j]``.
    """
    m, n = len(old), len(new)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = table[i], table[i - 1]
        old_line = old[i - 1]
        for j in range(1, n + 1):
            if old_line == new[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return table


def diff_lines(old: Sequence[str], new: Sequence[str]) -> List[EditOperation]:
    """
    Compute the edit script turning ``old`` into ``new``.

    Backtracks from the bottom-right of the LCS table. When the two
    neighbouring scores tie, Add is emitted before Remove is considered;
    expected diff output depends on this order.

    Args:
        old: Canonical lines
        new: Locally modified lines

    Returns:
        Edit operations in old -> new order
    """
    table = lcs_table(old, new)
    script: List[EditOperation] = []
    i, j = len(old), len(new)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and old[i - 1] == new[j - 1]:
            script.append(EditOperation(kind=EditKind.EQUAL, line=old[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            script.append(EditOperation(kind=EditKind.ADD, line=new[j - 1]))
            j -= 1
        else:
            script.append(EditOperation(kind=EditKind.REMOVE, line=old[i - 1]))
            i -= 1

    script.reverse()
    return script
