"""Unit tests for unified diff hunk formatting."""

from shadcn_ui.core.differ import diff_lines
from shadcn_ui.core.hunks import build_hunks, format_unified_diff, group_changes, tag_lines
from shadcn_ui.models.diff import EditKind, TaggedLine


def numbered(count):
    return [f"line {i}" for i in range(count)]


def with_changes(lines, replacements):
    changed = list(lines)
    for index, text in replacements.items():
        changed[index] = text
    return changed


class TestTagLines:
    """Test position tagging of edit scripts."""

    def test_counters_follow_operation_kind(self):
        """Test Equal advances both counters, Remove old only, Add new only."""
        tagged = tag_lines(diff_lines(["a", "b", "c"], ["a", "x", "c"]))

        assert tagged == [
            TaggedLine(kind=EditKind.EQUAL, old_index=0, new_index=0, text="a"),
            TaggedLine(kind=EditKind.REMOVE, old_index=1, new_index=1, text="b"),
            TaggedLine(kind=EditKind.ADD, old_index=2, new_index=1, text="x"),
            TaggedLine(kind=EditKind.EQUAL, old_index=2, new_index=2, text="c"),
        ]


class TestGroupChanges:
    """Test merging of nearby change indices."""

    def test_gap_of_twice_context_merges(self):
        """Test exactly 2 * context unchanged lines keep one range."""
        assert group_changes([2, 9], context=3) == [(2, 9)]

    def test_gap_above_twice_context_splits(self):
        """Test more than 2 * context unchanged lines start a new range."""
        assert group_changes([2, 10], context=3) == [(2, 2), (10, 10)]

    def test_adjacent_changes(self):
        """Test consecutive change indices form one range."""
        assert group_changes([4, 5, 6], context=0) == [(4, 6)]

    def test_no_changes(self):
        """Test an empty index list yields no ranges."""
        assert group_changes([], context=3) == []


class TestBuildHunks:
    """Test hunk construction."""

    def test_substitution_hunk(self):
        """Test a single substitution gives one hunk covering the file."""
        hunks = build_hunks(tag_lines(diff_lines(["a", "b", "c"], ["a", "x", "c"])))

        assert len(hunks) == 1
        hunk = hunks[0]
        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (1, 3, 1, 3)
        assert hunk.header == "@@ -1,3 +1,3 @@"

    def test_insertion_into_empty(self):
        """Test inserting into an empty file."""
        hunks = build_hunks(tag_lines(diff_lines([], ["a"])))

        assert len(hunks) == 1
        hunk = hunks[0]
        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (1, 0, 1, 1)

    def test_distant_changes_give_separate_hunks(self):
        """Test changes separated by 10 unchanged lines stay apart."""
        old = numbered(20)
        new = with_changes(old, {2: "changed 2", 13: "changed 13"})

        hunks = build_hunks(tag_lines(diff_lines(old, new)), context=3)

        assert len(hunks) == 2
        first, second = hunks
        assert (first.old_start, first.old_count, first.new_start, first.new_count) == (1, 6, 1, 6)
        assert (second.old_start, second.old_count, second.new_start, second.new_count) == (11, 7, 11, 7)
        assert [line.text for line in second.lines] == [
            "line 10", "line 11", "line 12", "line 13", "changed 13", "line 14", "line 15", "line 16",
        ]

    def test_nearby_changes_merge(self):
        """Test changes separated by 2 unchanged lines share one hunk."""
        old = numbered(20)
        new = with_changes(old, {2: "changed 2", 5: "changed 5"})

        hunks = build_hunks(tag_lines(diff_lines(old, new)), context=3)

        assert len(hunks) == 1
        hunk = hunks[0]
        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (1, 9, 1, 9)
        assert hunk.lines[0].text == "line 0"
        assert hunk.lines[-1].text == "line 8"

    def test_counts_match_line_kinds(self):
        """Test every hunk's counts agree with the lines it holds."""
        old = numbered(40)
        new = with_changes(old, {1: "one", 20: "twenty"})
        del new[30:33]
        new[10:10] = ["inserted a", "inserted b"]

        hunks = build_hunks(tag_lines(diff_lines(old, new)), context=3)

        assert len(hunks) == 4
        for hunk in hunks:
            assert hunk.old_count == sum(1 for line in hunk.lines if line.kind != EditKind.ADD)
            assert hunk.new_count == sum(1 for line in hunk.lines if line.kind != EditKind.REMOVE)
        for previous, current in zip(hunks, hunks[1:]):
            assert current.old_start > previous.old_start + previous.old_count
            assert current.new_start > previous.new_start + previous.new_count

    def test_identical_input_has_no_hunks(self):
        """Test identical sequences produce no hunks."""
        lines = numbered(5)
        assert build_hunks(tag_lines(diff_lines(lines, lines))) == []


class TestFormatUnifiedDiff:
    """Test unified diff text rendering."""

    def test_substitution_text(self):
        """Test the full text for a single substitution."""
        text = format_unified_diff(["a", "b", "c"], ["a", "x", "c"], "button")

        assert text == (
            "--- a/button\n"
            "+++ b/button\n"
            "@@ -1,3 +1,3 @@\n"
            " a\n"
            "-b\n"
            "+x\n"
            " c\n"
        )

    def test_insertion_text(self):
        """Test the full text for an insertion into an empty file."""
        text = format_unified_diff([], ["a"], "button")

        assert text == "--- a/button\n+++ b/button\n@@ -1,0 +1,1 @@\n+a\n"

    def test_trailing_deletion_text(self):
        """Test a deleted last line."""
        text = format_unified_diff(["a", "b"], ["a"], "card")

        assert text == "--- a/card\n+++ b/card\n@@ -1,2 +1,1 @@\n a\n-b\n"

    def test_identical_input_is_header_only(self):
        """Test an unchanged pair renders only the two header lines."""
        lines = numbered(8)

        assert format_unified_diff(lines, lines, "card") == "--- a/card\n+++ b/card\n"
        assert format_unified_diff([], [], "card") == "--- a/card\n+++ b/card\n"

    def test_side_labels(self):
        """Test the header labels can differ per side."""
        text = format_unified_diff(
            ["a"], ["a"], "button", old_label="button (registry)", new_label="button (local)"
        )

        assert text == "--- a/button (registry)\n+++ b/button (local)\n"

    def test_zero_context(self):
        """Test context=0 keeps only changed lines."""
        text = format_unified_diff(["a", "b", "c"], ["a", "x", "c"], "f", context=0)

        assert text == "--- a/f\n+++ b/f\n@@ -2,1 +2,1 @@\n-b\n+x\n"

    def test_two_hunks_rendered_in_order(self):
        """Test separate hunks appear in ascending order."""
        old = numbered(20)
        new = with_changes(old, {2: "changed 2", 13: "changed 13"})

        text = format_unified_diff(old, new, "f")

        headers = [line for line in text.splitlines() if line.startswith("@@")]
        assert headers == ["@@ -1,6 +1,6 @@", "@@ -11,7 +11,7 @@"]

    def test_output_is_deterministic(self):
        """Test repeated calls give byte-identical output."""
        old = numbered(30)
        new = with_changes(old, {4: "x", 17: "y"})

        assert format_unified_diff(old, new, "f") == format_unified_diff(old, new, "f")
