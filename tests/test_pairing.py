from diffviewer import DiffType, Hunk
from diffviewer.pairing import (
    ModificationWindow,
    PlainWindow,
    UnchangedWindow,
    iter_windows,
    starts_modification,
)

R = DiffType.REMOVED
A = DiffType.ADDED
D = DiffType.DEFAULT


def test_removed_then_added_is_one_modification_window():
    hunks = [Hunk(R, "a\nb"), Hunk(A, "x\ny")]
    assert list(iter_windows(hunks)) == [
        ModificationWindow([("a", "x"), ("b", "y")]),
    ]


def test_longer_removed_side_leaves_unmatched_tail():
    hunks = [Hunk(R, "a\nb\nc"), Hunk(A, "x")]
    window, = iter_windows(hunks)
    assert window.pairs == [("a", "x"), ("b", None), ("c", None)]


def test_longer_added_side_leaves_unmatched_tail():
    hunks = [Hunk(R, "a"), Hunk(A, "x\ny\nz")]
    window, = iter_windows(hunks)
    assert window.pairs == [("a", "x"), (None, "y"), (None, "z")]


def test_trailing_removed_hunk_is_plain_deletion():
    hunks = [Hunk(D, "a\n"), Hunk(R, "b")]
    assert not starts_modification(hunks, 1)
    assert list(iter_windows(hunks)) == [
        UnchangedWindow(["a"]),
        PlainWindow(R, ["b"]),
    ]


def test_removed_followed_by_unchanged_never_pairs_with_later_added():
    hunks = [Hunk(R, "x"), Hunk(D, "\nk\n"), Hunk(A, "y")]
    assert list(iter_windows(hunks)) == [
        PlainWindow(R, ["x"]),
        UnchangedWindow(["k"]),
        PlainWindow(A, ["y"]),
    ]


def test_removed_followed_by_removed_pairs_only_the_second():
    hunks = [Hunk(R, "a"), Hunk(R, "b"), Hunk(A, "c")]
    assert list(iter_windows(hunks)) == [
        PlainWindow(R, ["a"]),
        ModificationWindow([("b", "c")]),
    ]


def test_added_without_preceding_removed_is_plain():
    hunks = [Hunk(A, "a"), Hunk(R, "\nb")]
    assert list(iter_windows(hunks)) == [
        PlainWindow(A, ["a"]),
        PlainWindow(R, ["b"]),
    ]


def test_consumed_added_hunk_is_not_emitted_again():
    hunks = [Hunk(D, "k\n"), Hunk(R, "a"), Hunk(A, "b"), Hunk(D, "\nz")]
    windows = list(iter_windows(hunks))
    assert len(windows) == 3
    assert not any(isinstance(w, PlainWindow) for w in windows)


def test_empty_hunk_list():
    assert list(iter_windows([])) == []
