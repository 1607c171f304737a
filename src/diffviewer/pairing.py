# -*- coding: utf-8 -*-
"""
Modification pairing.

Walks the line hunks with a cursor and groups them into windows.  A REMOVED
hunk directly followed by an ADDED hunk forms a modification window and the
cursor skips over both; every other hunk is a window of its own.
"""
from collections import namedtuple
from itertools import zip_longest

from .lines import construct_lines
from .models import DiffType


UnchangedWindow = namedtuple('UnchangedWindow', 'lines')
PlainWindow = namedtuple('PlainWindow', 'type lines')
# pairs: (before, after) tuples; the unmatched tail of the longer side has
# None on the other side.
ModificationWindow = namedtuple('ModificationWindow', 'pairs')


def starts_modification(hunks, index):
    """True if the hunk at ``index`` is REMOVED and the next one is ADDED."""
    if not hunks[index].removed:
        return False
    following = index + 1
    return following < len(hunks) and hunks[following].added


def pair_lines(removed_lines, added_lines):
    """Pair two line lists index for index."""
    return list(zip_longest(removed_lines, added_lines))


def iter_windows(hunks):
    """Yield the windows of ``hunks`` in order."""
    i = 0
    n = len(hunks)
    while i < n:
        hunk = hunks[i]
        if starts_modification(hunks, i):
            pairs = pair_lines(construct_lines(hunk.value),
                               construct_lines(hunks[i + 1].value))
            yield ModificationWindow(pairs)
            i += 2
            continue
        lines = construct_lines(hunk.value)
        if hunk.type is DiffType.DEFAULT:
            yield UnchangedWindow(lines)
        else:
            yield PlainWindow(hunk.type, lines)
        i += 1
