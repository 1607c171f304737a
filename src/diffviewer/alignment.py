# -*- coding: utf-8 -*-
"""
Row alignment.

The rows of a diff are a fold over the pairing windows.  The accumulator
carries one running line counter per side and the rows emitted so far; each
policy consumes one window and hands the accumulator back.

Split policy: one row per line, left and right columns side by side, a
modified line shows its removed half on the left and its added half on the
right.

Unified policy: one column, a modified line becomes its REMOVED row
immediately followed by its ADDED row.
"""
from functools import partial, reduce

from loguru import logger

from .config import DiffConfig
from .exceptions import InvalidInputError
from .hunks import diff_lines
from .models import DiffInformation, DiffType, InlineLineInformation, LineInformation
from .pairing import ModificationWindow, PlainWindow, UnchangedWindow, iter_windows
from .text_differ import word_diff


class Accumulator(object):
    """Running state of one alignment pass."""

    def __init__(self):
        self.left_line_number = 0
        self.right_line_number = 0
        self.rows = []

    def next_left(self):
        self.left_line_number += 1
        return self.left_line_number

    def next_right(self):
        self.right_line_number += 1
        return self.right_line_number


def ensure_strings(old_value, new_value):
    """Reject anything but two strings before any diff work happens."""
    for name, value in (('old_value', old_value), ('new_value', new_value)):
        if not isinstance(value, str):
            logger.error('{} must be a string, got {}', name, type(value).__name__)
            raise InvalidInputError(
                '"old_value" and "new_value" should be strings, '
                '%s is %s' % (name, type(value).__name__))


def paired_content(before, after, hide_type, config):
    """Content of one half of a modified line."""
    if config.word_diff:
        return word_diff(before, after, hide_type=hide_type, config=config)
    return before if hide_type is DiffType.ADDED else after


def _split_unchanged(acc, line):
    acc.rows.append(LineInformation(
        left=DiffInformation(acc.next_left(), DiffType.DEFAULT, line),
        right=DiffInformation(acc.next_right(), DiffType.DEFAULT, line),
    ))


def _split_plain(acc, type_, line):
    if type_ is DiffType.REMOVED:
        acc.rows.append(LineInformation(
            left=DiffInformation(acc.next_left(), DiffType.REMOVED, line)))
    else:
        acc.rows.append(LineInformation(
            right=DiffInformation(acc.next_right(), DiffType.ADDED, line)))


def fold_split(acc, window, config):
    """Consume one window with the split policy."""
    if isinstance(window, UnchangedWindow):
        for line in window.lines:
            _split_unchanged(acc, line)
    elif isinstance(window, PlainWindow):
        for line in window.lines:
            _split_plain(acc, window.type, line)
    elif isinstance(window, ModificationWindow):
        for before, after in window.pairs:
            if after is None:
                _split_plain(acc, DiffType.REMOVED, before)
            elif before is None:
                _split_plain(acc, DiffType.ADDED, after)
            else:
                acc.rows.append(LineInformation(
                    left=DiffInformation(
                        acc.next_left(), DiffType.REMOVED,
                        paired_content(before, after, DiffType.ADDED, config)),
                    right=DiffInformation(
                        acc.next_right(), DiffType.ADDED,
                        paired_content(before, after, DiffType.REMOVED, config)),
                ))
    else:
        raise TypeError('Unknown window %r' % (window,))
    return acc


def _inline_plain(acc, type_, value):
    if type_ is DiffType.REMOVED:
        acc.rows.append(InlineLineInformation(
            value, DiffType.REMOVED, left_line_number=acc.next_left()))
    else:
        acc.rows.append(InlineLineInformation(
            value, DiffType.ADDED, right_line_number=acc.next_right()))


def fold_inline(acc, window, config):
    """Consume one window with the unified policy."""
    if isinstance(window, UnchangedWindow):
        for line in window.lines:
            acc.rows.append(InlineLineInformation(
                line, DiffType.DEFAULT,
                left_line_number=acc.next_left(),
                right_line_number=acc.next_right(),
            ))
    elif isinstance(window, PlainWindow):
        for line in window.lines:
            _inline_plain(acc, window.type, line)
    elif isinstance(window, ModificationWindow):
        for before, after in window.pairs:
            if after is None:
                _inline_plain(acc, DiffType.REMOVED, before)
            elif before is None:
                _inline_plain(acc, DiffType.ADDED, after)
            else:
                _inline_plain(acc, DiffType.REMOVED,
                              paired_content(before, after, DiffType.ADDED, config))
                _inline_plain(acc, DiffType.ADDED,
                              paired_content(before, after, DiffType.REMOVED, config))
    else:
        raise TypeError('Unknown window %r' % (window,))
    return acc


def align_hunks(hunks, split_view=True, config=None):
    """Fold line hunks into display rows."""
    config = config or DiffConfig()
    fold = fold_split if split_view else fold_inline
    acc = reduce(partial(_step, fold, config), iter_windows(hunks), Accumulator())
    logger.debug('Aligned {} hunks into {} rows (left={}, right={}, split={})',
                 len(hunks), len(acc.rows), acc.left_line_number,
                 acc.right_line_number, split_view)
    return acc.rows


def _step(fold, config, acc, window):
    return fold(acc, window, config)


def compute_line_information(old_value, new_value, split_view=None, config=None):
    """
    Compute the display rows for two texts.

    ``split_view`` defaults to ``config.split_view``.  Returns a list of
    :class:`LineInformation` (split) or :class:`InlineLineInformation`
    (unified).
    """
    ensure_strings(old_value, new_value)
    config = config or DiffConfig()
    if split_view is None:
        split_view = config.split_view
    hunks = diff_lines(old_value, new_value)
    return align_hunks(hunks, split_view=split_view, config=config)
