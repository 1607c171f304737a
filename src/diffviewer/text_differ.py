# -*- coding: utf-8 -*-
"""
Word-level annotation of modified lines.

A paired (before, after) line is diffed once at word granularity; each side
of the view then keeps only the spans it should paint.
"""
from .hunks import diff_words


def filter_spans(spans, hide_type=None):
    """
    Drop the spans of ``hide_type`` and keep the order of the rest.

    ``hide_type=None`` keeps every span.
    """
    if hide_type is None:
        return list(spans)
    return [span for span in spans if span.type is not hide_type]


def word_diff(old_line, new_line, hide_type=None, config=None):
    """
    Word spans for a modified line.

    The left column of the split view hides ADDED spans and the right column
    hides REMOVED spans, so each shows only its own highlighted fragment.
    """
    return filter_spans(diff_words(old_line, new_line, config=config), hide_type)
