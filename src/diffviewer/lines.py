# -*- coding: utf-8 -*-
"""
Line materialization for line hunks.
"""


def construct_lines(value):
    """
    Split a hunk value into the lines it represents.

    Newline tokens at the edges of a hunk only separate it from its
    neighbours, so an empty first or last piece is dropped.  A hunk that is
    exactly one newline carries no line at all.

    >>> construct_lines(u'a\\nb\\n')
    ['a', 'b']
    >>> construct_lines(u'\\n')
    []
    >>> construct_lines(u'\\n\\n\\n')
    ['', '', '']
    """
    lines = value.split(u'\n')
    if all(not line for line in lines):
        if len(lines) == 2:
            return []
        lines.pop()
        return lines

    if not lines[-1]:
        lines.pop()
    if not lines[0]:
        lines.pop(0)
    return lines
