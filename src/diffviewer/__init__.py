# -*- coding: utf-8 -*-
r"""
    diffviewer
    ~~~~~~~~~~

    Split and unified diffs of two texts, line by line, with the changed
    words of modified lines highlighted.  Examples:

    >>> from diffviewer import compute_line_information

    >>> rows = compute_line_information('a\nb\nc', 'a\nb\nc')
    >>> [(row.left_line_number, row.right_line_number) for row in rows]
    [(1, 1), (2, 2), (3, 3)]

    >>> rows = compute_line_information('a', 'a\nb')
    >>> [(row.left_line_number, row.right_line_number) for row in rows]
    [(1, 1), (None, 2)]

    >>> row, = compute_line_information('foo bar', 'foo baz')
    >>> [(span.value, span.type.name) for span in row.left.value]
    [('foo ', 'DEFAULT'), ('bar', 'REMOVED')]
    >>> [(span.value, span.type.name) for span in row.right.value]
    [('foo ', 'DEFAULT'), ('baz', 'ADDED')]

    >>> rows = compute_line_information('foo bar', 'foo baz', split_view=False)
    >>> [(row.type.name, row.left_line_number, row.right_line_number) for row in rows]
    [('REMOVED', 1, None), ('ADDED', None, 1)]
"""
from loguru import logger

from .alignment import compute_line_information
from .config import DiffConfig
from .exceptions import (
    DiffViewerError,
    InvalidInputError,
    StyleOverrideError,
    UnknownLineError,
)
from .hunks import diff_lines, diff_words
from .models import (
    DiffInformation,
    DiffType,
    Hunk,
    InlineLineInformation,
    LineInformation,
    WordSpan,
)
from .viewer import DiffViewer, render_diff

# Library logging stays silent unless the application enables it with
# ``logger.enable("diffviewer")``.
logger.disable(__name__)

__all__ = [
    'compute_line_information',
    'render_diff',
    'DiffViewer',
    'DiffConfig',
    'DiffType',
    'Hunk',
    'WordSpan',
    'DiffInformation',
    'LineInformation',
    'InlineLineInformation',
    'diff_lines',
    'diff_words',
    'DiffViewerError',
    'InvalidInputError',
    'StyleOverrideError',
    'UnknownLineError',
]
