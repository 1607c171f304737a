# -*- coding: utf-8 -*-
"""
Configuration and constants for diffviewer.
"""
import re

# Line diff tokens: the newline is its own token.
_newline_split_re = re.compile(r'(\n)', re.U)
# Word diff tokens: whitespace runs, punctuation runs and words.
_token_split_re = re.compile(r'(\s+|[^\w\s]+)', re.U)


class DiffConfig(object):
    """
    Runtime configuration for row computation and rendering.

    Class attributes are the defaults; override them on an instance or pass
    keyword arguments to the constructor.
    """

    # View
    split_view = True
    # Highlight the changed words inside paired (modified) lines
    word_diff = True

    # Word diff granularity
    word_token_regex = _token_split_re
    # Matching blocks of this many tokens or fewer are ignored by the word
    # matcher, so unrelated lines are not shredded into word-by-word noise.
    # 0 keeps every match.
    word_match_threshold = 0

    # Caller-visible line ids, e.g. "L-3" / "R-5"
    left_line_prefix = 'L'
    right_line_prefix = 'R'
    line_id_separator = '-'

    added_marker = u'+'
    removed_marker = u'-'

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not hasattr(type(self), key):
                raise TypeError('Unknown DiffConfig option %r' % key)
            setattr(self, key, value)

    def line_id(self, prefix, line_number):
        return u'%s%s%d' % (prefix, self.line_id_separator, line_number)
