# -*- coding: utf-8 -*-
"""
Hunk source: turns two strings into ordered hunks.

Both granularities are backed by :class:`difflib.SequenceMatcher`.  Line
diffs treat the newline as a token of its own, so a hunk's value may start
or end with a newline that only separates it from its neighbours (see
:func:`diffviewer.lines.construct_lines`).
"""
from difflib import SequenceMatcher

from .config import DiffConfig, _newline_split_re
from .models import DiffType, Hunk, WordSpan


class InsensitiveSequenceMatcher(SequenceMatcher):
    """
    SequenceMatcher that ignores very small matching blocks.

    This prevents "shredded" diffs where unrelated lines get word-by-word
    interleaving due to incidental small matches (e.g. a shared space).
    """

    def __init__(self, isjunk=None, a='', b='', threshold=2):
        super().__init__(isjunk, a, b, autojunk=False)
        self.threshold = threshold

    def get_matching_blocks(self):
        # Scale the threshold down on short sequences so they still match.
        size = min(len(self.a), len(self.b))
        effective_threshold = min(self.threshold, size // 4)

        blocks = super().get_matching_blocks()
        # Keep blocks larger than threshold, or the sentinel (size=0) at the end.
        return [block for block in blocks
                if block[2] > effective_threshold or block[2] == 0]


def line_split(text):
    """
    Tokenize text for the line diff: line contents and ``\\n`` separators.

    >>> line_split(u'a\\nb\\n')
    ['a', '\\n', 'b', '\\n']
    """
    parts = _newline_split_re.split(text)
    # A trailing newline leaves an empty last piece; it is not a line.
    if parts and not parts[-1]:
        parts.pop()
    return parts


def word_split(text, config=None):
    """Tokenize one line for the word diff, keeping whitespace tokens."""
    rx = getattr(config, 'word_token_regex', None) or DiffConfig.word_token_regex
    return [p for p in rx.split(text) if p != u'']


def diff_lines(old, new):
    """
    Diff two texts line by line.

    Returns the ordered list of :class:`Hunk`; a changed region yields its
    REMOVED hunk before its ADDED hunk.
    """
    old_tokens = line_split(old)
    new_tokens = line_split(new)
    matcher = SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    hunks = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            hunks.append(Hunk(DiffType.DEFAULT, u''.join(old_tokens[i1:i2])))
            continue
        if tag in ('replace', 'delete'):
            hunks.append(Hunk(DiffType.REMOVED, u''.join(old_tokens[i1:i2])))
        if tag in ('replace', 'insert'):
            hunks.append(Hunk(DiffType.ADDED, u''.join(new_tokens[j1:j2])))
    return hunks


def diff_words(old, new, config=None):
    """
    Diff two lines word by word.

    The spans cover the concatenation of both inputs: unchanged text once,
    then each changed region as removed text followed by added text.
    """
    config = config or DiffConfig()
    old_tokens = word_split(old, config)
    new_tokens = word_split(new, config)
    threshold = getattr(config, 'word_match_threshold', 0)
    matcher = InsensitiveSequenceMatcher(None, old_tokens, new_tokens,
                                         threshold=threshold)

    spans = []
    # Enforce delete->insert ordering within each changed region, even when
    # the matcher emits delete/insert/delete around a dropped small match.
    pending_del = []
    pending_ins = []

    def flush_pending():
        if pending_del:
            spans.append(WordSpan(u''.join(pending_del), DiffType.REMOVED))
            del pending_del[:]
        if pending_ins:
            spans.append(WordSpan(u''.join(pending_ins), DiffType.ADDED))
            del pending_ins[:]

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            flush_pending()
            spans.append(WordSpan(u''.join(old_tokens[i1:i2]), DiffType.DEFAULT))
            continue
        if tag in ('replace', 'delete'):
            pending_del.extend(old_tokens[i1:i2])
        if tag in ('replace', 'insert'):
            pending_ins.extend(new_tokens[j1:j2])
    flush_pending()
    return spans
