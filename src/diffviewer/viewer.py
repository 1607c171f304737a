# -*- coding: utf-8 -*-
"""
The diff viewer: the public entry point tying rows, styles and rendering.
"""
import copy

from loguru import logger

from .alignment import compute_line_information, ensure_strings
from .config import DiffConfig
from .exceptions import UnknownLineError
from .renderer import render_rows
from .styles import compute_styles


def render_diff(old_value, new_value, **kwargs):
    """Renders the diff between two texts as an HTML table."""
    return DiffViewer(old_value, new_value, **kwargs).render()


class DiffViewer(object):
    """
    Split or unified diff of two texts.

    ``highlight_lines`` holds line ids (``"L-3"``, ``"R-5"``) whose rows are
    painted as highlighted.  ``render_content`` receives the text of a line
    or word span and returns HTML to paint instead of the plain text.
    ``on_line_number_click`` is called with the line id passed to
    :meth:`click_line_number`.  ``styles`` overrides CSS class names (see
    :data:`diffviewer.styles.DEFAULT_STYLES`).
    """

    def __init__(self, old_value, new_value, split_view=None, word_diff=None,
                 highlight_lines=(), render_content=None,
                 on_line_number_click=None, styles=None, config=None):
        ensure_strings(old_value, new_value)
        self.old_value = old_value
        self.new_value = new_value
        self.config = copy.copy(config) if config is not None else DiffConfig()
        if split_view is not None:
            self.config.split_view = split_view
        if word_diff is not None:
            self.config.word_diff = word_diff
        self.highlight_lines = tuple(highlight_lines or ())
        self.render_content = render_content
        self.on_line_number_click = on_line_number_click
        self.styles = dict(styles or {})

    @property
    def split_view(self):
        return self.config.split_view

    def rows(self):
        """Aligned rows, rebuilt on every call."""
        return compute_line_information(self.old_value, self.new_value,
                                        split_view=self.split_view,
                                        config=self.config)

    def line_ids(self):
        ids = []
        for row in self.rows():
            ids.extend(row.line_ids(self.config))
        return ids

    def render(self):
        styles = compute_styles(dict(self.styles))
        rows = self.rows()
        logger.debug('Rendering {} rows ({} view)', len(rows),
                     'split' if self.split_view else 'unified')
        return render_rows(rows, split_view=self.split_view, styles=styles,
                           config=self.config,
                           highlight_lines=self.highlight_lines,
                           render_content=self.render_content,
                           clickable=self.on_line_number_click is not None)

    def click_line_number(self, line_id):
        """Forward a click on a line number gutter to the callback."""
        if line_id not in self.line_ids():
            logger.error('Click on unknown line id {!r}', line_id)
            raise UnknownLineError('No rendered line has id %r' % (line_id,))
        if self.on_line_number_click is None:
            return None
        return self.on_line_number_click(line_id)
