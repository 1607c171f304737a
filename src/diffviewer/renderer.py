# -*- coding: utf-8 -*-
"""
HTML rendering of aligned rows.

Rows are turned into a Genshi element tree (``<table><tbody>``) and
serialized with Genshi's HTML serializer.  Text is escaped by Genshi; markup
returned by a ``render_content`` hook is parsed with html5lib first.
"""
from genshi.builder import tag

from .config import DiffConfig
from .models import DiffType, InlineLineInformation, LineInformation
from .parser import parse_html
from .styles import DEFAULT_STYLES
from .utils import cx


class RowRenderer(object):
    """Builds table rows for one render pass."""

    def __init__(self, styles=None, config=None, highlight_lines=(),
                 render_content=None, clickable=False):
        self.styles = styles or DEFAULT_STYLES
        self.config = config or DiffConfig()
        self.highlight_lines = frozenset(highlight_lines or ())
        self.render_content = render_content
        self.clickable = clickable

    def _type_class(self, type_):
        if type_ is DiffType.ADDED:
            return self.styles['diff_added']
        if type_ is DiffType.REMOVED:
            return self.styles['diff_removed']
        return None

    def _marker(self, type_):
        if type_ is DiffType.ADDED:
            return self.config.added_marker
        if type_ is DiffType.REMOVED:
            return self.config.removed_marker
        return u''

    def _source(self, text, **attrs):
        if self.render_content is not None:
            return tag.span(parse_html(self.render_content(text)), **attrs)
        return tag.span(text, **attrs)

    def content(self, value):
        """Raw text, or one span per word span with its own classification."""
        if isinstance(value, str):
            if self.render_content is not None:
                return parse_html(self.render_content(value))
            return value
        parts = []
        for span in value:
            cls = cx(self.styles['word_diff'],
                     span.type is DiffType.ADDED and self.styles['word_added'],
                     span.type is DiffType.REMOVED and self.styles['word_removed'])
            parts.append(self._source(span.value, class_=cls))
        return parts

    def gutter(self, prefix, line_number, type_, highlighted):
        if line_number is None:
            return tag.td(class_=cx(self.styles['gutter'], self.styles['empty_gutter'],
                                    self._type_class(type_)))
        line_id = self.config.line_id(prefix, line_number)
        return tag.td(
            tag.pre(str(line_number), class_=self.styles['line_number']),
            class_=cx(self.styles['gutter'], self._type_class(type_),
                      highlighted and self.styles['highlighted_gutter'],
                      self.clickable and self.styles['clickable_gutter']),
            data_line_id=line_id,
        )

    def cells(self, prefix, info, highlighted):
        """Gutter, marker and content cells of one split-view side."""
        if info is None:
            return [
                tag.td(class_=cx(self.styles['gutter'], self.styles['empty_gutter'])),
                tag.td(class_=cx(self.styles['marker'], self.styles['empty_line'])),
                tag.td(tag.pre(class_=self.styles['content_text']),
                       class_=cx(self.styles['content'], self.styles['empty_line'])),
            ]
        type_class = self._type_class(info.type)
        return [
            self.gutter(prefix, info.line_number, info.type, highlighted),
            tag.td(tag.pre(self._marker(info.type)),
                   class_=cx(self.styles['marker'], type_class)),
            tag.td(tag.pre(self.content(info.value), class_=self.styles['content_text']),
                   class_=cx(self.styles['content'], type_class,
                             highlighted and self.styles['highlighted_line'])),
        ]

    def split_row(self, row):
        highlighted = self.is_highlighted(row)
        return tag.tr(
            self.cells(self.config.left_line_prefix, row.left, highlighted),
            self.cells(self.config.right_line_prefix, row.right, highlighted),
            class_=self.styles['line'],
        )

    def inline_row(self, row):
        highlighted = self.is_highlighted(row)
        type_class = self._type_class(row.type)
        return tag.tr(
            self.gutter(self.config.left_line_prefix, row.left_line_number,
                        row.type, highlighted),
            self.gutter(self.config.right_line_prefix, row.right_line_number,
                        row.type, highlighted),
            tag.td(tag.pre(self._marker(row.type)),
                   class_=cx(self.styles['marker'], type_class)),
            tag.td(tag.pre(self.content(row.value), class_=self.styles['content_text']),
                   class_=cx(self.styles['content'], type_class,
                             highlighted and self.styles['highlighted_line'])),
            class_=self.styles['line'],
        )

    def is_highlighted(self, row):
        if not self.highlight_lines:
            return False
        return any(line_id in self.highlight_lines
                   for line_id in row.line_ids(self.config))

    def table(self, rows, split_view):
        render_row = self.split_row if split_view else self.inline_row
        return tag.table(
            tag.tbody([render_row(row) for row in rows]),
            class_=cx(self.styles['diff_container'],
                      self.styles['split_view'] if split_view else self.styles['inline_view']),
        )


def render_rows(rows, split_view=True, styles=None, config=None,
                highlight_lines=(), render_content=None, clickable=False):
    """Render aligned rows as an HTML table string."""
    expected = LineInformation if split_view else InlineLineInformation
    if rows and not isinstance(rows[0], expected):
        raise ValueError("%s rows cannot be rendered in the %s view"
                         % (type(rows[0]).__name__, "split" if split_view else "unified"))
    renderer = RowRenderer(styles=styles, config=config,
                           highlight_lines=highlight_lines,
                           render_content=render_content, clickable=clickable)
    return renderer.table(rows, split_view).generate().render('html', encoding=None)
