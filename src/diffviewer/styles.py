# -*- coding: utf-8 -*-
"""
CSS class names painted by the renderer.
"""
from types import MappingProxyType

from loguru import logger

from .exceptions import StyleOverrideError
from .utils import memoize_one


DEFAULT_STYLES = {
    'diff_container': 'diff-container',
    'split_view': 'split-view',
    'inline_view': 'inline-view',
    'line': 'line',
    'gutter': 'gutter',
    'empty_gutter': 'empty-gutter',
    'clickable_gutter': 'clickable-gutter',
    'line_number': 'line-number',
    'marker': 'marker',
    'content': 'content',
    'content_text': 'content-text',
    'empty_line': 'empty-line',
    'diff_added': 'diff-added',
    'diff_removed': 'diff-removed',
    'word_diff': 'word-diff',
    'word_added': 'word-added',
    'word_removed': 'word-removed',
    'highlighted_line': 'highlighted-line',
    'highlighted_gutter': 'highlighted-gutter',
}


def _compute_styles(overrides=None):
    overrides = overrides or {}
    unknown = sorted(set(overrides) - set(DEFAULT_STYLES))
    if unknown:
        logger.error('Unknown style overrides: {}', unknown)
        raise StyleOverrideError('Unknown style override(s): %s' % ', '.join(unknown))
    logger.debug('Computing styles with {} override(s)', len(overrides))
    styles = dict(DEFAULT_STYLES)
    styles.update(overrides)
    # Read-only: the cached mapping is shared by every later render.
    return MappingProxyType(styles)


# Rendering the same viewer again reuses the last computed mapping.
compute_styles = memoize_one(_compute_styles)
