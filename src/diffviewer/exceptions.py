# -*- coding: utf-8 -*-
"""
Excepciones de diffviewer.
"""


class DiffViewerError(Exception):
    """Base class for every error raised by diffviewer."""


class InvalidInputError(DiffViewerError, TypeError):
    """The values to compare are not strings."""


class StyleOverrideError(DiffViewerError, KeyError):
    """A style override names a class slot that does not exist."""


class UnknownLineError(DiffViewerError, LookupError):
    """A line id does not belong to any rendered row."""
