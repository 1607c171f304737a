# -*- coding: utf-8 -*-
"""
Data model shared by the hunk source, the alignment engine and the renderer.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class DiffType(Enum):
    """Classification of a hunk, a word span or one side of a row."""
    DEFAULT = 0
    ADDED = 1
    REMOVED = 2


@dataclass(frozen=True)
class Hunk:
    """
    A maximal run of same-kind text produced by the line or word diff.

    ``value`` may hold several lines joined by newlines.
    """
    type: DiffType
    value: str

    @property
    def added(self) -> bool:
        return self.type is DiffType.ADDED

    @property
    def removed(self) -> bool:
        return self.type is DiffType.REMOVED


@dataclass(frozen=True)
class WordSpan:
    value: str
    type: DiffType = DiffType.DEFAULT


Content = Union[str, List[WordSpan]]


@dataclass
class DiffInformation:
    """One column's contribution to a split row."""
    line_number: int
    type: DiffType
    value: Content


@dataclass
class LineInformation:
    """
    A split-view row. ``left`` is missing for a pure insertion and ``right``
    for a pure deletion.
    """
    left: Optional[DiffInformation] = None
    right: Optional[DiffInformation] = None

    @property
    def is_modification(self) -> bool:
        return (self.left is not None and self.right is not None
                and self.left.type is DiffType.REMOVED
                and self.right.type is DiffType.ADDED)

    @property
    def left_line_number(self) -> Optional[int]:
        return self.left.line_number if self.left is not None else None

    @property
    def right_line_number(self) -> Optional[int]:
        return self.right.line_number if self.right is not None else None

    def line_ids(self, config):
        ids = []
        if self.left is not None:
            ids.append(config.line_id(config.left_line_prefix, self.left.line_number))
        if self.right is not None:
            ids.append(config.line_id(config.right_line_prefix, self.right.line_number))
        return ids


@dataclass
class InlineLineInformation:
    """
    A unified-view row. Unchanged rows carry both line numbers, changed rows
    only the number of the side they belong to.
    """
    value: Content
    type: DiffType
    left_line_number: Optional[int] = None
    right_line_number: Optional[int] = None

    def line_ids(self, config):
        ids = []
        if self.left_line_number is not None:
            ids.append(config.line_id(config.left_line_prefix, self.left_line_number))
        if self.right_line_number is not None:
            ids.append(config.line_id(config.right_line_prefix, self.right_line_number))
        return ids
