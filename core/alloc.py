"""
alloc.py - tracking which source line a position is on

The syntax tree doesn't store line numbers.  It stores positions, plus one
table of line-start offsets for the whole file.  LineTracker walks that table
forward as the printer walks the tree.
"""

from asdl import runtime
from mycpp.mylib import log

from typing import List

_ = log


def LineOffsets(s):
    # type: (str) -> List[int]
    """Return the 0-based offset of each line start in s.

    The first entry is always 0.  A trailing newline starts one more (empty)
    line, the way a parser sees it.
    """
    offsets = [0]
    i = s.find('\n')
    while i != -1:
        offsets.append(i + 1)
        i = s.find('\n', i + 1)
    return offsets


class LineTracker(object):
    """A cursor into the line table that only moves forward.

    next_line is where the line after the current one starts.  Positions are
    1-based offsets, so a position is on a later line exactly when it's
    greater than next_line.  Before any line has been entered, index is 0 and
    next_line is 0, so every real position is "past" it.
    """

    def __init__(self, lines=None):
        # type: (List[int]) -> None
        self.lines = lines if lines is not None else []  # type: List[int]
        self.index = 0
        self.next_line = 0

    def Reset(self, lines):
        # type: (List[int]) -> None
        self.lines = lines
        self.index = 0
        self.next_line = 0

    def Copy(self):
        # type: () -> LineTracker
        """Return an independent cursor at the same place, for look-ahead."""
        t = LineTracker(self.lines)
        t.index = self.index
        t.next_line = self.next_line
        return t

    def IncLine(self):
        # type: () -> None
        self.index += 1
        if self.index >= len(self.lines):
            self.next_line = runtime.MAX_POS
        else:
            self.next_line = self.lines[self.index]

    def AdvanceTo(self, pos):
        # type: (int) -> None
        """Move forward until pos is on the current line.  Never moves back."""
        while self.next_line < pos:
            self.IncLine()

    def IsPast(self, pos):
        # type: (int) -> bool
        """Is pos on a later line than the current one?"""
        return pos > self.next_line

    def Started(self):
        # type: () -> bool
        """Has any line been entered yet?"""
        return self.index > 0

    def LineStart(self, i):
        # type: (int) -> int
        """Offset where line i (0-based) starts, or MAX_POS past the end."""
        if i >= len(self.lines):
            return runtime.MAX_POS
        return self.lines[i]
