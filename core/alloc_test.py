#!/usr/bin/env python3
"""alloc_test.py: Tests for alloc.py."""

import unittest

from asdl import runtime
from core import alloc  # module under test


class LineOffsetsTest(unittest.TestCase):

    def testOffsets(self):
        self.assertEqual([0], alloc.LineOffsets(''))
        self.assertEqual([0], alloc.LineOffsets('echo hi'))
        self.assertEqual([0, 8], alloc.LineOffsets('echo hi\n'))
        self.assertEqual([0, 2, 3, 5], alloc.LineOffsets('a\n\nb\nc'))


class LineTrackerTest(unittest.TestCase):

    def setUp(self):
        # a\nbb\n\nccc
        self.tracker = alloc.LineTracker([0, 2, 5, 6])

    def testFirstPositionStartsALine(self):
        t = self.tracker
        self.assertFalse(t.Started())
        self.assertTrue(t.IsPast(1))  # 'a' at offset 0

        t.AdvanceTo(1)
        self.assertTrue(t.Started())
        self.assertEqual(1, t.index)
        self.assertEqual(2, t.next_line)

        self.assertFalse(t.IsPast(2))  # the newline after 'a'
        self.assertTrue(t.IsPast(3))  # first 'b'

    def testAdvanceSkipsBlankLines(self):
        t = self.tracker
        t.AdvanceTo(1)
        t.AdvanceTo(7)  # first 'c' at offset 6
        self.assertEqual(4, t.index)
        self.assertEqual(runtime.MAX_POS, t.next_line)

        # Everything after the table is on the last line
        self.assertFalse(t.IsPast(1000))

    def testNeverMovesBack(self):
        t = self.tracker
        t.AdvanceTo(7)
        index = t.index
        t.AdvanceTo(1)
        self.assertEqual(index, t.index)

    def testCopyIsIndependent(self):
        t = self.tracker
        t.AdvanceTo(1)

        other = t.Copy()
        other.IncLine()
        self.assertEqual(2, other.index)
        self.assertEqual(1, t.index)

    def testLineStart(self):
        t = self.tracker
        self.assertEqual(5, t.LineStart(2))
        self.assertEqual(runtime.MAX_POS, t.LineStart(4))

    def testReset(self):
        t = self.tracker
        t.AdvanceTo(7)
        t.Reset([0, 10])
        self.assertEqual(0, t.index)
        self.assertEqual(0, t.next_line)
        self.assertEqual([0, 10], t.lines)


if __name__ == '__main__':
    unittest.main()
