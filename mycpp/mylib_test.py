#!/usr/bin/env python3
"""
mylib_test.py: Tests for mylib.py
"""

import unittest

from mycpp import mylib  # module under test


class _BrokenSink(object):

    def write(self, s):
        raise IOError('broken pipe')


class BufferedWriterTest(unittest.TestCase):

    def testFlushesWhenFull(self):
        sink = mylib.BufWriter()
        w = mylib.BufferedWriter(sink, size=4)
        w.write('ab')
        self.assertEqual('', sink.getvalue())
        w.write('cd')
        self.assertEqual('abcd', sink.getvalue())

        w.write('e')
        w.Flush()
        self.assertEqual('abcde', sink.getvalue())

        w.Flush()  # nothing buffered
        self.assertEqual(['abcd', 'e'], sink.parts)

    def testReset(self):
        first = mylib.BufWriter()
        second = mylib.BufWriter()
        w = mylib.BufferedWriter(first)
        w.write('lost')
        w.Reset(second)
        w.write('kept')
        w.Flush()
        self.assertEqual('', first.getvalue())
        self.assertEqual('kept', second.getvalue())

    def testErrorPropagates(self):
        w = mylib.BufferedWriter(_BrokenSink())
        w.write('x')
        self.assertRaises(IOError, w.Flush)


class CountingWriterTest(unittest.TestCase):

    def testCount(self):
        w = mylib.CountingWriter()
        w.write('echo')
        w.write(' hi')
        self.assertEqual(7, w.count)
        w.Reset()
        self.assertEqual(0, w.count)


class TagSwitchTest(unittest.TestCase):

    def testTagSwitch(self):

        class _Node(object):

            def tag(self):
                return 3

        with mylib.tagswitch(_Node()) as case:
            self.assertFalse(case(1, 2))
            self.assertTrue(case(3))


if __name__ == '__main__':
    unittest.main()
