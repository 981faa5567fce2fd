#!/usr/bin/env python3
"""pool_test.py: Tests for pool.py."""

import threading
import unittest

from core import pool  # module under test


class _Obj(object):

    def __init__(self):
        self.num_resets = 0
        self.dirty = False

    def Reset(self):
        self.num_resets += 1
        self.dirty = False


class PoolTest(unittest.TestCase):

    def testCheckOutResets(self):
        p = pool.Pool(_Obj)
        obj = p.CheckOut()
        self.assertEqual(1, obj.num_resets)
        self.assertEqual(1, p.NumCheckedOut())

        obj.dirty = True
        p.CheckIn(obj)
        self.assertFalse(obj.dirty)
        self.assertEqual(0, p.NumCheckedOut())
        self.assertEqual(1, p.NumIdle())

    def testReuse(self):
        p = pool.Pool(_Obj)
        obj = p.CheckOut()
        p.CheckIn(obj)
        self.assertIs(obj, p.CheckOut())

    def testMaxIdle(self):
        p = pool.Pool(_Obj, max_idle=2)
        objs = [p.CheckOut() for _ in range(4)]
        self.assertEqual(4, len(set(id(o) for o in objs)))
        for o in objs:
            p.CheckIn(o)
        self.assertEqual(2, p.NumIdle())

    def testContextReturnsOnError(self):
        p = pool.Pool(_Obj)
        try:
            with pool.ctx_CheckOut(p) as obj:
                self.assertEqual(1, p.NumCheckedOut())
                obj.dirty = True
                raise IOError('sink failed')
        except IOError:
            pass
        self.assertEqual(0, p.NumCheckedOut())
        self.assertEqual(1, p.NumIdle())
        self.assertFalse(obj.dirty)

    def testThreads(self):
        p = pool.Pool(_Obj)
        errors = []

        def Work():
            for _ in range(50):
                with pool.ctx_CheckOut(p) as obj:
                    if obj.dirty:
                        errors.append(obj)
                    obj.dirty = True

        threads = [threading.Thread(target=Work) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual([], errors)
        self.assertEqual(0, p.NumCheckedOut())


if __name__ == '__main__':
    unittest.main()
