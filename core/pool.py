"""
pool.py - Reuse of render state objects, like you would do in C++.

A printer carries a lot of transient state: the line cursor, the comment
queue, the indentation stack, pending here docs.  Allocating one per call is
fine, but callers that print many small trees can share them through a Pool.

The contract:

- CheckOut() hands an object to exactly one caller, after calling its Reset().
- CheckIn() resets it again and gives it back.  The caller must not touch it
  afterward.
- Both are safe to call from several threads.  Rendering itself is never
  shared; each thread works on the object it checked out.
"""

import threading

from mycpp.mylib import log

from typing import Any, Callable, List


class Pool(object):
    """Owns idle objects that have a Reset() method."""

    def __init__(self, factory, max_idle=8):
        # type: (Callable[[], Any], int) -> None
        self.factory = factory
        self.max_idle = max_idle  # extra objects are dropped on CheckIn()

        self.lock = threading.Lock()
        self.idle = []  # type: List[Any]
        self.num_out = 0  # checked out right now

    def CheckOut(self):
        # type: () -> Any
        with self.lock:
            self.num_out += 1
            if self.idle:
                obj = self.idle.pop()
            else:
                obj = None
                if self.num_out > 1:
                    log('pool: %d objects checked out, allocating another',
                        self.num_out)

        if obj is None:
            obj = self.factory()
        obj.Reset()
        return obj

    def CheckIn(self, obj):
        # type: (Any) -> None
        obj.Reset()  # drop references to the caller's tree and sink
        with self.lock:
            self.num_out -= 1
            assert self.num_out >= 0, 'CheckIn() without CheckOut()'
            if len(self.idle) < self.max_idle:
                self.idle.append(obj)

    def NumIdle(self):
        # type: () -> int
        with self.lock:
            return len(self.idle)

    def NumCheckedOut(self):
        # type: () -> int
        with self.lock:
            return self.num_out


class ctx_CheckOut(object):
    """Check an object out for the duration of a 'with' block.

    The object goes back to the pool even if the block raises, e.g. when the
    output sink fails halfway through a print.
    """

    def __init__(self, pool):
        # type: (Pool) -> None
        self.pool = pool
        self.obj = pool.CheckOut()

    def __enter__(self):
        # type: () -> Any
        return self.obj

    def __exit__(self, type, value, traceback):
        # type: (Any, Any, Any) -> None
        self.pool.CheckIn(self.obj)
