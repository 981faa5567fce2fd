"""
mylib.py: runtime helpers shared by every package
"""

import sys

from typing import Any, List


def log(msg, *args):
    # type: (str, *Any) -> None
    """Print debug output to stderr."""
    if args:
        msg = msg % args
    print(msg, file=sys.stderr)


class Writer(object):

    def write(self, s):
        # type: (str) -> None
        raise NotImplementedError()

    def flush(self):
        # type: () -> None
        raise NotImplementedError()


class BufWriter(Writer):
    """Mimic StringIO API."""

    def __init__(self):
        # type: () -> None
        self.parts = []  # type: List[str]

    def write(self, s):
        # type: (str) -> None
        self.parts.append(s)

    def flush(self):
        # type: () -> None
        pass

    def getvalue(self):
        # type: () -> str
        return ''.join(self.parts)


class BufferedWriter(Writer):
    """Buffers writes in memory and hands them to an underlying writer.

    Like a C stdio buffer: nothing reaches the sink until the buffer fills up
    or Flush() is called.  Errors from the sink propagate to the caller of
    write() or Flush(), and whatever was buffered at that point is dropped.
    """

    def __init__(self, f=None, size=4096):
        # type: (Any, int) -> None
        self.f = f
        self.size = size
        self.parts = []  # type: List[str]
        self.num_buffered = 0

    def Reset(self, f):
        # type: (Any) -> None
        """Discard buffered output and write to f from now on."""
        self.f = f
        del self.parts[:]
        self.num_buffered = 0

    def write(self, s):
        # type: (str) -> None
        self.parts.append(s)
        self.num_buffered += len(s)
        if self.num_buffered >= self.size:
            self.Flush()

    def Flush(self):
        # type: () -> None
        if not self.parts:
            return
        s = ''.join(self.parts)
        del self.parts[:]
        self.num_buffered = 0
        self.f.write(s)

    def flush(self):
        # type: () -> None
        self.Flush()
        if hasattr(self.f, 'flush'):
            self.f.flush()


class CountingWriter(Writer):
    """Discards output and only counts the characters written.

    Used to measure how wide something would render without producing it.
    """

    def __init__(self):
        # type: () -> None
        self.count = 0

    def Reset(self, f=None):
        # type: (Any) -> None
        self.count = 0

    def write(self, s):
        # type: (str) -> None
        self.count += len(s)

    def Flush(self):
        # type: () -> None
        pass

    def flush(self):
        # type: () -> None
        pass


class tagswitch(object):
    """A ContextManager that switches over the tags of sum type nodes."""

    def __init__(self, node):
        # type: (Any) -> None
        self.tag = node.tag()

    def __enter__(self):
        # type: () -> tagswitch
        return self

    def __exit__(self, type, value, traceback):
        # type: (Any, Any, Any) -> bool
        return False  # Allows a traceback to occur

    def __call__(self, *cases):
        # type: (*Any) -> bool
        return self.tag in cases
