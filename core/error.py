""" core/error.py """

from asdl import runtime


class _ErrorWithLocation(Exception):
    """An error that may point at a source position."""

    def __init__(self, msg, pos=runtime.NO_POS):
        # type: (str, int) -> None
        Exception.__init__(self, msg)
        self.msg = msg
        self.pos = pos

    def HasLocation(self):
        # type: () -> bool
        return self.pos != runtime.NO_POS

    def UserErrorString(self):
        # type: () -> str
        return self.msg

    def __repr__(self):
        # type: () -> str
        return '<%s %r>' % (self.msg, self.pos)


class Usage(_ErrorWithLocation):
    """For invalid printer configuration, like a negative indent width."""

    def __init__(self, msg, pos=runtime.NO_POS):
        # type: (str, int) -> None
        _ErrorWithLocation.__init__(self, msg, pos)
