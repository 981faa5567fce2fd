"""asdl/pybase.py is a runtime library for syntax tree nodes in Python"""

from typing import List


class CompoundObj(object):
    # Variants of sum types are tagged from 1, product types from 64
    _type_tag = 0  # Zero is invalid

    __slots__ = ()  # type: tuple

    def tag(self):
        # type: () -> int
        return self._type_tag

    def _FieldNames(self):
        # type: () -> List[str]
        names = []  # type: List[str]
        for cls in type(self).__mro__:
            names.extend(getattr(cls, '__slots__', ()))
        return names

    def __eq__(self, other):
        # type: (object) -> bool
        """Structural equality, so tests can compare whole trees."""
        if type(self) is not type(other):
            return False
        for name in self._FieldNames():
            if getattr(self, name) != getattr(other, name):
                return False
        return True

    def __ne__(self, other):
        # type: (object) -> bool
        return not self.__eq__(other)

    __hash__ = None  # type: ignore

    def __repr__(self):
        # type: () -> str
        """Print this node as (ClassName field:value ...)."""
        parts = [self.__class__.__name__]
        for name in self._FieldNames():
            parts.append('%s:%r' % (name, getattr(self, name)))
        return '(%s)' % ' '.join(parts)
