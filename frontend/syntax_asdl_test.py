#!/usr/bin/env python3
"""
syntax_asdl_test.py: Tests for syntax_asdl.py
"""

import unittest

from frontend.id_kind import Id
from frontend.syntax_asdl import (
    Lit,
    Stmt,
    Word,
    arith_expr_e,
    command,
    command_e,
    command_str,
    word_part_e,
    word_part_str,
)


class NodeTest(unittest.TestCase):

    def testTags(self):
        lit = Lit(1, 'echo')
        self.assertEqual(word_part_e.Lit, lit.tag())
        self.assertEqual('word_part.Lit', word_part_str(lit.tag()))

        # A Word is also an arithmetic expression
        w = Word([lit])
        self.assertEqual(arith_expr_e.Word, w.tag())

        c = command.CallExpr([w])
        self.assertEqual(command_e.CallExpr, c.tag())
        self.assertEqual('command.CallExpr', command_str(c.tag()))

    def testEquality(self):
        s1 = Stmt(1, False, [], command.CallExpr([Word([Lit(1, 'ls')])]), [],
                  False)
        s2 = Stmt(1, False, [], command.CallExpr([Word([Lit(1, 'ls')])]), [],
                  False)
        self.assertEqual(s1, s2)

        s2.background = True
        self.assertNotEqual(s1, s2)

        self.assertNotEqual(Lit(1, 'x'), Word([Lit(1, 'x')]))

    def testRepr(self):
        b = command.BinaryCmd(3, Id.Op_DAmp, None, None)
        expected = '(BinaryCmd op_pos:3 op:%d x:None y:None)' % Id.Op_DAmp
        self.assertEqual(expected, repr(b))


if __name__ == '__main__':
    unittest.main()
