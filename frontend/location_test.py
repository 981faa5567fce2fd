#!/usr/bin/env python3
"""
location_test.py: Tests for location.py
"""

import unittest

from asdl import runtime
from core import test_lib
from frontend import location  # module under test
from frontend.id_kind import Id
from frontend.syntax_asdl import Assign, Word, command, word_part


class WordTest(unittest.TestCase):

    def testLiteralWord(self):
        b = test_lib.SourceBuilder('echo hello')
        b.Word('echo')
        w = b.Word('hello')
        self.assertEqual(6, location.PosForWord(w))
        self.assertEqual(11, location.EndForWord(w))

    def testEmptyWord(self):
        w = Word([])
        self.assertEqual(runtime.NO_POS, location.PosForWord(w))
        self.assertEqual(runtime.NO_POS, location.EndForWord(w))

    def testQuotes(self):
        b = test_lib.SourceBuilder("'ab' \"c\"")
        sq = b.SglQuoted('ab')
        self.assertEqual(1, location.PosForWordPart(sq))
        self.assertEqual(5, location.EndForWordPart(sq))

        left = b.Pos('"')
        lit = b.Lit('c')
        right = b.Pos('"')
        dq = word_part.DblQuoted(left, Id.Left_DoubleQuote, [lit], right)
        self.assertEqual(6, location.PosForWordPart(dq))
        self.assertEqual(9, location.EndForWordPart(dq))

    def testDollarSingleQuote(self):
        b = test_lib.SourceBuilder("$'a'")
        pos = b.Pos("$'")
        sq = word_part.SglQuoted(pos, Id.Left_DollarSingleQuote, 'a')
        self.assertEqual(5, location.EndForWordPart(sq))

    def testShortParam(self):
        b = test_lib.SourceBuilder('$foo')
        part = b.ShortParam('foo')
        self.assertEqual(1, location.PosForWordPart(part))
        self.assertEqual(5, location.EndForWordPart(part))


class StmtTest(unittest.TestCase):

    def testBareAssignment(self):
        b = test_lib.SourceBuilder('x=1')
        a = b.Assign('x', '1')
        s = b.Stmt(command.CallExpr([]), assigns=[a])
        self.assertEqual(1, s.pos)
        self.assertEqual(4, location.EndForStmt(s))

    def testEmptyAssignment(self):
        b = test_lib.SourceBuilder('x+=')
        name = b.Lit('x')
        a = Assign(name, True, Word([]))
        self.assertEqual(4, location.EndForAssign(a))

    def testRedirectAndBackground(self):
        b = test_lib.SourceBuilder('echo >out &')
        words = b.Words('echo')
        r = b.Redir('>', Id.Redir_Great, 'out')
        s = b.Stmt(command.CallExpr(words), redirs=[r], background=True)
        self.assertEqual(6, location.PosForRedirect(r))
        self.assertEqual(10, location.EndForRedirect(r))
        self.assertEqual(12, location.EndForStmt(s))

    def testRedirectWithFd(self):
        b = test_lib.SourceBuilder('2>&1')
        r = b.Redir('>&', Id.Redir_GreatAnd, '1', n='2')
        self.assertEqual(1, location.PosForRedirect(r))

    def testCompound(self):
        b = test_lib.SourceBuilder('if a; then b; fi')
        if_pos = b.Pos('if')
        cond = [b.Call('a')]
        then_pos = b.Pos('then')
        body = [b.Call('b')]
        fi_pos = b.Pos('fi')
        node = command.IfClause(if_pos, cond, then_pos, body, [], 0, [],
                                fi_pos)
        self.assertEqual(1, location.PosForCommand(node))
        self.assertEqual(17, location.EndForCommand(node))

    def testDeclWithoutAssigns(self):
        b = test_lib.SourceBuilder('local')
        node = command.DeclClause(b.Pos('local'), 'local', [], [])
        self.assertEqual(6, location.EndForCommand(node))

        node = command.DeclClause(1, None, [], [])
        self.assertEqual(8, location.EndForCommand(node))

    def testEmptyLet(self):
        b = test_lib.SourceBuilder('let')
        s = b.Stmt(command.LetClause(b.Pos('let'), []))
        self.assertEqual(4, location.EndForStmt(s))


if __name__ == '__main__':
    unittest.main()
