#!/usr/bin/env python3
# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
id_kind_test.py: Tests for id_kind.py
"""

import unittest

from frontend import id_kind  # module under test
from frontend.id_kind import Id, Kind, ID_SPEC


class TokensTest(unittest.TestCase):

    def testId(self):
        self.assertEqual(1, Id.Op_Pipe)
        self.assertEqual('Id.Op_Pipe', id_kind.Id_str(Id.Op_Pipe))
        self.assertEqual('Id.Redir_AndDGreat',
                         id_kind.Id_str(Id.Redir_AndDGreat))

        # All ints are distinct
        ids = list(ID_SPEC.id_str2int.values())
        self.assertEqual(len(ids), len(set(ids)))

    def testKinds(self):
        self.assertEqual(Kind.Redir, id_kind.LookupKind(Id.Redir_TLess))
        self.assertEqual(Kind.Arith, id_kind.LookupKind(Id.Arith_CaretEqual))
        self.assertEqual(Kind.BoolUnary, id_kind.LookupKind(Id.BoolUnary_R))
        self.assertEqual('Kind.VOp', id_kind.Kind_str(Kind.VOp))

    def testSpellings(self):
        cases = [
            (Id.Op_PipeAmp, '|&'),
            (Id.Op_DSemiAmp, ';;&'),
            (Id.Redir_DLessDash, '<<-'),
            (Id.Redir_AndDGreat, '&>>'),
            (Id.Redir_Clobber, '>|'),
            (Id.VOp_ColonHyphen, ':-'),
            (Id.VOp_DComma, ',,'),
            (Id.Arith_DGreatEqual, '>>='),
            (Id.Arith_DStar, '**'),
            (Id.BoolBinary_EqualTilde, '=~'),
            (Id.BoolBinary_ef, '-ef'),
            (Id.BoolUnary_S, '-S'),
            (Id.BoolUnary_R, '-R'),
            (Id.Left_DollarSingleQuote, "$'"),
            (Id.ExtGlob_Bang, '!('),
            (Id.KW_Until, 'until'),
        ]
        for id_, expected in cases:
            self.assertEqual(expected, id_kind.Spelling(id_),
                             id_kind.Id_str(id_))

    def testEverySpellingIsUnique(self):
        # Within a kind, two Ids never print the same way
        seen = {}  # type: dict
        for id_, spelling in ID_SPEC.spellings.items():
            key = (id_kind.LookupKind(id_), spelling)
            self.assertNotIn(key, seen, id_kind.Id_str(id_))
            seen[key] = id_

    def testMissingSpelling(self):
        self.assertRaises(KeyError, id_kind.Spelling, 0)

    def testPrintStats(self):
        k = id_kind._kind_sizes
        self.assertEqual(len(ID_SPEC.kind_str2int), len(k))
        self.assertEqual(sum(k), len(ID_SPEC.id_str2int))


if __name__ == '__main__':
    unittest.main()
