#!/usr/bin/env python3
# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
id_kind.py - Id and Kind definitions for the operators in the syntax tree.

Every operator the printer emits is an Id.  The spelling of each Id is
registered right next to its name, so the printer never needs its own
operator-to-string switch.

Usage:
  from frontend.id_kind import Id, Kind, Spelling
"""

from typing import List, Tuple, Dict


class Id(object):
    """Operator and keyword identifiers.

    Class attributes like Id.Redir_Great are added by IdSpec below.  They are
    plain ints, starting at 1.
    """
    pass


class Kind(object):
    """A coarser version of Id, e.g. Kind.Redir for every redirect operator."""
    pass


class IdSpec(object):
    """Assigns integers to Id and Kind names, and records spellings."""

    def __init__(self, id_cls, kind_cls):
        # type: (type, type) -> None
        self.id_cls = id_cls
        self.kind_cls = kind_cls

        self.id_str2int = {}  # type: Dict[str, int]
        self.kind_str2int = {}  # type: Dict[str, int]

        self.id_names = {}  # type: Dict[int, str]  # Id int -> 'Redir_Great'
        self.kind_names = {}  # type: Dict[int, str]
        self.kind_lookup = {}  # type: Dict[int, int]  # Id int -> Kind int
        self.spellings = {}  # type: Dict[int, str]  # Id int -> '>'

        self.kind_sizes = []  # type: List[int]  # optional stats

        # Incremented on each method call.  Zero is never a valid Id.
        self.id_index = 1
        self.kind_index = 1

    def _AddId(self, id_name):
        # type: (str) -> int
        t = self.id_index

        self.id_str2int[id_name] = t
        self.id_names[t] = id_name
        self.kind_lookup[t] = self.kind_index
        setattr(self.id_cls, id_name, t)

        self.id_index += 1  # mutate last
        return t  # the index we used

    def _AddKind(self, kind_name):
        # type: (str) -> None
        self.kind_str2int[kind_name] = self.kind_index
        self.kind_names[self.kind_index] = kind_name
        setattr(self.kind_cls, kind_name, self.kind_index)
        self.kind_index += 1

    def AddKindPairs(self, kind_name, pairs):
        # type: (str, List[Tuple[str, str]]) -> None
        assert isinstance(pairs, list), pairs

        for name, spelling in pairs:
            id_int = self._AddId('%s_%s' % (kind_name, name))
            self.spellings[id_int] = spelling

        # Must be after adding Id
        self._AddKind(kind_name)
        self.kind_sizes.append(len(pairs))  # debug info


def AddKinds(spec):
    # type: (IdSpec) -> None

    # Binary commands, and case arm terminators
    spec.AddKindPairs('Op', [
        ('Pipe', '|'),
        ('PipeAmp', '|&'),  # bash extension for stderr
        ('DAmp', '&&'),
        ('DPipe', '||'),
        ('DSemi', ';;'),
        ('SemiAmp', ';&'),  # fall through
        ('DSemiAmp', ';;&'),  # test the next pattern
    ])

    spec.AddKindPairs('Redir', [
        ('Less', '<'),  # stdin
        ('Great', '>'),  # stdout
        ('DLess', '<<'),  # here doc redirect
        ('DGreat', '>>'),  # append stdout
        ('LessGreat', '<>'),
        ('LessAnd', '<&'),  # descriptor redirect
        ('GreatAnd', '>&'),  # descriptor redirect
        ('Clobber', '>|'),
        ('DLessDash', '<<-'),  # here doc redirect, leading tabs stripped
        ('TLess', '<<<'),  # here string
        ('AndGreat', '&>'),  # stdout and stderr to file
        ('AndDGreat', '&>>'),  # stdout and stderr appended to file
    ])

    # Operators in ${x op word}
    spec.AddKindPairs('VOp', [
        ('Colon', ':'),  # slicing
        ('Plus', '+'),
        ('ColonPlus', ':+'),
        ('Hyphen', '-'),
        ('ColonHyphen', ':-'),
        ('QMark', '?'),
        ('ColonQMark', ':?'),
        ('Equals', '='),
        ('ColonEquals', ':='),
        ('Percent', '%'),
        ('DPercent', '%%'),
        ('Pound', '#'),
        ('DPound', '##'),
        ('Caret', '^'),
        ('DCaret', '^^'),
        ('Comma', ','),
        ('DComma', ',,'),
    ])

    # Arithmetic, and the shared operators in [[ ]]
    spec.AddKindPairs('Arith', [
        ('Equal', '='),
        ('Plus', '+'), ('Minus', '-'), ('Percent', '%'),
        ('Star', '*'), ('Slash', '/'),
        ('Amp', '&'), ('Pipe', '|'), ('Caret', '^'),
        ('DAmp', '&&'), ('DPipe', '||'),
        ('DStar', '**'),
        ('DEqual', '=='), ('NEqual', '!='),
        ('LessEqual', '<='), ('GreatEqual', '>='),

        # mutating operators
        ('PlusEqual', '+='), ('MinusEqual', '-='), ('StarEqual', '*='),
        ('SlashEqual', '/='), ('PercentEqual', '%='),
        ('AmpEqual', '&='), ('PipeEqual', '|='), ('CaretEqual', '^='),
        ('DLessEqual', '<<='), ('DGreatEqual', '>>='),

        ('Less', '<'), ('Great', '>'),
        ('DLess', '<<'), ('DGreat', '>>'),
        ('QMark', '?'), ('Colon', ':'),  # ternary
        ('Comma', ','),

        # unary
        ('Bang', '!'),
        ('DPlus', '++'), ('DMinus', '--'),
    ])

    spec.AddKindPairs('BoolBinary', [
        ('EqualTilde', '=~'),
        ('nt', '-nt'), ('ot', '-ot'), ('ef', '-ef'),
        ('eq', '-eq'), ('ne', '-ne'),
        ('le', '-le'), ('ge', '-ge'),
        ('lt', '-lt'), ('gt', '-gt'),
    ])

    spec.AddKindPairs('BoolUnary', _Dash(list(_UNARY_CHARS)))

    # Openers whose spelling isn't implied by the node type
    spec.AddKindPairs('Left', [
        ('SingleQuote', "'"),
        ('DollarSingleQuote', "$'"),  # C escapes
        ('DoubleQuote', '"'),
        ('DollarDoubleQuote', '$"'),  # localized strings
        ('ProcSubIn', '<('),
        ('ProcSubOut', '>('),
    ])

    spec.AddKindPairs('ExtGlob', [
        ('At', '@('),
        ('Star', '*('),
        ('Plus', '+('),
        ('QMark', '?('),
        ('Bang', '!('),
    ])

    spec.AddKindPairs('KW', [
        ('While', 'while'),
        ('Until', 'until'),
    ])


# [[ -e ]] and friends, in the order bash documents them
_UNARY_CHARS = 'efdcbpSLgurwxstznovR'


def _Dash(strs):
    # type: (List[str]) -> List[Tuple[str, str]]
    # Gives a pair of (token name, spelling)
    return [(s, '-' + s) for s in strs]


ID_SPEC = IdSpec(Id, Kind)
AddKinds(ID_SPEC)

# Debug
_kind_sizes = ID_SPEC.kind_sizes


def Id_str(id_):
    # type: (int) -> str
    return 'Id.%s' % ID_SPEC.id_names[id_]


def Kind_str(kind):
    # type: (int) -> str
    return 'Kind.%s' % ID_SPEC.kind_names[kind]


def LookupKind(id_):
    # type: (int) -> int
    return ID_SPEC.kind_lookup[id_]


def Spelling(id_):
    # type: (int) -> str
    """How the operator is written in shell source.

    Raises KeyError for an Id without a registered spelling.  Every operator
    the printer can see has one.
    """
    return ID_SPEC.spellings[id_]
