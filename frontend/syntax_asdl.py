"""
syntax_asdl.py - The shell syntax tree consumed by the printer.

Laid out the way asdl/gen_python.py lays out generated code:

  command_e    enum of variant tags
  command_t    base class of the sum type
  command.If   the variant classes, in a namespace class

Product types like Word and Lit get tags starting at 64, so a product can be
shared as a variant of a sum type, e.g. Word is also an arith_expr_t.

Positions are 1-based source offsets.  runtime.NO_POS (0) means unknown.  Nodes
that end in a delimiter (fi, done, esac, }, ), ]], quotes) record where the
delimiter starts, so location.End() is exact.
"""

from asdl import pybase

from typing import Optional, List, Dict


#
# word_part
#

class word_part_e(object):
    Lit = 65
    SglQuoted = 1
    DblQuoted = 2
    CmdSubst = 3
    ParamExp = 4
    ArithmExp = 5
    ArrayExpr = 6
    ExtGlob = 7
    ProcSubst = 8


_word_part_str = {
    65: 'word_part.Lit',
    1: 'word_part.SglQuoted',
    2: 'word_part.DblQuoted',
    3: 'word_part.CmdSubst',
    4: 'word_part.ParamExp',
    5: 'word_part.ArithmExp',
    6: 'word_part.ArrayExpr',
    7: 'word_part.ExtGlob',
    8: 'word_part.ProcSubst',
}  # type: Dict[int, str]


def word_part_str(tag):
    # type: (int) -> str
    return _word_part_str[tag]


class word_part_t(pybase.CompoundObj):
    __slots__ = ()


class word_part(object):

    class SglQuoted(word_part_t):
        _type_tag = 1
        __slots__ = ('quote_pos', 'quote', 'value')

        def __init__(self, quote_pos, quote, value):
            # type: (int, int, str) -> None
            self.quote_pos = quote_pos
            self.quote = quote  # Id.Left_SingleQuote or Left_DollarSingleQuote
            self.value = value

    class DblQuoted(word_part_t):
        _type_tag = 2
        __slots__ = ('quote_pos', 'quote', 'parts', 'right')

        def __init__(self, quote_pos, quote, parts, right):
            # type: (int, int, List[word_part_t], int) -> None
            self.quote_pos = quote_pos
            self.quote = quote  # Id.Left_DoubleQuote or Left_DollarDoubleQuote
            self.parts = parts
            self.right = right

    class CmdSubst(word_part_t):
        _type_tag = 3
        __slots__ = ('left', 'stmts', 'right')

        def __init__(self, left, stmts, right):
            # type: (int, List[Stmt], int) -> None
            self.left = left
            self.stmts = stmts
            self.right = right

    class ParamExp(word_part_t):
        _type_tag = 4
        __slots__ = ('dollar', 'short', 'length', 'param', 'ind', 'repl', 'exp',
                     'rbrace')

        def __init__(self, dollar, short, length, param, ind, repl, exp,
                     rbrace):
            # type: (int, bool, bool, Lit, Optional[Index], Optional[Replace], Optional[Expansion], int) -> None
            self.dollar = dollar
            self.short = short  # $foo rather than ${foo}
            self.length = length  # ${#foo}
            self.param = param
            self.ind = ind
            self.repl = repl
            self.exp = exp
            self.rbrace = rbrace

    class ArithmExp(word_part_t):
        _type_tag = 5
        __slots__ = ('left', 'x', 'right')

        def __init__(self, left, x, right):
            # type: (int, arith_expr_t, int) -> None
            self.left = left
            self.x = x
            self.right = right

    class ArrayExpr(word_part_t):
        _type_tag = 6
        __slots__ = ('lparen', 'elems', 'rparen')

        def __init__(self, lparen, elems, rparen):
            # type: (int, List[Word], int) -> None
            self.lparen = lparen
            self.elems = elems
            self.rparen = rparen

    class ExtGlob(word_part_t):
        _type_tag = 7
        __slots__ = ('op_pos', 'op', 'pattern')

        def __init__(self, op_pos, op, pattern):
            # type: (int, int, Lit) -> None
            self.op_pos = op_pos
            self.op = op  # Id.ExtGlob_*
            self.pattern = pattern

    class ProcSubst(word_part_t):
        _type_tag = 8
        __slots__ = ('op_pos', 'op', 'stmts', 'rparen')

        def __init__(self, op_pos, op, stmts, rparen):
            # type: (int, int, List[Stmt], int) -> None
            self.op_pos = op_pos
            self.op = op  # Id.Left_ProcSubIn or Left_ProcSubOut
            self.stmts = stmts
            self.rparen = rparen


#
# arith_expr
#

class arith_expr_e(object):
    Word = 66
    Binary = 1
    Unary = 2
    Paren = 3


_arith_expr_str = {
    66: 'arith_expr.Word',
    1: 'arith_expr.Binary',
    2: 'arith_expr.Unary',
    3: 'arith_expr.Paren',
}  # type: Dict[int, str]


def arith_expr_str(tag):
    # type: (int) -> str
    return _arith_expr_str[tag]


class arith_expr_t(pybase.CompoundObj):
    __slots__ = ()


class arith_expr(object):

    class Binary(arith_expr_t):
        _type_tag = 1
        __slots__ = ('op_pos', 'op', 'x', 'y')

        def __init__(self, op_pos, op, x, y):
            # type: (int, int, arith_expr_t, arith_expr_t) -> None
            self.op_pos = op_pos
            self.op = op  # Id.Arith_* or Id.BoolBinary_*
            self.x = x
            self.y = y

    class Unary(arith_expr_t):
        _type_tag = 2
        __slots__ = ('op_pos', 'op', 'post', 'x')

        def __init__(self, op_pos, op, post, x):
            # type: (int, int, bool, arith_expr_t) -> None
            self.op_pos = op_pos
            self.op = op  # Id.Arith_* or Id.BoolUnary_*
            self.post = post  # x++ rather than ++x
            self.x = x

    class Paren(arith_expr_t):
        _type_tag = 3
        __slots__ = ('lparen', 'x', 'rparen')

        def __init__(self, lparen, x, rparen):
            # type: (int, arith_expr_t, int) -> None
            self.lparen = lparen
            self.x = x
            self.rparen = rparen


#
# loop
#

class loop_e(object):
    WordIter = 1
    CStyleLoop = 2


_loop_str = {
    1: 'loop.WordIter',
    2: 'loop.CStyleLoop',
}  # type: Dict[int, str]


def loop_str(tag):
    # type: (int) -> str
    return _loop_str[tag]


class loop_t(pybase.CompoundObj):
    __slots__ = ()


class loop(object):

    class WordIter(loop_t):
        _type_tag = 1
        __slots__ = ('name', 'words')

        def __init__(self, name, words):
            # type: (Lit, List[Word]) -> None
            self.name = name
            self.words = words  # empty for 'for x; do'

    class CStyleLoop(loop_t):
        _type_tag = 2
        __slots__ = ('lparen', 'init', 'cond', 'post', 'rparen')

        def __init__(self, lparen, init, cond, post, rparen):
            # type: (int, Optional[arith_expr_t], Optional[arith_expr_t], Optional[arith_expr_t], int) -> None
            self.lparen = lparen
            self.init = init
            self.cond = cond
            self.post = post
            self.rparen = rparen


#
# command
#

class command_e(object):
    CallExpr = 1
    Block = 2
    IfClause = 3
    Subshell = 4
    WhileUntil = 5
    ForClause = 6
    BinaryCmd = 7
    FuncDecl = 8
    CaseClause = 9
    ArithCmd = 10
    TestClause = 11
    DeclClause = 12
    EvalClause = 13
    CoprocClause = 14
    LetClause = 15


_command_str = {
    1: 'command.CallExpr',
    2: 'command.Block',
    3: 'command.IfClause',
    4: 'command.Subshell',
    5: 'command.WhileUntil',
    6: 'command.ForClause',
    7: 'command.BinaryCmd',
    8: 'command.FuncDecl',
    9: 'command.CaseClause',
    10: 'command.ArithCmd',
    11: 'command.TestClause',
    12: 'command.DeclClause',
    13: 'command.EvalClause',
    14: 'command.CoprocClause',
    15: 'command.LetClause',
}  # type: Dict[int, str]


def command_str(tag):
    # type: (int) -> str
    return _command_str[tag]


class command_t(pybase.CompoundObj):
    __slots__ = ()


class command(object):

    class CallExpr(command_t):
        _type_tag = 1
        __slots__ = ('args',)

        def __init__(self, args):
            # type: (List[Word]) -> None
            self.args = args

    class Block(command_t):
        _type_tag = 2
        __slots__ = ('lbrace', 'stmts', 'rbrace')

        def __init__(self, lbrace, stmts, rbrace):
            # type: (int, List[Stmt], int) -> None
            self.lbrace = lbrace
            self.stmts = stmts
            self.rbrace = rbrace

    class IfClause(command_t):
        _type_tag = 3
        __slots__ = ('if_pos', 'cond_stmts', 'then_pos', 'then_stmts',
                     'elifs', 'else_pos', 'else_stmts', 'fi_pos')

        def __init__(self, if_pos, cond_stmts, then_pos, then_stmts, elifs,
                     else_pos, else_stmts, fi_pos):
            # type: (int, List[Stmt], int, List[Stmt], List[Elif], int, List[Stmt], int) -> None
            self.if_pos = if_pos
            self.cond_stmts = cond_stmts
            self.then_pos = then_pos
            self.then_stmts = then_stmts
            self.elifs = elifs
            self.else_pos = else_pos  # NO_POS without 'else'
            self.else_stmts = else_stmts
            self.fi_pos = fi_pos

    class Subshell(command_t):
        _type_tag = 4
        __slots__ = ('lparen', 'stmts', 'rparen')

        def __init__(self, lparen, stmts, rparen):
            # type: (int, List[Stmt], int) -> None
            self.lparen = lparen
            self.stmts = stmts
            self.rparen = rparen

    class WhileUntil(command_t):
        _type_tag = 5
        __slots__ = ('keyword_pos', 'keyword', 'cond_stmts', 'do_pos',
                     'do_stmts', 'done_pos')

        def __init__(self, keyword_pos, keyword, cond_stmts, do_pos, do_stmts,
                     done_pos):
            # type: (int, int, List[Stmt], int, List[Stmt], int) -> None
            self.keyword_pos = keyword_pos
            self.keyword = keyword  # Id.KW_While or Id.KW_Until
            self.cond_stmts = cond_stmts
            self.do_pos = do_pos
            self.do_stmts = do_stmts
            self.done_pos = done_pos

    class ForClause(command_t):
        _type_tag = 6
        __slots__ = ('for_pos', 'loop', 'do_pos', 'do_stmts', 'done_pos')

        def __init__(self, for_pos, loop, do_pos, do_stmts, done_pos):
            # type: (int, loop_t, int, List[Stmt], int) -> None
            self.for_pos = for_pos
            self.loop = loop
            self.do_pos = do_pos
            self.do_stmts = do_stmts
            self.done_pos = done_pos

    class BinaryCmd(command_t):
        _type_tag = 7
        __slots__ = ('op_pos', 'op', 'x', 'y')

        def __init__(self, op_pos, op, x, y):
            # type: (int, int, Stmt, Stmt) -> None
            self.op_pos = op_pos
            self.op = op  # Id.Op_Pipe, Op_PipeAmp, Op_DAmp, Op_DPipe
            self.x = x
            self.y = y

    class FuncDecl(command_t):
        _type_tag = 8
        __slots__ = ('pos', 'bash_style', 'name', 'body')

        def __init__(self, pos, bash_style, name, body):
            # type: (int, bool, Lit, Stmt) -> None
            self.pos = pos
            self.bash_style = bash_style  # 'function f()' rather than 'f()'
            self.name = name
            self.body = body

    class CaseClause(command_t):
        _type_tag = 9
        __slots__ = ('case_pos', 'word', 'items', 'esac_pos')

        def __init__(self, case_pos, word, items, esac_pos):
            # type: (int, Word, List[PatternList], int) -> None
            self.case_pos = case_pos
            self.word = word
            self.items = items
            self.esac_pos = esac_pos

    class ArithCmd(command_t):
        _type_tag = 10
        __slots__ = ('left', 'x', 'right')

        def __init__(self, left, x, right):
            # type: (int, arith_expr_t, int) -> None
            self.left = left
            self.x = x
            self.right = right

    class TestClause(command_t):
        _type_tag = 11
        __slots__ = ('left', 'x', 'right')

        def __init__(self, left, x, right):
            # type: (int, arith_expr_t, int) -> None
            self.left = left
            self.x = x
            self.right = right

    class DeclClause(command_t):
        _type_tag = 12
        __slots__ = ('pos', 'variant', 'opts', 'assigns')

        def __init__(self, pos, variant, opts, assigns):
            # type: (int, Optional[str], List[Word], List[Assign]) -> None
            self.pos = pos
            self.variant = variant  # declare, local, export, ...  None is declare
            self.opts = opts
            self.assigns = assigns

    class EvalClause(command_t):
        _type_tag = 13
        __slots__ = ('pos', 'stmt')

        def __init__(self, pos, stmt):
            # type: (int, Optional[Stmt]) -> None
            self.pos = pos
            self.stmt = stmt

    class CoprocClause(command_t):
        _type_tag = 14
        __slots__ = ('pos', 'name', 'stmt')

        def __init__(self, pos, name, stmt):
            # type: (int, Optional[Lit], Stmt) -> None
            self.pos = pos
            self.name = name
            self.stmt = stmt

    class LetClause(command_t):
        _type_tag = 15
        __slots__ = ('let_pos', 'exprs')

        def __init__(self, let_pos, exprs):
            # type: (int, List[arith_expr_t]) -> None
            self.let_pos = let_pos
            self.exprs = exprs


#
# Product types
#

class Comment(pybase.CompoundObj):
    _type_tag = 64
    __slots__ = ('hash', 'text')

    def __init__(self, hash, text):
        # type: (int, str) -> None
        self.hash = hash  # position of the # character
        self.text = text  # everything after the #


class Lit(word_part_t):
    _type_tag = 65
    __slots__ = ('value_pos', 'value')

    def __init__(self, value_pos, value):
        # type: (int, str) -> None
        self.value_pos = value_pos
        self.value = value


class Word(arith_expr_t):
    _type_tag = 66
    __slots__ = ('parts',)

    def __init__(self, parts):
        # type: (List[word_part_t]) -> None
        self.parts = parts


class Assign(pybase.CompoundObj):
    """name=value, name+=value, or a bare value in a declaration."""
    _type_tag = 67
    __slots__ = ('name', 'append', 'value')

    def __init__(self, name, append, value):
        # type: (Optional[Lit], bool, Word) -> None
        self.name = name
        self.append = append
        self.value = value


class Redirect(pybase.CompoundObj):
    _type_tag = 68
    __slots__ = ('op_pos', 'op', 'n', 'word', 'hdoc')

    def __init__(self, op_pos, op, n, word, hdoc):
        # type: (int, int, Optional[Lit], Word, Optional[Word]) -> None
        self.op_pos = op_pos
        self.op = op  # Id.Redir_*
        self.n = n  # explicit descriptor, as in 2>
        self.word = word  # target, or the here doc delimiter
        self.hdoc = hdoc  # here doc body, for Redir_DLess and Redir_DLessDash


class Stmt(pybase.CompoundObj):
    _type_tag = 69
    __slots__ = ('pos', 'negated', 'assigns', 'cmd', 'redirs', 'background')

    def __init__(self, pos, negated, assigns, cmd, redirs, background):
        # type: (int, bool, List[Assign], command_t, List[Redirect], bool) -> None
        self.pos = pos
        self.negated = negated
        self.assigns = assigns
        self.cmd = cmd  # a CallExpr with no args for bare assignments
        self.redirs = redirs  # ordered by position
        self.background = background


class Index(pybase.CompoundObj):
    _type_tag = 70
    __slots__ = ('word',)

    def __init__(self, word):
        # type: (Word) -> None
        self.word = word


class Replace(pybase.CompoundObj):
    _type_tag = 71
    __slots__ = ('all', 'orig', 'with_')

    def __init__(self, all, orig, with_):
        # type: (bool, Word, Word) -> None
        self.all = all
        self.orig = orig
        self.with_ = with_


class Expansion(pybase.CompoundObj):
    _type_tag = 72
    __slots__ = ('op', 'word')

    def __init__(self, op, word):
        # type: (int, Word) -> None
        self.op = op  # Id.VOp_*
        self.word = word


class Elif(pybase.CompoundObj):
    _type_tag = 73
    __slots__ = ('elif_pos', 'cond_stmts', 'then_pos', 'then_stmts')

    def __init__(self, elif_pos, cond_stmts, then_pos, then_stmts):
        # type: (int, List[Stmt], int, List[Stmt]) -> None
        self.elif_pos = elif_pos
        self.cond_stmts = cond_stmts
        self.then_pos = then_pos
        self.then_stmts = then_stmts


class PatternList(pybase.CompoundObj):
    """One arm of a case statement."""
    _type_tag = 74
    __slots__ = ('op', 'op_pos', 'patterns', 'stmts')

    def __init__(self, op, op_pos, patterns, stmts):
        # type: (int, int, List[Word], List[Stmt]) -> None
        self.op = op  # Id.Op_DSemi, Id.Op_SemiAmp, or Id.Op_DSemiAmp
        self.op_pos = op_pos
        self.patterns = patterns
        self.stmts = stmts


class File(pybase.CompoundObj):
    """A whole parsed file."""
    _type_tag = 75
    __slots__ = ('name', 'stmts', 'comments', 'lines')

    def __init__(self, name, stmts, comments, lines):
        # type: (str, List[Stmt], List[Comment], List[int]) -> None
        self.name = name
        self.stmts = stmts
        self.comments = comments  # ordered by position
        self.lines = lines  # 0-based offset of each line start; lines[0] == 0
