#!/usr/bin/env python3
"""
location.py - Library to get source positions from nodes.

The printer compares these positions against the line table to decide where
line breaks were in the original source.  Every function returns a 1-based
offset; the End*() functions return the position just past the node.
"""

from asdl import runtime
from frontend.id_kind import Spelling
from frontend.syntax_asdl import (
    Assign,
    Lit,
    Redirect,
    Stmt,
    Word,
    arith_expr,
    arith_expr_e,
    arith_expr_t,
    command,
    command_e,
    command_t,
    word_part,
    word_part_e,
    word_part_t,
)
from mycpp.mylib import log
from mycpp.mylib import tagswitch

_ = log

from typing import cast

# Length of the closing keywords
_FI_LEN = len('fi')
_DONE_LEN = len('done')
_ESAC_LEN = len('esac')


def EndForLit(lit):
    # type: (Lit) -> int
    return lit.value_pos + len(lit.value)


def PosForWordPart(part):
    # type: (word_part_t) -> int
    UP_part = part
    with tagswitch(part) as case:
        if case(word_part_e.Lit):
            part = cast(Lit, UP_part)
            return part.value_pos

        elif case(word_part_e.SglQuoted):
            part = cast(word_part.SglQuoted, UP_part)
            return part.quote_pos

        elif case(word_part_e.DblQuoted):
            part = cast(word_part.DblQuoted, UP_part)
            return part.quote_pos

        elif case(word_part_e.CmdSubst):
            part = cast(word_part.CmdSubst, UP_part)
            return part.left

        elif case(word_part_e.ParamExp):
            part = cast(word_part.ParamExp, UP_part)
            return part.dollar

        elif case(word_part_e.ArithmExp):
            part = cast(word_part.ArithmExp, UP_part)
            return part.left

        elif case(word_part_e.ArrayExpr):
            part = cast(word_part.ArrayExpr, UP_part)
            return part.lparen

        elif case(word_part_e.ExtGlob):
            part = cast(word_part.ExtGlob, UP_part)
            return part.op_pos

        elif case(word_part_e.ProcSubst):
            part = cast(word_part.ProcSubst, UP_part)
            return part.op_pos

        else:
            raise AssertionError(part.tag())


def EndForWordPart(part):
    # type: (word_part_t) -> int
    UP_part = part
    with tagswitch(part) as case:
        if case(word_part_e.Lit):
            part = cast(Lit, UP_part)
            return EndForLit(part)

        elif case(word_part_e.SglQuoted):
            part = cast(word_part.SglQuoted, UP_part)
            # opening quote, value, closing quote
            return part.quote_pos + len(Spelling(part.quote)) + len(
                part.value) + 1

        elif case(word_part_e.DblQuoted):
            part = cast(word_part.DblQuoted, UP_part)
            return part.right + 1

        elif case(word_part_e.CmdSubst):
            part = cast(word_part.CmdSubst, UP_part)
            return part.right + 1

        elif case(word_part_e.ParamExp):
            part = cast(word_part.ParamExp, UP_part)
            if part.short:
                return EndForLit(part.param)
            return part.rbrace + 1

        elif case(word_part_e.ArithmExp):
            part = cast(word_part.ArithmExp, UP_part)
            return part.right + 2  # ))

        elif case(word_part_e.ArrayExpr):
            part = cast(word_part.ArrayExpr, UP_part)
            return part.rparen + 1

        elif case(word_part_e.ExtGlob):
            part = cast(word_part.ExtGlob, UP_part)
            return EndForLit(part.pattern) + 1

        elif case(word_part_e.ProcSubst):
            part = cast(word_part.ProcSubst, UP_part)
            return part.rparen + 1

        else:
            raise AssertionError(part.tag())


def PosForWord(w):
    # type: (Word) -> int
    if len(w.parts):
        return PosForWordPart(w.parts[0])
    else:
        return runtime.NO_POS  # degenerate empty word


def EndForWord(w):
    # type: (Word) -> int
    if len(w.parts):
        return EndForWordPart(w.parts[-1])
    else:
        return runtime.NO_POS


def EndForArith(node):
    # type: (arith_expr_t) -> int
    UP_node = node
    with tagswitch(node) as case:
        if case(arith_expr_e.Word):
            node = cast(Word, UP_node)
            return EndForWord(node)

        elif case(arith_expr_e.Binary):
            node = cast(arith_expr.Binary, UP_node)
            return EndForArith(node.y)

        elif case(arith_expr_e.Unary):
            node = cast(arith_expr.Unary, UP_node)
            if node.post:
                return node.op_pos + len(Spelling(node.op))
            return EndForArith(node.x)

        elif case(arith_expr_e.Paren):
            node = cast(arith_expr.Paren, UP_node)
            return node.rparen + 1

        else:
            raise AssertionError(node.tag())


def PosForAssign(a):
    # type: (Assign) -> int
    if a.name is not None:
        return a.name.value_pos
    return PosForWord(a.value)


def EndForAssign(a):
    # type: (Assign) -> int
    if len(a.value.parts):
        return EndForWord(a.value)
    assert a.name is not None, a
    # a= or a+=
    n = 2 if a.append else 1
    return EndForLit(a.name) + n


def PosForRedirect(r):
    # type: (Redirect) -> int
    if r.n is not None:
        return r.n.value_pos
    return r.op_pos


def EndForRedirect(r):
    # type: (Redirect) -> int
    """The end of the line part.  A here doc body comes later."""
    return EndForWord(r.word)


def PosForStmt(s):
    # type: (Stmt) -> int
    return s.pos


def EndForStmt(s):
    # type: (Stmt) -> int
    end = EndForCommand(s.cmd)
    for a in s.assigns:
        end = max(end, EndForAssign(a))
    for r in s.redirs:
        end = max(end, EndForRedirect(r))
    if s.background:
        end += 2  # ' &'
    return end


def PosForCommand(node):
    # type: (command_t) -> int
    UP_node = node
    with tagswitch(node) as case:
        if case(command_e.CallExpr):
            node = cast(command.CallExpr, UP_node)
            if len(node.args):
                return PosForWord(node.args[0])
            return runtime.NO_POS  # bare assignment or redirect

        elif case(command_e.Block):
            node = cast(command.Block, UP_node)
            return node.lbrace

        elif case(command_e.IfClause):
            node = cast(command.IfClause, UP_node)
            return node.if_pos

        elif case(command_e.Subshell):
            node = cast(command.Subshell, UP_node)
            return node.lparen

        elif case(command_e.WhileUntil):
            node = cast(command.WhileUntil, UP_node)
            return node.keyword_pos

        elif case(command_e.ForClause):
            node = cast(command.ForClause, UP_node)
            return node.for_pos

        elif case(command_e.BinaryCmd):
            node = cast(command.BinaryCmd, UP_node)
            return PosForStmt(node.x)

        elif case(command_e.FuncDecl):
            node = cast(command.FuncDecl, UP_node)
            return node.pos

        elif case(command_e.CaseClause):
            node = cast(command.CaseClause, UP_node)
            return node.case_pos

        elif case(command_e.ArithCmd):
            node = cast(command.ArithCmd, UP_node)
            return node.left

        elif case(command_e.TestClause):
            node = cast(command.TestClause, UP_node)
            return node.left

        elif case(command_e.DeclClause):
            node = cast(command.DeclClause, UP_node)
            return node.pos

        elif case(command_e.EvalClause):
            node = cast(command.EvalClause, UP_node)
            return node.pos

        elif case(command_e.CoprocClause):
            node = cast(command.CoprocClause, UP_node)
            return node.pos

        elif case(command_e.LetClause):
            node = cast(command.LetClause, UP_node)
            return node.let_pos

        else:
            raise AssertionError(node.tag())


def EndForCommand(node):
    # type: (command_t) -> int
    UP_node = node
    with tagswitch(node) as case:
        if case(command_e.CallExpr):
            node = cast(command.CallExpr, UP_node)
            if len(node.args):
                return EndForWord(node.args[-1])
            return runtime.NO_POS

        elif case(command_e.Block):
            node = cast(command.Block, UP_node)
            return node.rbrace + 1

        elif case(command_e.IfClause):
            node = cast(command.IfClause, UP_node)
            return node.fi_pos + _FI_LEN

        elif case(command_e.Subshell):
            node = cast(command.Subshell, UP_node)
            return node.rparen + 1

        elif case(command_e.WhileUntil):
            node = cast(command.WhileUntil, UP_node)
            return node.done_pos + _DONE_LEN

        elif case(command_e.ForClause):
            node = cast(command.ForClause, UP_node)
            return node.done_pos + _DONE_LEN

        elif case(command_e.BinaryCmd):
            node = cast(command.BinaryCmd, UP_node)
            return EndForStmt(node.y)

        elif case(command_e.FuncDecl):
            node = cast(command.FuncDecl, UP_node)
            return EndForStmt(node.body)

        elif case(command_e.CaseClause):
            node = cast(command.CaseClause, UP_node)
            return node.esac_pos + _ESAC_LEN

        elif case(command_e.ArithCmd):
            node = cast(command.ArithCmd, UP_node)
            return node.right + 2  # ))

        elif case(command_e.TestClause):
            node = cast(command.TestClause, UP_node)
            return node.right + 2  # ]]

        elif case(command_e.DeclClause):
            node = cast(command.DeclClause, UP_node)
            if len(node.assigns):
                return EndForAssign(node.assigns[-1])
            if len(node.opts):
                return EndForWord(node.opts[-1])
            return node.pos + len(node.variant or 'declare')

        elif case(command_e.EvalClause):
            node = cast(command.EvalClause, UP_node)
            if node.stmt is not None:
                return EndForStmt(node.stmt)
            return node.pos + len('eval')

        elif case(command_e.CoprocClause):
            node = cast(command.CoprocClause, UP_node)
            return EndForStmt(node.stmt)

        elif case(command_e.LetClause):
            node = cast(command.LetClause, UP_node)
            if len(node.exprs) == 0:
                return node.let_pos + len('let')
            return EndForArith(node.exprs[-1])

        else:
            raise AssertionError(node.tag())
