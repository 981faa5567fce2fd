"""
fmt.py: Print a shell syntax tree, keeping the author's layout.

The tree doesn't record whitespace.  It records positions, plus the table of
line starts.  The printer walks the tree in source order with a LineTracker
and, at each token, asks "was this on a later line than what I've printed so
far?"  That's enough to reproduce:

- newlines vs. semicolons between statements
- single blank lines between statements
- backslash continuations in long commands
- own-line vs. trailing comments, and alignment of runs of trailing comments
- here doc bodies, which are printed after the newline that ends their line

Usage:

  fmt.Fprint(f, tree)                   # tabs
  fmt.Config(spaces=4).Fprint(f, tree)  # 4 spaces per level
"""

from asdl import runtime
from core import alloc
from core import error
from core import pool
from frontend import location
from frontend.id_kind import Id, Spelling
from frontend.syntax_asdl import (
    Assign,
    File,
    Lit,
    PatternList,
    Redirect,
    Stmt,
    Word,
    arith_expr,
    arith_expr_e,
    arith_expr_t,
    command,
    command_e,
    command_str,
    command_t,
    loop,
    loop_e,
    loop_t,
    word_part,
    word_part_e,
    word_part_t,
)
from mycpp import mylib
from mycpp.mylib import log, tagswitch

from typing import List, Optional, Any, cast

_ = log

# Here docs are printed after the next newline, not where the operator is.
_HERE_DOC_OPS = (Id.Redir_DLess, Id.Redir_DLessDash)


class Config(object):
    """Controls how the printing of a tree will behave."""

    def __init__(self, spaces=0):
        # type: (int) -> None
        if spaces < 0:
            raise error.Usage(
                'indent width must be 0 (tabs) or positive, got %d' % spaces)
        self.spaces = spaces  # 0 for tabs, >0 for number of spaces

    def Fprint(self, f, tree):
        # type: (Any, File) -> None
        """Pretty-print the tree to f, which only needs a write() method.

        Errors raised by f.write() propagate.  Whatever was flushed before the
        error stays written.
        """
        with pool.ctx_CheckOut(_PRINTER_POOL) as p:
            p.Init(tree, self, f)
            p.Stmts(tree.stmts)
            p.CommentsUpTo(runtime.NO_POS)  # everything that's left
            p.Newline(runtime.NO_POS)
            p.f.Flush()


DEFAULT_CONFIG = Config()


def Fprint(f, tree, config=None):
    # type: (Any, File, Optional[Config]) -> None
    """Pretty-print the tree to f, with tabs unless config says otherwise."""
    if config is None:
        config = DEFAULT_CONFIG
    config.Fprint(f, tree)


def PrintToString(tree, config=None):
    # type: (File, Optional[Config]) -> str
    buf = mylib.BufWriter()
    Fprint(buf, tree, config=config)
    return buf.getvalue()


def _StartsWithLparen(s):
    # type: (Stmt) -> bool
    """Would printing s start with '(' ?  Then $( or ( needs a space, so the
    result isn't read as (( or $(( ."""
    UP_cmd = s.cmd
    with tagswitch(s.cmd) as case:
        if case(command_e.Subshell):
            return True
        elif case(command_e.BinaryCmd):
            cmd = cast(command.BinaryCmd, UP_cmd)
            return _StartsWithLparen(cmd.x)
    return False


class IndentStack(object):
    """Indentation levels, plus which increments really happened.

    A nested region calls Increase() on entry and Decrease() on exit.  If an
    enclosing region already increased the level and nothing has been indented
    at that level yet, the inner region takes over that increment instead of
    adding another.  So a body that never wraps doesn't indent twice.
    """

    def __init__(self):
        # type: () -> None
        self.level = 0  # current level of indentation
        self.last_level = 0  # level used by the last Indent()
        self.incs = []  # type: List[bool]

    def Reset(self):
        # type: () -> None
        self.level = 0
        self.last_level = 0
        del self.incs[:]

    def Increase(self):
        # type: () -> None
        inc = False
        if self.level <= self.last_level:
            self.level += 1
            inc = True
        elif len(self.incs) and self.incs[-1]:
            # take over the enclosing region's unused increment
            self.incs[-1] = False
            inc = True
        self.incs.append(inc)

    def Decrease(self):
        # type: () -> None
        if self.incs.pop():
            self.level -= 1

    def Depth(self):
        # type: () -> int
        return len(self.incs)


class Printer(object):
    """Renders one tree at a time.  Get one from the pool, or make your own.

    State is transient: Reset() forgets the tree, the sink, and everything in
    between.
    """

    def __init__(self, f=None):
        # type: (Any) -> None
        self.f = f if f is not None else mylib.BufferedWriter()
        self.lines = alloc.LineTracker()
        self.indent = IndentStack()

        self.tree = None  # type: Optional[File]
        self.config = DEFAULT_CONFIG

        self.want_space = False
        self.want_newline = False
        self.comment_padding = 0
        self.nested_binary = False

        # Pending comments are comments[comment_index:]
        self.comments = []  # type: List[Any]
        self.comment_index = 0

        self.pending_hdocs = []  # type: List[Redirect]

        # Measures statements to align comments.  Lazily allocated.
        self.len_printer = None  # type: Optional[Printer]

    def Reset(self):
        # type: () -> None
        self.f.Reset(None)
        self.lines.Reset([])
        self.indent.Reset()

        self.tree = None
        self.config = DEFAULT_CONFIG

        self.want_space = False
        self.want_newline = False
        self.comment_padding = 0
        self.nested_binary = False

        self.comments = []
        self.comment_index = 0
        del self.pending_hdocs[:]

        if self.len_printer is not None:
            self.len_printer.Reset()

    def Init(self, tree, config, f):
        # type: (File, Config, Any) -> None
        self.tree = tree
        self.config = config
        self.comments = tree.comments
        self.comment_index = 0
        self.lines.Reset(tree.lines)
        self.f.Reset(f)

    #
    # Low level output
    #

    def _Space(self):
        # type: () -> None
        self.f.write(' ')
        self.want_space = False

    def _Spaces(self, n):
        # type: (int) -> None
        if n > 0:
            self.f.write(' ' * n)

    def _BslashNewline(self):
        # type: () -> None
        self.f.write(' \\\n')
        self.want_space = False
        self.lines.IncLine()

    def _SpacedString(self, s, space_after):
        # type: (str, bool) -> None
        if self.want_space:
            self.f.write(' ')
        self.f.write(s)
        self.want_space = space_after

    def _Indent(self):
        # type: () -> None
        ind = self.indent
        ind.last_level = ind.level
        if ind.level == 0:
            return
        if self.config.spaces == 0:
            self.f.write('\t' * ind.level)
        else:
            self.f.write(' ' * (self.config.spaces * ind.level))

    def Newline(self, pos):
        # type: (int) -> None
        """Write a newline, then the bodies of pending here docs."""
        self.want_newline = False
        self.want_space = False
        self.f.write('\n')
        if pos > self.lines.next_line:
            self.lines.IncLine()

        hdocs = self.pending_hdocs
        self.pending_hdocs = []
        for r in hdocs:
            assert r.hdoc is not None, r
            self.DoWord(r.hdoc)
            self.lines.AdvanceTo(location.EndForWord(r.hdoc) + 1)
            self._UnquotedWord(r.word)
            self.f.write('\n')
            self.lines.IncLine()
            self.want_space = False

    def _Newlines(self, pos):
        # type: (int) -> None
        """Move to a new line for pos, keeping one blank line if there was at
        least one."""
        self.Newline(pos)
        if pos > self.lines.next_line:
            self.f.write('\n')
            self.lines.IncLine()
        self._Indent()

    #
    # Separators
    #

    def _SemiOrNewline(self, s, pos):
        # type: (str, int) -> None
        """For 'then' and 'do'."""
        if self.want_newline:
            self.Newline(pos)
            self._Indent()
        else:
            self.f.write('; ')
        self.lines.AdvanceTo(pos)
        self.f.write(s)
        self.want_space = True

    def _CommentsAndSeparate(self, pos):
        # type: (int) -> None
        self.CommentsUpTo(pos)
        if self.want_newline or self.lines.IsPast(pos):
            self._Newlines(pos)

    def _SepTok(self, s, pos):
        # type: (str, int) -> None
        """A closing token like ) that never needs a ; before it."""
        # comments before the token belong to the body
        self.indent.level += 1
        self.CommentsUpTo(pos)
        self.indent.level -= 1
        if self.want_newline or self.lines.IsPast(pos):
            self._Newlines(pos)
        self.f.write(s)
        self.want_space = True

    def _SemiRsrv(self, s, pos, fallback):
        # type: (str, int, bool) -> None
        """A reserved word like fi or done, which follows ; on the same line."""
        self.indent.level += 1
        self.CommentsUpTo(pos)
        self.indent.level -= 1
        if self.want_newline or self.lines.IsPast(pos):
            self._Newlines(pos)
        elif fallback:
            self.f.write('; ')
        elif self.want_space:
            self.f.write(' ')
        self.f.write(s)
        self.want_space = True

    #
    # Comments
    #

    def CommentsUpTo(self, pos):
        # type: (int) -> None
        """Print every pending comment before pos.  NO_POS means all of them."""
        while self.comment_index < len(self.comments):
            c = self.comments[self.comment_index]
            if pos != runtime.NO_POS and c.hash >= pos:
                return
            self.comment_index += 1

            if not self.lines.Started():
                pass  # first thing in the file
            elif c.hash >= self.lines.next_line:
                self._Newlines(c.hash)  # own line
            else:
                self._Spaces(self.comment_padding + 1)  # trailing
            self.lines.AdvanceTo(c.hash)
            self.f.write('#')
            self.f.write(c.text)

    def _HasInline(self, pos, npos, nline):
        # type: (int, int, int) -> bool
        """Is there a comment after pos, before npos, on the line ending at
        nline?"""
        for i in range(self.comment_index, len(self.comments)):
            c = self.comments[i]
            if c.hash > nline:
                return False
            if c.hash > pos and (npos == runtime.NO_POS or c.hash < npos):
                return True
        return False

    #
    # Words
    #

    def DoWord(self, w):
        # type: (Word) -> None
        for part in w.parts:
            self.DoWordPart(part)

    def _UnquotedWord(self, w):
        # type: (Word) -> None
        """Print a here doc delimiter the way it appears after the body."""
        for part in w.parts:
            UP_part = part
            with tagswitch(part) as case:
                if case(word_part_e.SglQuoted):
                    part = cast(word_part.SglQuoted, UP_part)
                    self.f.write(part.value)

                elif case(word_part_e.DblQuoted):
                    part = cast(word_part.DblQuoted, UP_part)
                    for qp in part.parts:
                        self.DoWordPart(qp)

                elif case(word_part_e.Lit):
                    part = cast(Lit, UP_part)
                    if part.value.startswith('\\'):
                        self.f.write(part.value[1:])
                    else:
                        self.f.write(part.value)

                else:
                    self.DoWordPart(part)

    def _WordJoin(self, words, backslash):
        # type: (List[Word], bool) -> None
        """Print words separated by spaces.  A word that was on a later line
        goes on a new line, one level deeper."""
        any_newline = False
        for w in words:
            pos = location.PosForWord(w)
            if self.lines.IsPast(pos):
                self.CommentsUpTo(pos)
                if backslash:
                    self._BslashNewline()
                else:
                    self.f.write('\n')
                    self.lines.IncLine()
                if not any_newline:
                    self.indent.Increase()
                    any_newline = True
                self._Indent()
            elif self.want_space:
                self._Space()
            for part in w.parts:
                self.DoWordPart(part)
        if any_newline:
            self.indent.Decrease()

    def DoWordPart(self, part):
        # type: (word_part_t) -> None
        UP_part = part
        with tagswitch(part) as case:
            if case(word_part_e.Lit):
                part = cast(Lit, UP_part)
                self.f.write(part.value)

            elif case(word_part_e.SglQuoted):
                part = cast(word_part.SglQuoted, UP_part)
                self.f.write(Spelling(part.quote))  # ' or $'
                self.f.write(part.value)
                self.f.write("'")
                self.lines.AdvanceTo(location.EndForWordPart(part))

            elif case(word_part_e.DblQuoted):
                part = cast(word_part.DblQuoted, UP_part)
                self.f.write(Spelling(part.quote))  # " or $"
                n = len(part.parts)
                for i, qp in enumerate(part.parts):
                    self.DoWordPart(qp)
                    if i == n - 1:
                        self.lines.AdvanceTo(location.EndForWordPart(qp))
                self.f.write('"')

            elif case(word_part_e.CmdSubst):
                part = cast(word_part.CmdSubst, UP_part)
                self.lines.AdvanceTo(part.left)
                self.f.write('$(')
                self.want_space = (len(part.stmts) > 0 and
                                   _StartsWithLparen(part.stmts[0]))
                self._NestedStmts(part.stmts, part.right)
                self._SepTok(')', part.right)

            elif case(word_part_e.ParamExp):
                part = cast(word_part.ParamExp, UP_part)
                self._ParamExp(part)

            elif case(word_part_e.ArithmExp):
                part = cast(word_part.ArithmExp, UP_part)
                self.f.write('$((')
                self.DoArith(part.x, False, False)
                self.f.write('))')

            elif case(word_part_e.ArrayExpr):
                part = cast(word_part.ArrayExpr, UP_part)
                self.want_space = False
                self.f.write('(')
                self._WordJoin(part.elems, False)
                self._SepTok(')', part.rparen)

            elif case(word_part_e.ExtGlob):
                part = cast(word_part.ExtGlob, UP_part)
                self.want_space = False
                self.f.write(Spelling(part.op))  # e.g. @(
                self.f.write(part.pattern.value)
                self.f.write(')')

            elif case(word_part_e.ProcSubst):
                part = cast(word_part.ProcSubst, UP_part)
                # avoid conflict with << and others
                if self.want_space:
                    self._Space()
                self.f.write(Spelling(part.op))  # <( or >(
                self._NestedStmts(part.stmts, runtime.NO_POS)
                self.f.write(')')

            else:
                raise AssertionError(part.tag())

        self.want_space = True

    def _ParamExp(self, part):
        # type: (word_part.ParamExp) -> None
        if part.short:
            self.f.write('$')
            self.f.write(part.param.value)
            return

        self.f.write('${')
        if part.length:
            self.f.write('#')
        self.f.write(part.param.value)
        if part.ind is not None:
            self.f.write('[')
            self.DoWord(part.ind.word)
            self.f.write(']')

        # at most one suffix
        if part.repl is not None:
            if part.repl.all:
                self.f.write('/')
            self.f.write('/')
            self.DoWord(part.repl.orig)
            self.f.write('/')
            self.DoWord(part.repl.with_)
        elif part.exp is not None:
            self.f.write(Spelling(part.exp.op))
            self.DoWord(part.exp.word)
        self.f.write('}')

    #
    # Arithmetic and [[ ]]
    #

    def DoArith(self, node, compact, test):
        # type: (Optional[arith_expr_t], bool, bool) -> None
        """
        Args:
          compact: no spaces around binary operators, as in for (( ))
          test: a space after unary operators, as in [[ -e x ]]
        """
        self.want_space = False
        if node is None:
            return  # e.g. missing clause in for ((;;))

        UP_node = node
        with tagswitch(node) as case:
            if case(arith_expr_e.Word):
                node = cast(Word, UP_node)
                self.DoWord(node)

            elif case(arith_expr_e.Binary):
                node = cast(arith_expr.Binary, UP_node)
                if compact:
                    self.DoArith(node.x, compact, test)
                    self.f.write(Spelling(node.op))
                    self.DoArith(node.y, compact, test)
                else:
                    self.DoArith(node.x, compact, test)
                    if node.op != Id.Arith_Comma:
                        self.f.write(' ')
                    self.f.write(Spelling(node.op))
                    self._Space()
                    self.DoArith(node.y, compact, test)

            elif case(arith_expr_e.Unary):
                node = cast(arith_expr.Unary, UP_node)
                if node.post:
                    self.DoArith(node.x, compact, test)
                    self.f.write(Spelling(node.op))
                else:
                    self.f.write(Spelling(node.op))
                    if test:
                        self._Space()
                    self.DoArith(node.x, compact, test)

            elif case(arith_expr_e.Paren):
                node = cast(arith_expr.Paren, UP_node)
                self.f.write('(')
                self.DoArith(node.x, False, test)
                self.f.write(')')

            else:
                raise AssertionError(node.tag())

    #
    # Statements
    #

    def _Assigns(self, assigns):
        # type: (List[Assign]) -> None
        any_newline = False
        for a in assigns:
            if self.lines.IsPast(location.PosForAssign(a)):
                self._BslashNewline()
                if not any_newline:
                    self.indent.Increase()
                    any_newline = True
                self._Indent()
            elif self.want_space:
                self._Space()
            if a.name is not None:
                self.f.write(a.name.value)
                if a.append:
                    self.f.write('+')
                self.f.write('=')
            self.DoWord(a.value)
            self.want_space = True
        if any_newline:
            self.indent.Decrease()

    def _RedirectOpAndWord(self, r):
        # type: (Redirect) -> None
        if r.n is not None:
            self.f.write(r.n.value)
        self.f.write(Spelling(r.op))
        self.want_space = True
        self.DoWord(r.word)

    def DoStmt(self, s):
        # type: (Stmt) -> None
        if s.negated:
            self._SpacedString('!', True)
        self._Assigns(s.assigns)
        start_redirs = self.DoCommand(s.cmd, s.redirs)

        any_newline = False
        for r in s.redirs[start_redirs:]:
            if self.lines.IsPast(r.op_pos):
                self._BslashNewline()
                if not any_newline:
                    self.indent.Increase()
                    any_newline = True
                self._Indent()
            self._CommentsAndSeparate(r.op_pos)
            if self.want_space:
                self.f.write(' ')
            self._RedirectOpAndWord(r)
            if r.op in _HERE_DOC_OPS:
                self.pending_hdocs.append(r)
        if any_newline:
            self.indent.Decrease()

        if s.background:
            self.f.write(' &')

    def _NestedStmts(self, stmts, closing):
        # type: (List[Stmt], int) -> None
        """Statements inside a block, one level deeper.

        If the closing token was on a later line but the only statement
        wasn't, the statement still goes on its own line.
        """
        self.indent.Increase()
        if (len(stmts) == 1 and self.lines.IsPast(closing) and
                location.EndForStmt(stmts[0]) <= self.lines.next_line):
            self.Newline(runtime.NO_POS)
            self._Indent()
        self.Stmts(stmts)
        self.indent.Decrease()

    def Stmts(self, stmts):
        # type: (List[Stmt]) -> None
        """Print a list of statements, separated like they were in the source.

        Also computes self.comment_padding, so that a run of statements on
        consecutive lines, each with a trailing comment, gets its comments
        lined up one column past the longest statement.
        """
        n = len(stmts)
        if n == 0:
            return

        if n == 1:
            s = stmts[0]
            pos = s.pos
            self.CommentsUpTo(pos)
            if not self.lines.IsPast(pos):
                self.DoStmt(s)
            else:
                if self.lines.Started():
                    self._Newlines(pos)
                else:
                    self.lines.AdvanceTo(pos)
                self.DoStmt(s)
                self.want_newline = True
            return

        lines = self.lines
        any_newline = False
        inline_indent = 0
        for i, s in enumerate(stmts):
            pos = s.pos
            ind = lines.index
            self.CommentsUpTo(pos)
            if lines.Started():
                if self.want_newline or lines.IsPast(pos):
                    self._Newlines(pos)
                    any_newline = True
                elif i > 0:
                    # same line as the previous statement
                    if stmts[i - 1].background:
                        self.f.write(' ')
                    else:
                        self.f.write('; ')
                    self.want_space = False
            lines.AdvanceTo(pos)
            self.DoStmt(s)

            if i + 1 < n:
                npos = stmts[i + 1].pos
            else:
                npos = runtime.NO_POS
            if not self._HasInline(pos, npos, lines.next_line):
                inline_indent = 0
                self.comment_padding = 0
                continue

            # A statement spanning lines ends the run
            if location.EndForStmt(s) > lines.LineStart(ind + 1):
                inline_indent = 0

            if inline_indent == 0:
                # Measure the run of statements that each have a trailing
                # comment, on consecutive lines.
                t = lines.Copy()
                follow = stmts[i:]
                for j, s2 in enumerate(follow):
                    pos2 = s2.pos
                    if j + 1 < len(follow):
                        npos2 = follow[j + 1].pos
                    else:
                        npos2 = runtime.NO_POS
                    if (t.IsPast(pos2) or
                            not self._HasInline(pos2, npos2, t.next_line)):
                        break
                    inline_indent = max(inline_indent, self._StmtLen(s2))
                    t.IncLine()
                if t.index == lines.index + 1:
                    # no inline comments directly after this one
                    continue

            if inline_indent > 0:
                self.comment_padding = inline_indent - self._StmtLen(s)

        if any_newline:
            self.want_newline = True

    def _StmtLen(self, s):
        # type: (Stmt) -> int
        """How wide s prints, without printing it.

        A statement that spans lines counts its newlines and indentation too,
        so the comments after it line up further right.
        """
        lp = self.len_printer
        if lp is None:
            lp = Printer(mylib.CountingWriter())
            self.len_printer = lp
        lp.Reset()
        lp.tree = self.tree
        lp.config = self.config
        lp.lines.Reset(self.lines.lines)
        lp.lines.AdvanceTo(s.pos)
        lp.DoStmt(s)
        return cast(mylib.CountingWriter, lp.f).count

    #
    # Commands
    #

    def DoCommand(self, node, redirs):
        # type: (command_t, List[Redirect]) -> int
        """Print a command.

        Returns how many of redirs were printed already, since a call can
        have redirects between its first and second words.
        """
        start_redirs = 0

        UP_node = node
        with tagswitch(node) as case:
            if case(command_e.CallExpr):
                node = cast(command.CallExpr, UP_node)
                start_redirs = self._CallExpr(node, redirs)

            elif case(command_e.Block):
                node = cast(command.Block, UP_node)
                self._SpacedString('{', True)
                self._NestedStmts(node.stmts, node.rbrace)
                self._SemiRsrv('}', node.rbrace, True)

            elif case(command_e.IfClause):
                node = cast(command.IfClause, UP_node)
                self._SpacedString('if', True)
                self._NestedStmts(node.cond_stmts, runtime.NO_POS)
                self._SemiOrNewline('then', node.then_pos)
                self._NestedStmts(node.then_stmts, runtime.NO_POS)
                for el in node.elifs:
                    self._SemiRsrv('elif', el.elif_pos, True)
                    self._NestedStmts(el.cond_stmts, runtime.NO_POS)
                    self._SemiOrNewline('then', el.then_pos)
                    self._NestedStmts(el.then_stmts, runtime.NO_POS)
                if len(node.else_stmts):
                    self._SemiRsrv('else', node.else_pos, True)
                    self._NestedStmts(node.else_stmts, runtime.NO_POS)
                elif node.else_pos != runtime.NO_POS:
                    self.lines.AdvanceTo(node.else_pos)
                self._SemiRsrv('fi', node.fi_pos, True)

            elif case(command_e.Subshell):
                node = cast(command.Subshell, UP_node)
                self._SpacedString('(', False)
                self.want_space = (len(node.stmts) > 0 and
                                   _StartsWithLparen(node.stmts[0]))
                self._NestedStmts(node.stmts, node.rparen)
                self._SepTok(')', node.rparen)

            elif case(command_e.WhileUntil):
                node = cast(command.WhileUntil, UP_node)
                self._SpacedString(Spelling(node.keyword), True)
                self._NestedStmts(node.cond_stmts, runtime.NO_POS)
                self._SemiOrNewline('do', node.do_pos)
                self._NestedStmts(node.do_stmts, runtime.NO_POS)
                self._SemiRsrv('done', node.done_pos, True)

            elif case(command_e.ForClause):
                node = cast(command.ForClause, UP_node)
                self._SpacedString('for ', True)
                self._Loop(node.loop)
                self._SemiOrNewline('do', node.do_pos)
                self._NestedStmts(node.do_stmts, runtime.NO_POS)
                self._SemiRsrv('done', node.done_pos, True)

            elif case(command_e.BinaryCmd):
                node = cast(command.BinaryCmd, UP_node)
                self._BinaryCmd(node)

            elif case(command_e.FuncDecl):
                node = cast(command.FuncDecl, UP_node)
                if node.bash_style:
                    self.f.write('function ')
                self.f.write(node.name.value)
                self.f.write('() ')
                self.lines.AdvanceTo(node.body.pos)
                self.DoStmt(node.body)

            elif case(command_e.CaseClause):
                node = cast(command.CaseClause, UP_node)
                self._CaseClause(node)

            elif case(command_e.ArithCmd):
                node = cast(command.ArithCmd, UP_node)
                if self.want_space:
                    self._Space()
                self.f.write('((')
                self.DoArith(node.x, False, False)
                self.f.write('))')

            elif case(command_e.TestClause):
                node = cast(command.TestClause, UP_node)
                self._SpacedString('[[', True)
                self._Space()
                self.DoArith(node.x, False, True)
                self._SpacedString(']]', True)

            elif case(command_e.DeclClause):
                node = cast(command.DeclClause, UP_node)
                self._SpacedString(node.variant or 'declare', True)
                for w in node.opts:
                    self.f.write(' ')
                    self.DoWord(w)
                self._Assigns(node.assigns)

            elif case(command_e.EvalClause):
                node = cast(command.EvalClause, UP_node)
                self._SpacedString('eval', True)
                if node.stmt is not None:
                    self.DoStmt(node.stmt)

            elif case(command_e.CoprocClause):
                node = cast(command.CoprocClause, UP_node)
                self._SpacedString('coproc', True)
                if node.name is not None:
                    self.f.write(' ')
                    self.f.write(node.name.value)
                self.DoStmt(node.stmt)

            elif case(command_e.LetClause):
                node = cast(command.LetClause, UP_node)
                self._SpacedString('let', True)
                for expr in node.exprs:
                    self._Space()
                    self.DoArith(expr, True, False)

            else:
                raise AssertionError(command_str(node.tag()))

        return start_redirs

    def _CallExpr(self, node, redirs):
        # type: (command.CallExpr, List[Redirect]) -> int
        args = node.args
        if len(args) <= 1:
            self._WordJoin(args, True)
            return 0

        # echo >out foo: the redirect stays between the words
        self._WordJoin(args[:1], True)
        start_redirs = 0
        second = location.PosForWord(args[1])
        for r in redirs:
            if location.PosForRedirect(r) > second or r.op in _HERE_DOC_OPS:
                break
            if self.want_space:
                self._Space()
            self._RedirectOpAndWord(r)
            start_redirs += 1
        self._WordJoin(args[1:], True)
        return start_redirs

    def _BinaryCmd(self, node):
        # type: (command.BinaryCmd) -> None
        self.DoStmt(node.x)

        # a && b && c is nested on the right; only the outermost one indents
        indent = not self.nested_binary
        if indent:
            self.indent.Increase()
        self.nested_binary = node.y.cmd.tag() == command_e.BinaryCmd

        if len(self.pending_hdocs) == 0 and self.lines.IsPast(node.y.pos):
            self._BslashNewline()
            self._Indent()
        self._SpacedString(Spelling(node.op), True)
        self.lines.AdvanceTo(node.y.pos)
        self.DoStmt(node.y)

        if indent:
            self.indent.Decrease()
        self.nested_binary = False

    def _Loop(self, node):
        # type: (loop_t) -> None
        UP_node = node
        with tagswitch(node) as case:
            if case(loop_e.WordIter):
                node = cast(loop.WordIter, UP_node)
                self.f.write(node.name.value)
                if len(node.words):
                    self.f.write(' in')
                    self._WordJoin(node.words, True)

            elif case(loop_e.CStyleLoop):
                node = cast(loop.CStyleLoop, UP_node)
                self.f.write('((')
                if node.init is None:
                    self.f.write(' ')
                self.DoArith(node.init, False, False)
                self.f.write('; ')
                self.DoArith(node.cond, False, False)
                self.f.write('; ')
                self.DoArith(node.post, False, False)
                self.f.write('))')

            else:
                raise AssertionError(node.tag())

    def _CaseClause(self, node):
        # type: (command.CaseClause) -> None
        self._SpacedString('case ', True)
        self.DoWord(node.word)
        self.f.write(' in')

        self.indent.Increase()
        for arm in node.items:
            self._CaseArm(arm, node.esac_pos)
        self.indent.Decrease()

        self._SemiRsrv('esac', node.esac_pos, len(node.items) == 0)

    def _CaseArm(self, arm, esac_pos):
        # type: (PatternList, int) -> None
        self._CommentsAndSeparate(location.PosForWord(arm.patterns[0]))
        for i, w in enumerate(arm.patterns):
            if i > 0:
                self._SpacedString('|', True)
            if self.want_space:
                self.f.write(' ')
            for part in w.parts:
                self.DoWordPart(part)
        self.f.write(')')

        # ;; on its own line if the body is
        sep = len(arm.stmts) > 1 or (len(arm.stmts) > 0 and
                                     self.lines.IsPast(arm.stmts[0].pos))
        self._NestedStmts(arm.stmts, runtime.NO_POS)

        self.indent.level += 1
        if sep:
            self._SepTok(Spelling(arm.op), arm.op_pos)
        else:
            self._SpacedString(Spelling(arm.op), True)
        self.lines.AdvanceTo(arm.op_pos)
        self.indent.level -= 1

        # The arm had no terminator of its own if it shares esac's position
        if sep or arm.op_pos == esac_pos:
            self.want_newline = True


_PRINTER_POOL = pool.Pool(Printer)
