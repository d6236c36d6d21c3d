# Copyright (c) 2026 by California Institute of Technology
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
# 1. Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# 3. Neither the name of the California Institute of Technology nor
#    the names of its contributors may be used to endorse or promote
#    products derived from this software without specific prior
#    written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED.  IN NO EVENT SHALL CALTECH
# OR THE CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
# SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF
# USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND
# ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT
# OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF
# SUCH DAMAGE.
"""PLY-based parser for guard expressions,
using AST classes from `awxml.guard.ast`.
"""
import logging

import ply.lex
import ply.yacc

import awxml.errors as _errors
import awxml.guard.ast as _ast


__all__ = [
    'Lexer',
    'Parser']


_logger = logging.getLogger(__name__)
TABMODULE = 'awxml.guard.guard_parsetab'
LEX_LOGGER = 'awxml.guard_lex_log'
YACC_LOGGER = 'awxml.guard_yacc_log'
PARSER_LOGGER = 'awxml.guard_parser_log'


class Lexer:
    """Token rules to build guard lexer."""

    reserved = {
        'not': 'NOT',
        'and': 'AND',
        'or': 'OR'}
    delimiters = ['LPAREN', 'RPAREN']
    operators = [
        'NOT', 'AND', 'OR',
        'EQUALS', 'NEQUALS', 'LT', 'LE', 'GT', 'GE']
    misc = ['NAME', 'NUMBER', 'TRUE']

    def __init__(self, debug=False):
        # for setting the logger, call build explicitly
        self.tokens = (
            self.delimiters + self.operators + self.misc)
        self.build(debug=debug)

    def t_NAME(self, t):
        r'[A-Za-z_][A-Za-z0-9_]*'
        # `true` in any letter case,
        # other keywords lower case only
        if t.value.lower() == _ast.TRUE:
            t.type = 'TRUE'
            t.value = _ast.TRUE
        else:
            t.type = self.reserved.get(t.value, 'NAME')
        return t

    def t_NUMBER(self, t):
        r'-?[0-9]+'
        return t

    def t_AND(self, t):
        r'\&\&'
        t.value = _ast.AND
        return t

    def t_OR(self, t):
        r'\|\|'
        t.value = _ast.OR
        return t

    t_NOT = r'\!'

    t_EQUALS = r'\=\='
    t_NEQUALS = r'\!\='
    t_LT = r'\<'
    t_LE = r'\<\='
    t_GT = r'\>'
    t_GE = r'\>\='

    t_LPAREN = r'\('
    t_RPAREN = r'\)'

    t_ignore = ' \t\r'

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += t.value.count('\n')

    def t_error(self, t):
        raise _errors.MalformedGuard(
            t.lexer.lexdata, t.lexpos,
            f'illegal character {t.value[0]!r}')

    def build(self, debug=False, debuglog=None, **kwargs):
        """Create a lexer.

        @param kwargs: Same arguments as `ply.lex.lex`:

          - except for `module` (fixed to `self`)
          - `debuglog` defaults to the logger `LEX_LOGGER`.
        """
        if debug and debuglog is None:
            debuglog = logging.getLogger(LEX_LOGGER)
        self.lexer = ply.lex.lex(
            module=self,
            debug=debug,
            debuglog=debuglog,
            **kwargs)


class Parser:
    """Production rules to build guard parser."""

    tabmodule = TABMODULE
    start = 'expr'
    # lowest to highest
    precedence = (
        ('left', 'OR'),
        ('left', 'AND'),
        ('right', 'NOT'))

    def __init__(self, ast=None, lexer=None):
        if ast is None:
            ast = _ast
        if lexer is None:
            lexer = Lexer()
        self.ast = ast
        self.lexer = lexer
        self.tokens = self.lexer.tokens
        self.build()

    def build(self, tabmodule=None, outputdir='', write_tables=False,
              debug=False, debuglog=None):
        """Build parser using `ply.yacc`.

        Default table module is `self.tabmodule`.
        Default logger is `YACC_LOGGER`
        """
        if tabmodule is None:
            tabmodule = self.tabmodule
        if debug and debuglog is None:
            debuglog = logging.getLogger(YACC_LOGGER)
        self.parser = ply.yacc.yacc(
            method='LALR',
            module=self,
            start=self.start,
            tabmodule=tabmodule,
            outputdir=outputdir,
            write_tables=write_tables,
            debug=debug,
            debuglog=debuglog)

    def parse(self, formula, debuglog=None):
        """Parse guard string and create abstract syntax tree (AST).

        Raise `MalformedGuard` if `formula`
        is not in the guard syntax.

        @param debuglog: if given, `ply.yacc` logs
            each parser step to this logger
            (for example, the logger `PARSER_LOGGER`).
        @type debuglog: `logging.Logger`
        """
        if not formula.strip():
            raise _errors.MalformedGuard(
                formula, 0, 'empty guard')
        self._check_parentheses(formula)
        if debuglog is None:
            debuglog = False
        root = self.parser.parse(
            formula,
            lexer=self.lexer.lexer,
            debug=debuglog)
        if root is None:
            raise _errors.MalformedGuard(
                formula, 0, 'failed to parse')
        return root

    def _check_parentheses(self, formula):
        """Raise `MalformedGuard` at an unmatched parenthesis."""
        lexer = self.lexer.lexer
        lexer.input(formula)
        opened = list()
        for token in lexer:
            if token.type == 'LPAREN':
                opened.append(token.lexpos)
            elif token.type != 'RPAREN':
                continue
            elif opened:
                opened.pop()
            else:
                raise _errors.MalformedGuard(
                    formula, token.lexpos, 'unmatched ")"')
        if opened:
            raise _errors.MalformedGuard(
                formula, opened[-1], 'unmatched "("')

    def p_true(self, p):
        """expr : TRUE"""
        p[0] = self.ast.TrueGuard()

    def p_unary_connective(self, p):
        """expr : NOT expr"""
        p[0] = self.ast.Not(p[2])

    def p_binary_connective(self, p):
        """expr : expr AND expr
                | expr OR expr
        """
        if p[2] == _ast.AND:
            p[0] = self.ast.And(p[1], p[3])
        else:
            p[0] = self.ast.Or(p[1], p[3])

    def p_binary_predicate(self, p):
        """expr : term EQUALS term
                | term NEQUALS term
                | term LT term
                | term LE term
                | term GT term
                | term GE term
        """
        p[0] = self.ast.Comparison(p[2], p[1], p[3])

    def p_paren(self, p):
        """expr : LPAREN expr RPAREN"""
        p[0] = p[2]

    def p_atom(self, p):
        """expr : NAME"""
        p[0] = self.ast.Var(p[1])

    def p_var(self, p):
        """term : NAME"""
        p[0] = self.ast.Var(p[1])

    def p_number(self, p):
        """term : NUMBER"""
        p[0] = self.ast.Num(p[1])

    def p_error(self, p):
        formula = self.lexer.lexer.lexdata
        if p is None:
            raise _errors.MalformedGuard(
                formula, len(formula),
                'unexpected end of input')
        raise _errors.MalformedGuard(
            formula, p.lexpos,
            f'unexpected {p.type} token {p.value!r}')
