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
"""Syntax tree classes for transition guards.

The node classes form a closed family:

- `TrueGuard`: the constant guard of unconditional transitions
- `Var`: a variable, either as operand of a comparison,
  or standing alone as a Boolean atom
- `Num`: an integer literal (comparison operand only)
- `Comparison`: binary relational operator over two operands
- `Not`, `And`, `Or`: Boolean connectives

Nodes are immutable and compared structurally.
`flatten` returns the canonical text that
`awxml.guard.parser.decode` reads back.
"""
import collections.abc as _abc
import logging
import re


__all__ = [
    'TrueGuard',
    'Var',
    'Num',
    'Comparison',
    'Not',
    'And',
    'Or',
    'GuardExpr',
    'GUARD_TYPES',
    'variables',
    'assert_name']


_logger = logging.getLogger(__name__)


TRUE = 'true'
NOT = 'not'
AND = 'and'
OR = 'or'
COMPARATORS = (
    '==', '!=',
    '<', '<=',
    '>', '>=')
KEYWORDS = (TRUE, NOT, AND, OR)
NAME_PATTERN = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
NUMBER_PATTERN = re.compile(r'-?[0-9]+')
# binding strength, loosest first
OR_PRECEDENCE = 1
AND_PRECEDENCE = 2
NOT_PRECEDENCE = 3
ATOM_PRECEDENCE = 4


class Node:
    """Base class of guard syntax tree nodes."""

    precedence: int = ATOM_PRECEDENCE

    def __setattr__(self, name, value):
        raise AttributeError(
            f'`{type(self).__name__}` nodes are immutable')

    def _init(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    @property
    def operands(self) -> tuple:
        """Child nodes, in order."""
        return tuple()

    def _key(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other):
        return (
            type(other) is type(self) and
            self._key() == other._key())

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __len__(self):
        """Return the number of nodes in the tree."""
        return 1 + sum(map(len, self.operands))

    def __str__(self):
        return self.flatten()

    def flatten(self) -> str:
        raise NotImplementedError


class Terminal(Node):
    """Leaf node that carries a string value."""

    def __init__(self, value):
        _assert_str(value, 'value')
        self._init(value=value)

    def __repr__(self):
        t = type(self).__name__
        return f'{t}({self.value!r})'

    def _key(self):
        return (self.value,)

    def flatten(self):
        return self.value


class TrueGuard(Terminal):
    """The guard that always holds."""

    def __init__(self):
        super().__init__(TRUE)

    def __repr__(self):
        return 'TrueGuard()'


class Var(Terminal):
    """A named variable.

    Keywords of the guard syntax are not variable names.
    """

    def __init__(self, value):
        assert_name(value)
        super().__init__(value)


class Num(Terminal):
    """An integer literal.

    The value is normalized,
    so `Num('007') == Num('7')`.
    """

    def __init__(self, value):
        _assert_str(value, 'value')
        if not NUMBER_PATTERN.fullmatch(value):
            raise ValueError(
                f'not an integer literal: {value!r}')
        sign = '-' if value.startswith('-') else ''
        digits = value.lstrip('-').lstrip('0')
        if not digits:
            sign, digits = '', '0'
        super().__init__(sign + digits)


class Comparison(Node):
    """Relational operator applied to two operands."""

    def __init__(
            self,
            operator:
                str,
            left:
                'Var | Num',
            right:
                'Var | Num'):
        if operator not in COMPARATORS:
            raise ValueError(
                f'unknown comparison operator: {operator!r}, '
                f'expected one of: {COMPARATORS}')
        for operand in (left, right):
            if not isinstance(operand, (Var, Num)):
                raise TypeError(
                    'comparison operands must be '
                    f'`Var` or `Num`, got: {operand!r}')
        self._init(
            operator=operator,
            left=left,
            right=right)

    @property
    def operands(self):
        return (self.left, self.right)

    def __repr__(self):
        return (
            f'Comparison({self.operator!r}, '
            f'{self.left!r}, {self.right!r})')

    def _key(self):
        return (self.operator, self.left, self.right)

    def flatten(self):
        return f'{self.left} {self.operator} {self.right}'


class Not(Node):
    """Negation."""

    precedence = NOT_PRECEDENCE

    def __init__(self, operand):
        _assert_guard(operand)
        self._init(operand=operand)

    @property
    def operands(self):
        return (self.operand,)

    def __repr__(self):
        return f'Not({self.operand!r})'

    def _key(self):
        return (self.operand,)

    def flatten(self):
        operand = _flatten(self.operand, NOT_PRECEDENCE)
        return f'{NOT} {operand}'


class BinaryConnective(Node):
    """Connective with two operands, printed infix."""

    keyword: str

    def __init__(self, left, right):
        _assert_guard(left)
        _assert_guard(right)
        self._init(left=left, right=right)

    @property
    def operands(self):
        return (self.left, self.right)

    def __repr__(self):
        t = type(self).__name__
        return f'{t}({self.left!r}, {self.right!r})'

    def _key(self):
        return (self.left, self.right)

    def flatten(self):
        # left-associative: only a right operand
        # of equal precedence needs parentheses
        left = _flatten(self.left, self.precedence)
        right = _flatten(self.right, self.precedence + 1)
        return f'{left} {self.keyword} {right}'


class And(BinaryConnective):
    """Conjunction."""

    keyword = AND
    precedence = AND_PRECEDENCE


class Or(BinaryConnective):
    """Disjunction."""

    keyword = OR
    precedence = OR_PRECEDENCE


GuardExpr = (
    TrueGuard |
    Var |
    Comparison |
    Not |
    And |
    Or)
GUARD_TYPES = (
    TrueGuard, Var, Comparison,
    Not, And, Or)


def variables(
        expr:
            GuardExpr
        ) -> list[str]:
    """Return names of variables in `expr`.

    Each name is listed once,
    in order of first occurrence
    (left to right).
    """
    names = dict()
    for node in _preorder(expr):
        if isinstance(node, Var):
            names.setdefault(node.value)
    return list(names)


def _preorder(
        expr:
            Node
        ) -> _abc.Iterator[Node]:
    """Yield nodes of `expr`, parents first."""
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.operands))


def _flatten(
        node:
            Node,
        precedence:
            int
        ) -> str:
    """Return text of `node`, parenthesized if it binds looser."""
    s = node.flatten()
    if node.precedence < precedence:
        return f'({s})'
    return s


def _assert_str(value, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f'{name} must be a string, got: {value!r}')


def _assert_guard(operand) -> None:
    if not isinstance(operand, GUARD_TYPES):
        raise TypeError(
            f'expected a guard expression, got: {operand!r}')


def assert_name(value) -> None:
    """Raise `ValueError` if `value` is not a variable name.

    Keywords of the guard syntax are not names.
    """
    _assert_str(value, 'name')
    if not NAME_PATTERN.fullmatch(value):
        raise ValueError(
            f'not a variable name: {value!r}')
    if value in KEYWORDS or value.lower() == TRUE:
        raise ValueError(
            f'keyword used as variable name: {value!r}')
