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
"""Rename transition parameters to the names that symbols declare.

In a document, each transition names the actual parameters
of its symbol freely (`params="x"`), whereas the alphabet
declares the formal parameters (`<param name="p0"/>`).
Consumers that interpret guards over symbol parameters
first relabel transitions, so that the guard and the
assignments refer to formal parameter names.
"""
import logging

import awxml.errors as _errors
import awxml.guard.ast as _ast
import awxml.model as _model


__all__ = [
    'relabel',
    'relabel_document',
    'rename_vars']


_logger = logging.getLogger(__name__)


def relabel(
        alphabet:
            _model.Alphabet,
        transition:
            _model.Transition
        ) -> _model.Transition:
    """Return `transition` in terms of formal parameters.

    Actual parameters are paired with the formal
    parameters of the symbol by position. Names
    without a formal counterpart are left as they are.

    Raise `UnknownSymbol` if the label of
    `transition` is not in `alphabet`.
    """
    symbol = alphabet.find(transition.symbol)
    if symbol is None:
        raise _errors.UnknownSymbol(transition.symbol)
    formal = symbol.param_names
    naming = dict(zip(transition.params, formal))
    _logger.debug(
        f'relabeling transition on "{symbol.name}": {naming}')
    assignments = [
        _model.Assignment(
            naming.get(assignment.target, assignment.target),
            naming.get(assignment.expression, assignment.expression))
        for assignment in transition.assignments]
    return _model.Transition(
        transition.from_,
        transition.to,
        transition.symbol,
        params=formal,
        guard=rename_vars(transition.guard, naming),
        assignments=assignments)


def relabel_document(
        document:
            _model.Document
        ) -> _model.Document:
    """Return `document` with every transition relabeled."""
    transitions = [
        relabel(document.alphabet, transition)
        for transition in document.transitions]
    return _model.Document(
        document.alphabet,
        transitions,
        locations=document.locations,
        constants=document.constants,
        globals_=document.globals_)


def rename_vars(
        expr:
            _ast.GuardExpr,
        naming:
            dict[str, str]
        ) -> _ast.GuardExpr:
    """Return `expr` with variables renamed by `naming`.

    Variables not in `naming` keep their names.
    """
    match expr:
        case _ast.Var():
            return _ast.Var(naming.get(expr.value, expr.value))
        case _ast.Comparison():
            return _ast.Comparison(
                expr.operator,
                rename_vars(expr.left, naming),
                rename_vars(expr.right, naming))
        case _ast.Not():
            return _ast.Not(rename_vars(expr.operand, naming))
        case _ast.And() | _ast.Or():
            return type(expr)(
                rename_vars(expr.left, naming),
                rename_vars(expr.right, naming))
    # `TrueGuard`, `Num`
    return expr
