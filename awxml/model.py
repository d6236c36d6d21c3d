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
"""Values that make up an automaton document.

A `Document` aggregates:

- an `Alphabet` of input and output `Symbol`s,
- the `Transition`s, each labeled with a symbol name,
  actual parameter names, a guard, and `Assignment`s,
- optionally `Location`s and `Register`s
  (constants and global variables).

All values are immutable and compared by their fields.
Names of locations, symbols, and registers that
transitions refer to are not resolved here.
"""
import collections.abc as _abc
import logging

import awxml.errors as _errors
import awxml.guard.ast as _ast


__all__ = [
    'Parameter',
    'Symbol',
    'Alphabet',
    'Assignment',
    'Transition',
    'Location',
    'Register',
    'Document']


_logger = logging.getLogger(__name__)
INPUTS = 'inputs'
OUTPUTS = 'outputs'
DEFAULT_TYPE = 'int'


class Value:
    """Immutable record, compared by `_fields`."""

    _fields: tuple[str, ...] = tuple()

    def __setattr__(self, name, value):
        raise AttributeError(
            f'`{type(self).__name__}` is immutable')

    def _init(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def _key(self) -> tuple:
        return tuple(
            getattr(self, name)
            for name in self._fields)

    def __eq__(self, other):
        return (
            type(other) is type(self) and
            self._key() == other._key())

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __repr__(self):
        t = type(self).__name__
        fields = ', '.join(
            f'{name}={getattr(self, name)!r}'
            for name in self._fields)
        return f'{t}({fields})'


class Parameter(Value):
    """Formal parameter of a symbol.

    The name must be usable as a variable in guards.
    """

    _fields = ('name', 'type')

    def __init__(
            self,
            name:
                str,
            type:
                str=DEFAULT_TYPE):
        _ast.assert_name(name)
        _assert_str(type, 'type')
        self._init(name=name, type=type)


class Symbol(Value):
    """Input or output symbol, with formal parameters."""

    _fields = ('name', 'params')

    def __init__(
            self,
            name:
                str,
            params:
                _abc.Iterable[Parameter]=tuple()):
        _assert_str(name, 'name')
        params = tuple(params)
        for param in params:
            if not isinstance(param, Parameter):
                raise TypeError(
                    f'expected `Parameter`, got: {param!r}')
        self._init(name=name, params=params)

    @property
    def param_names(self) -> list[str]:
        return [param.name for param in self.params]


class Alphabet(Value):
    """Input and output symbols, in declaration order.

    Symbol names are unique within `inputs`
    and unique within `outputs`. The two
    partitions are separate namespaces,
    so a name can be both an input and an output.

    A string in `inputs` or `outputs` is
    short for a symbol without parameters.
    """

    _fields = ('inputs', 'outputs')

    def __init__(
            self,
            inputs:
                _abc.Iterable[Symbol | str]=tuple(),
            outputs:
                _abc.Iterable[Symbol | str]=tuple()):
        inputs = _symbols(inputs, INPUTS)
        outputs = _symbols(outputs, OUTPUTS)
        self._init(inputs=inputs, outputs=outputs)

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        """Input symbols followed by output symbols."""
        return self.inputs + self.outputs

    def find(
            self,
            name:
                str
            ) -> Symbol | None:
        """Return symbol named `name`, or `None`.

        Inputs are searched before outputs.
        """
        for symbol in self.symbols:
            if symbol.name == name:
                return symbol
        return None


class Assignment(Value):
    """Update of variable `target` to the value of `expression`.

    The expression is kept verbatim.
    """

    _fields = ('target', 'expression')

    def __init__(
            self,
            target:
                str,
            expression:
                str):
        _assert_str(target, 'target')
        _assert_str(expression, 'expression')
        self._init(target=target, expression=expression)


class Transition(Value):
    """Edge `from_ -> to`, labeled with `symbol`.

    @param params: actual parameter names,
        in the order of the symbol's parameters
    @param guard: if `None`, then `TrueGuard()`
    @param assignments: applied in sequence
    """

    _fields = (
        'from_', 'to', 'symbol',
        'params', 'guard', 'assignments')

    def __init__(
            self,
            from_:
                str,
            to:
                str,
            symbol:
                str,
            params:
                _abc.Iterable[str]=tuple(),
            guard:
                _ast.GuardExpr |
                None=None,
            assignments:
                _abc.Iterable[Assignment]=tuple()):
        _assert_str(from_, 'from_')
        _assert_str(to, 'to')
        _assert_str(symbol, 'symbol')
        if isinstance(params, str):
            raise TypeError(
                'params must be a sequence of names, '
                f'got the string: {params!r}')
        params = tuple(params)
        for param in params:
            _assert_str(param, 'parameter name')
        if guard is None:
            guard = _ast.TrueGuard()
        elif not isinstance(guard, _ast.GUARD_TYPES):
            raise TypeError(
                f'expected guard expression, got: {guard!r}')
        assignments = tuple(assignments)
        for assignment in assignments:
            if not isinstance(assignment, Assignment):
                raise TypeError(
                    f'expected `Assignment`, got: {assignment!r}')
        self._init(
            from_=from_,
            to=to,
            symbol=symbol,
            params=params,
            guard=guard,
            assignments=assignments)


class Location(Value):
    """Control location (state) of the automaton."""

    _fields = ('name', 'initial')

    def __init__(
            self,
            name:
                str,
            initial:
                bool=False):
        _assert_str(name, 'name')
        self._init(name=name, initial=bool(initial))


class Register(Value):
    """Constant or global variable, with its initial value.

    The value is kept verbatim.
    """

    _fields = ('name', 'value', 'type')

    def __init__(
            self,
            name:
                str,
            value:
                str,
            type:
                str=DEFAULT_TYPE):
        _assert_str(name, 'name')
        _assert_str(value, 'value')
        _assert_str(type, 'type')
        self._init(name=name, value=value, type=type)


class Document(Value):
    """Alphabet and transitions, in document order.

    Locations, constants, and global variables
    are optional parts of the document.
    """

    _fields = (
        'alphabet', 'transitions', 'locations',
        'constants', 'globals_')

    def __init__(
            self,
            alphabet:
                Alphabet,
            transitions:
                _abc.Iterable[Transition]=tuple(),
            locations:
                _abc.Iterable[Location]=tuple(),
            constants:
                _abc.Iterable[Register]=tuple(),
            globals_:
                _abc.Iterable[Register]=tuple()):
        if not isinstance(alphabet, Alphabet):
            raise TypeError(
                f'expected `Alphabet`, got: {alphabet!r}')
        transitions = _typed_tuple(transitions, Transition)
        locations = _typed_tuple(locations, Location)
        constants = _typed_tuple(constants, Register)
        globals_ = _typed_tuple(globals_, Register)
        self._init(
            alphabet=alphabet,
            transitions=transitions,
            locations=locations,
            constants=constants,
            globals_=globals_)

    @property
    def initial_locations(self) -> list[Location]:
        return [
            location
            for location in self.locations
            if location.initial]


def _symbols(
        items:
            _abc.Iterable[Symbol | str],
        partition:
            str
        ) -> tuple[Symbol, ...]:
    """Return `items` as symbols.

    Raise `DuplicateSymbol` if a name repeats.
    """
    symbols = list()
    names = set()
    for item in items:
        if isinstance(item, str):
            item = Symbol(item)
        elif not isinstance(item, Symbol):
            raise TypeError(
                f'expected `Symbol` or `str`, got: {item!r}')
        if item.name in names:
            raise _errors.DuplicateSymbol(item.name, partition)
        names.add(item.name)
        symbols.append(item)
    return tuple(symbols)


def _typed_tuple(
        items:
            _abc.Iterable,
        cls:
            type
        ) -> tuple:
    items = tuple(items)
    for item in items:
        if not isinstance(item, cls):
            raise TypeError(
                f'expected `{cls.__name__}`, got: {item!r}')
    return items


def _assert_str(value, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f'{name} must be a string, got: {value!r}')
