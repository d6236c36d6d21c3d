#!/usr/bin/env python
"""Tests for the `awxml.model` module."""
import pytest

from awxml.errors import DuplicateSymbol
from awxml.guard import And, Num, TrueGuard, Var, decode
from awxml.model import (
    Alphabet, Assignment, Document, Location,
    Parameter, Register, Symbol, Transition)


def test_alphabet():
    alphabet = Alphabet(
        inputs=['IIn', Symbol('IPut', [Parameter('p0')])],
        outputs=['OOK'])
    assert alphabet.inputs == (
        Symbol('IIn'),
        Symbol('IPut', [Parameter('p0', 'int')]))
    assert alphabet.outputs == (Symbol('OOK'),)
    names = [symbol.name for symbol in alphabet.symbols]
    assert names == ['IIn', 'IPut', 'OOK'], names
    assert alphabet.find('IPut').param_names == ['p0']
    assert alphabet.find('OOK') == Symbol('OOK')
    assert alphabet.find('missing') is None
    # order is kept
    alphabet = Alphabet(inputs=['b', 'a', 'c'])
    names = [symbol.name for symbol in alphabet.inputs]
    assert names == ['b', 'a', 'c'], names
    assert Alphabet().symbols == tuple()


def test_duplicate_symbol():
    with pytest.raises(DuplicateSymbol) as exc_info:
        Alphabet(inputs=['x', 'x'])
    e = exc_info.value
    assert e.name == 'x'
    assert e.partition == 'inputs'
    with pytest.raises(DuplicateSymbol) as exc_info:
        Alphabet(inputs=['x'], outputs=['y', 'z', Symbol('y')])
    e = exc_info.value
    assert (e.name, e.partition) == ('y', 'outputs')
    with pytest.raises(ValueError):
        Alphabet(inputs=[Symbol('x'), Symbol('x', [Parameter('p')])])


def test_same_name_in_both_partitions():
    alphabet = Alphabet(inputs=['x'], outputs=['x'])
    assert alphabet.inputs == alphabet.outputs
    # inputs first
    alphabet = Alphabet(
        inputs=[Symbol('x', [Parameter('p')])],
        outputs=['x'])
    assert alphabet.find('x').param_names == ['p']


def test_parameter_name_checks():
    for name in ['p-0', '0p', 'true', 'and', '']:
        with pytest.raises(ValueError):
            Parameter(name)
    with pytest.raises(TypeError):
        Parameter(0)
    assert Parameter('_p0').name == '_p0'


def test_symbol_checks():
    with pytest.raises(TypeError):
        Symbol(1)
    with pytest.raises(TypeError):
        Symbol('a', ['p0'])
    with pytest.raises(TypeError):
        Alphabet(inputs=[1])


def test_transition_defaults():
    t = Transition('s0', 's1', 'in1')
    assert t.from_ == 's0'
    assert t.to == 's1'
    assert t.symbol == 'in1'
    assert t.params == tuple()
    assert t.guard == TrueGuard()
    assert t.assignments == tuple()


def test_transition():
    guard = decode('x > 0 and y')
    assignments = [
        Assignment('y', 'x+1'),
        Assignment('z', 'y')]
    t = Transition(
        's0', 's1', 'in1',
        params=['x', 'y'],
        guard=guard,
        assignments=assignments)
    assert t.params == ('x', 'y')
    assert isinstance(t.guard, And)
    assert t.guard.right == Var('y')
    # order of assignments is kept
    targets = [u.target for u in t.assignments]
    assert targets == ['y', 'z'], targets
    assert t.assignments[0].expression == 'x+1'
    # equal fields, equal transitions
    u = Transition(
        's0', 's1', 'in1', ('x', 'y'),
        decode('(x > 0) && y'),
        tuple(assignments))
    assert t == u
    assert hash(t) == hash(u)
    assert t != Transition('s0', 's1', 'in1', ['x', 'y'])


def test_transition_checks():
    with pytest.raises(TypeError):
        Transition('s0', 's1', 'in1', params='xy')
    with pytest.raises(TypeError):
        Transition('s0', 's1', 'in1', params=[1])
    with pytest.raises(TypeError):
        Transition('s0', 's1', 'in1', guard='x > 0')
    # operands are not guards
    with pytest.raises(TypeError):
        Transition('s0', 's1', 'in1', guard=Num('5'))
    with pytest.raises(TypeError):
        Transition('s0', 's1', 'in1', assignments=[('y', 'x')])
    with pytest.raises(TypeError):
        Transition('s0', None, 'in1')


def test_values_are_immutable():
    t = Transition('s0', 's1', 'in1')
    with pytest.raises(AttributeError):
        t.to = 's2'
    alphabet = Alphabet(inputs=['a'])
    with pytest.raises(AttributeError):
        alphabet.inputs = tuple()
    assert isinstance(alphabet.inputs, tuple)


def test_document():
    alphabet = Alphabet(inputs=['a'], outputs=['b'])
    transitions = [
        Transition('s1', 's0', 'b'),
        Transition('s0', 's1', 'a'),
        Transition('s1', 's0', 'b')]
    doc = Document(alphabet, transitions)
    # no reordering, no deduplication
    assert doc.transitions == tuple(transitions)
    assert doc.locations == tuple()
    assert doc.constants == tuple()
    assert doc.globals_ == tuple()
    doc = Document(
        alphabet,
        transitions,
        locations=[Location('s0', initial=True), Location('s1')],
        constants=[Register('c', '5')],
        globals_=[Register('r', '0', 'int')])
    assert doc.initial_locations == [Location('s0', True)]
    assert doc.constants[0].type == 'int'
    assert doc.globals_[0].value == '0'
    r = repr(doc.constants[0])
    assert r == "Register(name='c', value='5', type='int')", r
    with pytest.raises(TypeError):
        Document(None)
    with pytest.raises(TypeError):
        Document(alphabet, [alphabet])
