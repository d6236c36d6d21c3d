#!/usr/bin/env python
"""Tests for the `awxml.xmlio` module."""
import xml.etree.ElementTree as ET

import pytest

from awxml import xmlio
from awxml.errors import (
    DuplicateSymbol, MalformedDocument, MalformedGuard, MalformedList)
from awxml.guard import Comparison, Num, TrueGuard, Var
from awxml.model import (
    Alphabet, Assignment, Document, Location,
    Parameter, Register, Symbol, Transition)


SCENARIO = (
    '<register-automaton>'
    '<alphabet>'
    '<inputs><symbol name="in1" /></inputs>'
    '<outputs><symbol name="out1" /></outputs>'
    '</alphabet>'
    '<transitions>'
    '<transition from="s0" to="s1" symbol="in1" params="x">'
    '<guard>x &gt; 0</guard>'
    '<assignments><assign to="y">x+1</assign></assignments>'
    '</transition>'
    '</transitions>'
    '</register-automaton>')
FULL = (
    '<register-automaton>'
    '<alphabet>'
    '<inputs>'
    '<symbol name="IPut"><param type="int" name="p0" /></symbol>'
    '<symbol name="IGet" />'
    '</inputs>'
    '<outputs>'
    '<symbol name="OOK" />'
    '<symbol name="OGet"><param type="int" name="p0" /></symbol>'
    '</outputs>'
    '</alphabet>'
    '<constants><constant type="int" name="c0">1</constant></constants>'
    '<globals><variable type="int" name="r0">0</variable></globals>'
    '<locations>'
    '<location name="l0" initial="true" />'
    '<location name="l1" />'
    '</locations>'
    '<transitions>'
    '<transition from="l0" to="l1" symbol="IPut" params="p">'
    '<guard>p &gt;= c0 and not p == r0</guard>'
    '<assignments><assign to="r0">p</assign></assignments>'
    '</transition>'
    '<transition from="l1" to="l0" symbol="OOK" />'
    '<transition from="l1" to="l1" symbol="IGet" />'
    '<transition from="l1" to="l0" symbol="OGet" params="r0" />'
    '</transitions>'
    '</register-automaton>')


def test_scenario():
    doc = xmlio.loads(SCENARIO)
    assert doc.alphabet == Alphabet(inputs=['in1'], outputs=['out1'])
    (t,) = doc.transitions
    assert t.from_ == 's0'
    assert t.to == 's1'
    assert t.symbol == 'in1'
    assert t.params == ('x',)
    assert t.guard == Comparison('>', Var('x'), Num('0'))
    assert t.assignments == (Assignment('y', 'x+1'),)
    # byte-for-byte round trip
    s = xmlio.dumps(doc)
    assert s == SCENARIO, s


def test_full_document():
    doc = xmlio.loads(FULL)
    assert doc.alphabet.find('IPut').params == (Parameter('p0'),)
    assert doc.constants == (Register('c0', '1'),)
    assert doc.globals_ == (Register('r0', '0'),)
    assert doc.locations == (
        Location('l0', initial=True), Location('l1'))
    assert len(doc.transitions) == 4
    t = doc.transitions[1]
    assert t.params == tuple()
    assert t.guard == TrueGuard()
    assert t.assignments == tuple()
    s = xmlio.dumps(doc)
    assert s == FULL, s


def test_round_trip_document():
    doc = Document(
        Alphabet(
            inputs=[Symbol('a', [Parameter('p'), Parameter('q')])],
            outputs=['a', 'b']),
        [Transition(
            's0', 's1', 'a', ['x', 'y'],
            Comparison('<', Var('x'), Var('y')),
            [Assignment('r', 'x'), Assignment('s', 'r')]),
         Transition('s1', 's0', 'b')],
        locations=[Location('s0', True), Location('s1')],
        globals_=[Register('r', '0'), Register('s', '0')])
    assert xmlio.loads(xmlio.dumps(doc)) == doc
    s = xmlio.dumps(doc, pretty=True)
    assert '\n' in s
    assert xmlio.loads(s) == doc
    elem = xmlio.to_element(doc)
    assert isinstance(elem, ET.Element)
    assert xmlio.from_element(elem) == doc


def test_optional_parts_omitted():
    doc = Document(Alphabet(), [Transition('s0', 's0', 'a')])
    s = xmlio.dumps(doc)
    expected = (
        '<register-automaton>'
        '<alphabet><inputs /><outputs /></alphabet>'
        '<transitions>'
        '<transition from="s0" to="s0" symbol="a" />'
        '</transitions>'
        '</register-automaton>')
    assert s == expected, s


def test_empty_params_attribute():
    s = SCENARIO.replace('params="x"', 'params=""')
    doc = xmlio.loads(s)
    assert doc.transitions[0].params == tuple()
    s = SCENARIO.replace('params="x"', 'params="x, y"')
    doc = xmlio.loads(s)
    assert doc.transitions[0].params == ('x', 'y')


def test_symbolic_guard_is_written_canonically():
    s = SCENARIO.replace('x &gt; 0', '(x&gt;0) &amp;&amp; !(y == 1)')
    doc = xmlio.loads(s)
    s = xmlio.dumps(doc)
    assert '<guard>x &gt; 0 and not y == 1</guard>' in s, s


def test_text_is_kept_verbatim():
    doc = Document(
        Alphabet(inputs=['a']),
        [Transition(
            's0', 's1', 'a',
            assignments=[Assignment('y', ' x + 1 ')])],
        constants=[Register('c', '  7\n')])
    for pretty in (False, True):
        s = xmlio.dumps(doc, pretty=pretty)
        assert xmlio.loads(s) == doc, s
    s = SCENARIO.replace('>x+1<', '> x+1 <')
    doc = xmlio.loads(s)
    assert doc.transitions[0].assignments[0].expression == ' x+1 '


def test_invalid_parameter_name():
    s = SCENARIO.replace(
        '<symbol name="in1" />',
        '<symbol name="in1"><param name="p-0" /></symbol>')
    with pytest.raises(MalformedDocument):
        xmlio.loads(s)


def test_malformed_parts():
    cases = [
        (SCENARIO.replace('params="x"', 'params="x,,y"'),
            MalformedList),
        (SCENARIO.replace('x &gt; 0', '(x &gt; 0'),
            MalformedGuard),
        (SCENARIO.replace('x &gt; 0', ''),
            MalformedGuard),
        (SCENARIO.replace('name="out1"', 'name="in1"'),
            None),
        (SCENARIO.replace(
            '<symbol name="in1" />',
            '<symbol name="in1" /><symbol name="in1" />'),
            DuplicateSymbol)]
    for text, error in cases:
        if error is None:
            xmlio.loads(text)
            continue
        with pytest.raises(error):
            xmlio.loads(text)


def test_malformed_document():
    cases = [
        SCENARIO.replace('register-automaton', 'automaton'),
        SCENARIO.replace('from="s0" ', ''),
        SCENARIO.replace(' symbol="in1" params', ' params'),
        SCENARIO.replace('<assign to="y">', '<assign>'),
        SCENARIO.replace('<outputs><symbol name="out1" /></outputs>', ''),
        '<register-automaton />']
    for text in cases:
        with pytest.raises(MalformedDocument):
            xmlio.loads(text)
    with pytest.raises(ET.ParseError):
        xmlio.loads('<register-automaton>')
