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
"""Read and write automaton documents as XML.

The layout follows the AutomataWiki register automaton format:

```xml
<register-automaton>
  <alphabet>
    <inputs><symbol name="IIn"><param type="int" name="p0" /></symbol></inputs>
    <outputs><symbol name="OOK" /></outputs>
  </alphabet>
  <constants><constant type="int" name="c0">0</constant></constants>
  <globals><variable type="int" name="r0">0</variable></globals>
  <locations><location name="l0" initial="true" /></locations>
  <transitions>
    <transition from="l0" to="l0" symbol="IIn" params="p">
      <guard>p &gt; c0</guard>
      <assignments><assign to="r0">p</assign></assignments>
    </transition>
  </transitions>
</register-automaton>
```

The `params` attribute and the `guard` text are compound
values, read and written with `awxml.lists` and `awxml.guard`.
"""
import logging
import xml.etree.ElementTree as ET

import awxml.errors as _errors
import awxml.guard as _guard
import awxml.lists as _lists
import awxml.model as _model


__all__ = [
    'loads',
    'dumps',
    'from_element',
    'to_element']


_logger = logging.getLogger(__name__)


# Global names used in tags
N_ROOT = 'register-automaton'
N_ALPHABET = 'alphabet'
N_INPUTS = _model.INPUTS
N_OUTPUTS = _model.OUTPUTS
N_SYMBOL = 'symbol'
N_PARAM = 'param'
N_CONSTANTS = 'constants'
N_CONSTANT = 'constant'
N_GLOBALS = 'globals'
N_VARIABLE = 'variable'
N_LOCATIONS = 'locations'
N_LOCATION = 'location'
N_TRANSITIONS = 'transitions'
N_TRANSITION = 'transition'
N_GUARD = 'guard'
N_ASSIGNMENTS = 'assignments'
N_ASSIGN = 'assign'


# attribute names
A_NAME = 'name'
A_TYPE = 'type'
A_INITIAL = 'initial'
A_FROM = 'from'
A_TO = 'to'
A_SYMBOL = 'symbol'
A_PARAMS = 'params'
TRUE = 'true'


def loads(
        text:
            str
        ) -> _model.Document:
    """Return document parsed from XML `text`.

    Raise:

    - `xml.etree.ElementTree.ParseError`
      if `text` is not well-formed XML
    - `MalformedDocument` if elements or
      attributes are missing, or a parameter
      name is not a variable name
    - `MalformedList`, `MalformedGuard`,
      `DuplicateSymbol` from decoding the
      parts of the document
    """
    elem = ET.fromstring(text)
    return from_element(elem)


def dumps(
        document:
            _model.Document,
        pretty:
            bool=False
        ) -> str:
    """Return XML text of `document`.

    @param pretty: if `True`, then indent nested elements
    """
    elem = to_element(document)
    if pretty:
        ET.indent(elem)
    return ET.tostring(elem, encoding='unicode')


def from_element(
        elem:
            ET.Element
        ) -> _model.Document:
    """Return document from the root element `elem`."""
    if elem.tag != N_ROOT:
        raise _errors.MalformedDocument(
            f'root tag should be "{N_ROOT}", '
            f'got: "{elem.tag}"')
    alphabet = _load_alphabet(_child(elem, N_ALPHABET))
    constants = [
        _load_register(e)
        for e in _items(elem, N_CONSTANTS, N_CONSTANT)]
    globals_ = [
        _load_register(e)
        for e in _items(elem, N_GLOBALS, N_VARIABLE)]
    locations = [
        _model.Location(
            _attr(e, A_NAME),
            initial=(e.get(A_INITIAL) == TRUE))
        for e in _items(elem, N_LOCATIONS, N_LOCATION)]
    transitions = [
        _load_transition(e)
        for e in _items(elem, N_TRANSITIONS, N_TRANSITION)]
    _logger.debug(
        f'loaded document with {len(transitions)} transitions')
    return _model.Document(
        alphabet,
        transitions,
        locations=locations,
        constants=constants,
        globals_=globals_)


def to_element(
        document:
            _model.Document
        ) -> ET.Element:
    """Return root element that represents `document`.

    Empty optional sections are omitted.
    """
    elem = ET.Element(N_ROOT)
    alphabet = ET.SubElement(elem, N_ALPHABET)
    for tag, symbols in [
            (N_INPUTS, document.alphabet.inputs),
            (N_OUTPUTS, document.alphabet.outputs)]:
        partition = ET.SubElement(alphabet, tag)
        for symbol in symbols:
            _dump_symbol(partition, symbol)
    if document.constants:
        constants = ET.SubElement(elem, N_CONSTANTS)
        for register in document.constants:
            _dump_register(constants, N_CONSTANT, register)
    if document.globals_:
        globals_ = ET.SubElement(elem, N_GLOBALS)
        for register in document.globals_:
            _dump_register(globals_, N_VARIABLE, register)
    if document.locations:
        locations = ET.SubElement(elem, N_LOCATIONS)
        for location in document.locations:
            e = ET.SubElement(locations, N_LOCATION)
            e.set(A_NAME, location.name)
            if location.initial:
                e.set(A_INITIAL, TRUE)
    if document.transitions:
        transitions = ET.SubElement(elem, N_TRANSITIONS)
        for transition in document.transitions:
            _dump_transition(transitions, transition)
    _logger.debug(
        f'dumped document with {len(document.transitions)} '
        'transitions')
    return elem


def _load_alphabet(
        elem:
            ET.Element
        ) -> _model.Alphabet:
    inputs = [
        _load_symbol(e)
        for e in _child(elem, N_INPUTS).findall(N_SYMBOL)]
    outputs = [
        _load_symbol(e)
        for e in _child(elem, N_OUTPUTS).findall(N_SYMBOL)]
    return _model.Alphabet(inputs, outputs)


def _load_symbol(
        elem:
            ET.Element
        ) -> _model.Symbol:
    params = list()
    for e in elem.findall(N_PARAM):
        name = _attr(e, A_NAME)
        try:
            param = _model.Parameter(
                name, e.get(A_TYPE, _model.DEFAULT_TYPE))
        except ValueError as error:
            raise _errors.MalformedDocument(
                f'parameter of symbol "{elem.get(A_NAME)}": '
                f'{error}') from error
        params.append(param)
    return _model.Symbol(_attr(elem, A_NAME), params)


def _load_register(
        elem:
            ET.Element
        ) -> _model.Register:
    value = elem.text or ''
    return _model.Register(
        _attr(elem, A_NAME),
        value,
        elem.get(A_TYPE, _model.DEFAULT_TYPE))


def _load_transition(
        elem:
            ET.Element
        ) -> _model.Transition:
    params = _lists.decode(elem.get(A_PARAMS, ''))
    guard_elem = elem.find(N_GUARD)
    if guard_elem is None:
        guard = None
    else:
        guard = _guard.decode(guard_elem.text or '')
    assignments = [
        _model.Assignment(
            _attr(e, A_TO),
            e.text or '')
        for e in _items(elem, N_ASSIGNMENTS, N_ASSIGN)]
    return _model.Transition(
        _attr(elem, A_FROM),
        _attr(elem, A_TO),
        _attr(elem, A_SYMBOL),
        params=params,
        guard=guard,
        assignments=assignments)


def _dump_symbol(
        parent:
            ET.Element,
        symbol:
            _model.Symbol
        ) -> None:
    elem = ET.SubElement(parent, N_SYMBOL)
    elem.set(A_NAME, symbol.name)
    for param in symbol.params:
        e = ET.SubElement(elem, N_PARAM)
        e.set(A_TYPE, param.type)
        e.set(A_NAME, param.name)


def _dump_register(
        parent:
            ET.Element,
        tag:
            str,
        register:
            _model.Register
        ) -> None:
    elem = ET.SubElement(parent, tag)
    elem.set(A_TYPE, register.type)
    elem.set(A_NAME, register.name)
    elem.text = register.value


def _dump_transition(
        parent:
            ET.Element,
        transition:
            _model.Transition
        ) -> None:
    elem = ET.SubElement(parent, N_TRANSITION)
    elem.set(A_FROM, transition.from_)
    elem.set(A_TO, transition.to)
    elem.set(A_SYMBOL, transition.symbol)
    if transition.params:
        elem.set(A_PARAMS, _lists.encode(transition.params))
    if not isinstance(transition.guard, _guard.TrueGuard):
        guard = ET.SubElement(elem, N_GUARD)
        guard.text = _guard.encode(transition.guard)
    if transition.assignments:
        assignments = ET.SubElement(elem, N_ASSIGNMENTS)
        for assignment in transition.assignments:
            e = ET.SubElement(assignments, N_ASSIGN)
            e.set(A_TO, assignment.target)
            e.text = assignment.expression


def _child(
        elem:
            ET.Element,
        tag:
            str
        ) -> ET.Element:
    """Return required child `tag` of `elem`."""
    child = elem.find(tag)
    if child is None:
        raise _errors.MalformedDocument(
            f'missing element "{tag}" in "{elem.tag}"')
    return child


def _items(
        elem:
            ET.Element,
        wrapper:
            str,
        tag:
            str
        ) -> list[ET.Element]:
    """Return elements `tag` in optional `wrapper`."""
    container = elem.find(wrapper)
    if container is None:
        return list()
    return container.findall(tag)


def _attr(
        elem:
            ET.Element,
        name:
            str
        ) -> str:
    """Return required attribute `name` of `elem`."""
    value = elem.get(name)
    if value is None:
        raise _errors.MalformedDocument(
            f'missing attribute "{name}" of "{elem.tag}"')
    return value
