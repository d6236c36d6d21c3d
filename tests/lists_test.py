#!/usr/bin/env python
"""Tests for the `awxml.lists` module."""
import pytest

from awxml.errors import MalformedList
from awxml.lists import decode, encode


def test_encode():
    assert encode(['x', 'y']) == 'x,y'
    assert encode(['x']) == 'x'
    assert encode([]) == ''
    assert encode(iter(['a', 'b', 'c'])) == 'a,b,c'


def test_decode():
    assert decode('x,y') == ['x', 'y']
    assert decode('x, y') == ['x', 'y']
    assert decode('  x  ,y ') == ['x', 'y']
    assert decode('x') == ['x']


def test_empty_list():
    assert decode('') == []
    assert encode([]) == ''
    assert decode(encode([])) == []


def test_round_trip():
    lists = [
        [],
        ['p'],
        ['p0', 'p1'],
        ['a', 'b', 'a'],
        ['x_1', 'y', 'z', 'w']]
    for items in lists:
        assert decode(encode(items)) == items, items


def test_empty_token():
    with pytest.raises(MalformedList) as exc_info:
        decode('a,,b')
    e = exc_info.value
    assert e.text == 'a,,b'
    assert e.index == 1
    cases = {
        ',a': 0,
        'a,': 1,
        'a, ,b': 1,
        ',': 0,
        '   ': 0}
    for text, index in cases.items():
        with pytest.raises(MalformedList) as exc_info:
            decode(text)
        assert exc_info.value.index == index, text


def test_malformed_list_is_value_error():
    with pytest.raises(ValueError):
        decode('a,,b')
