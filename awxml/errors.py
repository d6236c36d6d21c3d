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
"""Exceptions raised when reading automaton documents."""


__all__ = [
    'AutomatonFormatError',
    'MalformedList',
    'MalformedGuard',
    'DuplicateSymbol',
    'UnknownSymbol',
    'MalformedDocument']


class AutomatonFormatError(ValueError):
    """Base class of decoding errors."""


class MalformedList(AutomatonFormatError):
    """Delimited list with an empty token.

    @param text: the attribute value that failed to decode
    @param index: position (in tokens) of the first empty token
    """

    def __init__(
            self,
            text:
                str,
            index:
                int):
        self.text = text
        self.index = index
        super().__init__(
            f'empty token at index {index} '
            f'of list: {text!r}')


class MalformedGuard(AutomatonFormatError):
    """Guard text that does not match the guard grammar.

    The offending part of the input is `self.substring`,
    which starts at character offset `self.position`.
    """

    def __init__(
            self,
            text:
                str,
            position:
                int,
            reason:
                str):
        self.text = text
        self.position = position
        self.reason = reason
        self.substring = text[position:]
        super().__init__(
            f'{reason} at position {position} '
            f'of guard {text!r}: {self.substring!r}')


class DuplicateSymbol(AutomatonFormatError):
    """Symbol name declared twice in one alphabet partition."""

    def __init__(
            self,
            name:
                str,
            partition:
                str):
        self.name = name
        self.partition = partition
        super().__init__(name, partition)

    def __str__(self):
        return (
            f'symbol "{self.name}" declared more '
            f'than once in `{self.partition}`')


class UnknownSymbol(AutomatonFormatError):
    """Transition label not declared in the alphabet."""

    def __init__(
            self,
            name:
                str):
        self.name = name
        super().__init__(
            f'symbol "{name}" is not declared in the alphabet')


class MalformedDocument(AutomatonFormatError):
    """XML tree that does not have the expected structure."""
