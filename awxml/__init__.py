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
"""
Register automata interchange

Reads and writes symbolic, guarded, labeled transition systems
(register automata) in the AutomataWiki XML format.

Attribute values that hold structured data are encoded and
decoded by `awxml.lists` (parameter name lists) and
`awxml.guard` (guard expressions). The values that make up
a document are in `awxml.model`, and `awxml.xmlio` maps
them to and from XML.
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = None

import awxml.errors
from awxml.errors import (
    AutomatonFormatError, MalformedList, MalformedGuard,
    DuplicateSymbol, UnknownSymbol, MalformedDocument)

import awxml.lists

import awxml.guard
from awxml.guard import (
    # awxml.guard.ast
    TrueGuard, Var, Num, Comparison, Not, And, Or,
    GuardExpr, variables)

import awxml.model
from awxml.model import (
    Parameter, Symbol, Alphabet, Assignment, Transition,
    Location, Register, Document)

import awxml.relabel
from awxml.relabel import relabel, relabel_document

import awxml.xmlio
from awxml.xmlio import loads, dumps
