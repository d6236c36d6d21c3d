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
"""Guard codec.

Guards are stored as text in the `guard` element
of transitions, for example:

```
x > 0
not (x > 0)
(a and b) or c
p0 == r0 && p1 != 3
```

`decode` reads the keyword (`not`, `and`, `or`)
and the symbolic (`!`, `&&`, `||`) spelling of
connectives. `encode` always writes the
canonical form: keywords, single spaces,
and only the parentheses that are needed.
"""
import logging
import threading

import awxml.guard.ast as _ast
import awxml.guard.lexyacc as lexyacc


__all__ = [
    'decode',
    'encode']


_logger = logging.getLogger(__name__)
_local = threading.local()


def decode(
        text:
            str
        ) -> _ast.GuardExpr:
    """Return syntax tree for guard `text`.

    The returned tree is "abstract",
    in that blankspace and redundant
    parentheses of `text` cannot be
    reproduced from the tree.

    Raise `MalformedGuard` if `text`
    is not in the guard syntax.
    """
    if not isinstance(text, str):
        raise TypeError(
            f'guard must be a string, got: {text!r}')
    parser = _make_parser()
    tree = parser.parse(text)
    _logger.debug(f'parsed guard {text!r} as: {tree!r}')
    return tree


def encode(
        expr:
            _ast.GuardExpr
        ) -> str:
    """Return canonical text of guard `expr`.

    `decode(encode(expr)) == expr`
    """
    return expr.flatten()


def _make_parser() -> lexyacc.Parser:
    """Return parser.

    Memoizes one parser per thread,
    because a parser holds the state
    of the parse in progress.
    """
    parser = getattr(_local, 'parser', None)
    if parser is None:
        parser = lexyacc.Parser()
        _local.parser = parser
    return parser
