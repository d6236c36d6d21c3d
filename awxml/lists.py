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
"""Comma-separated lists packed into one attribute value.

Used for the `params` attribute of transitions:

```python
encode(['x', 'y']) == 'x,y'
decode('x, y') == ['x', 'y']
decode('') == []
```

Tokens cannot contain the delimiter,
there is no escaping.
"""
import collections.abc as _abc
import logging

import awxml.errors as _errors


__all__ = [
    'encode',
    'decode']


_logger = logging.getLogger(__name__)
DELIMITER = ','


def encode(
        items:
            _abc.Iterable[str]
        ) -> str:
    """Return `items` joined by `DELIMITER`.

    The empty sequence is encoded
    as the empty string.
    """
    return DELIMITER.join(items)


def decode(
        text:
            str
        ) -> list[str]:
    """Return the tokens of `text`, stripped of blankspace.

    The empty string decodes to the empty list
    (not to `['']`).

    Raise `MalformedList` if `text` is not empty
    and any token is empty after stripping.
    """
    if not text:
        return list()
    items = [
        token.strip()
        for token in text.split(DELIMITER)]
    for index, item in enumerate(items):
        if not item:
            raise _errors.MalformedList(text, index)
    _logger.debug(f'decoded list: {items}')
    return items
