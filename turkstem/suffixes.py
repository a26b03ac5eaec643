#!/usr/bin/env python
# vim:fileencoding=utf8

# Copyright (c) 2026 The turkstem developers
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Suffix rules.
"""

import re


__all__ = ['Suffix']


class Suffix(object):
    """
    A suffix that can be removed from the end of a word.

    ``id`` identifies the suffix within its machine (for example
    ``'S14'``) and ``name`` is its morphological notation (for example
    ``'-(y)mUş'``). ``pattern`` is a sequence of the surface forms of the
    suffix. ``optional_letter`` is either ``None`` or a sequence of single
    characters one of which may additionally be dropped after the suffix
    has been removed. If ``check_harmony`` is true then the suffix is only
    removed from words that obey vowel harmony.
    """

    def __init__(self, id, name, pattern, optional_letter=None,
                 check_harmony=True):
        self.id = id
        self.name = name
        self.forms = tuple(pattern)
        self.pattern = _compile(self.forms)
        if optional_letter:
            self.optional_letters = tuple(optional_letter)
            self.optional_letter_pattern = _compile(self.optional_letters)
        else:
            self.optional_letters = ()
            self.optional_letter_pattern = None
        self.check_harmony = check_harmony

    def __repr__(self):
        return 'Suffix(%r, %r)' % (self.id, self.name)

    def match(self, word):
        """
        Check whether ``word`` ends with this suffix.
        """
        return self.pattern.search(word) is not None

    def remove(self, word):
        """
        Remove the suffix from the end of ``word``.

        ``word`` is returned unchanged if it doesn't end with the suffix.
        """
        m = self.pattern.search(word)
        if m is None:
            return word
        return word[:m.start()]

    def optional_letter(self, word):
        """
        Return the optional letter at the end of ``word`` or ``None``.
        """
        if self.optional_letter_pattern is None:
            return None
        m = self.optional_letter_pattern.search(word)
        if m is None:
            return None
        return m.group(0)[0]


def _compile(forms):
    return re.compile('(%s)$' % '|'.join(re.escape(f) for f in forms))
