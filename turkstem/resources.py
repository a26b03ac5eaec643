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
Word lists and suffix machines shipped with turkstem.
"""

import logging
import os.path
import threading

import turkstem.grammar


__all__ = ['PROTECTED_WORDS', 'VOWEL_HARMONY_EXCEPTIONS',
           'LAST_CONSONANT_EXCEPTIONS', 'AVERAGE_STEM_SIZE_EXCEPTIONS',
           'NOMINAL_VERB', 'NOUN', 'DERIVATIONAL', 'load_word_set',
           'read_word_set', 'default_word_set', 'default_machines']


logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')

# Names of the bundled word lists
PROTECTED_WORDS = 'protected_words.txt'
VOWEL_HARMONY_EXCEPTIONS = 'vowel_harmony_exceptions.txt'
LAST_CONSONANT_EXCEPTIONS = 'last_consonant_exceptions.txt'
AVERAGE_STEM_SIZE_EXCEPTIONS = 'average_stem_size_exceptions.txt'

MORPHOTACTICS = 'morphotactics.txt'

# Names of the suffix machines in ``MORPHOTACTICS``
NOMINAL_VERB = 'nominalverb'
NOUN = 'noun'
DERIVATIONAL = 'derivational'

_lock = threading.Lock()
_word_sets = {}
_machines = None


def load_word_set(infile):
    """
    Load a set of words from an open readable file.

    The file must contain one word per line. Surrounding whitespace is
    removed and empty lines are ignored.
    """
    words = frozenset(line.strip() for line in infile if line.strip())
    logger.debug('Loaded %d words from %s', len(words),
                 getattr(infile, 'name', repr(infile)))
    return words


def read_word_set(filename):
    """
    Load a set of words from a UTF-8 encoded file.

    See ``load_word_set``.
    """
    with open(filename, 'r', encoding='utf8') as f:
        return load_word_set(f)


def default_word_set(name):
    """
    Return one of the bundled word lists.

    ``name`` is one of ``PROTECTED_WORDS``, ``VOWEL_HARMONY_EXCEPTIONS``,
    ``LAST_CONSONANT_EXCEPTIONS`` and ``AVERAGE_STEM_SIZE_EXCEPTIONS``.
    Each list is loaded once.
    """
    with _lock:
        if name not in _word_sets:
            _word_sets[name] = read_word_set(os.path.join(DATA_DIR, name))
        return _word_sets[name]


def default_machines():
    """
    Return the bundled suffix machines.

    The result is a dict that maps ``NOMINAL_VERB``, ``NOUN`` and
    ``DERIVATIONAL`` to ``turkstem.states.Machine`` instances. The
    machines are built once and shared afterwards.
    """
    global _machines
    with _lock:
        if _machines is None:
            filename = os.path.join(DATA_DIR, MORPHOTACTICS)
            with open(filename, 'r', encoding='utf8') as f:
                _machines = turkstem.grammar.parse_file(f)
        return dict(_machines)
