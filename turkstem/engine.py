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
Search for the stems that a suffix machine can reach.
"""

import logging

from turkstem.alphabet import has_vowel_harmony, valid_optional_letter


__all__ = ['Transition', 'add_transitions', 'SuffixStripper']


logger = logging.getLogger(__name__)


class Transition(object):
    """
    A candidate step of the search: removing ``suffix`` from ``word`` moves
    the machine from ``start_state`` to ``next_state``.

    Marked transitions are provisional. They are dropped as soon as the
    search reaches a final state.
    """

    def __init__(self, start_state, next_state, word, suffix, marked=False):
        self.start_state = start_state
        self.next_state = next_state
        self.word = word
        self.suffix = suffix
        self.marked = marked

    def __repr__(self):
        return '<Transition %s --%s--> %s on %r%s>' % (self.start_state.name,
                self.suffix.id, self.next_state.name, self.word,
                ' (marked)' if self.marked else '')

    def is_similar(self, other):
        """
        Check whether two transitions connect the same pair of states.
        """
        return (self.start_state is other.start_state and
                self.next_state is other.next_state)


def add_transitions(machine, state, word, transitions, marked=False):
    """
    Append the transitions that are possible from ``state`` on ``word``.

    A transition is added for every suffix of ``state`` that ``word`` ends
    with, in the order of the state's suffixes. Suffixes for which the
    machine has no next state are skipped.
    """
    for suffix in state.suffixes:
        if suffix.match(word):
            next_state = machine.next_state(state, suffix)
            if next_state is not None:
                transitions.append(Transition(state, next_state, word, suffix,
                                              marked))


class SuffixStripper(object):
    """
    Removes suffixes from words using suffix machines.

    ``protected_words`` are never stripped by suffixes that require vowel
    harmony. ``vowel_harmony_exceptions`` are stripped even if they
    violate vowel harmony.
    """

    def __init__(self, protected_words, vowel_harmony_exceptions):
        self.protected_words = protected_words
        self.vowel_harmony_exceptions = vowel_harmony_exceptions

    def should_be_stripped(self, word, suffix):
        # Suffixes without harmony check also apply to protected words.
        return ((word not in self.protected_words and
                 (suffix.check_harmony and
                  (has_vowel_harmony(word) or
                   word in self.vowel_harmony_exceptions))) or
                not suffix.check_harmony)

    def strip_suffix(self, word, suffix):
        """
        Remove a suffix from a word.

        If the suffix is followed by an optional letter then that letter is
        removed, too. If the optional letter is not valid then ``word`` is
        returned unchanged.
        """
        stem = word
        if self.should_be_stripped(word, suffix) and suffix.match(word):
            stem = suffix.remove(stem)
        letter = suffix.optional_letter(stem)
        if letter is not None:
            if valid_optional_letter(stem, letter):
                stem = stem[:-1]
            else:
                stem = word
        return stem

    def strip(self, machine, word, stems):
        """
        Add the stems that ``machine`` reaches from ``word`` to ``stems``.

        Transitions are processed first in, first out. When a transition
        leads to a final state, all pending transitions between the same
        states and all marked transitions are discarded. When it leads to
        an intermediate state, pending transitions between the same states
        and the new transitions are marked.
        """
        transitions = []
        add_transitions(machine, machine.initial_state, word, transitions)

        while transitions:
            transition = transitions.pop(0)
            stem = self.strip_suffix(transition.word, transition.suffix)
            if stem == transition.word:
                continue
            logger.debug('%s: %r -> %r', machine.name, transition, stem)

            if transition.next_state.final:
                transitions[:] = [t for t in transitions if not
                                  (t.marked or transition.is_similar(t))]
                stems.add(stem)
                add_transitions(machine, transition.next_state, stem,
                                transitions)
            else:
                for t in transitions:
                    if transition.is_similar(t):
                        t.marked = True
                add_transitions(machine, transition.next_state, stem,
                                transitions, marked=True)
        return stems
