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
The Turkish stemmer.

Stemming runs three suffix machines one after another: nominal verb
suffixes, noun suffixes and derivational suffixes. Every machine is fed
with the original word and all stems found so far. Among all stems found
the one that is closest to the average size of Turkish stems is chosen.
The selection is based on F. Can et al., "Information Retrieval on Turkish
Texts".
"""

from turkstem.alphabet import count_syllables, is_turkish
from turkstem.engine import SuffixStripper
from turkstem import resources


__all__ = ['AVERAGE_STEMMED_SIZE', 'TurkishStemmer']


AVERAGE_STEMMED_SIZE = 4

LAST_CONSONANTS = {
    'b': 'p',
    'c': 'ç',
    'd': 't',
    'ğ': 'k',
}


class TurkishStemmer(object):
    """
    Stemmer for lowercased Turkish words.

    The word lists are sets of strings:

    ``protected_words`` are never stemmed.

    ``vowel_harmony_exceptions`` are stemmed although they violate vowel
    harmony.

    ``last_consonant_exceptions`` keep their last consonant.

    ``average_stem_size_exceptions`` are preferred over all other stems
    regardless of their length.

    Each list defaults to the one that ships with turkstem. ``machines``
    is a dict with the suffix machines (see
    ``turkstem.resources.default_machines``).

    Instances are not modified by stemming and may be shared between
    threads.
    """

    def __init__(self, protected_words=None, vowel_harmony_exceptions=None,
                 last_consonant_exceptions=None,
                 average_stem_size_exceptions=None, machines=None):
        self.protected_words = _word_set(protected_words,
                                         resources.PROTECTED_WORDS)
        self.vowel_harmony_exceptions = _word_set(vowel_harmony_exceptions,
                resources.VOWEL_HARMONY_EXCEPTIONS)
        self.last_consonant_exceptions = _word_set(last_consonant_exceptions,
                resources.LAST_CONSONANT_EXCEPTIONS)
        self.average_stem_size_exceptions = _word_set(
                average_stem_size_exceptions,
                resources.AVERAGE_STEM_SIZE_EXCEPTIONS)
        if machines is None:
            machines = resources.default_machines()
        self.nominal_verb_machine = machines[resources.NOMINAL_VERB]
        self.noun_machine = machines[resources.NOUN]
        self.derivational_machine = machines[resources.DERIVATIONAL]
        self.stripper = SuffixStripper(self.protected_words,
                                       self.vowel_harmony_exceptions)

    def stem(self, word):
        """
        Return the stem of a lowercased word.

        The word is returned unchanged if it should not be stemmed (see
        ``proceed_to_stem``) or if no stem is found.
        """
        if not self.proceed_to_stem(word):
            return word

        stems = set()
        self.nominal_verb_suffix_stripper(word, stems)

        for w in stems | {word}:
            self.noun_suffix_stripper(w, stems)

        for w in stems | {word}:
            self.derivational_suffix_stripper(w, stems)

        return self.post_process(stems, word)

    def nominal_verb_suffix_stripper(self, word, stems):
        return self.stripper.strip(self.nominal_verb_machine, word, stems)

    def noun_suffix_stripper(self, word, stems):
        return self.stripper.strip(self.noun_machine, word, stems)

    def derivational_suffix_stripper(self, word, stems):
        return self.stripper.strip(self.derivational_machine, word, stems)

    def proceed_to_stem(self, word):
        """
        Check whether a word should be stemmed.

        Empty words, words with non-Turkish characters, protected words and
        words with less than two syllables are not stemmed.
        """
        if not word:
            return False
        if not is_turkish(word):
            return False
        if word in self.protected_words:
            return False
        if count_syllables(word) < 2:
            return False
        return True

    def last_consonant(self, word):
        """
        Replace a voiced final consonant by its unvoiced counterpart.
        """
        if word in self.last_consonant_exceptions:
            return word
        last = word[-1:]
        if last in LAST_CONSONANTS:
            return word[:-1] + LAST_CONSONANTS[last]
        return word

    def post_process(self, stems, original_word):
        """
        Choose the final stem among the candidate ``stems``.

        ``original_word`` is removed from ``stems``. If no candidate is
        left then ``original_word`` is returned.
        """
        stems.discard(original_word)
        final_stems = set(self.last_consonant(w) for w in stems
                          if count_syllables(w) > 0)
        if not final_stems:
            return original_word
        return sorted(final_stems, key=self._sort_key)[0]

    def _sort_key(self, stem):
        # Remaining ties are broken alphabetically.
        return (stem not in self.average_stem_size_exceptions,
                abs(len(stem) - AVERAGE_STEMMED_SIZE), len(stem), stem)


def _word_set(words, default_name):
    if words is None:
        return resources.default_word_set(default_name)
    return frozenset(words)
