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
Turkish alphabet and phonological rules.

All functions expect lowercased input. Characters outside of the Turkish
alphabet are never vowels or consonants.
"""

__all__ = ['ALPHABET', 'VOWELS', 'CONSONANTS', 'ROUNDED_VOWELS',
           'FOLLOWING_ROUNDED_VOWELS', 'UNROUNDED_VOWELS', 'FRONT_VOWELS',
           'BACK_VOWELS', 'is_turkish', 'vowels', 'count_syllables',
           'has_frontness', 'has_roundness', 'vowel_harmony',
           'has_vowel_harmony', 'valid_optional_letter']


ALPHABET = frozenset('abcçdefgğhıijklmnoöprsştuüvyz')
VOWELS = frozenset('üiıueöao')
CONSONANTS = frozenset('bcçdfgğhjklmnprsştvyz')

# Roundness harmony: a rounded vowel may be followed by one of
# ``FOLLOWING_ROUNDED_VOWELS``, an unrounded one by another unrounded one.
ROUNDED_VOWELS = frozenset('oöuü')
FOLLOWING_ROUNDED_VOWELS = frozenset('aeuü')
UNROUNDED_VOWELS = frozenset('iıea')

FRONT_VOWELS = frozenset('eiöü')
BACK_VOWELS = frozenset('ıuao')


def is_turkish(word):
    """
    Check whether all characters of a word belong to the Turkish alphabet.
    """
    return all(c in ALPHABET for c in word)


def vowels(word):
    """
    Return the vowels of a word in their original order.
    """
    return ''.join(c for c in word if c in VOWELS)


def count_syllables(word):
    return len(vowels(word))


def has_frontness(vowel, candidate):
    return ((vowel in FRONT_VOWELS and candidate in FRONT_VOWELS) or
            (vowel in BACK_VOWELS and candidate in BACK_VOWELS))


def has_roundness(vowel, candidate):
    return ((vowel in UNROUNDED_VOWELS and candidate in UNROUNDED_VOWELS) or
            (vowel in ROUNDED_VOWELS and candidate in FOLLOWING_ROUNDED_VOWELS))


def vowel_harmony(vowel, candidate):
    """
    Check frontness and roundness harmony of two consecutive vowels.
    """
    return has_roundness(vowel, candidate) and has_frontness(vowel, candidate)


def has_vowel_harmony(word):
    """
    Check the vowel harmony of the last two vowels of a word.

    Words with less than two vowels always pass.
    """
    word_vowels = vowels(word)
    if len(word_vowels) < 2:
        return True
    return vowel_harmony(word_vowels[-2], word_vowels[-1])


def valid_optional_letter(word, candidate):
    """
    Check whether the last letter of a word may be dropped as an optional
    letter.

    ``candidate`` is the last character of ``word``. A vowel must follow a
    consonant and a consonant must follow a vowel. If ``word`` has no
    character before ``candidate`` then the letter is invalid.
    """
    if len(word) < 2:
        return False
    previous = word[-2]
    if candidate in VOWELS:
        return previous in CONSONANTS
    return previous in VOWELS
