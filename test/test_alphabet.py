#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``turkstem.alphabet``.
"""

import os.path
import sys

_module_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.abspath(os.path.join(_module_dir, '..')))
from turkstem.alphabet import *


def test_character_classes():
	assert VOWELS | CONSONANTS == ALPHABET
	assert not VOWELS & CONSONANTS
	assert FRONT_VOWELS | BACK_VOWELS == VOWELS
	assert ROUNDED_VOWELS | UNROUNDED_VOWELS == VOWELS
	assert len(ALPHABET) == 29

def test_is_turkish():
	assert is_turkish('kitaplar')
	assert is_turkish('çğıöşü')
	assert is_turkish('')
	assert not is_turkish('quiz')
	assert not is_turkish('wx')
	assert not is_turkish('Kitap')
	assert not is_turkish('ev ler')

def test_vowels():
	assert vowels('kitaplar') == 'iaa'
	assert vowels('gözlük') == 'öü'
	assert vowels('kpt') == ''
	assert count_syllables('evlerde') == 3
	assert count_syllables('ev') == 1
	assert count_syllables('') == 0

def test_frontness():
	assert has_frontness('e', 'i')
	assert has_frontness('ö', 'ü')
	assert has_frontness('a', 'ı')
	assert not has_frontness('e', 'a')
	assert not has_frontness('u', 'ü')

def test_roundness():
	assert has_roundness('i', 'a')
	assert has_roundness('o', 'u')
	assert has_roundness('u', 'e')
	assert not has_roundness('o', 'i')
	assert not has_roundness('a', 'u')

def test_vowel_harmony():
	assert vowel_harmony('o', 'u')
	assert vowel_harmony('ö', 'e')
	assert vowel_harmony('a', 'ı')
	assert not vowel_harmony('o', 'e')
	assert not vowel_harmony('a', 'e')

def test_word_vowel_harmony():
	assert has_vowel_harmony('kitaplar')
	assert has_vowel_harmony('kitapları')
	assert has_vowel_harmony('evlerde')
	assert not has_vowel_harmony('saatler')
	assert not has_vowel_harmony('kaim')

def test_word_vowel_harmony_with_few_vowels():
	assert has_vowel_harmony('')
	assert has_vowel_harmony('ev')
	assert has_vowel_harmony('krş')

def test_valid_optional_letter():
	# Consonant after vowel
	assert valid_optional_letter('hastay', 'y')
	assert not valid_optional_letter('kitaps', 's')
	# Vowel after consonant
	assert valid_optional_letter('kalemi', 'i')
	assert not valid_optional_letter('kai', 'i')
	# No previous character
	assert not valid_optional_letter('y', 'y')
	assert not valid_optional_letter('', 'y')
