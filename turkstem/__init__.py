#!/usr/bin/env python
# vim:fileencoding=utf8

"""
A state machine based stemmer for Turkish.
"""

__version__ = '0.1.0'


import threading

from turkstem.stemmer import TurkishStemmer


__all__ = ['TurkishStemmer', 'default_stemmer', 'stem']


_lock = threading.Lock()
_default_stemmer = None


def default_stemmer():
	"""
	Return a shared ``TurkishStemmer`` that uses the bundled word lists.
	"""
	global _default_stemmer
	with _lock:
		if _default_stemmer is None:
			_default_stemmer = TurkishStemmer()
		return _default_stemmer


def stem(word):
	"""
	Stem a lowercased Turkish word.

	See ``TurkishStemmer.stem``.
	"""
	return default_stemmer().stem(word)
