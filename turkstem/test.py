#!/usr/bin/env python

"""
Module and script for testing turkstem.
"""

import unittest

import turkstem


class TestCase(unittest.TestCase):

	# Note: Violates PEP8 to comply with ``unittest.TestCase`` style.

	def assertStems(self, tests, stemmer=None):
		"""
		Test that words are stemmed as expected.

		``tests`` is a sequence of ``(word, expected stem)`` pairs.
		``stemmer`` is the ``TurkishStemmer`` to use, by default the shared
		stemmer with the bundled word lists.
		"""
		if stemmer is None:
			stemmer = turkstem.default_stemmer()
		for word, expected in tests:
			output = stemmer.stem(word)
			self.assertEqual(output, expected,
					"Wrong stem for '%s': Expected '%s', got '%s'." % (word,
					expected, output))


def read_pairs(filename):
	"""
	Read ``(word, expected stem)`` pairs from a file.

	Each line contains a word and its expected stem, separated by
	whitespace. Empty lines are ignored.
	"""
	pairs = []
	with open(filename, 'r', encoding='utf8') as f:
		for lineno, line in enumerate(f, 1):
			fields = line.split()
			if not fields:
				continue
			if len(fields) != 2:
				raise ValueError('Invalid test case in line %d of %s.' % (lineno,
						filename))
			pairs.append((fields[0], fields[1]))
	return pairs


def check_stems(tests, stemmer=None):
	"""
	Stem words and print the ones that have an unexpected stem.

	``tests`` is a list of tuples, where each tuple consists of the input
	word and the expected output. Returns the number of passed and failed
	tests.
	"""
	if stemmer is None:
		stemmer = turkstem.default_stemmer()
	passed = 0
	failed = 0
	for case, expected in tests:
		result = stemmer.stem(case)
		if result == expected:
			passed += 1
		else:
			failed += 1
			print("'%s': Expected '%s', got '%s'." % (case, expected, result))
	print("")
	print("%d passed, %d failed." % (passed, failed))
	return passed, failed


if __name__ == '__main__':

	import sys

	if len(sys.argv) == 2:
		tests = read_pairs(sys.argv[1])
	elif len(sys.argv) >= 3 and len(sys.argv) % 2 == 1:
		tests = list(zip(sys.argv[1::2], sys.argv[2::2]))
	else:
		sys.stderr.write('Syntax: %s FILENAME | INPUT1 OUTPUT1 [INPUT2 OUTPUT2 ...]\n' % sys.argv[0])
		sys.exit(1)

	passed, failed = check_stems(tests)
	sys.exit(1 if failed else 0)
