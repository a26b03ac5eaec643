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

import argparse
import logging
import sys

from turkstem import TurkishStemmer
from turkstem.resources import load_word_set


def main(args=None):
    parser = argparse.ArgumentParser(description='Stem Turkish words. The '
            'input must contain one lowercased word per line.')
    parser.add_argument('infile', help='Input file (default STDIN)', nargs='?',
            type=argparse.FileType('r', encoding='utf8'), default=sys.stdin)
    parser.add_argument('outfile', help='Output file (default STDOUT)', nargs='?',
            type=argparse.FileType('w', encoding='utf8'), default=sys.stdout)
    parser.add_argument('-p', '--protected-words', metavar='FILE',
            help='File with words that are not stemmed',
            type=argparse.FileType('r', encoding='utf8'))
    parser.add_argument('-v', '--vowel-harmony-exceptions', metavar='FILE',
            help='File with words that are stemmed despite broken vowel harmony',
            type=argparse.FileType('r', encoding='utf8'))
    parser.add_argument('-l', '--last-consonant-exceptions', metavar='FILE',
            help='File with stems that keep their last consonant',
            type=argparse.FileType('r', encoding='utf8'))
    parser.add_argument('-a', '--average-stem-size-exceptions', metavar='FILE',
            help='File with stems that are preferred regardless of their size',
            type=argparse.FileType('r', encoding='utf8'))
    parser.add_argument('-d', '--debug', help='Log the suffix search',
            action="store_true")
    args = parser.parse_args(args)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    word_sets = {}
    for name in ('protected_words', 'vowel_harmony_exceptions',
                 'last_consonant_exceptions', 'average_stem_size_exceptions'):
        f = getattr(args, name)
        if f is not None:
            with f:
                word_sets[name] = load_word_set(f)
    stemmer = TurkishStemmer(**word_sets)

    for line in args.infile:
        word = line.strip()
        if word:
            args.outfile.write(stemmer.stem(word) + "\n")
    args.outfile.flush()

if __name__ == '__main__':
    main()
