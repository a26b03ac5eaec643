#!/usr/bin/env python
# vim:fileencoding=utf8

"""
Tests for ``turkstem.stemmer``.
"""

from concurrent.futures import ThreadPoolExecutor
import os.path
import sys

_module_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.abspath(os.path.join(_module_dir, '..')))
import turkstem
from turkstem import TurkishStemmer
from turkstem.resources import (AVERAGE_STEM_SIZE_EXCEPTIONS, PROTECTED_WORDS,
                                default_word_set)


def empty_stemmer(**kwargs):
	"""
	Create a stemmer with empty word lists unless given otherwise.
	"""
	word_sets = {
		'protected_words': (),
		'vowel_harmony_exceptions': (),
		'last_consonant_exceptions': (),
		'average_stem_size_exceptions': (),
	}
	word_sets.update(kwargs)
	return TurkishStemmer(**word_sets)


class RecordingStemmer(TurkishStemmer):
	"""
	Stemmer that remembers the candidate stems of the last word.
	"""

	def post_process(self, stems, original_word):
		self.candidates = set(stems)
		return super(RecordingStemmer, self).post_process(stems, original_word)


#######################################################################
# WORDS THAT ARE NOT STEMMED                                          #
#######################################################################

def test_words_that_are_not_stemmed():
	stemmer = empty_stemmer()
	for word in ['', 'a', 've', 'ev', 'quizler', 'wxyzler', 'Kitaplar',
			'kitap lar', 'kitaplar1']:
		assert stemmer.stem(word) == word, word

def test_none():
	assert empty_stemmer().stem(None) is None

def test_proceed_to_stem():
	stemmer = empty_stemmer(protected_words=['kitaplar'])
	assert stemmer.proceed_to_stem('evlerde')
	assert not stemmer.proceed_to_stem('kitaplar')
	assert not stemmer.proceed_to_stem('')
	assert not stemmer.proceed_to_stem(None)
	assert not stemmer.proceed_to_stem('göz')
	assert not stemmer.proceed_to_stem('xler')

def test_protected_words():
	stemmer = TurkishStemmer()
	for word in default_word_set(PROTECTED_WORDS):
		assert stemmer.stem(word) == word, word

def test_custom_protected_words():
	assert empty_stemmer().stem('kitaplar') == 'kitap'
	stemmer = empty_stemmer(protected_words=['kitaplar'])
	assert stemmer.stem('kitaplar') == 'kitaplar'


#######################################################################
# STEMMING                                                            #
#######################################################################

def test_plural():
	assert TurkishStemmer().stem('kitaplar') == 'kitap'

def test_plural_and_locative():
	assert TurkishStemmer().stem('evlerde') == 'ev'
	# Without the average stem size exceptions the stem closest to the
	# average stem size wins.
	assert empty_stemmer().stem('evlerde') == 'evler'

def test_last_consonant_softening():
	assert TurkishStemmer().stem('kitabı') == 'kitap'
	stemmer = empty_stemmer(last_consonant_exceptions=['kitab'])
	assert stemmer.stem('kitabı') == 'kitab'

def test_vowel_harmony_exceptions():
	assert TurkishStemmer().stem('saatler') == 'saat'
	assert empty_stemmer().stem('saatler') == 'saatler'

def test_derivational_suffix():
	assert empty_stemmer().stem('renkli') == 'renk'

def test_intermediate_state_path():
	# -k only leads to an intermediate state, the stem comes from the
	# -(y)DU continuation.
	assert TurkishStemmer().stem('geldik') == 'gel'
	assert empty_stemmer().stem('geldik') == 'gel'

def test_candidates_of_all_stages_are_kept():
	stemmer = RecordingStemmer((), (), (), ())
	stemmer.stem('evlerde')
	assert stemmer.candidates == {'evler', 'ev'}
	# Nominal verb stage followed by the noun stage
	stemmer.stem('hastaymış')
	assert stemmer.candidates == {'hasta', 'has'}
	# Noun stage and derivational stage
	stemmer.stem('renkli')
	assert stemmer.candidates == {'renkl', 'renk'}

def test_module_level_stem():
	assert turkstem.stem('kitaplar') == 'kitap'
	assert turkstem.stem('a') == 'a'

def test_default_stemmer_is_shared():
	assert 'default_stemmer' in turkstem.__all__
	assert turkstem.default_stemmer() is turkstem.default_stemmer()
	assert turkstem.default_stemmer() is turkstem.default_stemmer()

def test_concurrent_use():
	stemmer = TurkishStemmer()
	words = ['kitaplar', 'evlerde', 'kitabı', 'saatler', 'renkli',
			'gelseniz'] * 20
	expected = [stemmer.stem(w) for w in words]
	with ThreadPoolExecutor(max_workers=4) as executor:
		assert list(executor.map(stemmer.stem, words)) == expected


#######################################################################
# STEM SELECTION                                                      #
#######################################################################

def test_last_consonant():
	stemmer = empty_stemmer()
	for word, expected in [('kitab', 'kitap'), ('ağac', 'ağaç'),
			('yurd', 'yurt'), ('ayağ', 'ayak'), ('dağ', 'dak'), ('ev', 'ev'),
			('kitap', 'kitap')]:
		assert stemmer.last_consonant(word) == expected, word

def test_last_consonant_exceptions():
	stemmer = TurkishStemmer()
	assert stemmer.last_consonant('dağ') == 'dağ'
	assert stemmer.last_consonant('ad') == 'ad'
	assert stemmer.last_consonant('kitab') == 'kitap'

def test_post_process_removes_original_word():
	stems = {'kitaplar', 'kitap'}
	assert empty_stemmer().post_process(stems, 'kitaplar') == 'kitap'
	assert 'kitaplar' not in stems

def test_post_process_without_candidates():
	stemmer = empty_stemmer()
	assert stemmer.post_process(set(), 'kitaplar') == 'kitaplar'
	assert stemmer.post_process({'kitaplar'}, 'kitaplar') == 'kitaplar'
	# Candidates without vowels are ignored
	assert stemmer.post_process({'ktp'}, 'kitaplar') == 'kitaplar'

def test_post_process_softens_once():
	stemmer = empty_stemmer()
	assert stemmer.post_process({'kitab'}, 'x') == 'kitap'
	assert stemmer.post_process({'kitab', 'kitap'}, 'x') == 'kitap'
	assert stemmer.post_process({'abd'}, 'x') == 'abt'

def test_post_process_average_size():
	stemmer = empty_stemmer()
	assert stemmer.post_process({'ka', 'kale', 'kalemlik'}, 'x') == 'kale'
	assert stemmer.post_process({'kalemlik', 'ka'}, 'x') == 'ka'

def test_post_process_prefers_shorter_stems():
	stemmer = empty_stemmer()
	assert stemmer.post_process({'kalem', 'kal'}, 'x') == 'kal'
	assert stemmer.post_process({'kalemi', 'ka'}, 'x') == 'ka'

def test_post_process_prefers_exceptions():
	stemmer = empty_stemmer(average_stem_size_exceptions=['uzunkelime'])
	assert stemmer.post_process({'kitap', 'uzunkelime'}, 'x') == 'uzunkelime'
	stemmer = empty_stemmer(average_stem_size_exceptions=['ev'])
	assert stemmer.post_process({'evler', 'ev', 'evi'}, 'x') == 'ev'

def test_post_process_is_deterministic():
	stemmer = empty_stemmer()
	assert stemmer.post_process({'kale', 'kala'}, 'x') == 'kala'


#######################################################################
# CONSTRUCTION                                                        #
#######################################################################

def test_default_word_sets():
	stemmer = TurkishStemmer()
	assert stemmer.protected_words == default_word_set(PROTECTED_WORDS)
	assert 'ev' in stemmer.average_stem_size_exceptions
	assert stemmer.average_stem_size_exceptions == default_word_set(
			AVERAGE_STEM_SIZE_EXCEPTIONS)

def test_word_sets_are_copied():
	words = ['kitaplar']
	stemmer = empty_stemmer(protected_words=words)
	words.append('evlerde')
	assert stemmer.protected_words == frozenset(['kitaplar'])
