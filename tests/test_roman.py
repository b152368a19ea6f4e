"""Tests for transliteration out of roman schemes."""

import pytest

import sanscript
from sanscript import DEVANAGARI, HK, IAST, ITRANS, ITRANS_DRAVIDIAN, KOLKATA
from sanscript.maps import build_map
from sanscript.transliterator import _roman


@pytest.mark.parametrize('data, expected', [
  ('rAma', 'राम'),
  ('rAm', 'राम्'),
  ('rama', 'रम'),
  ('idam adbhutam', 'इदम् अद्भुतम्'),
  ('kRSNa', 'कृष्ण'),
  ('saMskRtam', 'संस्कृतम्'),
  ('kai kau', 'कै कौ'),
  ('kSatriya', 'क्षत्रिय'),
  ('OM', 'ॐ'),
  ('123', '१२३'),
])
def test_hk_to_devanagari(data, expected):
  assert sanscript.transliterate(data, HK, DEVANAGARI) == expected


def test_iast_to_devanagari():
  assert sanscript.transliterate('saṃskṛtam', IAST, DEVANAGARI) == 'संस्कृतम्'
  assert sanscript.transliterate('kṛṣṇa', IAST, DEVANAGARI) == 'कृष्ण'


def test_itrans_alternates():
  assert sanscript.transliterate('raama', ITRANS, DEVANAGARI) == 'राम'
  assert sanscript.transliterate('rAma', ITRANS, DEVANAGARI) == 'राम'
  assert sanscript.transliterate('xa', ITRANS, DEVANAGARI) == 'क्ष'
  assert sanscript.transliterate('shiva', ITRANS, DEVANAGARI) == 'शिव'
  assert sanscript.transliterate('shiwa', ITRANS, DEVANAGARI) == 'शिव'


def test_itrans_short_vowels():
  assert sanscript.transliterate('ke', ITRANS, DEVANAGARI) == 'के'
  assert sanscript.transliterate('ke', ITRANS_DRAVIDIAN, DEVANAGARI) == 'कॆ'
  assert sanscript.transliterate('kE', ITRANS_DRAVIDIAN, DEVANAGARI) == 'के'
  assert sanscript.transliterate('ko', ITRANS_DRAVIDIAN, DEVANAGARI) == 'कॊ'


@pytest.mark.parametrize('data, expected', [
  ('rAmAyaNa', 'rāmāyaṇa'),
  ('kRSNa', 'kṛṣṇa'),
  ('saMskRtam', 'saṃskṛtam'),
  ('kha', 'kha'),
])
def test_roman_to_roman(data, expected):
  assert sanscript.transliterate(data, HK, IAST) == expected


def test_kolkata_long_vowels():
  assert sanscript.transliterate('deva', IAST, KOLKATA) == 'dēva'


@pytest.mark.parametrize('name', [
  'hk', 'kh', 'iast', 'iso15919', 'itrans', 'itrans_dravidian', 'kolkata',
  'slp1', 'velthuis', 'wx',
])
def test_final_consonant_gets_virama(name):
  assert sanscript.transliterate('k', name, DEVANAGARI) == 'क्'
  assert sanscript.transliterate('k', name, DEVANAGARI, syncope=True) == 'क'


def test_syncope_before_non_letters():
  assert sanscript.transliterate('rAm sItA', HK, DEVANAGARI) == 'राम् सीता'
  assert sanscript.transliterate('rAm sItA', HK, DEVANAGARI,
                                 syncope=True) == 'राम सीता'


def test_syncope_keeps_medial_viramas():
  assert sanscript.transliterate('adbhuta', HK, DEVANAGARI,
                                 syncope=True) == 'अद्भुत'


def test_longest_match_wins(toy):
  assert toy.transliterate('kha', 'toy', 'toy_brahmic') == 'ख'
  assert toy.transliterate('khi', 'toy', 'toy_brahmic') == 'खि'
  assert toy.transliterate('kkha', 'toy', 'toy_brahmic') == 'क्ख'
  assert toy.transliterate('kh', 'toy', 'toy') == 'kh'


def test_unmapped_characters_pass_through(toy):
  assert toy.transliterate('ka, ki!', 'toy', 'toy_brahmic') == 'क, कि!'
  assert toy.transliterate('k-a', 'toy', 'toy_brahmic') == 'क्-अ'


def test_toggle_disables_transliteration():
  data = 'rAma ##rAma## rAma'
  assert sanscript.transliterate(data, HK, DEVANAGARI) == 'राम rAma राम'
  assert sanscript.transliterate(data, HK, IAST) == 'rāma rAma rāma'


def test_unterminated_toggle_runs_to_the_end():
  assert sanscript.transliterate('a##kha', HK, DEVANAGARI) == 'अkha'


def test_scanner_with_precomputed_map(registry):
  scheme_map = build_map(registry, HK, DEVANAGARI)
  assert _roman('rAm', scheme_map) == 'राम्'
  assert _roman('rAm', scheme_map, syncope=True) == 'राम'
  assert _roman('', scheme_map) == ''
