"""Tests for the transliterate entry point."""

import pytest

import sanscript
from sanscript import DEVANAGARI, HK, IAST, ITRANS, SCHEMES
from sanscript.errors import SchemeNotSupportedError
from sanscript.transliterator import DEFAULTS, Transliterator


def test_alias():
  assert sanscript.t is sanscript.transliterate
  assert sanscript.t('rAma', HK, DEVANAGARI) == 'राम'


def test_defaults():
  assert DEFAULTS == {'skip_sgml': False, 'syncope': False}


@pytest.mark.parametrize('pair', [('unknown', HK), (HK, 'unknown')])
def test_unknown_scheme(pair):
  with pytest.raises(SchemeNotSupportedError) as excinfo:
    sanscript.transliterate('rAma', *pair)
  assert excinfo.value.name == 'unknown'
  assert 'unknown' in str(excinfo.value)


def test_unknown_option():
  with pytest.raises(TypeError):
    sanscript.transliterate('rAma', HK, DEVANAGARI, sgml=True)
  with pytest.raises(TypeError):
    sanscript.transliterate('rAma', HK, DEVANAGARI, options={'sgml': True})


def test_options_dict_and_keywords():
  assert sanscript.transliterate('rAm', HK, DEVANAGARI,
                                 options={'syncope': True}) == 'राम'
  assert sanscript.transliterate('rAm', HK, DEVANAGARI,
                                 options={'syncope': True},
                                 syncope=False) == 'राम्'


def test_skip_sgml_from_roman():
  data = '<b class="x">rAma</b>'
  assert sanscript.transliterate(data, HK, DEVANAGARI, skip_sgml=True) == \
      '<b class="x">राम</b>'
  assert '<b' not in sanscript.transliterate(data, HK, DEVANAGARI)


def test_skip_sgml_from_brahmic():
  data = '<p>राम</p>'
  assert sanscript.transliterate(data, DEVANAGARI, IAST, skip_sgml=True) == \
      '<p>rāma</p>'


def test_itrans_nasal_shorthand():
  assert sanscript.transliterate('ka{\\m+}', ITRANS, DEVANAGARI) == 'कँ'


def test_itrans_aspirate_shorthand_is_dropped():
  assert sanscript.transliterate('ka.h', ITRANS, DEVANAGARI) == 'क'


def test_itrans_backslash_escape():
  assert sanscript.transliterate('ka\\ra', ITRANS, DEVANAGARI) == 'कrअ'
  assert sanscript.transliterate('ka\\', ITRANS, DEVANAGARI) == 'क'


def test_itrans_preprocessing_is_itrans_only():
  assert sanscript.transliterate('ka\\ra', HK, DEVANAGARI) == 'क\\र'


def test_precomputed_scheme_map():
  scheme_map = sanscript.get_scheme_map(HK, DEVANAGARI)
  assert sanscript.get_scheme_map(HK, DEVANAGARI) is scheme_map
  assert sanscript.transliterate('rAma', scheme_map=scheme_map) == 'राम'


def test_separate_transliterators_have_separate_caches(registry):
  transliterator = Transliterator(registry)
  assert transliterator.transliterate('rAma', HK, DEVANAGARI) == 'राम'
  assert len(transliterator.cache) == 1


@pytest.mark.parametrize('name', SCHEMES.names())
def test_identity_pair(name):
  scheme = SCHEMES.scheme(name)
  data = ' '.join(scheme.tokens())
  assert sanscript.transliterate(data, name, name) == data


@pytest.mark.parametrize('_from, _to', [
  (HK, DEVANAGARI),
  (DEVANAGARI, HK),
  (IAST, 'telugu'),
  ('tamil', ITRANS),
])
def test_toggled_text_is_verbatim(_from, _to):
  data = 'x ##<b>rAma राम 12 ^ ~!## y'
  output = sanscript.transliterate(data, _from, _to)
  assert '<b>rAma राम 12 ^ ~!' in output
  assert '#' not in output
