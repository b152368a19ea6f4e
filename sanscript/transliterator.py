# -*- coding: utf-8 -*-
"""
sanscript.transliterator
~~~~~~~~~~~~~~~~~~~~~~~~

The transliteration state machines and the :class:`Transliterator` that
picks between them. Most callers want :func:`sanscript.transliterate`,
which uses a shared :class:`Transliterator` over the built-in schemes::

    output = transliterate('idam adbhutam', HK, DEVANAGARI)

Two characters of markup are understood in every scheme. Text between a
pair of ``##`` is copied through unchanged, and with ``skip_sgml=True`` so
is anything inside ``<...>``.
"""

import re

from sanscript.maps import MapCache
from sanscript.schemes import ITRANS


#: Default transliteration options.
DEFAULTS = {
  'skip_sgml': False,
  'syncope': False,
}

#: Switches transliteration off and on again. The marker is not copied.
TOGGLE = '##'

SKIP_SGML_RE = re.compile(r'(<.*?>)')

#: ITRANS shorthand for a candrabindu written as an anusvara.
ITRANS_NASAL = '{\\m+}'
ITRANS_ASPIRATE = '.h'
ITRANS_ESCAPE_RE = re.compile(r"\\([^'`_]|$)")


def _roman(data, scheme_map, syncope=False):
  """Transliterate `data` with the given `scheme_map`. This function is used
  when the source scheme is a Roman scheme.

  :param data: the data to transliterate
  :param scheme_map: the :class:`~sanscript.maps.SchemeMap` to use
  :param syncope: if true, don't close a trailing consonant with a virama
  """
  letters = scheme_map.letters
  marks = scheme_map.marks
  consonants = scheme_map.consonants
  virama = scheme_map.virama
  inherent_vowel = scheme_map.inherent_vowel
  to_roman = scheme_map.to_roman
  longest = max(scheme_map.max_token_length, len(TOGGLE))

  buf = []
  append = buf.append
  i = 0
  len_data = len(data)
  had_consonant = False
  # If false, don't transliterate. The toggle token is discarded.
  enabled = True

  while i < len_data:
    # The longest token in the source scheme has length `longest`. Take
    # that many characters; if they aren't a token, lop off a character
    # and try again.
    token = data[i:i + longest]
    while token:
      if token == TOGGLE:
        enabled = not enabled
        i += len(TOGGLE)
        break

      letter = letters.get(token) if enabled else None
      if letter is not None:
        if to_roman:
          append(letter)
        else:
          # Handle the implicit vowel. Ignore 'a' and force vowels to
          # appear as marks if we've just seen a consonant.
          if had_consonant:
            mark = marks.get(token)
            if mark is not None:
              append(mark)
            elif token != inherent_vowel:
              append(virama)
              append(letter)
          else:
            append(letter)
          had_consonant = token in consonants
        i += len(token)
        break

      if len(token) == 1:
        # This must be some other character. Due to the implicit 'a', we
        # must explicitly end any lingering consonant first.
        if had_consonant:
          had_consonant = False
          if not syncope:
            append(virama)
        append(token)
        i += 1
        break

      token = token[:-1]

  if had_consonant and not syncope:
    append(virama)
  return ''.join(buf)


def _longest_match(data, i, longest, table):
  """Return the longest token at `data[i:]` found in `table`, or ``None``."""
  for length in range(min(longest, len(data) - i), 0, -1):
    token = data[i:i + length]
    if token in table:
      return token
  return None


def _brahmic(data, scheme_map):
  """Transliterate `data` with the given `scheme_map`. This function is used
  when the source scheme is a Brahmic scheme.

  :param data: the data to transliterate
  :param scheme_map: the :class:`~sanscript.maps.SchemeMap` to use
  """
  letters = scheme_map.letters
  marks = scheme_map.marks
  consonants = scheme_map.consonants
  to_roman = scheme_map.to_roman
  inherent_vowel = scheme_map.inherent_vowel
  longest = max(scheme_map.max_token_length, 1)
  toggle_char = TOGGLE[0]

  buf = []
  append = buf.append
  i = 0
  len_data = len(data)
  dangling_hash = False
  had_roman_consonant = False
  enabled = True

  while i < len_data:
    char = data[i]
    if char == toggle_char:
      if dangling_hash:
        enabled = not enabled
        dangling_hash = False
      else:
        dangling_hash = True
      if had_roman_consonant:
        append(inherent_vowel)
        had_roman_consonant = False
      i += 1
      continue

    if not enabled:
      append(char)
      i += 1
      continue

    # Only consonants span several code points (nukta letters, conjuncts).
    # Everything else is read one code point at a time.
    token = _longest_match(data, i, longest, consonants)
    if token is None:
      if char in marks:
        append(marks[char])
        had_roman_consonant = False
        i += 1
        continue
      if char in letters:
        token = char

    if dangling_hash:
      append(toggle_char)
      dangling_hash = False
    if had_roman_consonant:
      append(inherent_vowel)
      had_roman_consonant = False

    if token is None:
      append(char)
      i += 1
    else:
      append(letters[token])
      had_roman_consonant = to_roman and token in consonants
      i += len(token)

  if had_roman_consonant:
    append(inherent_vowel)
  return ''.join(buf)


class Transliterator(object):
  """Transliterates between the schemes of one registry, caching a
  :class:`~sanscript.maps.SchemeMap` per pair of schemes.

  :param registry: a populated :class:`~sanscript.registry.SchemeRegistry`.
                   It must not change once the transliterator is in use.
  """

  def __init__(self, registry):
    self.registry = registry
    self.cache = MapCache(registry)

  def scheme_map(self, _from, _to):
    return self.cache.get_or_build(_from, _to)

  def transliterate(self, data, _from=None, _to=None, options=None,
                    scheme_map=None, **kw):
    """Transliterate `data` with the given parameters::

        output = transliterator.transliterate('idam adbhutam', HK, DEVANAGARI)

    The map between two schemes is built on first use and cached. A
    precomputed map may be passed instead::

        scheme_map = transliterator.scheme_map(HK, DEVANAGARI)
        output = transliterator.transliterate('idam', scheme_map=scheme_map)

    :param data: the data to transliterate
    :param _from: the name of a source scheme
    :param _to: the name of a destination scheme
    :param options: a :class:`dict` of options, see :data:`DEFAULTS`.
                    Keyword arguments override it.
    :param scheme_map: the :class:`~sanscript.maps.SchemeMap` to use. If
                       specified, ignore `_to`.
    :raises SchemeNotSupportedError: if a scheme name is unknown
    :raises TypeError: on an unexpected option
    """
    opts = dict(DEFAULTS)
    opts.update(options or {})
    opts.update(kw)
    for key in opts:
      if key not in DEFAULTS:
        raise TypeError('Unexpected keyword argument %s' % key)

    if scheme_map is None:
      scheme_map = self.scheme_map(_from, _to)

    if opts['skip_sgml']:
      data = SKIP_SGML_RE.sub(TOGGLE + r'\1' + TOGGLE, data)

    # Easy way out for "{\m+}", "\", and ".h".
    if _from == ITRANS:
      data = data.replace(ITRANS_NASAL, '.h.N')
      data = data.replace(ITRANS_ASPIRATE, '')
      data = ITRANS_ESCAPE_RE.sub(TOGGLE + r'\1' + TOGGLE, data)

    if scheme_map.from_roman:
      return _roman(data, scheme_map, syncope=opts['syncope'])
    return _brahmic(data, scheme_map)
