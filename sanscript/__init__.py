# -*- coding: utf-8 -*-
"""
sanscript
~~~~~~~~~

Transliteration functions for Sanskrit. The most important function is
:func:`transliterate`, which is very easy to use::

    output = transliterate(data, IAST, DEVANAGARI)

The built-in schemes are held in :data:`SCHEMES`, a
:class:`~sanscript.registry.SchemeRegistry`::

    devanagari_scheme = SCHEMES.scheme(DEVANAGARI)

:license: MIT and BSD
"""

from sanscript.errors import (
  MalformedSchemeError,
  SanscriptError,
  SchemeNotSupportedError,
)
from sanscript.maps import MapCache, SchemeMap, build_map
from sanscript.registry import BRAHMIC, ROMAN, Scheme, SchemeRegistry
from sanscript.schemes import (
  BENGALI,
  DEVANAGARI,
  GUJARATI,
  GURMUKHI,
  HK,
  IAST,
  ISO15919,
  ITRANS,
  ITRANS_DRAVIDIAN,
  KANNADA,
  KH,
  KOLKATA,
  MALAYALAM,
  ORIYA,
  SLP1,
  TAMIL,
  TELUGU,
  VELTHUIS,
  WX,
  build_registry,
)
from sanscript.transliterator import DEFAULTS, Transliterator

#: The built-in schemes.
SCHEMES = build_registry()

_transliterator = Transliterator(SCHEMES)


def transliterate(data, _from=None, _to=None, options=None, scheme_map=None,
                  **kw):
  """Transliterate `data` from `_from` to `_to` with the built-in schemes.
  See :meth:`Transliterator.transliterate`.
  """
  return _transliterator.transliterate(data, _from, _to, options=options,
                                       scheme_map=scheme_map, **kw)


t = transliterate


def get_scheme_map(_from, _to):
  """Return the cached :class:`SchemeMap` from `_from` to `_to`."""
  return _transliterator.scheme_map(_from, _to)


def is_roman_scheme(name):
  """Check whether `name` is a built-in romanization."""
  return SCHEMES.is_roman(name)


def is_brahmic_scheme(name):
  """Check whether `name` is a built-in Brahmic script."""
  return SCHEMES.is_brahmic(name)
