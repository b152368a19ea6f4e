# -*- coding: utf-8 -*-
"""
sanscript.maps
~~~~~~~~~~~~~~

Conversion maps between two schemes, and the cache that keeps them.
"""

import logging
import threading
from collections import namedtuple
from types import MappingProxyType

from sanscript.registry import CONSONANT_GROUPS, GROUPS, MARK_GROUPS

logger = logging.getLogger(__name__)


#: Maps one :class:`~sanscript.registry.Scheme` to another. This record
#: holds the metadata and character data required by the transliterators.
SchemeMap = namedtuple('SchemeMap', [
  'letters',
  'marks',
  'consonants',
  'max_token_length',
  'from_roman',
  'to_roman',
  'virama',
  'inherent_vowel',
])


def build_map(registry, from_name, to_name):
  """Create a map from every token in `from_name` to its partner in
  `to_name`. Also store any marks that `from_name` might have.

  :param registry: the :class:`~sanscript.registry.SchemeRegistry` to read
  :param from_name: the name of the source scheme
  :param to_name: the name of the destination scheme
  :raises SchemeNotSupportedError: if either name is unknown
  """
  from_scheme = registry.scheme(from_name)
  to_scheme = registry.scheme(to_name)
  alternates = registry.alternates(from_name)

  letters = {}
  marks = {}
  consonants = {}
  longest = 0
  for token in from_scheme.tokens():
    longest = max([longest, len(token)] +
                  [len(alt) for alt in alternates.get(token, ())])

  for group in GROUPS:
    if group not in from_scheme or group not in to_scheme:
      continue
    # A token repeated within a group keeps its first partner.
    sub_map = {}
    for (k, v) in zip(from_scheme[group], to_scheme[group]):
      if not k:
        continue
      sub_map.setdefault(k, v)
      for k_alt in alternates.get(k, ()):
        sub_map.setdefault(k_alt, v)

    if group in MARK_GROUPS:
      marks.update(sub_map)
    else:
      letters.update(sub_map)
      if group in CONSONANT_GROUPS:
        consonants.update(sub_map)

  virama = to_scheme.get('virama', ('',))[0]
  if from_scheme.is_roman:
    inherent_vowel = from_scheme.inherent_vowel
  elif to_scheme.is_roman:
    inherent_vowel = to_scheme.inherent_vowel
  else:
    inherent_vowel = ''

  logger.debug('Built map %s -> %s: %d letters, %d marks, longest token %d',
               from_name, to_name, len(letters), len(marks), longest)
  return SchemeMap(
    letters=MappingProxyType(letters),
    marks=MappingProxyType(marks),
    consonants=MappingProxyType(consonants),
    max_token_length=longest,
    from_roman=from_scheme.is_roman,
    to_roman=to_scheme.is_roman,
    virama=virama,
    inherent_vowel=inherent_vowel,
  )


class MapCache(object):
  """Memoizes :func:`build_map` per (source, destination) pair for the
  lifetime of the cache. Maps are never evicted.

  :param registry: the registry maps are built from
  """

  def __init__(self, registry):
    self.registry = registry
    self._maps = {}
    self._lock = threading.Lock()

  def get_or_build(self, from_name, to_name):
    key = (from_name, to_name)
    scheme_map = self._maps.get(key)
    if scheme_map is not None:
      return scheme_map

    with self._lock:
      scheme_map = self._maps.get(key)
      if scheme_map is None:
        logger.debug('Map cache miss for %s -> %s', from_name, to_name)
        scheme_map = build_map(self.registry, from_name, to_name)
        self._maps[key] = scheme_map
    return scheme_map

  def clear(self):
    with self._lock:
      self._maps.clear()

  def __contains__(self, key):
    return key in self._maps

  def __len__(self):
    return len(self._maps)
