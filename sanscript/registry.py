# -*- coding: utf-8 -*-
"""
sanscript.registry
~~~~~~~~~~~~~~~~~~

Storage for scheme definitions. A :class:`SchemeRegistry` is filled once,
usually by :func:`sanscript.schemes.build_registry`, and only read after
that::

    registry = SchemeRegistry()
    registry.register('hk', {'vowels': ['a', 'A'], ...}, ROMAN)
    registry.is_roman('hk')  # True

Schemes are of two kinds. Brahmic consonants carry an inherent vowel and
roman consonants do not; the transliterators differ mainly on that point.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from sanscript.errors import MalformedSchemeError, SchemeNotSupportedError

logger = logging.getLogger(__name__)

#: Kind of a romanization.
ROMAN = 'roman'

#: Kind of a Brahmic script.
BRAHMIC = 'brahmic'

KINDS = (ROMAN, BRAHMIC)

#: Every group a scheme may define, in the order maps are built.
GROUPS = (
  'vowels',
  'vowel_marks',
  'other_marks',
  'virama',
  'consonants',
  'other',
  'symbols',
)

#: Groups whose tokens follow a consonant instead of standing alone.
MARK_GROUPS = frozenset(['vowel_marks', 'virama'])

#: Groups whose tokens are consonants for the purpose of the inherent vowel.
CONSONANT_GROUPS = frozenset(['consonants', 'other'])

_EMPTY = MappingProxyType({})


class Scheme(Mapping):
  """Represents all of the data associated with a given scheme. In addition
  to storing whether or not a scheme is roman, :class:`Scheme` partitions
  a scheme's characters into important functional groups.

  :class:`Scheme` is a read-only :class:`~collections.abc.Mapping` from
  group name to a tuple of tokens.

  :param name: the scheme name
  :param groups: a :class:`dict` from group name to a sequence of tokens
  :param kind: :data:`ROMAN` or :data:`BRAHMIC`
  """

  __slots__ = ('name', 'kind', '_groups')

  def __init__(self, name, groups, kind):
    self.name = name
    self.kind = kind
    self._groups = MappingProxyType(
      dict((g, tuple(groups[g])) for g in GROUPS if g in groups))

  @property
  def is_roman(self):
    return self.kind == ROMAN

  @property
  def inherent_vowel(self):
    vowels = self._groups.get('vowels')
    return vowels[0] if vowels else ''

  def tokens(self):
    """Yield every non-empty token of every group."""
    for group in self._groups.values():
      for token in group:
        if token:
          yield token

  def __getitem__(self, group):
    return self._groups[group]

  def __iter__(self):
    return iter(self._groups)

  def __len__(self):
    return len(self._groups)

  def __repr__(self):
    return 'Scheme(%r, kind=%r)' % (self.name, self.kind)


def _validate(name, groups, kind):
  if kind not in KINDS:
    raise MalformedSchemeError(name, 'unknown kind %r' % (kind,))
  for group, tokens in groups.items():
    if group not in GROUPS:
      raise MalformedSchemeError(name, 'unknown group %r' % (group,))
    for token in tokens:
      if not isinstance(token, str):
        raise MalformedSchemeError(
          name, 'token %r in group %r is not a string' % (token, group))

  vowels = groups.get('vowels')
  if kind == ROMAN and not vowels:
    raise MalformedSchemeError(name, 'roman schemes need a "vowels" group')
  marks = groups.get('vowel_marks')
  if vowels is not None and marks is not None \
      and len(marks) != len(vowels) - 1:
    raise MalformedSchemeError(
      name, '%d vowel marks for %d vowels' % (len(marks), len(vowels)))
  virama = groups.get('virama')
  if virama is not None and len(virama) != 1:
    raise MalformedSchemeError(name, '"virama" must hold exactly one token')


class SchemeRegistry(object):
  """Holds every known :class:`Scheme` together with its alternate
  spellings. Lookups by unknown name are not errors for the classification
  queries; they are for :meth:`scheme`.
  """

  def __init__(self):
    self._schemes = {}
    self._alternates = {}

  def register(self, name, data, kind):
    """Add a scheme, replacing any scheme already registered as `name`.

    A roman scheme may omit ``vowel_marks``; it then defaults to every
    vowel but the first.

    :param name: the scheme name
    :param data: a mapping from group name to a sequence of tokens
    :param kind: :data:`ROMAN` or :data:`BRAHMIC`
    :return: the stored :class:`Scheme`
    """
    groups = dict((g, list(tokens)) for g, tokens in data.items())
    if kind == ROMAN and 'vowel_marks' not in groups and groups.get('vowels'):
      groups['vowel_marks'] = groups['vowels'][1:]
    _validate(name, groups, kind)

    if name in self._schemes:
      logger.debug('Replacing scheme %s', name)
    scheme = Scheme(name, groups, kind)
    self._schemes[name] = scheme
    logger.debug('Registered %s scheme %s (%s)', kind, name,
                 ', '.join(scheme))
    return scheme

  def register_alternates(self, name, mapping):
    """Set the alternate spellings of `name`.

    :param name: the scheme name
    :param mapping: a mapping from a canonical token to a sequence of
                    alternates with equal meaning, e.g. ``A -> ['aa']`` in
                    ITRANS
    """
    self._alternates[name] = MappingProxyType(
      dict((k, tuple(v)) for k, v in mapping.items()))

  def scheme(self, name):
    try:
      return self._schemes[name]
    except KeyError:
      raise SchemeNotSupportedError(name) from None

  def alternates(self, name):
    return self._alternates.get(name, _EMPTY)

  def is_roman(self, name):
    scheme = self._schemes.get(name)
    return scheme is not None and scheme.kind == ROMAN

  def is_brahmic(self, name):
    scheme = self._schemes.get(name)
    return scheme is not None and scheme.kind == BRAHMIC

  def names(self):
    return sorted(self._schemes)

  def roman_names(self):
    return [n for n in self.names() if self.is_roman(n)]

  def brahmic_names(self):
    return [n for n in self.names() if self.is_brahmic(n)]

  def __contains__(self, name):
    return name in self._schemes

  def __iter__(self):
    return iter(self.names())

  def __len__(self):
    return len(self._schemes)
