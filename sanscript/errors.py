# -*- coding: utf-8 -*-
"""
sanscript.errors
~~~~~~~~~~~~~~~~

Exceptions raised by the scheme registry and by :func:`transliterate`.
"""


class SanscriptError(Exception):
  """Base class of every error raised by this package."""


class SchemeNotSupportedError(SanscriptError, KeyError):
  """Raised when a scheme name is not present in the registry.

  :param name: the unknown scheme name
  """

  def __init__(self, name):
    super(SchemeNotSupportedError, self).__init__(name)
    self.name = name

  def __str__(self):
    return 'Scheme not supported: %r' % (self.name,)


class MalformedSchemeError(SanscriptError, ValueError):
  """Raised at registration time when scheme data is unusable.

  :param name: the scheme being registered
  :param reason: what is wrong with it
  """

  def __init__(self, name, reason):
    super(MalformedSchemeError, self).__init__(name, reason)
    self.name = name
    self.reason = reason

  def __str__(self):
    return 'Malformed scheme %r: %s' % (self.name, self.reason)
