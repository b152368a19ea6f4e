"""Pytest fixtures for sanscript tests."""

import pytest

from sanscript.registry import BRAHMIC, ROMAN, SchemeRegistry
from sanscript.schemes import build_registry
from sanscript.transliterator import Transliterator


@pytest.fixture
def registry():
  """A fresh registry holding the built-in schemes."""
  return build_registry()


@pytest.fixture
def toy_registry():
  """Two tiny schemes where ``k`` is a prefix of ``kh``."""
  registry = SchemeRegistry()
  registry.register('toy', {
    'vowels': ['a', 'i'],
    'virama': [''],
    'consonants': ['k', 'kh'],
  }, ROMAN)
  registry.register('toy_brahmic', {
    'vowels': ['अ', 'इ'],
    'vowel_marks': ['ि'],
    'virama': ['्'],
    'consonants': ['क', 'ख'],
  }, BRAHMIC)
  return registry


@pytest.fixture
def toy(toy_registry):
  return Transliterator(toy_registry)
