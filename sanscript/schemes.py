# -*- coding: utf-8 -*-
"""
sanscript.schemes
~~~~~~~~~~~~~~~~~

The built-in schemes. By default the following scripts are supported:

- Bengali_
- Devanagari_
- Gujarati_
- Gurmukhi_
- Kannada_
- Malayalam_
- Oriya_
- Tamil_
- Telugu_

and the following romanizations:

- Harvard-Kyoto_ (also registered as ``kh``)
- IAST_ (also known as Roman Unicode)
- ISO 15919
- ITRANS, and a variant with Dravidian short e and o
- Kolkata (IAST with long e and o marked)
- SLP1
- Velthuis
- WX

Each scheme is registered under the name stored in a constant of this
module::

    registry = build_registry()
    devanagari_scheme = registry.scheme(DEVANAGARI)

Groups of different schemes line up index by index. An empty string marks a
sound the scheme has no letter for.

.. _Bengali: http://en.wikipedia.org/wiki/Bengali_alphabet
.. _Devanagari: http://en.wikipedia.org/wiki/Devanagari
.. _Gujarati: http://en.wikipedia.org/wiki/Gujarati_alphabet
.. _Gurmukhi: http://en.wikipedia.org/wiki/Gurmukhi
.. _Kannada: http://en.wikipedia.org/wiki/Kannada_alphabet
.. _Malayalam: http://en.wikipedia.org/wiki/Malayalam_alphabet
.. _Oriya: http://en.wikipedia.org/wiki/Odia_alphabet
.. _Tamil: http://en.wikipedia.org/wiki/Tamil_script
.. _Telugu: http://en.wikipedia.org/wiki/Telugu_alphabet

.. _Harvard-Kyoto: http://en.wikipedia.org/wiki/Harvard-Kyoto
.. _IAST: http://en.wikipedia.org/wiki/IAST
"""

from sanscript.registry import BRAHMIC, ROMAN, SchemeRegistry

# Brahmic schemes
# ---------------
#: Internal name of Bengali. Bengali ``ba`` and ``va`` are both rendered
#: as `ব`.
BENGALI = 'bengali'

#: Internal name of Devanagari.
DEVANAGARI = 'devanagari'

#: Internal name of Gujarati.
GUJARATI = 'gujarati'

#: Internal name of Gurmukhi.
GURMUKHI = 'gurmukhi'

#: Internal name of Kannada.
KANNADA = 'kannada'

#: Internal name of Malayalam.
MALAYALAM = 'malayalam'

#: Internal name of Oriya.
ORIYA = 'oriya'

#: Internal name of Tamil.
TAMIL = 'tamil'

#: Internal name of Telugu.
TELUGU = 'telugu'

# Roman schemes
# -------------
#: Internal name of Harvard-Kyoto.
HK = 'hk'

#: Alternate internal name of Harvard-Kyoto.
KH = 'kh'

#: Internal name of IAST.
IAST = 'iast'

#: Internal name of ISO 15919.
ISO15919 = 'iso15919'

#: Internal name of ITRANS
ITRANS = 'itrans'

#: Internal name of ITRANS with Dravidian short 'e' and 'o'.
ITRANS_DRAVIDIAN = 'itrans_dravidian'

#: Internal name of KOLKATA
KOLKATA = 'kolkata'

#: Internal name of SLP1.
SLP1 = 'slp1'

#: Internal name of Velthuis.
VELTHUIS = 'velthuis'

#: Internal name of WX.
WX = 'wx'

s = str.split

_ROMAN_DIGITS = s('0 1 2 3 4 5 6 7 8 9')

BRAHMIC_SCHEMES = {
  BENGALI: {
    'vowels': s('অ আ ই ঈ উ ঊ ঋ ৠ ঌ ৡ') + ['', 'এ', 'ঐ', '', 'ও', 'ঔ'],
    'vowel_marks': s('া ি ী ু ূ ৃ ৄ ৢ ৣ') + ['', 'ে', 'ৈ', '', 'ো', 'ৌ'],
    'other_marks': s('ং ঃ ঁ'),
    'virama': s('্'),
    'consonants': s("""
                    ক খ গ ঘ ঙ
                    চ ছ জ ঝ ঞ
                    ট ঠ ড ঢ ণ
                    ত থ দ ধ ন
                    প ফ ব ভ ম
                    য র ল ব
                    শ ষ স হ
                    """) + ['', 'ক্ষ', 'জ্ঞ'],
    'symbols': s("""
                 ॐ ঽ । ॥
                 ০ ১ ২ ৩ ৪ ৫ ৬ ৭ ৮ ৯
                 """),
  },
  DEVANAGARI: {
    'vowels': s('अ आ इ ई उ ऊ ऋ ॠ ऌ ॡ ऎ ए ऐ ऒ ओ औ'),
    'vowel_marks': s('ा ि ी ु ू ृ ॄ ॢ ॣ ॆ े ै ॊ ो ौ'),
    'other_marks': s('ं ः ँ'),
    'virama': s('्'),
    'consonants': s("""
                    क ख ग घ ङ
                    च छ ज झ ञ
                    ट ठ ड ढ ण
                    त थ द ध न
                    प फ ब भ म
                    य र ल व
                    श ष स ह
                    ळ क्ष ज्ञ
                    """),
    # Nukta consonants, written decomposed.
    'other': [
      'क़', 'ख़', 'ग़', 'ज़',
      'ड़', 'ढ़', 'फ़', 'य़',
      'ऱ',
    ],
    'symbols': s("""
                 ॐ ऽ । ॥
                 ० १ २ ३ ४ ५ ६ ७ ८ ९
                 """),
  },
  GUJARATI: {
    'vowels': s('અ આ ઇ ઈ ઉ ઊ ઋ ૠ ઌ ૡ') + ['', 'એ', 'ઐ', '', 'ઓ', 'ઔ'],
    'vowel_marks': s('ા િ ી ુ ૂ ૃ ૄ ૢ ૣ') + ['', 'ે', 'ૈ', '', 'ો', 'ૌ'],
    'other_marks': s('ં ઃ ઁ'),
    'virama': s('્'),
    'consonants': s("""
                    ક ખ ગ ઘ ઙ
                    ચ છ જ ઝ ઞ
                    ટ ઠ ડ ઢ ણ
                    ત થ દ ધ ન
                    પ ફ બ ભ મ
                    ય ર લ વ
                    શ ષ સ હ
                    ળ ક્ષ જ્ઞ
                    """),
    'symbols': s("""
                 ૐ ઽ । ॥
                 ૦ ૧ ૨ ૩ ૪ ૫ ૬ ૭ ૮ ૯
                 """),
  },
  GURMUKHI: {
    'vowels': s('ਅ ਆ ਇ ਈ ਉ ਊ') + ['', '', '', '', '', 'ਏ', 'ਐ', '', 'ਓ', 'ਔ'],
    'vowel_marks': (s('ਾ ਿ ੀ ੁ ੂ') +
                    ['', '', '', '', '', 'ੇ', 'ੈ', '', 'ੋ', 'ੌ']),
    'other_marks': s('ਂ ਃ ਁ'),
    'virama': s('੍'),
    'consonants': s("""
                    ਕ ਖ ਗ ਘ ਙ
                    ਚ ਛ ਜ ਝ ਞ
                    ਟ ਠ ਡ ਢ ਣ
                    ਤ ਥ ਦ ਧ ਨ
                    ਪ ਫ ਬ ਭ ਮ
                    ਯ ਰ ਲ ਵ
                    """) + ['ਸ਼', 'ਸ਼', 'ਸ', 'ਹ', 'ਲ਼', 'ਕ੍ਸ਼',
                            'ਜ੍ਞ'],
    'symbols': s("""
                 ੴ ऽ । ॥
                 ੦ ੧ ੨ ੩ ੪ ੫ ੬ ੭ ੮ ੯
                 """),
  },
  KANNADA: {
    'vowels': s('ಅ ಆ ಇ ಈ ಉ ಊ ಋ ೠ ಌ ೡ ಎ ಏ ಐ ಒ ಓ ಔ'),
    'vowel_marks': s('ಾ ಿ ೀ ು ೂ ೃ ೄ ೢ ೣ ೆ ೇ ೈ ೊ ೋ ೌ'),
    'other_marks': s('ಂ ಃ ಁ'),
    'virama': s('್'),
    'consonants': s("""
                    ಕ ಖ ಗ ಘ ಙ
                    ಚ ಛ ಜ ಝ ಞ
                    ಟ ಠ ಡ ಢ ಣ
                    ತ ಥ ದ ಧ ನ
                    ಪ ಫ ಬ ಭ ಮ
                    ಯ ರ ಲ ವ
                    ಶ ಷ ಸ ಹ
                    ಳ ಕ್ಷ ಜ್ಞ
                    """),
    'symbols': s("""
                 ಓಂ ಽ । ॥
                 ೦ ೧ ೨ ೩ ೪ ೫ ೬ ೭ ೮ ೯
                 """),
  },
  MALAYALAM: {
    'vowels': s('അ ആ ഇ ഈ ഉ ഊ ഋ ൠ ഌ ൡ എ ഏ ഐ ഒ ഓ ഔ'),
    'vowel_marks': s('ാ ി ീ ു ൂ ൃ ൄ ൢ ൣ െ േ ൈ ൊ ോ ൌ'),
    'other_marks': s('ം ഃ ഁ'),
    'virama': s('്'),
    'consonants': s("""
                    ക ഖ ഗ ഘ ങ
                    ച ഛ ജ ഝ ഞ
                    ട ഠ ഡ ഢ ണ
                    ത ഥ ദ ധ ന
                    പ ഫ ബ ഭ മ
                    യ ര ല വ
                    ശ ഷ സ ഹ
                    ള ക്ഷ ജ്ഞ
                    """),
    'symbols': s("""
                 ഓം ഽ । ॥
                 ൦ ൧ ൨ ൩ ൪ ൫ ൬ ൭ ൮ ൯
                 """),
  },
  ORIYA: {
    'vowels': s('ଅ ଆ ଇ ଈ ଉ ଊ ଋ ୠ ଌ ୡ') + ['', 'ଏ', 'ଐ', '', 'ଓ', 'ଔ'],
    'vowel_marks': s('ା ି ୀ ୁ ୂ ୃ ୄ ୢ ୣ') + ['', 'େ', 'ୈ', '', 'ୋ', 'ୌ'],
    'other_marks': s('ଂ ଃ ଁ'),
    'virama': s('୍'),
    'consonants': s("""
                    କ ଖ ଗ ଘ ଙ
                    ଚ ଛ ଜ ଝ ଞ
                    ଟ ଠ ଡ ଢ ଣ
                    ତ ଥ ଦ ଧ ନ
                    ପ ଫ ବ ଭ ମ
                    ଯ ର ଲ ଵ
                    ଶ ଷ ସ ହ
                    ଳ କ୍ଷ ଜ୍ଞ
                    """),
    'symbols': s("""
                 ଓଂ ଽ । ॥
                 ୦ ୧ ୨ ୩ ୪ ୫ ୬ ୭ ୮ ୯
                 """),
  },
  TAMIL: {
    'vowels': s('அ ஆ இ ஈ உ ஊ') + ['', '', '', ''] + s('எ ஏ ஐ ஒ ஓ ஔ'),
    'vowel_marks': s('ா ி ீ ு ூ') + ['', '', '', ''] + s('ெ ே ை ொ ோ ௌ'),
    'other_marks': ['ஂ', 'ஃ', ''],
    'virama': s('்'),
    # Tamil has no aspirates or voiced stops; they share the plain letter.
    'consonants': s("""
                    க க க க ங
                    ச ச ஜ ச ஞ
                    ட ட ட ட ண
                    த த த த ந
                    ப ப ப ப ம
                    ய ர ல வ
                    ஶ ஷ ஸ ஹ
                    ள க்ஷ ஜ்ஞ
                    """),
    'symbols': s("""
                 ௐ ऽ । ॥
                 ௦ ௧ ௨ ௩ ௪ ௫ ௬ ௭ ௮ ௯
                 """),
  },
  TELUGU: {
    'vowels': s('అ ఆ ఇ ఈ ఉ ఊ ఋ ౠ ఌ ౡ ఎ ఏ ఐ ఒ ఓ ఔ'),
    'vowel_marks': s('ా ి ీ ు ూ ృ ౄ ౢ ౣ ె ే ై ొ ో ౌ'),
    'other_marks': s('ం ః ఁ'),
    'virama': s('్'),
    'consonants': s("""
                    క ఖ గ ఘ ఙ
                    చ ఛ జ ఝ ఞ
                    ట ఠ డ ఢ ణ
                    త థ ద ధ న
                    ప ఫ బ భ మ
                    య ర ల వ
                    శ ష స హ
                    ళ క్ష జ్ఞ
                    """),
    'symbols': s("""
                 ఓం ఽ । ॥
                 ౦ ౧ ౨ ౩ ౪ ౫ ౬ ౭ ౮ ౯
                 """),
  },
}

ROMAN_SCHEMES = {
  HK: {
    'vowels': s('a A i I u U R RR lR lRR') + ['', 'e', 'ai', '', 'o', 'au'],
    'other_marks': s('M H ~'),
    'virama': [''],
    'consonants': s("""
                    k kh g gh G
                    c ch j jh J
                    T Th D Dh N
                    t th d dh n
                    p ph b bh m
                    y r l v
                    z S s h
                    L kS jJ
                    """),
    'symbols': s("OM ' | ||") + _ROMAN_DIGITS,
  },
  IAST: {
    'vowels': s('a ā i ī u ū ṛ ṝ ḷ ḹ') + ['', 'e', 'ai', '', 'o', 'au'],
    'other_marks': s('ṃ ḥ m̐'),
    'virama': [''],
    'consonants': s("""
                    k kh g gh ṅ
                    c ch j jh ñ
                    ṭ ṭh ḍ ḍh ṇ
                    t th d dh n
                    p ph b bh m
                    y r l v
                    ś ṣ s h
                    ḻ kṣ jñ
                    """),
    'symbols': s("oṃ ' । ॥") + _ROMAN_DIGITS,
  },
  ISO15919: {
    'vowels': s('a ā i ī u ū r̥ r̥̄ l̥ l̥̄ e ē ai o ō au'),
    'other_marks': s('ṁ ḥ m̐'),
    'virama': [''],
    'consonants': s("""
                    k kh g gh ṅ
                    c ch j jh ñ
                    ṭ ṭh ḍ ḍh ṇ
                    t th d dh n
                    p ph b bh m
                    y r l v
                    ś ṣ s h
                    ḷ kṣ jñ
                    """),
    'symbols': s("ōṁ ' | ||") + _ROMAN_DIGITS,
  },
  ITRANS: {
    'vowels': s('a A i I u U RRi RRI LLi LLI') + ['', 'e', 'ai', '', 'o', 'au'],
    'other_marks': s('M H .N'),
    'virama': [''],
    'consonants': s("""
                    k kh g gh ~N
                    ch Ch j jh ~n
                    T Th D Dh N
                    t th d dh n
                    p ph b bh m
                    y r l v
                    sh Sh s h
                    L kSh j~n
                    """),
    'other': s('q K G z .D .Dh f Y R'),
    'symbols': s('OM .a | ||') + _ROMAN_DIGITS,
  },
  SLP1: {
    'vowels': s('a A i I u U f F x X') + ['', 'e', 'E', '', 'o', 'O'],
    'other_marks': s('M H ~'),
    'virama': [''],
    'consonants': s("""
                    k K g G N
                    c C j J Y
                    w W q Q R
                    t T d D n
                    p P b B m
                    y r l v
                    S z s h
                    L kz jY
                    """),
    'symbols': s("oM ' . ..") + _ROMAN_DIGITS,
  },
  VELTHUIS: {
    'vowels': s('a aa i ii u uu .r .rr .l .ll') + ['', 'e', 'ai', '', 'o', 'au'],
    'other_marks': s('.m .h /'),
    'virama': [''],
    'consonants': s("""
                    k kh g gh "n
                    c ch j jh ~n
                    .t .th .d .dh .n
                    t th d dh n
                    p ph b bh m
                    y r l v
                    "s .s s h
                    L k.s j~n
                    """),
    'symbols': s('O .a | ||') + _ROMAN_DIGITS,
  },
  WX: {
    'vowels': s('a A i I u U q Q L') + ['', '', 'e', 'E', '', 'o', 'O'],
    'other_marks': s('M H z'),
    'virama': [''],
    'consonants': s("""
                    k K g G f
                    c C j J F
                    t T d D N
                    w W x X n
                    p P b B m
                    y r l v
                    S R s h
                    """) + ['', 'kR', 'jF'],
    'symbols': s("oM ' . ..") + _ROMAN_DIGITS,
  },
}

#: Alternate spellings accepted on input, keyed by scheme.
ALTERNATES = {
  ITRANS: {
    'A': ['aa'],
    'I': ['ii', 'ee'],
    'U': ['uu', 'oo'],
    'RRi': ['R^i'],
    'RRI': ['R^I'],
    'LLi': ['L^i'],
    'LLI': ['L^I'],
    'M': ['.m', '.n'],
    '~N': ['N^'],
    'ch': ['c'],
    'Ch': ['C', 'chh'],
    '~n': ['JN'],
    'v': ['w'],
    'Sh': ['S', 'shh'],
    'kSh': ['kS', 'x'],
    'j~n': ['GY', 'dny'],
    'OM': ['AUM'],
  },
}


def _variants(registry):
  """Register the schemes derived from others."""
  hk = registry.scheme(HK)
  registry.register(KH, hk, ROMAN)

  kolkata = dict(registry.scheme(IAST))
  kolkata['vowels'] = s('a ā i ī u ū ṛ ṝ ḷ ḹ e ē ai o ō au')
  kolkata['vowel_marks'] = kolkata['vowels'][1:]
  registry.register(KOLKATA, kolkata, ROMAN)

  itrans_dravidian = dict(registry.scheme(ITRANS))
  itrans_dravidian['vowels'] = s('a A i I u U RRi RRI LLi LLI e E ai o O au')
  itrans_dravidian['vowel_marks'] = itrans_dravidian['vowels'][1:]
  registry.register(ITRANS_DRAVIDIAN, itrans_dravidian, ROMAN)
  registry.register_alternates(ITRANS_DRAVIDIAN, ALTERNATES[ITRANS])


def build_registry():
  """Return a new :class:`~sanscript.registry.SchemeRegistry` holding every
  built-in scheme.
  """
  registry = SchemeRegistry()
  for name, data in BRAHMIC_SCHEMES.items():
    registry.register(name, data, BRAHMIC)
  for name, data in ROMAN_SCHEMES.items():
    registry.register(name, data, ROMAN)
  for name, mapping in ALTERNATES.items():
    registry.register_alternates(name, mapping)
  _variants(registry)
  return registry
