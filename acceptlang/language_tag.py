"""
The LanguageTag class holds the result of parsing a language tag, grouped
into the subtag categories that language negotiation compares.
"""
from .tag_parser import parse, LanguageTagError


class LanguageTag:
    """
    A parsed BCP 47 language tag. Attributes that the tag doesn't specify are
    None (for single values) or empty tuples (for sequences):

    - *value*: the string the tag was parsed from, exactly as it was given.
    - *language*: the primary language subtag, such as 'en'. Tags that are
      entirely private-use or grandfathered have no language.
    - *extlangs*: extended language subtags that follow the language code.
    - *script*: the 4-letter code for the writing system, such as 'Hant'.
    - *region*: the 2-letter or 3-digit region code, such as 'GB' or '419'.
    - *variants*: variant subtags, in order.
    - *extensions*: (singleton, subtags) pairs, such as ('u', ('co', 'phonebk')).
    - *private*: the private-use subtags that follow 'x', in order.
    - *grandfathered*: the whole tag, if it's one of the irregular or regular
      tags grandfathered in from RFC 3066.

    >>> LanguageTag.get('zh-Hant-TW')
    LanguageTag(value='zh-Hant-TW', language='zh', script='Hant', region='TW')

    >>> LanguageTag.get('en-u-co-phonebk-x-pirate')
    LanguageTag(value='en-u-co-phonebk-x-pirate', language='en', extensions=(('u', ('co', 'phonebk')),), private=('pirate',))
    """

    ATTRIBUTES = ['language', 'extlangs', 'script', 'region', 'variants',
                  'extensions', 'private', 'grandfathered']

    def __init__(self, value, language=None, extlangs=(), script=None,
                 region=None, variants=(), extensions=(), private=(),
                 grandfathered=None):
        self.value = value
        self.language = language
        self.extlangs = tuple(extlangs)
        self.script = script
        self.region = region
        self.variants = tuple(variants)
        self.extensions = tuple(
            (singleton, tuple(subtags)) for singleton, subtags in extensions
        )
        self.private = tuple(private)
        self.grandfathered = grandfathered

    @staticmethod
    def get(tag: str) -> 'LanguageTag':
        """
        Parse a language tag string into a LanguageTag. Raises
        LanguageTagError if the tag isn't well-formed BCP 47.

        Parsing restores the usual case conventions, but doesn't replace
        deprecated or redundant subtags:

        >>> LanguageTag.get('EN_us')
        LanguageTag(value='EN_us', language='en', region='US')

        >>> LanguageTag.get('sl-rozaj-biske').variants
        ('rozaj', 'biske')

        >>> print(LanguageTag.get('x-klingon').language)
        None
        """
        data = {}
        for typ, value in parse(tag):
            if typ in {'extlang', 'variant'}:
                data.setdefault(typ + 's', []).append(value)
            elif typ == 'extension':
                singleton, *subtags = value.split('-')
                data.setdefault('extensions', []).append((singleton, subtags))
            elif typ == 'private':
                data['private'] = value.split('-')[1:]
            else:
                data[typ] = value
        return LanguageTag(tag, **data)

    def to_tag(self) -> str:
        """
        Convert a LanguageTag back to a language tag string with standard
        case conventions. This is also the str() representation.

        >>> LanguageTag.get('ZH-yue-hk').to_tag()
        'zh-yue-HK'

        >>> str(LanguageTag.get('en-u-co-phonebk-x-pirate'))
        'en-u-co-phonebk-x-pirate'

        >>> str(LanguageTag.get('I-Klingon'))
        'i-klingon'
        """
        if self.grandfathered:
            return self.grandfathered
        subtags = []
        if self.language:
            subtags.append(self.language)
        subtags.extend(self.extlangs)
        if self.script:
            subtags.append(self.script)
        if self.region:
            subtags.append(self.region)
        subtags.extend(self.variants)
        for singleton, ext_subtags in self.extensions:
            subtags.append(singleton)
            subtags.extend(ext_subtags)
        if self.private:
            subtags.append('x')
            subtags.extend(self.private)
        return '-'.join(subtags)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, LanguageTag):
            return False
        return self.to_tag() == other.to_tag()

    def __hash__(self):
        return hash(self.to_tag())

    def __repr__(self):
        items = ['value={!r}'.format(self.value)]
        for attr in self.ATTRIBUTES:
            if getattr(self, attr):
                items.append('{0}={1!r}'.format(attr, getattr(self, attr)))
        return "LanguageTag({})".format(', '.join(items))

    def __str__(self):
        return self.to_tag()


def parse_bcp47(tag: str):
    """
    Parse a language tag, returning None instead of raising an error when
    the tag isn't well-formed.

    >>> parse_bcp47('fr-CA')
    LanguageTag(value='fr-CA', language='fr', region='CA')
    >>> print(parse_bcp47('*'))
    None
    """
    try:
        return LanguageTag.get(tag)
    except LanguageTagError:
        return None
