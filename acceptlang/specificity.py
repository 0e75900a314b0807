"""
Decide whether a supported language tag can serve a requested one.

A supported tag matches when it's no more specific than the request in any
category of subtags, and agrees with the request wherever it does say
something. So 'en' serves a request for 'en-US', but 'zh-Hant' can't serve a
request for plain 'zh': the request is wider than what's supported.

Categories are compared in the order of SPECIFICITY_ORDER, and the first one
that disagrees decides the answer.
"""


def _is_prefix(supported, requested):
    """
    Every subtag of `supported` must appear at the same position in
    `requested`. The request may carry more subtags after those.
    """
    if len(supported) > len(requested):
        return False
    return all(sup == req for sup, req in zip(supported, requested))


def _extensions_match(supported, requested):
    if len(supported) > len(requested):
        return False
    for (singleton, subtags), (req_singleton, req_subtags) in zip(supported, requested):
        if singleton != req_singleton or not _is_prefix(subtags, req_subtags):
            return False
    return True


def _values_match(supported, requested):
    return supported == requested


SPECIFICITY_ORDER = [
    ('private', _is_prefix),
    ('extensions', _extensions_match),
    ('variants', _is_prefix),
    ('region', _values_match),
    ('script', _values_match),
]


def rejected_category(supported, requested):
    """
    Return the name of the first category in which `supported` fails to
    serve `requested`, or None if it can serve it.

    >>> from acceptlang.language_tag import LanguageTag
    >>> rejected_category(LanguageTag.get('zh-Hant'), LanguageTag.get('zh'))
    'script'
    >>> rejected_category(LanguageTag.get('en-GB'), LanguageTag.get('en-US'))
    'region'
    >>> print(rejected_category(LanguageTag.get('en'), LanguageTag.get('en-US')))
    None
    """
    for attribute, matches in SPECIFICITY_ORDER:
        supported_value = getattr(supported, attribute)
        if not supported_value:
            continue
        requested_value = getattr(requested, attribute)
        if not requested_value:
            return attribute
        if not matches(supported_value, requested_value):
            return attribute
    return None


def is_compatible(supported, requested) -> bool:
    """
    True if the supported LanguageTag can be offered to a client that asked
    for the requested LanguageTag. The primary languages are assumed to be
    equal already.

    >>> from acceptlang.language_tag import LanguageTag
    >>> is_compatible(LanguageTag.get('de-DE-1901'), LanguageTag.get('de-DE-1901-1996'))
    True
    >>> is_compatible(LanguageTag.get('de-DE-1901-1996'), LanguageTag.get('de-DE-1901'))
    False
    """
    return rejected_category(supported, requested) is None
