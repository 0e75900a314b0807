"""
Each category of subtags is checked on its own here: the supported tag must
be rejected when the request is wider, or disagrees, and accepted when the
request agrees or is narrower.
"""
from acceptlang.language_tag import LanguageTag
from acceptlang.specificity import is_compatible, rejected_category


def compatible(supported, requested):
    return is_compatible(LanguageTag.get(supported), LanguageTag.get(requested))


def rejection(supported, requested):
    return rejected_category(LanguageTag.get(supported), LanguageTag.get(requested))


def test_bare_language_serves_anything():
    for requested in ['en', 'en-US', 'en-Latn-US', 'en-US-posix',
                      'en-u-ca-gregory', 'en-x-pirate']:
        assert compatible('en', requested), requested


def test_script():
    assert compatible('zh-Hant', 'zh-Hant')
    assert compatible('zh-Hant', 'zh-Hant-TW')
    assert rejection('zh-Hant', 'zh') == 'script'
    assert rejection('zh-Hant', 'zh-Hans') == 'script'
    assert rejection('zh-Hant', 'zh-TW') == 'script'


def test_region():
    assert compatible('en-GB', 'en-GB')
    assert compatible('en-GB', 'en-Latn-GB')
    assert rejection('en-GB', 'en') == 'region'
    assert rejection('en-GB', 'en-US') == 'region'
    assert rejection('es-419', 'es-MX') == 'region'


def test_variants():
    assert compatible('de-DE-1901', 'de-DE-1901')
    assert compatible('de-DE-1901', 'de-DE-1901-1996')
    assert rejection('de-DE-1901', 'de-DE') == 'variants'
    assert rejection('de-DE-1901', 'de-DE-1996') == 'variants'
    assert rejection('de-DE-1901-1996', 'de-DE-1901') == 'variants'
    assert rejection('sl-rozaj-biske', 'sl-biske-rozaj') == 'variants'


def test_extensions():
    assert compatible('en-u-ca-buddhist', 'en-u-ca-buddhist')
    assert compatible('en-u-ca-buddhist', 'en-u-ca-buddhist-nu-thai')
    assert compatible('en-u-ca-buddhist', 'en-u-ca-buddhist-t-it')
    assert rejection('en-u-ca-buddhist', 'en') == 'extensions'
    assert rejection('en-u-ca-buddhist', 'en-u-ca-gregory') == 'extensions'
    assert rejection('en-u-ca-buddhist', 'en-t-ca-buddhist') == 'extensions'
    assert rejection('en-u-ca-buddhist-nu-thai', 'en-u-ca-buddhist') == 'extensions'
    assert rejection('en-u-ca-buddhist-t-it', 'en-u-ca-buddhist') == 'extensions'


def test_private_use():
    assert compatible('en-x-pirate', 'en-x-pirate')
    assert compatible('en-x-pirate', 'en-x-pirate-arr')
    assert rejection('en-x-pirate', 'en') == 'private'
    assert rejection('en-x-pirate', 'en-x-ninja') == 'private'
    assert rejection('en-x-pirate-arr', 'en-x-pirate') == 'private'


def test_first_disagreement_wins():
    # Private use is checked before region, and region before script.
    assert rejection('sr-Latn-RS-x-legacy', 'sr-Cyrl-ME') == 'private'
    assert rejection('sr-Latn-RS', 'sr-Cyrl-ME') == 'region'
