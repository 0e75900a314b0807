from acceptlang.language_tag import LanguageTag, parse_bcp47


def test_original_value_kept():
    tag = LanguageTag.get('en_us')
    assert tag.value == 'en_us'
    assert tag.language == 'en'
    assert tag.region == 'US'
    assert str(tag) == 'en-US'


def test_unspecified_attributes():
    tag = LanguageTag.get('fr')
    assert tag.script is None
    assert tag.region is None
    assert tag.variants == ()
    assert tag.extensions == ()
    assert tag.private == ()
    assert tag.grandfathered is None


def test_extensions_are_split_into_records():
    tag = LanguageTag.get('de-DE-u-co-phonebk-t-it')
    assert tag.extensions == (('u', ('co', 'phonebk')), ('t', ('it',)))


def test_private_use():
    tag = LanguageTag.get('en-x-pig-latin')
    assert tag.language == 'en'
    assert tag.private == ('pig', 'latin')

    only_private = LanguageTag.get('x-pig-latin')
    assert only_private.language is None
    assert only_private.private == ('pig', 'latin')


def test_grandfathered_has_no_language():
    tag = LanguageTag.get('en-GB-oed')
    assert tag.language is None
    assert tag.grandfathered == 'en-gb-oed'


def test_equality_ignores_spelling():
    assert LanguageTag.get('zh-hant-tw') == LanguageTag.get('ZH_Hant_TW')
    assert LanguageTag.get('zh-Hant') != LanguageTag.get('zh-Hans')
    assert len({LanguageTag.get('en-us'), LanguageTag.get('en-US')}) == 1


def test_parse_bcp47_returns_none_for_bad_tags():
    assert parse_bcp47('en-US').region == 'US'
    assert parse_bcp47('not-a-valid-tag-!!') is None
    assert parse_bcp47('') is None
