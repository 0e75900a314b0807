"""
Tests for the syntax-only BCP 47 parser, including the tags that it has to
reject.
"""
import pytest

from acceptlang.tag_parser import parse, LanguageTagError


def test_language_only():
    assert parse('en') == [('language', 'en')]
    assert parse('EN') == [('language', 'en')]


def test_case_conventions_restored():
    assert parse('SR-latn-rs') == [
        ('language', 'sr'), ('script', 'Latn'), ('region', 'RS')
    ]


def test_numeric_region():
    assert parse('es-419') == [('language', 'es'), ('region', '419')]


def test_multiple_variants():
    assert parse('sl-rozaj-biske') == [
        ('language', 'sl'), ('variant', 'rozaj'), ('variant', 'biske')
    ]


def test_extlang_followed_by_region():
    assert parse('zh-yue-HK') == [
        ('language', 'zh'), ('extlang', 'yue'), ('region', 'HK')
    ]


def test_extensions_stop_at_next_singleton():
    assert parse('en-a-bbb-t-ccc-x-a-ccc') == [
        ('language', 'en'),
        ('extension', 'a-bbb'),
        ('extension', 't-ccc'),
        ('private', 'x-a-ccc'),
    ]


def test_grandfathered():
    assert parse('i-Klingon') == [('grandfathered', 'i-klingon')]
    assert parse('zh-min-nan') == [('grandfathered', 'zh-min-nan')]


def test_private_use_only():
    assert parse('x-whatever') == [('private', 'x-whatever')]


def test_long_language_cannot_take_extlang():
    with pytest.raises(LanguageTagError):
        parse('english-yue')


@pytest.mark.parametrize('tag', [
    '',
    'en-',
    '-en',
    'not-a-valid-tag-!!',
    'e',
    '123',
    'toolongsubtag',
    'en-US-GB',
    'zh-TW-Hant',
    'en-12',
    'en-x',
    'en-a',
    'en-a-x-foo',
    'en-US-abc',
    'zh-aaa-bbb-ccc-ddd',
    '*',
    'en US',
])
def test_malformed_tags(tag):
    with pytest.raises(LanguageTagError):
        parse(tag)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse('u-co-backwards')


def test_non_ascii_letters_rejected_before_lowercasing():
    # U+212A KELVIN SIGN lowercases to an ASCII 'k'.
    for tag in ['en-\u212aa', '\u212ak', 'i-\u212alingon', 'en-x-\u212a']:
        with pytest.raises(LanguageTagError):
            parse(tag)


def test_extension_with_private_use():
    assert parse('en-u-co-phonebk-x-pig-latin') == [
        ('language', 'en'),
        ('extension', 'u-co-phonebk'),
        ('private', 'x-pig-latin'),
    ]
