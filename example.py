import acceptlang

# Configure a handful of supported languages, then show which one each of
# these Accept-Language headers would get:
#
# - The header
# - The best supported language
# - Every supported language that would serve it, best first

acceptlang.languages(['en-US', 'en', 'fr', 'de-CH', 'zh-Hant', 'zh-Hans'])

headers = [
    None,
    'fr-CH, fr;q=0.9, en;q=0.8, de;q=0.7, *;q=0.5',
    'de',
    'de-CH-1996',
    'zh-Hant-TW, zh;q=0.8',
    'en-GB;q=0.6, en-US;q=0.6',
    'x-klingon, !!',
]

for header in headers:
    print('%-45r %-10s %s' % (header, acceptlang.get(header),
                              ', '.join(acceptlang.resolve_all(header))))
