"""
Parsing of weighted language priority lists, the value of an HTTP
`Accept-Language` header, such as 'fr-CH, fr;q=0.9, en;q=0.8, *;q=0.5'.

See RFC 7231, section 5.3.5, and RFC 4647, section 2.3.
"""
import logging
import re
from collections import namedtuple

DEFAULT_QUALITY = 1.0

# Decimal numbers only. float() would also take '1_0', 'inf' and 'nan'.
QUALITY_RE = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\Z')

logger = logging.getLogger(__name__)

WeightedTag = namedtuple('WeightedTag', ['tag', 'quality'])


def parse_quality(params):
    """
    Find the quality value among the parameters that followed a language
    range. Parameters other than 'q' are ignored, and a quality that isn't a
    plain decimal number counts as the default.

    >>> parse_quality(['q=0.8'])
    0.8
    >>> parse_quality([' Q = 0.25 '])
    0.25
    >>> parse_quality(['level=1'])
    1.0
    >>> parse_quality(['q=high'])
    1.0
    >>> parse_quality(['q=1_0'])
    1.0
    """
    for param in params:
        key, sep, value = param.partition('=')
        if not sep or key.strip().lower() != 'q':
            continue
        value = value.strip()
        if not QUALITY_RE.match(value):
            logger.debug("Unreadable quality value %r, using %s",
                         value, DEFAULT_QUALITY)
            return DEFAULT_QUALITY
        return float(value)
    return DEFAULT_QUALITY


def parse_priority_list(priority_list: str) -> list:
    """
    Split a priority list into WeightedTags, ordered from the most preferred
    to the least. Entries with equal quality stay in the order the client
    gave them, because sorted() is stable.

    The tags themselves aren't checked here; empty entries are dropped.

    >>> parse_priority_list('fr-CH, fr;q=0.9, en;q=0.8, de;q=0.9')
    [WeightedTag(tag='fr-CH', quality=1.0), WeightedTag(tag='fr', quality=0.9), WeightedTag(tag='de', quality=0.9), WeightedTag(tag='en', quality=0.8)]

    >>> parse_priority_list(',, ;q=0.5,')
    []
    """
    weighted = []
    for component in priority_list.split(','):
        tag, *params = component.split(';')
        tag = tag.strip()
        if not tag:
            continue
        weighted.append(WeightedTag(tag, parse_quality(params)))
    return sorted(weighted, key=lambda item: -item.quality)
