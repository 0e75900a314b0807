"""
acceptlang picks the language to respond in. You tell it which language tags
your application supports, such as 'en-US' or 'zh-Hant', and give it the
client's priority list, usually the value of the `Accept-Language` HTTP
header. It tells you which of your supported tags serves the client best.

A supported tag is only chosen when it's no more specific than what the
client asked for: 'en' can serve a client asking for 'en-GB', but 'en-GB'
can't serve a client asking for plain 'en'. When nothing matches, you get
the first supported tag you configured.

>>> negotiator = AcceptLanguage(['en-US', 'fr', 'zh-Hant'])
>>> negotiator.get('fr-CA, en;q=0.5')
'fr'
>>> negotiator.get('zh')
'en-US'
>>> negotiator.resolve_all('zh-Hant-TW;q=0.8, fr-BE;q=0.9')
['fr', 'zh-Hant']
"""
import logging

from .tag_parser import LanguageTagError
from .language_tag import LanguageTag, parse_bcp47
from .priority_list import WeightedTag, parse_priority_list
from .specificity import is_compatible, rejected_category

__all__ = [
    'AcceptLanguage', 'ConfigurationError', 'InvalidTagError',
    'UnsupportedTagError', 'LanguageTagError', 'LanguageTag', 'WeightedTag',
    'create', 'get', 'is_compatible', 'languages', 'parse_bcp47',
    'parse_priority_list', 'rejected_category', 'resolve', 'resolve_all',
    'set_supported_languages',
]

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    pass


class InvalidTagError(LanguageTagError):
    pass


class UnsupportedTagError(ValueError):
    pass


class AcceptLanguage:
    """
    An AcceptLanguage object holds a registry of supported language tags,
    indexed by their primary language, and negotiates against it.

    Each instance has its own registry. Use `create()` to get another,
    independent one.
    """

    def __init__(self, supported=None):
        self._registry = {}
        self._supported = ()
        self._default_tag = None
        if supported is not None:
            self.set_supported_languages(supported)

    @property
    def default_tag(self):
        """
        The tag returned when nothing else matches: the first of the most
        recently configured supported languages.
        """
        return self._default_tag

    def set_supported_languages(self, tags):
        """
        Replace the supported languages with `tags`, a sequence of language
        tag strings. The first one becomes the default.

        Raises ConfigurationError if `tags` is empty, InvalidTagError if a tag
        isn't well-formed BCP 47, and UnsupportedTagError if a tag has no
        primary language, such as 'x-klingon'. If any tag is rejected, the
        previous configuration is kept.

        >>> negotiator = AcceptLanguage()
        >>> negotiator.set_supported_languages(['en', 'x-pirate'])
        Traceback (most recent call last):
            ...
        acceptlang.UnsupportedTagError: Language tag 'x-pirate' is not supported: it has no primary language subtag
        """
        if isinstance(tags, str):
            raise ConfigurationError(
                "Expected a sequence of language tags, got the string %r" % tags
            )
        tags = list(tags)
        if not tags:
            raise ConfigurationError(
                "No languages defined: at least one supported language is required"
            )

        registry = {}
        for value in tags:
            supported = self._parse_supported(value)
            registry.setdefault(supported.language, []).append(supported)

        self._registry = registry
        self._supported = tuple(tags)
        self._default_tag = tags[0]
        logger.debug("Registered %d supported languages, default %r",
                     len(tags), self._default_tag)

    # The original, shorter name for configuring supported languages
    languages = set_supported_languages

    @staticmethod
    def _parse_supported(value):
        try:
            supported = LanguageTag.get(value)
        except LanguageTagError as err:
            raise InvalidTagError(
                "Language tag %r is not BCP 47 compliant: %s. "
                "For more info, see https://tools.ietf.org/html/bcp47"
                % (value, err)
            ) from err
        if not supported.language:
            raise UnsupportedTagError(
                "Language tag %r is not supported: it has no primary "
                "language subtag" % value
            )
        return supported

    def supported_languages(self):
        """
        The supported language tags, as they were configured, in order.
        """
        return list(self._supported)

    def resolve(self, priority_list):
        """
        Return the supported tag that best serves `priority_list`, or the
        default if none of them do. Returns None only if no supported
        languages were ever configured.
        """
        return self.resolve_all(priority_list)[0]

    get = resolve

    def resolve_all(self, priority_list) -> list:
        """
        Return every supported tag that serves `priority_list`, best first.

        Tags are grouped by the quality the client gave the request they
        matched, and within a group they're in the order they were
        configured. If nothing matches, or there's no priority list at all,
        the result is a list containing only the default.

        Malformed entries in the priority list are skipped; this never raises
        an error for anything the client sent.

        >>> negotiator = AcceptLanguage(['en', 'en-GB', 'de'])
        >>> negotiator.resolve_all('en-GB, de;q=0.1')
        ['en', 'en-GB', 'de']
        >>> negotiator.resolve_all('en, !!')
        ['en']
        >>> negotiator.resolve_all(None)
        ['en']
        """
        if not priority_list:
            return [self._default_tag]

        result = []
        for weighted in parse_priority_list(priority_list):
            requested = parse_bcp47(weighted.tag)
            if requested is None:
                logger.debug("Skipping malformed language tag %r", weighted.tag)
                continue
            candidates = self._registry.get(requested.language)
            if not candidates:
                logger.debug("No supported languages for %r", weighted.tag)
                continue
            for supported in candidates:
                category = rejected_category(supported, requested)
                if category is None:
                    result.append(supported.value)
                else:
                    logger.debug("%r can't serve %r: it differs in %s",
                                 supported.value, weighted.tag, category)

        if not result:
            return [self._default_tag]
        return result

    def create(self):
        """
        Make a new, unconfigured AcceptLanguage that shares nothing with
        this one.
        """
        return type(self)()

    def __repr__(self):
        return "AcceptLanguage({!r})".format(self.supported_languages())


def create():
    """
    Make a new, unconfigured AcceptLanguage.
    """
    return AcceptLanguage()


# A process-wide negotiator, so the simplest uses don't need to manage an
# instance: `acceptlang.languages([...])` and then `acceptlang.get(header)`.
_negotiator = AcceptLanguage()
languages = set_supported_languages = _negotiator.set_supported_languages
get = resolve = _negotiator.resolve
resolve_all = _negotiator.resolve_all
