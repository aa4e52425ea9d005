import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import unquote_to_bytes

from yarl import URL

from . import KeyCategory, KeyDescriptor, Magnet, ManifestTopic, Supplement, Urn
from .errors import InvalidEncodingError, InvalidIntegerError, InvalidUrlError, MalformedKeyError, MalformedUriError
from .keys import parse_key
from .urn import parse_urn

logger = logging.getLogger(__name__)

MAGNET_SCHEME = "magnet"
SCHEME_SEPARATOR = ":?"
TOKEN_SEPARATOR = "&"
VALUE_SEPARATOR = "="

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

BAD_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
URL_FORBIDDEN_PATTERN = re.compile(r"[\x00-\x1f\x7f]")


def split_magnet(uri: str) -> list[str]:
    parts = uri.split(SCHEME_SEPARATOR)
    if len(parts) != 2:
        raise MalformedUriError(f"expected exactly one {SCHEME_SEPARATOR!r} in {uri!r}")

    scheme, query = parts
    if scheme.lower() != MAGNET_SCHEME:
        raise MalformedUriError(f"invalid scheme {scheme!r}, expected {MAGNET_SCHEME!r}")
    if not query:
        raise MalformedUriError("magnet link has no keys")

    return query.split(TOKEN_SEPARATOR)


def unquote_value(value: str) -> str:
    match = BAD_ESCAPE_PATTERN.search(value)
    if match is not None:
        raise InvalidEncodingError(f"invalid escape at position {match.start()} in {value!r}")
    raw = unquote_to_bytes(value.replace("+", " "))
    try:
        return raw.decode()
    except UnicodeDecodeError:
        # escapes outside utf-8 are kept byte for byte
        return raw.decode("latin-1")


def parse_url(value: str) -> URL:
    if URL_FORBIDDEN_PATTERN.search(value):
        raise InvalidUrlError(f"url {value!r} contains control characters")
    if BAD_ESCAPE_PATTERN.search(value):
        raise InvalidUrlError(f"url {value!r} contains an invalid escape")
    if value.startswith(":"):
        raise InvalidUrlError(f"url {value!r} is missing its scheme")
    try:
        url = URL(value)
        _ = url.port
    except (TypeError, ValueError) as err:
        raise InvalidUrlError(f"invalid url {value!r}: {err}") from err
    return url


def parse_int64(value: str) -> int:
    if not INTEGER_PATTERN.fullmatch(value):
        raise InvalidIntegerError(f"invalid integer {value!r}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidIntegerError(f"integer {value!r} out of 64-bit range")
    return number


@dataclass
class MagnetBuilder:
    acceptable_sources: list[URL] = field(default_factory=list)
    display_names: list[str] = field(default_factory=list)
    keyword_topics: list[str] = field(default_factory=list)
    manifest_topics: list[ManifestTopic] = field(default_factory=list)
    tracker_addresses: list[str] = field(default_factory=list)
    exact_sources: list[str] = field(default_factory=list)
    exact_topics: list[Urn] = field(default_factory=list)
    exact_length: int = 0
    supplements: dict[str, list[Supplement]] = field(default_factory=dict)

    def add(self, key: KeyDescriptor, value: str) -> None:
        match key.category:
            case KeyCategory.ACCEPTABLE_SOURCE:
                self.acceptable_sources.append(parse_url(value))
            case KeyCategory.DISPLAY_NAME:
                self.display_names.append(unquote_value(value))
            case KeyCategory.KEYWORD_TOPIC:
                self.keyword_topics.append(unquote_value(value))
            case KeyCategory.MANIFEST_TOPIC:
                if value.lower().startswith("urn"):
                    self.manifest_topics.append(parse_urn(value))
                else:
                    self.manifest_topics.append(unquote_value(value))
            case KeyCategory.TRACKER_ADDRESS:
                self.tracker_addresses.append(unquote_value(value))
            case KeyCategory.EXACT_LENGTH:
                self.exact_length = parse_int64(value)
            case KeyCategory.EXACT_SOURCE:
                self.exact_sources.append(value)
            case KeyCategory.EXACT_TOPIC:
                self.exact_topics.append(parse_urn(value))
            case KeyCategory.SUPPLEMENT:
                if key.supplement_tag is None:
                    raise MalformedKeyError(f"supplement key without a tag: {key!r}")
                supplement = Supplement(key.supplement_tag, value)
                self.supplements.setdefault(key.category.value, []).append(supplement)

    def build(self) -> Magnet:
        return Magnet(
            acceptable_sources=tuple(self.acceptable_sources),
            display_names=tuple(self.display_names),
            keyword_topics=tuple(self.keyword_topics),
            manifest_topics=tuple(self.manifest_topics),
            tracker_addresses=tuple(self.tracker_addresses),
            exact_sources=tuple(self.exact_sources),
            exact_topics=tuple(self.exact_topics),
            exact_length=self.exact_length,
            supplements=MappingProxyType({prefix: tuple(values) for prefix, values in self.supplements.items()}),
        )


def parse_magnet(uri: str) -> Magnet:
    """
    Parse a `magnet:?` link into a `Magnet`.

    Raises a `MagnetError` subclass on the first key or value that cannot be
    decoded; no partial result is returned.
    """
    builder = MagnetBuilder()
    for token in split_magnet(uri):
        key, separator, value = token.partition(VALUE_SEPARATOR)
        if not separator:
            raise MalformedUriError(f"token {token!r} is not a key=value pair")
        descriptor = parse_key(key)
        logger.debug("magnet key %r -> %s[%d]", key, descriptor.category.name, descriptor.index)
        builder.add(descriptor, value)
    return builder.build()
