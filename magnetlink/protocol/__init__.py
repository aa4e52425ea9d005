import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from yarl import URL


class HashScheme(enum.StrEnum):
    TIGER_TREE_HASH = "tree:tiger"
    SHA1 = "sha1"
    BITPRINT = "bitprint"
    ED2K = "ed2k"
    AICH = "aich"
    KAZAA_HASH = "kzhash"
    BTIH = "btih"
    MD5 = "md5"


class HashEncoding(enum.StrEnum):
    BASE32 = "base32"
    HEX = "hex"
    BITPRINT = "bitprint"
    NONE = "none"


HASH_ENCODING_DICT = {
    HashScheme.TIGER_TREE_HASH: HashEncoding.BASE32,
    HashScheme.SHA1: HashEncoding.BASE32,
    HashScheme.AICH: HashEncoding.BASE32,
    HashScheme.ED2K: HashEncoding.HEX,
    HashScheme.KAZAA_HASH: HashEncoding.HEX,
    HashScheme.BTIH: HashEncoding.HEX,
    HashScheme.BITPRINT: HashEncoding.BITPRINT,
    HashScheme.MD5: HashEncoding.NONE,
}


class KeyCategory(enum.StrEnum):
    ACCEPTABLE_SOURCE = "as"
    DISPLAY_NAME = "dn"
    KEYWORD_TOPIC = "kt"
    MANIFEST_TOPIC = "mt"
    TRACKER_ADDRESS = "tr"
    EXACT_LENGTH = "xl"
    EXACT_SOURCE = "xs"
    EXACT_TOPIC = "xt"
    SUPPLEMENT = "x."


@dataclass(frozen=True)
class Hash:
    scheme: HashScheme
    data: bytes

    def hex(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class Urn:
    hashes: tuple[Hash, ...] = ()


@dataclass(frozen=True)
class KeyDescriptor:
    category: KeyCategory
    index: int = 0
    supplement_tag: str | None = None


@dataclass(frozen=True)
class Supplement:
    tag: str
    value: str


# an mt value is either a Urn or a decoded URL string, never both
ManifestTopic = Urn | str


@dataclass(frozen=True)
class Magnet:
    acceptable_sources: tuple[URL, ...] = ()
    display_names: tuple[str, ...] = ()
    keyword_topics: tuple[str, ...] = ()
    manifest_topics: tuple[ManifestTopic, ...] = ()
    tracker_addresses: tuple[str, ...] = ()
    exact_sources: tuple[str, ...] = ()
    exact_topics: tuple[Urn, ...] = ()
    exact_length: int = 0
    supplements: Mapping[str, tuple[Supplement, ...]] = field(default_factory=lambda: MappingProxyType({}), hash=False)

    def hashes(self) -> list[Hash]:
        return [urn_hash for urn in self.exact_topics for urn_hash in urn.hashes]

    def to_dict(self) -> dict[str, Any]:
        def urn_to_list(urn: Urn) -> list[dict[str, str]]:
            return [{"scheme": urn_hash.scheme.value, "data": urn_hash.hex()} for urn_hash in urn.hashes]

        manifest_topics: list[Any] = []
        for topic in self.manifest_topics:
            match topic:
                case Urn():
                    manifest_topics.append({"urn": urn_to_list(topic)})
                case str():
                    manifest_topics.append({"url": topic})

        return {
            "acceptable_sources": [str(url) for url in self.acceptable_sources],
            "display_names": list(self.display_names),
            "keyword_topics": list(self.keyword_topics),
            "manifest_topics": manifest_topics,
            "tracker_addresses": list(self.tracker_addresses),
            "exact_sources": list(self.exact_sources),
            "exact_topics": [urn_to_list(urn) for urn in self.exact_topics],
            "exact_length": self.exact_length,
            "supplements": {
                prefix: [{"tag": supplement.tag, "value": supplement.value} for supplement in values]
                for prefix, values in self.supplements.items()
            },
        }
