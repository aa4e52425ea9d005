import binascii
from base64 import b32decode

from . import HASH_ENCODING_DICT, Hash, HashEncoding, HashScheme
from .errors import InvalidHashEncodingError, MalformedMagnetError, UnknownHashSchemeError, UnsupportedHashSchemeError

# longest tag first so a tag is never shadowed by a shorter one
SCHEME_TAGS = sorted(HashScheme, key=lambda scheme: len(scheme.value), reverse=True)


def match_hash_scheme(urn_body: str) -> tuple[HashScheme, str]:
    """Split `<tag>:<payload>` into the scheme and its still-encoded payload."""
    lowered = urn_body.lower()
    for scheme in SCHEME_TAGS:
        if lowered.startswith(scheme.value + ":"):
            return scheme, urn_body[len(scheme.value) + 1 :]
    raise UnknownHashSchemeError(f"unknown hash scheme in urn: {urn_body!r}")


def decode_base32(payload: str) -> bytes:
    try:
        return b32decode(payload, casefold=True)
    except ValueError as err:
        raise InvalidHashEncodingError(f"invalid base32 hash {payload!r}: {err}") from err


def decode_hex(payload: str) -> bytes:
    # bytes.fromhex would silently skip whitespace
    try:
        return binascii.unhexlify(payload)
    except ValueError as err:
        raise InvalidHashEncodingError(f"invalid hex hash {payload!r}: {err}") from err


def decode_bitprint(payload: str) -> tuple[Hash, Hash]:
    parts = payload.split(".")
    if len(parts) != 2:
        raise MalformedMagnetError(f"bitprint hash must be <sha1>.<tiger tree hash>: {payload!r}")
    sha1_part, tth_part = parts
    return (
        Hash(HashScheme.SHA1, decode_base32(sha1_part)),
        Hash(HashScheme.TIGER_TREE_HASH, decode_base32(tth_part)),
    )


def decode_hash(urn_body: str) -> tuple[Hash, ...]:
    scheme, payload = match_hash_scheme(urn_body)
    encoding = HASH_ENCODING_DICT[scheme]

    if encoding == HashEncoding.BASE32:
        return (Hash(scheme, decode_base32(payload)),)
    if encoding == HashEncoding.HEX:
        return (Hash(scheme, decode_hex(payload)),)
    if encoding == HashEncoding.BITPRINT:
        return decode_bitprint(payload)
    raise UnsupportedHashSchemeError(f"no decoder for hash scheme {scheme.value!r}")
