from .protocol import Hash, HashScheme, KeyCategory, KeyDescriptor, Magnet, ManifestTopic, Supplement, Urn
from .protocol.errors import (
    InvalidEncodingError,
    InvalidHashEncodingError,
    InvalidIntegerError,
    InvalidUrlError,
    MagnetError,
    MalformedKeyError,
    MalformedMagnetError,
    MalformedUriError,
    UnknownHashSchemeError,
    UnknownKeyError,
    UnsupportedHashSchemeError,
)
from .protocol.magnet import parse_magnet

__version__ = "0.1.0"

__all__ = [
    "Hash",
    "HashScheme",
    "InvalidEncodingError",
    "InvalidHashEncodingError",
    "InvalidIntegerError",
    "InvalidUrlError",
    "KeyCategory",
    "KeyDescriptor",
    "Magnet",
    "MagnetError",
    "MalformedKeyError",
    "MalformedMagnetError",
    "MalformedUriError",
    "ManifestTopic",
    "Supplement",
    "UnknownHashSchemeError",
    "UnknownKeyError",
    "UnsupportedHashSchemeError",
    "Urn",
    "parse_magnet",
]
