import logging

from . import Urn
from .errors import MalformedMagnetError
from .hashes import decode_hash

logger = logging.getLogger(__name__)

URN_PREFIX = "urn:"


def parse_urn(value: str) -> Urn:
    parts = value.split(URN_PREFIX)
    if len(parts) != 2 or parts[0]:
        raise MalformedMagnetError(f"expected a single leading {URN_PREFIX!r} in {value!r}")

    hashes = decode_hash(parts[1])
    logger.debug("urn %r decoded to %s", value, ", ".join(urn_hash.scheme.value for urn_hash in hashes))
    return Urn(hashes)
