from base64 import b32encode

import pytest

from magnetlink.protocol import Hash, HashScheme, Urn
from magnetlink.protocol.errors import MalformedMagnetError, UnknownHashSchemeError
from magnetlink.protocol.urn import parse_urn

BTIH = "9480ac31b43e6219f2109c7877e48aeb47dfc7ac"


class TestParseUrn:
    def test_single_hash(self) -> None:
        assert parse_urn(f"urn:btih:{BTIH}") == Urn((Hash(HashScheme.BTIH, bytes.fromhex(BTIH)),))

    def test_bitprint_has_two_hashes(self) -> None:
        sha1 = b32encode(b"\x01" * 20).decode()
        tth = b32encode(b"\x02" * 24).decode()
        urn = parse_urn(f"urn:bitprint:{sha1}.{tth}")
        assert [urn_hash.scheme for urn_hash in urn.hashes] == [HashScheme.SHA1, HashScheme.TIGER_TREE_HASH]

    @pytest.mark.parametrize(
        "value",
        [
            f"btih:{BTIH}",
            f"xurn:btih:{BTIH}",
            f"urn:urn:btih:{BTIH}",
            f"URN:btih:{BTIH}",
        ],
    )
    def test_malformed(self, value: str) -> None:
        with pytest.raises(MalformedMagnetError):
            parse_urn(value)

    def test_unknown_scheme_is_an_error(self) -> None:
        with pytest.raises(UnknownHashSchemeError):
            parse_urn("urn:sha256:abcd")
