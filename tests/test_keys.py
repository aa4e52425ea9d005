import pytest
from hypothesis import given
from hypothesis import strategies as st

from magnetlink.protocol import KeyCategory, KeyDescriptor
from magnetlink.protocol.errors import MalformedKeyError, UnknownKeyError
from magnetlink.protocol.keys import parse_key


class TestParseKey:
    @pytest.mark.parametrize("category", [category for category in KeyCategory if category != KeyCategory.SUPPLEMENT])
    def test_plain_keys(self, category: KeyCategory) -> None:
        assert parse_key(category.value) == KeyDescriptor(category)

    def test_indexed_key(self) -> None:
        assert parse_key("xt.2") == KeyDescriptor(KeyCategory.EXACT_TOPIC, 2)

    def test_supplement(self) -> None:
        assert parse_key("x.foo") == KeyDescriptor(KeyCategory.SUPPLEMENT, 0, "foo")

    def test_supplement_with_index(self) -> None:
        assert parse_key("x.foo.3") == KeyDescriptor(KeyCategory.SUPPLEMENT, 3, "foo")

    @pytest.mark.parametrize("key", ["zz", "XT", "Dn", "x", "", "ws"])
    def test_unknown(self, key: str) -> None:
        with pytest.raises(UnknownKeyError):
            parse_key(key)

    @pytest.mark.parametrize("key", ["xt.a", "xt.-1", "xt.", "xt.1.2", "xtz", "x.", "x..1", "x.foo.bar", "x.a.1.2"])
    def test_malformed(self, key: str) -> None:
        with pytest.raises(MalformedKeyError):
            parse_key(key)

    @given(st.integers(min_value=0, max_value=10**6))
    def test_index_round_trips(self, index: int) -> None:
        assert parse_key(f"tr.{index}").index == index
