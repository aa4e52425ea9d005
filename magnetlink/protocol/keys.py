import re

from . import KeyCategory, KeyDescriptor
from .errors import MalformedKeyError, UnknownKeyError

INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_index(key: str, index: str) -> int:
    if not INDEX_PATTERN.fullmatch(index):
        raise MalformedKeyError(f"key {key!r} has a non-numeric index {index!r}")
    return int(index)


def parse_key(key: str) -> KeyDescriptor:
    """
    Classify a magnet key such as `xt`, `xt.2`, `x.foo` or `x.foo.3`.

    The prefix is the first two characters, matched case-sensitively. An
    optional `.N` suffix gives the index of a repeated key. Supplement keys
    (`x.`) carry a sub-tag between the prefix and the optional index.
    """
    try:
        category = KeyCategory(key[:2])
    except ValueError:
        raise UnknownKeyError(f"unknown magnet key {key!r}") from None

    if category == KeyCategory.SUPPLEMENT:
        parts = key[2:].split(".")
        if not parts[0]:
            raise MalformedKeyError(f"supplement key {key!r} has no tag")
        if len(parts) > 2:
            raise MalformedKeyError(f"supplement key {key!r} has too many segments")
        index = parse_index(key, parts[1]) if len(parts) == 2 else 0
        return KeyDescriptor(category, index, parts[0])

    parts = key.split(".")
    if len(parts) > 2:
        raise MalformedKeyError(f"key {key!r} has too many segments")
    if parts[0] != category.value:
        raise MalformedKeyError(f"key {key!r} does not match prefix {category.value!r}")
    index = parse_index(key, parts[1]) if len(parts) == 2 else 0
    return KeyDescriptor(category, index)
