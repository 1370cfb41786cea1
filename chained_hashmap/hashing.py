"""
32-bit string hash functions used to place keys into buckets.

Both functions wrap the accumulator to a signed 32-bit integer after every
step, so a key hashes to the same value as it would on a platform with native
two's-complement 32-bit arithmetic.
"""
from typing import Callable, Dict

from chained_hashmap.errors import validate_key

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
POLYNOMIAL_MULTIPLIER = 31

_MASK_32 = 0xFFFFFFFF
_SIGN_BIT_32 = 0x80000000


def to_int32(value: int) -> int:
    value &= _MASK_32
    return value - (1 << 32) if value & _SIGN_BIT_32 else value


def fnv1a_32(key: str) -> int:
    """FNV-1a style hash: xor each code point in, then multiply by the FNV prime."""
    validate_key(key)
    h = to_int32(FNV_OFFSET_BASIS)
    for char in key:
        h ^= ord(char)
        h = to_int32(h * FNV_PRIME)
    return h


def polynomial_31(key: str) -> int:
    """Rolling hash: h = h * 31 + code point."""
    validate_key(key)
    h = 0
    for char in key:
        h = to_int32(h * POLYNOMIAL_MULTIPLIER + ord(char))
    return h


HASH_FUNCTIONS: Dict[str, Callable[[str], int]] = {
    "fnv1a": fnv1a_32,
    "polynomial": polynomial_31,
}


def get_hash_function(name: str) -> Callable[[str], int]:
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown hash function {name!r}; expected one of {sorted(HASH_FUNCTIONS)}"
        ) from None


def bucket_index(hash_value: int, bucket_count: int) -> int:
    # Same as taking the absolute value of a truncated remainder.
    return abs(hash_value) % bucket_count
