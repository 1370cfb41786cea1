import pytest
from chained_hashmap.errors import InvalidKeyError
from chained_hashmap.hashing import (
    bucket_index,
    fnv1a_32,
    get_hash_function,
    polynomial_31,
    to_int32,
)

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def test_to_int32_wraps_like_twos_complement():
    assert to_int32(0) == 0
    assert to_int32(INT32_MAX) == INT32_MAX
    assert to_int32(INT32_MAX + 1) == INT32_MIN
    assert to_int32(2 ** 32) == 0
    assert to_int32(2 ** 32 - 1) == -1
    assert to_int32(-1) == -1


def test_fnv1a_matches_reference_vectors():
    assert fnv1a_32("a") & 0xFFFFFFFF == 0xE40C292C
    assert fnv1a_32("foobar") & 0xFFFFFFFF == 0xBF9CF968


def test_polynomial_matches_rolling_hash():
    assert polynomial_31("a") == 97
    assert polynomial_31("abc") == 96354
    assert polynomial_31("hello") == 99162322


@pytest.mark.parametrize("hash_function", [fnv1a_32, polynomial_31])
def test_hash_stays_in_signed_32_bit_range(hash_function):
    for key in ["x", "Rodrigo", "a" * 500, "ção", "日本語のキー", "\U0001F600" * 10]:
        value = hash_function(key)
        assert INT32_MIN <= value <= INT32_MAX


@pytest.mark.parametrize("hash_function", [fnv1a_32, polynomial_31])
def test_hash_is_deterministic(hash_function):
    assert hash_function("Rodrigo") == hash_function("Rodrigo")
    assert hash_function("rodrigo") != hash_function("Rodrigo")


@pytest.mark.parametrize("hash_function", [fnv1a_32, polynomial_31])
@pytest.mark.parametrize("key", ["", None, 42])
def test_hash_rejects_invalid_keys(hash_function, key):
    with pytest.raises(InvalidKeyError):
        hash_function(key)


def test_bucket_index_is_non_negative_and_in_range():
    for value in [INT32_MIN, -7, -1, 0, 1, 7, INT32_MAX]:
        for count in [3, 6, 12, 7]:
            assert 0 <= bucket_index(value, count) < count


def test_bucket_index_uses_absolute_remainder():
    assert bucket_index(-7, 3) == 1
    assert bucket_index(7, 3) == 1


def test_get_hash_function_by_name():
    assert get_hash_function("fnv1a") is fnv1a_32
    assert get_hash_function("polynomial") is polynomial_31


def test_get_hash_function_unknown_name():
    with pytest.raises(ValueError, match="Unknown hash function"):
        get_hash_function("md5")
