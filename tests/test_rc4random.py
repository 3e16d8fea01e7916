import pytest

from klib import rc4random
from klib.rc4random import Rc4Random

WIKI_SEED = int.from_bytes(b"Wiki", "little")
WIKI_KEYSTREAM = bytes(
    c ^ p for c, p in zip(bytes.fromhex("1021BF0420"), b"pedia")
)


def test_matches_published_rc4_vector():
    rng = Rc4Random(WIKI_SEED)
    keystream = rng.random_bytes(5)
    ciphertext = bytes(k ^ p for k, p in zip(keystream, b"pedia"))
    assert ciphertext == bytes.fromhex("1021BF0420")


def test_same_seed_same_stream():
    first = Rc4Random(WIKI_SEED).random_bytes(64)
    second = Rc4Random(WIKI_SEED).random_bytes(64)
    assert len(first) == 64
    assert first[:5] == WIKI_KEYSTREAM
    assert second[:5] == WIKI_KEYSTREAM
    assert first == second


def test_different_seeds_differ():
    assert Rc4Random(1).random_bytes(32) != Rc4Random(2).random_bytes(32)


def test_stream_continues_across_calls():
    whole = Rc4Random(9).random_bytes(40)
    rng = Rc4Random(9)
    assert rng.random_bytes(15) + rng.random_bytes(25) == whole


def test_reseed_restarts_stream():
    rng = Rc4Random(5)
    first = rng.random_bytes(16)
    rng.random_bytes(100)
    rng.seed(5)
    assert rng.random_bytes(16) == first


def test_seed_is_taken_as_unsigned_32_bit():
    assert Rc4Random(-1).random_bytes(16) == Rc4Random(0xFFFFFFFF).random_bytes(16)
    assert Rc4Random(2**32 + 3).random_bytes(16) == Rc4Random(3).random_bytes(16)


def test_random_ulong_is_little_endian_of_stream():
    expected = int.from_bytes(Rc4Random(77).random_bytes(4), "little")
    assert Rc4Random(77).random_ulong() == expected


def test_output_covers_many_byte_values():
    data = Rc4Random(123).random_bytes(4096)
    assert len(data) == 4096
    assert len(set(data)) > 200


def test_zero_size_and_negative_size():
    rng = Rc4Random(0)
    assert rng.random_bytes(0) == b""
    with pytest.raises(ValueError):
        rng.random_bytes(-1)


def test_shared_generator_follows_random_init():
    rc4random.random_init(31)
    expected = Rc4Random(31).random_bytes(12)
    assert rc4random.random_bytes(12) == expected


def test_shared_random_ulong_follows_stream():
    rc4random.random_init(0)
    reference = Rc4Random(0)
    assert rc4random.random_ulong() == reference.random_ulong()
    assert rc4random.random_bytes(8) == reference.random_bytes(8)