import hashlib
import os

from pyrsistent import pvector

from identicon.systems.hash import hash_input
from identicon.types import SEED_LENGTH, Stage

CHRIS_SEED = [148, 79, 172, 254, 177, 83, 180, 240, 25, 22, 160, 241, 102, 252, 195, 21]
EMPTY_SEED = [212, 29, 140, 217, 143, 0, 178, 4, 233, 128, 9, 152, 236, 248, 66, 126]


def test_hash_input_matches_md5_digest() -> None:
    image = hash_input("Chris")
    assert list(image.seed) == CHRIS_SEED


def test_hash_input_only_populates_seed() -> None:
    image = hash_input("Chris")
    assert image.stage == Stage.SEEDED
    assert image.rgb is None
    assert image.grid is None
    assert image.pixel_map is None
    assert image.filtered is False


def test_hash_input_is_deterministic() -> None:
    assert hash_input("alice@example.com") == hash_input("alice@example.com")
    assert hash_input("alice") != hash_input("bob")


def test_hash_input_empty_string() -> None:
    image = hash_input("")
    assert len(image.seed) == SEED_LENGTH
    assert list(image.seed) == EMPTY_SEED


def test_hash_input_accepts_bytes() -> None:
    assert hash_input(b"Chris").seed == pvector(CHRIS_SEED)


def test_hash_input_encodes_text_as_utf8() -> None:
    assert hash_input("héllo") == hash_input("héllo".encode("utf-8"))
    assert all(0 <= value <= 255 for value in hash_input("héllo").seed)


def test_hash_input_restores_surrogate_escaped_bytes() -> None:
    # what sys.argv holds for a non UTF-8 argument on POSIX
    text = os.fsdecode(b"\xff")
    assert hash_input(text).seed == pvector(hashlib.md5(b"\xff").digest())


def test_hash_input_accepts_lone_surrogate() -> None:
    image = hash_input("\ud800")
    assert len(image.seed) == SEED_LENGTH
    assert image == hash_input("\ud800")
