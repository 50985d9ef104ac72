import hashlib
import os
from typing import List

import pytest

from identicon.systems.digest import encode_input, hash_input, hash_system
from tests.test_utils import ASDF_DIGEST


def test_hash_system_known_vector() -> None:
    state = hash_system("asdf")
    assert list(state.digest) == ASDF_DIGEST
    assert state.color is None
    assert len(state.grid) == 0
    assert len(state.pixel_map) == 0


@pytest.mark.parametrize(
    "input",
    ["", "a", "asdf", "ünïcödé ☃", "x" * 10_000, "with\nnewline", "a.png"],
)
def test_digest_is_always_sixteen_bytes(input: str) -> None:
    assert len(hash_system(input).digest) == 16


def test_empty_string_digest() -> None:
    digest: List[int] = list(hash_system("").digest)
    assert digest == list(bytes.fromhex("d41d8cd98f00b204e9800998ecf8427e"))


def test_hash_input_matches_md5_of_utf8() -> None:
    text = "grüße"
    assert hash_input(text) == hashlib.md5(text.encode("utf-8")).digest()


def test_hash_system_is_deterministic() -> None:
    assert hash_system("same") == hash_system("same")
    assert hash_system("same") != hash_system("Same")


def test_hash_undecodable_argv_byte() -> None:
    # ``os.fsdecode`` maps bytes that are not UTF-8 to lone surrogates.
    state = hash_system(os.fsdecode(b"\xff"))
    assert len(state.digest) == 16
    assert bytes(state.digest) == hashlib.md5(b"\xff").digest()


def test_hash_escaped_bytes_match_raw_bytes() -> None:
    assert encode_input(os.fsdecode(b"caf\xe9")) == b"caf\xe9"
    assert hash_input(os.fsdecode(b"caf\xe9")) == hashlib.md5(b"caf\xe9").digest()


@pytest.mark.parametrize("input", ["\ud800", "a\udfffb", "\udce9\ud800"])
def test_hash_any_lone_surrogate(input: str) -> None:
    assert len(hash_system(input).digest) == 16
    assert hash_system(input) == hash_system(input)


def test_encode_input_unchanged_for_well_formed_text() -> None:
    for text in ["", "asdf", "grüße", "☃"]:
        assert encode_input(text) == text.encode("utf-8")
