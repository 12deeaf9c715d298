import hashlib

import pytest

from Tree_Digest.digest.primitives import AdditiveChecksum, Sha256, get_primitive

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_get_primitive_by_name():
    assert isinstance(get_primitive("sha256"), Sha256)
    assert isinstance(get_primitive("CHECKSUM"), AdditiveChecksum)
    assert isinstance(get_primitive(None), Sha256)


def test_get_primitive_unknown():
    with pytest.raises(ValueError, match="md5"):
        get_primitive("md5")


def test_sha256_digest_and_render():
    p = Sha256()

    value = p.digest(b"abc")

    assert value == hashlib.sha256(b"abc").digest()
    assert len(value) == p.digest_size
    assert p.render(value) == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    assert p.render(p.digest(b"")) == EMPTY_SHA256


def test_sha256_streaming_matches_one_shot():
    p = Sha256()
    acc = p.new()
    acc.update(b"hello ")
    acc.update(b"world")

    assert acc.value() == p.digest(b"hello world")


def test_checksum_sums_unsigned_bytes():
    p = AdditiveChecksum()

    assert p.digest(b"A") == 65
    assert p.digest(b"AB") == 131
    assert p.digest(b"\xff\xff") == 510
    assert p.digest(b"") == 0
    assert p.render(131) == "131"


def test_checksum_to_bytes_is_fixed_width():
    p = AdditiveChecksum()

    assert p.to_bytes(131) == (131).to_bytes(8, "big")
    assert len(p.to_bytes(2 ** 64 - 1)) == 8
