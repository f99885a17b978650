from dataclasses import replace

from hkdfkit.crypto import HashAlgorithm
from hkdfkit.crypto.vectors import RFC5869_VECTORS, check_vector


def test_all_vectors_pass():
    assert all(check_vector(vector) for vector in RFC5869_VECTORS)


def test_vector_set():
    algorithms = [vector.algorithm for vector in RFC5869_VECTORS]

    assert algorithms.count(HashAlgorithm.SHA256) == 3
    assert algorithms.count(HashAlgorithm.SHA1) == 4
    assert RFC5869_VECTORS[-1].salt is None
    assert RFC5869_VECTORS[-1].salt_bytes is None
    assert RFC5869_VECTORS[2].salt_bytes == b""


def test_wrong_prk_fails():
    vector = replace(RFC5869_VECTORS[0], prk="00" * 32)

    assert not check_vector(vector)


def test_wrong_okm_fails():
    vector = replace(RFC5869_VECTORS[3], okm="00" * 42)

    assert not check_vector(vector)
