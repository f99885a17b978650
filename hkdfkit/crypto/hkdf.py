#
# Copyright 2026 hkdfkit team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""
Implements the HMAC-based Extract-and-Expand Key Derivation Function (HKDF). More information can be found on
https://tools.ietf.org/html/rfc5869.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from struct import Struct

from hkdfkit.exceptions import InvalidLengthError

from .algorithms import HashAlgorithm
from .mac import hmac_digest

# The block counter is a single octet, so at most 255 blocks can be produced
MAX_BLOCKS = 255

PACK_COUNTER = Struct(">B").pack

logger = logging.getLogger(__name__)


def _to_bytes(name: str, value: bytes | bytearray | memoryview) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, not {type(value).__name__}")
    return bytes(value)


def max_length(algorithm: HashAlgorithm) -> int:
    """The largest output expand() can produce with this algorithm."""
    return MAX_BLOCKS * algorithm.hash_len


def extract(algorithm: HashAlgorithm, salt: bytes | None, ikm: bytes) -> bytes:
    """
    HKDF-Extract(salt, IKM) -> PRK

    :param algorithm: the hash function
    :param salt: optional non-secret random value, None means HashLen zero bytes
    :param ikm: input keying material, may be empty
    :return: a pseudorandom key of algorithm.hash_len bytes
    """
    ikm = _to_bytes("ikm", ikm)
    if salt is None:
        salt = bytes(algorithm.hash_len)
    else:
        salt = _to_bytes("salt", salt)
        # HMAC zero pads short keys, so an empty salt gives the same PRK
        if not salt:
            salt = bytes(algorithm.hash_len)

    return hmac_digest(algorithm, salt, ikm)


def expand(algorithm: HashAlgorithm, prk: bytes, info: bytes, length: int) -> bytes:
    """
    HKDF-Expand(PRK, info, L) -> OKM

    :param algorithm: the hash function
    :param prk: a pseudorandom key of at least algorithm.hash_len bytes, usually the output of extract()
    :param info: optional context and application specific information, may be empty
    :param length: length of the output keying material in bytes
    :return: length bytes of output keying material
    :raises InvalidLengthError: if length is negative or above 255 * HashLen, or prk is too short
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f"length must be an int, not {type(length).__name__}")

    prk = _to_bytes("prk", prk)
    info = _to_bytes("info", info)

    hash_len = algorithm.hash_len
    limit = max_length(algorithm)

    if length < 0 or length > limit:
        raise InvalidLengthError(
            f"Cannot expand to {length} bytes with {algorithm}, must be between 0 and {limit}"
        )

    if len(prk) < hash_len:
        raise InvalidLengthError(
            f"PRK must be at least {hash_len} bytes for {algorithm}, got {len(prk)}"
        )

    blocks = math.ceil(length / hash_len)
    logger.debug(
        "Expanding %d bytes with %s in %d block(s)", length, algorithm, blocks
    )

    okm = []
    block = b""
    for counter in range(1, blocks + 1):
        block = hmac_digest(algorithm, prk, block, info, PACK_COUNTER(counter))
        okm.append(block)

    return b"".join(okm)[:length]


def hkdf_derive(
    input: bytes,
    salt: bytes | None,
    info: bytes,
    length: int = 32,
    algorithm: HashAlgorithm = HashAlgorithm.SHA512,
) -> bytes:
    """Extract a PRK from input and expand it to length bytes in one go."""
    prk = extract(algorithm, salt, input)
    return expand(algorithm, prk, info, length)


@dataclass(frozen=True)
class Hkdf:
    """
    HKDF bound to a single hash algorithm.

    Holds nothing but the algorithm, so one instance can be shared freely between threads.
    """

    algorithm: HashAlgorithm

    @classmethod
    def for_name(cls, name: str) -> Hkdf:
        """
        Build an instance from an algorithm name such as "SHA-256" or "HmacSHA256".

        :raises UnsupportedAlgorithmError: if the name is not a supported algorithm
        """
        return cls(HashAlgorithm.from_name(name))

    @property
    def hash_len(self) -> int:
        return self.algorithm.hash_len

    @property
    def max_length(self) -> int:
        return max_length(self.algorithm)

    def extract(self, salt: bytes | None, ikm: bytes) -> bytes:
        return extract(self.algorithm, salt, ikm)

    def expand(self, prk: bytes, info: bytes = b"", length: int | None = None) -> bytes:
        if length is None:
            length = self.hash_len
        return expand(self.algorithm, prk, info, length)

    def derive(
        self,
        ikm: bytes,
        salt: bytes | None = None,
        info: bytes = b"",
        length: int | None = None,
    ) -> bytes:
        return self.expand(self.extract(salt, ikm), info, length)
