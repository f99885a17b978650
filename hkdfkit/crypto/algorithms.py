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
from __future__ import annotations

import enum

from cryptography.hazmat.primitives import hashes

from hkdfkit.exceptions import UnsupportedAlgorithmError


def _normalize_name(name: str) -> str:
    name = name.upper().replace("-", "").replace("_", "")
    # JCA style names, e.g. HmacSHA256
    if name.startswith("HMAC"):
        name = name[4:]
    return name


class HashAlgorithm(enum.Enum):
    """The hash functions HKDF can be instantiated with."""

    SHA1 = "SHA-1", hashes.SHA1
    SHA256 = "SHA-256", hashes.SHA256
    SHA384 = "SHA-384", hashes.SHA384
    SHA512 = "SHA-512", hashes.SHA512

    def __new__(cls, *args, **kwds):
        obj = object.__new__(cls)
        obj._value_ = args[0]
        return obj

    def __init__(self, _: str, hash_cls: type[hashes.HashAlgorithm]) -> None:
        self.__hash_cls = hash_cls

    def __str__(self) -> str:
        return str(self.value)

    @property
    def hash_len(self) -> int:
        """Size of a digest (and so of a PRK and of one expand block) in bytes."""
        return self.__hash_cls.digest_size

    def new_hash(self) -> hashes.HashAlgorithm:
        return self.__hash_cls()

    @classmethod
    def from_name(cls, name: str) -> HashAlgorithm:
        """
        Look up an algorithm by name.

        "SHA-256", "sha256", "SHA_256" and "HmacSHA256" all select SHA256.

        :raises UnsupportedAlgorithmError: if no supported algorithm matches
        """
        wanted = _normalize_name(name)
        for algorithm in cls:
            if _normalize_name(algorithm.value) == wanted:
                return algorithm
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {name!r}")
