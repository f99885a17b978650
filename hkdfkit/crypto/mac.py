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
Keyed hashing (HMAC, https://tools.ietf.org/html/rfc2104) on top of the cryptography package.
"""
from __future__ import annotations

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hmac

from .algorithms import HashAlgorithm

backend = default_backend()


def hmac_digest(algorithm: HashAlgorithm, key: bytes, *message_parts: bytes) -> bytes:
    """
    Compute HMAC(key, message) where message is the concatenation of message_parts.

    :param algorithm: the hash function to instantiate HMAC with
    :param key: the MAC key, any length
    :param message_parts: the message, fed to the MAC in order
    :return: a tag of algorithm.hash_len bytes
    """
    mac = hmac.HMAC(key, algorithm.new_hash(), backend=backend)
    for part in message_parts:
        mac.update(part)
    return mac.finalize()
