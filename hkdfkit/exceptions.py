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


class HkdfException(Exception):
    """Generic HKDF exception from which all others inherit."""


class InvalidLengthError(HkdfException, ValueError):
    """
    A length does not fit the selected hash.

    Raised when more than 255 * HashLen bytes of output are requested, when the
    requested length is negative, or when a PRK is shorter than HashLen.
    """


class UnsupportedAlgorithmError(HkdfException, ValueError):
    """No supported hash algorithm matches the given name."""
