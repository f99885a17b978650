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

import setuptools


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="hkdfkit",
    packages=setuptools.find_packages(exclude=["tests"]),
    version="0.1.0",
    description="RFC 5869 HMAC-based Extract-and-Expand Key Derivation Function",
    author="hkdfkit team",
    keywords=["HKDF", "RFC 5869", "key derivation", "HMAC"],
    python_requires=">=3.9",
    install_requires=["cryptography>=2.5", "orjson"],
    extras_require={"tests": ["pytest"]},
    entry_points={"console_scripts": ["hkdfkit = hkdfkit.__main__:main"]},
    license="Apache License 2.0",
    long_description=long_description,
    long_description_content_type="text/markdown",
)
