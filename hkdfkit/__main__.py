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

import argparse
from argparse import ArgumentParser, Namespace
import logging
import sys

import hkdfkit.jsonutil as jsonutil

from .crypto import HashAlgorithm, Hkdf
from .crypto.vectors import RFC5869_VECTORS, check_vector
from .exceptions import HkdfException, UnsupportedAlgorithmError

logger = logging.getLogger(__name__)


def setup_logging(level: str | None) -> None:
    """
    Set up the logging to use a decent format and the log level given as parameter.
    :param level: the log level used for the root logger
    """
    logging.basicConfig(
        format="%(asctime)s %(filename)s:%(lineno)04d %(levelname)s %(message)s"
    )
    if level:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError("Invalid log level: %s" % level)
        logging.getLogger().setLevel(numeric_level)


def add_log_arguments(parser: ArgumentParser) -> None:
    """
    Adds command line arguments to control logging behaviour.
    :param parser: The argparse.ArgumentParser object to add to.
    """
    parser.add_argument("--log", action="store", dest="loglevel")


def hex_bytes(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a hex string") from None


def hash_algorithm(value: str) -> HashAlgorithm:
    try:
        return HashAlgorithm.from_name(value)
    except UnsupportedAlgorithmError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def extract(args: Namespace) -> bool:
    prk = Hkdf(args.hash).extract(args.salt, args.ikm)
    print(prk.hex())
    return True


def expand(args: Namespace) -> bool:
    hkdf = Hkdf(args.hash)
    try:
        okm = hkdf.expand(args.prk, args.info, args.length)
    except HkdfException as e:
        print(str(e))
        return False

    print(okm.hex())
    return True


def derive(args: Namespace) -> bool:
    hkdf = Hkdf(args.hash)
    length = args.length if args.length is not None else hkdf.hash_len

    try:
        prk = hkdf.extract(args.salt, args.ikm)
        okm = hkdf.expand(prk, args.info, length)
    except HkdfException as e:
        print(str(e))
        return False

    if args.output == "json":
        print(
            jsonutil.dumps_indented(
                {
                    "algorithm": str(hkdf.algorithm),
                    "length": length,
                    "prk": prk,
                    "okm": okm,
                }
            )
        )
    else:
        print(okm.hex())
    return True


def selftest(args: Namespace) -> bool:
    results = {}
    for vector in RFC5869_VECTORS:
        results[vector.name] = check_vector(vector)

    if args.output == "json":
        print(jsonutil.dumps(results))
    else:
        for name, passed in results.items():
            print(f"{'PASS' if passed else 'FAIL'} {name}")

    return all(results.values())


def setup_parser_for_hash(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--hash",
        action="store",
        type=hash_algorithm,
        default=HashAlgorithm.SHA256,
        help="hash function: SHA-1, SHA-256, SHA-384 or SHA-512 (default: SHA-256)",
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="RFC 5869 HKDF key derivation. All keying material is read and written as hex.",
    )
    add_log_arguments(parser)

    subparsers = parser.add_subparsers(
        description="Available operations:",
    )

    extract_parser = subparsers.add_parser(
        "extract", help="Extract a pseudorandom key from input keying material"
    )
    extract_parser.set_defaults(func=extract)
    setup_parser_for_hash(extract_parser)
    extract_parser.add_argument(
        "--ikm", action="store", type=hex_bytes, required=True, help="input keying material"
    )
    extract_parser.add_argument(
        "--salt", action="store", type=hex_bytes, default=None, help="optional salt"
    )

    expand_parser = subparsers.add_parser(
        "expand", help="Expand a pseudorandom key into output keying material"
    )
    expand_parser.set_defaults(func=expand)
    setup_parser_for_hash(expand_parser)
    expand_parser.add_argument(
        "--prk", action="store", type=hex_bytes, required=True, help="pseudorandom key"
    )
    expand_parser.add_argument(
        "--info", action="store", type=hex_bytes, default=b"", help="context information"
    )
    expand_parser.add_argument(
        "--length", action="store", type=int, required=True, help="output length in bytes"
    )

    derive_parser = subparsers.add_parser(
        "derive", help="Extract and expand in one step"
    )
    derive_parser.set_defaults(func=derive)
    setup_parser_for_hash(derive_parser)
    derive_parser.add_argument(
        "--ikm", action="store", type=hex_bytes, required=True, help="input keying material"
    )
    derive_parser.add_argument(
        "--salt", action="store", type=hex_bytes, default=None, help="optional salt"
    )
    derive_parser.add_argument(
        "--info", action="store", type=hex_bytes, default=b"", help="context information"
    )
    derive_parser.add_argument(
        "--length",
        action="store",
        type=int,
        default=None,
        help="output length in bytes (default: the hash length)",
    )
    derive_parser.add_argument(
        "-o",
        action="store",
        dest="output",
        default="hex",
        choices=("hex", "json"),
        help="Specify output format",
    )

    selftest_parser = subparsers.add_parser(
        "selftest", help="Check the implementation against the RFC 5869 test cases"
    )
    selftest_parser.set_defaults(func=selftest)
    selftest_parser.add_argument(
        "-o",
        action="store",
        dest="output",
        default="text",
        choices=("text", "json"),
        help="Specify output format",
    )

    args = parser.parse_args(argv)

    setup_logging(args.loglevel)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    if not args.func(args):
        sys.exit(1)


if __name__ == "__main__":
    main()
