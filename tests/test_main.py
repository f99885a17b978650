"""Test the CLI."""

import argparse
from argparse import Namespace
import json
from unittest import mock

import pytest

from hkdfkit.__main__ import extract, hash_algorithm, hex_bytes, main
from hkdfkit.crypto import HashAlgorithm
from hkdfkit.exceptions import UnsupportedAlgorithmError

IKM = "0b" * 22
SALT = "000102030405060708090a0b0c"
INFO = "f0f1f2f3f4f5f6f7f8f9"
PRK = "077709362c2e32df0ddc3f0dc47bba6390b6c73bb50f9c3122ec844ad7c2b3e5"
OKM = "3cb25f25faacd57a90434f64d0362f2a2d2d0a90cf1a5a4c5db02d56ecc4c5bf34007208d5b887185865"


def test_help(capsys):
    with pytest.raises(SystemExit):
        main(["-h"])
    printed = capsys.readouterr().out

    assert printed.startswith("usage: ")
    assert "derive" in printed


def test_no_command(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("usage: ")


def test_extract(capsys):
    main(["extract", "--hash", "SHA-256", "--ikm", IKM, "--salt", SALT])

    assert capsys.readouterr().out == PRK + "\n"


def test_extract_absent_salt(capsys):
    main(["extract", "--hash", "sha1", "--ikm", "0c" * 22])

    assert capsys.readouterr().out == "2adccada18779e7c2077ad2eb19d3f3e731385dd\n"


def test_expand(capsys):
    main(["expand", "--prk", PRK, "--info", INFO, "--length", "42"])

    assert capsys.readouterr().out == OKM + "\n"


def test_expand_too_long(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["expand", "--prk", PRK, "--length", "8161"])

    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("Cannot expand to 8161 bytes with SHA-256")


def test_expand_short_prk(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["expand", "--prk", "00" * 16, "--length", "32"])

    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("PRK must be at least 32 bytes")


def test_derive(capsys):
    main(["derive", "--ikm", IKM, "--salt", SALT, "--info", INFO, "--length", "42"])

    assert capsys.readouterr().out == OKM + "\n"


def test_derive_json(capsys):
    main(
        [
            "derive",
            "--hash",
            "HmacSHA256",
            "--ikm",
            IKM,
            "--salt",
            SALT,
            "--info",
            INFO,
            "--length",
            "42",
            "-o",
            "json",
        ]
    )

    assert json.loads(capsys.readouterr().out) == {
        "algorithm": "SHA-256",
        "length": 42,
        "prk": PRK,
        "okm": OKM,
    }


def test_derive_default_length(capsys):
    main(["derive", "--hash", "SHA-512", "--ikm", IKM])

    assert len(bytes.fromhex(capsys.readouterr().out.strip())) == 64


def test_bad_hex(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["extract", "--ikm", "not-hex"])

    assert exc.value.code == 2
    assert "is not a hex string" in capsys.readouterr().err


def test_unknown_hash(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["extract", "--hash", "MD5", "--ikm", IKM])

    assert exc.value.code == 2
    assert "Unsupported hash algorithm" in capsys.readouterr().err


def test_selftest(capsys):
    main(["selftest"])
    printed = capsys.readouterr().out

    assert printed.count("PASS ") == 7
    assert "FAIL" not in printed


def test_selftest_json(capsys):
    main(["selftest", "-o", "json"])

    results = json.loads(capsys.readouterr().out)
    assert len(results) == 7
    assert all(results.values())


def test_selftest_failure(capsys):
    with mock.patch("hkdfkit.__main__.check_vector", return_value=False):
        with pytest.raises(SystemExit) as exc:
            main(["selftest"])

    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("FAIL ")


def test_extract_handler_prints_prk(capsys):
    args = Namespace(hash=HashAlgorithm.SHA256, salt=None, ikm=bytes.fromhex(IKM))

    assert extract(args) is True
    assert capsys.readouterr().out == (
        "19ef24a32c717b167f33a91d6f648bdf96596776afdb6377ac434c1c293ccb04\n"
    )


def test_hex_bytes_error_hides_value_error():
    with pytest.raises(argparse.ArgumentTypeError) as exc:
        hex_bytes("zz")

    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__


def test_hash_algorithm_error_chains_lookup_error():
    with pytest.raises(argparse.ArgumentTypeError) as exc:
        hash_algorithm("MD5")

    assert isinstance(exc.value.__cause__, UnsupportedAlgorithmError)
