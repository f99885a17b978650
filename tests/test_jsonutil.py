import json

import pytest

import hkdfkit.jsonutil as jsonutil


def test_dumps_bytes_as_hex():
    assert jsonutil.dumps({"okm": b"\x00\xff", "length": 2}) == '{"okm":"00ff","length":2}'


def test_dumps_indented():
    result = jsonutil.dumps_indented({"prk": bytearray(b"\x01\x02")})

    assert result == '{\n  "prk": "0102"\n}'
    assert json.loads(result) == {"prk": "0102"}


def test_dumps_unsupported_type():
    with pytest.raises(TypeError):
        jsonutil.dumps({"value": object()})
