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

from typing import Any

import orjson


def _default(obj: Any) -> Any:
    # Key material is always rendered as hex
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return bytes(obj).hex()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def dumps(data: Any) -> str:
    """JSON encoder that uses orjson, bytes become hex strings."""
    return orjson.dumps(data, default=_default).decode("utf-8")


def dumps_indented(data: Any) -> str:
    """JSON encoder that uses orjson with indent."""
    return orjson.dumps(
        data,
        default=_default,
        option=orjson.OPT_INDENT_2,
    ).decode("utf-8")
