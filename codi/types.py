from __future__ import annotations

import decimal
import enum
import json
from pathlib import Path
from typing import Any, Union


class JsonNumber(str):
    """A JSON number literal kept exactly as it appeared in the source text."""

    def __repr__(self) -> str:
        return f"JsonNumber({str.__repr__(self)})"


class _Undefined:
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


# Present-but-kindless value; renders as ``default``.
UNDEFINED = _Undefined()

JsonValue = Union[None, bool, int, float, str, JsonNumber, list["JsonValue"], dict[str, "JsonValue"]]


class JsonKind(enum.Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    UNDEFINED = "undefined"
    UNSUPPORTED = "unsupported"


def kind_of(value: Any) -> JsonKind:
    if value is None:
        return JsonKind.NULL
    if value is UNDEFINED:
        return JsonKind.UNDEFINED
    # bool is an int subclass
    if value is True:
        return JsonKind.TRUE
    if value is False:
        return JsonKind.FALSE
    if isinstance(value, JsonNumber):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float, decimal.Decimal)):
        return JsonKind.NUMBER
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    return JsonKind.UNSUPPORTED


def number_literal(value: int | float | decimal.Decimal | JsonNumber) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def loads(text: str) -> JsonValue:
    """Parse JSON text, keeping every number literal verbatim as a ``JsonNumber``.

    ``NaN`` and ``Infinity`` are rejected with ``ValueError``; they have no
    JSON or C# literal form.
    """
    return json.loads(text, parse_int=JsonNumber, parse_float=JsonNumber, parse_constant=_reject_constant)


def load(path: str | Path) -> JsonValue:
    return loads(Path(path).read_text(encoding="utf-8-sig"))
