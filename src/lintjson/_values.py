"""
JSON value model.

Every node of a parsed or constructed document is a ``JsonValue``. The
variants are closed: literals (null, true, false), numbers, strings, and the
two containers defined in ``lintjson._containers``. Typed accessors raise
``TypeMismatchError`` on the wrong variant instead of coercing.
"""

import math
import re
import struct
from typing import IO
from typing import TYPE_CHECKING
from typing import Any

from lintjson._errors import NumberRangeError
from lintjson._errors import TypeMismatchError

if TYPE_CHECKING:
    from lintjson._containers import JsonArray
    from lintjson._containers import JsonObject
    from lintjson._writer import EncodeConfig

_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_INTEGER_RE = re.compile(r"-?[0-9]+")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

# Longest decimal text that can still fit a signed 64-bit integer
_LONG_MAX_TEXT_LENGTH = 20


class JsonValue:
    """
    Base of the JSON value model.

    Predicates never fail. Projections succeed only on the matching variant
    and raise ``TypeMismatchError`` otherwise.
    """

    __slots__ = ()

    def is_null(self) -> bool:
        return False

    def is_boolean(self) -> bool:
        return False

    def is_true(self) -> bool:
        return False

    def is_false(self) -> bool:
        return False

    def is_number(self) -> bool:
        return False

    def is_string(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def is_object(self) -> bool:
        return False

    def as_boolean(self) -> bool:
        raise TypeMismatchError(f"Not a boolean: {self}")

    def as_int(self) -> int:
        raise TypeMismatchError(f"Not a number: {self}")

    def as_long(self) -> int:
        raise TypeMismatchError(f"Not a number: {self}")

    def as_float(self) -> float:
        raise TypeMismatchError(f"Not a number: {self}")

    def as_double(self) -> float:
        raise TypeMismatchError(f"Not a number: {self}")

    def as_string(self) -> str:
        raise TypeMismatchError(f"Not a string: {self}")

    def as_object(self) -> "JsonObject":
        raise TypeMismatchError(f"Not an object: {self}")

    def as_array(self) -> "JsonArray":
        raise TypeMismatchError(f"Not an array: {self}")

    def write_to(
        self, fp: IO[str], config: "EncodeConfig | None" = None
    ) -> None:
        """Serializes this value to a text stream."""
        from lintjson._writer import EncodeConfig
        from lintjson._writer import writer_for

        writer_for(fp, config or EncodeConfig()).write_value(self)

    def to_string(self, **kwargs: Any) -> str:
        """Serializes this value, ``pretty=True`` selects the indented form."""
        from lintjson._writer import EncodeConfig
        from lintjson._writer import encode

        return encode(self, EncodeConfig(**kwargs))

    def __str__(self) -> str:
        return self.to_string()


class JsonLiteral(JsonValue):
    """The ``null``, ``true`` and ``false`` literals."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if text not in ("null", "true", "false"):
            raise ValueError(f"Not a JSON literal: {text!r}")
        self._text = text

    def is_null(self) -> bool:
        return self._text == "null"

    def is_boolean(self) -> bool:
        return self._text != "null"

    def is_true(self) -> bool:
        return self._text == "true"

    def is_false(self) -> bool:
        return self._text == "false"

    def as_boolean(self) -> bool:
        if self._text == "null":
            return super().as_boolean()
        return self._text == "true"

    @property
    def text(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonLiteral):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return self._text.upper()

    def __str__(self) -> str:
        return self._text


NULL = JsonLiteral("null")
TRUE = JsonLiteral("true")
FALSE = JsonLiteral("false")


class JsonNumber(JsonValue):
    """
    A JSON number kept as its exact source text.

    Conversions are computed on demand; the text itself is never
    renormalized, so ``1.0`` and ``1`` are different values.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError("text must be a string")
        if not _NUMBER_RE.fullmatch(text):
            raise ValueError(f"Not a JSON number: {text!r}")
        self._text = text

    @classmethod
    def _from_source(cls, text: str) -> "JsonNumber":
        # text was already matched against the number grammar by the parser
        number = cls.__new__(cls)
        number._text = text
        return number

    def is_number(self) -> bool:
        return True

    def _as_integer(self, low: int, high: int, kind: str) -> int:
        text = self._text
        if not _INTEGER_RE.fullmatch(text):
            raise NumberRangeError(f"Not an integral {kind}: {text}")
        if len(text.lstrip("-")) > _LONG_MAX_TEXT_LENGTH:
            raise NumberRangeError(f"Value out of {kind} range: {text}")
        value = int(text)
        if not low <= value <= high:
            raise NumberRangeError(f"Value out of {kind} range: {text}")
        return value

    def as_int(self) -> int:
        """Returns the value as a signed 32-bit integer."""
        return self._as_integer(INT_MIN, INT_MAX, "int")

    def as_long(self) -> int:
        """Returns the value as a signed 64-bit integer."""
        return self._as_integer(LONG_MIN, LONG_MAX, "long")

    def as_float(self) -> float:
        """Returns the value rounded to single precision."""
        try:
            packed = struct.pack("<f", float(self._text))
        except OverflowError as e:
            raise NumberRangeError(
                f"Value out of float range: {self._text}"
            ) from e
        value: float = struct.unpack("<f", packed)[0]
        if math.isinf(value):
            raise NumberRangeError(f"Value out of float range: {self._text}")
        return value

    def as_double(self) -> float:
        value = float(self._text)
        if math.isinf(value):
            raise NumberRangeError(f"Value out of double range: {self._text}")
        return value

    @property
    def text(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNumber):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"JsonNumber({self._text!r})"

    def __str__(self) -> str:
        return self._text


class JsonString(JsonValue):
    """A JSON string holding its decoded content."""

    __slots__ = ("_string",)

    def __init__(self, string: str) -> None:
        if not isinstance(string, str):
            raise TypeError("string must be a str")
        self._string = string

    def is_string(self) -> bool:
        return True

    def as_string(self) -> str:
        return self._string

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonString):
            return NotImplemented
        return self._string == other._string

    def __hash__(self) -> int:
        return hash(self._string)

    def __repr__(self) -> str:
        return f"JsonString({self._string!r})"


def _format_float(value: float) -> str:
    """Formats a float with the shortest text that reads back identically."""
    if math.isnan(value) or math.isinf(value):
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def value_of(obj: Any) -> JsonValue:  # noqa: PLR0911
    """
    Converts a Python primitive to its JSON value.

    Existing ``JsonValue`` instances are returned unchanged. Containers are
    not converted; build them with ``JsonObject`` and ``JsonArray``.
    """
    if isinstance(obj, JsonValue):
        return obj
    elif obj is None:
        return NULL
    elif obj is True:
        return TRUE
    elif obj is False:
        return FALSE
    elif isinstance(obj, int):
        return JsonNumber._from_source(str(int(obj)))
    elif isinstance(obj, float):
        return JsonNumber._from_source(_format_float(obj))
    elif isinstance(obj, str):
        return JsonString(obj)
    msg = f"Object of type {type(obj).__name__} is not a JSON value"
    raise TypeError(msg)
