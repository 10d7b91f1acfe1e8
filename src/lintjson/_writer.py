"""
Compact and pretty-printing JSON writers.

``JsonWriter.write_value`` dispatches over the closed set of value variants
in one place; the structural tokens go through small hook methods that
``PrettyPrintJsonWriter`` overrides to add whitespace.
"""

import io
import re
from dataclasses import dataclass
from typing import IO

from lintjson._containers import JsonArray
from lintjson._containers import JsonObject
from lintjson._profile import ProfileContext
from lintjson._values import JsonLiteral
from lintjson._values import JsonNumber
from lintjson._values import JsonString
from lintjson._values import JsonValue

INDENT_SPACE = "    "

_ESCAPE_RE = re.compile(r'[\x00-\x1f"\\]')
_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
for _code in range(0x20):
    _ESCAPES.setdefault(chr(_code), f"\\u{_code:04x}")
del _code


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures JSON encoding behavior with immutable settings.

    ``pretty`` selects the indented form written by
    ``PrettyPrintJsonWriter``; the default is compact output.
    """

    pretty: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.pretty, bool):
            raise TypeError("pretty must be a boolean")


def escape_string(s: str) -> str:
    """Escapes quotes, backslashes and control characters below 0x20."""
    if _ESCAPE_RE.search(s) is None:
        return s
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group()], s)


class JsonWriter:
    """Writes values as compact JSON to a text stream."""

    def __init__(self, out: IO[str]) -> None:
        self.out = out

    def write_value(self, value: JsonValue) -> None:
        """Writes any JSON value."""
        if isinstance(value, JsonObject):
            self.write_object(value)
        elif isinstance(value, JsonArray):
            self.write_array(value)
        elif isinstance(value, JsonString):
            self.write_string(value.as_string())
        elif isinstance(value, JsonNumber):
            self.out.write(value.text)
        elif isinstance(value, JsonLiteral):
            self.out.write(value.text)
        else:
            msg = f"Object of type {type(value).__name__} is not a JSON value"
            raise TypeError(msg)

    def write_object(self, obj: JsonObject) -> None:
        with ProfileContext("write_object"):
            if obj.is_empty():
                self.out.write("{}")
                return
            self.write_begin_object()
            for index, member in enumerate(obj):
                if index:
                    self.write_object_value_separator()
                self.write_string(member.name)
                self.write_name_value_separator()
                self.write_value(member.value)
            self.write_end_object()

    def write_array(self, array: JsonArray) -> None:
        with ProfileContext("write_array"):
            if array.is_empty():
                self.out.write("[]")
                return
            self.write_begin_array()
            for index, value in enumerate(array):
                if index:
                    self.write_array_value_separator()
                self.write_value(value)
            self.write_end_array()

    def write_string(self, s: str) -> None:
        with ProfileContext("write_string", len(s)):
            self.out.write('"')
            self.out.write(escape_string(s))
            self.out.write('"')

    def write_begin_object(self) -> None:
        self.out.write("{")

    def write_end_object(self) -> None:
        self.out.write("}")

    def write_name_value_separator(self) -> None:
        self.out.write(":")

    def write_object_value_separator(self) -> None:
        self.out.write(",")

    def write_begin_array(self) -> None:
        self.out.write("[")

    def write_end_array(self) -> None:
        self.out.write("]")

    def write_array_value_separator(self) -> None:
        self.out.write(",")


class PrettyPrintJsonWriter(JsonWriter):
    """
    Writes values as indented JSON.

    Object members go on their own lines, indented by four spaces per
    object nesting level. Array elements stay on one line separated by
    ``", "``.
    """

    def __init__(self, out: IO[str]) -> None:
        super().__init__(out)
        self._indent = 0

    def write_begin_object(self) -> None:
        super().write_begin_object()
        self._indent += 1
        self._write_newline()

    def write_end_object(self) -> None:
        self._indent -= 1
        self._write_newline()
        super().write_end_object()

    def write_name_value_separator(self) -> None:
        super().write_name_value_separator()
        self.out.write(" ")

    def write_object_value_separator(self) -> None:
        super().write_object_value_separator()
        self._write_newline()

    def write_array_value_separator(self) -> None:
        super().write_array_value_separator()
        self.out.write(" ")

    def _write_newline(self) -> None:
        self.out.write("\n")
        self.out.write(INDENT_SPACE * self._indent)


def writer_for(out: IO[str], config: EncodeConfig) -> JsonWriter:
    """Returns the writer selected by ``config``."""
    if config.pretty:
        return PrettyPrintJsonWriter(out)
    return JsonWriter(out)


def encode(value: JsonValue, config: EncodeConfig) -> str:
    """Serializes ``value`` to a string."""
    out = io.StringIO()
    writer_for(out, config).write_value(value)
    return out.getvalue()
