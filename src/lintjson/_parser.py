"""
Buffered recursive-descent JSON parser.

Reads characters from a text stream through a fixed-size chunk buffer with
one character of lookahead. Token text (number digits and unescaped string
runs) is captured as slices of the chunk; a capture that outlives a refill
spills into a growable list of chunks.

::

                  buffer_offset
                  v
    input  [a|b|c|d|e|f|g|h|i|j|k|l|m|n|o|p|q|r|s|t]
    buffer                        [l|m|n|o|p|q|r|s|t]
                                       ^           ^
                                       index       fill
"""

import io
from dataclasses import dataclass
from typing import IO

from lintjson._containers import JsonArray
from lintjson._containers import JsonObject
from lintjson._containers import JsonSource
from lintjson._errors import ParseError
from lintjson._profile import ProfileContext
from lintjson._values import FALSE
from lintjson._values import NULL
from lintjson._values import TRUE
from lintjson._values import JsonNumber
from lintjson._values import JsonString
from lintjson._values import JsonValue

DEFAULT_BUFFER_SIZE = 1024
MIN_BUFFER_SIZE = 10

_WHITESPACE = frozenset(" \t\n\r")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_SURROGATES_START = 0xD800
_SURROGATES_END = 0xDFFF


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    ``buffer_size`` overrides the chunk size read from the stream.
    ``allow_comments`` blanks out ``//`` and ``/* */`` comments before
    parsing.
    """

    buffer_size: int | None = None
    allow_comments: bool = False

    def __post_init__(self) -> None:
        if self.buffer_size is not None:
            if not isinstance(self.buffer_size, int) or isinstance(
                self.buffer_size, bool
            ):
                raise TypeError("buffer_size must be an integer")
            if self.buffer_size < MIN_BUFFER_SIZE:
                msg = f"buffer_size must be at least {MIN_BUFFER_SIZE}"
                raise ValueError(msg)
        if not isinstance(self.allow_comments, bool):
            raise TypeError("allow_comments must be a boolean")


def _join_surrogate_pairs(text: str) -> str:
    # \uXXXX escapes produce UTF-16 code units; a high/low pair becomes the
    # code point it encodes, lone surrogates are kept as they are
    return text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


class JsonParser:
    """
    Single-use parser turning one character stream into one ``JsonValue``.

    ``current`` is ``""`` before the first read and ``None`` at the end of
    input.
    """

    def __init__(
        self, reader: IO[str], buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")
        self._reader = reader
        self._buffer_size = buffer_size
        self._buffer = ""
        self._buffer_offset = 0
        self._index = 0
        self._fill = 0
        self._line = 1
        self._line_offset = 0
        self._current: str | None = ""
        self._capture_buffer: list[str] = []
        self._capture_start = -1
        self._surrogates = False

    @classmethod
    def from_string(cls, text: str) -> "JsonParser":
        """Creates a parser whose buffer is sized to the input."""
        size = max(MIN_BUFFER_SIZE, min(DEFAULT_BUFFER_SIZE, len(text)))
        return cls(io.StringIO(text), size)

    def parse(self) -> JsonValue:
        """Reads exactly one value surrounded by optional whitespace."""
        with ProfileContext("parse"):
            self._read()
            self._skip_whitespace()
            result = self._read_value()
            self._skip_whitespace()
            if self._current is not None:
                raise self._error("Unexpected character")
            return result

    def _read_value(self) -> JsonValue:  # noqa: PLR0911
        current = self._current
        if current == "n":
            return self._read_literal("null", NULL)
        elif current == "t":
            return self._read_literal("true", TRUE)
        elif current == "f":
            return self._read_literal("false", FALSE)
        elif current == '"':
            return JsonString(self._read_string_internal())
        elif current == "[":
            return self._read_array()
        elif current == "{":
            return self._read_object()
        elif current == "-" or current in _DIGITS:
            return self._read_number()
        raise self._expected("value")

    def _read_array(self) -> JsonArray:
        with ProfileContext("read_array"):
            self._read()
            array = JsonArray()
            self._skip_whitespace()
            if self._read_char("]"):
                return array
            while True:
                self._skip_whitespace()
                array.add(self._read_value())
                self._skip_whitespace()
                if not self._read_char(","):
                    break
            if not self._read_char("]"):
                raise self._expected("',' or ']'")
            return array

    def _read_object(self) -> JsonObject:
        with ProfileContext("read_object"):
            self._read()
            obj = JsonObject()
            self._skip_whitespace()
            if self._read_char("}"):
                return obj
            while True:
                self._skip_whitespace()
                name = self._read_name()
                self._skip_whitespace()
                if not self._read_char(":"):
                    raise self._expected("':'")
                self._skip_whitespace()
                obj.add(name, self._read_value())
                self._skip_whitespace()
                if not self._read_char(","):
                    break
            if not self._read_char("}"):
                raise self._expected("',' or '}'")
            return obj

    def _read_name(self) -> str:
        if self._current != '"':
            raise self._expected("name")
        return self._read_string_internal()

    def _read_literal(self, text: str, value: JsonValue) -> JsonValue:
        self._read()
        for ch in text[1:]:
            if not self._read_char(ch):
                raise self._expected(f"'{ch}'")
        return value

    def _read_string_internal(self) -> str:
        with ProfileContext("read_string"):
            self._read()
            self._start_capture()
            while self._current != '"':
                current = self._current
                if current == "\\":
                    self._pause_capture()
                    self._read_escape()
                    self._start_capture()
                elif current is None or current < " ":
                    raise self._expected("valid string character")
                else:
                    self._read()
            string = self._end_capture()
            self._read()
            if self._surrogates:
                self._surrogates = False
                return _join_surrogate_pairs(string)
            return string

    def _read_escape(self) -> None:
        self._read()
        current = self._current
        if current is not None and current in _ESCAPES:
            self._capture_buffer.append(_ESCAPES[current])
        elif current == "u":
            hex_chars = []
            for _ in range(4):
                self._read()
                if self._current is None or self._current not in _HEX_DIGITS:
                    raise self._expected("hexadecimal digit")
                hex_chars.append(self._current)
            code_unit = int("".join(hex_chars), 16)
            if _SURROGATES_START <= code_unit <= _SURROGATES_END:
                self._surrogates = True
            self._capture_buffer.append(chr(code_unit))
        else:
            raise self._expected("valid escape sequence")
        self._read()

    def _read_number(self) -> JsonNumber:
        with ProfileContext("read_number"):
            self._start_capture()
            self._read_char("-")
            first_digit = self._current
            if not self._read_digit():
                raise self._expected("digit")
            if first_digit != "0":
                while self._read_digit():
                    pass
            self._read_fraction()
            self._read_exponent()
            return JsonNumber._from_source(self._end_capture())

    def _read_fraction(self) -> bool:
        if not self._read_char("."):
            return False
        if not self._read_digit():
            raise self._expected("digit")
        while self._read_digit():
            pass
        return True

    def _read_exponent(self) -> bool:
        if not self._read_char("e") and not self._read_char("E"):
            return False
        if not self._read_char("+"):
            self._read_char("-")
        if not self._read_digit():
            raise self._expected("digit")
        while self._read_digit():
            pass
        return True

    def _read_char(self, ch: str) -> bool:
        if self._current != ch:
            return False
        self._read()
        return True

    def _read_digit(self) -> bool:
        if self._current is None or self._current not in _DIGITS:
            return False
        self._read()
        return True

    def _skip_whitespace(self) -> None:
        while self._current is not None and self._current in _WHITESPACE:
            self._read()

    def _read(self) -> None:
        if self._current is None:
            raise self._error("Unexpected end of input")
        if self._current == "\n":
            self._line += 1
            self._line_offset = self._buffer_offset + self._index
        if self._index == self._fill:
            if self._capture_start != -1:
                self._capture_buffer.append(
                    self._buffer[self._capture_start : self._fill]
                )
                self._capture_start = 0
            self._buffer_offset += self._fill
            self._buffer = self._reader.read(self._buffer_size)
            self._fill = len(self._buffer)
            self._index = 0
            if not self._fill:
                self._current = None
                return
        self._current = self._buffer[self._index]
        self._index += 1

    def _start_capture(self) -> None:
        self._capture_start = self._index - 1

    def _pause_capture(self) -> None:
        end = self._index if self._current is None else self._index - 1
        self._capture_buffer.append(self._buffer[self._capture_start : end])
        self._capture_start = -1

    def _end_capture(self) -> str:
        end = self._index if self._current is None else self._index - 1
        if self._capture_buffer:
            self._capture_buffer.append(self._buffer[self._capture_start : end])
            captured = "".join(self._capture_buffer)
            self._capture_buffer.clear()
        else:
            captured = self._buffer[self._capture_start : end]
        self._capture_start = -1
        return captured

    def _error(self, message: str) -> ParseError:
        absolute = self._buffer_offset + self._index
        offset = absolute if self._current is None else absolute - 1
        column = offset - self._line_offset
        return ParseError(message, offset, self._line, column)

    def _expected(self, expected: str) -> ParseError:
        if self._current is None:
            return self._error("Unexpected end of input")
        return self._error(f"Expected {expected}")


def parse(source: JsonSource, config: ParseConfig | None = None) -> JsonValue:
    """
    Parses a JSON document from a string or a text stream.

    Streams are consumed to the end but not closed; closing stays with the
    caller that opened them.
    """
    config = config or ParseConfig()
    if config.allow_comments:
        from lintjson._comments import strip_comments

        text = source if isinstance(source, str) else source.read()
        source = strip_comments(text)

    if isinstance(source, str):
        if config.buffer_size is None:
            parser = JsonParser.from_string(source)
        else:
            parser = JsonParser(io.StringIO(source), config.buffer_size)
    else:
        parser = JsonParser(source, config.buffer_size or DEFAULT_BUFFER_SIZE)
    return parser.parse()
