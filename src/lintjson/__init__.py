"""
Streaming JSON value model, parser and writers for linter integrations.

Parses text into an ordered, mutable value model with exact error locations,
and serializes the model back in compact or pretty-printed form. Commented
configuration files are supported through a length-preserving comment
stripper.
"""

import os
from typing import IO
from typing import Any

from lintjson._comments import strip_comments
from lintjson._containers import HashIndexTable
from lintjson._containers import JsonArray
from lintjson._containers import JsonObject
from lintjson._containers import Member
from lintjson._containers import ReadOnlyList
from lintjson._errors import NumberRangeError
from lintjson._errors import ParseError
from lintjson._errors import ReadOnlyError
from lintjson._errors import TypeMismatchError
from lintjson._parser import DEFAULT_BUFFER_SIZE
from lintjson._parser import MIN_BUFFER_SIZE
from lintjson._parser import JsonParser
from lintjson._parser import ParseConfig
from lintjson._parser import parse
from lintjson._profile import HotPathStats
from lintjson._profile import clear_hot_path_stats
from lintjson._profile import get_hot_path_stats
from lintjson._values import FALSE
from lintjson._values import NULL
from lintjson._values import TRUE
from lintjson._values import JsonLiteral
from lintjson._values import JsonNumber
from lintjson._values import JsonString
from lintjson._values import JsonValue
from lintjson._values import value_of
from lintjson._writer import EncodeConfig
from lintjson._writer import JsonWriter
from lintjson._writer import PrettyPrintJsonWriter
from lintjson._writer import encode
from lintjson._writer import writer_for
from lintjson.text import Text

__version__ = "0.1.0"


def loads(s: str, **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document held in a string.

    Keyword arguments build a ``ParseConfig``.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the JSON document must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    return parse(s, config)


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document from a text stream, chunk by chunk.

    The stream is read to the end and left open.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    config = ParseConfig(**kwargs)
    return parse(fp, config)


def load_file(
    path: str | os.PathLike[str], encoding: str = "utf-8", **kwargs: Any
) -> JsonValue:
    """Parses a JSON file; the file is closed on success and on failure."""
    with open(path, encoding=encoding) as fp:
        return load(fp, **kwargs)


def dumps(value: Any, **kwargs: Any) -> str:
    """
    Serializes a JSON value to a string.

    Python primitives are accepted and converted with ``value_of``.
    Keyword arguments build an ``EncodeConfig``.
    """
    config = EncodeConfig(**kwargs)
    return encode(value_of(value), config)


def dump(value: Any, fp: IO[str], **kwargs: Any) -> None:
    """Serializes a JSON value to a text stream."""
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    config = EncodeConfig(**kwargs)
    writer_for(fp, config).write_value(value_of(value))


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "FALSE",
    "MIN_BUFFER_SIZE",
    "NULL",
    "TRUE",
    "EncodeConfig",
    "HashIndexTable",
    "HotPathStats",
    "JsonArray",
    "JsonLiteral",
    "JsonNumber",
    "JsonObject",
    "JsonParser",
    "JsonString",
    "JsonValue",
    "JsonWriter",
    "Member",
    "NumberRangeError",
    "ParseConfig",
    "ParseError",
    "PrettyPrintJsonWriter",
    "ReadOnlyError",
    "ReadOnlyList",
    "Text",
    "TypeMismatchError",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "load",
    "load_file",
    "loads",
    "parse",
    "strip_comments",
    "value_of",
]
