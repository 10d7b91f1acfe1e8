"""Helpers for commented JSON configuration documents."""

import logging

from lintjson._comments import strip_comments
from lintjson._containers import JsonObject
from lintjson._errors import ParseError
from lintjson._errors import TypeMismatchError
from lintjson._parser import parse
from lintjson._writer import EncodeConfig
from lintjson._writer import encode

_LOG = logging.getLogger(__name__)


def read_config(text: str) -> JsonObject:
    """Parses a configuration object, ignoring comments."""
    return parse(strip_comments(text)).as_object()


def json_equals(first: str | None, second: str | None) -> bool:
    """
    Tells whether two configuration texts hold equal objects.

    Identical texts are equal without parsing. Texts that do not parse to
    objects are never equal to anything else.
    """
    if first == second:
        return True
    if first is None or second is None:
        return False
    try:
        return read_config(first) == read_config(second)
    except (ParseError, TypeMismatchError) as exc:
        _LOG.debug("configurations not comparable", exc_info=exc)
        return False


def pretty_print(config: JsonObject | str) -> str:
    """Formats a configuration object, or configuration text, for editing."""
    if isinstance(config, str):
        config = read_config(config)
    return encode(config, EncodeConfig(pretty=True))
