"""
Conversion of linter reports into positioned problems.

The linter reports 1-based lines and visual columns; editor markers need
character indices. ``create_problem`` validates the reported line against
the source text and converts the column with the configured indent width.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from lintjson._containers import JsonObject
from lintjson._errors import NumberRangeError
from lintjson.text import DEFAULT_INDENT_WIDTH
from lintjson.text import Text

_LOG = logging.getLogger(__name__)

DEFAULT_INDENT = DEFAULT_INDENT_WIDTH


@dataclass(frozen=True)
class Problem:
    """
    A problem found by the linter.

    ``line`` is 1-based and ``character`` a zero-based index within that
    line; both are -1 when the reported position lies outside the text.
    """

    line: int
    character: int
    message: str
    code: str

    @property
    def is_error(self) -> bool:
        """Errors carry a code starting with ``E``, warnings do not."""
        return self.code.startswith("E")


def determine_indent(configuration: JsonObject) -> int:
    """Returns the ``indent`` option of a linter configuration."""
    value = configuration.get("indent")
    if value is not None and value.is_number():
        try:
            return value.as_int()
        except NumberRangeError:
            _LOG.debug("ignoring non-integral indent %s", value)
    return DEFAULT_INDENT


def _int_property(error: Mapping[str, Any], key: str, default: int) -> int:
    value = error.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return default
    return int(value)


def _str_property(error: Mapping[str, Any], key: str, default: str) -> str:
    value = error.get(key)
    return default if value is None else str(value)


def create_problem(
    error: Mapping[str, Any], text: Text, indent: int = DEFAULT_INDENT
) -> Problem:
    """
    Creates a problem from a linter error report.

    Args:
        error: report with ``reason``, ``line``, ``character`` and ``code``
        text: the linted source
        indent: visual width of a tab character

    Returns:
        Problem positioned on a character index of ``text``
    """
    reason = _str_property(error, "reason", "")
    line = _int_property(error, "line", -1)
    character = _int_property(error, "character", -1)
    code = _str_property(error, "code", "")

    if line <= 0 or line > text.line_count:
        _LOG.debug("problem line %d outside of %d lines", line, text.line_count)
        line = -1
        character = -1
    elif character > 0:
        character = text.visual_to_char_index(line, character, indent)

    return Problem(line, character, reason, code)
