"""
Comment stripping for commented JSON configuration files.

``//`` line comments and ``/* */`` block comments are overwritten with
spaces so that the result has the same length and the same line breaks as
the input, which keeps parse error positions valid for the original text.

By default the scan does not know about string literals: a ``//`` inside a
string such as ``"http://host"`` starts a comment and corrupts the value.
Existing configuration files rely on this behavior, so it stays the
default; pass ``respect_strings=True`` for a scan that skips string
literals.
"""

from lintjson._profile import ProfileContext

_LINE_FEED = "\n"
_CARRIAGE_RETURN = "\r"
_SLASH = "/"
_ASTERISK = "*"
_SPACE = " "


def strip_comments(text: str, *, respect_strings: bool = False) -> str:
    """Returns ``text`` with comment characters replaced by spaces."""
    with ProfileContext("strip_comments", len(text)):
        if respect_strings:
            return _strip_outside_strings(text)
        return _strip(text)


def _strip(text: str) -> str:
    chars = list(text)
    last = ""
    in_line_comment = False
    in_block_comment = False

    for i, ch in enumerate(text):
        if in_line_comment:
            if ch in (_CARRIAGE_RETURN, _LINE_FEED):
                in_line_comment = False
            else:
                chars[i] = _SPACE
        elif in_block_comment:
            if last == _ASTERISK and ch == _SLASH:
                in_block_comment = False
            chars[i] = _LINE_FEED if ch == _LINE_FEED else _SPACE
        elif last == _SLASH and ch == _SLASH:
            in_line_comment = True
            chars[i - 1] = _SPACE
            chars[i] = _SPACE
        elif last == _SLASH and ch == _ASTERISK:
            in_block_comment = True
            chars[i - 1] = _SPACE
            chars[i] = _SPACE
        last = ch

    return "".join(chars)


def _strip_outside_strings(text: str) -> str:
    chars = list(text)
    in_string = False
    escaped = False
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < length else ""
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            i += 1
        elif ch == '"':
            in_string = True
            i += 1
        elif ch == _SLASH and nxt == _SLASH:
            while i < length and text[i] not in (_CARRIAGE_RETURN, _LINE_FEED):
                chars[i] = _SPACE
                i += 1
        elif ch == _SLASH and nxt == _ASTERISK:
            chars[i] = chars[i + 1] = _SPACE
            i += 2
            while i < length:
                if text.startswith("*/", i):
                    chars[i] = chars[i + 1] = _SPACE
                    i += 2
                    break
                if text[i] != _LINE_FEED:
                    chars[i] = _SPACE
                i += 1
        else:
            i += 1

    return "".join(chars)
