"""Line index over a source text, used to place linter markers."""

from typing import IO
from typing import Final

DEFAULT_INDENT_WIDTH: Final = 4

_LINE_FEED: Final = "\n"
_CARRIAGE_RETURN: Final = "\r"
_TAB: Final = "\t"


class Text:
    """
    Immutable source text with the offset of every line's first character.

    LF, CRLF and CR each end a line. Text after the last line break is a
    line of its own, and a trailing line break opens an empty final line.
    Empty text has no lines at all.
    """

    __slots__ = ("_content", "_line_offsets")

    def __init__(self, content: str) -> None:
        if not isinstance(content, str):
            raise TypeError("content must be a string")
        self._content: Final = content
        self._line_offsets: Final = _line_offsets(content)

    @classmethod
    def from_reader(cls, reader: IO[str]) -> "Text":
        """Reads the stream to the end; the stream is not closed."""
        return cls(reader.read())

    @property
    def content(self) -> str:
        return self._content

    @property
    def line_count(self) -> int:
        return len(self._line_offsets)

    def line_offset(self, line: int) -> int:
        """Returns the offset of the first character of a zero-based line."""
        self._check_line(line)
        return self._line_offsets[line]

    def line_length(self, line: int) -> int:
        """Returns the length of a zero-based line, including its line break."""
        self._check_line(line)
        if line + 1 == len(self._line_offsets):
            next_offset = len(self._content)
        else:
            next_offset = self._line_offsets[line + 1]
        return next_offset - self._line_offsets[line]

    def visual_to_char_index(
        self,
        line: int,
        column: int,
        indent_width: int = DEFAULT_INDENT_WIDTH,
    ) -> int:
        """
        Converts a visual column to a character index within the line.

        Linters report 1-based "visual" columns in which a tab counts as
        ``indent_width`` columns. With an indent width of 4::

                    "a\\tb\\tc"

            index:  | 0 | 1 | 2 | 3 | 4 |
            char:   | a | » | b | » | c |
            visual: | 1 | 2 . . . | 6 | 7 . . . | 11|

        Args:
            line: 1-based line number
            column: 1-based visual column
            indent_width: number of visual columns a tab occupies

        Returns:
            Zero-based character index within the line, never past the end
            of the content
        """
        content = self._content
        offset = self.line_offset(line - 1)
        max_char_index = len(content) - offset - 1
        char_index = 0
        visual_index = 1
        while visual_index != column and char_index < max_char_index:
            is_tab = content[offset + char_index] == _TAB
            visual_index += indent_width if is_tab else 1
            char_index += 1
        return char_index

    def visual_to_offset(
        self,
        line: int,
        column: int,
        indent_width: int = DEFAULT_INDENT_WIDTH,
    ) -> int:
        """Converts a 1-based line and visual column to an absolute offset."""
        index = self.visual_to_char_index(line, column, indent_width)
        return self._line_offsets[line - 1] + index

    def _check_line(self, line: int) -> None:
        if line < 0 or line >= len(self._line_offsets):
            raise IndexError(f"The line {line} does not exist.")

    def __repr__(self) -> str:
        return f"Text(lines={self.line_count}, length={len(self._content)})"


def _line_offsets(content: str) -> list[int]:
    if not content:
        return []
    offsets = [0]
    previous = ""
    for index, ch in enumerate(content):
        if ch == _LINE_FEED:
            offsets.append(index + 1)
        elif previous == _CARRIAGE_RETURN:
            offsets.append(index)
        previous = ch
    if previous == _CARRIAGE_RETURN:
        offsets.append(len(content))
    return offsets
