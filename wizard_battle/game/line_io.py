"""
Line source and sink used by the game.

The game only needs two capabilities: pull the next text line from a
finite, non-restartable source, and push output lines in order to a sink.
Files, lists and streams all fit behind these two classes.
"""

from pathlib import Path
from typing import IO, Iterable, Iterator, Optional, Union

from ..core.errors import InvalidInputError


class LineSource:
    """Lazy reader over an iterable of lines.

    Lines may be ``str`` or UTF-8 ``bytes``; byte lines are decoded one at a
    time, so a bad byte only affects the line that holds it. During setup a
    line that cannot be read is fatal; in the command loop it ends the input.
    """

    def __init__(self, lines: Iterable[Union[str, bytes]]):
        self._lines: Iterator[Union[str, bytes]] = iter(lines)
        self.lines_read = 0
        self.exhausted = False

    @classmethod
    def from_text(cls, text: str) -> "LineSource":
        return cls(text.splitlines())

    def _pull(self) -> Optional[str]:
        """Next line without its line ending, or None at end of input.

        Raises:
            OSError: if the underlying stream fails
            UnicodeDecodeError: if a byte line is not valid UTF-8
        """
        if self.exhausted:
            return None
        try:
            raw = next(self._lines)
        except StopIteration:
            self.exhausted = True
            return None
        self.lines_read += 1
        line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def next_line(self) -> str:
        """Return the next line, failing if the input ended early.

        Raises:
            InvalidInputError: on premature end of input or read failure
        """
        try:
            line = self._pull()
        except (OSError, UnicodeDecodeError) as e:
            self.exhausted = True
            raise InvalidInputError(f"Unreadable input on line {self.lines_read}: {e}") from e
        if line is None:
            raise InvalidInputError(f"Input ended after {self.lines_read} lines")
        return line

    def __iter__(self) -> Iterator[str]:
        """Yield remaining lines; an unreadable line ends the input."""
        while True:
            try:
                line = self._pull()
            except (OSError, UnicodeDecodeError):
                self.exhausted = True
                return
            if line is None:
                return
            yield line



class LineSink:
    """Ordered collector of output lines."""

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def extend(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_line(line)

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def write_to(self, target: Union[str, Path, IO[str]]) -> None:
        """Write every collected line to a path or an open text stream."""
        if isinstance(target, (str, Path)):
            with open(target, "w", encoding="utf-8") as f:
                f.write(self.render())
        else:
            target.write(self.render())
