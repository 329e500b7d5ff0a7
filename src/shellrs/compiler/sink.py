"""
Output Sinks for Generated Code.

`CodeSink` writes indented lines to a text stream. `open_executable` owns the
single file handle of an emission run and guarantees it is closed on every
exit path.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TextIO, Union

EXECUTABLE_MODE = 0o755


class CodeSink:
  """
  Line-oriented writer with explicit indentation.

  Attributes:
      stream (TextIO): Destination stream.
  """

  def __init__(self, stream: TextIO) -> None:
    self.stream = stream

  def line(self, indent: int, text: str = "") -> None:
    """
    Writes one line prefixed by `indent` spaces.

    Args:
        indent (int): Number of leading spaces.
        text (str): Line content, without newline.
    """
    self.stream.write(" " * indent + text + "\n")


@dataclass(frozen=True)
class EmissionContext:
  """
  Position of the statement being emitted within its body.
  """

  indent: int
  """Leading spaces for the statement."""

  index: int
  """0-based position in the enclosing body."""

  length: int
  """Number of statements in the enclosing body."""

  @property
  def is_last(self) -> bool:
    return self.index == self.length - 1


@contextmanager
def open_executable(path: Union[str, Path]) -> Iterator[CodeSink]:
  """
  Creates (or truncates) `path` with owner-executable permissions.

  The mode is applied at creation time only, as with ``open(2)``.

  Args:
      path: Destination file.

  Yields:
      CodeSink: Writer bound to the open file.

  Raises:
      OSError: If the file cannot be created or written.
  """
  fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, EXECUTABLE_MODE)
  with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as stream:
    yield CodeSink(stream)
