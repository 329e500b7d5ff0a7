"""
String Interpolation Rewriting.

Turns shell-style ``${name}`` markers into positional ``{}`` placeholders and
collects the referenced names in order of appearance.

Example::

    >>> split_interpolations("${a} aa ${b} bb ${cc}")
    ('{} aa {} bb {}', ['a', 'b', 'cc'])
"""

from typing import List, Tuple

MARKER = "$"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
PLACEHOLDER = "{}"


def split_interpolations(text: str) -> Tuple[str, List[str]]:
  """
  Scans `text` once, replacing every ``${ident}`` with a placeholder.

  A ``$`` not immediately followed by ``{`` is copied verbatim. An unterminated
  marker consumes the rest of the input as its identifier. Braces do not nest
  and there is no escaping.

  Args:
      text (str): Input fragment.

  Returns:
      Tuple[str, List[str]]: The positional template and the identifiers,
      left to right, duplicates preserved.
  """
  template: List[str] = []
  identifiers: List[str] = []
  i = 0
  n = len(text)

  while i < n:
    c = text[i]
    if c == MARKER and i + 1 < n and text[i + 1] == OPEN_BRACE:
      end = text.find(CLOSE_BRACE, i + 2)
      if end == -1:
        end = n
      identifiers.append(text[i + 2 : end])
      template.append(PLACEHOLDER)
      i = end + 1
    else:
      template.append(c)
      i += 1

  return "".join(template), identifiers


def format_arguments(text: str) -> str:
  """
  Renders `text` as a format-call argument list.

  The template comes first, followed by ``, ident`` for every extracted
  identifier.

  Args:
      text (str): Space-joined rendered arguments.

  Returns:
      str: e.g. ``"{} aa {}", a, b``.
  """
  template, identifiers = split_interpolations(text)
  return template + "".join(f", {name}" for name in identifiers)
