"""Normalization of lines read from a strings file."""

from dataclasses import dataclass
from typing import Optional

from nfasim.config import Config


@dataclass(frozen=True)
class InputLine:
    """A line from a strings file.

    Attributes:
        original: The line with surrounding whitespace removed, as printed.
        text: The string to simulate; ``""`` for the empty string.
    """

    original: str
    text: str


def parse_input_line(line: str, config: Optional[Config] = None) -> InputLine:
    """Split a strings-file line into its printable form and its test string.

    Two layouts are accepted: ``<string>`` and ``<N> <string>`` where ``N`` is
    an all-digit label. A line holding only digits is a string of digits. The
    empty-string marker and blank lines both stand for the empty string.

    Example:
        >>> parse_input_line("  3 abba\\n")
        InputLine(original='3 abba', text='abba')
        >>> parse_input_line("&").text
        ''
    """
    config = config or Config.default()
    original = line.strip()

    text = original
    if config.strip_numeric_labels:
        parts = original.split(None, 1)
        if len(parts) == 2 and all(c in "0123456789" for c in parts[0]):
            text = parts[1].strip()

    if text == config.empty_string_marker:
        text = ""
    return InputLine(original=original, text=text)
