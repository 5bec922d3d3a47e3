"""Readers for automaton files and strings files."""

from nfasim.parser.fa_parser import FAParser, load_automaton, parse_automaton
from nfasim.parser.input_line import InputLine, parse_input_line

__all__ = [
    "FAParser",
    "load_automaton",
    "parse_automaton",
    "InputLine",
    "parse_input_line",
]
