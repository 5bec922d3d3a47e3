"""Configuration for loading and batch-testing automata."""

import logging
from dataclasses import dataclass

from nfasim.automaton.automaton import EPSILON


@dataclass
class Config:
    """Settings shared by the loader, the input-line reader and the CLI.

    Attributes:
        empty_string_marker: Token in a strings file that stands for the
            zero-length input.
        strip_numeric_labels: Drop a leading all-digit token ("3 abba")
            before testing the rest of the line.
        trace: Print a step-by-step simulation trace for every string.
        log_level: Level passed to ``logging.basicConfig`` by the CLI.
    """

    empty_string_marker: str = EPSILON
    strip_numeric_labels: bool = True
    trace: bool = False
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if not self.empty_string_marker:
            raise ValueError("empty_string_marker must not be empty")

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration."""
        return cls()
