"""Loader for the line-oriented ``.fa`` automaton format.

Layout::

    <alphabet symbols separated by spaces>
    <number of states>
    <start state>
    <id> <accept 0|1> <count> [<symbol> <dest>]*     (one line per state)

Example, an automaton over {0, 1} accepting strings that contain "10"::

    0 1
    3
    0
    0 0 3 0 0 1 0 1 1
    1 0 1 0 2
    2 1 2 0 2 1 2

The epsilon marker ``&`` may label transitions but not appear in the
alphabet. Loading stops at the first error, reported as a
:class:`~nfasim.exceptions.LoadError` with its line number.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from nfasim.automaton.automaton import EPSILON, Automaton, Symbol
from nfasim.exceptions import LoadError

logger = logging.getLogger(__name__)


class FAParser:
    """Populates an :class:`Automaton` from ``.fa`` text."""

    def __init__(self, text: str):
        self.text = text
        self._lines: Iterator[Tuple[int, str]] = iter(())
        self._line_no = 0

    def parse(self, automaton: Optional[Automaton] = None) -> Automaton:
        """Parse the text into ``automaton`` (reset first) or a new one."""
        self._lines = enumerate(self.text.splitlines(), 1)
        self._line_no = 0
        if automaton is None:
            automaton = Automaton()
        automaton.reset()

        self._parse_alphabet(automaton)
        num_states = self._parse_num_states(automaton)
        self._parse_start_state(automaton, num_states)
        for _ in range(num_states):
            self._parse_state_line(automaton, num_states)

        logger.debug("Loaded %r", automaton)
        return automaton

    def _next_line(self, missing: str) -> str:
        try:
            self._line_no, line = next(self._lines)
        except StopIteration:
            raise LoadError(missing, self._line_no + 1) from None
        return line

    def _error(self, message: str) -> LoadError:
        return LoadError(message, self._line_no)

    def _int(self, token: str, message: str) -> int:
        try:
            return int(token)
        except ValueError:
            raise self._error(f"{message}: {token!r}") from None

    def _symbol(self, token: str, kind: str) -> Symbol:
        if len(token) != 1:
            raise self._error(f"{kind} symbol must be a single character: {token!r}")
        return token

    def _parse_alphabet(self, automaton: Automaton) -> None:
        line = self._next_line("empty file, expected the alphabet line")
        for token in line.split():
            symbol = self._symbol(token, "alphabet")
            if symbol == EPSILON:
                raise self._error(
                    f"'{EPSILON}' is reserved for epsilon and cannot be in the alphabet"
                )
            if not automaton.add_symbol(symbol):
                raise self._error(f"cannot add alphabet symbol {symbol!r}")
        logger.debug("Alphabet: %s", sorted(automaton.alphabet))

    def _parse_num_states(self, automaton: Automaton) -> int:
        tokens = self._next_line("missing number of states").split()
        if not tokens:
            raise self._error("missing number of states")
        num_states = self._int(tokens[0], "invalid number of states")
        if num_states < 1 or not automaton.set_num_states(num_states):
            raise self._error(f"number of states must be at least 1, got {num_states}")
        return num_states

    def _parse_start_state(self, automaton: Automaton, num_states: int) -> None:
        tokens = self._next_line("missing start state").split()
        if not tokens:
            raise self._error("missing start state")
        start = self._int(tokens[0], "invalid start state")
        if not 0 <= start < num_states:
            raise self._error(f"start state out of range: {start}")
        if not automaton.set_start_state(start):
            raise self._error(f"cannot set start state {start}")

    def _parse_state_line(self, automaton: Automaton, num_states: int) -> None:
        line = self._next_line(
            f"missing state lines, expected {num_states} (one per state)"
        )
        tokens: List[str] = line.split()
        if len(tokens) < 3:
            raise self._error(f"state line must be 'id accept count': {line.strip()!r}")

        state = self._int(tokens[0], "invalid state id")
        accept = self._int(tokens[1], "invalid accept flag")
        count = self._int(tokens[2], "invalid transition count")
        if not 0 <= state < num_states:
            raise self._error(f"state id out of range: {state}")
        if accept not in (0, 1):
            raise self._error(f"accept flag must be 0 or 1, got {accept}")
        if count < 0:
            raise self._error(f"negative transition count: {count}")
        if accept == 1 and not automaton.add_accepting_state(state):
            raise self._error(f"cannot mark state {state} as accepting")

        pairs = tokens[3:]
        if len(pairs) < 2 * count:
            raise self._error(
                f"state {state} declares {count} transitions "
                f"but only {len(pairs) // 2} are given"
            )
        for i in range(count):
            symbol = self._symbol(pairs[2 * i], "transition")
            target = self._int(pairs[2 * i + 1], "invalid destination state")
            if not automaton.is_known_symbol(symbol):
                raise self._error(f"transition symbol {symbol!r} is not in the alphabet")
            if not 0 <= target < num_states:
                raise self._error(
                    f"destination state out of range in transition from {state}: {target}"
                )
            if not automaton.add_transition(state, symbol, target):
                raise self._error(f"cannot add transition {state} -{symbol}-> {target}")
            logger.debug("Transition %d -%s-> %d", state, symbol, target)


def parse_automaton(text: str, automaton: Optional[Automaton] = None) -> Automaton:
    """Parse ``.fa`` text.

    Args:
        text: The automaton description.
        automaton: Optional automaton to populate; it is reset first.

    Returns:
        The populated automaton.

    Raises:
        LoadError: On the first malformed or invalid record.
    """
    return FAParser(text).parse(automaton)


def load_automaton(path: str, automaton: Optional[Automaton] = None) -> Automaton:
    """Load an automaton from a ``.fa`` file.

    Raises:
        LoadError: If the file cannot be read or its content is invalid.
    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise LoadError(f"cannot open automaton file {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise LoadError(f"automaton file {path} is not valid UTF-8: {e.reason}") from e
    logger.debug("Read automaton file %s", path)
    return parse_automaton(text, automaton)
