"""Atomic construction of automata from a complete definition."""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from nfasim.automaton.automaton import EPSILON, Automaton, State, Symbol
from nfasim.exceptions import AutomatonValidationError


@dataclass
class AutomatonBuilder:
    """Collects an automaton definition and validates it as a whole.

    Unlike the incremental :class:`Automaton` mutators, nothing depends on
    call order: the state count may be given last, and every problem is
    reported together by :meth:`build`. Transition symbols must belong to the
    alphabet unless they are epsilon.

    Example:
        >>> fa = (
        ...     AutomatonBuilder(num_states=2, start=0)
        ...     .symbols("ab")
        ...     .accept(1)
        ...     .transition(0, "a", 1)
        ...     .build()
        ... )
    """

    num_states: int = 0
    start: Optional[State] = None
    alphabet: Set[Symbol] = field(default_factory=set)
    accepting: Set[State] = field(default_factory=set)
    transitions: List[Tuple[State, Symbol, State]] = field(default_factory=list)

    def states(self, num_states: int) -> "AutomatonBuilder":
        self.num_states = num_states
        return self

    def start_at(self, state: State) -> "AutomatonBuilder":
        self.start = state
        return self

    def symbols(self, symbols: str) -> "AutomatonBuilder":
        self.alphabet.update(symbols)
        return self

    def accept(self, *states: State) -> "AutomatonBuilder":
        self.accepting.update(states)
        return self

    def transition(self, source: State, symbol: Symbol, target: State) -> "AutomatonBuilder":
        self.transitions.append((source, symbol, target))
        return self

    def validate(self) -> List[str]:
        """Return every validation error; an empty list means valid."""
        errors: List[str] = []
        n = self.num_states

        def in_range(state: State) -> bool:
            return 0 <= state < n

        if n < 1:
            errors.append(f"number of states must be at least 1, got {n}")
        for symbol in sorted(self.alphabet):
            if len(symbol) != 1:
                errors.append(f"alphabet symbol must be one character: {symbol!r}")
            elif symbol == EPSILON:
                errors.append(f"'{EPSILON}' is reserved for epsilon")
        if self.start is None:
            errors.append("start state is not set")
        elif n >= 1 and not in_range(self.start):
            errors.append(f"start state out of range: {self.start}")
        for state in sorted(self.accepting):
            if n >= 1 and not in_range(state):
                errors.append(f"accepting state out of range: {state}")
        for source, symbol, target in self.transitions:
            edge = f"{source} -{symbol}-> {target}"
            if n >= 1 and not (in_range(source) and in_range(target)):
                errors.append(f"transition state out of range: {edge}")
            if symbol != EPSILON and symbol not in self.alphabet:
                errors.append(f"transition symbol not in alphabet: {edge}")
        return errors

    def build(self) -> Automaton:
        """Build the automaton.

        Raises:
            AutomatonValidationError: If the definition is invalid. No
                automaton is produced in that case.
        """
        errors = self.validate()
        if errors:
            raise AutomatonValidationError(errors)

        automaton = Automaton()
        automaton.set_num_states(self.num_states)
        automaton.set_start_state(self.start)
        for symbol in self.alphabet:
            automaton.add_symbol(symbol)
        for state in self.accepting:
            automaton.add_accepting_state(state)
        for source, symbol, target in self.transitions:
            automaton.add_transition(source, symbol, target)
        return automaton
