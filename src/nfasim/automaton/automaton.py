"""Automaton data model: alphabet, states and a set-valued transition relation."""

from typing import Dict, FrozenSet, Iterator, Set, Tuple

# Reserved symbol for empty transitions; never part of the alphabet.
EPSILON = "&"

State = int
Symbol = str
StateSet = FrozenSet[State]
TransitionMap = Dict[Symbol, Set[State]]


class Automaton:
    """Non-deterministic finite automaton with epsilon transitions.

    States are plain integers in ``[0, num_states)``. The transition relation
    maps ``(state, symbol)`` to a set of destination states, where the symbol
    may be :data:`EPSILON`.

    The automaton starts empty and is filled through the mutators. Every
    mutator validates its arguments and returns ``False`` without touching
    the automaton when they are invalid; nothing here raises for bad input.

    Range checks against ``num_states`` only apply once the state count has
    been fixed. Before that, any non-negative state is accepted
    provisionally, so callers should fix the state count first.

    Example:
        >>> fa = Automaton()
        >>> fa.add_symbol("a")
        True
        >>> fa.set_num_states(2)
        True
        >>> fa.add_transition(0, "a", 1)
        True
        >>> fa.add_transition(0, "a", 2)
        False
    """

    def __init__(self) -> None:
        self._alphabet: Set[Symbol] = set()
        self._num_states = 0
        self._start_state: State = 0
        self._accepting: Set[State] = set()
        self._transitions: Dict[State, TransitionMap] = {}

    def reset(self) -> None:
        """Return to the empty automaton."""
        self._alphabet.clear()
        self._num_states = 0
        self._start_state = 0
        self._accepting.clear()
        self._transitions.clear()

    def add_symbol(self, symbol: Symbol) -> bool:
        """Add a symbol to the alphabet. The epsilon marker is refused."""
        if symbol == EPSILON:
            return False
        self._alphabet.add(symbol)
        return True

    def set_num_states(self, num_states: int) -> bool:
        """Fix the number of states.

        A start state that falls outside the new range is reset to 0.
        """
        if num_states < 1:
            return False
        self._num_states = num_states
        if not 0 <= self._start_state < num_states:
            self._start_state = 0
        return True

    def set_start_state(self, state: State) -> bool:
        """Set the start state, replacing any previous one."""
        if not self._in_range(state):
            return False
        self._start_state = state
        return True

    def add_accepting_state(self, state: State) -> bool:
        """Mark a state as accepting."""
        if not self._in_range(state):
            return False
        self._accepting.add(state)
        return True

    def add_transition(self, source: State, symbol: Symbol, target: State) -> bool:
        """Add the edge ``source --symbol--> target``.

        The symbol is not checked against the alphabet; that is the loader's
        job. Adding an existing edge is a no-op that still succeeds.
        """
        if not (self._in_range(source) and self._in_range(target)):
            return False
        self._transitions.setdefault(source, {}).setdefault(symbol, set()).add(target)
        return True

    def _in_range(self, state: State) -> bool:
        if state < 0:
            return False
        return self._num_states == 0 or state < self._num_states

    @property
    def num_states(self) -> int:
        return self._num_states

    @property
    def start_state(self) -> State:
        return self._start_state

    @property
    def accepting_states(self) -> StateSet:
        return frozenset(self._accepting)

    @property
    def alphabet(self) -> FrozenSet[Symbol]:
        return frozenset(self._alphabet)

    def has_state(self, state: State) -> bool:
        """Check if ``state`` exists. Always false until the state count is set."""
        if self._num_states == 0:
            return False
        return 0 <= state < self._num_states

    def is_known_symbol(self, symbol: Symbol) -> bool:
        """Check alphabet membership. Epsilon is always considered known."""
        return symbol == EPSILON or symbol in self._alphabet

    def transitions_for(self, state: State) -> TransitionMap:
        """Get the outgoing transitions of a state as ``symbol -> targets``.

        A state without outgoing transitions yields a new empty dict. The
        returned mapping is shared with the automaton and must not be mutated.
        """
        return self._transitions.get(state, {})

    def iter_transitions(self) -> Iterator[Tuple[State, Symbol, State]]:
        """Yield every edge as ``(source, symbol, target)`` in sorted order."""
        for source in sorted(self._transitions):
            by_symbol = self._transitions[source]
            for symbol in sorted(by_symbol):
                for target in sorted(by_symbol[symbol]):
                    yield source, symbol, target

    def transition_count(self) -> int:
        """Return total number of edges."""
        return sum(
            len(targets)
            for by_symbol in self._transitions.values()
            for targets in by_symbol.values()
        )

    def __repr__(self) -> str:
        return (
            f"Automaton(states={self._num_states}, start={self._start_state}, "
            f"accepting={sorted(self._accepting)}, "
            f"alphabet={sorted(self._alphabet)}, "
            f"transitions={self.transition_count()})"
        )
