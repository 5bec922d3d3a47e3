"""NFA simulation over sets of active states."""

import logging
from collections import deque
from typing import Iterable, Set

from nfasim.automaton.automaton import EPSILON, Automaton, State, StateSet, Symbol
from nfasim.diagnostics.trace import Rule, SimulationTrace, TraceStep, format_states

logger = logging.getLogger(__name__)


class Simulator:
    """Decides acceptance of strings against an automaton.

    The simulator keeps a reference to the automaton and never modifies it.
    The automaton must not be mutated while a simulation is running.

    Example:
        >>> sim = Simulator(automaton)
        >>> sim.simulate("10")
        True
    """

    def __init__(self, automaton: Automaton):
        self.automaton = automaton

    def epsilon_closure(self, states: Iterable[State]) -> StateSet:
        """Compute every state reachable from ``states`` through epsilon moves.

        Breadth-first expansion; each state is enqueued at most once. The
        input is not modified and is always a subset of the result.
        """
        closure: Set[State] = set(states)
        queue = deque(closure)

        while queue:
            current = queue.popleft()
            for target in self.automaton.transitions_for(current).get(EPSILON, ()):
                if target not in closure:
                    closure.add(target)
                    queue.append(target)

        return frozenset(closure)

    def step(self, active: Iterable[State], symbol: Symbol) -> StateSet:
        """Get the direct destinations of ``active`` on ``symbol``, before closure."""
        destinations: Set[State] = set()
        for state in active:
            destinations.update(self.automaton.transitions_for(state).get(symbol, ()))
        return frozenset(destinations)

    def simulate(self, text: str) -> bool:
        """Check if the automaton accepts ``text``.

        The empty string is written as ``""``, never as the epsilon marker.
        Symbols outside the alphabet cause a rejection, not an error.
        """
        active = self.epsilon_closure({self.automaton.start_state})

        if not all(self.automaton.is_known_symbol(c) for c in text):
            return False

        for symbol in text:
            active = self.epsilon_closure(self.step(active, symbol))
            if not active:
                break

        return not active.isdisjoint(self.automaton.accepting_states)

    def trace(self, text: str) -> SimulationTrace:
        """Simulate ``text`` and record every step.

        ``trace(text).accepted`` always equals ``simulate(text)``. Steps are
        also logged at DEBUG level.
        """
        transitions_for = self.automaton.transitions_for
        active = self.epsilon_closure({self.automaton.start_state})
        trace = SimulationTrace(text=text, initial=active)
        logger.debug("Initial states for %r: %s", text, format_states(active))

        for symbol in text:
            if not self.automaton.is_known_symbol(symbol):
                trace.invalid_symbol = symbol
                logger.debug("Symbol %r is not in the alphabet", symbol)
                return trace

        for symbol in text:
            record = TraceStep(symbol=symbol, active=active)
            for state in sorted(active):
                by_symbol = transitions_for(state)
                targets = frozenset(by_symbol.get(symbol, ()))
                record.rules.append(Rule(state, symbol, targets))
                if EPSILON in by_symbol:
                    epsilon_targets = frozenset(by_symbol[EPSILON])
                    record.epsilon_rules.append(Rule(state, EPSILON, epsilon_targets))
            record.destinations = self.step(active, symbol)
            for state in sorted(record.destinations):
                targets = frozenset(transitions_for(state).get(EPSILON, ()))
                record.closure_rules.append(Rule(state, EPSILON, targets))

            active = self.epsilon_closure(record.destinations)
            record.result = active
            trace.steps.append(record)
            logger.debug(
                "Step %r: %s -> %s -> %s",
                symbol,
                format_states(record.active),
                format_states(record.destinations),
                format_states(active),
            )
            if not active:
                break

        reached = active & self.automaton.accepting_states
        if reached:
            trace.accepting_state = min(reached)
        return trace


def accepts(automaton: Automaton, text: str) -> bool:
    """Convenience function to simulate a single string.

    Args:
        automaton: A fully loaded automaton.
        text: Input string; ``""`` is the empty string.

    Returns:
        True if the string is accepted.
    """
    return Simulator(automaton).simulate(text)
