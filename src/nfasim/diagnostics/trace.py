"""Step-by-step records of a simulation run."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from nfasim.automaton.automaton import EPSILON, State, StateSet, Symbol


def format_states(states: Iterable[State]) -> str:
    """Format a state set as ``{0,1,2}`` with sorted members."""
    return "{" + ",".join(str(s) for s in sorted(states)) + "}"


@dataclass(frozen=True)
class Rule:
    """A lookup of ``(state, symbol)`` in the transition relation.

    Attributes:
        state: Source state.
        symbol: Symbol looked up (may be epsilon).
        targets: Destinations found; empty when no rule exists.
    """

    state: State
    symbol: Symbol
    targets: StateSet

    def __str__(self) -> str:
        return f"({self.state},{self.symbol}) -> {format_states(self.targets)}"


@dataclass
class TraceStep:
    """One consumed input symbol.

    Attributes:
        symbol: The symbol consumed.
        active: Active states before consuming it.
        rules: The rule applied for each active state, in state order.
        epsilon_rules: Epsilon rules leaving the active states, for the
            states that have one.
        destinations: Union of direct destinations, before epsilon-closure.
        closure_rules: Epsilon rules leaving each direct destination.
        result: Active states after epsilon-closure.
    """

    symbol: Symbol
    active: StateSet
    rules: List[Rule] = field(default_factory=list)
    epsilon_rules: List[Rule] = field(default_factory=list)
    destinations: StateSet = frozenset()
    closure_rules: List[Rule] = field(default_factory=list)
    result: StateSet = frozenset()


@dataclass
class SimulationTrace:
    """Full record of one simulation.

    Attributes:
        text: The input string.
        initial: Epsilon-closure of the start state.
        steps: One entry per consumed symbol; stops early on an empty set.
        invalid_symbol: First input symbol outside the alphabet, if any.
        accepting_state: Lowest accepting state in the final set, if any.
    """

    text: str
    initial: StateSet
    steps: List[TraceStep] = field(default_factory=list)
    invalid_symbol: Optional[Symbol] = None
    accepting_state: Optional[State] = None

    @property
    def accepted(self) -> bool:
        return self.accepting_state is not None

    @property
    def final(self) -> StateSet:
        """Active states after the last step."""
        if self.steps:
            return self.steps[-1].result
        return self.initial

    def render(self) -> str:
        """Render the trace as human-readable text."""
        lines = [f"Initial states: {format_states(self.initial)}"]
        if self.invalid_symbol is not None:
            lines.append(f"Invalid symbol in input: '{self.invalid_symbol}' -> Rejected")
            return "\n".join(lines)

        for step in self.steps:
            lines.append("-" * 50)
            lines.append(f"Symbol: '{step.symbol}'")
            lines.append(f"Active states: {format_states(step.active)}")
            lines.append(f"Rules on '{step.symbol}':")
            lines.extend(f"  {rule}" for rule in step.rules)
            lines.extend(
                f"  {rule}  [epsilon from active state]" for rule in step.epsilon_rules
            )
            lines.append(f"Direct destinations: {format_states(step.destinations)}")
            lines.append(f"Rules on '{EPSILON}' from destinations:")
            lines.extend(f"  {rule}" for rule in step.closure_rules)
            lines.append(f"After epsilon-closure: {format_states(step.result)}")
            if not step.result:
                lines.append("Empty state set -> Rejected")

        if self.accepting_state is not None:
            lines.append(f"Accepting state {self.accepting_state} reached -> Accepted")
        elif not self.steps or self.steps[-1].result:
            lines.append("No accepting state in final set -> Rejected")
        return "\n".join(lines)
