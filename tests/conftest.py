"""Shared automata used across the test suite."""

import pytest

from nfasim.automaton.automaton import EPSILON, Automaton


def make_automaton(alphabet, num_states, start, accepting, transitions):
    """Build an automaton through the incremental mutators, asserting each call."""
    fa = Automaton()
    for symbol in alphabet:
        assert fa.add_symbol(symbol)
    assert fa.set_num_states(num_states)
    assert fa.set_start_state(start)
    for state in accepting:
        assert fa.add_accepting_state(state)
    for source, symbol, target in transitions:
        assert fa.add_transition(source, symbol, target)
    return fa


@pytest.fixture
def binary_automaton():
    """Scenario A: strings over {0,1} ending in "10" with the final 1 guessed."""
    return make_automaton(
        "01", 3, 0, [2], [(0, "0", 0), (0, "1", 0), (0, "1", 1), (1, "0", 2)]
    )


@pytest.fixture
def epsilon_automaton():
    """Scenario B: one epsilon edge from the start state to an accepting state."""
    return make_automaton("", 2, 0, [1], [(0, EPSILON, 1)])


@pytest.fixture
def branching_automaton():
    """Scenario D: (0,'a') -> {1,2}, only 2 accepting, 1 is a dead end."""
    return make_automaton(
        "ab", 4, 0, [2], [(0, "a", 1), (0, "a", 2), (2, "b", 2), (1, "b", 3)]
    )


@pytest.fixture
def epsilon_chain_automaton():
    """Epsilon chain 0 -> 1 -> 2 with a cycle back to 0, plus 'a' edges."""
    return make_automaton(
        "ab",
        5,
        0,
        [4],
        [
            (0, EPSILON, 1),
            (1, EPSILON, 2),
            (2, EPSILON, 0),
            (2, "a", 3),
            (3, EPSILON, 4),
            (4, "b", 0),
        ],
    )
